from extensions import db


class Student(db.Model):
    __tablename__ = "student"

    id = db.Column(db.Integer, primary_key=True)
    enrollment_number = db.Column(db.String(50), nullable=False, index=True)
    name = db.Column(db.String(255), nullable=True)
    age = db.Column(db.String(20), nullable=True)
    class_id = db.Column(db.Integer, db.ForeignKey("school_class.id"), nullable=True)

    school_class = db.relationship("SchoolClass", backref="students")
