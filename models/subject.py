from extensions import db


class Subject(db.Model):
    __tablename__ = "subject"

    id = db.Column(db.Integer, primary_key=True)
    subject_code = db.Column(db.String(50), nullable=True)
    subject_name = db.Column(db.String(255), nullable=True)
    subject_abbreviation = db.Column(db.String(50), nullable=True)
