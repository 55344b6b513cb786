from extensions import db


class_subject = db.Table(
    "class_subject",
    db.Column("class_id", db.Integer, db.ForeignKey("school_class.id"), primary_key=True),
    db.Column("subject_id", db.Integer, db.ForeignKey("subject.id"), primary_key=True),
)

class_teacher = db.Table(
    "class_teacher",
    db.Column("class_id", db.Integer, db.ForeignKey("school_class.id"), primary_key=True),
    db.Column("teacher_id", db.Integer, db.ForeignKey("teacher.id"), primary_key=True),
)


class SchoolClass(db.Model):
    __tablename__ = "school_class"

    id = db.Column(db.Integer, primary_key=True)
    class_name = db.Column(db.String(120), nullable=False)
    section = db.Column(db.String(50), nullable=True)

    # Estructura opaca que arma el frontend; se reemplaza completa en cada update
    schedule = db.Column(db.JSON, nullable=False, default=dict)

    subjects = db.relationship(
        "Subject",
        secondary=class_subject,
        order_by="Subject.id",
        backref=db.backref("classes", lazy="dynamic"),
    )
    teachers = db.relationship(
        "Teacher",
        secondary=class_teacher,
        order_by="Teacher.id",
        backref=db.backref("classes", lazy="dynamic"),
    )
    permissions = db.relationship(
        "Permission",
        back_populates="school_class",
        cascade="all, delete-orphan",
    )
    marks = db.relationship(
        "Marks",
        back_populates="school_class",
        cascade="all, delete-orphan",
    )
