from extensions import db


class Teacher(db.Model):
    """
    Ficha del profesor (faculty). La cuenta de acceso se resuelve por username.
    """

    __tablename__ = "teacher"

    id = db.Column(db.Integer, primary_key=True)
    faculty_name = db.Column(db.String(255), nullable=True)
    faculty_abbreviation = db.Column(db.String(50), nullable=True)
    username = db.Column(db.String(80), nullable=True, index=True)

    subjects = db.relationship(
        "TeacherSubject",
        back_populates="teacher",
        cascade="all, delete-orphan",
        order_by="TeacherSubject.id",
    )

    def subject_ids(self) -> set[int]:
        return {entry.subject_id for entry in self.subjects}


class TeacherSubject(db.Model):
    """
    Materia asignada a un profesor, con el flag derivado de permiso de carga.
    Un profesor tiene a lo sumo una fila por materia.
    """

    __tablename__ = "teacher_subject"

    id = db.Column(db.Integer, primary_key=True)
    teacher_id = db.Column(db.Integer, db.ForeignKey("teacher.id"), nullable=False)
    subject_id = db.Column(db.Integer, db.ForeignKey("subject.id"), nullable=False)
    subject_name = db.Column(db.String(255), nullable=True)
    upload_permission = db.Column(db.Boolean, nullable=False, default=False)

    teacher = db.relationship("Teacher", back_populates="subjects")
    subject = db.relationship("Subject")

    __table_args__ = (
        db.UniqueConstraint("teacher_id", "subject_id", name="uq_teacher_subject"),
    )
