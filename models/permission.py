from datetime import datetime

from extensions import db


class Permission(db.Model):
    """
    Permiso de carga (notas / materiales) de un profesor para una materia
    dentro de una clase. No hay restricción de unicidad sobre
    (teacher, class, subject): se guardan tal cual llegan.
    """

    __tablename__ = "permission"

    id = db.Column(db.Integer, primary_key=True)
    teacher_id = db.Column(db.Integer, db.ForeignKey("teacher.id"), nullable=False)
    class_id = db.Column(db.Integer, db.ForeignKey("school_class.id"), nullable=False)
    subject_id = db.Column(db.Integer, db.ForeignKey("subject.id"), nullable=False)
    have_permission = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    teacher = db.relationship("Teacher")
    school_class = db.relationship("SchoolClass", back_populates="permissions")
    subject = db.relationship("Subject")

    __table_args__ = (
        db.Index("ix_permission_class_teacher", "class_id", "teacher_id"),
    )
