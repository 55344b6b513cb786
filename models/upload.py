from datetime import datetime

from sqlalchemy.orm import declared_attr

from extensions import db


class UploadedFileMixin:
    """
    Columnas comunes de un archivo subido por un profesor para una materia
    de una clase. El archivo vive en disco (UPLOAD_FOLDER); acá solo
    guardamos la referencia.
    """

    id = db.Column(db.Integer, primary_key=True)

    @declared_attr
    def class_id(cls):
        return db.Column(db.Integer, db.ForeignKey("school_class.id"), nullable=False)

    @declared_attr
    def teacher_id(cls):
        return db.Column(db.Integer, db.ForeignKey("teacher.id"), nullable=True)

    @declared_attr
    def subject_id(cls):
        return db.Column(db.Integer, db.ForeignKey("subject.id"), nullable=True)

    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)

    file_name = db.Column(db.String(255), nullable=False)
    file_path = db.Column(db.String(512), nullable=False)
    mime_type = db.Column(db.String(100), nullable=True)
    file_size = db.Column(db.Integer, nullable=True)

    uploaded_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class Material(UploadedFileMixin, db.Model):
    __tablename__ = "material"

    kind = "materials"


class Assignment(UploadedFileMixin, db.Model):
    __tablename__ = "assignment"

    kind = "assignments"

    due_date = db.Column(db.DateTime, nullable=True)
