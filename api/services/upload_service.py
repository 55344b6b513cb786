# api/services/upload_service.py

from __future__ import annotations

import logging
from typing import Mapping

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from extensions import db
from models import Assignment, Material, SchoolClass, Subject, Teacher
from api.services.permission_service import PermissionService
from api.utils.request_helper import is_blank, parse_datetime, parse_id
from services.storage_service import allowed_extension, delete_upload, file_size, save_upload

logger = logging.getLogger(__name__)


class UploadService:
    """
    Materiales y tareas que sube un profesor (PDF / DOCX).

    Guardar el archivo y registrar la fila son dos efectos independientes:
    si el insert falla, el archivo se borra en lo posible; si al borrar un
    registro falla el borrado del archivo, se registra y se sigue.
    """

    MODELS = {
        "materials": Material,
        "assignments": Assignment,
    }

    @staticmethod
    def model_for(kind: str):
        try:
            return UploadService.MODELS[kind]
        except KeyError:
            raise LookupError(f"Unknown upload kind: {kind}")

    @staticmethod
    def create_upload(*, kind: str, file_storage, form: Mapping):
        model = UploadService.model_for(kind)

        if not file_storage or not file_storage.filename:
            raise ValueError("A file is required.")
        if not allowed_extension(file_storage.filename):
            raise ValueError("Only PDF and DOCX files are allowed.")
        max_bytes = current_app.config["UPLOAD_MAX_BYTES"]
        if file_size(file_storage) > max_bytes:
            raise ValueError(f"File too large. Maximum size is {max_bytes // (1024 * 1024)}MB.")

        title = form.get("title")
        if is_blank(title):
            raise ValueError("title is required.")

        class_id = parse_id(form.get("classId"), "classId")
        teacher_id = parse_id(form.get("teacherId"), "teacherId")
        subject_id = parse_id(form.get("subjectId"), "subjectId")
        if not db.session.get(SchoolClass, class_id):
            raise LookupError("Class not found")
        if not db.session.get(Teacher, teacher_id):
            raise LookupError("Teacher not found")
        if not db.session.get(Subject, subject_id):
            raise LookupError("Subject not found")

        if current_app.config.get("ENFORCE_UPLOAD_PERMISSIONS") and not PermissionService.can_upload(
            teacher_id, class_id, subject_id
        ):
            raise PermissionError("Teacher has no upload permission for this subject in this class.")

        extra = {}
        if model is Assignment and not is_blank(form.get("dueDate")):
            extra["due_date"] = parse_datetime(form.get("dueDate"), "dueDate")

        stored = save_upload(file_storage, kind)
        if not stored:
            raise ValueError("Invalid file name.")

        record = model(
            class_id=class_id,
            teacher_id=teacher_id,
            subject_id=subject_id,
            title=title.strip(),
            description=form.get("description"),
            **stored,
            **extra,
        )
        try:
            db.session.add(record)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            delete_upload(stored["file_path"])
            raise

        logger.info("%s subido: %s (%s bytes)", kind, stored["file_path"], stored["file_size"])
        return record

    @staticmethod
    def list_uploads(*, kind: str, class_id: int | None = None, subject_id: int | None = None) -> list:
        model = UploadService.model_for(kind)
        query = model.query
        if class_id is not None:
            query = query.filter_by(class_id=class_id)
        if subject_id is not None:
            query = query.filter_by(subject_id=subject_id)
        return query.order_by(model.uploaded_at.desc(), model.id.desc()).all()

    @staticmethod
    def remove_upload(*, kind: str, record_id: int) -> bool:
        """
        Borra la fila siempre. Devuelve False si el archivo no se pudo borrar.
        """
        model = UploadService.model_for(kind)
        record = db.session.get(model, record_id)
        if not record:
            raise LookupError("Material not found" if model is Material else "Assignment not found")

        file_deleted = delete_upload(record.file_path)
        db.session.delete(record)
        db.session.commit()
        return file_deleted
