# api/services/class_service.py

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from extensions import db
from models import (
    Assignment,
    Material,
    SchoolClass,
    Subject,
    Teacher,
    TeacherSubject,
)
from api.utils.request_helper import optional_str
from api.services.permission_service import PermissionService
from services.storage_service import delete_upload

logger = logging.getLogger(__name__)


class ClassService:
    """
    Armado de clases: horario, materias y profesores asignados.
    Cada operación pública hace un único commit.
    """

    @staticmethod
    def list_classes() -> list[SchoolClass]:
        return SchoolClass.query.order_by(SchoolClass.id.asc()).all()

    @staticmethod
    def get_class(class_id: int) -> SchoolClass:
        school_class = db.session.get(SchoolClass, class_id)
        if not school_class:
            raise LookupError("Class not found")
        return school_class

    @staticmethod
    def create_class(payload: Mapping) -> SchoolClass:
        class_name = payload.get("className")
        class_name = class_name.strip() if isinstance(class_name, str) else ""
        if not class_name:
            raise ValueError("className is required.")

        schedule = payload.get("schedule")
        school_class = SchoolClass(
            class_name=class_name,
            section=optional_str(payload.get("section")),
            schedule=schedule if schedule is not None else {},
        )

        if "subjects" in payload:
            school_class.subjects = ClassService._resolve_subjects(payload.get("subjects"))

        db.session.add(school_class)
        db.session.commit()
        return school_class

    @staticmethod
    def delete_class(class_id: int) -> None:
        school_class = ClassService.get_class(class_id)

        # Materiales y tareas apuntan a la clase: se borran las filas y,
        # después del commit, en lo posible sus archivos.
        file_paths: list[str] = []
        for model in (Material, Assignment):
            for record in model.query.filter_by(class_id=school_class.id).all():
                file_paths.append(record.file_path)
                db.session.delete(record)

        db.session.delete(school_class)
        db.session.commit()

        for file_path in file_paths:
            delete_upload(file_path)

    # ------------------------------------------------------------------
    # Horario
    # ------------------------------------------------------------------
    @staticmethod
    def set_schedule(class_id: int, schedule) -> SchoolClass:
        school_class = ClassService.get_class(class_id)
        # Reemplazo completo, nunca merge
        school_class.schedule = schedule if schedule is not None else {}
        db.session.commit()
        return school_class

    @staticmethod
    def get_schedule(class_id: int):
        school_class = ClassService.get_class(class_id)
        schedule = school_class.schedule or {}
        if isinstance(schedule, dict):
            return schedule.get("processedSchedule")
        return None

    # ------------------------------------------------------------------
    # Materias / profesores
    # ------------------------------------------------------------------
    @staticmethod
    def assign_subjects(class_id: int, subject_ids) -> SchoolClass:
        if not isinstance(subject_ids, list):
            raise ValueError("Invalid input. Subjects should be an array of IDs.")

        school_class = ClassService.get_class(class_id)
        school_class.subjects = ClassService._resolve_subjects(subject_ids)
        db.session.commit()
        return school_class

    @staticmethod
    def assign_teachers(class_id: int, teacher_ids) -> SchoolClass:
        """
        Copia las materias de la clase a cada profesor (uploadPermission=False),
        sin repetir materias que el profesor ya tenga.

        Todos los ids se resuelven antes de escribir: si alguno no existe
        no se aplica ningún cambio.
        """
        if not isinstance(teacher_ids, list):
            raise ValueError("Invalid input. Teachers should be an array of IDs.")

        school_class = ClassService.get_class(class_id)

        teachers: list[Teacher] = []
        for raw_id in teacher_ids:
            teacher_id = _as_int(raw_id)
            teacher = db.session.get(Teacher, teacher_id) if teacher_id is not None else None
            if not teacher:
                raise LookupError(f"Teacher with id {raw_id} not found")
            if teacher not in teachers:
                teachers.append(teacher)

        subjects = list(school_class.subjects)

        added: list[tuple[int, int]] = []
        for teacher in teachers:
            known = teacher.subject_ids()
            for subject in subjects:
                if subject.id in known:
                    continue
                teacher.subjects.append(
                    TeacherSubject(
                        subject_id=subject.id,
                        subject_name=subject.subject_name,
                        upload_permission=False,
                    )
                )
                known.add(subject.id)
                added.append((teacher.id, subject.id))

            if teacher not in school_class.teachers:
                school_class.teachers.append(teacher)

        # Si ya había permisos concedidos para esas materias, el flag los refleja
        db.session.flush()
        PermissionService.sync_upload_flags(added)
        db.session.commit()
        logger.info(
            "Asignados %s profesores a la clase %s (%s materias)",
            len(teachers),
            school_class.id,
            len(subjects),
        )
        return school_class

    @staticmethod
    def get_class_subjects(class_id: int) -> list[int]:
        return [s.id for s in ClassService.get_class(class_id).subjects]

    @staticmethod
    def get_class_teachers(class_id: int) -> list[int]:
        return [t.id for t in ClassService.get_class(class_id).teachers]

    @staticmethod
    def _resolve_subjects(subject_ids: Sequence) -> list[Subject]:
        if not isinstance(subject_ids, list):
            raise ValueError("Invalid input. Subjects should be an array of IDs.")

        subjects: list[Subject] = []
        for raw_id in subject_ids:
            subject_id = _as_int(raw_id)
            subject = db.session.get(Subject, subject_id) if subject_id is not None else None
            if not subject:
                raise LookupError(f"Subject with id {raw_id} not found")
            if subject not in subjects:
                subjects.append(subject)
        return subjects


def _as_int(raw) -> int | None:
    if isinstance(raw, bool):
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None

