# api/services/catalog_service.py

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from extensions import db
from models import (
    Assignment,
    MarkEntry,
    Material,
    Permission,
    Room,
    Student,
    Subject,
    Teacher,
    TeacherSubject,
    User,
)
from api.utils.request_helper import is_blank, optional_str, parse_optional_id

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Altas masivas (vienen de CSV ya parseado en el frontend) y bajas con
    limpieza de las referencias que apuntan a la entidad borrada.
    """

    # ------------------------------------------------------------------
    # Altas masivas: se descartan filas vacías / incompletas
    # ------------------------------------------------------------------
    @staticmethod
    def bulk_create_rooms(rows: Sequence) -> list[Room]:
        valid = [
            row for row in _objects(rows)
            if not is_blank(row.get("roomName"))
        ]
        if not valid:
            raise ValueError("No valid rooms found in the CSV.")

        rooms = [Room(room_name=row["roomName"].strip()) for row in valid]
        db.session.add_all(rooms)
        db.session.commit()
        return rooms

    @staticmethod
    def bulk_create_teachers(rows: Sequence) -> list[Teacher]:
        valid = [
            row for row in _objects(rows)
            if not is_blank(row.get("facultyName")) and not is_blank(row.get("facultyAbbreviation"))
        ]
        if not valid:
            raise ValueError("No valid teachers found in the CSV.")

        teachers = [
            Teacher(
                faculty_name=row["facultyName"].strip(),
                faculty_abbreviation=row["facultyAbbreviation"].strip(),
                username=optional_str(row.get("username")),
            )
            for row in valid
        ]
        db.session.add_all(teachers)
        db.session.commit()
        return teachers

    @staticmethod
    def bulk_create_subjects(rows: Sequence) -> list[Subject]:
        valid = [
            row for row in _objects(rows)
            if not is_blank(row.get("subjectCode"))
            and not is_blank(row.get("subjectName"))
            and not is_blank(row.get("subjectAbbreviation"))
        ]
        if not valid:
            raise ValueError("No valid subjects found in the CSV.")

        subjects = [
            Subject(
                subject_code=row["subjectCode"].strip(),
                subject_name=row["subjectName"].strip(),
                subject_abbreviation=row["subjectAbbreviation"].strip(),
            )
            for row in valid
        ]
        db.session.add_all(subjects)
        db.session.commit()
        return subjects

    @staticmethod
    def bulk_create_students(rows: Sequence) -> list[Student]:
        valid = [
            row for row in _objects(rows)
            if row.get("enrollmentNumber") not in (None, "")
        ]
        if not valid:
            raise ValueError("No valid students to insert")

        students = [CatalogService.build_student(row) for row in valid]
        db.session.add_all(students)
        db.session.commit()
        return students

    @staticmethod
    def build_student(row: Mapping) -> Student:
        enrollment = row.get("enrollmentNumber")
        if enrollment in (None, "") or not isinstance(enrollment, (str, int)):
            raise ValueError("enrollmentNumber is required.")
        age = row.get("age")
        return Student(
            enrollment_number=str(enrollment).strip(),
            name=optional_str(row.get("name")),
            age=str(age) if age is not None else None,
            class_id=parse_optional_id(row.get("classId"), "classId"),
        )

    # ------------------------------------------------------------------
    # Bajas
    # ------------------------------------------------------------------
    @staticmethod
    def delete_teacher(teacher_id: int) -> bool:
        """
        Borra la ficha del profesor y la cuenta cuyo username coincide.
        Devuelve True si además se borró una cuenta.
        """
        teacher = db.session.get(Teacher, teacher_id)
        if not teacher:
            raise LookupError("Teacher not found")

        account_deleted = False
        if teacher.username:
            user = User.query.filter_by(username=teacher.username).first()
            if user:
                db.session.delete(user)
                account_deleted = True

        Permission.query.filter_by(teacher_id=teacher.id).delete(synchronize_session=False)
        for model in (Material, Assignment):
            model.query.filter_by(teacher_id=teacher.id).update(
                {"teacher_id": None}, synchronize_session=False
            )
        # Las filas de class_teacher se borran junto con el profesor
        db.session.delete(teacher)
        db.session.commit()
        logger.info("Profesor %s borrado (cuenta asociada: %s)", teacher_id, account_deleted)
        return account_deleted

    @staticmethod
    def delete_subject(subject_id: int) -> None:
        subject = db.session.get(Subject, subject_id)
        if not subject:
            raise LookupError("Subject not found")

        TeacherSubject.query.filter_by(subject_id=subject.id).delete(synchronize_session=False)
        Permission.query.filter_by(subject_id=subject.id).delete(synchronize_session=False)
        MarkEntry.query.filter_by(subject_id=subject.id).delete(synchronize_session=False)
        for model in (Material, Assignment):
            model.query.filter_by(subject_id=subject.id).update(
                {"subject_id": None}, synchronize_session=False
            )

        db.session.delete(subject)
        db.session.commit()


def _objects(rows: Sequence) -> list[Mapping]:
    if not isinstance(rows, list):
        raise ValueError("Expected an array of rows.")
    return [row for row in rows if isinstance(row, Mapping)]
