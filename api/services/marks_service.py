# api/services/marks_service.py

from __future__ import annotations

import logging
import math
from typing import Mapping, Sequence

from extensions import db
from models import ExamEnum, MarkEntry, Marks, SchoolClass, Student, Subject
from api.utils.request_helper import parse_id

logger = logging.getLogger(__name__)


class MarksService:
    """
    Carga de notas por alumno / examen / materia.

    Se hace en dos fases dentro de una misma transacción:
      1. actualizar en el lugar la nota existente de (examen, materia);
      2. para lo que no coincidió, agregar la nota nueva creando la
         libreta del alumno si todavía no existe.
    """

    @staticmethod
    def upload_marks(payloads: Sequence) -> dict:
        entries = MarksService._normalize_entries(payloads)

        # La última aparición de (alumno, examen, materia) en el lote gana
        latest: dict[tuple[int, str, int], dict] = {}
        for entry in entries:
            latest[(entry["student_id"], entry["exam"], entry["subject_id"])] = entry

        # Fase 1: update en el lugar
        pending: list[dict] = []
        updated = 0
        for (student_id, exam, subject_id), entry in latest.items():
            existing = (
                MarkEntry.query.join(Marks)
                .filter(
                    Marks.student_id == student_id,
                    MarkEntry.exam == exam,
                    MarkEntry.subject_id == subject_id,
                )
                .first()
            )
            if existing:
                existing.marks_obtained = entry["marks"]
                existing.max_marks = entry["max_marks"]
                updated += 1
            else:
                pending.append(entry)

        # Fase 2: push (upsert de la libreta si hace falta)
        created_sheets = 0
        for entry in pending:
            sheet = Marks.query.filter_by(student_id=entry["student_id"]).first()
            if not sheet:
                sheet = Marks(student_id=entry["student_id"], class_id=entry["class_id"])
                db.session.add(sheet)
                created_sheets += 1
            sheet.entries.append(
                MarkEntry(
                    exam=entry["exam"],
                    subject_id=entry["subject_id"],
                    marks_obtained=entry["marks"],
                    max_marks=entry["max_marks"],
                )
            )
            db.session.flush()

        db.session.commit()
        logger.info(
            "Notas cargadas: %s actualizadas, %s nuevas, %s libretas creadas",
            updated,
            len(pending),
            created_sheets,
        )
        return {"updated": updated, "inserted": len(pending), "createdSheets": created_sheets}

    @staticmethod
    def get_marks(student_id: int) -> Marks:
        marks = Marks.query.filter_by(student_id=student_id).first()
        if not marks:
            raise LookupError("Marks not found")
        return marks

    @staticmethod
    def list_class_marks(class_id: int) -> list[Marks]:
        if not db.session.get(SchoolClass, class_id):
            raise LookupError("Class not found")
        return Marks.query.filter_by(class_id=class_id).order_by(Marks.id.asc()).all()

    @staticmethod
    def _normalize_entries(payloads: Sequence) -> list[dict]:
        if not isinstance(payloads, list) or not payloads:
            raise ValueError("Marks should be a non-empty array.")

        cleaned: list[dict] = []
        # Una libreta por alumno: todas sus notas van a la clase de esa libreta
        class_of_student: dict[int, int] = {}
        for index, payload in enumerate(payloads):
            if not isinstance(payload, Mapping):
                raise ValueError(f"Entry {index} must be an object.")

            exam_raw = payload.get("exam")
            try:
                exam = ExamEnum(exam_raw).value
            except ValueError:
                raise ValueError(f"Entry {index}: exam must be one of MST_I, MST_II, FINAL.")

            marks = _parse_number(payload.get("marks"), f"Entry {index}: marks")
            max_marks = _parse_number(payload.get("maxMarks"), f"Entry {index}: maxMarks")
            if max_marks <= 0:
                raise ValueError(f"Entry {index}: maxMarks must be > 0.")
            if marks < 0 or marks > max_marks:
                raise ValueError(f"Entry {index}: marks must be between 0 and maxMarks.")

            entry = {
                "student_id": parse_id(payload.get("studentId"), f"Entry {index}: studentId"),
                "class_id": parse_id(payload.get("classId"), f"Entry {index}: classId"),
                "subject_id": parse_id(payload.get("subjectId"), f"Entry {index}: subjectId"),
                "exam": exam,
                "marks": marks,
                "max_marks": max_marks,
            }
            if not db.session.get(Student, entry["student_id"]):
                raise LookupError(f"Student with id {entry['student_id']} not found")
            if not db.session.get(SchoolClass, entry["class_id"]):
                raise LookupError(f"Class with id {entry['class_id']} not found")
            if not db.session.get(Subject, entry["subject_id"]):
                raise LookupError(f"Subject with id {entry['subject_id']} not found")

            student_id = entry["student_id"]
            if student_id not in class_of_student:
                sheet = Marks.query.filter_by(student_id=student_id).first()
                class_of_student[student_id] = sheet.class_id if sheet else entry["class_id"]
            if class_of_student[student_id] != entry["class_id"]:
                raise ValueError(
                    f"Entry {index}: student {student_id} has marks for class "
                    f"{class_of_student[student_id]}, not {entry['class_id']}."
                )
            cleaned.append(entry)

        return cleaned


def _parse_number(raw, label: str) -> float:
    if isinstance(raw, bool):
        raise ValueError(f"{label} must be numeric.")
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ValueError(f"{label} must be numeric.")
    if not math.isfinite(value):
        raise ValueError(f"{label} must be a finite number.")
    return value
