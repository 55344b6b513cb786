# api/marks.py

from flask import request, jsonify

from api.services.marks_service import MarksService
from api.utils.marks_helper import serialize_marks
from api.utils.request_helper import error_response
from . import api_bp


@api_bp.post("/upload-marks")
def upload_marks():
    """
    Carga de notas de un profesor. Lista de entradas:
    [{
      "studentId": 1, "classId": 2, "subjectId": 3,
      "exam": "MST_I",            # MST_I | MST_II | FINAL
      "marks": 18, "maxMarks": 20
    }, ...]
    Si la materia ya tiene nota en ese examen se reemplaza; si no, se agrega.
    """
    try:
        summary = MarksService.upload_marks(request.get_json(silent=True))
    except (ValueError, LookupError) as exc:
        return error_response(exc)

    return jsonify({"status": "ok", **summary})


@api_bp.get("/marks/<int:student_id>")
def get_marks(student_id):
    try:
        marks = MarksService.get_marks(student_id)
    except LookupError as exc:
        return error_response(exc)

    return jsonify(serialize_marks(marks))


@api_bp.get("/marks/class/<int:class_id>")
def list_class_marks(class_id):
    try:
        sheets = MarksService.list_class_marks(class_id)
    except LookupError as exc:
        return error_response(exc)

    return jsonify([serialize_marks(m) for m in sheets])
