# api/teachers.py

from flask import request, jsonify

from extensions import db
from models import Teacher
from api.services.catalog_service import CatalogService
from api.utils.catalog_helper import serialize_teacher
from api.utils.request_helper import error_response, json_object_body, is_blank, optional_str
from . import api_bp


@api_bp.get("/teachers")
def list_teachers():
    teachers = Teacher.query.order_by(Teacher.id.asc()).all()
    return jsonify([serialize_teacher(t) for t in teachers])


@api_bp.post("/teachers")
def create_teacher():
    try:
        data = json_object_body()
    except ValueError as exc:
        return error_response(exc)

    if is_blank(data.get("facultyName")):
        return jsonify({"error": "facultyName is required"}), 400

    teacher = Teacher(
        faculty_name=data["facultyName"].strip(),
        faculty_abbreviation=optional_str(data.get("facultyAbbreviation")),
        username=optional_str(data.get("username")),
    )
    db.session.add(teacher)
    db.session.commit()

    return jsonify({"status": "created", "teacher": serialize_teacher(teacher)}), 201


@api_bp.post("/teachers/bulk")
def bulk_create_teachers():
    """
    Alta masiva. Cada fila necesita facultyName y facultyAbbreviation;
    username es opcional (vincula la ficha con su cuenta).
    """
    try:
        teachers = CatalogService.bulk_create_teachers(request.get_json(silent=True))
    except ValueError as exc:
        return error_response(exc)

    return jsonify({"status": "created", "count": len(teachers)}), 201


@api_bp.delete("/teachers/<int:teacher_id>")
def delete_teacher(teacher_id):
    """
    Borra la ficha y, si existe, la cuenta con el mismo username.
    """
    try:
        account_deleted = CatalogService.delete_teacher(teacher_id)
    except LookupError as exc:
        return error_response(exc)

    return jsonify({"status": "deleted", "id": teacher_id, "accountDeleted": account_deleted})
