# api/subjects.py

from flask import request, jsonify

from extensions import db
from models import Subject
from api.services.catalog_service import CatalogService
from api.utils.catalog_helper import serialize_subject
from api.utils.request_helper import error_response, json_object_body, is_blank, optional_str
from . import api_bp


@api_bp.get("/subjects")
def list_subjects():
    subjects = Subject.query.order_by(Subject.id.asc()).all()
    return jsonify([serialize_subject(s) for s in subjects])


@api_bp.post("/subjects")
def create_subject():
    try:
        data = json_object_body()
    except ValueError as exc:
        return error_response(exc)

    if is_blank(data.get("subjectName")):
        return jsonify({"error": "subjectName is required"}), 400

    subject = Subject(
        subject_code=optional_str(data.get("subjectCode")),
        subject_name=data["subjectName"].strip(),
        subject_abbreviation=optional_str(data.get("subjectAbbreviation")),
    )
    db.session.add(subject)
    db.session.commit()

    return jsonify({"status": "created", "subject": serialize_subject(subject)}), 201


@api_bp.post("/subjects/bulk")
def bulk_create_subjects():
    """
    Alta masiva. Cada fila necesita subjectCode, subjectName y subjectAbbreviation.
    """
    try:
        subjects = CatalogService.bulk_create_subjects(request.get_json(silent=True))
    except ValueError as exc:
        return error_response(exc)

    return jsonify({"status": "created", "count": len(subjects)}), 201


@api_bp.delete("/subjects/<int:subject_id>")
def delete_subject(subject_id):
    try:
        CatalogService.delete_subject(subject_id)
    except LookupError as exc:
        return error_response(exc)

    return jsonify({"status": "deleted", "id": subject_id})
