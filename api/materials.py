# api/materials.py

from flask import current_app, request, jsonify

from api.services.upload_service import UploadService
from api.utils.request_helper import error_response, parse_optional_id
from api.utils.uploads_helper import serialize_upload
from . import api_bp

UPLOAD_KINDS = "<any(materials, assignments):kind>"


@api_bp.post(f"/{UPLOAD_KINDS}/upload")
def upload_file(kind):
    """
    multipart/form-data:
      - file        (PDF o DOCX, máx. 5 MB)
      - classId, teacherId, subjectId
      - title, description
      - dueDate     (solo tareas, ISO-8601)
    """
    try:
        record = UploadService.create_upload(
            kind=kind,
            file_storage=request.files.get("file"),
            form=request.form,
        )
    except (ValueError, LookupError, PermissionError) as exc:
        return error_response(exc)

    return jsonify({"status": "created", "upload": serialize_upload(record)}), 201


@api_bp.get(f"/{UPLOAD_KINDS}")
def list_uploads(kind):
    try:
        class_id = parse_optional_id(request.args.get("classId"), "classId")
        subject_id = parse_optional_id(request.args.get("subjectId"), "subjectId")
    except ValueError as exc:
        return error_response(exc)

    records = UploadService.list_uploads(kind=kind, class_id=class_id, subject_id=subject_id)
    return jsonify([serialize_upload(r) for r in records])


@api_bp.delete(f"/{UPLOAD_KINDS}/<int:record_id>")
def delete_uploaded_file(kind, record_id):
    try:
        file_deleted = UploadService.remove_upload(kind=kind, record_id=record_id)
    except LookupError as exc:
        return error_response(exc)

    if not file_deleted:
        current_app.logger.warning("Registro %s/%s borrado, el archivo quedó huérfano", kind, record_id)

    return jsonify({"status": "deleted", "id": record_id, "fileDeleted": file_deleted})
