# api/utils/uploads_helper.py


def serialize_upload(record) -> dict:
    """Material o Assignment: comparten columnas salvo due_date."""
    data = {
        "id": record.id,
        "classId": record.class_id,
        "teacherId": record.teacher_id,
        "subjectId": record.subject_id,
        "title": record.title,
        "description": record.description,
        "fileName": record.file_name,
        "filePath": record.file_path,
        "mimeType": record.mime_type,
        "fileSize": record.file_size,
        "uploadedAt": record.uploaded_at.isoformat() if record.uploaded_at else None,
        "updatedAt": record.updated_at.isoformat() if record.updated_at else None,
    }
    if hasattr(record, "due_date"):
        data["dueDate"] = record.due_date.isoformat() if record.due_date else None
    return data
