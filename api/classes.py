# api/classes.py

from flask import request, jsonify

from api.services.class_service import ClassService
from api.utils.catalog_helper import serialize_class
from api.utils.request_helper import error_response, json_object_body
from . import api_bp


@api_bp.get("/classes")
def list_classes():
    return jsonify([serialize_class(c) for c in ClassService.list_classes()])


@api_bp.post("/classes")
def create_class():
    """
    JSON esperado:
    {
      "className": "CSE 3rd year",   # obligatorio
      "section": "A",
      "subjects": [1, 2],             # opcional
      "schedule": {...}               # opcional, estructura libre
    }
    """
    try:
        school_class = ClassService.create_class(json_object_body())
    except (ValueError, LookupError) as exc:
        return error_response(exc)

    return jsonify({"status": "created", "class": serialize_class(school_class)}), 201


@api_bp.get("/classes/<int:class_id>")
def get_class(class_id):
    try:
        school_class = ClassService.get_class(class_id)
    except LookupError as exc:
        return error_response(exc)

    return jsonify(serialize_class(school_class))


@api_bp.delete("/classes/<int:class_id>")
def delete_class(class_id):
    try:
        ClassService.delete_class(class_id)
    except LookupError as exc:
        return error_response(exc)

    return jsonify({"status": "deleted", "id": class_id})


# ----------------------------------------------
# HORARIO
# ----------------------------------------------
@api_bp.post("/class/<int:class_id>/schedule")
def set_class_schedule(class_id):
    """
    El body completo es el horario: reemplaza al anterior sin merge.
    """
    schedule = request.get_json(silent=True)
    if schedule is None:
        return jsonify({"error": "Schedule body must be JSON"}), 400

    try:
        school_class = ClassService.set_schedule(class_id, schedule)
    except LookupError as exc:
        return error_response(exc)

    return jsonify({"status": "ok", "class": serialize_class(school_class)})


@api_bp.get("/class/<int:class_id>/schedule")
def get_class_schedule(class_id):
    try:
        processed = ClassService.get_schedule(class_id)
    except LookupError as exc:
        return error_response(exc)

    return jsonify(processed)


# ----------------------------------------------
# MATERIAS Y PROFESORES DE LA CLASE
# ----------------------------------------------
@api_bp.get("/class/<int:class_id>/subjects")
@api_bp.get("/classes/<int:class_id>/subjects")
def get_class_subjects(class_id):
    try:
        return jsonify(ClassService.get_class_subjects(class_id))
    except LookupError as exc:
        return error_response(exc)


@api_bp.get("/classes/<int:class_id>/teachers")
def get_class_teachers(class_id):
    try:
        return jsonify(ClassService.get_class_teachers(class_id))
    except LookupError as exc:
        return error_response(exc)


@api_bp.put("/classes/<int:class_id>/assign-subjects")
def assign_subjects(class_id):
    """
    {"subjects": [1, 2, 3]} → reemplaza la lista de materias de la clase.
    """
    try:
        data = json_object_body()
        school_class = ClassService.assign_subjects(class_id, data.get("subjects"))
    except (ValueError, LookupError) as exc:
        return error_response(exc)

    return jsonify({"status": "ok", "class": serialize_class(school_class)})


@api_bp.put("/classes/<int:class_id>/assign-teachers")
def assign_teachers(class_id):
    """
    {"teacherIds": [4, 5]} → copia las materias de la clase a cada profesor.
    """
    try:
        data = json_object_body()
        school_class = ClassService.assign_teachers(class_id, data.get("teacherIds"))
    except (ValueError, LookupError) as exc:
        return error_response(exc)

    return jsonify({"status": "ok", "class": serialize_class(school_class)})
