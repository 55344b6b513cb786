# api/permissions.py

from flask import Blueprint, request, jsonify

from api.services.permission_service import PermissionService
from api.utils.catalog_helper import serialize_permission
from api.utils.request_helper import error_response, json_object_body, parse_id, parse_optional_id
from . import api_bp

# Ruta histórica sin prefijo /api que usa el panel del profesor
legacy_bp = Blueprint("legacy", __name__)


@api_bp.post("/permissions")
def grant_permissions():
    """
    Lista de permisos:
    [{"teacherId": 1, "classId": 2, "subjectId": 3, "havePermission": true}, ...]
    Se insertan tal cual, sin chequear duplicados.
    """
    try:
        created = PermissionService.grant_permissions(request.get_json(silent=True))
    except (ValueError, LookupError) as exc:
        return error_response(exc)

    return jsonify({"status": "created", "permissions": [serialize_permission(p) for p in created]}), 201


@api_bp.get("/permissions")
def list_permissions():
    """
    ?classId=X              → todos los permisos de la clase (cualquier flag)
    ?classId=X&teacherId=Y  → solo los concedidos, con el detalle de la materia
    """
    try:
        class_id = parse_id(request.args.get("classId"), "classId")
        teacher_id = parse_optional_id(request.args.get("teacherId"), "teacherId")
    except ValueError as exc:
        return error_response(exc)

    permissions = PermissionService.get_permissions(class_id, teacher_id)
    with_subject = teacher_id is not None
    return jsonify([serialize_permission(p, with_subject=with_subject) for p in permissions])


@api_bp.patch("/permissions/<int:permission_id>")
def update_permission(permission_id):
    try:
        data = json_object_body()
        permission = PermissionService.set_permission(permission_id, data.get("havePermission"))
    except (ValueError, LookupError) as exc:
        return error_response(exc)

    return jsonify({"status": "ok", "permission": serialize_permission(permission)})


@legacy_bp.get("/permissions")
def list_granted_permissions():
    class_id = request.args.get("classId")
    teacher_id = request.args.get("teacherId")

    if not class_id or not teacher_id:
        return jsonify({"error": "Missing classId or teacherId"}), 400

    try:
        permissions = PermissionService.get_permissions(
            parse_id(class_id, "classId"),
            parse_id(teacher_id, "teacherId"),
        )
    except ValueError as exc:
        return error_response(exc)

    return jsonify([serialize_permission(p, with_subject=True) for p in permissions])
