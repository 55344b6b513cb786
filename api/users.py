# api/users.py

from flask import request, jsonify

from models import RoleEnum
from api.services.account_service import AccountService
from api.utils.catalog_helper import serialize_user
from api.utils.request_helper import error_response, json_object_body
from . import api_bp


@api_bp.post("/users/accounts")
def create_account():
    """
    {"username": "...", "password": "...", "role": "teacher|student|admin"}
    """
    try:
        user = AccountService.create_user(json_object_body())
    except ValueError as exc:
        return error_response(exc)

    return jsonify({"status": "created", "user": serialize_user(user)}), 201


@api_bp.post("/users/accounts/create-bulk-users")
def create_bulk_accounts():
    """
    Lista de cuentas parseadas desde CSV. Si alguna es inválida no se crea ninguna.
    """
    try:
        users = AccountService.bulk_create_users(request.get_json(silent=True))
    except ValueError as exc:
        return error_response(exc)

    return jsonify({"status": "created", "count": len(users)}), 201


@api_bp.get("/users/teachers")
def list_teacher_accounts():
    return jsonify(AccountService.list_users_with_details(RoleEnum.TEACHER))


@api_bp.get("/users/students")
def list_student_accounts():
    return jsonify(AccountService.list_users_with_details(RoleEnum.STUDENT))


@api_bp.delete("/users/teachers/<int:user_id>")
def delete_teacher_account(user_id):
    try:
        AccountService.delete_account(user_id, RoleEnum.TEACHER)
    except LookupError as exc:
        return error_response(exc)

    return jsonify({"status": "deleted", "id": user_id})


@api_bp.delete("/users/students/<int:user_id>")
def delete_student_account(user_id):
    try:
        AccountService.delete_account(user_id, RoleEnum.STUDENT)
    except LookupError as exc:
        return error_response(exc)

    return jsonify({"status": "deleted", "id": user_id})
