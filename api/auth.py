# api/auth.py

from flask import Blueprint, jsonify
from flask_login import login_user, logout_user, login_required, current_user

from api.services.account_service import AccountService
from api.utils.catalog_helper import serialize_user
from api.utils.request_helper import error_response, json_object_body

auth_bp = Blueprint("auth", __name__)


# ----------------------------------------------
# POST: LOGIN
# ----------------------------------------------
@auth_bp.post("/login")
def login():
    """
    {"username": "...", "password": "..."}

    Respuesta: {"role": "teacher", ...ficha del profesor}
               {"role": "student", ...ficha del alumno}
               {"role": "admin"}
    Además deja abierta la sesión (cookie de Flask-Login).
    """
    try:
        data = json_object_body()
        username = data.get("username")
        password = data.get("password")
        user, payload = AccountService.authenticate(
            username.strip() if isinstance(username, str) else "",
            password if isinstance(password, str) else "",
        )
    except (ValueError, LookupError) as exc:
        return error_response(exc)

    login_user(user)
    return jsonify(payload)


# ----------------------------------------------
# LOGOUT
# ----------------------------------------------
@auth_bp.post("/logout")
@login_required
def logout():
    logout_user()
    return jsonify({"status": "ok"})


# ----------------------------------------------
# CUENTA DE LA SESIÓN ACTUAL
# ----------------------------------------------
@auth_bp.get("/api/me")
@login_required
def me():
    return jsonify(serialize_user(current_user))
