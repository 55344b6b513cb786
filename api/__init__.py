from flask import Blueprint

api_bp = Blueprint("api", __name__, url_prefix="/api")

from . import (
    rooms,
    teachers,
    subjects,
    classes,
    students,
    users,
    permissions,
    marks,
    announcements,
    materials,
)
