# api/utils/__init__.py
from api.utils.catalog_helper import (
    serialize_announcement,
    serialize_class,
    serialize_permission,
    serialize_room,
    serialize_student,
    serialize_subject,
    serialize_teacher,
    serialize_user,
)
from api.utils.marks_helper import serialize_marks
from api.utils.uploads_helper import serialize_upload

__all__ = [
    "serialize_announcement",
    "serialize_class",
    "serialize_permission",
    "serialize_room",
    "serialize_student",
    "serialize_subject",
    "serialize_teacher",
    "serialize_user",
    "serialize_marks",
    "serialize_upload",
]
