# api/services/__init__.py

from .account_service import AccountService
from .catalog_service import CatalogService
from .class_service import ClassService
from .marks_service import MarksService
from .permission_service import PermissionService
from .upload_service import UploadService

__all__ = [
    "AccountService",
    "CatalogService",
    "ClassService",
    "MarksService",
    "PermissionService",
    "UploadService",
]
