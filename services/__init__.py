from .storage_service import (
    allowed_extension,
    delete_upload,
    file_size,
    resolve_upload,
    save_upload,
    upload_root,
)

__all__ = [
    "allowed_extension",
    "delete_upload",
    "file_size",
    "resolve_upload",
    "save_upload",
    "upload_root",
]
