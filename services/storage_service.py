import logging
import os
from pathlib import Path
from uuid import uuid4

from flask import current_app
from werkzeug.utils import secure_filename

logger = logging.getLogger(__name__)


def upload_root() -> Path:
    return Path(current_app.config["UPLOAD_FOLDER"])


def allowed_extension(filename: str) -> bool:
    ext = Path(filename).suffix.lower().lstrip(".")
    return ext in current_app.config.get("ALLOWED_UPLOAD_EXTENSIONS", set())


def file_size(file_storage) -> int:
    stream = file_storage.stream
    position = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(position)
    return size


def save_upload(file_storage, kind: str):
    """
    Guarda el archivo en UPLOAD_FOLDER/<kind>/ con nombre único y devuelve
    la metadata para registrar en la base. None si no hay archivo válido.
    """
    if not file_storage or not file_storage.filename:
        return None
    filename = secure_filename(file_storage.filename)
    if not filename:
        return None

    storage_dir = upload_root() / kind
    storage_dir.mkdir(parents=True, exist_ok=True)

    ext = Path(filename).suffix.lower()
    final_name = f"{uuid4().hex}{ext}"
    file_path = storage_dir / final_name
    file_storage.save(file_path)

    return {
        "file_name": filename,
        "file_path": f"/uploads/{kind}/{final_name}",
        "mime_type": file_storage.mimetype,
        "file_size": os.path.getsize(file_path),
    }


def resolve_upload(storage_path: str) -> Path | None:
    """Traduce '/uploads/<kind>/<name>' a la ruta real en disco."""
    prefix = "/uploads/"
    if not storage_path or not storage_path.startswith(prefix):
        return None
    relative = storage_path[len(prefix):]
    root = upload_root().resolve()
    candidate = (root / relative).resolve()
    if root not in candidate.parents:
        return None
    return candidate


def delete_upload(storage_path: str) -> bool:
    """
    Borra el archivo físico. Los errores se registran y no se propagan:
    la fila en la base se elimina igual.
    """
    path = resolve_upload(storage_path)
    if path is None:
        logger.warning("Ruta de archivo inválida, no se borra: %s", storage_path)
        return False
    try:
        path.unlink()
    except OSError as exc:
        logger.warning("No pudimos borrar el archivo %s: %s", path, exc)
        return False
    return True
