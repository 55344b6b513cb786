# config.py
import os


def _database_url():
    url = os.environ.get("DATABASE_URL")
    if url and url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    return url


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key")
    _BASE_DIR = os.path.abspath(os.path.dirname(__file__))
    _DEFAULT_DB_PATH = os.path.join(_BASE_DIR, "instance", "aulario.db")
    SQLALCHEMY_DATABASE_URI = _database_url() or f"sqlite:///{_DEFAULT_DB_PATH}"
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Materiales y tareas (PDF / DOCX, máximo 5 MB por archivo)
    UPLOAD_FOLDER = os.environ.get("UPLOAD_FOLDER") or os.path.join(_BASE_DIR, "instance", "uploads")
    UPLOAD_MAX_BYTES = 5 * 1024 * 1024
    MAX_CONTENT_LENGTH = 6 * 1024 * 1024
    ALLOWED_UPLOAD_EXTENSIONS = {"pdf", "docx"}
    ENFORCE_UPLOAD_PERMISSIONS = os.environ.get("ENFORCE_UPLOAD_PERMISSIONS", "0").lower() in ("1", "true", "yes")

    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    PORT = int(os.environ.get("PORT", "5000"))
