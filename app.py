# app.py
import logging
from pathlib import Path

from flask import Flask, jsonify, current_app, send_from_directory
from werkzeug.exceptions import HTTPException

from config import Config
from extensions import db, login_manager, migrate, cors


def create_app(config_object=Config) -> Flask:
    """
    App factory.
    - Carga configuración
    - Inicializa extensiones (db, login, migraciones, CORS)
    - Registra blueprints
    - Registra handlers de error JSON
    """
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_object)
    Path(app.instance_path).mkdir(parents=True, exist_ok=True)

    _configure_logging(app)

    # Extensiones
    db.init_app(app)
    login_manager.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(app, resources={r"/*": {"origins": app.config.get("CORS_ORIGINS", "*")}})

    # User loader para Flask-Login
    from models import User

    @login_manager.user_loader
    def load_user(user_id: str):
        try:
            return db.session.get(User, int(user_id))
        except (TypeError, ValueError):
            return None

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({"error": "Login required"}), 401

    # Blueprints de la API
    from api import api_bp
    from api.auth import auth_bp
    from api.permissions import legacy_bp

    app.register_blueprint(api_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(legacy_bp)

    @app.get("/uploads/<any(materials, assignments):kind>/<path:filename>")
    def serve_upload(kind: str, filename: str):
        directory = Path(current_app.config["UPLOAD_FOLDER"]) / kind
        return send_from_directory(directory, filename)

    @app.get("/health")
    def health():
        return jsonify({"status": "ok"})

    _register_error_handlers(app)
    return app


def _configure_logging(app: Flask) -> None:
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    app.logger.setLevel(level)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(HTTPException)
    def handle_http_error(exc: HTTPException):
        if exc.code == 413:
            max_mb = app.config["UPLOAD_MAX_BYTES"] // (1024 * 1024)
            return jsonify({"error": f"File too large. Maximum size is {max_mb}MB."}), 413
        return jsonify({"error": exc.description or exc.name}), exc.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(exc: Exception):
        # No exponemos el mensaje crudo al cliente
        db.session.rollback()
        current_app.logger.exception("Error no controlado: %s", exc)
        return jsonify({"error": "Internal server error"}), 500


app = create_app()


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=app.config["PORT"], debug=False)
