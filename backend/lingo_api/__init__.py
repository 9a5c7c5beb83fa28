from flask import Flask, jsonify
from lingo_api.config import config_map
from lingo_api.extensions import jwt, migrate
from lingo_api import extensions
import os


def create_app(env: str = None) -> Flask:
    app = Flask(__name__)

    env = env or os.getenv("FLASK_ENV", "development")
    app.config.from_object(config_map.get(env, config_map["default"]))

    # Init extensions
    extensions.db.init_app(app)
    migrate.init_app(app, extensions.db)
    jwt.init_app(app)

    with app.app_context():
        # Import models so Flask-Migrate can detect them
        from lingo_api.db import models  # noqa: F401

        # Register blueprints
        from lingo_api.api.auth import auth_bp
        from lingo_api.api.lessons import lessons_bp
        from lingo_api.api.admin import admin_bp
        app.register_blueprint(auth_bp)
        app.register_blueprint(lessons_bp)
        app.register_blueprint(admin_bp)

    _register_error_handlers(app)
    return app


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(404)
    def not_found(_exc):
        return jsonify({"error": "not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(_exc):
        return jsonify({"error": "method not allowed"}), 405
