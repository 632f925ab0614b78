from __future__ import annotations

import os
from typing import Any, Mapping, Optional

from flask import Flask

from .extensions import db, login_manager, migrate
from .logging_config import setup_logging
from .policies import unauthorized
from .views.auth import auth_bp
from .views.gifts import gifts_bp


def create_app(test_config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)

    app.config["SECRET_KEY"] = os.environ.get("SECRET_KEY", "dev-secret-change-me")
    app.config["SQLALCHEMY_DATABASE_URI"] = os.environ.get("DATABASE_URL", "sqlite:///holidayhub.db")
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    app.config["LOG_LEVEL"] = os.environ.get("LOG_LEVEL", "INFO")

    if test_config:
        app.config.update(test_config)

    setup_logging(app.config["LOG_LEVEL"])

    db.init_app(app)
    login_manager.init_app(app)
    migrate.init_app(app, db)
    login_manager.unauthorized_handler(unauthorized)

    # Blueprints
    app.register_blueprint(auth_bp)
    app.register_blueprint(gifts_bp)

    return app
