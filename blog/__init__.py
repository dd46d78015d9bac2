import logging
from datetime import timedelta

from flask import Flask
from flask_jwt_extended import JWTManager

from blog.config import Config
from blog.db import db
from blog.extensions.extensions import ma


def _configure_logging(app):
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.logger.setLevel(level)


def create_app(config_overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    app.config["JWT_ACCESS_TOKEN_EXPIRES"] = timedelta(
        minutes=app.config["JWT_ACCESS_TOKEN_MINUTES"]
    )
    app.config["JWT_REFRESH_TOKEN_EXPIRES"] = timedelta(
        days=app.config["JWT_REFRESH_TOKEN_DAYS"]
    )

    _configure_logging(app)

    db.init_app(app)
    ma.init_app(app)
    JWTManager(app)

    from blog.routes.auth_routes import auth_bp
    from blog.routes.post_routes import post_bp

    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(post_bp, url_prefix="/api")

    # register tables
    from blog.models import post_model, user_model, user_post_model  # noqa: F401

    with app.app_context():
        db.create_all()

    return app
