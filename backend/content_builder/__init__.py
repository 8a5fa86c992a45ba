import logging

from flask import Flask
from .config import config_by_name
from .extensions import db, migrate
from .media import MediaCatalog


def create_app(config_name: str = "development") -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])

    # -------------------------------------------------
    # Logging
    # -------------------------------------------------
    level = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    app.logger.setLevel(level)
    logging.getLogger("content_builder").setLevel(level)

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)

    # Models must be imported for metadata / migrations
    from . import models  # noqa: F401

    # -------------------------------------------------
    # Media catalog shared by previews
    # -------------------------------------------------
    app.extensions["media_catalog"] = MediaCatalog()

    app.logger.debug("content_builder app created (%s)", config_name)

    return app
