# extensions.py
import logging

from domain.models import db


def init_extensions(app):
    db.init_app(app)

    app.logger.setLevel(getattr(logging, app.config.get("LOG_LEVEL", "INFO"), logging.INFO))

    if app.config.get("DB_CREATE_ALL"):
        with app.app_context():
            db.create_all()
