# routes/__init__.py
from .api.admin import api_admin_bp
from .api.internal_cron import api_internal_cron_bp
from .api.internal_messages import api_internal_messages_bp


def register_routes(app):
    app.register_blueprint(api_admin_bp)
    app.register_blueprint(api_internal_cron_bp)
    app.register_blueprint(api_internal_messages_bp)
