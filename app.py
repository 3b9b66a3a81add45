from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix

import routes
from core.config import Config
from core.extensions import init_extensions
from core.hooks import register_hooks


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    init_extensions(app)

    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1)

    routes.register_routes(app)
    register_hooks(app)

    # 시크릿 미설정이면 해당 API 는 전부 403
    for key in ("ADMIN_API_SECRET", "CRON_SECRET", "INTERNAL_API_SECRET"):
        if not app.config.get(key):
            app.logger.warning(f"[CONFIG] {key} is empty; endpoints guarded by it will reject all requests")

    @app.get("/health")
    def health():
        return {"ok": True}, 200

    return app
