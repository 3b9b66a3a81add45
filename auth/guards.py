# guards.py
import secrets
from functools import wraps

from flask import request, current_app

from core.http_utils import _json_err


def _bearer_ok(config_key: str) -> bool:
    want = current_app.config.get(config_key) or ""
    if not want:
        # 시크릿 미설정이면 전부 거부
        return False
    auth = request.headers.get("Authorization", "")
    return secrets.compare_digest(auth.encode(), f"Bearer {want}".encode())


def bearer_required(config_key: str):
    """
    공유 시크릿 게이트: Authorization: Bearer <app.config[config_key]>
    불일치/미설정이면 403
    """
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if not _bearer_ok(config_key):
                current_app.logger.warning("[AUTH] bearer rejected path=%s key=%s", request.path, config_key)
                return _json_err("forbidden", status=403)
            return view(*args, **kwargs)
        return wrapper
    return decorator


admin_required = bearer_required("ADMIN_API_SECRET")
cron_required = bearer_required("CRON_SECRET")
internal_required = bearer_required("INTERNAL_API_SECRET")
