from flask import request, current_app
from werkzeug.exceptions import HTTPException

from core.http_utils import _json_err


# -------------------- 에러 응답 (JSON) --------------------

def handle_http_error(e: HTTPException):
    # abort(400, description=...) 등을 {"ok": false, ...} 형태로 통일
    code = (e.name or "error").lower().replace(" ", "_")
    return _json_err(code, e.description, status=e.code or 500)


# -------------------- 요청 로깅 --------------------

def log_bad_requests(resp):
    if resp.status_code >= 400:
        current_app.logger.warning(
            "[HTTP] %s %s -> %d", request.method, request.path, resp.status_code
        )
    return resp


def register_hooks(app):
    app.register_error_handler(HTTPException, handle_http_error)
    app.after_request(log_bad_requests)
