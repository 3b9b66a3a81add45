from flask import make_response, jsonify


def _no_store(resp):
    resp.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, max-age=0"
    resp.headers["Pragma"] = "no-cache"
    resp.headers["Expires"] = "0"
    return resp


# api 공통 응답
def _json_ok(payload=None, status=200):
    payload = payload or {}
    return _no_store(make_response(jsonify({"ok": True, **payload}), status))


def _json_err(code, message=None, status=400):
    return _no_store(make_response(jsonify({"ok": False, "error": code, "message": message}), status))
