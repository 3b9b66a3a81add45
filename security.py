"""
security.py — 입력 검증 유틸
Ghali admin API (Flask)
"""

from functools import wraps
from flask import request, abort, g
from jsonschema import Draft7Validator
from jsonschema.exceptions import best_match

# -------------------- 설정 상수 --------------------
MAX_PAYLOAD_BYTES = 256 * 1024  # 256KB 제한


# -------------------- 유틸 함수 --------------------
def _validate_schema(data, schema):
    """
    JSON Schema 검증. 실패 시 400
    메시지에 대표 오류 위치(필드 경로)를 넣어 어느 입력이 틀렸는지 알 수 있게 함
    """
    if not schema:
        return
    err = best_match(Draft7Validator(schema).iter_errors(data))
    if err is not None:
        field = ".".join(str(p) for p in err.absolute_path) or "(root)"
        abort(400, description=f"validation failed: {field}: {err.message}")


def _query_args(schema=None, phone_fields=("phone",)):
    """
    GET 쿼리 파라미터 trim + 검증
    인코딩 안 된 '+' 는 공백으로 디코딩되므로 (?phone=+9715...) 전화번호 필드는 선행 공백을 '+' 로 복원
    """
    args = {}
    for k, v in request.args.items():
        if k in phone_fields and v.startswith(" "):
            v = "+" + v.lstrip()
        v = v.strip()
        if v:
            args[k] = v
    _validate_schema(args, schema)
    return args


# -------------------- 메인 데코레이터 --------------------
def require_json(json_schema=None):
    """
    JSON 본문 검증 데코레이터
      - 용량 제한 초과: 413
      - JSON 아님 / 스키마 불일치: 400
    검증된 payload 는 g.safe_input 에 저장
    """
    def deco(f):
        @wraps(f)
        def wrapped(*args, **kwargs):
            cl = request.content_length
            if cl and cl > MAX_PAYLOAD_BYTES:
                abort(413, description="request body too large")

            if not request.is_json:
                abort(400, description="JSON body required")
            payload = request.get_json(silent=True)
            if not isinstance(payload, dict):
                abort(400, description="JSON object required")

            _validate_schema(payload, json_schema)
            g.safe_input = payload
            return f(*args, **kwargs)
        return wrapped
    return deco
