from flask import Blueprint, g

from auth.guards import internal_required
from core.http_utils import _json_ok, _json_err
from domain.schema import charge_message_schema
from security import require_json
from services.credits import charge_message
from utils.time_utils import now_ms

api_internal_messages_bp = Blueprint("internal_messages", __name__)


@api_internal_messages_bp.route("/internal/messages/charge", methods=["POST"])
@internal_required
@require_json(charge_message_schema)
def internal_charge_message():
    """
    WhatsApp 웹훅이 수신 메시지마다 호출.
    - 차단 국가번호: 403 / 미등록 번호: 404
    - 그 외 200 + status(ok/free/exhausted), 응답 여부는 호출 측이 판단
    """
    data = g.safe_input
    res = charge_message(data["phone"], data["message"], now_ms())
    if res["status"] == "blocked":
        return _json_err("blocked_country", status=403)
    if res["status"] == "unknown_user":
        return _json_err("not_found", "User not found", status=404)
    return _json_ok(res)
