from flask import Blueprint, current_app

from auth.guards import cron_required
from core.http_utils import _json_ok
from services.credits import reset_credits
from utils.time_utils import now_ms

api_internal_cron_bp = Blueprint("internal_cron", __name__)


# ---- 크레딧 리셋 — 내부용 Cron 엔드포인트 ----
@api_internal_cron_bp.route("/internal/cron/reset-credits", methods=["POST"])
@cron_required
def cron_reset_credits():
    """
    - 외부 스케줄러가 주기적으로 호출 (두바이 자정 직후 1회면 충분).
    - 유저별 reset_period(daily/weekly/monthly) 경계가 지났으면 크레딧 리셋.
    - 헤더 Authorization: Bearer <CRON_SECRET> 체크.
    """
    now = now_ms()
    reset = reset_credits(now)
    current_app.logger.info("[CRON] reset-credits now=%d reset=%d", now, reset)
    return _json_ok({"reset": reset, "nowMs": now})
