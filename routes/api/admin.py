from flask import Blueprint, g

from auth.guards import admin_required
from core.http_utils import _json_ok, _json_err
from domain.models import User
from domain.schema import admin_user_query_schema, grant_pro_schema, grant_credits_schema
from security import _query_args, require_json
from services.analytics import platform_stats, detect_country_from_phone
from services.credits import find_user, grant_pro, grant_credits
from utils.time_utils import now_ms, dubai_today_start_ms, dubai_week_start_now_ms, dubai_month_start_now_ms

api_admin_bp = Blueprint("api_admin", __name__)


@api_admin_bp.route("/api/admin/stats", methods=["GET"])
@admin_required
def admin_stats():
    """플랫폼 KPI (두바이 기준 오늘 / 이번 주 / 이번 달)"""
    stats = platform_stats(User.query.all(), now_ms())
    return _json_ok({"stats": stats})


@api_admin_bp.route("/api/admin/users", methods=["GET"])
@admin_required
def admin_search_user():
    q = _query_args(admin_user_query_schema)
    user = find_user(q["phone"])
    if not user:
        return _json_err("not_found", "User not found", status=404)
    return _json_ok({"user": {**user.to_dict(), "country": detect_country_from_phone(user.phone)}})


@api_admin_bp.route("/api/admin/grant-pro", methods=["POST"])
@admin_required
@require_json(grant_pro_schema)
def admin_grant_pro():
    res = grant_pro(g.safe_input["phone"])
    if not res["success"]:
        return _json_err("grant_failed", res["reason"], status=404)
    return _json_ok(res)


@api_admin_bp.route("/api/admin/grant-credits", methods=["POST"])
@admin_required
@require_json(grant_credits_schema)
def admin_grant_credits():
    data = g.safe_input
    res = grant_credits(data["phone"], int(data["amount"]))
    if not res["success"]:
        status = 404 if res["reason"] == "User not found" else 400
        return _json_err("grant_failed", res["reason"], status=status)
    return _json_ok(res)


@api_admin_bp.route("/api/admin/boundaries", methods=["GET"])
@admin_required
def admin_boundaries():
    return _json_ok({
        "dayStartMs": dubai_today_start_ms(),
        "weekStartMs": dubai_week_start_now_ms(),
        "monthStartMs": dubai_month_start_now_ms(),
    })
