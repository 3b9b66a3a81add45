# services/credits.py
from flask import current_app

from domain.models import db, User
from domain.policies import (
    CREDITS_BY_TIER, CREDITS_PER_REQUEST, DEFAULT_RESET_PERIOD, RESET_PERIODS, SYSTEM_COMMANDS,
)
from services.analytics import is_blocked_country_code
from utils.dubai_dates import period_start_ms


def is_system_command(message: str) -> bool:
    return (message or "").strip().lower() in SYSTEM_COMMANDS


def tier_credits(tier: str) -> int:
    return CREDITS_BY_TIER["pro"] if tier == "pro" else CREDITS_BY_TIER["basic"]


def find_user(phone: str):
    return User.query.filter_by(phone=phone).first()


def is_reset_due(user, now_ms: int) -> bool:
    """
    마지막 리셋이 현재 주기(두바이 일/주/월) 시작보다 이전이면 리셋 대상.
    경계 시각에 정확히 리셋된 경우는 이미 이번 주기 리셋으로 봄.
    """
    period = user.reset_period or DEFAULT_RESET_PERIOD
    return user.credits_reset_at < period_start_ms(period, now_ms)


def reset_credits(now_ms: int) -> int:
    """
    리셋 대상 유저 크레딧을 티어 기본값으로 채움. 처리 건수 반환
    reset_period 가 알 수 없는 값인 행은 건너뛰고 경고만 남김 (나머지 유저는 정상 처리)
    """
    reset_count = 0
    skipped = 0
    try:
        for user in User.query.order_by(User.id.asc()).all():
            if (user.reset_period or DEFAULT_RESET_PERIOD) not in RESET_PERIODS:
                skipped += 1
                current_app.logger.warning(
                    "[CREDITS] reset skipped: user_id=%s unknown reset_period=%r", user.id, user.reset_period
                )
                continue
            if not is_reset_due(user, now_ms):
                continue
            user.credits = tier_credits(user.tier)
            user.credits_reset_at = now_ms
            reset_count += 1
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    current_app.logger.info("[CREDITS] reset: %d users reset, %d skipped", reset_count, skipped)
    return reset_count


def deduct_credit(user: User, message: str) -> dict:
    """
    메시지 1건당 크레딧 차감
      - 시스템 명령어: free (차감 없음)
      - 잔액 0 이하: exhausted
      - 그 외: ok (-1)
    """
    if is_system_command(message):
        return {"status": "free", "credits": user.credits or 0}

    if user.credits <= 0:
        return {"status": "exhausted", "credits": 0}

    user.credits = user.credits - CREDITS_PER_REQUEST
    db.session.commit()
    return {"status": "ok", "credits": user.credits}


def charge_message(phone: str, message: str, now_ms: int) -> dict:
    """
    수신 메시지 1건 과금
      - 차단 국가번호: blocked
      - 미등록 번호: unknown_user
      - 그 외: last_message_at 갱신 후 deduct_credit 결과
    """
    if is_blocked_country_code(phone):
        current_app.logger.warning("[CREDITS] blocked country phone=%s", phone)
        return {"status": "blocked", "credits": 0}

    user = find_user(phone)
    if not user:
        return {"status": "unknown_user", "credits": 0}

    user.last_message_at = now_ms
    res = deduct_credit(user, message)
    db.session.commit()
    return res


# -------------------- 관리자 작업 --------------------

def grant_pro(phone: str) -> dict:
    user = find_user(phone)
    if not user:
        return {"success": False, "reason": "User not found"}

    user.tier = "pro"
    user.credits = tier_credits("pro")
    db.session.commit()
    current_app.logger.info("[CREDITS] granted pro phone=%s", phone)
    return {"success": True}


def grant_credits(phone: str, amount: int) -> dict:
    if amount <= 0:
        return {"success": False, "reason": "Amount must be positive", "newBalance": 0}

    user = find_user(phone)
    if not user:
        return {"success": False, "reason": "User not found", "newBalance": 0}

    user.credits = user.credits + amount
    db.session.commit()
    current_app.logger.info("[CREDITS] granted %d credits phone=%s", amount, phone)
    return {"success": True, "newBalance": user.credits}
