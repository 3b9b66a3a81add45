# services/analytics.py
from collections import Counter

from domain.policies import PHONE_PREFIX_TO_COUNTRY, UNKNOWN_COUNTRY, BLOCKED_COUNTRY_CODES
from utils.dubai_dates import dubai_midnight_ms, dubai_week_start_ms, dubai_month_start_ms

# 긴 prefix 우선 (+1 보다 +971 먼저 매칭)
_SORTED_PREFIXES = sorted(PHONE_PREFIX_TO_COUNTRY, key=len, reverse=True)


def detect_country_from_phone(phone: str) -> str:
    """전화번호 prefix 로 ISO 국가코드 추정. 못 찾으면 'XX'"""
    for prefix in _SORTED_PREFIXES:
        if (phone or "").startswith(prefix):
            return PHONE_PREFIX_TO_COUNTRY[prefix]
    return UNKNOWN_COUNTRY


def is_blocked_country_code(phone: str) -> bool:
    return any((phone or "").startswith(code) for code in BLOCKED_COUNTRY_CODES)


def _since(ts, boundary_ms: int) -> bool:
    return ts is not None and ts >= boundary_ms


def platform_stats(users, now_ms: int) -> dict:
    """
    관리자 대시보드 KPI (두바이 달력 기준 오늘 / 이번 주 / 이번 달)
    users: User 또는 같은 속성을 가진 객체 iterable
    """
    today = dubai_midnight_ms(now_ms)
    week = dubai_week_start_ms(now_ms)
    month = dubai_month_start_ms(now_ms)

    users = list(users)
    countries = Counter(detect_country_from_phone(u.phone) for u in users)

    return {
        "totalUsers": len(users),
        "activeToday": sum(1 for u in users if _since(u.last_message_at, today)),
        "activeWeek": sum(1 for u in users if _since(u.last_message_at, week)),
        "activeMonth": sum(1 for u in users if _since(u.last_message_at, month)),
        "newToday": sum(1 for u in users if _since(u.created_at, today)),
        "proUsers": sum(1 for u in users if u.tier == "pro"),
        "countries": dict(countries),
        "boundaries": {
            "dayStartMs": today,
            "weekStartMs": week,
            "monthStartMs": month,
        },
    }
