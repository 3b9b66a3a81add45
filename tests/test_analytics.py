# tests/test_analytics.py
from types import SimpleNamespace

import pytest

from conftest import ms
from services.analytics import detect_country_from_phone, is_blocked_country_code, platform_stats


@pytest.mark.parametrize("phone,country", [
    ("+971501234567", "AE"),
    ("+966501234567", "SA"),
    ("+14155550100", "US"),
    ("+447700900123", "GB"),
    ("+79161234567", "RU"),
    ("+880171234567", "BD"),
    ("+263771234567", "ZW"),
    ("+999123456", "XX"),
    ("971501234567", "XX"),
    ("", "XX"),
])
def test_detect_country_from_phone(phone, country):
    assert detect_country_from_phone(phone) == country


def test_longest_prefix_wins():
    # +234 (NG) 가 +2x 보다, +880 (BD) 가 +8x 보다 우선
    assert detect_country_from_phone("+2348012345678") == "NG"
    assert detect_country_from_phone("+8801712345678") == "BD"


def test_blocked_country_codes():
    assert is_blocked_country_code("+919812345678")
    assert is_blocked_country_code("+6281234567")
    assert not is_blocked_country_code("+971501234567")
    assert not is_blocked_country_code("")


def _user(phone, last=None, created="2023-06-01T00:00:00Z", tier="basic"):
    return SimpleNamespace(
        phone=phone,
        last_message_at=ms(last) if last else None,
        created_at=ms(created),
        tier=tier,
    )


def test_platform_stats_buckets_by_dubai_calendar():
    now = ms("2024-01-17T08:00:00Z")  # 두바이 수 01-17 12:00
    users = [
        # 오늘 (두바이 01-17 11:00), 가입도 오늘 (두바이 01-17 01:00)
        _user("+971501234567", last="2024-01-17T07:00:00Z", created="2024-01-16T21:00:00Z", tier="pro"),
        # 두바이 01-16 23:59:59 -> 어제, 이번 주
        _user("+447700900123", last="2024-01-16T19:59:59Z"),
        # 두바이 토 01-13 23:59:59 -> 지난 주, 이번 달
        _user("+14155550100", last="2024-01-13T19:59:59Z"),
        # 메시지 없음, 두바이 12-31 가입
        _user("+999123456", created="2023-12-31T19:59:59Z"),
    ]

    stats = platform_stats(users, now)

    assert stats["totalUsers"] == 4
    assert stats["activeToday"] == 1
    assert stats["activeWeek"] == 2
    assert stats["activeMonth"] == 3
    assert stats["newToday"] == 1
    assert stats["proUsers"] == 1
    assert stats["countries"] == {"AE": 1, "GB": 1, "US": 1, "XX": 1}
    assert stats["boundaries"] == {
        "dayStartMs": ms("2024-01-16T20:00:00Z"),
        "weekStartMs": ms("2024-01-13T20:00:00Z"),
        "monthStartMs": ms("2023-12-31T20:00:00Z"),
    }


def test_platform_stats_empty():
    stats = platform_stats([], ms("2024-01-17T08:00:00Z"))
    assert stats["totalUsers"] == 0
    assert stats["activeMonth"] == 0
    assert stats["countries"] == {}
