# utils/dubai_dates.py
from datetime import datetime, timedelta, timezone
from dateutil.relativedelta import relativedelta

# Asia/Dubai = UTC+4 고정 (DST 없음). tz DB 대신 고정 오프셋 사용
DUBAI = timezone(timedelta(hours=4), "Asia/Dubai")

MS_PER_DAY = 24 * 60 * 60 * 1000

# 주 시작 = 일요일 (UAE 관례). datetime.weekday() 기준 월=0 ... 일=6
WEEK_START_WEEKDAY = 6

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def _to_dubai(now_ms: int) -> datetime:
    # float 초 변환 없이 정수 ms 그대로 (음수 포함 정확)
    return (EPOCH + timedelta(milliseconds=now_ms)).astimezone(DUBAI)


def _to_ms(dt: datetime) -> int:
    return (dt - EPOCH) // _ONE_MS


def dubai_midnight_ms(now_ms: int) -> int:
    """
    now_ms 가 속한 두바이 달력 날짜의 00:00:00.000 (UTC ms 로 반환)
    예: 2024-01-15T08:00:00Z (두바이 12:00) -> 2024-01-14T20:00:00Z

    datetime 표현 범위(1~9999년) 밖이면 OverflowError 가 그대로 올라감.
    """
    local = _to_dubai(now_ms)
    return _to_ms(local.replace(hour=0, minute=0, second=0, microsecond=0))


def dubai_week_start_ms(now_ms: int) -> int:
    """이번 주 일요일 00:00 (두바이). 일=0 ... 토=6"""
    offset = (_to_dubai(now_ms).weekday() - WEEK_START_WEEKDAY) % 7
    return dubai_midnight_ms(now_ms) - offset * MS_PER_DAY


def dubai_month_start_ms(now_ms: int) -> int:
    """이번 달 1일 00:00 (두바이). 같은 달을 반환하므로 12월 -> 다음해 1월 같은 넘김 없음"""
    local = _to_dubai(now_ms)
    start = local + relativedelta(day=1, hour=0, minute=0, second=0, microsecond=0)
    return _to_ms(start)


PERIOD_STARTS = {
    "daily": dubai_midnight_ms,
    "weekly": dubai_week_start_ms,
    "monthly": dubai_month_start_ms,
}


def period_start_ms(period: str, now_ms: int) -> int:
    fn = PERIOD_STARTS.get(period)
    if fn is None:
        raise ValueError(f"Unknown period '{period}'")
    return fn(now_ms)
