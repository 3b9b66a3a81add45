# utils/time_utils.py
import time
from datetime import datetime, timedelta, timezone

from utils.dubai_dates import EPOCH, dubai_midnight_ms, dubai_week_start_ms, dubai_month_start_ms


def now_ms() -> int:
    return int(time.time() * 1000)


def ms_to_utc(ms: int) -> datetime:
    return EPOCH + timedelta(milliseconds=ms)


def utc_to_ms(dt: datetime) -> int:
    # naive 는 UTC 로 간주
    if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return (dt - EPOCH) // timedelta(milliseconds=1)


# 시계를 읽는 곳은 여기뿐. 경계 계산 자체는 utils.dubai_dates (순수 함수)
def dubai_today_start_ms() -> int:
    return dubai_midnight_ms(now_ms())


def dubai_week_start_now_ms() -> int:
    return dubai_week_start_ms(now_ms())


def dubai_month_start_now_ms() -> int:
    return dubai_month_start_ms(now_ms())
