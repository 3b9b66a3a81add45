# policies.py
TIERS = ("basic", "pro")

# 티어별 주기당 크레딧
CREDITS_BY_TIER = {
    "basic": 60,
    "pro": 600,
}
CREDITS_PER_REQUEST = 1

# 크레딧 리셋 주기 (두바이 달력 기준)
RESET_PERIODS = ("daily", "weekly", "monthly")
DEFAULT_RESET_PERIOD = "monthly"

# 크레딧 차감 없는 시스템 명령어 (소문자, trim 후 비교)
SYSTEM_COMMANDS = {
    "credits",
    "help",
    "privacy",
    "upgrade",
    "account",
    "my memory",
    "clear memory",
    "clear documents",
    "clear everything",
}

# 전화번호 prefix -> ISO 국가코드 (analytics 용)
PHONE_PREFIX_TO_COUNTRY = {
    "+971": "AE",
    "+966": "SA",
    "+973": "BH",
    "+974": "QA",
    "+968": "OM",
    "+965": "KW",
    "+44": "GB",
    "+1": "US",
    "+33": "FR",
    "+49": "DE",
    "+61": "AU",
    "+81": "JP",
    "+86": "CN",
    "+91": "IN",
    "+92": "PK",
    "+20": "EG",
    "+27": "ZA",
    "+55": "BR",
    "+7": "RU",
    "+82": "KR",
    "+90": "TR",
    "+234": "NG",
    "+880": "BD",
    "+62": "ID",
    "+263": "ZW",
}
UNKNOWN_COUNTRY = "XX"

BLOCKED_COUNTRY_CODES = (
    "+91",   # India
    "+92",   # Pakistan
    "+880",  # Bangladesh
    "+234",  # Nigeria
    "+62",   # Indonesia
    "+263",  # Zimbabwe
)
