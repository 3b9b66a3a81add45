PHONE_RE = r"^\+\d{6,15}$"

# -------------------- 입력 양식 스키마 --------------------
admin_user_query_schema = {
    "type": "object",
    "properties": {
        "phone": {"type": "string", "pattern": PHONE_RE},
    },
    "required": ["phone"],
    "additionalProperties": True,
}

grant_pro_schema = {
    "type": "object",
    "properties": {
        "phone": {"type": "string", "pattern": PHONE_RE},
    },
    "required": ["phone"],
    "additionalProperties": True,
}

grant_credits_schema = {
    "type": "object",
    "properties": {
        "phone": {"type": "string", "pattern": PHONE_RE},
        # 0 이하는 서비스에서 reason 과 함께 거절
        "amount": {"type": "integer", "maximum": 100000},
    },
    "required": ["phone", "amount"],
    "additionalProperties": True,
}

charge_message_schema = {
    "type": "object",
    "properties": {
        "phone": {"type": "string", "pattern": PHONE_RE},
        "message": {"type": "string", "maxLength": 4096},
    },
    "required": ["phone", "message"],
    "additionalProperties": True,
}
