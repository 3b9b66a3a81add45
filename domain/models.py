# models.py
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import Index
from sqlalchemy.orm import validates

from domain.policies import DEFAULT_RESET_PERIOD, RESET_PERIODS, TIERS
from utils.time_utils import now_ms

db = SQLAlchemy()


# =========================
#       Core: Users
# =========================
# NOTE: 시각 컬럼은 전부 epoch ms (UTC) BigInteger
class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)

    # WhatsApp 번호 (E.164, 예: +971501234567)
    phone = db.Column(db.String(32), unique=True, nullable=False, index=True)
    name = db.Column(db.String(120), nullable=True)
    language = db.Column(db.String(8), default="en", nullable=False)
    timezone = db.Column(db.String(64), default="Asia/Dubai", nullable=False)

    tier = db.Column(db.String(16), default="basic", nullable=False, index=True)
    is_admin = db.Column(db.Boolean, default=False, nullable=False)

    # 크레딧
    credits = db.Column(db.Integer, default=60, nullable=False)
    credits_reset_at = db.Column(db.BigInteger, default=now_ms, nullable=False)
    reset_period = db.Column(db.String(16), default=DEFAULT_RESET_PERIOD, nullable=False)

    last_message_at = db.Column(db.BigInteger, nullable=True)
    created_at = db.Column(db.BigInteger, default=now_ms, nullable=False)

    __table_args__ = (
        Index("ix_users_last_message_at", "last_message_at"),
    )

    @validates("tier")
    def _validate_tier(self, key, value):
        if value not in TIERS:
            raise ValueError(f"Unknown tier '{value}'")
        return value

    @validates("reset_period")
    def _validate_reset_period(self, key, value):
        if value is None:
            return DEFAULT_RESET_PERIOD
        if value not in RESET_PERIODS:
            raise ValueError(f"Unknown reset period '{value}'")
        return value

    def to_dict(self):
        return {
            "phone": self.phone,
            "name": self.name,
            "language": self.language,
            "timezone": self.timezone,
            "tier": self.tier,
            "isAdmin": self.is_admin,
            "credits": self.credits,
            "creditsResetAt": self.credits_reset_at,
            "resetPeriod": self.reset_period,
            "lastMessageAt": self.last_message_at,
            "createdAt": self.created_at,
        }
