import os


def _env_bool(name: str, default: bool = False) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in ("1", "true", "yes", "y", "on")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "local-dev-secret")

    ENV = os.getenv("FLASK_ENV", "production")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # DB
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///ghali.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_pre_ping": True,
    }
    # 최초 기동 시 테이블 생성 (운영에서는 끄고 마이그레이션 사용)
    DB_CREATE_ALL = _env_bool("DB_CREATE_ALL", default=False)

    # -------------------------
    # 공유 시크릿 (Authorization: Bearer <secret>)
    # -------------------------
    # 웹(Next.js) admin API -> 백엔드
    ADMIN_API_SECRET = os.getenv("ADMIN_API_SECRET", "").strip()
    # 외부 스케줄러 -> /internal/cron/*
    CRON_SECRET = os.getenv("CRON_SECRET", "").strip()
    # 메시지 파이프라인(WhatsApp 웹훅) -> /internal/messages/*
    INTERNAL_API_SECRET = os.getenv("INTERNAL_API_SECRET", "").strip()

    # -------------------------
    # 크레딧 리셋 워커
    # -------------------------
    CREDIT_RESET_POLL_SECONDS = int(os.getenv("CREDIT_RESET_POLL_SECONDS", "300"))

    # 요청 본문 상한
    MAX_CONTENT_LENGTH = 256 * 1024