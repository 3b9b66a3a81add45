# tests/conftest.py
from datetime import datetime

import pytest

from app import create_app
from domain.models import db, User
from utils.time_utils import utc_to_ms

ADMIN_SECRET = "admin-secret"
CRON_SECRET = "cron-secret"
INTERNAL_SECRET = "internal-secret"


def ms(iso: str) -> int:
    """'2024-01-15T08:00:00Z' -> epoch ms"""
    return utc_to_ms(datetime.fromisoformat(iso.replace("Z", "+00:00")))


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
        "ADMIN_API_SECRET": ADMIN_SECRET,
        "CRON_SECRET": CRON_SECRET,
        "INTERNAL_API_SECRET": INTERNAL_SECRET,
    })
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(app):
    def _make(phone, **kw):
        u = User(phone=phone, **kw)
        db.session.add(u)
        db.session.commit()
        return u
    return _make
