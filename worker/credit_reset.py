# worker/credit_reset.py
import time

from app import create_app
from services.credits import reset_credits
from utils.time_utils import now_ms


def run_once(app, now=None) -> int:
    with app.app_context():
        return reset_credits(now if now is not None else now_ms())


def run_loop():
    app = create_app()
    poll_seconds = app.config.get("CREDIT_RESET_POLL_SECONDS", 300)

    while True:
        try:
            run_once(app)
        except Exception:
            app.logger.exception("[credit-reset-worker] pass failed")
        time.sleep(poll_seconds)


if __name__ == "__main__":
    run_loop()
