# app/middlewares/logging.py

import logging
import sys
import requests
from app.core.config import settings

BETTERSTACK_INGEST_URL = "https://in.logs.betterstack.com"


class LogtailHandler(logging.Handler):
    """Ships formatted records to Better Stack over HTTP."""

    def emit(self, record):
        log_entry = self.format(record)
        try:
            response = requests.post(
                BETTERSTACK_INGEST_URL,
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {settings.BETTERSTACK_API_KEY}",
                },
                json={
                    "dt": record.created,
                    "message": log_entry,
                    "level": record.levelname,
                },
                timeout=3,
            )
            if response.status_code >= 300:
                sys.stderr.write(f"❌ BetterStack logging failed: {response.text}\n")
        except requests.RequestException:
            self.handleError(record)


def setup_logging(level: int = logging.INFO):
    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers = []

    formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
    )

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if settings.ENV == "production" and settings.BETTERSTACK_API_KEY:
        logtail_handler = LogtailHandler()
        logtail_handler.setFormatter(formatter)
        logger.addHandler(logtail_handler)

    logger.info("✅ Logging system initialized")
