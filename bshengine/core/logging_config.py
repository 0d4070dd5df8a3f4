from __future__ import annotations

import json
import logging
from datetime import UTC, datetime

from bshengine.observability.events import RECORD_FIELDS

SDK_LOGGER_NAME = "bshengine"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in RECORD_FIELDS:
            if hasattr(record, field):
                payload[field] = getattr(record, field)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(*, log_level: str, app_env: str) -> logging.Logger:
    """Attach a single handler to the ``bshengine`` logger.

    Only the SDK's own logger is touched so host applications keep control of
    the root logger.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    handler = logging.StreamHandler()
    if app_env.lower() == "production":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s %(message)s"))
    logger = logging.getLogger(SDK_LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(level)
    logger.addHandler(handler)
    return logger
