"""Process-wide logging setup for the CLI.

Module loggers (``logging.getLogger(__name__)``) stay unconfigured until
``setup_logging`` installs a single stderr handler on the root logger.
"""

import json
import logging
from datetime import datetime, timezone

from stockorders.infrastructure.config import Settings

PLAIN_FORMAT = "%(asctime)s %(levelname)-7s %(name)s - %(message)s"

# Driver loggers that narrate every statement at DEBUG.
_NOISY_LOGGERS = ("aiosqlite", "sqlalchemy.pool")


class JsonFormatter(logging.Formatter):
    """One JSON object per line.

    A failed ``Result`` logged with ``extra={"error_code": ...}`` keeps its
    code as a separate field.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        error_code = getattr(record, "error_code", None)
        if error_code is not None:
            payload["error_code"] = error_code
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def resolve_level(name: str) -> int:
    """Map a level name from settings to a logging level; unknown names fall back to WARNING."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(settings: Settings) -> None:
    level = resolve_level(settings.LOG_LEVEL)

    handler = logging.StreamHandler()
    if settings.LOG_JSON:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(fmt=PLAIN_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.INFO))
