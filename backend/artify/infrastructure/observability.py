"""Structured Logging — one-line JSON records for the Artify API.

Invariants:
    - Every record carries timestamp (record creation time, UTC), level, logger, service, message
    - Artwork and user context (artwork_id, user_id, error_code, path, count) surfaced when set
    - setup_logging replaces its own handler on re-entry: repeated app startups log once

Design Decisions:
    - stdlib logging + a small Formatter: routes and services only ever call logging.getLogger
    - LOG_FORMAT=text for local development, json everywhere else
"""

import logging
import json
from datetime import datetime, timezone

SERVICE_NAME = "artify-api"
_EXTRA_KEYS = ("artwork_id", "user_id", "error_code", "path", "count")
_HANDLER_NAME = "artify"


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "service": SERVICE_NAME,
            "message": record.getMessage(),
        }
        log.update({
            key: record.__dict__[key]
            for key in _EXTRA_KEYS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the Artify handler on the root logger and return it."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
