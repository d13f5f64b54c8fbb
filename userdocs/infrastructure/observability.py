"""Structured Logging — JSON formatter and setup for the API process.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (method, path, status_code, error_code, user_id) surfaced when present
    - JSON format by default, human-readable with LOG_FORMAT=text

Design Decisions:
    - setup_logging called once on startup via lifespan
    - Handler installed at most once, so repeated app startups (tests) don't duplicate output
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = ("method", "path", "status_code", "error_code", "user_id")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure root logging for the application."""
    handler = next(
        (h for h in logging.root.handlers if getattr(h, "_userdocs", False)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler._userdocs = True
        logging.root.addHandler(handler)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
