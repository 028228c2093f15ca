"""Structured Logging — JSON and key=value formatters for Storefront request logs.

Invariants:
    - Every record carries timestamp, level, logger name, and message
    - Request fields (path, threshold, operation, error_code) and result fields
      (total_price, product_count, product_id) surfaced only when set via extra=
    - setup_logging is idempotent: a second call replaces the handler it installed
    - SQLAlchemy engine echo stays at WARNING unless the app runs at DEBUG

Design Decisions:
    - stdlib logging with a custom Formatter, no logging dependency
    - Same field list drives both formats so JSON and text never diverge
"""

import logging
import json
from datetime import datetime, timezone

LOG_FIELDS = (
    "path", "threshold", "operation", "error_code",
    "total_price", "product_count", "product_id",
)

_HANDLER_NAME = "storefront"


def _fields(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in LOG_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per record, for log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_fields(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class KeyValueFormatter(logging.Formatter):
    """Human-readable line with request fields appended as key=value."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        pairs = " ".join(f"{k}={v}" for k, v in _fields(record).items())
        return f"{line} [{pairs}]" if pairs else line


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure root logging for the application."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else KeyValueFormatter())
    root.addHandler(handler)

    resolved = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(resolved)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if resolved <= logging.DEBUG else logging.WARNING,
    )
