"""Structured Logging — JSON and text formatters carrying ledger context.

Invariants:
    - Every line has timestamp (record creation time, UTC), level, logger, message
    - Ledger fields (account, operation, course_id, error_code, reason,
      sequence_number, path) are emitted when passed via `extra`
    - setup_logging is idempotent: calling it again replaces our handler

Design Decisions:
    - stdlib logging + a small JSONFormatter: no extra dependency
    - Text format appends the same ledger fields as key=value, so local logs and
      production logs carry identical information
"""

import json
import logging
from datetime import datetime, timezone

LEDGER_LOG_FIELDS = (
    "account", "operation", "course_id", "error_code",
    "reason", "sequence_number", "path",
)

_HANDLER_NAME = "elearn"


def _ledger_fields(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key] for key in LEDGER_LOG_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line for log aggregation."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_ledger_fields(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class LedgerTextFormatter(logging.Formatter):
    """Human-readable lines for local development."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = _ledger_fields(record)
        if fields:
            line += " " + " ".join(f"{k}={v}" for k, v in fields.items())
        return line


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else LedgerTextFormatter())
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
