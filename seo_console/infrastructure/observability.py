"""Structured Logging: formatters and setup for the stub server.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Request fields (site_id, method, path, status_code, duration_ms) and
      error_code surfaced when present, in both JSON and text output
    - setup_logging owns exactly one root handler; calling it again
      replaces that handler instead of stacking another
    - uvicorn's own loggers propagate to the root handler, so server and
      application lines share one format

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called once per app start via lifespan
"""

import logging
import json
from datetime import datetime, timezone

REQUEST_FIELDS = (
    "site_id", "method", "path", "status_code", "duration_ms", "error_code",
)
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def request_fields(record: logging.LogRecord) -> dict:
    """Request fields attached to record via `extra=`, skipping unset ones."""
    return {
        key: record.__dict__[key]
        for key in REQUEST_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **request_fields(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Human-readable lines with request fields appended as key=value."""

    def __init__(self):
        super().__init__(TEXT_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = request_fields(record)
        if not fields:
            return line
        return line + " [" + " ".join(f"{k}={v}" for k, v in fields.items()) + "]"


class _ConsoleHandler(logging.StreamHandler):
    """Marker type so setup_logging can find the handler it installed."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging for the application and the uvicorn server."""
    for old in [h for h in logging.root.handlers if isinstance(h, _ConsoleHandler)]:
        logging.root.removeHandler(old)
    handler = _ConsoleHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
    return handler
