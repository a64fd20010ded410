"""
Structured logging for the marketplace search service.

JSON lines for log aggregation (Loki) in deployed environments, a compact
console format for local development. Every record carries the trace id of
the request being served, set by the API's tracing middleware.

Usage:
    from observability import setup_logging, get_logger

    setup_logging(service_name="api")
    logger = get_logger(__name__)
    logger.info("Equipment search", extra={"result_count": 12, "location": "chennai"})

JSON output:
    {"timestamp": "2025-12-01T00:45:00.123456+00:00", "level": "INFO", "service": "api",
     "logger": "marketplace_api.routers.equipment_search", "message": "Equipment search",
     "trace_id": "abc123", "result_count": 12, "location": "chennai"}
"""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Optional

_trace_id: ContextVar[Optional[str]] = ContextVar("trace_id", default=None)

# Attributes every LogRecord has; anything else arrived through `extra`
_RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "trace_id"}


def get_trace_id() -> Optional[str]:
    return _trace_id.get()


def set_trace_id(trace_id: str) -> None:
    _trace_id.set(trace_id)


def clear_trace_id() -> None:
    _trace_id.set(None)


def _extra_fields(record: logging.LogRecord) -> dict:
    return {k: v for k, v in vars(record).items() if k not in _RESERVED and not k.startswith("_")}


class TraceIdFilter(logging.Filter):
    """Stamp the current request's trace id onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = get_trace_id()
        return True


class JSONFormatter(logging.Formatter):
    """One JSON object per line with the standard fields first."""

    def __init__(self, service_name: str = "unknown"):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "service": self.service_name,
            "logger": record.name,
            "message": record.getMessage(),
        }

        trace_id = getattr(record, "trace_id", None)
        if trace_id:
            entry["trace_id"] = trace_id

        if record.levelno >= logging.ERROR:
            entry["source_location"] = f"{record.pathname}:{record.lineno} in {record.funcName}"
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        # Extra fields never override the standard ones
        for key, value in _extra_fields(record).items():
            entry.setdefault(key, value)

        return json.dumps(entry, ensure_ascii=False, default=str)


class ConsoleFormatter(logging.Formatter):
    """
    Human-readable formatter for local development.

    Format: [LEVEL] service/logger [trace]: message {key=value, ...}
    """

    LEVEL_COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }

    def __init__(self, service_name: str = "unknown", use_colors: Optional[bool] = None):
        super().__init__()
        self.service_name = service_name
        self.use_colors = sys.stderr.isatty() if use_colors is None else use_colors

    def format(self, record: logging.LogRecord) -> str:
        level = record.levelname
        if self.use_colors and level in self.LEVEL_COLORS:
            level = f"{self.LEVEL_COLORS[level]}{level}\033[0m"

        trace_id = getattr(record, "trace_id", None)
        line = f"[{level}] {self.service_name}/{record.name.rsplit('.', 1)[-1]}"
        if trace_id:
            line += f" [{trace_id[:8]}]"
        line += f": {record.getMessage()}"

        extra = _extra_fields(record)
        if extra:
            line += " {" + ", ".join(f"{k}={v}" for k, v in extra.items()) + "}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(
    service_name: str,
    level: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> None:
    """
    Install the service's log handler on the root logger.

    Args:
        service_name: Name of the service (e.g., "api")
        level: Log level name. Defaults to settings.LOG_LEVEL.
        json_format: JSON output. Defaults to True unless settings.LOG_FORMAT is "console".
    """
    if level is None or json_format is None:
        from config.settings import settings

        level = level or settings.LOG_LEVEL
        if json_format is None:
            json_format = settings.LOG_FORMAT.lower() != "console"

    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.addFilter(TraceIdFilter())
    handler.setFormatter(
        JSONFormatter(service_name) if json_format else ConsoleFormatter(service_name)
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    # Quiet noisy libraries
    for name in ("asyncio", "sqlalchemy.engine", "uvicorn.access"):
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging initialized",
        extra={"log_level": logging.getLevelName(log_level), "json_format": json_format},
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class LogContext:
    """
    Set the trace id for a block outside of request handling.

    Usage:
        with LogContext(trace_id="startup"):
            logger.info("Building location registry")
    """

    def __init__(self, trace_id: str):
        self.trace_id = trace_id
        self._token = None

    def __enter__(self):
        self._token = _trace_id.set(self.trace_id)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        _trace_id.reset(self._token)
        return False
