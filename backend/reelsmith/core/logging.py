"""
Structured logging configuration
Provides consistent logging across the service with:
- Structured JSON logging for production
- Human-readable logs for development
- Request and project correlation IDs
- Step timing
"""

import logging
import sys
import json
import os
from typing import Any, Dict, Optional
from datetime import datetime, UTC
from contextvars import ContextVar
from pathlib import Path
from logging.handlers import RotatingFileHandler

SENSITIVE_KEY_TOKENS = ("password", "secret", "token", "api_key", "apikey", "authorization")

# Context variables for correlation
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
project_id_var: ContextVar[Optional[str]] = ContextVar("project_id", default=None)

_STANDARD_ATTRS = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "getMessage",
    "message",
    "taskName",
}


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging in production"""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": _sanitize_for_logging("message", record.getMessage()),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        request_id = request_id_var.get()
        if request_id:
            log_data["request_id"] = request_id

        project_id = project_id_var.get()
        if project_id:
            log_data["project_id"] = project_id

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info),
            }

        # Anything passed through logger.info(..., extra={...}) lands on the record
        extra: Dict[str, Any] = {}
        for key, value in vars(record).items():
            if key in _STANDARD_ATTRS or key.startswith("_") or callable(value):
                continue
            extra[key] = value

        if extra:
            log_data["extra"] = _sanitize_for_logging("extra", extra)

        return json.dumps(log_data, default=str)


def _is_sensitive_key(key: str) -> bool:
    lowered = key.lower()
    return any(token in lowered for token in SENSITIVE_KEY_TOKENS)


def _sanitize_for_logging(key: str, value: Any) -> Any:
    if isinstance(value, dict):
        sanitized: Dict[str, Any] = {}
        for child_key, child_value in value.items():
            if _is_sensitive_key(str(child_key)):
                sanitized[child_key] = "***REDACTED***"
            else:
                sanitized[child_key] = _sanitize_for_logging(str(child_key), child_value)
        return sanitized

    if isinstance(value, list):
        return [_sanitize_for_logging(key, item) for item in value]

    if isinstance(value, tuple):
        return tuple(_sanitize_for_logging(key, item) for item in value)

    if isinstance(value, str) and _is_sensitive_key(key):
        return "***REDACTED***"

    return value


class DevelopmentFormatter(logging.Formatter):
    """Human-readable formatter for development"""

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        reset = self.COLORS['RESET']

        timestamp = datetime.fromtimestamp(record.created).strftime('%H:%M:%S.%f')[:-3]

        context_parts = []
        request_id = request_id_var.get()
        if request_id:
            context_parts.append(f"req:{request_id[:8]}")

        project_id = project_id_var.get()
        if project_id:
            context_parts.append(f"project:{project_id[:8]}")

        context = f" [{', '.join(context_parts)}]" if context_parts else ""

        log_line = (
            f"{color}{timestamp}{reset} "
            f"{color}{record.levelname:8s}{reset} "
            f"{record.name:30s}{context} "
            f"{record.getMessage()}"
        )

        if record.exc_info:
            log_line += "\n" + self.formatException(record.exc_info)

        return log_line


class LoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that adds extra context to all log messages"""

    def process(self, msg: str, kwargs: Any) -> tuple:
        if "extra" not in kwargs or kwargs["extra"] is None:
            kwargs["extra"] = {}

        request_id = request_id_var.get()
        if request_id:
            kwargs["extra"]["request_id"] = request_id

        project_id = project_id_var.get()
        if project_id:
            kwargs["extra"]["project_id"] = project_id

        if self.extra:
            kwargs["extra"].update(self.extra)

        return msg, kwargs


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    use_json: bool = False,
) -> None:
    """
    Configure application logging

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for logging to file
        use_json: If True, use structured JSON logging; otherwise human-readable
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)

    if use_json:
        console_handler.setFormatter(StructuredFormatter())
    else:
        console_handler.setFormatter(DevelopmentFormatter())

    root_logger.addHandler(console_handler)

    if log_file:
        log_max_bytes = int(os.getenv("LOG_MAX_BYTES", str(20 * 1024 * 1024)))
        log_backup_count = int(os.getenv("LOG_BACKUP_COUNT", "5"))
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=log_max_bytes,
            backupCount=log_backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(StructuredFormatter())  # Always use JSON for file logs
        root_logger.addHandler(file_handler)

    # Suppress noisy third-party loggers
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("google_genai").setLevel(logging.WARNING)


def get_logger(name: str, **extra: Any) -> LoggerAdapter:
    """
    Get a logger with optional extra context

    Args:
        name: Logger name (usually __name__)
        **extra: Additional context to include in all log messages

    Returns:
        LoggerAdapter with the specified context

    Example:
        logger = get_logger(__name__, component="media")
        logger.info("Image generated", extra={"segment_index": 2})
    """
    logger = logging.getLogger(name)
    return LoggerAdapter(logger, extra)


def set_request_id(request_id: str) -> None:
    """Set request ID for correlation across log messages"""
    request_id_var.set(request_id)


def set_project_id(project_id: str) -> None:
    """Set project ID for correlation across log messages"""
    project_id_var.set(project_id)


def clear_context() -> None:
    """Clear correlation context"""
    request_id_var.set(None)
    project_id_var.set(None)


class LogTimer:
    """Context manager for timing operations with automatic logging"""

    def __init__(self, logger: logging.LoggerAdapter, operation: str, level: int = logging.INFO):
        self.logger = logger
        self.operation = operation
        self.level = level
        self.start_time: Optional[float] = None
        self.duration: Optional[float] = None

    def __enter__(self) -> "LogTimer":
        self.start_time = datetime.now().timestamp()
        self.logger.log(self.level, f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, _exc_tb) -> None:
        self.duration = datetime.now().timestamp() - self.start_time

        if exc_type:
            self.logger.error(
                f"Failed: {self.operation}",
                extra={"duration_seconds": self.duration, "error": str(exc_val)},
                exc_info=(exc_type, exc_val, _exc_tb),
            )
        else:
            self.logger.log(
                self.level,
                f"Completed: {self.operation}",
                extra={"duration_seconds": self.duration},
            )
