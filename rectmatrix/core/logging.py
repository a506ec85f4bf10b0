"""
Structured logging configuration.

The library only creates loggers; handlers are installed by the
application, optionally through ``setup_logging``.
"""

import sys
import logging
from typing import Any, Dict
from datetime import datetime, timezone
import json
from pathlib import Path

from .config import get_settings


class StructuredFormatter(logging.Formatter):
    """JSON structured log formatter"""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON"""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Add extra fields
        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        return json.dumps(log_data, default=repr)


class TextFormatter(logging.Formatter):
    """Human-readable text log formatter"""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )


def setup_logging() -> None:
    """Configure the ``rectmatrix`` logger hierarchy from settings"""
    settings = get_settings()

    # Determine log level
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.WARNING)

    # Create formatter
    if settings.LOG_FORMAT == "json":
        formatter = StructuredFormatter()
    else:
        formatter = TextFormatter()

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)

    handlers: list[logging.Handler] = [console_handler]

    # File handler (if configured)
    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        handlers.append(file_handler)

    # Replace handlers on the package logger, leaving the root logger alone
    package_logger = logging.getLogger("rectmatrix")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        package_logger.addHandler(handler)
    package_logger.setLevel(log_level)


def get_logger(name: str) -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)


class LoggerAdapter(logging.LoggerAdapter):
    """Enhanced logger with structured context"""

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        """Add context to log messages"""
        # Extract extra data
        extra_data = kwargs.pop("extra_data", {})

        # Add to record
        if "extra" not in kwargs:
            kwargs["extra"] = {}

        kwargs["extra"]["extra_data"] = {
            **self.extra,
            **extra_data
        }

        return msg, kwargs


def get_context_logger(name: str, **context) -> LoggerAdapter:
    """Get logger with permanent context"""
    logger = get_logger(name)
    return LoggerAdapter(logger, context)


logging.getLogger("rectmatrix").addHandler(logging.NullHandler())
