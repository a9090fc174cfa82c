"""
Structured logging configuration.

Every log line is a single JSON object so that login attempts and
transfers can be grepped and shipped without parsing free text.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Optional

ROOT_LOGGER = "demo_bank"


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "user_id": getattr(record, "user_id", None),
            "action": getattr(record, "action", None),
            "resource": getattr(record, "resource", None),
            "details": getattr(record, "details", None),
        }

        # Remove None values
        log_entry = {k: v for k, v in log_entry.items() if v is not None}

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def setup_logging(level: str = "INFO", logger_name: str = ROOT_LOGGER) -> logging.Logger:
    """
    Attach a JSON console handler to the application logger.

    Safe to call more than once: existing handlers are replaced,
    not duplicated.
    """
    logger = logging.getLogger(logger_name)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())

    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False

    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)


def log_event(
    logger: logging.Logger,
    level: str,
    message: str,
    user_id: Optional[int] = None,
    action: Optional[str] = None,
    resource: Optional[str] = None,
    details: Optional[dict] = None,
):
    """Log a message with the structured fields JSONFormatter understands."""
    extra = {
        "user_id": user_id,
        "action": action,
        "resource": resource,
        "details": details,
    }
    getattr(logger, level.lower())(message, extra=extra)
