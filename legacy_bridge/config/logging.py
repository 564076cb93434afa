"""
Structured logging configuration.
Outputs logs in JSON format for production observability.
"""
import json
import logging
import sys
from typing import Optional

# Extra attributes copied from the record when middleware/services set them
_CONTEXT_FIELDS = ("method", "path", "status_code", "duration_ms", "endpoint", "cache_key")


class JsonFormatter(logging.Formatter):
    """Format log records as JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the record as JSON."""
        log_obj = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add exception info if present
        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        # Add request context if present (e.g. from middleware)
        for field in _CONTEXT_FIELDS:
            if hasattr(record, field):
                log_obj[field] = getattr(record, field)

        return json.dumps(log_obj, default=str)


def configure_logging(debug: bool = False, level: Optional[str] = None) -> None:
    """Configure root logger with JSON formatter."""
    handler = logging.StreamHandler(sys.stdout)

    if debug:
        # Human-readable format for debugging
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
        )
    else:
        # JSON format for production
        formatter = JsonFormatter()

    handler.setFormatter(formatter)

    if debug:
        root_level = logging.DEBUG
    else:
        root_level = logging.getLevelName((level or "INFO").upper())
        if not isinstance(root_level, int):
            root_level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(root_level)

    # Reduce noise
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").handlers = [handler]  # Use our handler
    logging.getLogger("httpx").setLevel(logging.WARNING)
