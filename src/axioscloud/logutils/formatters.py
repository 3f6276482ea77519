"""Log formatters: JSON lines for machines, one-liners for humans."""

from __future__ import annotations

import json
import logging
import traceback
from datetime import datetime, timezone
from typing import Any

from .context import get_context
from .masking import mask_dict, mask_sensitive_string


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging output."""

    def __init__(
        self,
        mask_sensitive: bool = True,
        extra_fields: dict[str, Any] | None = None,
    ) -> None:
        super().__init__()
        self.mask_sensitive = mask_sensitive
        self.extra_fields = extra_fields or {}

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if self.mask_sensitive:
            message = mask_sensitive_string(message)

        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": message,
            "context": get_context().to_dict(),
        }

        if record.exc_info and record.exc_info[0]:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": "".join(traceback.format_exception(*record.exc_info)),
            }

        extra = getattr(record, "extra_data", None)
        if extra:
            if self.mask_sensitive and isinstance(extra, dict):
                extra = mask_dict(extra)
            log_data["extra"] = extra

        log_data.update(self.extra_fields)
        return json.dumps(log_data, default=str, ensure_ascii=False)


class CompactFormatter(logging.Formatter):
    """Compact formatter for CLI output.

    Format: MESSAGE [key=value ...]
    """

    def __init__(self, mask_sensitive: bool = True) -> None:
        super().__init__()
        self.mask_sensitive = mask_sensitive

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()

        extra = getattr(record, "extra_data", None)
        if isinstance(extra, dict) and extra:
            if self.mask_sensitive:
                extra = mask_dict(extra)
            message += " " + " ".join(f"{k}={v}" for k, v in extra.items())

        if self.mask_sensitive:
            message = mask_sensitive_string(message)
        return message


class StandardFormatter(CompactFormatter):
    """Plain-text formatter with timestamp, level, logger and correlation id."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        correlation_id = get_context().correlation_id[:8]
        line = f"{timestamp} - {record.levelname} - {record.name} - [{correlation_id}] - "
        line += super().format(record)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line
