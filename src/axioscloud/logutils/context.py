"""Per-call logging context carried in a contextvar.

Each API call runs inside ``with_context(...)`` so that every log line it
produces (transport, decode failures) shares one correlation id and names the
vendor service being called.
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any


@dataclass
class LogContext:
    """Holds contextual information for logging."""

    correlation_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    operation: str | None = None
    service: str | None = None
    codice_fiscale: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert context to dictionary for log enrichment."""
        result: dict[str, Any] = {"correlation_id": self.correlation_id}
        if self.operation:
            result["operation"] = self.operation
        if self.service:
            result["service"] = self.service
        if self.codice_fiscale:
            result["codice_fiscale"] = self.codice_fiscale
        result.update(self.extra)
        return result


_log_context: ContextVar[LogContext | None] = ContextVar("axioscloud_log_context", default=None)


def get_context() -> LogContext:
    """Get the current log context, creating a new one if none exists."""
    ctx = _log_context.get()
    if ctx is None:
        ctx = LogContext()
        _log_context.set(ctx)
    return ctx


def clear_context() -> None:
    """Clear the current log context."""
    _log_context.set(None)


class ContextManager:
    """Installs a fresh log context for the duration of a ``with`` block."""

    def __init__(
        self,
        correlation_id: str | None = None,
        operation: str | None = None,
        service: str | None = None,
        codice_fiscale: str | None = None,
        **extra: Any,
    ) -> None:
        self.new_context = LogContext(
            correlation_id=correlation_id or str(uuid.uuid4()),
            operation=operation,
            service=service,
            codice_fiscale=codice_fiscale,
            extra=extra,
        )
        self._token: Any = None

    def __enter__(self) -> LogContext:
        self._token = _log_context.set(self.new_context)
        return self.new_context

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        _log_context.reset(self._token)


def with_context(
    correlation_id: str | None = None,
    operation: str | None = None,
    service: str | None = None,
    codice_fiscale: str | None = None,
    **extra: Any,
) -> ContextManager:
    """Create a context manager with the specified logging context.

    Usage:
        with with_context(operation="get", service="GET_VOTI_LIST_DETAIL"):
            logger.info("Requesting grades")
    """
    return ContextManager(
        correlation_id=correlation_id,
        operation=operation,
        service=service,
        codice_fiscale=codice_fiscale,
        **extra,
    )
