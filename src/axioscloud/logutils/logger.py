"""Logger factory for axioscloud modules."""

from __future__ import annotations

import logging
import sys

from .config import LogConfig, get_config
from .formatters import CompactFormatter, JSONFormatter, StandardFormatter
from .handlers import RichConsoleHandler, StreamHandlerWithFlush

# Track configured loggers
_configured_loggers: set[str] = set()


def get_logger(name: str | None = None, config: LogConfig | None = None) -> logging.Logger:
    """Get a configured logger instance.

    Handlers are attached once per logger name; later calls return the same
    logger untouched.

    Args:
        name: Logger name (usually __name__)
        config: Optional LogConfig to use instead of the global one

    Returns:
        Configured Logger instance
    """
    logger = logging.getLogger(name)
    key = name or "root"

    if key not in _configured_loggers:
        _configure_logger(logger, config or get_config())
        _configured_loggers.add(key)

    return logger


def _configure_logger(logger: logging.Logger, config: LogConfig) -> None:
    level = config.module_levels.get(logger.name, config.level)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    logger.handlers.clear()
    if logger.name != "root":
        logger.propagate = False

    logger.addHandler(_create_handler(config))


def _create_handler(config: LogConfig) -> logging.Handler:
    handler: logging.Handler
    if config.json_format:
        handler = StreamHandlerWithFlush(sys.stderr)
        handler.setFormatter(
            JSONFormatter(mask_sensitive=config.mask_sensitive, extra_fields=config.extra_fields)
        )
    elif config.use_rich:
        handler = RichConsoleHandler()
        handler.setFormatter(CompactFormatter(mask_sensitive=config.mask_sensitive))
    else:
        handler = StreamHandlerWithFlush(sys.stderr)
        handler.setFormatter(StandardFormatter(mask_sensitive=config.mask_sensitive))
    return handler


def reset_logging() -> None:
    """Drop handlers from every configured logger so they are rebuilt on next use."""
    for name in _configured_loggers:
        logging.getLogger(None if name == "root" else name).handlers.clear()
    _configured_loggers.clear()
