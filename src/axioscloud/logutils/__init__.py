"""axioscloud logging infrastructure.

Usage:
    from axioscloud.logutils import get_logger, with_context

    logger = get_logger(__name__)

    with with_context(operation="get", service="GET_NOTE_MASTER"):
        logger.info("Requesting notes")

    # With extra structured data
    logger.info("Decoded response", extra={"extra_data": {"items": 42}})
"""

from .config import Environment, LogConfig, detect_environment, get_config, reset_config, set_config
from .context import ContextManager, LogContext, clear_context, get_context, with_context
from .formatters import CompactFormatter, JSONFormatter, StandardFormatter
from .handlers import RichConsoleHandler, StreamHandlerWithFlush
from .logger import get_logger, reset_logging
from .masking import MASK, is_sensitive_key, mask_dict, mask_sensitive_string

__all__ = [
    # Core logger functions
    "get_logger",
    "reset_logging",
    # Context management
    "with_context",
    "get_context",
    "clear_context",
    "LogContext",
    "ContextManager",
    # Configuration
    "LogConfig",
    "Environment",
    "detect_environment",
    "get_config",
    "set_config",
    "reset_config",
    # Formatters and handlers
    "JSONFormatter",
    "StandardFormatter",
    "CompactFormatter",
    "RichConsoleHandler",
    "StreamHandlerWithFlush",
    # Masking
    "mask_sensitive_string",
    "mask_dict",
    "is_sensitive_key",
    "MASK",
]
