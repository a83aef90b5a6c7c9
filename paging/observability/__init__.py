"""
Observability module.

Provides logging configuration and structured logging helpers.
"""

from paging.observability.log_utils import log_with_context, safe_log_value
from paging.observability.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger", "log_with_context", "safe_log_value"]
