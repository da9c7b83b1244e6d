"""Observability module for tana-stdio.

Structured diagnostic logging via structlog:
configure_logging, get_logger, reset_logging.
"""

from tana_stdio.observability.logging import (
    LoggingConfig,
    LogMode,
    configure_logging,
    get_current_config,
    get_logger,
    is_configured,
    reset_logging,
)

__all__ = [
    "LogMode",
    "LoggingConfig",
    "configure_logging",
    "get_current_config",
    "get_logger",
    "is_configured",
    "reset_logging",
]
