"""Structured logging configuration for tana-stdio.

The formatted lines themselves are plain terminal output and never pass
through here. This module only covers the library's own diagnostics
(configuration loading, formatter setup, the fatal path), written to
stderr so they never interleave with formatted stdout.

Features:
- ISO 8601 timestamps
- Log level in all entries
- Mode selection via environment variable or config

Event naming convention:
- Use dot.notation (e.g., "config.loaded", "stdio.fatal.exiting")
- Format: domain.entity.verb_past_tense

Usage:
    from tana_stdio.observability import configure_logging, get_logger

    configure_logging(LoggingConfig(mode=LogMode.PROD, log_level="DEBUG"))

    log = get_logger()
    log.debug("config.loaded", color="auto", stream="stdout")
"""

from __future__ import annotations

from enum import Enum
import logging
import os
import sys
from typing import Any

from pydantic import BaseModel, Field
import structlog


class LogMode(str, Enum):
    """Logging output mode."""

    DEV = "dev"
    PROD = "prod"


class LoggingConfig(BaseModel):
    """Configuration for diagnostic logging.

    Attributes:
        mode: Output mode (dev for human-readable, prod for JSON).
        log_level: Minimum log level to output. Defaults to WARNING so the
            library stays quiet inside host tools.
    """

    mode: LogMode = Field(default=LogMode.DEV)
    log_level: str = Field(default="WARNING")

    model_config = {"frozen": True}


# Module-level state for tracking configuration
_configured: bool = False
_current_config: LoggingConfig | None = None


def _get_config_from_env() -> LoggingConfig:
    """Build a logging config from environment variables.

    Returns:
        LoggingConfig based on TANA_STDIO_LOG_MODE and TANA_STDIO_LOG_LEVEL.
        Unknown modes fall back to DEV.
    """
    env_mode = os.environ.get("TANA_STDIO_LOG_MODE", "dev").lower()
    mode = LogMode.PROD if env_mode == "prod" else LogMode.DEV
    log_level = os.environ.get("TANA_STDIO_LOG_LEVEL", "WARNING")
    return LoggingConfig(mode=mode, log_level=log_level)


def _get_log_level(level_str: str) -> int:
    """Convert log level string to logging constant.

    Args:
        level_str: Log level as string (e.g., "INFO", "DEBUG").

    Returns:
        Logging constant (e.g., logging.INFO). Unknown names map to WARNING.
    """
    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return level_map.get(level_str.upper(), logging.WARNING)


def _get_processors(mode: LogMode) -> list[Any]:
    """Get the processor chain for diagnostic output.

    Args:
        mode: Logging output mode.

    Returns:
        List of structlog processors including renderer.
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if mode == LogMode.DEV:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    else:
        processors.append(structlog.processors.JSONRenderer())

    return processors


class _StderrPrintLogger:
    """Print logger bound to whatever sys.stderr is at call time.

    Resolving the stream lazily keeps redirected or captured stderr
    (test runners, CliRunner) working after configuration.
    """

    def msg(self, message: str) -> None:
        """Write one rendered entry to stderr."""
        print(message, file=sys.stderr, flush=True)

    def __call__(self, message: str) -> None:
        """Log a message (alias for msg)."""
        self.msg(message)

    debug = info = warning = warn = error = critical = fatal = exception = msg


def _logger_factory(*_args: Any) -> _StderrPrintLogger:
    return _StderrPrintLogger()


def configure_logging(config: LoggingConfig | None = None) -> None:
    """Configure structlog for tana-stdio diagnostics.

    Args:
        config: Logging configuration. If None, the config is read from
               TANA_STDIO_LOG_MODE and TANA_STDIO_LOG_LEVEL.

    Example:
        configure_logging()
        configure_logging(LoggingConfig(mode=LogMode.PROD, log_level="DEBUG"))
    """
    global _configured, _current_config

    if config is None:
        config = _get_config_from_env()

    _current_config = config

    structlog.configure(
        processors=_get_processors(config.mode),
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level(config.log_level)),
        context_class=dict,
        logger_factory=_logger_factory,
        cache_logger_on_first_use=True,
    )

    _configured = True


def get_logger(name: str | None = None) -> Any:
    """Get a bound logger instance.

    If logging has not been configured, this will configure it from the
    environment.

    Args:
        name: Optional logger name.

    Returns:
        A bound structlog logger.
    """
    if not _configured:
        configure_logging()

    return structlog.get_logger(name)


def get_current_config() -> LoggingConfig | None:
    """Get the current logging configuration.

    Returns:
        The current LoggingConfig or None if not configured.
    """
    return _current_config


def is_configured() -> bool:
    """Check if logging has been configured."""
    return _configured


def reset_logging() -> None:
    """Reset logging configuration state.

    This is primarily for testing purposes.
    """
    global _configured, _current_config
    _configured = False
    _current_config = None
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()
