"""Core types for tana-stdio."""

from tana_stdio.core.errors import ConfigError, StdioError

__all__ = ["ConfigError", "StdioError"]
