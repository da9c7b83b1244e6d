"""Exceptions raised by tana-stdio.

Rendering never raises. Only setting up output can fail, when the
configuration file or environment holds something unusable.
"""

from collections.abc import Iterable


class StdioError(Exception):
    """Base class for tana-stdio errors."""


class ConfigError(StdioError):
    """Output configuration could not be loaded.

    Attributes:
        message: Headline describing what went wrong.
        config_file: File being read, if any.
        errors: One entry per rejected field, as ``"<field>: <reason>"``.
    """

    def __init__(
        self,
        message: str,
        *,
        config_file: str | None = None,
        errors: Iterable[str] = (),
    ) -> None:
        super().__init__(message)
        self.message = message
        self.config_file = config_file
        self.errors = list(errors)

    def __str__(self) -> str:
        return "\n".join([self.message, *(f"  - {error}" for error in self.errors)])
