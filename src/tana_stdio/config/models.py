"""Pydantic models for tana-stdio configuration.

Classes:
    ColorMode: When styling codes are emitted
    OutputStream: Which standard stream formatted lines go to
    OutputConfig: Top-level output configuration
"""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class ColorMode(str, Enum):
    """Styling capability policy.

    AUTO defers to terminal detection, ALWAYS forces 16-colour codes,
    NEVER emits plain text.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class OutputStream(str, Enum):
    """Destination stream for formatted lines."""

    STDOUT = "stdout"
    STDERR = "stderr"


class OutputConfig(BaseModel, frozen=True):
    """Configuration for terminal output.

    Attributes:
        color: Styling capability policy.
        stream: Standard stream formatted lines are written to.
    """

    color: ColorMode = Field(default=ColorMode.AUTO)
    stream: OutputStream = Field(default=OutputStream.STDOUT)


def get_config_dir() -> Path:
    """Get the Tana configuration directory path.

    Returns:
        Path to ~/.tana/
    """
    return Path.home() / ".tana"


def get_default_config_path() -> Path:
    """Get the default output configuration file path.

    Returns:
        Path to ~/.tana/stdio.yaml
    """
    return get_config_dir() / "stdio.yaml"
