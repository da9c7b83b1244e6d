"""Configuration module for tana-stdio.

Usage:
    from tana_stdio.config import load_config

    config = load_config()
    config.color  # ColorMode.AUTO
"""

from tana_stdio.config.loader import load_config
from tana_stdio.config.models import (
    ColorMode,
    OutputConfig,
    OutputStream,
    get_config_dir,
    get_default_config_path,
)

__all__ = [
    "ColorMode",
    "OutputConfig",
    "OutputStream",
    "get_config_dir",
    "get_default_config_path",
    "load_config",
]
