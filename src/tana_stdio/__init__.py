"""tana-stdio - Terminal output utilities for Tana projects.

Consistent formatting across CLI, engine, and plugins.

Format: [action] value
- Cyan brackets for identifiers
- Green dot for success, red dot for failure
- Red text for errors, yellow for warnings

Example:
    # Using Python
    from tana_stdio import out

    out.log("build", "compiling contract...")
    out.status("database", "connected", True)
    out.fatal("build", "compilation failed")  # exits with status 1

    # Using CLI
    tana-stdio log build "compiling contract..."
"""

from tana_stdio.config import ColorMode, OutputConfig, OutputStream, load_config
from tana_stdio.core.errors import ConfigError, StdioError
from tana_stdio.output import Formatter, NextStep, Styler
from tana_stdio.stdio import (
    blank,
    configure,
    detail,
    diagnostic,
    error,
    fail,
    fatal,
    get_formatter,
    header,
    hint,
    info,
    log,
    next_step,
    next_steps,
    out,
    status,
    success,
    warn,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "main",
    "ColorMode",
    "ConfigError",
    "Formatter",
    "NextStep",
    "OutputConfig",
    "OutputStream",
    "StdioError",
    "Styler",
    "blank",
    "configure",
    "detail",
    "diagnostic",
    "error",
    "fail",
    "fatal",
    "get_formatter",
    "header",
    "hint",
    "info",
    "load_config",
    "log",
    "next_step",
    "next_steps",
    "out",
    "status",
    "success",
    "warn",
]


def main() -> None:
    """Main entry point for the tana-stdio CLI."""
    from tana_stdio.cli.main import app

    app()
