"""Module-level output functions and the ``out`` namespace.

Each function delegates to a process default Formatter. The default is
built from ``load_config()`` on first use, or installed explicitly with
``configure()`` at startup.

Usage:
    from tana_stdio import out

    out.log("build", "compiling contract...")
    out.success("build complete")
"""

from collections.abc import Iterable
from types import SimpleNamespace
from typing import NoReturn

from tana_stdio.config.loader import load_config
from tana_stdio.config.models import OutputConfig
from tana_stdio.observability.logging import get_logger
from tana_stdio.output.formatter import Formatter, NextStep

_formatter: Formatter | None = None


def configure(config: OutputConfig | None = None) -> Formatter:
    """Install the default Formatter.

    Args:
        config: Output configuration. If None, loads it with load_config().

    Returns:
        The newly installed Formatter.
    """
    global _formatter

    if config is None:
        config = load_config()

    _formatter = Formatter.from_config(config)
    get_logger(__name__).debug(
        "stdio.formatter.configured",
        color=config.color.value,
        stream=config.stream.value,
    )
    return _formatter


def get_formatter() -> Formatter:
    """Get the default Formatter, configuring it on first use."""
    if _formatter is None:
        return configure()
    return _formatter


def reset() -> None:
    """Drop the default Formatter so the next call reconfigures."""
    global _formatter
    _formatter = None


def log(action: str, value: str) -> None:
    """[action] value"""
    get_formatter().log(action, value)


def error(action: str, message: str) -> None:
    """[action] message, message in red."""
    get_formatter().error(action, message)


def warn(action: str, message: str) -> None:
    """[action] message, message in yellow."""
    get_formatter().warn(action, message)


def status(name: str, message: str, ok: bool) -> None:
    """● [name] message, green when ok, red otherwise."""
    get_formatter().status(name, message, ok)


def header(title: str) -> None:
    get_formatter().header(title)


def blank() -> None:
    get_formatter().blank()


def success(message: str) -> None:
    get_formatter().success(message)


def fail(message: str) -> None:
    get_formatter().fail(message)


def info(label: str, value: str) -> None:
    get_formatter().info(label, value)


def hint(message: str) -> None:
    get_formatter().hint(message)


def detail(message: str) -> None:
    get_formatter().detail(message)


def fatal(action: str, message: str) -> NoReturn:
    """Log an error and exit with status 1. Never returns."""
    get_formatter().fatal(action, message)


def next_step(description: str, command: str) -> None:
    get_formatter().next_step(description, command)


def next_steps(steps: Iterable[NextStep | tuple[str, str]]) -> None:
    get_formatter().next_steps(steps)


def diagnostic(component: str, message: str) -> None:
    get_formatter().diagnostic(component, message)


# Namespace export for a single import handle
out = SimpleNamespace(
    log=log,
    error=error,
    warn=warn,
    status=status,
    header=header,
    blank=blank,
    success=success,
    fail=fail,
    info=info,
    hint=hint,
    detail=detail,
    fatal=fatal,
    next_step=next_step,
    next_steps=next_steps,
    diagnostic=diagnostic,
)
