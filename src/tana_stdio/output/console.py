"""Console construction for formatted output."""

from rich.console import Console

from tana_stdio.config.models import ColorMode, OutputConfig, OutputStream


def create_console(config: OutputConfig | None = None) -> Console:
    """Create a Console that writes lines verbatim.

    Markup, emoji codes, highlighting and wrapping are all disabled so
    arguments such as ``[build]`` or ``:x:`` reach the terminal unchanged.
    The stream is resolved at write time, so redirected stdout/stderr
    keeps working.

    Args:
        config: Output configuration. Defaults to OutputConfig().

    Returns:
        Configured Rich Console.
    """
    if config is None:
        config = OutputConfig()

    stderr = config.stream == OutputStream.STDERR

    if config.color == ColorMode.ALWAYS:
        return Console(
            stderr=stderr,
            force_terminal=True,
            color_system="standard",
            no_color=False,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )
    if config.color == ColorMode.NEVER:
        return Console(
            stderr=stderr,
            color_system=None,
            no_color=True,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )
    return Console(
        stderr=stderr,
        color_system="auto",
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )
