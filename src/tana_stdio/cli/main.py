"""tana-stdio CLI main entry point.

Each command writes one formatted line (or a small fixed set) using the
same Formatter the Python API uses.
"""

from pathlib import Path
from typing import Annotated

import typer

from tana_stdio import __version__, stdio
from tana_stdio.config import ColorMode, OutputConfig, OutputStream, load_config
from tana_stdio.core.errors import ConfigError
from tana_stdio.output import Formatter, NextStep

app = typer.Typer(
    name="tana-stdio",
    help="tana-stdio - Consistent terminal output for Tana tools",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        # Eager, so it runs before main() has loaded or validated config.
        Formatter.from_config(OutputConfig()).log("tana-stdio", __version__)
        raise typer.Exit()


@app.callback()
def main(
    color: Annotated[
        ColorMode | None,
        typer.Option("--color", help="Emit styling codes: auto, always or never."),
    ] = None,
    stderr: Annotated[
        bool,
        typer.Option("--stderr", help="Write to stderr instead of stdout."),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Path to a stdio.yaml configuration file."),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """tana-stdio - Consistent terminal output for Tana tools.

    Use [bold cyan]tana-stdio COMMAND --help[/] for command-specific help.
    """
    try:
        config = load_config(config_path)
    except ConfigError as e:
        Formatter.from_config(OutputConfig()).fatal("config", str(e))

    overrides: dict[str, object] = {}
    if color is not None:
        overrides["color"] = color
    if stderr:
        overrides["stream"] = OutputStream.STDERR
    if overrides:
        config = config.model_copy(update=overrides)

    stdio.configure(config)


@app.command("log")
def log_command(
    action: Annotated[str, typer.Argument(help="Action label shown in brackets.")],
    value: Annotated[str, typer.Argument(help="Value to report.")],
) -> None:
    """Print [action] value."""
    stdio.log(action, value)


@app.command("error")
def error_command(
    action: Annotated[str, typer.Argument(help="Action label shown in brackets.")],
    message: Annotated[str, typer.Argument(help="Error message, shown in red.")],
) -> None:
    """Print [action] message with the message in red."""
    stdio.error(action, message)


@app.command("warn")
def warn_command(
    action: Annotated[str, typer.Argument(help="Action label shown in brackets.")],
    message: Annotated[str, typer.Argument(help="Warning message, shown in yellow.")],
) -> None:
    """Print [action] message with the message in yellow."""
    stdio.warn(action, message)


@app.command("status")
def status_command(
    name: Annotated[str, typer.Argument(help="Component name shown in brackets.")],
    message: Annotated[str, typer.Argument(help="Status message.")],
    ok: Annotated[bool, typer.Option("--ok/--fail", help="Healthy or failing.")] = True,
) -> None:
    """Print a status line with a green or red dot."""
    stdio.status(name, message, ok)


@app.command("header")
def header_command(
    title: Annotated[str, typer.Argument(help="Section title.")],
) -> None:
    """Print a section header with a rule."""
    stdio.header(title)


@app.command("blank")
def blank_command() -> None:
    """Print a blank line."""
    stdio.blank()


@app.command("success")
def success_command(
    message: Annotated[str, typer.Argument(help="Success message.")],
) -> None:
    """Print ✓ message."""
    stdio.success(message)


@app.command("fail")
def fail_command(
    message: Annotated[str, typer.Argument(help="Failure message.")],
) -> None:
    """Print ✗ message."""
    stdio.fail(message)


@app.command("info")
def info_command(
    label: Annotated[str, typer.Argument(help="Label, padded to 10 columns.")],
    value: Annotated[str, typer.Argument(help="Value, shown in cyan.")],
) -> None:
    """Print an aligned label/value line."""
    stdio.info(label, value)


@app.command("hint")
def hint_command(
    message: Annotated[str, typer.Argument(help="Hint text.")],
) -> None:
    """Print an indented gray hint."""
    stdio.hint(message)


@app.command("detail")
def detail_command(
    message: Annotated[str, typer.Argument(help="Detail text.")],
) -> None:
    """Print an indented detail line with an arrow."""
    stdio.detail(message)


@app.command("fatal")
def fatal_command(
    action: Annotated[str, typer.Argument(help="Action label shown in brackets.")],
    message: Annotated[str, typer.Argument(help="Error message, shown in red.")],
) -> None:
    """Print an error and exit with status 1."""
    stdio.fatal(action, message)


@app.command("next-step")
def next_step_command(
    description: Annotated[str, typer.Argument(help="What the command does.")],
    command: Annotated[str, typer.Argument(help="Command to suggest.")],
) -> None:
    """Suggest a next step."""
    stdio.next_step(description, command)


@app.command("diagnostic")
def diagnostic_command(
    component: Annotated[str, typer.Argument(help="Component shown in brackets.")],
    message: Annotated[str, typer.Argument(help="Diagnostic message.")],
) -> None:
    """Print a ⚠ diagnostic warning."""
    stdio.diagnostic(component, message)


@app.command("demo")
def demo_command() -> None:
    """Print one line of every kind."""
    stdio.header("tana-stdio")
    stdio.log("build", "compiling contract...")
    stdio.success("build complete")
    stdio.fail("tests failed")
    stdio.error("deploy", "connection refused")
    stdio.warn("cache", "stale entries detected")
    stdio.status("database", "connected", True)
    stdio.status("queue", "unreachable", False)
    stdio.diagnostic("engine", "slow block time")
    stdio.info("port", "8506")
    stdio.hint("run with --color never for plain output")
    stdio.detail("see ~/.tana/stdio.yaml")
    stdio.blank()
    stdio.next_steps(
        [
            NextStep("start the server", "tana dev"),
            NextStep("deploy", "tana deploy"),
        ]
    )


__all__ = ["app", "main"]
