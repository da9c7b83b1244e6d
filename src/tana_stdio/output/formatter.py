"""Line formatters for terminal output.

Each Formatter method renders one semantic message type and writes it
immediately. Arguments are rendered verbatim; any string, including an
empty one, is accepted.

Line shapes:
    log         [action] value
    error       [action] message            (red message)
    warn        [action] message            (yellow message)
    status      ● [name] message            (green ● / red ○)
    header      <blank>, title, 40 x ─
    success     ✓ message
    fail        ✗ message
    info          label      value
    hint          message                   (gray)
    detail          → message
    next_step     → description: command
    diagnostic  ⚠ [component] message
"""

from collections.abc import Iterable
from dataclasses import dataclass
import sys
from typing import NoReturn

from rich.console import Console
from rich.segment import Segment, Segments

from tana_stdio.config.models import OutputConfig
from tana_stdio.observability.logging import get_logger
from tana_stdio.output.console import create_console
from tana_stdio.output.styler import Styler

RULE_WIDTH = 40
RULE_CHAR = "─"
LABEL_WIDTH = 10


@dataclass(frozen=True, slots=True)
class NextStep:
    """A suggested follow-up command.

    Attributes:
        description: What the command does.
        command: The command to run.
    """

    description: str
    command: str


class Formatter:
    """Stateless renderer of status lines.

    Output is a pure function of the arguments and the Styler/Console
    capability, so two calls with the same arguments write identical bytes.
    No locking is done; concurrent callers serialize externally.
    """

    def __init__(self, styler: Styler | None = None, console: Console | None = None) -> None:
        self._styler = styler or Styler()
        self._console = console or create_console()

    @classmethod
    def from_config(cls, config: OutputConfig) -> "Formatter":
        """Build a Formatter with styler and console for a configuration."""
        return cls(Styler.from_config(config), create_console(config))

    @property
    def styler(self) -> Styler:
        return self._styler

    @property
    def console(self) -> Console:
        return self._console

    def _write(self, *parts: str | Segment) -> None:
        segments = [part if isinstance(part, Segment) else Segment(part) for part in parts]
        segments.append(Segment.line())
        self._console.print(Segments(segments))

    def _bracket(self, name: str) -> Segment:
        return self._styler.cyan(f"[{name}]")

    def log(self, action: str, value: str) -> None:
        """Log an action with a value.

        [action] value
        """
        self._write(self._bracket(action), " ", value)

    def error(self, action: str, message: str) -> None:
        """Log an error.

        [action] message (cyan bracket, red message)
        """
        self._write(self._bracket(action), " ", self._styler.red(message))

    def warn(self, action: str, message: str) -> None:
        """Log a warning.

        [action] message (cyan bracket, yellow message)
        """
        self._write(self._bracket(action), " ", self._styler.yellow(message))

    def status(self, name: str, message: str, ok: bool) -> None:
        """Log a status line with indicator.

        ● [name] message (dot and message color follow ``ok``)
        """
        s = self._styler
        if ok:
            self._write(s.green("●"), " ", self._bracket(name), " ", s.gray(message))
        else:
            self._write(s.red("○"), " ", self._bracket(name), " ", s.red(message))

    def header(self, title: str) -> None:
        """Print a section header: blank line, bold title, gray rule."""
        self._console.print()
        self._write(self._styler.bold(title))
        self._write(self._styler.gray(RULE_CHAR * RULE_WIDTH))

    def blank(self) -> None:
        """Print a blank line."""
        self._console.print()

    def success(self, message: str) -> None:
        """✓ message"""
        self._write(self._styler.green("✓"), " ", message)

    def fail(self, message: str) -> None:
        """✗ message"""
        self._write(self._styler.red("✗"), " ", message)

    def info(self, label: str, value: str) -> None:
        """Info line with label.

        Labels shorter than LABEL_WIDTH are padded; longer ones are kept whole.
        """
        self._write(f"  {label.ljust(LABEL_WIDTH)} ", self._styler.cyan(value))

    def hint(self, message: str) -> None:
        """Hint in gray, indented two spaces."""
        self._write(self._styler.gray(f"  {message}"))

    def detail(self, message: str) -> None:
        """Detail line with arrow."""
        self._write("    ", self._styler.gray("→"), " ", message)

    def fatal(self, action: str, message: str) -> NoReturn:
        """Log an error and exit the process with status 1.

        Never returns. Raises SystemExit(1) after writing the same line
        as ``error(action, message)``.
        """
        self.error(action, message)
        get_logger(__name__).debug("stdio.fatal.exiting", action=action, exit_code=1)
        sys.exit(1)

    def next_step(self, description: str, command: str) -> None:
        """Suggest a next step.

          → description: command
        """
        s = self._styler
        self._write("  ", s.gray("→"), " ", f"{description}: ", s.cyan(command))

    def next_steps(self, steps: Iterable[NextStep | tuple[str, str]]) -> None:
        """Suggest several next steps, in order."""
        for step in steps:
            if isinstance(step, NextStep):
                self.next_step(step.description, step.command)
            else:
                description, command = step
                self.next_step(description, command)

    def diagnostic(self, component: str, message: str) -> None:
        """Diagnostic warning.

        ⚠ [component] message
        """
        s = self._styler
        self._write(s.yellow("⚠"), " ", self._bracket(component), " ", s.yellow(message))
