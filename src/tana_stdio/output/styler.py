"""Named text styles over rich.

Each operation maps a string to a styled ``rich.segment.Segment``. Segments
carry the text untouched (tabs, carriage returns and other control
characters included); rich only wraps them in style codes when writing.
A disabled Styler returns unstyled segments, so the same Formatter code
serves plain destinations.
"""

from rich.segment import Segment
from rich.style import Style

from tana_stdio.config.models import ColorMode, OutputConfig

# chalk-style "gray" is SGR 90
GRAY = "bright_black"


class Styler:
    """Color and weight decoration for output segments.

    Attributes:
        enabled: Whether styles are attached at all.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    @classmethod
    def from_config(cls, config: OutputConfig) -> "Styler":
        """Build a Styler for an output configuration.

        Only ``never`` disables styling here. Under ``auto`` styles stay
        attached and the Console drops them when the destination is not
        a color terminal.
        """
        return cls(enabled=config.color != ColorMode.NEVER)

    def style(self, text: str, style: str) -> Segment:
        """Apply a rich style definition to text."""
        if not self.enabled:
            return Segment(text)
        return Segment(text, Style.parse(style))

    def cyan(self, text: str) -> Segment:
        return self.style(text, "cyan")

    def red(self, text: str) -> Segment:
        return self.style(text, "red")

    def green(self, text: str) -> Segment:
        return self.style(text, "green")

    def yellow(self, text: str) -> Segment:
        return self.style(text, "yellow")

    def gray(self, text: str) -> Segment:
        return self.style(text, GRAY)

    def bold(self, text: str) -> Segment:
        return self.style(text, "bold")

    def dim(self, text: str) -> Segment:
        return self.style(text, "dim")
