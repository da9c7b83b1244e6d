"""Unit tests for the Styler."""

from rich.segment import Segment
from rich.style import Style

from tana_stdio.config import ColorMode, OutputConfig
from tana_stdio.output import Styler


class TestStylerEnabled:
    """Tests for an enabled Styler."""

    def test_returns_segment(self) -> None:
        """Style operations return rich Segments."""
        assert isinstance(Styler().cyan("x"), Segment)

    def test_named_colors(self) -> None:
        """Each operation attaches its color."""
        styler = Styler(enabled=True)
        assert styler.cyan("x").style == Style(color="cyan")
        assert styler.red("x").style == Style(color="red")
        assert styler.green("x").style == Style(color="green")
        assert styler.yellow("x").style == Style(color="yellow")
        assert styler.bold("x").style == Style(bold=True)
        assert styler.dim("x").style == Style(dim=True)

    def test_gray_is_bright_black(self) -> None:
        """Gray maps to ANSI bright black."""
        assert Styler().gray("x").style == Style(color="bright_black")

    def test_text_preserved(self) -> None:
        """Styling never alters the literal text."""
        assert Styler().red("[not markup]").text == "[not markup]"

    def test_control_characters_preserved(self) -> None:
        """Tabs and carriage returns stay in the segment."""
        assert Styler().cyan("a\tb\rc").text == "a\tb\rc"


class TestStylerDisabled:
    """Tests for the no-op fallback."""

    def test_no_style_attached(self) -> None:
        """A disabled Styler returns unstyled segments."""
        styler = Styler(enabled=False)
        for op in (styler.cyan, styler.red, styler.green, styler.yellow, styler.gray, styler.bold):
            segment = op("value")
            assert segment.text == "value"
            assert segment.style is None


class TestStylerFromConfig:
    """Tests for Styler.from_config."""

    def test_never_disables(self) -> None:
        """color=never disables styling."""
        assert Styler.from_config(OutputConfig(color=ColorMode.NEVER)).enabled is False

    def test_always_enables(self) -> None:
        """color=always enables styling."""
        assert Styler.from_config(OutputConfig(color=ColorMode.ALWAYS)).enabled is True

    def test_auto_leaves_decision_to_console(self) -> None:
        """color=auto keeps styles; the Console decides whether to emit them."""
        assert Styler.from_config(OutputConfig(color=ColorMode.AUTO)).enabled is True
