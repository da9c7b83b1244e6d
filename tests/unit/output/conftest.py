"""Shared fixtures for output tests."""

from collections.abc import Callable
from io import StringIO

import pytest
from rich.console import Console

from tana_stdio.output import Formatter, Styler


def _console(buffer: StringIO, color: bool) -> Console:
    if color:
        return Console(
            file=buffer,
            force_terminal=True,
            color_system="standard",
            no_color=False,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )
    return Console(
        file=buffer,
        color_system=None,
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


@pytest.fixture
def make_formatter() -> Callable[..., tuple[Formatter, StringIO]]:
    """Factory for a Formatter writing into a StringIO buffer."""

    def factory(color: bool = False) -> tuple[Formatter, StringIO]:
        buffer = StringIO()
        return Formatter(Styler(enabled=color), _console(buffer, color)), buffer

    return factory


@pytest.fixture
def plain(make_formatter: Callable[..., tuple[Formatter, StringIO]]) -> tuple[Formatter, StringIO]:
    """Formatter without styling codes."""
    return make_formatter(color=False)


@pytest.fixture
def colored(
    make_formatter: Callable[..., tuple[Formatter, StringIO]],
) -> tuple[Formatter, StringIO]:
    """Formatter forcing 16-colour styling codes."""
    return make_formatter(color=True)
