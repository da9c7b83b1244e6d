"""Unit tests for tana_stdio.config.models module."""

from pathlib import Path

from pydantic import ValidationError as PydanticValidationError
import pytest

from tana_stdio.config.models import (
    ColorMode,
    OutputConfig,
    OutputStream,
    get_config_dir,
    get_default_config_path,
)


class TestOutputConfig:
    """Test OutputConfig model."""

    def test_defaults(self) -> None:
        """OutputConfig defaults to auto color on stdout."""
        config = OutputConfig()
        assert config.color == ColorMode.AUTO
        assert config.stream == OutputStream.STDOUT

    def test_accepts_strings(self) -> None:
        """Enum fields accept their string values."""
        config = OutputConfig.model_validate({"color": "never", "stream": "stderr"})
        assert config.color == ColorMode.NEVER
        assert config.stream == OutputStream.STDERR

    def test_rejects_unknown_color(self) -> None:
        """Unknown color modes fail validation."""
        with pytest.raises(PydanticValidationError):
            OutputConfig.model_validate({"color": "rainbow"})

    def test_is_frozen(self) -> None:
        """OutputConfig is immutable."""
        config = OutputConfig()
        with pytest.raises(PydanticValidationError):
            config.color = ColorMode.NEVER  # type: ignore[misc]

    def test_model_copy_update(self) -> None:
        """Overrides produce a new config."""
        config = OutputConfig().model_copy(update={"color": ColorMode.ALWAYS})
        assert config.color == ColorMode.ALWAYS


class TestColorMode:
    """Test ColorMode enum."""

    def test_values(self) -> None:
        """ColorMode has the three policy values."""
        assert {mode.value for mode in ColorMode} == {"auto", "always", "never"}

    def test_is_string_enum(self) -> None:
        """ColorMode compares equal to its string."""
        assert ColorMode.NEVER == "never"


class TestPaths:
    """Test configuration paths."""

    def test_config_dir(self) -> None:
        """Config lives under ~/.tana."""
        assert get_config_dir() == Path.home() / ".tana"

    def test_default_config_path(self) -> None:
        """Default file is ~/.tana/stdio.yaml."""
        assert get_default_config_path() == Path.home() / ".tana" / "stdio.yaml"
