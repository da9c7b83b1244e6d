"""Configuration loading for tana-stdio.

Configuration is layered: YAML file, then environment variables, then
pydantic validation.

Environment variables:
    TANA_STDIO_COLOR: auto | always | never
    TANA_STDIO_STREAM: stdout | stderr
    NO_COLOR: any non-empty value forces color off (wins over everything)
    FORCE_COLOR: any non-empty value other than "0" forces color on
"""

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import ValidationError as PydanticValidationError
import yaml

from tana_stdio.config.models import ColorMode, OutputConfig, get_default_config_path
from tana_stdio.core.errors import ConfigError
from tana_stdio.observability.logging import get_logger


def _read_yaml(config_path: Path) -> dict[str, Any]:
    """Read a YAML mapping from disk.

    Args:
        config_path: File to read.

    Returns:
        Parsed mapping; an empty file yields an empty dict.

    Raises:
        ConfigError: If the file is malformed or not a mapping.
    """
    try:
        with config_path.open() as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Failed to parse configuration file: {e}",
            config_file=str(config_path),
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Configuration file must contain a mapping, got {type(data).__name__}",
            config_file=str(config_path),
        )
    return data


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay environment variables onto file configuration.

    Args:
        data: Configuration mapping read from file.

    Returns:
        A new mapping with environment overrides applied.
    """
    result = dict(data)

    color = os.environ.get("TANA_STDIO_COLOR", "").strip()
    if color:
        result["color"] = color.lower()

    stream = os.environ.get("TANA_STDIO_STREAM", "").strip()
    if stream:
        result["stream"] = stream.lower()

    force_color = os.environ.get("FORCE_COLOR", "")
    if force_color and force_color != "0":
        result["color"] = ColorMode.ALWAYS.value

    if os.environ.get("NO_COLOR", ""):
        result["color"] = ColorMode.NEVER.value

    return result


def load_config(config_path: Path | None = None) -> OutputConfig:
    """Load output configuration.

    Reads ``config_path`` if given, otherwise ~/.tana/stdio.yaml when it
    exists, then applies environment overrides (including a .env file in
    the working directory).

    Args:
        config_path: Explicit config file. Must exist when given.

    Returns:
        Validated OutputConfig instance.

    Raises:
        ConfigError: If an explicit file is missing, a file is malformed,
            or values fail validation.
    """
    load_dotenv()

    data: dict[str, Any] = {}
    if config_path is not None:
        if not config_path.exists():
            raise ConfigError(
                f"Configuration file not found: {config_path}",
                config_file=str(config_path),
            )
        data = _read_yaml(config_path)
    else:
        default_path = get_default_config_path()
        if default_path.exists():
            config_path = default_path
            data = _read_yaml(default_path)

    data = _apply_env_overrides(data)

    try:
        config = OutputConfig.model_validate(data)
    except PydanticValidationError as e:
        errors = []
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            errors.append(f"{loc}: {error['msg']}")

        raise ConfigError(
            "Configuration validation failed:",
            config_file=str(config_path) if config_path else None,
            errors=errors,
        ) from e

    get_logger(__name__).debug(
        "config.loaded",
        config_file=str(config_path) if config_path else None,
        color=config.color.value,
        stream=config.stream.value,
    )
    return config
