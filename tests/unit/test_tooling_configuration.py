"""Test that tooling is configured correctly."""
from pathlib import Path
import tomllib


def _pyproject() -> dict:
    root = Path(__file__).parent.parent.parent
    return tomllib.loads((root / "pyproject.toml").read_text())


def test_ruff_line_length():
    """Test that ruff line length is set to 100."""
    assert _pyproject()["tool"]["ruff"]["line-length"] == 100


def test_pre_commit_config_exists():
    """Test that .pre-commit-config.yaml exists."""
    root = Path(__file__).parent.parent.parent
    pre_commit_config = root / ".pre-commit-config.yaml"
    assert pre_commit_config.is_file(), f".pre-commit-config.yaml should exist at {pre_commit_config}"


def test_mypy_configured():
    """Test that mypy runs in strict mode."""
    mypy_config = _pyproject()["tool"]["mypy"]
    assert mypy_config["strict"] is True
