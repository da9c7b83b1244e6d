"""tana-stdio CLI module.

Exposes each output operation as a Typer command so shell scripts share
the same visual vocabulary as Python tools.
"""

from tana_stdio.cli.main import app

__all__ = ["app"]
