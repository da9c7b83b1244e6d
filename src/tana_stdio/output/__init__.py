"""Terminal output for tana-stdio.

Format: [action] value
- cyan: identifiers in brackets, values
- green: success
- yellow: warning
- red: error
- gray: hints, rules, arrows
"""

from tana_stdio.output.console import create_console
from tana_stdio.output.formatter import (
    LABEL_WIDTH,
    RULE_CHAR,
    RULE_WIDTH,
    Formatter,
    NextStep,
)
from tana_stdio.output.styler import Styler

__all__ = [
    "LABEL_WIDTH",
    "RULE_CHAR",
    "RULE_WIDTH",
    "Formatter",
    "NextStep",
    "Styler",
    "create_console",
]
