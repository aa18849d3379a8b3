import os
import sys

from blockpic.sizing import TerminalBounds

FALLBACK_BOUNDS = TerminalBounds(columns=80, rows=30)


def get_terminal_bounds() -> TerminalBounds:
    """Return the terminal's character grid, or (80, 30) if stdout is not a sized tty."""
    if not sys.stdout.isatty():
        return FALLBACK_BOUNDS
    try:
        size = os.get_terminal_size(sys.stdout.fileno())
    except OSError:
        return FALLBACK_BOUNDS
    if size.columns == 0 or size.lines == 0:
        return FALLBACK_BOUNDS
    return TerminalBounds(columns=size.columns, rows=size.lines)
