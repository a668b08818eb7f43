"""Pure ANSI color utilities."""

import os
import sys


def supports_color() -> bool:
    """Check if stdout supports color output.

    Follows the NO_COLOR (https://no-color.org/) and FORCE_COLOR conventions.
    NO_COLOR always wins. FORCE_COLOR (when set and not ``"0"``) forces color
    on even when stdout is not a TTY. Otherwise falls back to ``isatty()``.
    """
    if "NO_COLOR" in os.environ:
        return False
    force = os.environ.get("FORCE_COLOR")
    if force is not None and force != "0":
        return True
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def color(text: str, code: str, enabled: bool) -> str:
    """Wrap *text* in ANSI escape codes when *enabled* is True.

    Args:
        text: The string to colorize.
        code: ANSI SGR parameter (e.g. ``"31"`` for red).
        enabled: When False the original *text* is returned unchanged.
    """
    if not enabled:
        return text
    return f"\x1b[{code}m{text}\x1b[0m"


def violet(text: str, enabled: bool) -> str:
    """Return *text* in violet (ANSI 35) when *enabled*."""
    return color(text, "35", enabled)
