"""Terminal styling and status messages."""

from __future__ import annotations

import os
import sys

_CODES = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
    "bold": 1,
    "dim": 2,
    "italic": 3,
    "underlined": 4,
}


def no_emoji() -> bool:
    """Whether the NO_EMOJI environment variable asks for plain symbols."""
    return "NO_EMOJI" in os.environ


def _colors_enabled() -> bool:
    if os.environ.get("CLICOLOR_FORCE", "0") != "0":
        return True
    if os.environ.get("CLICOLOR") == "0":
        return False
    return sys.stdout.isatty() and os.environ.get("TERM") != "dumb"


def style(text, *args: str) -> str:
    """Wrap text in ANSI codes for the named styles when colours are enabled."""
    unknown = [name for name in args if name not in _CODES]
    if unknown:
        raise ValueError(f"unknown style: {', '.join(unknown)}")
    if not args or not _colors_enabled():
        return str(text)
    prefix = "".join(f"\x1b[{_CODES[name]}m" for name in args)
    return f"{prefix}{text}\x1b[0m"


def warn(message: str) -> None:
    """Print a warning in red."""
    symbol = "!" if no_emoji() else "⚠️ "
    print(f"{style(symbol, 'red')} {style(message, 'red')}")


def success(message: str) -> None:
    """Print a success message in green."""
    symbol = "✓" if no_emoji() else "✅"
    print(f"{style(symbol, 'green')} {style(message, 'green')}")