"""Terminal styling and the warning and success lines shown to the learner."""

from __future__ import annotations

import os

_RESET = "\x1b[0m"


def use_emoji() -> bool:
    """Return True unless the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" not in os.environ


def _style(code: str, text: object) -> str:
    return f"\x1b[{code}m{text}{_RESET}"


def red(text: object) -> str:
    """Wrap text in the ANSI code for red."""
    return _style("31", text)


def green(text: object) -> str:
    """Wrap text in the ANSI code for green."""
    return _style("32", text)


def blue(text: object) -> str:
    """Wrap text in the ANSI code for blue."""
    return _style("34", text)


def bold(text: object) -> str:
    """Wrap text in the ANSI code for bold."""
    return _style("1", text)


def warn(message: str) -> None:
    """Print a red warning line, prefixed by a warning sign."""
    prefix = "⚠️ " if use_emoji() else "!"
    print(f"{red(prefix)} {red(message)}")


def success(message: str) -> None:
    """Print a green success line, prefixed by a check mark."""
    prefix = "✅" if use_emoji() else "✓"
    print(f"{green(prefix)} {green(message)}")