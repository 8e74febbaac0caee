"""CLI console helpers with optional Rich support.

Two output channels:

* :data:`console` — diagnostics on stderr, rendered with Rich when it is
  installed and as plain text otherwise.
* :func:`emit` — command results on stdout, always plain text so that
  ``$(mark get)`` receives the bare path with no wrapping or styling.

Rich is never imported at module level so every command keeps working
when it is missing.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from dirmark.exceptions import MarkError

_STYLE_TAG = re.compile(
    r"\[/?(?:bold|dim|red|green|yellow|cyan)(?: (?:bold|dim|red|green|yellow|cyan))*\]"
)


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``MarkError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise MarkError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True, highlight=False, soft_wrap=True)


def strip_markup(text: str) -> str:
    """Remove the style tags this package uses from *text*."""
    return _STYLE_TAG.sub("", text)


def escape(text: str) -> str:
    """Escape *text* for inclusion in Rich markup (no-op without Rich)."""
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text
    return rich_escape(text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except MarkError:
            print(*(strip_markup(str(obj)) for obj in objects), file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()


def emit(*lines: str) -> None:
    """Write each of *lines* to stdout, one per line, unstyled."""
    for line in lines:
        print(line, file=sys.stdout)
