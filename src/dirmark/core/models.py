"""Domain models for dirmark.

A mark is nothing more than a path string, so there is no mark class;
the models here describe the closed set of commands and the outcome of
the add policy.
"""

from __future__ import annotations

from enum import Enum


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

class Command(str, Enum):
    """Every command the ``mark`` CLI understands."""

    ADD = "add"
    BACK = "back"
    CLEAR = "clear"
    DELETE = "delete"
    GET = "get"
    HELP = "help"
    INSTALL = "install"
    LIST = "list"

    @classmethod
    def from_token(cls, token: str) -> Command | None:
        """Return the command named by *token*, or ``None`` if unknown.

        Matching is exact: ``mark LIST`` is an unknown command.
        """
        try:
            return cls(token)
        except ValueError:
            return None


DEFAULT_COMMAND: Command = Command.ADD
"""Command run when ``mark`` is invoked without one."""


# ---------------------------------------------------------------------------
# Add policy outcome
# ---------------------------------------------------------------------------

class AddOutcome(Enum):
    """What :meth:`MarkService.add` did with the requested path."""

    ADDED = "added"
    """The path was new and now sits at index 0."""

    MOVED = "moved"
    """The path was already marked and was moved to index 0."""
