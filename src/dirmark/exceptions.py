"""Custom exception hierarchy for dirmark.

All exceptions that cross layer boundaries must inherit from
:class:`MarkError`.  Raw ``OSError`` instances raised while touching the
store file must NEVER propagate beyond the infrastructure layer — they
are caught and re-raised as :class:`StoreIOError`.

Hierarchy
---------
MarkError
├── UsageError
├── InvalidArgumentCountError
├── IndexNotANumberError
├── InvalidIndexError
├── StoreIOError
└── WorkingDirectoryError
"""

from __future__ import annotations


class MarkError(Exception):
    """Base exception for all dirmark errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    and exit with a non-zero status.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Argument validation ---------------------------------------------------

class UsageError(MarkError):
    """Raised when the global options cannot be parsed."""


class InvalidArgumentCountError(MarkError):
    """Raised when a command receives the wrong number of arguments."""


class IndexNotANumberError(MarkError):
    """Raised when an index argument is not a decimal integer."""


class InvalidIndexError(MarkError):
    """Raised when an index is negative or outside the mark list."""

    def __init__(self, message: str = "invalid index", *, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)


# --- Environment -----------------------------------------------------------

class StoreIOError(MarkError):
    """Raised when the mark file cannot be opened, read, or written."""


class WorkingDirectoryError(MarkError):
    """Raised when the current working directory cannot be resolved."""
