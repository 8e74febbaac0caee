"""Core / service layer — pure business logic.

Rules
-----
* No ``print()`` calls.
* No direct filesystem I/O; persistence goes through ``MarkStore``.
* No imports from ``cli`` or ``infra``.
"""

from dirmark.core.mark_service import MarkService
from dirmark.core.models import DEFAULT_COMMAND, AddOutcome, Command
from dirmark.core.navigation import ancestor_path
from dirmark.core.protocols import MarkStore

__all__: list[str] = [
    "DEFAULT_COMMAND",
    "AddOutcome",
    "Command",
    "MarkService",
    "MarkStore",
    "ancestor_path",
]
