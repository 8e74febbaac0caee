"""Infrastructure layer — the filesystem and the process environment.

Every raw ``OSError`` must be caught here and re-raised as a
:class:`~dirmark.exceptions.MarkError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from dirmark.infra.environment import current_directory
from dirmark.infra.local_store import (
    STORE_FILE_MODE,
    STORE_FILENAME,
    LocalMarkStore,
    default_store_path,
)

__all__: list[str] = [
    "STORE_FILENAME",
    "STORE_FILE_MODE",
    "LocalMarkStore",
    "current_directory",
    "default_store_path",
]
