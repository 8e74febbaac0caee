"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols — never on the file-backed
implementation — so services can be exercised against any store.
"""

from __future__ import annotations

from typing import Protocol


class MarkStore(Protocol):
    """Contract for an ordered, index-addressed list of marked paths.

    Index ``0`` is always the most recently added path.  Indices are
    positions, not identities: deleting or re-adding shifts them.

    Implementations must map backend failures to
    :class:`~dirmark.exceptions.StoreIOError`.
    """

    def list(self) -> list[str]:
        """Return every path, most recent first.  Empty store → ``[]``."""
        ...  # pragma: no cover

    def add(self, path: str) -> None:
        """Prepend *path* and persist the whole list.

        No de-duplication happens here; that policy belongs to
        :class:`~dirmark.core.mark_service.MarkService`.
        """
        ...  # pragma: no cover

    def get(self, index: int) -> str:
        """Return the path at *index*.

        Raises
        ------
        InvalidIndexError
            When *index* is negative or past the end of the list.
        """
        ...  # pragma: no cover

    def delete(self, index: int) -> None:
        """Remove the path at *index*, keeping the others in order.

        Raises
        ------
        InvalidIndexError
            When *index* is negative or past the end of the list.
        """
        ...  # pragma: no cover

    def clear(self) -> None:
        """Remove every path."""
        ...  # pragma: no cover
