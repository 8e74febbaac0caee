"""Core mark service — the de-duplicating add policy over a store.

The store itself only knows how to prepend; this service decides what
"adding" a path means for the user:

* A new path is prepended.
* A path that is already marked is moved to index 0, keeping the
  relative order of every other mark and the total count unchanged.

Guarantees
----------
* No ``print()`` and no direct filesystem access; all persistence goes
  through the injected :class:`~dirmark.core.protocols.MarkStore`.
* Only :class:`~dirmark.exceptions.MarkError` subclasses escape.
"""

from __future__ import annotations

import logging

from dirmark.core.models import AddOutcome
from dirmark.core.protocols import MarkStore

logger = logging.getLogger(__name__)


class MarkService:
    """Front door to the mark list used by every CLI handler.

    Parameters
    ----------
    store:
        Any object satisfying the :class:`MarkStore` protocol.
    """

    def __init__(self, store: MarkStore) -> None:
        self._store: MarkStore = store

    # ------------------------------------------------------------------
    # Add policy
    # ------------------------------------------------------------------

    def add(self, path: str) -> AddOutcome:
        """Mark *path*, moving it to the front if it is already marked.

        The move is done with whole-list rewrites through the store:
        clear, re-add the other marks oldest first, then add *path* last
        so it lands at index 0.
        """
        paths = self._store.list()
        if path not in paths:
            self._store.add(path)
            logger.debug("Marked %s (%d marks)", path, len(paths) + 1)
            return AddOutcome.ADDED

        others = [item for item in paths if item != path]
        self._store.clear()
        for item in reversed(others):
            self._store.add(item)
        self._store.add(path)
        logger.debug("Moved %s to the front (was index %d)", path, paths.index(path))
        return AddOutcome.MOVED

    # ------------------------------------------------------------------
    # Delegations
    # ------------------------------------------------------------------

    def list(self) -> list[str]:
        return self._store.list()

    def get(self, index: int) -> str:
        return self._store.get(index)

    def delete(self, index: int) -> None:
        self._store.delete(index)
        logger.debug("Deleted mark at index %d", index)

    def clear(self) -> None:
        self._store.clear()
        logger.debug("Cleared all marks")
