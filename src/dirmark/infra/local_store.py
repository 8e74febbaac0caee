"""Infrastructure: the file-backed mark store.

Marks are kept in a single text file, one path per line, most recent
first.  Every mutation reads the whole file, transforms the list in
memory, and rewrites the whole file.

Rules
-----
* Every ``OSError`` and ``UnicodeError`` is re-raised as :class:`StoreIOError`.
* Rewrites go to a sibling temp file that replaces the store, so a
  failed write leaves the previous marks intact.
* The file is created on first access with :data:`STORE_FILE_MODE`.
* No locking — concurrent writers are last-writer-wins.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from dirmark.exceptions import InvalidIndexError, StoreIOError

logger = logging.getLogger(__name__)

STORE_FILENAME: str = ".mark"
"""Hidden file under the home directory holding the marks."""

STORE_FILE_MODE: int = 0o660
"""Permissions used when the store file is first created."""

PATH_ERRORS: str = "surrogateescape"
"""Codec error handler matching how the OS hands undecodable path bytes to Python."""


def default_store_path(home: Path | None = None) -> Path:
    """Return the store location under *home* (default: the user's home).

    Raises
    ------
    StoreIOError
        When the home directory cannot be determined.
    """
    if home is None:
        try:
            home = Path.home()
        except RuntimeError as exc:
            raise StoreIOError(
                "could not determine the home directory",
                hint="Set the HOME environment variable.",
            ) from exc
    return home / STORE_FILENAME


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------

class LocalMarkStore:
    """:class:`~dirmark.core.protocols.MarkStore` backed by a text file.

    Parameters
    ----------
    path:
        Location of the store file.  Defaults to :func:`default_store_path`.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path: Path = path if path is not None else default_store_path()

    # ------------------------------------------------------------------
    # MarkStore protocol
    # ------------------------------------------------------------------

    def list(self) -> list[str]:
        self._ensure_exists()
        try:
            with self.path.open("r", encoding="utf-8", errors=PATH_ERRORS) as fh:
                paths = [line.rstrip("\r\n") for line in fh]
        except (OSError, UnicodeError) as exc:
            raise self._io_error("read", exc) from exc
        return [item for item in paths if item]

    def add(self, path: str) -> None:
        paths = self.list()
        self._write([path, *paths])
        logger.debug("Prepended %s to %s", path, self.path)

    def get(self, index: int) -> str:
        if index < 0:
            raise InvalidIndexError()
        paths = self.list()
        if index >= len(paths):
            raise InvalidIndexError()
        return paths[index]

    def delete(self, index: int) -> None:
        paths = self.list()
        if index < 0 or index >= len(paths):
            raise InvalidIndexError()
        del paths[index]
        self._write(paths)

    def clear(self) -> None:
        self._write(())

    # ------------------------------------------------------------------
    # File handling
    # ------------------------------------------------------------------

    def _ensure_exists(self) -> None:
        """Create an empty store file with :data:`STORE_FILE_MODE` if absent."""
        try:
            fd = os.open(self.path, os.O_RDONLY | os.O_CREAT, STORE_FILE_MODE)
        except OSError as exc:
            raise self._io_error("create", exc) from exc
        os.close(fd)

    def _write(self, paths: Iterable[str]) -> None:
        """Replace the store file with *paths*, one per line.

        The lines are written to ``<store>.tmp`` first and moved over the
        store with :func:`os.replace`; an existing store keeps its
        permissions.
        """
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        mode: int | None
        try:
            mode = os.stat(self.path).st_mode & 0o777
        except FileNotFoundError:
            mode = None
        except OSError as exc:
            raise self._io_error("write", exc) from exc

        try:
            fd = os.open(
                tmp_path,
                os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
                STORE_FILE_MODE if mode is None else mode,
            )
            with open(fd, "w", encoding="utf-8", errors=PATH_ERRORS) as fh:
                fh.writelines(f"{item}\n" for item in paths)
            if mode is not None:
                os.chmod(tmp_path, mode)
            os.replace(tmp_path, self.path)
        except (OSError, UnicodeError) as exc:
            with contextlib.suppress(OSError):
                os.unlink(tmp_path)
            raise self._io_error("write", exc) from exc

    def _io_error(self, action: str, exc: OSError | UnicodeError) -> StoreIOError:
        if isinstance(exc, UnicodeError):
            reason = f"path is not representable on disk ({getattr(exc, 'reason', exc)})"
        else:
            reason = exc.strerror or str(exc)
        return StoreIOError(f"could not {action} {self.path}: {reason}")
