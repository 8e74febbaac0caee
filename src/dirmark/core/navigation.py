"""Ancestor-path computation behind ``mark back <index>``.

Pure string/path arithmetic — the working directory is passed in, never
looked up here.
"""

from __future__ import annotations

from pathlib import PurePath

from dirmark.exceptions import InvalidIndexError


def ancestor_path(cwd: str, index: int) -> str:
    """Return the directory *index* levels above *cwd*.

    The path is split into its segments, not counting the root.  With
    ``directories_back = len(segments) - index``:

    * ``1`` yields the filesystem root,
    * ``0`` or less is an invalid index,
    * anything else keeps the first ``directories_back`` segments.

    A *cwd* of ``/`` has no segments, so even index ``0`` is invalid there.

    Examples
    --------
    >>> ancestor_path("/a/b/c/d", 1)
    '/a/b/c'
    >>> ancestor_path("/a/b/c/d", 3)
    '/'
    """
    if index < 0:
        raise InvalidIndexError()

    pure = PurePath(cwd)
    segments = pure.parts[1:] if pure.anchor else pure.parts
    root = pure.anchor or "/"

    directories_back = len(segments) - index
    if directories_back == 1:
        return root
    if directories_back <= 0:
        raise InvalidIndexError()
    return str(PurePath(root, *segments[:directories_back]))
