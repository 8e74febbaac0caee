"""Infrastructure: working-directory lookup.

Kept out of the core layer so that services and path arithmetic stay
pure and can be tested with any directory string.
"""

from __future__ import annotations

import os

from dirmark.exceptions import WorkingDirectoryError


def current_directory() -> str:
    """Return the absolute current working directory.

    Raises
    ------
    WorkingDirectoryError
        When the directory has been removed or is not accessible.
    """
    try:
        return os.getcwd()
    except OSError as exc:
        raise WorkingDirectoryError(
            f"could not resolve the current directory: {exc.strerror or exc}",
            hint="cd into an existing directory and try again.",
        ) from exc
