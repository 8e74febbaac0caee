"""dirmark — bookmark directories from the shell and jump back to them.

Marks live in a plain newline-delimited file under the home directory,
most recent first.
"""

from dirmark.version import __version__

__all__: list[str] = ["__version__"]
