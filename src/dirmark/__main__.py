"""Allow ``python -m dirmark`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m dirmark`` behaves identically to the ``mark`` console
script.
"""

from __future__ import annotations

from dirmark.cli.app import cli

if __name__ == "__main__":
    cli()
