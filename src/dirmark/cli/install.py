"""``mark install`` — print shell-integration instructions.

Purely informational: the snippet is written to stdout for the user to
paste into their shell startup file.  Nothing on disk is modified.
"""

from __future__ import annotations

from dirmark.cli import exit_codes
from dirmark.cli.console import emit

SHELL_FUNCTIONS: str = """\
move() {
	local readonly DEST=$(mark get $1)
	if [[ ! -z $DEST ]]; then
		cd $DEST
	fi
}

back() {
	local readonly DEST=$(mark back $1)
	if [[ ! -z $DEST ]]; then
		cd $DEST
	fi
}"""
"""Bash functions that ``cd`` into the result of ``mark get`` / ``mark back``."""

INSTALL_TEXT: str = f"""
Run the following commands to create a move function based on the index provided:

1. Add the following code to ~/.bashrc

{SHELL_FUNCTIONS}

2. Run the following command
source ~/.bashrc"""


def run_install() -> int:
    """Print :data:`INSTALL_TEXT` and return :data:`exit_codes.SUCCESS`."""
    emit(INSTALL_TEXT)
    return exit_codes.SUCCESS
