"""CLI application entry point and command routing for ``mark``.

This module is the **sole error boundary** for the entire application.
It catches :class:`~dirmark.exceptions.MarkError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering a message on stderr and
returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — the add policy and the ancestor-path
  arithmetic live in ``core``, file handling in ``infra``.
* Command results go to stdout via :func:`~dirmark.cli.console.emit`;
  diagnostics go to stderr via :data:`~dirmark.cli.console.console`.
* An unknown command is guidance, not an error: it prints help and
  exits with :data:`exit_codes.SUCCESS`.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import NoReturn

from dirmark.cli import exit_codes
from dirmark.cli.arguments import expect_no_args, optional_index, single_index
from dirmark.cli.console import console, emit, escape
from dirmark.core.mark_service import MarkService
from dirmark.core.models import DEFAULT_COMMAND, AddOutcome, Command
from dirmark.core.navigation import ancestor_path
from dirmark.core.protocols import MarkStore
from dirmark.exceptions import MarkError, UsageError
from dirmark.infra.environment import current_directory
from dirmark.version import __version__

logger = logging.getLogger(__name__)

_DESCRIPTION = """\
Marks the current location.
If no command is specified, the current working directory is saved to the mark db."""

_COMMANDS_HELP = """\
Available Commands:
  help            Displays help menu
  add             Adds the current working directory to mark db (Default action)
  back   <index>  Prints out the number of directories back based on the index provided
  clear           Clears out the paths in the mark db
  delete <index>  Deletes out a path in mark db based on the index provided
  get    <index>  Get the path in mark db based on the index provided
  list            List out the all the marked paths by index
  install         Prints out directions to create move and back commands in your .bashrc"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _MarkArgumentParser(argparse.ArgumentParser):
    """Parser whose errors surface as :class:`UsageError` instead of exit 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message, hint="Run 'mark help' for usage.")


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Only the command token is parsed here; its arguments are collected
    raw and validated by the handler.  ``mark get -1`` reaches the
    handler as ``["-1"]`` because no option looks like a negative number.
    Other dash-prefixed tokens are left over by
    :meth:`~argparse.ArgumentParser.parse_known_args` and routed by
    :func:`main`.
    """
    parser = _MarkArgumentParser(
        prog="mark",
        description=_DESCRIPTION,
        epilog=_COMMANDS_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log store activity to stderr.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=None,
        help=f"Command to run (default: {DEFAULT_COMMAND.value}).",
    )
    parser.add_argument(
        "args",
        nargs="*",
        help="Command arguments, e.g. an index.",
    )
    return parser


def _setup_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG,
        stream=sys.stderr,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


# ---------------------------------------------------------------------------
# Per-invocation state
# ---------------------------------------------------------------------------

class _Session:
    """Store and working directory for one invocation, resolved lazily.

    ``help``, ``install`` and ``back`` never touch the store file, so it
    is only located and opened when a handler asks for the service.
    """

    def __init__(self, store: MarkStore | None, cwd: str | None) -> None:
        self._store = store
        self._cwd = cwd
        self._service: MarkService | None = None

    @property
    def service(self) -> MarkService:
        if self._service is None:
            if self._store is None:
                from dirmark.infra.local_store import LocalMarkStore

                self._store = LocalMarkStore()
            self._service = MarkService(self._store)
        return self._service

    def cwd(self) -> str:
        if self._cwd is None:
            self._cwd = current_directory()
        return self._cwd


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _handle_add(args: Sequence[str], session: _Session) -> int:
    """Mark the working directory, moving it to the top if already marked."""
    expect_no_args(args)
    outcome = session.service.add(session.cwd())
    if outcome is AddOutcome.MOVED:
        console.print("path already exists. Moving to top.")
    return exit_codes.SUCCESS


def _handle_get(args: Sequence[str], session: _Session) -> int:
    index = optional_index(args)
    emit(session.service.get(index))
    return exit_codes.SUCCESS


def _handle_list(args: Sequence[str], session: _Session) -> int:
    expect_no_args(args)
    emit(*(f"[{index}] {path}" for index, path in enumerate(session.service.list())))
    return exit_codes.SUCCESS


def _handle_delete(args: Sequence[str], session: _Session) -> int:
    index = single_index(args, message="specify index")
    session.service.delete(index)
    return exit_codes.SUCCESS


def _handle_clear(session: _Session) -> int:
    session.service.clear()
    return exit_codes.SUCCESS


def _handle_back(args: Sequence[str], session: _Session) -> int:
    """Print the ancestor of the working directory *index* levels up."""
    cwd = session.cwd()
    index = single_index(args)
    emit(ancestor_path(cwd, index))
    return exit_codes.SUCCESS


def _handle_install() -> int:
    from dirmark.cli.install import run_install

    return run_install()


def _dispatch(
    command: Command,
    args: Sequence[str],
    session: _Session,
    parser: argparse.ArgumentParser,
) -> int:
    """Run *command*; ``help``, ``clear`` and ``install`` ignore *args*."""
    logger.debug("Dispatching %s with args %s", command.value, list(args))
    if command is Command.ADD:
        return _handle_add(args, session)
    if command is Command.GET:
        return _handle_get(args, session)
    if command is Command.LIST:
        return _handle_list(args, session)
    if command is Command.DELETE:
        return _handle_delete(args, session)
    if command is Command.CLEAR:
        return _handle_clear(session)
    if command is Command.BACK:
        return _handle_back(args, session)
    if command is Command.INSTALL:
        return _handle_install()
    parser.print_help()
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    store: MarkStore | None = None,
    cwd: str | None = None,
) -> int:
    """Run the ``mark`` CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    store:
        Store to operate on.  Defaults to the file under the home
        directory, opened on first use.
    cwd:
        Working directory to mark or navigate from.  Defaults to the
        process working directory.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    MarkError
        For argument, index, and I/O errors; :func:`cli` turns these
        into a stderr message and :data:`exit_codes.GENERAL_ERROR`.
    """
    parser = _build_parser()
    args, leftover = parser.parse_known_args(argv)

    if args.verbose:
        _setup_logging()

    # An unrecognised option in command position is an unknown command;
    # after a command it is an argument for the handler to reject.
    if args.command is None and leftover:
        args.command = leftover.pop(0)
    command_args = [*args.args, *leftover]

    token: str = args.command if args.command is not None else DEFAULT_COMMAND.value
    command = Command.from_token(token)
    if command is None:
        console.print("invalid option. displaying help.")
        parser.print_help()
        return exit_codes.SUCCESS

    return _dispatch(command, command_args, _Session(store, cwd), parser)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except MarkError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
