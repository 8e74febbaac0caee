"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
* The command set is closed and complete.
"""

from __future__ import annotations

import pytest

from dirmark import __version__
from dirmark.cli import exit_codes
from dirmark.core.models import DEFAULT_COMMAND, Command
from dirmark.exceptions import (
    IndexNotANumberError,
    InvalidArgumentCountError,
    InvalidIndexError,
    MarkError,
    StoreIOError,
    WorkingDirectoryError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            InvalidArgumentCountError,
            IndexNotANumberError,
            InvalidIndexError,
            StoreIOError,
            WorkingDirectoryError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[MarkError]
    ) -> None:
        assert issubclass(exc_class, MarkError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(MarkError, Exception)

    def test_hint_is_stored(self) -> None:
        err = MarkError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = MarkError("boom")
        assert err.hint is None

    def test_invalid_index_default_message(self) -> None:
        assert str(InvalidIndexError()) == "invalid index"


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# Command set
# ---------------------------------------------------------------------------

class TestCommands:
    def test_known_commands(self) -> None:
        assert {c.value for c in Command} == {
            "add", "back", "clear", "delete", "get", "help", "install", "list",
        }

    def test_default_is_add(self) -> None:
        assert DEFAULT_COMMAND is Command.ADD

    def test_from_token(self) -> None:
        assert Command.from_token("list") is Command.LIST

    @pytest.mark.parametrize("token", ["", "LIST", "ls", "remove"])
    def test_unknown_token(self, token: str) -> None:
        assert Command.from_token(token) is None
