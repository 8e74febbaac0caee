"""Positional-argument helpers shared by the command handlers."""

from __future__ import annotations

import re
from collections.abc import Sequence

from dirmark.exceptions import IndexNotANumberError, InvalidArgumentCountError

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_index(raw: str) -> int:
    """Parse a decimal index argument such as ``3`` or ``-1``.

    Range checks are left to the store; only the syntax is validated.
    """
    if not _INTEGER.fullmatch(raw):
        raise IndexNotANumberError("index is not a number")
    return int(raw)


def expect_no_args(args: Sequence[str]) -> None:
    if args:
        raise InvalidArgumentCountError("invalid number of arguments")


def single_index(args: Sequence[str], *, message: str = "invalid number of arguments") -> int:
    """Return the index from a command that takes exactly one argument."""
    if len(args) != 1:
        raise InvalidArgumentCountError(message)
    return parse_index(args[0])


def optional_index(args: Sequence[str], default: int = 0) -> int:
    """Return the index from a command that takes zero or one argument."""
    if len(args) > 1:
        raise InvalidArgumentCountError("invalid number of arguments")
    if not args:
        return default
    return parse_index(args[0])
