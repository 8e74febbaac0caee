"""Tests for ``ancestor_path`` (core/navigation.py)."""

from __future__ import annotations

import pytest

from dirmark.core.navigation import ancestor_path
from dirmark.exceptions import InvalidIndexError


class TestAncestorPath:
    @pytest.mark.parametrize(
        ("index", "expected"),
        [
            (0, "/a/b/c/d"),
            (1, "/a/b/c"),
            (2, "/a/b"),
            (3, "/"),
        ],
    )
    def test_four_segments(self, index: int, expected: str) -> None:
        assert ancestor_path("/a/b/c/d", index) == expected

    @pytest.mark.parametrize("index", [4, 5, 100])
    def test_too_far_back(self, index: int) -> None:
        with pytest.raises(InvalidIndexError, match="invalid index"):
            ancestor_path("/a/b/c/d", index)

    def test_negative_index(self) -> None:
        with pytest.raises(InvalidIndexError):
            ancestor_path("/a/b/c/d", -1)

    def test_trailing_separator_is_ignored(self) -> None:
        assert ancestor_path("/a/b/c/", 1) == "/a/b"

    def test_single_segment_index_zero_is_root(self) -> None:
        assert ancestor_path("/home", 0) == "/"

    def test_root_has_no_segments(self) -> None:
        with pytest.raises(InvalidIndexError):
            ancestor_path("/", 0)

    def test_segments_with_spaces(self) -> None:
        assert ancestor_path("/srv/My Files/docs", 1) == "/srv/My Files"
