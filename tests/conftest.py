"""Shared pytest fixtures and configuration for the dirmark test suite.

Guidelines
----------
* Every store lives under ``tmp_path`` — the real ``~/.mark`` is never
  touched.
* The working directory is injected, not changed, unless a test is
  specifically about the process environment.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from dirmark.core.mark_service import MarkService
from dirmark.infra.local_store import LocalMarkStore


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    return tmp_path / ".mark"


@pytest.fixture
def store(store_path: Path) -> LocalMarkStore:
    return LocalMarkStore(store_path)


@pytest.fixture
def service(store: LocalMarkStore) -> MarkService:
    return MarkService(store)


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``Path.home()`` at a scratch directory for every test."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home
