"""Shared pytest fixtures for result-table tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from result_table.arena import ColumnArena
from result_table.config import table_settings


@pytest.fixture(autouse=True)
def _fresh_table_settings() -> Iterator[None]:
    """Re-read environment-backed settings around every test."""
    table_settings.cache_clear()
    yield
    table_settings.cache_clear()


@pytest.fixture
def arena() -> Iterator[ColumnArena]:
    """Provide an arena that is released when the test finishes."""
    with ColumnArena(label="test") as test_arena:
        yield test_arena
