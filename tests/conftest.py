"""Shared test fixtures for namesuggest tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import structlog

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None]:
    """Restore default structlog configuration after each test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def identifiers() -> list[str]:
    """A small symbol table of identifier names."""
    return [
        "max_value",
        "min_value",
        "MaxValue",
        "value_max",
        "counter",
        "count",
    ]
