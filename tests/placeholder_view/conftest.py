"""Shared pytest configuration for placeholder_view tests."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

# Must be set before pytest-qt creates the QApplication.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from placeholder_view.counter import SHARED_COUNTER, IndexCounter  # noqa: E402

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def counter() -> IndexCounter:
    """Fresh, isolated index counter.

    Returns:
        IndexCounter starting at 0.
    """
    return IndexCounter(name="test")


@pytest.fixture
def shared_counter() -> Iterator[IndexCounter]:
    """The process-wide counter, reset before and after the test.

    Yields:
        SHARED_COUNTER at value 0.
    """
    SHARED_COUNTER.reset()
    yield SHARED_COUNTER
    SHARED_COUNTER.reset()
