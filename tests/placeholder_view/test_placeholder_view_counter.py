"""Unit tests for placeholder_view.counter (pytest).

These tests cover:
- claim returns the current value and advances
- release steps back, and logs a warning when going below zero
- reset
- the process-wide SHARED_COUNTER
"""

from __future__ import annotations

import logging

import pytest

from placeholder_view.counter import SHARED_COUNTER, IndexCounter


def test_claim_advances(counter: IndexCounter) -> None:
    """Test claim hands out consecutive values."""
    assert [counter.claim() for _ in range(3)] == [0, 1, 2]
    assert counter.value == 3


def test_release_steps_back(counter: IndexCounter) -> None:
    """Test release frees the most recent value."""
    counter.claim()
    counter.claim()
    counter.release()
    assert counter.value == 1
    assert counter.claim() == 1


def test_release_below_zero_warns(
    counter: IndexCounter, caplog: pytest.LogCaptureFixture
) -> None:
    """Test underflow is allowed but logged."""
    with caplog.at_level(logging.WARNING, logger="placeholder_view.counter"):
        counter.release()
    assert counter.value == -1
    assert "below zero" in caplog.text


def test_reset(counter: IndexCounter) -> None:
    """Test reset to zero and to an explicit value."""
    counter.claim()
    counter.reset()
    assert counter.value == 0
    counter.reset(5)
    assert counter.claim() == 5


def test_start_value() -> None:
    """Test a counter can start from a non-zero value."""
    assert IndexCounter(10).claim() == 10


def test_repr(counter: IndexCounter) -> None:
    """Test repr shows the value and name."""
    assert repr(counter) == "IndexCounter(value=0, name='test')"


def test_shared_counter_is_an_index_counter(shared_counter: IndexCounter) -> None:
    """Test the shared counter fixture exposes SHARED_COUNTER at zero."""
    assert shared_counter is SHARED_COUNTER
    assert shared_counter.value == 0
