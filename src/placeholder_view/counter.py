"""placeholder_view.counter.

Index bookkeeping shared between placeholder views.

A view without an index override claims the counter's current value when it
appears and releases it when it disappears. This only stays consistent when
appear/disappear events are strictly nested (last shown, first hidden);
out-of-order visibility changes leave the counter skewed. Callers that need
isolation (tests, a preview window) pass their own `IndexCounter`.
"""

from __future__ import annotations

import logging
from typing import Final

logger = logging.getLogger(__name__)


class IndexCounter:
    """Mutable integer counter handed out to appearing placeholder views.

    Not thread-safe: all mutation is expected on the GUI thread.
    """

    __slots__ = ("_name", "_value")

    def __init__(self, start: int = 0, *, name: str = "counter") -> None:
        """
        Initialize IndexCounter.

        Args:
            start: Initial value.
            name: Label used in log messages.
        """
        self._value = start
        self._name = name

    @property
    def value(self) -> int:
        """Current value, i.e. the index the next appearing view will take."""
        return self._value

    def claim(self) -> int:
        """Return the current value and advance the counter by one."""
        claimed = self._value
        self._value += 1
        logger.debug("%s: claimed index %d", self._name, claimed)
        return claimed

    def release(self) -> None:
        """Step the counter back by one."""
        self._value -= 1
        if self._value < 0:
            logger.warning(
                "%s: released below zero (now %d); appear/disappear events "
                "were not strictly nested",
                self._name,
                self._value,
            )
        else:
            logger.debug("%s: released, next index %d", self._name, self._value)

    def reset(self, value: int = 0) -> None:
        """Set the counter back to `value` (0 by default)."""
        self._value = value

    def __repr__(self) -> str:
        return f"IndexCounter(value={self._value}, name={self._name!r})"


SHARED_COUNTER: Final[IndexCounter] = IndexCounter(name="shared")
