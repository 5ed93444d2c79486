"""placeholder_view.model.

Toolkit-agnostic state behind a placeholder view.

A toolkit adapter (see `placeholder_view.qt`) owns one `PlaceholderState` per
widget, forwards its show/hide lifecycle to `appear()` / `disappear()`, and
asks for `color` and `overlay_lines(geometry)` when painting.

Index assignment
----------------
- With an index override, the index is fixed and the shared counter is never
  touched. The displayed index carries an asterisk suffix.
- Without one, the view claims `counter.value` on appear (advancing the
  counter) and releases it on disappear. Until it first appears, the index
  is 0.
- Appear/disappear are idempotent: repeated calls in the same direction are
  no-ops, so a counter is claimed at most once per visible period.
"""

from __future__ import annotations

import logging
import math
import operator
from dataclasses import dataclass
from enum import StrEnum
from numbers import Real
from typing import Final

from .colors import PaletteColor, color_for
from .counter import SHARED_COUNTER, IndexCounter
from .errors import raise_parameter_error

logger = logging.getLogger(__name__)


class OverlayRole(StrEnum):
    """Which piece of information an overlay line shows."""

    INDEX = "index"
    SIZE = "size"
    POSITION = "position"


class FontRole(StrEnum):
    """Relative text size of an overlay line."""

    CAPTION = "caption"
    CAPTION2 = "caption2"


INDEX_TEXT_OPACITY: Final[float] = 0.5
DETAIL_TEXT_OPACITY: Final[float] = 1.0
OVERRIDE_MARKER: Final[str] = "*"


# -----------------------------------------------------------------------------
# Value types
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Geometry:
    """Bounds of a view as reported by the layout system.

    Attributes:
        x: Left edge in global (screen) coordinates.
        y: Top edge in global (screen) coordinates.
        width: Rendered width.
        height: Rendered height.
    """

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class OverlayLine:
    """One line of overlay text, top to bottom."""

    role: OverlayRole
    text: str
    font: FontRole
    opacity: float


def format_size(width: float, height: float) -> str:
    """Format a size as whole numbers, e.g. `"120 x 100"`."""
    return f"{width:.0f} x {height:.0f}"


def format_position(x: float, y: float) -> str:
    """Format a point as whole numbers, e.g. `"(8, 42)"`."""
    return f"({x:.0f}, {y:.0f})"


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class PlaceholderConfig:
    """Immutable per-instance placeholder settings.

    Attributes:
        index_override: Fixed index; bypasses the shared counter when set.
        color_override: Fill color; any value the toolkit adapter accepts,
            or a PaletteColor. When None the color is derived from the index.
        corner_radius: Radius for the rectangle's corners.
        show_index: Whether the index line is rendered.
        show_size: Whether the size line is rendered.
        show_position: Whether the global position line is rendered.
    """

    index_override: int | None = None
    color_override: object | None = None
    corner_radius: float = 0
    show_index: bool = True
    show_size: bool = True
    show_position: bool = True

    def __post_init__(self) -> None:
        """Validate and normalize fields.

        Raises:
            TypeError: If a field has the wrong type.
            ValueError: If the corner radius is negative or not finite.
        """
        if self.index_override is not None:
            if isinstance(self.index_override, bool):
                raise_parameter_error(
                    name="index_override",
                    expected="an int or None",
                    got=self.index_override,
                )
            try:
                index = operator.index(self.index_override)
            except TypeError:
                raise_parameter_error(
                    name="index_override",
                    expected="an int or None",
                    got=self.index_override,
                )
            object.__setattr__(self, "index_override", index)

        radius = self.corner_radius
        if isinstance(radius, bool) or not isinstance(radius, Real):
            raise_parameter_error(
                name="corner_radius", expected="a real number", got=radius
            )
        if not math.isfinite(radius) or radius < 0:
            raise_parameter_error(
                name="corner_radius",
                expected="finite and >= 0",
                got=radius,
                kind=ValueError,
            )
        object.__setattr__(self, "corner_radius", float(radius))

        for name in ("show_index", "show_size", "show_position"):
            flag = getattr(self, name)
            if not isinstance(flag, bool):
                raise_parameter_error(name=name, expected="a bool", got=flag)

    @property
    def index_overridden(self) -> bool:
        """True when an explicit index was supplied."""
        return self.index_override is not None

    @property
    def shows_overlay(self) -> bool:
        """True when at least one overlay line is enabled."""
        return self.show_index or self.show_size or self.show_position


# -----------------------------------------------------------------------------
# Per-instance state
# -----------------------------------------------------------------------------


class PlaceholderState:
    """Index bookkeeping, derived color and overlay text for one view."""

    def __init__(
        self,
        config: PlaceholderConfig | None = None,
        *,
        counter: IndexCounter | None = None,
    ) -> None:
        """
        Initialize PlaceholderState.

        Args:
            config: Instance settings; defaults to `PlaceholderConfig()`.
            counter: Counter to claim indexes from; defaults to the
                process-wide SHARED_COUNTER.
        """
        self.config = config if config is not None else PlaceholderConfig()
        self.counter = counter if counter is not None else SHARED_COUNTER
        self._index = (
            self.config.index_override if self.config.index_overridden else 0
        )
        self._appeared = False

    @property
    def index(self) -> int:
        """Index currently shown by the view."""
        return self._index

    @property
    def appeared(self) -> bool:
        """True between `appear()` and the matching `disappear()`."""
        return self._appeared

    def appear(self) -> bool:
        """Handle the view becoming visible.

        Returns:
            True if this call changed visibility state, False if the view was
            already visible.
        """
        if self._appeared:
            return False
        self._appeared = True
        if not self.config.index_overridden:
            self._index = self.counter.claim()
        logger.debug("placeholder %s appeared", self.index_text)
        return True

    def disappear(self) -> bool:
        """Handle the view becoming invisible.

        Returns:
            True if this call changed visibility state, False if the view was
            not visible.
        """
        if not self._appeared:
            return False
        self._appeared = False
        if not self.config.index_overridden:
            self.counter.release()
        logger.debug("placeholder %s disappeared", self.index_text)
        return True

    @property
    def color(self) -> object:
        """Fill color: the override if set, else the palette color for the index."""
        if self.config.color_override is not None:
            return self.config.color_override
        return self.palette_color

    @property
    def palette_color(self) -> PaletteColor:
        """Palette color for the current index, ignoring any override."""
        return color_for(self._index)

    @property
    def index_text(self) -> str:
        """Index as displayed, with a trailing asterisk when overridden."""
        marker = OVERRIDE_MARKER if self.config.index_overridden else ""
        return f"{self._index}{marker}"

    def overlay_lines(self, geometry: Geometry) -> list[OverlayLine]:
        """Build the overlay text lines for the given bounds.

        Args:
            geometry: Bounds reported by the layout system.

        Returns:
            Enabled lines in display order (index, size, position); empty when
            every toggle is off.
        """
        lines: list[OverlayLine] = []
        if self.config.show_index:
            lines.append(
                OverlayLine(
                    OverlayRole.INDEX,
                    self.index_text,
                    FontRole.CAPTION2,
                    INDEX_TEXT_OPACITY,
                )
            )
        if self.config.show_size:
            lines.append(
                OverlayLine(
                    OverlayRole.SIZE,
                    format_size(geometry.width, geometry.height),
                    FontRole.CAPTION,
                    DETAIL_TEXT_OPACITY,
                )
            )
        if self.config.show_position:
            lines.append(
                OverlayLine(
                    OverlayRole.POSITION,
                    format_position(geometry.x, geometry.y),
                    FontRole.CAPTION,
                    DETAIL_TEXT_OPACITY,
                )
            )
        return lines
