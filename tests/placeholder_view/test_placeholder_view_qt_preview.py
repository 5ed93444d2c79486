"""Unit tests for placeholder_view.qt.preview (pytest-qt).

These tests cover:
- the preview row claims five indexes from its own counter
- the grid holds 100 index-overridden placeholders
- AdaptiveGrid column computation and reflow on resize
- command-line parsing for the preview launcher

Note:
- Skipped automatically when PySide6 is not installed.
"""

from __future__ import annotations

import pytest

pytest.importorskip("PySide6")

from PySide6.QtWidgets import QWidget  # noqa: E402

from placeholder_view.counter import IndexCounter  # noqa: E402
from placeholder_view.qt import AdaptiveGrid, PlaceholderView, build_preview  # noqa: E402
from placeholder_view.qt.preview import (  # noqa: E402
    GRID_ITEM_COUNT,
    GRID_MIN_WIDTH,
    _parse_args,
)


def _placeholders(window: QWidget) -> list[PlaceholderView]:
    return window.findChildren(PlaceholderView)


def test_preview_contents(qtbot, counter: IndexCounter) -> None:
    """Test the preview holds five auto-indexed and 100 overridden views."""
    window = build_preview(counter)
    qtbot.addWidget(window)

    views = _placeholders(window)
    auto = [v for v in views if not v.config.index_overridden]
    fixed = [v for v in views if v.config.index_overridden]
    assert len(auto) == 5
    assert sorted(v.index for v in fixed) == list(range(GRID_ITEM_COUNT))


def test_preview_row_claims_indexes_when_shown(
    qtbot, counter: IndexCounter
) -> None:
    """Test showing the preview assigns 0..4 and hiding it releases them."""
    window = build_preview(counter)
    qtbot.addWidget(window)
    window.resize(800, 600)
    window.show()

    auto = [v for v in _placeholders(window) if not v.config.index_overridden]
    assert sorted(v.index for v in auto) == [0, 1, 2, 3, 4]
    assert counter.value == 5

    window.hide()
    assert counter.value == 0


def test_preview_row_configurations(qtbot, counter: IndexCounter) -> None:
    """Test the row covers the color, radius and toggle variations."""
    window = build_preview(counter)
    qtbot.addWidget(window)

    configs = [
        v.config for v in _placeholders(window) if not v.config.index_overridden
    ]
    assert sum(c.color_override is not None for c in configs) == 1
    assert sum(c.corner_radius == 10 for c in configs) == 1
    assert sum(not c.show_index for c in configs) == 1
    assert sum(not c.show_size for c in configs) == 1
    assert sum(not c.show_position for c in configs) == 1


def test_preview_default_counter_is_private(
    qtbot, shared_counter: IndexCounter
) -> None:
    """Test the preview does not touch the shared counter by default."""
    window = build_preview()
    qtbot.addWidget(window)
    window.show()
    assert shared_counter.value == 0


def test_adaptive_grid_columns_for_width(qtbot) -> None:
    """Test column count grows with width and never drops below one."""
    grid = AdaptiveGrid([QWidget() for _ in range(10)], min_column_width=100)
    qtbot.addWidget(grid)

    assert grid.columns_for_width(0) == 1
    assert grid.columns_for_width(50) == 1
    narrow = grid.columns_for_width(250)
    wide = grid.columns_for_width(1000)
    assert 1 <= narrow < wide


def test_adaptive_grid_reflows_on_resize(qtbot) -> None:
    """Test a resize re-lays items into the fitting column count."""
    grid = AdaptiveGrid([QWidget() for _ in range(10)], min_column_width=100)
    qtbot.addWidget(grid)
    assert grid.columns == 1

    grid.resize(1000, 400)
    grid.show()
    qtbot.waitUntil(lambda: grid.columns == grid.columns_for_width(grid.width()))
    assert grid.columns > 1


def test_parse_args_defaults() -> None:
    """Test launcher defaults."""
    args = _parse_args([])
    assert args.log_level == "WARNING"
    assert args.min_column_width == GRID_MIN_WIDTH


def test_parse_args_overrides() -> None:
    """Test launcher options are parsed."""
    args = _parse_args(["--log-level", "DEBUG", "--min-column-width", "150"])
    assert args.log_level == "DEBUG"
    assert args.min_column_width == 150
