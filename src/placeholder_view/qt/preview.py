"""placeholder_view.qt.preview.

A preview window showing placeholders in their common configurations:

- a row of auto-indexed placeholders (color override, rounded corners, and
  each overlay line switched off in turn);
- a scrollable adaptive grid of 100 placeholders with index overrides.

Run it with `placeholder-preview` or `python -m placeholder_view.qt`.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING, Final

from PySide6.QtWidgets import (
    QApplication,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from ..colors import BLACK
from ..counter import IndexCounter
from .widget import PlaceholderView

if TYPE_CHECKING:
    from collections.abc import Sequence

    from PySide6.QtGui import QResizeEvent

logger = logging.getLogger(__name__)

ROW_HEIGHT: Final[int] = 100
GRID_ITEM_COUNT: Final[int] = 100
GRID_MIN_WIDTH: Final[int] = 100
GRID_MIN_HEIGHT: Final[int] = 50


class AdaptiveGrid(QWidget):
    """Grid that fits as many columns of at least `min_column_width` as it can.

    Items are re-flowed whenever a resize changes the column count.
    """

    def __init__(
        self,
        items: Sequence[QWidget],
        *,
        min_column_width: int = GRID_MIN_WIDTH,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._items = list(items)
        self._min_column_width = max(1, min_column_width)
        self._layout = QGridLayout(self)
        self._columns = 0
        self._reflow(1)

    @property
    def columns(self) -> int:
        return self._columns

    def columns_for_width(self, width: int) -> int:
        """Number of columns that fit in `width` pixels (at least one)."""
        margins = self._layout.contentsMargins()
        spacing = max(0, self._layout.horizontalSpacing())
        usable = width - margins.left() - margins.right()
        return max(1, (usable + spacing) // (self._min_column_width + spacing))

    def resizeEvent(self, event: QResizeEvent) -> None:  # noqa: N802
        super().resizeEvent(event)
        columns = self.columns_for_width(event.size().width())
        if columns != self._columns:
            self._reflow(columns)

    def _reflow(self, columns: int) -> None:
        for item in self._items:
            self._layout.removeWidget(item)
        for position, item in enumerate(self._items):
            row, column = divmod(position, columns)
            self._layout.addWidget(item, row, column)
        for column in range(max(columns, self._columns)):
            self._layout.setColumnStretch(column, 1 if column < columns else 0)
        logger.debug("grid reflowed to %d columns", columns)
        self._columns = columns


def build_preview(
    counter: IndexCounter | None = None,
    *,
    min_column_width: int = GRID_MIN_WIDTH,
) -> QWidget:
    """
    Build the preview window.

    Args:
        counter: Counter for the auto-indexed row. A fresh counter is created
            when omitted, so the window does not disturb the shared one.
        min_column_width: Minimum width of a grid column.

    Returns:
        QWidget: The (not yet shown) top-level preview widget.
    """
    counter = counter if counter is not None else IndexCounter(name="preview")

    window = QWidget()
    window.setWindowTitle("Placeholder preview")
    layout = QVBoxLayout(window)

    layout.addWidget(QLabel("No index provided"))
    row = QWidget()
    row.setFixedHeight(ROW_HEIGHT)
    row_layout = QHBoxLayout(row)
    row_layout.setContentsMargins(0, 0, 0, 0)
    for view in (
        PlaceholderView(color_override=BLACK, counter=counter),
        PlaceholderView(corner_radius=10, counter=counter),
        PlaceholderView(show_index=False, counter=counter),
        PlaceholderView(show_size=False, counter=counter),
        PlaceholderView(show_position=False, counter=counter),
    ):
        row_layout.addWidget(view)
    layout.addWidget(row)

    layout.addWidget(QLabel("Provided Index"))
    cells = []
    for index in range(GRID_ITEM_COUNT):
        cell = PlaceholderView(index_override=index)
        cell.setMinimumSize(min_column_width, GRID_MIN_HEIGHT)
        cells.append(cell)
    grid = AdaptiveGrid(cells, min_column_width=min_column_width)

    scroll = QScrollArea()
    scroll.setWidgetResizable(True)
    scroll.setWidget(grid)
    layout.addWidget(scroll, 1)

    return window


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="placeholder-preview",
        description="Show placeholder views in a preview window.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING).",
    )
    parser.add_argument(
        "--min-column-width",
        type=int,
        default=GRID_MIN_WIDTH,
        help=f"Minimum grid column width in pixels (default: {GRID_MIN_WIDTH}).",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the preview window until it is closed.

    Returns:
        The Qt event loop's exit code.
    """
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication.instance() or QApplication(sys.argv[:1])
    window = build_preview(min_column_width=args.min_column_width)
    window.resize(800, 600)
    window.show()
    logger.info("preview window shown")
    return app.exec()
