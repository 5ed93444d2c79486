"""placeholder_view.qt.widget.

`PlaceholderView`, a QWidget that paints a colored rounded rectangle with the
view's index, size and global position stacked in its center.

Show/hide events drive index assignment through `PlaceholderState`.
Spontaneous events (the window system minimizing or restoring the window)
are ignored, so only changes to the widget's own visibility count as
appearing or disappearing.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from PySide6.QtCore import QEvent, QObject, QPoint, QRectF, QSize, Qt
from PySide6.QtGui import QColor, QFont, QFontMetricsF, QPainter
from PySide6.QtWidgets import QSizePolicy, QWidget

from ..colors import WHITE, PaletteColor
from ..errors import raise_invalid_color
from ..model import FontRole, Geometry, OverlayLine, PlaceholderConfig, PlaceholderState

if TYPE_CHECKING:
    from collections.abc import Callable

    from PySide6.QtGui import QHideEvent, QPaintEvent, QShowEvent

    from ..counter import IndexCounter

logger = logging.getLogger(__name__)

# Caption sizes relative to the widget's body font.
_FONT_SCALE: Final[dict[FontRole, float]] = {
    FontRole.CAPTION: 12 / 17,
    FontRole.CAPTION2: 11 / 17,
}
_LINE_SPACING: Final[float] = 4.0
_DEFAULT_SIZE: Final[QSize] = QSize(100, 100)


def to_qcolor(value: object) -> QColor:
    """
    Convert a color override into a QColor.

    Args:
        value: A QColor, a PaletteColor, a Qt.GlobalColor, a color name or
            `#RRGGBB` string, or an `(r, g, b[, a])` tuple of ints.

    Returns:
        QColor: A valid color.

    Raises:
        ValueError: If the value cannot be interpreted as a valid color.
    """
    if isinstance(value, PaletteColor):
        return QColor(value.hex)
    if isinstance(value, QColor):
        color = QColor(value)
    elif isinstance(value, (bool, float)):
        raise_invalid_color(value=value, detail="float and bool values are not colors")
    elif isinstance(value, tuple):
        if len(value) not in (3, 4) or not all(
            isinstance(c, int) and not isinstance(c, bool) for c in value
        ):
            raise_invalid_color(value=value, detail="expected 3 or 4 int components")
        color = QColor(*value)
    else:
        try:
            color = QColor(value)
        except (TypeError, ValueError) as exc:
            raise_invalid_color(value=value, detail=str(exc))

    if not color.isValid():
        raise_invalid_color(value=value)
    return color


def _release_on_destroy(state: PlaceholderState) -> Callable[..., None]:
    # Must not capture the widget, or the connection keeps it alive.
    def _release(*_: object) -> None:
        state.disappear()

    return _release


class PlaceholderView(QWidget):
    """Colored placeholder box for previewing and debugging layouts.

    Without an index override, the first view shown takes index 0, the next 1,
    and so on; hiding or deleting a view gives its index back. With an
    override the index is fixed, displayed with an asterisk, and the counter
    is left alone.
    """

    def __init__(
        self,
        index_override: int | None = None,
        color_override: object | None = None,
        corner_radius: float = 0,
        show_index: bool = True,
        show_size: bool = True,
        show_position: bool = True,
        *,
        counter: IndexCounter | None = None,
        parent: QWidget | None = None,
    ) -> None:
        """
        Create a placeholder view.

        Args:
            index_override: Fixed index used for display and color.
            color_override: Fill color; see `to_qcolor` for accepted values.
            corner_radius: Radius for the corners of the rectangle.
            show_index: When False, the index is not displayed.
            show_size: When False, the size is not displayed.
            show_position: When False, the global position is not displayed.
            counter: Counter to claim indexes from; defaults to the shared one.
            parent: Parent widget.
        """
        config = PlaceholderConfig(
            index_override=index_override,
            color_override=color_override,
            corner_radius=corner_radius,
            show_index=show_index,
            show_size=show_size,
            show_position=show_position,
        )
        fill = to_qcolor(color_override) if color_override is not None else None

        super().__init__(parent)
        self._fill_override: QColor | None = fill
        self._tracked_window: QWidget | None = None
        self.state = PlaceholderState(config, counter=counter)
        # Deleting a visible widget sends no hide event.
        self.destroyed.connect(_release_on_destroy(self.state))
        self.setSizePolicy(
            QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding
        )

    # -------------------------------------------------------------------------
    # Read-only accessors
    # -------------------------------------------------------------------------

    @property
    def config(self) -> PlaceholderConfig:
        return self.state.config

    @property
    def index(self) -> int:
        return self.state.index

    @property
    def index_text(self) -> str:
        return self.state.index_text

    @property
    def fill_color(self) -> QColor:
        """Color used to fill the rectangle."""
        if self._fill_override is not None:
            return QColor(self._fill_override)
        return QColor(self.state.palette_color.hex)

    def current_geometry(self) -> Geometry:
        """Size and global top-left position of this widget."""
        origin = self.mapToGlobal(QPoint(0, 0))
        return Geometry(
            x=origin.x(), y=origin.y(), width=self.width(), height=self.height()
        )

    def overlay_texts(self) -> list[str]:
        """Text lines currently drawn over the rectangle, top to bottom."""
        return [line.text for line in self.state.overlay_lines(self.current_geometry())]

    def sizeHint(self) -> QSize:  # noqa: N802
        return _DEFAULT_SIZE

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def showEvent(self, event: QShowEvent) -> None:  # noqa: N802
        super().showEvent(event)
        if event.spontaneous():
            logger.debug("ignoring spontaneous show of placeholder %s", self.index_text)
            return
        if self.state.appear():
            self._track_window()
            self.update()

    def hideEvent(self, event: QHideEvent) -> None:  # noqa: N802
        super().hideEvent(event)
        if event.spontaneous():
            logger.debug("ignoring spontaneous hide of placeholder %s", self.index_text)
            return
        if self.state.disappear():
            self._untrack_window()

    def resizeEvent(self, event) -> None:  # noqa: N802
        super().resizeEvent(event)
        self.update()

    def moveEvent(self, event) -> None:  # noqa: N802
        super().moveEvent(event)
        self.update()

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # noqa: N802
        # Moving the top-level window changes our global position without
        # sending us a move event.
        if watched is self._tracked_window and event.type() == QEvent.Type.Move:
            self.update()
        return super().eventFilter(watched, event)

    def _track_window(self) -> None:
        window = self.window()
        if window is self or window is self._tracked_window:
            return
        self._untrack_window()
        window.installEventFilter(self)
        self._tracked_window = window

    def _untrack_window(self) -> None:
        if self._tracked_window is not None:
            self._tracked_window.removeEventFilter(self)
            self._tracked_window = None

    # -------------------------------------------------------------------------
    # Painting
    # -------------------------------------------------------------------------

    def paintEvent(self, event: QPaintEvent) -> None:  # noqa: N802
        rect = QRectF(self.rect())
        radius = min(self.config.corner_radius, rect.width() / 2, rect.height() / 2)

        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(self.fill_color)
            if radius > 0:
                painter.drawRoundedRect(rect, radius, radius)
            else:
                painter.drawRect(rect)

            lines = self.state.overlay_lines(self.current_geometry())
            if lines:
                self._draw_overlay(painter, rect, lines)
        finally:
            painter.end()

    def _font_for(self, role: FontRole) -> QFont:
        font = QFont(self.font())
        scale = _FONT_SCALE[role]
        if font.pointSizeF() > 0:
            font.setPointSizeF(max(1.0, font.pointSizeF() * scale))
        else:
            font.setPixelSize(max(1, round(font.pixelSize() * scale)))
        return font

    def _draw_overlay(
        self, painter: QPainter, rect: QRectF, lines: list[OverlayLine]
    ) -> None:
        fonts = [self._font_for(line.font) for line in lines]
        heights = [QFontMetricsF(font).height() for font in fonts]
        total = sum(heights) + _LINE_SPACING * (len(lines) - 1)

        y = rect.center().y() - total / 2
        for line, font, height in zip(lines, fonts, heights, strict=True):
            color = QColor(*WHITE.rgb)
            color.setAlphaF(line.opacity)
            painter.setFont(font)
            painter.setPen(color)
            painter.drawText(
                QRectF(rect.left(), y, rect.width(), height),
                Qt.AlignmentFlag.AlignCenter,
                line.text,
            )
            y += height + _LINE_SPACING
