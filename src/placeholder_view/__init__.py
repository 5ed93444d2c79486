"""placeholder_view.

Colored placeholder boxes for previewing and debugging UI layouts.

Public API (v1)
--------------
Toolkit-agnostic core:
- `PlaceholderConfig`: Immutable per-instance settings.
- `PlaceholderState`: Index bookkeeping, derived color, overlay text.
- `IndexCounter` / `SHARED_COUNTER`: Counter that hands out indexes to
  appearing views.
- `color_for`: Deterministic (index mod 11) or random palette color.

Qt adapter (optional extra `qt`):
- `placeholder_view.qt.PlaceholderView`: the QWidget.
- `placeholder_view.qt.build_preview`: preview window.

Design guarantees:
- No GUI dependency in the core.
- Counter state is injectable; nothing requires the process-wide default.
"""

from __future__ import annotations

from .colors import BLACK, PALETTE, PALETTE_SIZE, WHITE, PaletteColor, color_for
from .counter import SHARED_COUNTER, IndexCounter
from .errors import (
    ErrorCode,
    OptionalDependencyMissingError,
    PlaceholderViewError,
    raise_invalid_color,
    raise_parameter_error,
    require_qt,
)
from .model import (
    FontRole,
    Geometry,
    OverlayLine,
    OverlayRole,
    PlaceholderConfig,
    PlaceholderState,
    format_position,
    format_size,
)

__version__ = "0.1.0"

__all__ = [
    "BLACK",
    "PALETTE",
    "PALETTE_SIZE",
    "SHARED_COUNTER",
    "WHITE",
    "ErrorCode",
    "FontRole",
    "Geometry",
    "IndexCounter",
    "OptionalDependencyMissingError",
    "OverlayLine",
    "OverlayRole",
    "PaletteColor",
    "PlaceholderConfig",
    "PlaceholderState",
    "PlaceholderViewError",
    "__version__",
    "color_for",
    "format_position",
    "format_size",
    "raise_invalid_color",
    "raise_parameter_error",
    "require_qt",
]
