"""Qt (PySide6) adapter for placeholder_view.

Importing this package requires the optional `qt` extra; a clear
OptionalDependencyMissingError is raised otherwise.
"""

from __future__ import annotations

from ..errors import require_qt

require_qt()

from .preview import AdaptiveGrid, build_preview, main  # noqa: E402
from .widget import PlaceholderView, to_qcolor  # noqa: E402

__all__ = [
    "AdaptiveGrid",
    "PlaceholderView",
    "build_preview",
    "main",
    "to_qcolor",
]
