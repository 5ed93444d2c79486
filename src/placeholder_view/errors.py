"""
Core error types and helpers for placeholder_view.

Design intent:
- Toolkit-agnostic: no Qt imports, so the core can be used and tested without
  a GUI binding installed.
- Lean on built-in exception classes for ergonomics (ValueError/TypeError).
- Provide machine-readable error codes via a single lightweight base error that
  can be used as an exception cause for structured handling.

Contract:
- Public raiser helpers raise built-in exceptions and chain a
  PlaceholderViewError as the cause, carrying an ErrorCode.
- Callers that want structured handling can catch built-ins and inspect
  `exc.__cause__` for a PlaceholderViewError (and its `code`).
- `require_qt` is the one exception: it raises OptionalDependencyMissingError
  directly, which is itself an ImportError.
"""

from __future__ import annotations

from enum import StrEnum
from importlib.util import find_spec
from typing import Final, NoReturn

_QT_EXTRA_INSTALL_MSG: Final[str] = (
    "Install the optional dependency group with:\n"
    "  pip install 'placeholder_view[qt]'\n"
    "or, if you are using uv:\n"
    "  uv pip install '.[qt]'"
)


class ErrorCode(StrEnum):
    """Machine-readable classification for placeholder_view failures."""

    INVALID_PARAMETERS = "invalid_parameters"
    INVALID_COLOR = "invalid_color"
    OPTIONAL_DEPENDENCY_MISSING = "optional_dependency_missing"


class PlaceholderViewError(Exception):
    """Lightweight, structured error carrying an ErrorCode.

    This is intentionally not raised directly by most APIs. Instead, helpers
    raise built-in exceptions (ValueError/TypeError) and set a
    PlaceholderViewError as the exception cause.
    """

    def __init__(self, message: str, *, code: ErrorCode | None = None) -> None:
        """
        Initialize PlaceholderViewError.

        Args:
            message: Human-readable error message.
            code: Optional ErrorCode classifying the error.
        """
        super().__init__(message)
        self.code: ErrorCode | None = code


class OptionalDependencyMissingError(PlaceholderViewError, ImportError):
    """Raised when the Qt adapter is used without a Qt binding installed."""


# -----------------------------------------------------------------------------
# Standardized message prefixes
# -----------------------------------------------------------------------------

_INVALID_PARAMS_PREFIX: Final[str] = "Invalid parameters for placeholder_view."
_INVALID_COLOR_PREFIX: Final[str] = "Invalid placeholder_view color."


# -----------------------------------------------------------------------------
# Dependency guard
# -----------------------------------------------------------------------------


def require_qt() -> None:
    """Require that PySide6 is importable.

    Raises:
        OptionalDependencyMissingError: If PySide6 cannot be imported.
    """
    if find_spec("PySide6") is not None:
        return

    msg = (
        "The placeholder_view.qt adapter requires PySide6, but it is not "
        "available in this environment.\n\n"
        "Import detail: Module spec not found\n\n"
        f"{_QT_EXTRA_INSTALL_MSG}"
    )
    raise OptionalDependencyMissingError(
        msg, code=ErrorCode.OPTIONAL_DEPENDENCY_MISSING
    )


# -----------------------------------------------------------------------------
# Raiser helpers (raise built-ins; chain PlaceholderViewError with code)
# -----------------------------------------------------------------------------


def raise_parameter_error(
    *,
    name: str,
    expected: str,
    got: object,
    kind: type[Exception] = TypeError,
) -> NoReturn:
    """Raise a standardized parameter error.

    Args:
        name: Parameter name, used in the message.
        expected: Description of what was expected.
        got: Value actually received.
        kind: Built-in exception type to raise (TypeError or ValueError).

    Raises:
        TypeError: By default, chained from
            PlaceholderViewError(code=INVALID_PARAMETERS).
        ValueError: When `kind=ValueError`.
    """
    msg = f"{_INVALID_PARAMS_PREFIX} {name} must be {expected}. Got: {got!r}."
    raise kind(msg) from PlaceholderViewError(
        msg, code=ErrorCode.INVALID_PARAMETERS
    )


def raise_invalid_color(*, value: object, detail: str | None = None) -> NoReturn:
    """Raise a standardized color error.

    Raises:
        ValueError: Always, chained from PlaceholderViewError(code=INVALID_COLOR).
    """
    msg = f"{_INVALID_COLOR_PREFIX} Cannot interpret {value!r} as a color."
    if detail:
        msg = f"{msg} Detail: {detail}"
    raise ValueError(msg) from PlaceholderViewError(msg, code=ErrorCode.INVALID_COLOR)
