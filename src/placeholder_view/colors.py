"""placeholder_view.colors.

Deterministic palette selection for placeholder views.

The palette is a fixed, ordered tuple of eleven named system colors. An index
selects `PALETTE[index % len(PALETTE)]`, so colors repeat with period 11. When
no index is given, a uniformly random entry is drawn from a numpy Generator.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Final

import numpy as np

from .errors import raise_parameter_error


@dataclass(frozen=True, slots=True)
class PaletteColor:
    """A named palette entry.

    Attributes:
        name: Color name, e.g. "teal".
        hex: `#RRGGBB` string understood by most toolkits.
    """

    name: str
    hex: str

    @property
    def rgb(self) -> tuple[int, int, int]:
        """Return the color as an `(r, g, b)` tuple of 0-255 ints."""
        value = self.hex.lstrip("#")
        return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


# Order matters: it defines the index -> color mapping.
PALETTE: Final[tuple[PaletteColor, ...]] = (
    PaletteColor("gray", "#8E8E93"),
    PaletteColor("yellow", "#FFCC00"),
    PaletteColor("teal", "#30B0C7"),
    PaletteColor("green", "#34C759"),
    PaletteColor("pink", "#FF2D55"),
    PaletteColor("blue", "#007AFF"),
    PaletteColor("brown", "#A2845E"),
    PaletteColor("purple", "#AF52DE"),
    PaletteColor("indigo", "#5856D6"),
    PaletteColor("mint", "#00C7BE"),
    PaletteColor("red", "#FF3B30"),
)

PALETTE_SIZE: Final[int] = len(PALETTE)

BLACK: Final[PaletteColor] = PaletteColor("black", "#000000")
WHITE: Final[PaletteColor] = PaletteColor("white", "#FFFFFF")


def color_for(
    index: int | None = None,
    *,
    rng: np.random.Generator | None = None,
) -> PaletteColor:
    """
    Pick a palette color for an index.

    Args:
        index: Index to map deterministically. Negative values wrap with
            Python modulo semantics. When None, a random entry is returned.
        rng: Generator used for the random pick. Ignored when `index` is given.

    Returns:
        PaletteColor: The selected palette entry.
    """
    if index is None:
        generator = rng if rng is not None else np.random.default_rng()
        return PALETTE[int(generator.integers(PALETTE_SIZE))]

    if isinstance(index, bool):
        raise_parameter_error(name="index", expected="an int or None", got=index)
    try:
        position = operator.index(index)
    except TypeError:
        raise_parameter_error(name="index", expected="an int or None", got=index)

    return PALETTE[position % PALETTE_SIZE]

