"""Board orientation — the order in which tiles are laid out on screen."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import TypeVar

T = TypeVar("T")


class Orientation(Enum):
    """Display order of the 64 tiles.

    ``STANDARD`` keeps the canonical order (white at the bottom),
    ``REVERSED`` turns the board around.  Position identifiers never change;
    only the layout does.
    """

    STANDARD = "standard"
    REVERSED = "reversed"

    def traverse(self, tiles: Sequence[T]) -> list[T]:
        """Return *tiles* in layout order for this orientation."""
        if self is Orientation.REVERSED:
            return list(reversed(tiles))
        return list(tiles)

    def opposite(self) -> Orientation:
        if self is Orientation.REVERSED:
            return Orientation.STANDARD
        return Orientation.REVERSED

    @property
    def is_reversed(self) -> bool:
        return self is Orientation.REVERSED
