"""Position type alias, side enum and coordinate helpers.

Position numbering follows python-chess (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63
"""

from __future__ import annotations

from enum import IntEnum
from typing import TypeAlias

import chess

Position: TypeAlias = int  # 0–63

NUM_TILES = 64

# Standard display order: a8 in the top-left corner, h1 in the bottom-right.
CANONICAL_ORDER: tuple[Position, ...] = tuple(chess.SQUARES_180)


class Side(IntEnum):
    """Owning side of a piece, or the side to move."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @property
    def color(self) -> chess.Color:
        """python-chess colour (``True`` for white)."""
        return self is Side.WHITE

    @classmethod
    def from_color(cls, color: chess.Color) -> Side:
        return cls.WHITE if color else cls.BLACK

    def __str__(self) -> str:
        return self.name.lower()


def is_valid_position(position: int) -> bool:
    """Check whether integer addresses one of the 64 tiles."""
    return 0 <= position < NUM_TILES


def check_position(position: int) -> Position:
    """Return *position* unchanged, raising ``ValueError`` when out of range."""
    if not is_valid_position(position):
        raise ValueError(f"Position out of range: {position!r}")
    return position


def file_of(position: Position) -> int:
    """File index 0–7 (a–h)."""
    return chess.square_file(position)


def rank_of(position: Position) -> int:
    """Rank index 0–7 (1–8)."""
    return chess.square_rank(position)


def is_light_tile(position: Position) -> bool:
    """a1 is dark; colours alternate along files and ranks."""
    return (file_of(position) + rank_of(position)) % 2 == 1


def position_name(position: Position) -> str:
    """Human-readable name, e.g. 0 → 'a1', 63 → 'h8'."""
    return chess.square_name(check_position(position))


def parse_position(name: str) -> Position:
    """Parse tile name, e.g. 'e4' → 28."""
    try:
        return chess.parse_square(name)
    except ValueError:
        raise ValueError(f"Invalid position name: {name!r}") from None
