"""Legal-destination query used for move highlighting."""

from __future__ import annotations

from tilechess.core.selection import Selection
from tilechess.rules import BoardSnapshot, Position


def legal_destinations(
    selection: Selection, snapshot: BoardSnapshot
) -> frozenset[Position]:
    """Destinations the selected piece may reach in *snapshot*.

    Empty when nothing is selected or when the selected piece does not
    belong to the side to move, so a selection that outlived its turn
    never lights up any tile.
    """
    piece = selection.piece
    if piece is None:
        return frozenset()
    if piece.owning_side() != snapshot.side_to_move():
        return frozenset()
    return piece.legal_destinations(snapshot)
