"""Rules bridge — python-chess behind the board contracts the UI consumes.

Quick start::

    from tilechess.rules import build_move, create_initial_snapshot, execute_move

    snapshot = create_initial_snapshot()
    transition = execute_move(snapshot, build_move(snapshot, 12, 28))  # e2-e4
    assert transition.status.is_done
"""

from tilechess.rules.moves import (
    MoveDescriptor,
    MoveStatus,
    MoveTransition,
    Player,
    build_move,
    current_player,
    execute_move,
)
from tilechess.rules.snapshot import BoardSnapshot, PieceRef, create_initial_snapshot
from tilechess.rules.types import (
    CANONICAL_ORDER,
    NUM_TILES,
    Position,
    Side,
    check_position,
    file_of,
    is_light_tile,
    is_valid_position,
    parse_position,
    position_name,
    rank_of,
)

__all__ = [
    # Types / helpers
    "CANONICAL_ORDER",
    "NUM_TILES",
    "Position",
    "Side",
    "check_position",
    "file_of",
    "is_light_tile",
    "is_valid_position",
    "parse_position",
    "position_name",
    "rank_of",
    # Snapshot
    "BoardSnapshot",
    "PieceRef",
    "create_initial_snapshot",
    # Moves
    "MoveDescriptor",
    "MoveStatus",
    "MoveTransition",
    "Player",
    "build_move",
    "current_player",
    "execute_move",
]
