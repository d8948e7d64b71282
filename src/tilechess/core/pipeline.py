"""Move application pipeline: build → execute → outcome."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from tilechess.rules import (
    BoardSnapshot,
    MoveDescriptor,
    MoveStatus,
    Position,
    build_move,
    execute_move,
)

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of one move attempt.

    *resulting_snapshot* is set only when the engine accepted the move.
    """

    accepted: bool
    resulting_snapshot: BoardSnapshot | None
    status: MoveStatus
    descriptor: MoveDescriptor

    def __post_init__(self) -> None:
        if self.accepted != (self.resulting_snapshot is not None):
            raise ValueError("An accepted outcome must carry a snapshot")


def apply_move(
    snapshot: BoardSnapshot,
    source: Position,
    destination: Position,
) -> MoveOutcome:
    """Submit *source* → *destination* to the engine for the side to move.

    Rejections are returned, never raised; *snapshot* is left untouched
    either way.
    """
    descriptor = build_move(snapshot, source, destination)
    result = execute_move(snapshot, descriptor)

    if not result.status.is_done:
        _LOGGER.debug("Move %s rejected: %s", descriptor, result.status.name)
        return MoveOutcome(False, None, result.status, descriptor)

    return MoveOutcome(True, result.next_snapshot, result.status, descriptor)
