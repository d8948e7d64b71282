"""Move construction and per-side move execution against a BoardSnapshot."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto

import chess

from tilechess.rules.snapshot import BoardSnapshot
from tilechess.rules.types import Position, Side, check_position, position_name


@dataclass(frozen=True, slots=True)
class MoveDescriptor:
    """A (source, destination) request resolved to an engine move.

    A null descriptor carries ``chess.Move.null()`` and is always rejected
    by the executor.
    """

    source: Position
    destination: Position
    move: chess.Move

    @classmethod
    def null(cls, source: Position, destination: Position) -> MoveDescriptor:
        return cls(source, destination, chess.Move.null())

    @property
    def is_null(self) -> bool:
        return self.move == chess.Move.null()

    @property
    def promotion(self) -> chess.PieceType | None:
        return self.move.promotion

    def __str__(self) -> str:
        src, dst = position_name(self.source), position_name(self.destination)
        if self.is_null:
            return f"null({src}-{dst})"
        if self.promotion is not None:
            return f"{src}{dst}{chess.piece_symbol(self.promotion)}"
        return f"{src}{dst}"


class MoveStatus(IntEnum):
    """Executor verdict for a submitted move."""

    DONE = auto()
    ILLEGAL_MOVE = auto()
    LEAVES_PLAYER_IN_CHECK = auto()

    @property
    def is_done(self) -> bool:
        return self is MoveStatus.DONE


@dataclass(frozen=True, slots=True)
class MoveTransition:
    """Result of executing a move.

    *next_snapshot* is the post-move snapshot when :attr:`status` is done,
    otherwise the unchanged snapshot the move was tried on.
    """

    status: MoveStatus
    next_snapshot: BoardSnapshot
    descriptor: MoveDescriptor


def build_move(
    snapshot: BoardSnapshot,
    source: Position,
    destination: Position,
) -> MoveDescriptor:
    """Resolve *source* → *destination* to a move on *snapshot*.

    Returns a null descriptor when *source* is empty.  Promotions resolve to
    a queen.  A pair with no matching legal move still yields a descriptor
    for the raw move so the executor can classify it.
    """
    check_position(source)
    check_position(destination)

    if snapshot.piece_at(source) is None:
        return MoveDescriptor.null(source, destination)

    candidates = [
        move
        for move in snapshot.legal_moves()
        if move.from_square == source and move.to_square == destination
    ]
    if not candidates:
        return MoveDescriptor(source, destination, chess.Move(source, destination))
    for move in candidates:
        if move.promotion in (None, chess.QUEEN):
            return MoveDescriptor(source, destination, move)
    return MoveDescriptor(source, destination, candidates[0])


class Player:
    """Move executor bound to one side of one snapshot."""

    __slots__ = ("side", "_snapshot")

    def __init__(self, side: Side, snapshot: BoardSnapshot) -> None:
        self.side = side
        self._snapshot = snapshot

    def make_move(self, descriptor: MoveDescriptor) -> MoveTransition:
        """Try *descriptor*; never raises for illegal input."""
        snapshot = self._snapshot
        move = descriptor.move

        if descriptor.is_null:
            return MoveTransition(MoveStatus.ILLEGAL_MOVE, snapshot, descriptor)

        piece = snapshot.piece_at(move.from_square)
        if piece is None or piece.owning_side() != self.side:
            return MoveTransition(MoveStatus.ILLEGAL_MOVE, snapshot, descriptor)

        if snapshot.is_legal(move):
            return MoveTransition(MoveStatus.DONE, snapshot.pushed(move), descriptor)
        if snapshot.is_pseudo_legal(move):
            return MoveTransition(
                MoveStatus.LEAVES_PLAYER_IN_CHECK, snapshot, descriptor
            )
        return MoveTransition(MoveStatus.ILLEGAL_MOVE, snapshot, descriptor)


def current_player(snapshot: BoardSnapshot) -> Player:
    """Executor for the side to move in *snapshot*."""
    return Player(snapshot.side_to_move(), snapshot)


def execute_move(snapshot: BoardSnapshot, descriptor: MoveDescriptor) -> MoveTransition:
    """Submit *descriptor* to the executor of the side to move."""
    return current_player(snapshot).make_move(descriptor)
