"""BoardSnapshot and PieceRef — read-only views over a python-chess board."""

from __future__ import annotations

from dataclasses import dataclass

import chess

from tilechess.rules.types import Position, Side, check_position


@dataclass(frozen=True, slots=True)
class PieceRef:
    """Immutable reference to the piece standing on *position* in one snapshot.

    Only meaningful for the snapshot it was read from; compare it against a
    new snapshot with :meth:`BoardSnapshot.piece_at` before reusing it.
    """

    position: Position
    kind: chess.PieceType
    side: Side

    @classmethod
    def from_piece(cls, position: Position, piece: chess.Piece) -> PieceRef:
        return cls(position, piece.piece_type, Side.from_color(piece.color))

    def owning_side(self) -> Side:
        return self.side

    def legal_destinations(self, snapshot: BoardSnapshot) -> frozenset[Position]:
        """Positions this piece may move to in *snapshot*.

        Empty when *snapshot* does not hold this very piece on
        :attr:`position`.
        """
        if snapshot.piece_at(self.position) != self:
            return frozenset()
        return frozenset(
            move.to_square
            for move in snapshot.legal_moves()
            if move.from_square == self.position
        )

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def symbol(self) -> str:
        """FEN letter (uppercase = white, lowercase = black)."""
        return self._as_chess_piece().symbol()

    @property
    def glyph(self) -> str:
        """Unicode chess figure, e.g. ♞."""
        return self._as_chess_piece().unicode_symbol()

    @property
    def solid_glyph(self) -> str:
        """Filled Unicode figure of this kind regardless of side."""
        return chess.Piece(self.kind, chess.BLACK).unicode_symbol()

    def _as_chess_piece(self) -> chess.Piece:
        return chess.Piece(self.kind, self.side.color)


class BoardSnapshot:
    """Full game state at one ply.

    Wraps a private :class:`chess.Board` copy that is never mutated after
    construction.  A new snapshot is produced for every accepted move.
    """

    __slots__ = ("_board", "_legal_moves")

    def __init__(self, board: chess.Board | None = None) -> None:
        self._board = board.copy() if board is not None else chess.Board()
        self._legal_moves: tuple[chess.Move, ...] | None = None

    @classmethod
    def from_fen(cls, fen: str) -> BoardSnapshot:
        """Build a snapshot from a FEN string (``ValueError`` if invalid)."""
        return cls._adopt(chess.Board(fen))

    @classmethod
    def _adopt(cls, board: chess.Board) -> BoardSnapshot:
        """Wrap *board* without copying; the caller gives up ownership."""
        snapshot = cls.__new__(cls)
        snapshot._board = board
        snapshot._legal_moves = None
        return snapshot

    # ── Queries ──────────────────────────────────────────────────────────

    def piece_at(self, position: Position) -> PieceRef | None:
        piece = self._board.piece_at(check_position(position))
        if piece is None:
            return None
        return PieceRef.from_piece(position, piece)

    def side_to_move(self) -> Side:
        return Side.from_color(self._board.turn)

    def legal_moves(self) -> tuple[chess.Move, ...]:
        """All legal engine moves for the side to move (cached)."""
        if self._legal_moves is None:
            self._legal_moves = tuple(self._board.legal_moves)
        return self._legal_moves

    def king_position(self, side: Side) -> Position | None:
        return self._board.king(side.color)

    def is_check(self) -> bool:
        return self._board.is_check()

    def is_checkmate(self) -> bool:
        return self._board.is_checkmate()

    def outcome(self) -> chess.Outcome | None:
        """Game result detected by the engine, or ``None`` while in progress."""
        return self._board.outcome()

    def is_legal(self, move: chess.Move) -> bool:
        return self._board.is_legal(move)

    def is_pseudo_legal(self, move: chess.Move) -> bool:
        """Legal apart from leaving the mover's own king in check."""
        return self._board.is_pseudo_legal(move)

    def pushed(self, move: chess.Move) -> BoardSnapshot:
        """New snapshot with *move* played; this one is left as it was."""
        board = self._board.copy()
        board.push(move)
        return BoardSnapshot._adopt(board)

    @property
    def fen(self) -> str:
        return self._board.fen()

    @property
    def ply(self) -> int:
        return self._board.ply()

    @property
    def board(self) -> chess.Board:
        """A fresh mutable copy of the underlying engine board."""
        return self._board.copy()

    def __repr__(self) -> str:
        return f"BoardSnapshot({self.fen!r})"


def create_initial_snapshot() -> BoardSnapshot:
    """Snapshot of the standard starting position, white to move."""
    return BoardSnapshot._adopt(chess.Board())
