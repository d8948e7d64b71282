"""Tests for move construction and execution."""

import chess

from tilechess.rules.moves import (
    MoveDescriptor,
    MoveStatus,
    Player,
    build_move,
    current_player,
    execute_move,
)
from tilechess.rules.snapshot import BoardSnapshot, create_initial_snapshot
from tilechess.rules.types import Side

_PINNED_ROOK_FEN = "k3r3/8/8/8/8/8/4R3/4K3 w - - 0 1"
_PROMOTION_FEN = "1k6/P7/8/8/8/8/8/K7 w - - 0 1"


class TestBuildMove:
    def test_empty_source_gives_null(self) -> None:
        desc = build_move(create_initial_snapshot(), chess.E4, chess.E5)
        assert desc.is_null
        assert desc.source == chess.E4
        assert desc.destination == chess.E5

    def test_legal_pair_resolves(self) -> None:
        desc = build_move(create_initial_snapshot(), chess.E2, chess.E4)
        assert not desc.is_null
        assert desc.move == chess.Move(chess.E2, chess.E4)
        assert str(desc) == "e2e4"

    def test_illegal_pair_is_raw_move(self) -> None:
        desc = build_move(create_initial_snapshot(), chess.E2, chess.E5)
        assert not desc.is_null
        assert desc.move == chess.Move(chess.E2, chess.E5)

    def test_promotion_defaults_to_queen(self) -> None:
        snap = BoardSnapshot.from_fen(_PROMOTION_FEN)
        desc = build_move(snap, chess.A7, chess.A8)
        assert desc.promotion == chess.QUEEN

    def test_null_descriptor_str(self) -> None:
        assert str(MoveDescriptor.null(chess.E4, chess.E5)) == "null(e4-e5)"

    def test_corner_to_itself_is_not_null(self) -> None:
        desc = build_move(create_initial_snapshot(), chess.A1, chess.A1)
        assert not desc.is_null
        assert str(desc) == "a1a1"

    def test_str_is_uci(self) -> None:
        snap = BoardSnapshot.from_fen("1k6/P7/8/8/8/8/8/K7 w - - 0 1")
        assert str(build_move(snap, chess.A7, chess.A8)) == "a7a8q"
        assert str(build_move(create_initial_snapshot(), chess.G1, chess.F3)) == "g1f3"


class TestExecuteMove:
    def test_legal_move_done(self) -> None:
        snap = create_initial_snapshot()
        result = execute_move(snap, build_move(snap, chess.E2, chess.E4))
        assert result.status == MoveStatus.DONE
        assert result.status.is_done
        assert result.next_snapshot is not snap
        assert result.next_snapshot.side_to_move() == Side.BLACK
        assert result.next_snapshot.piece_at(chess.E4) is not None

    def test_original_snapshot_untouched(self) -> None:
        snap = create_initial_snapshot()
        fen = snap.fen
        execute_move(snap, build_move(snap, chess.E2, chess.E4))
        assert snap.fen == fen

    def test_null_move_illegal(self) -> None:
        snap = create_initial_snapshot()
        result = execute_move(snap, MoveDescriptor.null(chess.E4, chess.E5))
        assert result.status == MoveStatus.ILLEGAL_MOVE
        assert result.next_snapshot is snap

    def test_same_square_illegal(self) -> None:
        snap = create_initial_snapshot()
        result = execute_move(snap, build_move(snap, chess.E2, chess.E2))
        assert result.status == MoveStatus.ILLEGAL_MOVE

    def test_off_turn_piece_illegal(self) -> None:
        snap = create_initial_snapshot()
        result = execute_move(snap, build_move(snap, chess.E7, chess.E5))
        assert result.status == MoveStatus.ILLEGAL_MOVE
        assert result.next_snapshot is snap

    def test_pinned_piece_leaves_king_in_check(self) -> None:
        snap = BoardSnapshot.from_fen(_PINNED_ROOK_FEN)
        result = execute_move(snap, build_move(snap, chess.E2, chess.D2))
        assert result.status == MoveStatus.LEAVES_PLAYER_IN_CHECK
        assert not result.status.is_done
        assert result.next_snapshot is snap

    def test_promotion_executes(self) -> None:
        snap = BoardSnapshot.from_fen(_PROMOTION_FEN)
        result = execute_move(snap, build_move(snap, chess.A7, chess.A8))
        assert result.status.is_done
        queen = result.next_snapshot.piece_at(chess.A8)
        assert queen is not None and queen.kind == chess.QUEEN


class TestPlayer:
    def test_current_player_is_side_to_move(self) -> None:
        snap = create_initial_snapshot()
        assert current_player(snap).side == Side.WHITE

    def test_player_rejects_other_sides_piece(self) -> None:
        snap = create_initial_snapshot()
        black = Player(Side.BLACK, snap)
        result = black.make_move(build_move(snap, chess.E2, chess.E4))
        assert result.status == MoveStatus.ILLEGAL_MOVE
