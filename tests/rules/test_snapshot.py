"""Tests for BoardSnapshot and PieceRef."""

import chess
import pytest

from tilechess.rules.snapshot import BoardSnapshot, PieceRef, create_initial_snapshot
from tilechess.rules.types import Side


class TestInitialSnapshot:
    def test_white_to_move(self) -> None:
        snap = create_initial_snapshot()
        assert snap.side_to_move() == Side.WHITE
        assert snap.ply == 0

    def test_piece_at_reads_occupant(self) -> None:
        snap = create_initial_snapshot()
        assert snap.piece_at(chess.E2) == PieceRef(chess.E2, chess.PAWN, Side.WHITE)
        assert snap.piece_at(chess.D8) == PieceRef(chess.D8, chess.QUEEN, Side.BLACK)

    def test_empty_tile_is_none(self) -> None:
        assert create_initial_snapshot().piece_at(chess.E4) is None

    def test_piece_at_rejects_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            create_initial_snapshot().piece_at(64)

    def test_twenty_legal_moves(self) -> None:
        assert len(create_initial_snapshot().legal_moves()) == 20


class TestSnapshotIsolation:
    def test_source_board_changes_do_not_leak(self) -> None:
        board = chess.Board()
        snap = BoardSnapshot(board)
        board.push_san("e4")
        assert snap.side_to_move() == Side.WHITE
        assert snap.piece_at(chess.E2) is not None

    def test_board_property_returns_copy(self) -> None:
        snap = create_initial_snapshot()
        copy = snap.board
        copy.push_san("e4")
        assert snap.piece_at(chess.E4) is None

    def test_from_fen(self) -> None:
        snap = BoardSnapshot.from_fen("4k3/8/8/8/8/8/4R3/4K3 b - - 0 1")
        assert snap.side_to_move() == Side.BLACK
        assert snap.is_check()
        assert snap.king_position(Side.BLACK) == chess.E8

    def test_from_fen_invalid(self) -> None:
        with pytest.raises(ValueError):
            BoardSnapshot.from_fen("not a fen")


class TestSnapshotQueries:
    def test_is_legal(self) -> None:
        snap = create_initial_snapshot()
        assert snap.is_legal(chess.Move(chess.E2, chess.E4))
        assert not snap.is_legal(chess.Move(chess.E2, chess.E5))

    def test_pinned_move_is_only_pseudo_legal(self) -> None:
        snap = BoardSnapshot.from_fen("k3r3/8/8/8/8/8/4R3/4K3 w - - 0 1")
        move = chess.Move(chess.E2, chess.D2)
        assert not snap.is_legal(move)
        assert snap.is_pseudo_legal(move)

    def test_pushed_returns_new_snapshot(self) -> None:
        snap = create_initial_snapshot()
        after = snap.pushed(chess.Move(chess.E2, chess.E4))
        assert after is not snap
        assert after.ply == 1
        assert after.piece_at(chess.E4) is not None
        assert snap.piece_at(chess.E4) is None
        assert snap.ply == 0


class TestPieceRef:
    def test_owning_side(self) -> None:
        piece = PieceRef(chess.G8, chess.KNIGHT, Side.BLACK)
        assert piece.owning_side() == Side.BLACK

    def test_legal_destinations_of_pawn(self) -> None:
        snap = create_initial_snapshot()
        piece = snap.piece_at(chess.E2)
        assert piece is not None
        assert piece.legal_destinations(snap) == {chess.E3, chess.E4}

    def test_legal_destinations_of_knight(self) -> None:
        snap = create_initial_snapshot()
        piece = snap.piece_at(chess.G1)
        assert piece is not None
        assert piece.legal_destinations(snap) == {chess.F3, chess.H3}

    def test_stale_reference_has_no_destinations(self) -> None:
        snap = create_initial_snapshot()
        ghost = PieceRef(chess.E4, chess.PAWN, Side.WHITE)
        assert ghost.legal_destinations(snap) == frozenset()

    def test_symbols(self) -> None:
        white_knight = PieceRef(chess.B1, chess.KNIGHT, Side.WHITE)
        black_king = PieceRef(chess.E8, chess.KING, Side.BLACK)
        assert white_knight.symbol == "N"
        assert black_king.symbol == "k"
        assert white_knight.glyph == "♘"
        assert white_knight.solid_glyph == "♞"
