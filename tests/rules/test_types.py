"""Tests for position helpers and the Side enum."""

import chess
import pytest

from tilechess.rules.types import (
    CANONICAL_ORDER,
    Side,
    check_position,
    is_light_tile,
    is_valid_position,
    parse_position,
    position_name,
)


class TestPositions:
    def test_names_round_trip_corners(self) -> None:
        assert position_name(0) == "a1"
        assert position_name(63) == "h8"
        assert parse_position("e4") == chess.E4

    @pytest.mark.parametrize("name", ["", "e", "i1", "a9", "e44"])
    def test_parse_rejects_bad_names(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_position(name)

    @pytest.mark.parametrize("value", [-1, 64, 100])
    def test_out_of_range(self, value: int) -> None:
        assert not is_valid_position(value)
        with pytest.raises(ValueError):
            check_position(value)

    def test_check_position_passes_valid_through(self) -> None:
        assert check_position(chess.D5) == chess.D5

    def test_a1_is_dark_h1_is_light(self) -> None:
        assert not is_light_tile(chess.A1)
        assert is_light_tile(chess.H1)
        assert is_light_tile(chess.A8)
        assert not is_light_tile(chess.H8)


class TestCanonicalOrder:
    def test_covers_every_position_once(self) -> None:
        assert sorted(CANONICAL_ORDER) == list(range(64))

    def test_starts_top_left_ends_bottom_right(self) -> None:
        assert CANONICAL_ORDER[0] == chess.A8
        assert CANONICAL_ORDER[7] == chess.H8
        assert CANONICAL_ORDER[-1] == chess.H1


class TestSide:
    def test_opposite(self) -> None:
        assert Side.WHITE.opposite == Side.BLACK
        assert Side.BLACK.opposite == Side.WHITE

    def test_color_conversion(self) -> None:
        assert Side.from_color(chess.WHITE) is Side.WHITE
        assert Side.from_color(chess.BLACK) is Side.BLACK
        assert Side.WHITE.color is chess.WHITE
        assert Side.BLACK.color is chess.BLACK

    def test_str(self) -> None:
        assert str(Side.WHITE) == "white"
