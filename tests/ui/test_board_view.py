"""Tests for BoardView sizing and signal forwarding."""

from __future__ import annotations

from pathlib import Path

import chess

from tilechess.core.selection import ClickButton
from tilechess.ui.board.board_scene import BoardScene
from tilechess.ui.board.board_view import BoardView


def test_view_wraps_given_scene(qapp: object, tmp_path: Path) -> None:
    scene = BoardScene(images_dir=tmp_path)
    view = BoardView(scene)
    assert view.board_scene is scene
    assert view.scene() is scene


def test_tile_clicks_are_forwarded(qapp: object, tmp_path: Path) -> None:
    view = BoardView(BoardScene(images_dir=tmp_path))
    received: list[tuple[int, ClickButton]] = []
    view.tile_clicked.connect(lambda pos, button: received.append((pos, button)))

    view.board_scene.tile_clicked.emit(chess.C3, ClickButton.LEFT)

    assert received == [(chess.C3, ClickButton.LEFT)]


def test_view_stays_square(qapp: object) -> None:
    view = BoardView()
    assert view.hasHeightForWidth()
    assert view.heightForWidth(500) == 500
    hint = view.sizeHint()
    assert hint.width() == hint.height() == 8 * BoardScene.TILE
    assert view.minimumWidth() >= BoardView.MIN_SIDE
