"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest

# Board tests draw real Qt scenes. Without a display, use the offscreen backend.
if sys.platform.startswith("linux") and not any(
    key in os.environ for key in ("QT_QPA_PLATFORM", "DISPLAY", "WAYLAND_DISPLAY")
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _no_pieces_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's TILECHESS_PIECES out of the tests."""
    from tilechess.runtime_assets import PIECE_IMAGES_ENV

    monkeypatch.delenv(PIECE_IMAGES_ENV, raising=False)


@pytest.fixture(autouse=True)
def _isolate_board_widgets(request: pytest.FixtureRequest) -> Iterator[None]:
    """Close windows and forget cached piece pixmaps around each UI test."""
    if "ui" not in request.node.path.parts:
        yield
        return

    from tilechess.ui.resources import clear_cache

    app = request.getfixturevalue("qapp")
    clear_cache()
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()
    clear_cache()
