"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import chess

from tilechess.rules import PieceRef, Side
from tilechess.ui.settings import TableSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def missing_piece_images(images_dir: Path) -> list[str]:
    """Names of the twelve piece images that are absent from *images_dir*."""
    from tilechess.ui.resources import piece_image_name

    names = [
        piece_image_name(PieceRef(chess.A1, kind, side))
        for side in Side
        for kind in chess.PIECE_TYPES
    ]
    return [name for name in names if not (images_dir / name).is_file()]


def _report_piece_images(images_dir: Path) -> None:
    if not images_dir.is_dir():
        _LOGGER.warning(
            "Piece image directory not found: %s; pieces are drawn as text",
            images_dir,
        )
        return
    missing = missing_piece_images(images_dir)
    if missing:
        _LOGGER.warning(
            "%d piece image(s) missing in %s: %s",
            len(missing),
            images_dir,
            ", ".join(missing),
        )


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from tilechess.ui.styles.theme import APP_STYLE

    app.setApplicationName("Tilechess")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None, settings: TableSettings | None = None
) -> int:
    """Create the QApplication, show the board window and run the event loop."""
    from PyQt6.QtWidgets import QApplication

    from tilechess.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    settings = settings if settings is not None else TableSettings()
    _report_piece_images(settings.piece_images_dir)

    window = MainWindow(settings)
    window.show()

    return app.exec()
