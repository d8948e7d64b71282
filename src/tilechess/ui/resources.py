"""Piece image resolution.

Images live in one directory as ``<side><letter>.gif``, e.g. ``WN.gif`` for
the white knight.  A missing or unreadable image is a rendering problem
only: :func:`piece_pixmap` logs it and returns ``None`` so the board can
fall back to a text glyph.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QImage, QPixmap

from tilechess.rules import PieceRef, Side

_LOGGER = logging.getLogger(__name__)

_SIDE_PREFIX: dict[Side, str] = {
    Side.WHITE: "W",
    Side.BLACK: "B",
}


class AssetResolutionError(FileNotFoundError):
    """A piece image could not be found or decoded."""


def piece_image_name(piece: PieceRef) -> str:
    """File name of the image for *piece*, e.g. ``BQ.gif``."""
    return f"{_SIDE_PREFIX[piece.side]}{piece.symbol.upper()}.gif"


def piece_image_path(piece: PieceRef, images_dir: Path) -> Path:
    return Path(images_dir) / piece_image_name(piece)


def load_piece_image(path: Path) -> QImage:
    """Read an image from disk, raising :class:`AssetResolutionError`."""
    if not path.is_file():
        raise AssetResolutionError(f"Piece image not found: {path}")
    image = QImage(str(path))
    if image.isNull():
        raise AssetResolutionError(f"Piece image unreadable: {path}")
    return image


@lru_cache(maxsize=128)
def _scaled_pixmap(path: Path, size: int) -> QPixmap | None:
    try:
        image = load_piece_image(path)
    except AssetResolutionError as exc:
        _LOGGER.warning("%s; drawing text glyph instead", exc)
        return None
    scaled = image.scaled(
        size,
        size,
        Qt.AspectRatioMode.KeepAspectRatio,
        Qt.TransformationMode.SmoothTransformation,
    )
    return QPixmap.fromImage(scaled)


def piece_pixmap(piece: PieceRef, images_dir: Path, size: int) -> QPixmap | None:
    """Cached *size*-px pixmap for *piece*, or ``None`` if unavailable."""
    return _scaled_pixmap(piece_image_path(piece, images_dir), size)


def clear_cache() -> None:
    """Forget cached pixmaps (e.g. after the image directory changed)."""
    _scaled_pixmap.cache_clear()
