"""BoardScene — QGraphicsScene that draws tile frames and reports clicks."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsItem,
    QGraphicsPixmapItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from tilechess.core.orientation import Orientation
from tilechess.core.render import TileFrame
from tilechess.core.selection import ClickButton
from tilechess.rules import CANONICAL_ORDER, PieceRef, Position, Side
from tilechess.runtime_assets import default_piece_images_dir
from tilechess.ui.resources import piece_pixmap
from tilechess.ui.styles.theme import BoardTheme

_BUTTONS: dict[Qt.MouseButton, ClickButton] = {
    Qt.MouseButton.LeftButton: ClickButton.LEFT,
    Qt.MouseButton.RightButton: ClickButton.RIGHT,
    Qt.MouseButton.MiddleButton: ClickButton.MIDDLE,
}


class BoardScene(QGraphicsScene):
    """Renders the 64 tiles of a frame and turns presses into tile clicks.

    The scene holds no game state.  It lays tiles out in the order of the
    last rendered frame and maps presses back through that same layout.

    Signals:
        tile_clicked(int, ClickButton): Position and button of a press.
    """

    tile_clicked = pyqtSignal(int, object)

    TILE = 64  # px per tile

    _DOT_RATIO = 0.3

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        theme: BoardTheme | None = None,
        images_dir: Path | None = None,
    ) -> None:
        super().__init__(parent)
        self._theme = theme if theme is not None else BoardTheme.default()
        if images_dir is None:
            images_dir = default_piece_images_dir()
        self._images_dir = images_dir
        self._layout: list[Position] = Orientation.STANDARD.traverse(CANONICAL_ORDER)
        self._frames: tuple[TileFrame, ...] = ()

        # Visual layers, keyed by position
        self._tile_items: dict[Position, QGraphicsRectItem] = {}
        self._overlay_items: list[QGraphicsItem] = []
        self._piece_items: dict[Position, QGraphicsItem] = {}

        self.setSceneRect(0, 0, 8 * self.TILE, 8 * self.TILE)

    # ── Public API ───────────────────────────────────────────────────────

    def render_frame(self, frames: Sequence[TileFrame]) -> None:
        """Redraw every tile from *frames*, given in layout order."""
        if len(frames) != len(CANONICAL_ORDER):
            raise ValueError(f"Expected 64 tile frames, got {len(frames)}")
        self._frames = tuple(frames)
        self._layout = [frame.position for frame in self._frames]
        self.clear()
        self._tile_items.clear()
        self._overlay_items.clear()
        self._piece_items.clear()

        for index, frame in enumerate(self._frames):
            self._draw_tile(index, frame)

    @property
    def layout_order(self) -> list[Position]:
        """Positions in the order they are laid out, row by row."""
        return list(self._layout)

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mousePressEvent(event)

        position = self._pos_to_position(event.scenePos())
        if position is None:
            return super().mousePressEvent(event)

        button = _BUTTONS.get(event.button(), ClickButton.OTHER)
        event.accept()
        self.tile_clicked.emit(position, button)

    # ── Drawing ──────────────────────────────────────────────────────────

    def _draw_tile(self, index: int, frame: TileFrame) -> None:
        t = self.TILE
        x, y = self._cell_origin(index)

        color = self._theme.light_tile if frame.is_light else self._theme.dark_tile
        rect = QGraphicsRectItem(x, y, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0)
        self.addItem(rect)
        self._tile_items[frame.position] = rect

        if frame.is_source:
            self._add_overlay(x, y, self._theme.highlight_source)
        if frame.in_check:
            self._add_overlay(x, y, self._theme.highlight_check)
        if frame.piece is not None:
            self._draw_piece(x, y, frame.position, frame.piece)
        if frame.is_target:
            self._add_target_dot(x, y)

    def _draw_piece(
        self, x: float, y: float, position: Position, piece: PieceRef
    ) -> None:
        t = self.TILE
        pixmap = piece_pixmap(piece, self._images_dir, t)
        item: QGraphicsItem
        if pixmap is not None:
            pix_item = QGraphicsPixmapItem(pixmap)
            pix_item.setPos(
                x + (t - pixmap.width()) / 2, y + (t - pixmap.height()) / 2
            )
            item = pix_item
        else:
            item = self._make_glyph(x, y, piece)
        item.setZValue(1)
        self.addItem(item)
        self._piece_items[position] = item

    def _make_glyph(
        self, x: float, y: float, piece: PieceRef
    ) -> QGraphicsSimpleTextItem:
        """Text stand-in for a piece whose image could not be loaded."""
        t = self.TILE
        txt = QGraphicsSimpleTextItem(piece.solid_glyph)
        txt.setFont(QFont("DejaVu Sans", max(8, int(t * 0.6))))
        if piece.side == Side.WHITE:
            fill, outline = self._theme.glyph_white, self._theme.glyph_black
        else:
            fill, outline = self._theme.glyph_black, self._theme.glyph_white
        txt.setBrush(QBrush(fill))
        txt.setPen(QPen(QBrush(outline), 1.0))
        bounds = txt.boundingRect()
        txt.setPos(x + (t - bounds.width()) / 2, y + (t - bounds.height()) / 2)
        return txt

    def _add_overlay(self, x: float, y: float, color: QColor) -> None:
        t = self.TILE
        rect = QGraphicsRectItem(x, y, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.5)
        self.addItem(rect)
        self._overlay_items.append(rect)

    def _add_target_dot(self, x: float, y: float) -> None:
        t = self.TILE
        d = t * self._DOT_RATIO
        dot = QGraphicsEllipseItem(x + (t - d) / 2, y + (t - d) / 2, d, d)
        dot.setBrush(QBrush(self._theme.highlight_target))
        dot.setPen(QPen(Qt.PenStyle.NoPen))
        dot.setZValue(2)
        self.addItem(dot)
        self._overlay_items.append(dot)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _cell_origin(self, index: int) -> tuple[float, float]:
        """Layout index → top-left corner of its cell."""
        row, col = divmod(index, 8)
        return float(col * self.TILE), float(row * self.TILE)

    def _pos_to_position(self, pos: QPointF) -> Position | None:
        """Scene point → position of the tile drawn there."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        return self._layout[row * 8 + col]
