"""BoardView — square viewport onto the board scene."""

from __future__ import annotations

from PyQt6.QtCore import QSize, Qt, pyqtSignal
from PyQt6.QtGui import QPainter, QResizeEvent, QShowEvent
from PyQt6.QtWidgets import QFrame, QGraphicsView, QSizePolicy, QWidget

from tilechess.ui.board.board_scene import BoardScene


class BoardView(QGraphicsView):
    """Keeps the whole board visible and square at any window size.

    Signals:
        tile_clicked(int, ClickButton): Re-emitted from the scene so the
            window only has to wire up the view.
    """

    tile_clicked = pyqtSignal(int, object)

    MIN_SIDE = 320

    def __init__(
        self, scene: BoardScene | None = None, parent: QWidget | None = None
    ) -> None:
        board = scene if scene is not None else BoardScene()
        super().__init__(board, parent)
        self._board = board

        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setRenderHints(
            QPainter.RenderHint.Antialiasing
            | QPainter.RenderHint.SmoothPixmapTransform
        )
        self.setFrameShape(QFrame.Shape.NoFrame)

        policy = QSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        policy.setHeightForWidth(True)
        self.setSizePolicy(policy)
        self.setMinimumSize(self.MIN_SIDE, self.MIN_SIDE)

        # Right button cancels a selection, so no context menu.
        self.setContextMenuPolicy(Qt.ContextMenuPolicy.NoContextMenu)

        board.tile_clicked.connect(self.tile_clicked.emit)

    @property
    def board_scene(self) -> BoardScene:
        return self._board

    # ── Sizing ───────────────────────────────────────────────────────────

    def hasHeightForWidth(self) -> bool:
        return True

    def heightForWidth(self, width: int) -> int:
        return width

    def sizeHint(self) -> QSize:
        side = int(self._board.sceneRect().width())
        return QSize(side, side)

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self._fit_board()

    def showEvent(self, event: QShowEvent | None) -> None:
        super().showEvent(event)
        self._fit_board()

    def _fit_board(self) -> None:
        self.fitInView(self._board.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)
