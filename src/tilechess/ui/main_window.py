"""MainWindow — top-level window hosting the board and its menus."""

from __future__ import annotations

import logging
from collections.abc import Callable

import chess
from PyQt6.QtCore import QTimer
from PyQt6.QtGui import QAction, QCloseEvent
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar

from tilechess.core.orientation import Orientation
from tilechess.core.pipeline import MoveOutcome
from tilechess.core.render import RedrawScheduler
from tilechess.core.selection import ClickButton, Selection
from tilechess.game.controller import TableController
from tilechess.rules import BoardSnapshot, Position, Side
from tilechess.ui.board.board_scene import BoardScene
from tilechess.ui.board.board_view import BoardView
from tilechess.ui.settings import TableSettings
from tilechess.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


def _defer_to_event_loop(fn: Callable[[], None]) -> None:
    QTimer.singleShot(0, fn)


class MainWindow(QMainWindow):
    """Main application window for Tilechess."""

    def __init__(
        self,
        settings: TableSettings | None = None,
        controller: TableController | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Tilechess")
        self.setMinimumSize(480, 520)
        self.resize(600, 600)

        self._settings = settings if settings is not None else TableSettings()
        orientation = (
            Orientation.REVERSED
            if self._settings.start_reversed
            else Orientation.STANDARD
        )
        self._controller = (
            controller
            if controller is not None
            else TableController(orientation=orientation)
        )
        self._controller.show_legal_moves = self._settings.show_legal_moves
        self._redraw = RedrawScheduler(self._draw_board, _defer_to_event_loop)
        self._controller.set_scheduler(self._redraw)

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._connect_game_events()

        self._draw_board()
        self._update_status()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        scene = BoardScene(
            theme=BoardTheme.named(self._settings.theme_name),
            images_dir=self._settings.piece_images_dir,
        )
        self._board_view = BoardView(scene)
        self.setCentralWidget(self._board_view)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        # File menu
        self._menu_file = menu_bar.addMenu("&File")
        assert self._menu_file is not None

        self._act_new_game = QAction("&New Game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game)
        self._menu_file.addAction(self._act_new_game)

        self._act_open_pgn = QAction("&Load PGN File...", self)
        self._act_open_pgn.setShortcut("Ctrl+O")
        self._act_open_pgn.triggered.connect(self._on_open_pgn)
        self._menu_file.addAction(self._act_open_pgn)

        self._menu_file.addSeparator()

        self._act_quit = QAction("E&xit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_file.addAction(self._act_quit)

        # Preferences menu
        self._menu_prefs = menu_bar.addMenu("&Preferences")
        assert self._menu_prefs is not None

        self._act_flip = QAction("&Flip Board", self)
        self._act_flip.setShortcut("F")
        self._act_flip.triggered.connect(self._on_flip)
        self._menu_prefs.addAction(self._act_flip)

        self._act_highlight = QAction("&Highlight Legal Moves", self)
        self._act_highlight.setCheckable(True)
        self._act_highlight.setChecked(self._settings.show_legal_moves)
        self._act_highlight.toggled.connect(self._on_toggle_highlight)
        self._menu_prefs.addAction(self._act_highlight)

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._board_view.tile_clicked.connect(self._on_tile_clicked)

    def _connect_game_events(self) -> None:
        events = self._controller.events
        events.on_move.append(self._on_game_move)
        events.on_move_rejected.append(self._on_move_rejected)
        events.on_game_over.append(self._on_game_over)
        events.on_selection_changed.append(self._on_selection_changed)

    def _disconnect_game_events(self) -> None:
        events = self._controller.events
        for callbacks, callback in (
            (events.on_move, self._on_game_move),
            (events.on_move_rejected, self._on_move_rejected),
            (events.on_game_over, self._on_game_over),
            (events.on_selection_changed, self._on_selection_changed),
        ):
            callbacks[:] = [cb for cb in callbacks if cb != callback]

    # ── Public accessors ─────────────────────────────────────────────────

    @property
    def controller(self) -> TableController:
        return self._controller

    @property
    def board_scene(self) -> BoardScene:
        return self._board_view.board_scene

    # ── User actions ─────────────────────────────────────────────────────

    def _on_tile_clicked(self, position: Position, button: ClickButton) -> None:
        self._controller.on_click(position, button)

    def _on_new_game(self) -> None:
        self._controller.new_game()
        self._update_status()

    def _on_open_pgn(self) -> None:
        # PGN import is not implemented; the action only reports that.
        _LOGGER.info("Load PGN requested; PGN import is not available")
        self._status_label.setText("PGN loading is not available yet")

    def _on_flip(self) -> None:
        self._controller.toggle_orientation()

    def _on_toggle_highlight(self, checked: bool) -> None:
        self._settings.show_legal_moves = checked
        self._controller.show_legal_moves = checked
        self._controller.request_redraw()

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_game_move(self, outcome: MoveOutcome) -> None:
        self._update_status()

    def _on_move_rejected(self, outcome: MoveOutcome) -> None:
        self._status_label.setText(f"Illegal move: {outcome.descriptor}")

    def _on_game_over(self, result: chess.Outcome) -> None:
        self._update_status()

    def _on_selection_changed(self, selection: Selection) -> None:
        if selection.piece is not None:
            piece = selection.piece
            self._status_label.setText(
                f"Selected {piece.side} {chess.piece_name(piece.kind)}"
            )
        else:
            self._update_status()

    # ── Rendering ────────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        self.board_scene.render_frame(self._controller.frame())

    def _update_status(self) -> None:
        snapshot = self._controller.current_snapshot()
        self._status_label.setText(self._status_text(snapshot))

    @staticmethod
    def _status_text(snapshot: BoardSnapshot) -> str:
        result = snapshot.outcome()
        if result is not None:
            if result.winner is None:
                return f"Draw ({result.termination.name.lower()})"
            winner = Side.from_color(result.winner)
            return f"Checkmate: {str(winner).capitalize()} wins"
        side = str(snapshot.side_to_move()).capitalize()
        if snapshot.is_check():
            return f"{side} to move (check)"
        return f"{side} to move"

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._disconnect_game_events()
        self._controller.set_scheduler(None)
        super().closeEvent(event)
