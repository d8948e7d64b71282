"""TableController — owner of the active snapshot, selection and orientation.

Feeds clicks through the selection state machine, hands move requests to
the move pipeline, swaps in the resulting snapshot and asks for a redraw.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

import chess

from tilechess.core.legality import legal_destinations
from tilechess.core.orientation import Orientation
from tilechess.core.pipeline import MoveOutcome, apply_move
from tilechess.core.render import RedrawScheduler, TileFrame, compose_frame
from tilechess.core.selection import Click, ClickButton, Selection, transition
from tilechess.rules import (
    BoardSnapshot,
    Position,
    create_initial_snapshot,
    position_name,
)

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

SelectionCallback = Callable[[Selection], None]
OutcomeCallback = Callable[[MoveOutcome], None]
GameOverCallback = Callable[[chess.Outcome], None]
OrientationCallback = Callable[[Orientation], None]


@dataclass
class TableEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_move: list[OutcomeCallback] = field(default_factory=list)
    on_move_rejected: list[OutcomeCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_orientation_changed: list[OrientationCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class TableController:
    """Click-driven game host for two humans sharing one board.

    Thread-safety: every method must be called from the single UI thread;
    clicks are processed one at a time and the active snapshot is only ever
    replaced by assignment.
    """

    __slots__ = (
        "_snapshot",
        "_selection",
        "_orientation",
        "_redraw",
        "show_legal_moves",
        "events",
    )

    def __init__(
        self,
        snapshot: BoardSnapshot | None = None,
        orientation: Orientation = Orientation.STANDARD,
        scheduler: RedrawScheduler | None = None,
    ) -> None:
        self._snapshot = snapshot if snapshot is not None else create_initial_snapshot()
        self._selection = Selection.EMPTY
        self._orientation = orientation
        self._redraw = scheduler
        self.show_legal_moves = True
        self.events = TableEvents()

    # ── Queries ──────────────────────────────────────────────────────────

    def current_snapshot(self) -> BoardSnapshot:
        return self._snapshot

    def current_orientation(self) -> Orientation:
        return self._orientation

    def current_selection(self) -> Selection:
        return self._selection

    def highlighted_positions(self) -> frozenset[Position]:
        """Legal destinations of the current selection."""
        return legal_destinations(self._selection, self._snapshot)

    def frame(self) -> tuple[TileFrame, ...]:
        """Full render description of the board as it stands now."""
        return compose_frame(
            self._snapshot,
            self._selection,
            self._orientation,
            show_legal_moves=self.show_legal_moves,
        )

    def set_scheduler(self, scheduler: RedrawScheduler | None) -> None:
        self._redraw = scheduler

    # ── Commands ─────────────────────────────────────────────────────────

    def on_click(self, position: Position, button: ClickButton) -> MoveOutcome | None:
        """Process one click; returns the move outcome if a move was tried."""
        click = Click(position, button)
        step = transition(self._selection, click, self._snapshot)
        _LOGGER.debug(
            "Click %s %s: %s -> %s",
            button.name,
            position_name(position),
            self._selection.phase.name,
            step.selection.phase.name,
        )

        outcome: MoveOutcome | None = None
        if step.move_request is not None:
            request = step.move_request
            outcome = apply_move(self._snapshot, request.source, request.destination)
            resulting = outcome.resulting_snapshot
            if resulting is not None:
                self._snapshot = resulting

        if step.selection != self._selection:
            self._selection = step.selection
            self._emit_selection()

        if outcome is not None:
            self._emit_outcome(outcome)

        if step.redraw:
            self.request_redraw()
        return outcome

    def toggle_orientation(self) -> Orientation:
        self._orientation = self._orientation.opposite()
        for cb in self.events.on_orientation_changed:
            cb(self._orientation)
        self.request_redraw()
        return self._orientation

    def new_game(self, snapshot: BoardSnapshot | None = None) -> None:
        """Start over from *snapshot* (default: the initial position)."""
        self._snapshot = snapshot if snapshot is not None else create_initial_snapshot()
        if not self._selection.is_idle:
            self._selection = Selection.EMPTY
            self._emit_selection()
        _LOGGER.info("New game: %s", self._snapshot.fen)
        self.request_redraw()

    def request_redraw(self) -> None:
        if self._redraw is not None:
            self._redraw.request()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_selection(self) -> None:
        for cb in self.events.on_selection_changed:
            cb(self._selection)

    def _emit_outcome(self, outcome: MoveOutcome) -> None:
        if not outcome.accepted:
            for cb in self.events.on_move_rejected:
                cb(outcome)
            return

        _LOGGER.info("Move %s played", outcome.descriptor)
        for cb in self.events.on_move:
            cb(outcome)

        result = self._snapshot.outcome()
        if result is not None:
            _LOGGER.info(
                "Game over: %s (%s)", result.result(), result.termination.name
            )
            for cb in self.events.on_game_over:
                cb(result)
