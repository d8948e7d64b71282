"""Frame composition and redraw scheduling.

A frame is the full description of what every tile should show; it is
rebuilt from scratch on every redraw, never patched from the previous one.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from tilechess.core.legality import legal_destinations
from tilechess.core.orientation import Orientation
from tilechess.core.selection import Selection
from tilechess.rules import (
    CANONICAL_ORDER,
    BoardSnapshot,
    PieceRef,
    Position,
    is_light_tile,
)

DeferFn = Callable[[Callable[[], None]], None]


@dataclass(frozen=True, slots=True)
class TileFrame:
    """Render state of one tile."""

    position: Position
    piece: PieceRef | None
    is_light: bool
    is_source: bool = False
    is_target: bool = False
    in_check: bool = False


def compose_frame(
    snapshot: BoardSnapshot,
    selection: Selection,
    orientation: Orientation,
    *,
    show_legal_moves: bool = True,
) -> tuple[TileFrame, ...]:
    """Build the 64 tile frames in layout order for *orientation*."""
    targets: frozenset[Position] = frozenset()
    if show_legal_moves:
        targets = legal_destinations(selection, snapshot)
    checked_king: Position | None = None
    if snapshot.is_check():
        checked_king = snapshot.king_position(snapshot.side_to_move())

    return tuple(
        TileFrame(
            position=position,
            piece=snapshot.piece_at(position),
            is_light=is_light_tile(position),
            is_source=position == selection.source,
            is_target=position in targets,
            in_check=position == checked_king,
        )
        for position in orientation.traverse(CANONICAL_ORDER)
    )


class RedrawScheduler:
    """Coalesces redraw requests into at most one pending redraw.

    *defer* receives a zero-argument callable to run later (for Qt:
    ``QTimer.singleShot(0, fn)``).  Without *defer* the redraw runs
    immediately on every request.
    """

    __slots__ = ("_render", "_defer", "_pending", "__weakref__")

    def __init__(
        self, render: Callable[[], None], defer: DeferFn | None = None
    ) -> None:
        self._render = render
        self._defer = defer
        self._pending = False

    @property
    def pending(self) -> bool:
        return self._pending

    def request(self) -> None:
        """Ask for a redraw; no-op if one is already pending."""
        if self._defer is None:
            self._render()
            return
        if self._pending:
            return
        self._pending = True
        self._defer(self._run)

    def flush(self) -> None:
        """Run a pending redraw now."""
        if self._pending:
            self._run()

    def _run(self) -> None:
        if not self._pending:
            return
        self._pending = False
        self._render()
