"""Click-to-move selection state machine.

Two states: ``IDLE`` (nothing selected) and ``SOURCE_SELECTED`` (a source
tile and the piece on it are recorded).  Every click is fed through
:func:`transition`, which returns the next selection plus the effects the
host must carry out (a move attempt and/or a redraw).

Transition table::

    any state        RIGHT             → IDLE (cancel)
    IDLE             LEFT  empty tile  → IDLE (no-op)
    IDLE             LEFT  piece       → SOURCE_SELECTED (either side)
    SOURCE_SELECTED  LEFT  any tile    → IDLE + move request
    any state        other button      → unchanged
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import ClassVar

from tilechess.rules import BoardSnapshot, PieceRef, Position, check_position


class ClickButton(IntEnum):
    """Pointer button that produced a click."""

    LEFT = auto()
    RIGHT = auto()
    MIDDLE = auto()
    OTHER = auto()


class SelectionPhase(IntEnum):
    """Finite-state-machine states for click selection."""

    IDLE = auto()
    SOURCE_SELECTED = auto()


@dataclass(frozen=True, slots=True)
class Click:
    """A single pointer click on a tile."""

    position: Position
    button: ClickButton

    def __post_init__(self) -> None:
        check_position(self.position)


@dataclass(frozen=True, slots=True)
class Selection:
    """Transient UI record of the chosen source tile and its piece.

    *source* and *piece* are either both set or both ``None``.
    """

    EMPTY: ClassVar[Selection]

    source: Position | None = None
    piece: PieceRef | None = None

    def __post_init__(self) -> None:
        if (self.source is None) != (self.piece is None):
            raise ValueError(
                f"Selection needs both source and piece or neither: {self!r}"
            )
        if self.piece is not None and self.piece.position != self.source:
            raise ValueError(f"Selected piece does not stand on source: {self!r}")

    @classmethod
    def of(cls, piece: PieceRef) -> Selection:
        """Selection of *piece* on the tile it stands on."""
        return cls(piece.position, piece)

    @property
    def phase(self) -> SelectionPhase:
        if self.source is None:
            return SelectionPhase.IDLE
        return SelectionPhase.SOURCE_SELECTED

    @property
    def is_idle(self) -> bool:
        return self.source is None


Selection.EMPTY = Selection()


@dataclass(frozen=True, slots=True)
class MoveRequest:
    """Move attempt produced by the second left click of a gesture."""

    source: Position
    destination: Position


@dataclass(frozen=True, slots=True)
class Transition:
    """Next selection plus the effects the host must perform."""

    selection: Selection
    move_request: MoveRequest | None = None
    redraw: bool = False


def transition(
    selection: Selection, click: Click, snapshot: BoardSnapshot
) -> Transition:
    """Compute the effect of *click* on *selection* for *snapshot*.

    Pure: neither the selection nor the snapshot is modified.
    """
    if click.button == ClickButton.RIGHT:
        return Transition(Selection.EMPTY, redraw=not selection.is_idle)

    if click.button != ClickButton.LEFT:
        return Transition(selection)

    if selection.source is None:
        piece = snapshot.piece_at(click.position)
        if piece is None:
            return Transition(selection)
        # Ownership is not checked here; the legality query and the move
        # executor both reject off-turn pieces.
        return Transition(Selection.of(piece), redraw=True)

    request = MoveRequest(selection.source, click.position)
    return Transition(Selection.EMPTY, move_request=request, redraw=True)
