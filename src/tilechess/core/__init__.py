"""Interaction core — click selection, move application and frame composition.

Everything here is free of Qt and can be driven from tests directly::

    from tilechess.core import Click, ClickButton, Selection, transition
    from tilechess.rules import create_initial_snapshot

    snapshot = create_initial_snapshot()
    step = transition(Selection.EMPTY, Click(12, ClickButton.LEFT), snapshot)
    assert step.selection.source == 12
"""

from tilechess.core.legality import legal_destinations
from tilechess.core.orientation import Orientation
from tilechess.core.pipeline import MoveOutcome, apply_move
from tilechess.core.render import RedrawScheduler, TileFrame, compose_frame
from tilechess.core.selection import (
    Click,
    ClickButton,
    MoveRequest,
    Selection,
    SelectionPhase,
    Transition,
    transition,
)

__all__ = [
    # Orientation
    "Orientation",
    # Selection FSM
    "Click",
    "ClickButton",
    "MoveRequest",
    "Selection",
    "SelectionPhase",
    "Transition",
    "transition",
    # Queries / pipeline
    "MoveOutcome",
    "apply_move",
    "legal_destinations",
    # Rendering
    "RedrawScheduler",
    "TileFrame",
    "compose_frame",
]
