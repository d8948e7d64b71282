"""Game host layer — the controller that owns the active board.

Quick start::

    from tilechess.core import ClickButton
    from tilechess.game import TableController

    ctrl = TableController()
    ctrl.on_click(12, ClickButton.LEFT)  # select e2
    outcome = ctrl.on_click(28, ClickButton.LEFT)  # e2-e4
    assert outcome is not None and outcome.accepted
"""

from tilechess.game.controller import TableController, TableEvents

__all__ = [
    "TableController",
    "TableEvents",
]
