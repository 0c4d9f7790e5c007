"""Game management layer — turn, selection and move bookkeeping.

Quick start::

    from chesstiles.core import Square
    from chesstiles.game import GameController, SelectSquare

    ctrl = GameController()
    ctrl.new_game()
    ctrl.handle(SelectSquare(Square(4, 1)))   # highlights e3 and e4
    ctrl.handle(SelectSquare(Square(4, 3)))   # plays e2-e4
"""

from chesstiles.game.controller import GameController, GameEvents
from chesstiles.game.interfaces import (
    ClearSelection,
    GamePhase,
    SelectSquare,
    TurnRequest,
    TurnUpdate,
)
from chesstiles.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "ClearSelection",
    "GamePhase",
    "SelectSquare",
    "TurnRequest",
    "TurnUpdate",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
]
