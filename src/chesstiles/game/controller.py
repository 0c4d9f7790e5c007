"""GameController — routes turn requests into a GameState and notifies listeners.

Emits events via simple callbacks so a presentation layer (or a test) can
highlight destinations and redraw pieces without owning the game logic.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from chesstiles.config import RuleSettings
from chesstiles.game.interfaces import TurnRequest, TurnUpdate
from chesstiles.game.state import GameState, MoveRecord

# ── Event definitions ────────────────────────────────────────────────────────

SelectionCallback = Callable[[TurnUpdate], None]
MoveCallback = Callable[[MoveRecord, "GameState"], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_selection: list[SelectionCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Owns one :class:`GameState` and dispatches requests to it.

    Methods are meant to be called from a single thread; the state is not
    locked.
    """

    __slots__ = ("_state", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self.events = GameEvents()

    @property
    def state(self) -> GameState:
        return self._state

    def new_game(
        self,
        placement: str | None = None,
        settings: RuleSettings | None = None,
    ) -> None:
        self._state = GameState() if settings is None else GameState(settings)
        self._state.setup(placement)

    def handle(self, request: TurnRequest) -> TurnUpdate:
        """Process *request* and fire the matching events."""
        update = self._state.process(request)
        if update.record is not None:
            for move_cb in self.events.on_move:
                move_cb(update.record, self._state)
        for selection_cb in self.events.on_selection:
            selection_cb(update)
        return update
