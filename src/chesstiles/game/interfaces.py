"""Requests, results and phases exchanged with the game layer.

Input arrives as explicit request objects instead of being polled every
frame, so a turn can be driven synchronously from tests or any front end.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from chesstiles.core.enums import Owner
    from chesstiles.core.types import Square
    from chesstiles.game.state import MoveRecord


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for selection and movement."""

    NOT_STARTED = auto()
    AWAITING_SELECTION = auto()
    PIECE_SELECTED = auto()


# ── Requests ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class SelectSquare:
    """The player pointed at *square* (a click, a tap, a typed coordinate)."""

    square: Square


@dataclass(frozen=True, slots=True)
class ClearSelection:
    """Drop any current selection."""


TurnRequest: TypeAlias = "SelectSquare | ClearSelection"


# ── Results ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class TurnUpdate:
    """What changed after one request was processed."""

    turn: Owner
    selected: Square | None
    destinations: frozenset[Square]
    record: MoveRecord | None = None

    @property
    def moved(self) -> bool:
        return self.record is not None
