"""Game state — turn, selection and move history over a live board."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chesstiles.config import DEFAULT_RULES, RuleSettings
from chesstiles.core.board import Board
from chesstiles.core.enums import Owner
from chesstiles.core.move_generator import MoveGenerator
from chesstiles.core.notation import board_from_placement
from chesstiles.core.piece import PlacedPiece
from chesstiles.core.types import Square, square_name
from chesstiles.game.interfaces import (
    ClearSelection,
    GamePhase,
    SelectSquare,
    TurnRequest,
    TurnUpdate,
)

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveRecord:
    """A single entry in the move history."""

    piece: PlacedPiece
    origin: Square
    target: Square
    captured: PlacedPiece | None = None

    @property
    def was_capture(self) -> bool:
        return self.captured is not None

    def __str__(self) -> str:
        sep = "x" if self.was_capture else "-"
        return f"{square_name(self.origin)}{sep}{square_name(self.target)}"


@dataclass
class GameState:
    """Owns the board, whose turn it is, and the current selection.

    This is a pure data/logic class — no rendering, no input polling.
    """

    settings: RuleSettings = DEFAULT_RULES
    board: Board = field(default_factory=Board, init=False)
    turn: Owner = field(default=Owner.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    selected: Square | None = field(default=None, init=False)
    destinations: frozenset[Square] = field(default=frozenset(), init=False)
    history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, placement: str | None = None) -> None:
        """Initialise (or reset) the game. White moves first."""
        board = Board.initial() if placement is None else board_from_placement(placement)
        if board.size != self.settings.board_size:
            raise ValueError(
                f"Placement has {board.size} ranks, settings expect "
                f"{self.settings.board_size}"
            )
        self.board = board
        self.turn = Owner.WHITE
        self.history.clear()
        self._set_selection(None, frozenset())

    # ── Selection ────────────────────────────────────────────────────────

    def select(self, sq: Square) -> frozenset[Square]:
        """Select the side-to-move's piece on *sq* and return its destinations.

        Anything else on *sq* (nothing, or an opponent piece) clears the
        selection and returns an empty set.
        """
        self._require_started()
        sq = Square(*sq)
        piece = self.board[sq]
        if piece is None or piece.owner != self.turn:
            self.clear_selection()
            return frozenset()

        destinations = self._generator().moves_from(sq)
        self._set_selection(sq, destinations)
        _LOGGER.debug(
            "%s selected %s on %s: %d destination(s)",
            self.turn,
            piece.kind.name.lower(),
            square_name(sq),
            len(destinations),
        )
        return destinations

    def clear_selection(self) -> None:
        self._require_started()
        self._set_selection(None, frozenset())

    # ── Move application ─────────────────────────────────────────────────

    def move_selected(self, target: Square) -> MoveRecord:
        """Move the selected piece to *target* and pass the turn.

        *target* must be one of the destinations offered by :meth:`select`.
        """
        self._require_started()
        target = Square(*target)
        if self.selected is None:
            raise ValueError("No piece selected")
        if target not in self.destinations:
            raise ValueError(
                f"{square_name(target)} is not a destination of "
                f"{square_name(self.selected)}"
            )

        origin = self.selected
        piece = self.board[origin]
        assert piece is not None
        captured = self.board.move(origin, target)

        record = MoveRecord(piece=piece, origin=origin, target=target, captured=captured)
        self.history.append(record)
        _LOGGER.debug("%s played %s", self.turn, record)

        self.turn = self.turn.opposite
        self._set_selection(None, frozenset())
        return record

    def undo_last_move(self) -> MoveRecord | None:
        """Undo the last move. Returns its record, or None if empty."""
        self._require_started()
        if not self.history:
            return None

        record = self.history[-1]
        if self.board[record.origin] is not None:
            raise ValueError(
                f"Cannot undo {record}: {square_name(record.origin)} is occupied"
            )
        if self.board[record.target] != record.piece.moved_to(record.target):
            raise ValueError(
                f"Cannot undo {record}: moved piece is no longer on "
                f"{square_name(record.target)}"
            )

        self.history.pop()
        self.board.remove(record.target)
        self.board.place(record.piece.kind, record.piece.owner, record.origin)
        if record.captured is not None:
            captured = record.captured
            self.board.place(captured.kind, captured.owner, captured.square)

        self.turn = record.piece.owner
        self._set_selection(None, frozenset())
        return record

    # ── Turn processing ──────────────────────────────────────────────────

    def process(self, request: TurnRequest) -> TurnUpdate:
        """Apply one request and report the resulting turn/selection.

        Pointing at a highlighted destination moves the selected piece there;
        pointing at one's own piece (re)selects it; anything else clears the
        selection.
        """
        self._require_started()
        record: MoveRecord | None = None

        if isinstance(request, ClearSelection):
            self.clear_selection()
        elif isinstance(request, SelectSquare):
            sq = Square(*request.square)
            if self.selected is not None and sq in self.destinations:
                record = self.move_selected(sq)
            else:
                self.select(sq)
        else:
            raise TypeError(f"Unsupported request: {request!r}")

        return TurnUpdate(
            turn=self.turn,
            selected=self.selected,
            destinations=self.destinations,
            record=record,
        )

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_started(self) -> bool:
        return self.phase != GamePhase.NOT_STARTED

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.history)

    def moves_from(self, sq: Square) -> frozenset[Square]:
        """Destinations of whatever piece stands on *sq*, ignoring the turn."""
        self._require_started()
        return self._generator().moves_from(Square(*sq))

    # ── Internal ─────────────────────────────────────────────────────────

    def _generator(self) -> MoveGenerator:
        return MoveGenerator(self.board, self.settings)

    def _set_selection(self, sq: Square | None, destinations: frozenset[Square]) -> None:
        self.selected = sq
        self.destinations = destinations
        self.phase = (
            GamePhase.AWAITING_SELECTION if sq is None else GamePhase.PIECE_SELECTED
        )

    def _require_started(self) -> None:
        if self.phase == GamePhase.NOT_STARTED:
            raise RuntimeError("Game not set up; call setup() first")
