"""Pseudo-legal destination generation for a single piece.

Every rule reads an owner-relative :class:`Occupancy` view and never touches
the board itself, so a query can run against any snapshot, from any caller.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, assert_never

from chesstiles.config import DEFAULT_RULES, RuleSettings
from chesstiles.core.enums import Owner, PieceKind
from chesstiles.core.occupancy import Occupancy, occupancy_for
from chesstiles.core.piece import PlacedPiece
from chesstiles.core.types import Square, is_on_board, shift

if TYPE_CHECKING:
    from chesstiles.core.board import Board

_LOGGER = logging.getLogger(__name__)

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 2),
    (-1, 2),
    (2, 1),
    (2, -1),
    (1, -2),
    (-1, -2),
    (-2, 1),
    (-2, -1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS


# -- Public API -------------------------------------------------------------


def generate_moves(
    kind: PieceKind,
    owner: Owner,
    origin: Square | tuple[int, int],
    friendly_squares: Iterable[Square | tuple[int, int]],
    enemy_squares: Iterable[Square | tuple[int, int]],
    settings: RuleSettings = DEFAULT_RULES,
) -> frozenset[Square]:
    """Squares a *kind* piece of *owner* standing on *origin* may move to.

    The result ignores whether the move would expose the mover's own king.
    *origin* may be present in *friendly_squares*; it is never a destination.
    An origin outside the board is reported through the log and yields no
    destinations.
    """
    origin = Square(*origin)
    size = settings.board_size
    if not is_on_board(origin, size):
        _LOGGER.warning(
            "Ignoring move query for %s %s from off-board square %s",
            owner,
            kind.name.lower(),
            tuple(origin),
        )
        return frozenset()

    occ = Occupancy(frozenset(friendly_squares), frozenset(enemy_squares))

    targets: Iterable[Square]
    match kind:
        case PieceKind.KNIGHT:
            targets = _step_targets(origin, KNIGHT_OFFSETS, occ, size)
        case PieceKind.PAWN:
            targets = _pawn_targets(origin, owner, occ, size)
        case PieceKind.BISHOP:
            targets = _slide_targets(origin, BISHOP_DIRS, occ, size)
        case PieceKind.ROOK:
            targets = _slide_targets(origin, ROOK_DIRS, occ, size)
        case PieceKind.QUEEN:
            if not settings.king_and_queen_moves:
                return _unsupported(kind)
            targets = _slide_targets(origin, QUEEN_DIRS, occ, size)
        case PieceKind.KING:
            if not settings.king_and_queen_moves:
                return _unsupported(kind)
            targets = _step_targets(origin, KING_OFFSETS, occ, size)
        case _:
            assert_never(kind)

    return frozenset(targets)


def moves_for(
    piece: PlacedPiece,
    pieces: Iterable[PlacedPiece],
    settings: RuleSettings = DEFAULT_RULES,
) -> frozenset[Square]:
    """Destinations of *piece* given a snapshot of every live piece."""
    occ = occupancy_for(piece.owner, pieces)
    return generate_moves(
        piece.kind, piece.owner, piece.square, occ.friendly, occ.enemy, settings
    )


class MoveGenerator:
    """Answers move queries against the current contents of a :class:`Board`.

    The occupancy view is rebuilt on every query, so the generator stays
    correct while the board changes underneath it.
    """

    __slots__ = ("_board", "_settings")

    def __init__(self, board: Board, settings: RuleSettings | None = None) -> None:
        if settings is None:
            settings = RuleSettings(board_size=board.size)
        elif settings.board_size != board.size:
            raise ValueError(
                f"Settings board size {settings.board_size} does not match "
                f"board size {board.size}"
            )
        self._board = board
        self._settings = settings

    @property
    def settings(self) -> RuleSettings:
        return self._settings

    def moves_from(self, sq: Square) -> frozenset[Square]:
        """Destinations of the piece on *sq* (empty if the square is vacant)."""
        piece = self._board[sq]
        if piece is None:
            return frozenset()
        return moves_for(piece, self._board.pieces(), self._settings)

    def pseudo_legal_moves(self, owner: Owner) -> dict[Square, frozenset[Square]]:
        """Destinations for every *owner* piece that has at least one move."""
        snapshot = self._board.snapshot()
        occ = occupancy_for(owner, snapshot)
        result: dict[Square, frozenset[Square]] = {}
        for piece in snapshot:
            if piece.owner != owner:
                continue
            targets = generate_moves(
                piece.kind,
                owner,
                piece.square,
                occ.friendly,
                occ.enemy,
                self._settings,
            )
            if targets:
                result[piece.square] = targets
        return result


# -- Per-kind rules (private) -----------------------------------------------


def _unsupported(kind: PieceKind) -> frozenset[Square]:
    _LOGGER.debug("No movement rule enabled for %s", kind.name.lower())
    return frozenset()


def _step_targets(
    origin: Square,
    offsets: tuple[tuple[int, int], ...],
    occ: Occupancy,
    size: int,
) -> Iterator[Square]:
    # Jumps have no path: land anywhere on the board not held by a friend.
    for df, dr in offsets:
        target = shift(origin, df, dr)
        if is_on_board(target, size) and target not in occ.friendly:
            yield target


def _slide_targets(
    origin: Square,
    directions: tuple[tuple[int, int], ...],
    occ: Occupancy,
    size: int,
) -> Iterator[Square]:
    for df, dr in directions:
        target = shift(origin, df, dr)
        while is_on_board(target, size) and target not in occ.friendly:
            yield target
            if target in occ.enemy:
                break
            target = shift(target, df, dr)


def _pawn_targets(
    origin: Square,
    owner: Owner,
    occ: Occupancy,
    size: int,
) -> Iterator[Square]:
    forward = owner.forward

    # The bound is on the source rank, so a pawn on the far rank is frozen.
    one_step = shift(origin, 0, forward)
    if 0 < origin.rank < size - 1 and occ.is_empty(one_step):
        yield one_step
        if origin.rank == owner.pawn_start_rank(size):
            two_step = shift(origin, 0, 2 * forward)
            if is_on_board(two_step, size) and occ.is_empty(two_step):
                yield two_step

    for d_file in (1, -1):
        target = shift(origin, d_file, forward)
        if is_on_board(target, size) and target in occ.enemy:
            yield target
