"""Owner-relative occupancy view derived from a piece snapshot."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

from chesstiles.core.enums import Owner
from chesstiles.core.piece import PlacedPiece
from chesstiles.core.types import Square


class Occupancy(NamedTuple):
    """Squares held by the moving side and by its opponent."""

    friendly: frozenset[Square]
    enemy: frozenset[Square]

    def is_empty(self, sq: Square) -> bool:
        return sq not in self.friendly and sq not in self.enemy


def partition(
    owner: Owner,
    white_squares: Iterable[Square],
    black_squares: Iterable[Square],
) -> Occupancy:
    """Order the two per-side square collections as (friendly, enemy)."""
    white = frozenset(white_squares)
    black = frozenset(black_squares)
    if owner == Owner.WHITE:
        return Occupancy(white, black)
    return Occupancy(black, white)


def occupancy_for(owner: Owner, pieces: Iterable[PlacedPiece]) -> Occupancy:
    """Build the occupancy view for *owner* from a snapshot of live pieces.

    The view is recomputed on every call; the board changes between queries.
    """
    white: list[Square] = []
    black: list[Square] = []
    for piece in pieces:
        (white if piece.owner == Owner.WHITE else black).append(piece.square)
    return partition(owner, white, black)
