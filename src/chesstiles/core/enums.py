"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Owner(IntEnum):
    """The side a piece belongs to. White advances up the ranks."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Owner:
        return Owner(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank delta of a single pawn step."""
        return 1 if self is Owner.WHITE else -1

    def pawn_start_rank(self, size: int) -> int:
        """Rank from which this side's pawns may advance two squares."""
        return 1 if self is Owner.WHITE else size - 2

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Closed set of piece kinds."""

    KING = 0
    QUEEN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    PAWN = 5
