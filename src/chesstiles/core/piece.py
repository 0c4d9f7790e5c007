"""Placed-piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chesstiles.core.enums import Owner, PieceKind
from chesstiles.core.types import Square

# FEN character ↔ (Owner, PieceKind)
_CHAR_MAP: dict[str, tuple[Owner, PieceKind]] = {
    "P": (Owner.WHITE, PieceKind.PAWN),
    "N": (Owner.WHITE, PieceKind.KNIGHT),
    "B": (Owner.WHITE, PieceKind.BISHOP),
    "R": (Owner.WHITE, PieceKind.ROOK),
    "Q": (Owner.WHITE, PieceKind.QUEEN),
    "K": (Owner.WHITE, PieceKind.KING),
    "p": (Owner.BLACK, PieceKind.PAWN),
    "n": (Owner.BLACK, PieceKind.KNIGHT),
    "b": (Owner.BLACK, PieceKind.BISHOP),
    "r": (Owner.BLACK, PieceKind.ROOK),
    "q": (Owner.BLACK, PieceKind.QUEEN),
    "k": (Owner.BLACK, PieceKind.KING),
}

_UNICODE: dict[tuple[Owner, PieceKind], str] = {
    (Owner.WHITE, PieceKind.PAWN): "♙",
    (Owner.WHITE, PieceKind.KNIGHT): "♘",
    (Owner.WHITE, PieceKind.BISHOP): "♗",
    (Owner.WHITE, PieceKind.ROOK): "♖",
    (Owner.WHITE, PieceKind.QUEEN): "♕",
    (Owner.WHITE, PieceKind.KING): "♔",
    (Owner.BLACK, PieceKind.PAWN): "♟",
    (Owner.BLACK, PieceKind.KNIGHT): "♞",
    (Owner.BLACK, PieceKind.BISHOP): "♝",
    (Owner.BLACK, PieceKind.ROOK): "♜",
    (Owner.BLACK, PieceKind.QUEEN): "♛",
    (Owner.BLACK, PieceKind.KING): "♚",
}

_FEN_CHARS: dict[tuple[Owner, PieceKind], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class PlacedPiece:
    """A live piece: what it is, who owns it, and where it stands."""

    kind: PieceKind
    owner: Owner
    square: Square

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.owner, self.kind)]

    @classmethod
    def from_char(cls, char: str, square: Square) -> PlacedPiece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            owner, kind = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(kind, owner, square)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.owner, self.kind)]

    def moved_to(self, square: Square) -> PlacedPiece:
        """Same piece standing on *square*."""
        return replace(self, square=square)
