"""Board - the live set of placed pieces."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from chesstiles.config import BOARD_SIZE
from chesstiles.core.enums import Owner, PieceKind
from chesstiles.core.occupancy import Occupancy, occupancy_for
from chesstiles.core.piece import PlacedPiece
from chesstiles.core.types import Square, is_on_board, square_name

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Board:
    """Mutable square → piece index; at most one piece per square."""

    __slots__ = ("_size", "_pieces")

    def __init__(self, size: int = BOARD_SIZE) -> None:
        self._size = size
        self._pieces: dict[Square, PlacedPiece] = {}

    @property
    def size(self) -> int:
        return self._size

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> PlacedPiece | None:
        return self._pieces.get(Square(*sq))

    def __contains__(self, sq: object) -> bool:
        return sq in self._pieces

    def __iter__(self) -> Iterator[PlacedPiece]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._pieces)

    def is_empty(self, sq: Square) -> bool:
        return sq not in self._pieces

    # -- Query helpers ------------------------------------------------------

    def pieces(self, owner: Owner | None = None) -> list[PlacedPiece]:
        """Live pieces, optionally restricted to *owner*."""
        return [p for p in self._pieces.values() if owner is None or p.owner == owner]

    def squares(self, owner: Owner) -> frozenset[Square]:
        """Squares occupied by *owner*."""
        return frozenset(sq for sq, p in self._pieces.items() if p.owner == owner)

    def occupancy(self, owner: Owner) -> Occupancy:
        """Friendly/enemy split of the current contents, seen by *owner*."""
        return occupancy_for(owner, self._pieces.values())

    def snapshot(self) -> tuple[PlacedPiece, ...]:
        """Immutable copy of every live piece, ordered by rank then file."""
        return tuple(
            self._pieces[sq]
            for sq in sorted(self._pieces, key=lambda s: (s.rank, s.file))
        )

    # -- Mutation / copying -------------------------------------------------

    def place(self, kind: PieceKind, owner: Owner, sq: Square) -> PlacedPiece:
        """Put a new piece on an empty square."""
        sq = Square(*sq)
        if not is_on_board(sq, self._size):
            raise ValueError(f"Square off the board: {tuple(sq)!r}")
        if sq in self._pieces:
            raise ValueError(f"Square already occupied: {square_name(sq)}")
        piece = PlacedPiece(kind, owner, sq)
        self._pieces[sq] = piece
        return piece

    def remove(self, sq: Square) -> PlacedPiece | None:
        """Take the piece off *sq*; returns it, or ``None`` if vacant."""
        return self._pieces.pop(Square(*sq), None)

    def move(self, origin: Square, target: Square) -> PlacedPiece | None:
        """Relocate the piece on *origin*; returns the captured piece, if any.

        No movement rule is checked here.
        """
        origin = Square(*origin)
        target = Square(*target)
        piece = self._pieces.get(origin)
        if piece is None:
            raise ValueError(f"No piece on {square_name(origin)}")
        if not is_on_board(target, self._size):
            raise ValueError(f"Square off the board: {tuple(target)!r}")
        captured = self._pieces.get(target)
        if captured is not None and captured.owner == piece.owner:
            raise ValueError(
                f"Cannot move {square_name(origin)} onto own piece at "
                f"{square_name(target)}"
            )
        del self._pieces[origin]
        self._pieces[target] = piece.moved_to(target)
        return captured

    def copy(self) -> Board:
        b = Board(self._size)
        b._pieces = self._pieces.copy()
        return b

    def clear(self) -> None:
        self._pieces = {}

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting layout."""
        b = cls(BOARD_SIZE)
        for f in range(BOARD_SIZE):
            b.place(PieceKind.PAWN, Owner.WHITE, Square(f, 1))
            b.place(PieceKind.PAWN, Owner.BLACK, Square(f, 6))

        for f, kind in enumerate(_BACK_RANK):
            b.place(kind, Owner.WHITE, Square(f, 0))
            b.place(kind, Owner.BLACK, Square(f, 7))
        return b

    @classmethod
    def from_pieces(
        cls, pieces: Iterable[PlacedPiece], size: int = BOARD_SIZE
    ) -> Board:
        """Board holding *pieces*; rejects overlaps and off-board squares."""
        b = cls(size)
        for piece in pieces:
            b.place(piece.kind, piece.owner, piece.square)
        return b

    # -- Rendering ----------------------------------------------------------

    def render(self, highlight: Iterable[Square] = ()) -> str:
        """Text diagram; highlighted squares show ``*`` (empty) or ``x`` (capture)."""
        marked = frozenset(highlight)
        rows: list[str] = []
        for rank in range(self._size - 1, -1, -1):
            row = []
            for file in range(self._size):
                sq = Square(file, rank)
                p = self._pieces.get(sq)
                if sq in marked:
                    row.append("x" if p is not None else "*")
                else:
                    row.append(str(p) if p else ".")
            rows.append(f"{rank + 1:>2} {' '.join(row)}")
        files = " ".join(
            square_name(Square(f, 0))[0] if f < 26 else str(f + 1)
            for f in range(self._size)
        )
        rows.append(f"   {files}")
        return "\n".join(rows)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and self._pieces == other._pieces

    def __repr__(self) -> str:
        return self.render()
