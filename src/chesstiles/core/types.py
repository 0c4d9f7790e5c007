"""Square type and coordinate helpers.

Squares are ``(file, rank)`` pairs with the origin in the bottom-left corner
from White's point of view:
    (0, 0) = a1, (7, 0) = h1, ..., (0, 7) = a8, (7, 7) = h8
"""

from __future__ import annotations

from typing import NamedTuple

from chesstiles.config import BOARD_SIZE

_FILE_LETTERS = "abcdefghijklmnopqrstuvwxyz"


class Square(NamedTuple):
    """Immutable board coordinate."""

    file: int
    rank: int

    def __str__(self) -> str:
        return square_name(self)


def is_on_board(sq: Square, size: int = BOARD_SIZE) -> bool:
    """Whether both coordinates fall inside ``[0, size - 1]``."""
    return 0 <= sq.file < size and 0 <= sq.rank < size


def shift(sq: Square, d_file: int, d_rank: int) -> Square:
    """Offset *sq* without any bounds check."""
    return Square(sq.file + d_file, sq.rank + d_rank)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (4, 1) → 'e2'."""
    if not 0 <= sq.file < len(_FILE_LETTERS) or sq.rank < 0:
        return f"({sq.file}, {sq.rank})"
    return _FILE_LETTERS[sq.file] + str(sq.rank + 1)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → Square(4, 3)."""
    if (
        len(name) < 2
        or name[0] not in _FILE_LETTERS
        or not name[1:].isdigit()
        or int(name[1:]) < 1
    ):
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(_FILE_LETTERS.index(name[0]), int(name[1:]) - 1)
