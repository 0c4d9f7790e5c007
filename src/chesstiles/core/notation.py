"""Piece-placement notation (the first field of a FEN record)."""

from __future__ import annotations

from chesstiles.core.board import Board
from chesstiles.core.piece import PlacedPiece
from chesstiles.core.types import Square

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

_MIN_RANKS = 3
_MAX_RANKS = 26  # files are lettered a-z


def board_from_placement(text: str) -> Board:
    """Parse a placement field into a :class:`Board`.

    Ranks are listed top (highest rank) first and separated by ``/``; digit
    runs count empty squares. The board size equals the number of ranks.
    """
    ranks = text.strip().split("/")
    size = len(ranks)
    if not _MIN_RANKS <= size <= _MAX_RANKS:
        raise ValueError(
            f"Invalid placement (need {_MIN_RANKS}-{_MAX_RANKS} ranks): {text!r}"
        )

    board = Board(size)
    for rank_idx, rank_text in enumerate(ranks):
        rank = size - 1 - rank_idx
        file = 0
        run = ""
        for ch in rank_text + "/":
            if ch.isdigit():
                run += ch
                continue
            if run:
                step = int(run)
                if step < 1:
                    raise ValueError(f"Invalid placement digit {run!r}: {text!r}")
                file += step
                run = ""
            if ch == "/":
                break
            if file >= size:
                raise ValueError(f"Invalid placement rank width: {text!r}")
            piece = PlacedPiece.from_char(ch, Square(file, rank))
            board.place(piece.kind, piece.owner, piece.square)
            file += 1
        if file != size:
            raise ValueError(f"Invalid placement rank width: {text!r}")
    return board


def board_to_placement(board: Board) -> str:
    """Serialise *board* contents as a placement field."""
    ranks: list[str] = []
    for rank in range(board.size - 1, -1, -1):
        empty = 0
        rank_text = ""
        for file in range(board.size):
            piece = board[Square(file, rank)]
            if piece is None:
                empty += 1
                continue
            if empty:
                rank_text += str(empty)
                empty = 0
            rank_text += str(piece)
        if empty:
            rank_text += str(empty)
        ranks.append(rank_text)
    return "/".join(ranks)
