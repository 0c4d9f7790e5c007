"""Core domain layer — pure chess movement logic with zero external dependencies.

Quick start::

    from chesstiles.core import Owner, PieceKind, Square, generate_moves

    generate_moves(PieceKind.KNIGHT, Owner.WHITE, Square(0, 0), set(), set())
    # frozenset({Square(file=1, rank=2), Square(file=2, rank=1)})
"""

from chesstiles.core.board import Board
from chesstiles.core.enums import Owner, PieceKind
from chesstiles.core.move_generator import (
    BISHOP_DIRS,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    QUEEN_DIRS,
    ROOK_DIRS,
    MoveGenerator,
    generate_moves,
    moves_for,
)
from chesstiles.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from chesstiles.core.occupancy import Occupancy, occupancy_for, partition
from chesstiles.core.piece import PlacedPiece
from chesstiles.core.types import (
    BOARD_SIZE,
    Square,
    is_on_board,
    parse_square,
    shift,
    square_name,
)

__all__ = [
    # Enums
    "Owner",
    "PieceKind",
    # Types / helpers
    "BOARD_SIZE",
    "Square",
    "is_on_board",
    "parse_square",
    "shift",
    "square_name",
    # Domain objects
    "Board",
    "Occupancy",
    "PlacedPiece",
    "occupancy_for",
    "partition",
    # Move generation
    "BISHOP_DIRS",
    "KING_OFFSETS",
    "KNIGHT_OFFSETS",
    "QUEEN_DIRS",
    "ROOK_DIRS",
    "MoveGenerator",
    "generate_moves",
    "moves_for",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
]
