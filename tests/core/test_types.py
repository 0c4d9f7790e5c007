"""Tests for squares, enums and the placed-piece value object."""

import pytest

from chesstiles.config import RuleSettings
from chesstiles.core.enums import Owner, PieceKind
from chesstiles.core.piece import PlacedPiece
from chesstiles.core.types import Square, is_on_board, parse_square, shift, square_name


class TestSquare:
    def test_structural_equality(self) -> None:
        assert Square(3, 4) == Square(3, 4)
        assert Square(3, 4) == (3, 4)
        assert len({Square(3, 4), Square(3, 4)}) == 1

    @pytest.mark.parametrize(
        ("sq", "expected"),
        [(Square(0, 0), True), (Square(7, 7), True), (Square(-1, 0), False),
         (Square(0, 8), False), (Square(8, 3), False)],
    )  # fmt: skip
    def test_is_on_board(self, sq: Square, expected: bool) -> None:
        assert is_on_board(sq) is expected

    def test_is_on_board_custom_size(self) -> None:
        assert is_on_board(Square(4, 4), 5)
        assert not is_on_board(Square(5, 0), 5)

    def test_shift(self) -> None:
        assert shift(Square(0, 0), -1, 2) == Square(-1, 2)

    def test_names_roundtrip(self) -> None:
        assert square_name(Square(4, 1)) == "e2"
        assert parse_square("h8") == Square(7, 7)
        assert str(Square(0, 0)) == "a1"

    @pytest.mark.parametrize("bad", ["", "e", "E2", "e0", "ex", "4e"])
    def test_parse_rejects(self, bad: str) -> None:
        with pytest.raises(ValueError, match="Invalid square"):
            parse_square(bad)


class TestOwner:
    def test_opposite(self) -> None:
        assert Owner.WHITE.opposite is Owner.BLACK
        assert Owner.BLACK.opposite is Owner.WHITE

    def test_forward(self) -> None:
        assert Owner.WHITE.forward == 1
        assert Owner.BLACK.forward == -1

    def test_pawn_start_rank(self) -> None:
        assert Owner.WHITE.pawn_start_rank(8) == 1
        assert Owner.BLACK.pawn_start_rank(8) == 6
        assert Owner.BLACK.pawn_start_rank(5) == 3

    def test_str(self) -> None:
        assert str(Owner.BLACK) == "black"


class TestPlacedPiece:
    def test_from_char(self) -> None:
        piece = PlacedPiece.from_char("n", Square(1, 7))
        assert piece == PlacedPiece(PieceKind.KNIGHT, Owner.BLACK, Square(1, 7))
        assert str(piece) == "n"
        assert piece.symbol == "♞"

    def test_from_char_rejects(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            PlacedPiece.from_char("x", Square(0, 0))

    def test_moved_to_returns_new_value(self) -> None:
        piece = PlacedPiece(PieceKind.ROOK, Owner.WHITE, Square(0, 0))
        moved = piece.moved_to(Square(0, 4))
        assert moved.square == Square(0, 4)
        assert piece.square == Square(0, 0)

    def test_frozen(self) -> None:
        piece = PlacedPiece(PieceKind.ROOK, Owner.WHITE, Square(0, 0))
        with pytest.raises(AttributeError):
            piece.square = Square(1, 1)  # type: ignore[misc]


class TestRuleSettings:
    def test_defaults(self) -> None:
        settings = RuleSettings()
        assert settings.board_size == 8
        assert settings.king_and_queen_moves is False

    def test_rejects_tiny_board(self) -> None:
        with pytest.raises(ValueError, match="at least 3"):
            RuleSettings(board_size=2)
