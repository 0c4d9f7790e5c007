"""Tests for the owner-relative occupancy view."""

from chesstiles.core.enums import Owner, PieceKind
from chesstiles.core.occupancy import Occupancy, occupancy_for, partition
from chesstiles.core.piece import PlacedPiece
from chesstiles.core.types import Square

WHITE_SQS = [Square(0, 0), Square(1, 0)]
BLACK_SQS = [Square(0, 7)]


class TestPartition:
    def test_white_view(self) -> None:
        occ = partition(Owner.WHITE, WHITE_SQS, BLACK_SQS)
        assert occ.friendly == frozenset(WHITE_SQS)
        assert occ.enemy == frozenset(BLACK_SQS)

    def test_black_view_swaps(self) -> None:
        friendly, enemy = partition(Owner.BLACK, WHITE_SQS, BLACK_SQS)
        assert friendly == frozenset(BLACK_SQS)
        assert enemy == frozenset(WHITE_SQS)

    def test_is_empty(self) -> None:
        occ = Occupancy(frozenset({Square(0, 0)}), frozenset({Square(1, 1)}))
        assert not occ.is_empty(Square(0, 0))
        assert not occ.is_empty(Square(1, 1))
        assert occ.is_empty(Square(2, 2))


class TestOccupancyFor:
    def test_recomputed_from_snapshot(self) -> None:
        pieces = [
            PlacedPiece(PieceKind.ROOK, Owner.WHITE, Square(0, 0)),
            PlacedPiece(PieceKind.PAWN, Owner.BLACK, Square(3, 6)),
        ]
        occ = occupancy_for(Owner.BLACK, pieces)
        assert occ.friendly == {Square(3, 6)}
        assert occ.enemy == {Square(0, 0)}

        pieces.pop()
        assert occupancy_for(Owner.BLACK, pieces).friendly == frozenset()

    def test_empty_snapshot(self) -> None:
        assert occupancy_for(Owner.WHITE, []) == (frozenset(), frozenset())
