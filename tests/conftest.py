"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import random

import pytest

from chesstiles.core.enums import Owner, PieceKind
from chesstiles.core.piece import PlacedPiece
from chesstiles.core.types import BOARD_SIZE, Square

_ALL_SQUARES = [Square(f, r) for r in range(BOARD_SIZE) for f in range(BOARD_SIZE)]


@pytest.fixture
def all_squares() -> list[Square]:
    return list(_ALL_SQUARES)


@pytest.fixture
def random_snapshots() -> list[tuple[PlacedPiece, ...]]:
    """Reproducible random boards: distinct squares, random kinds and owners."""
    rng = random.Random(20231017)
    kinds = list(PieceKind)
    owners = list(Owner)
    snapshots: list[tuple[PlacedPiece, ...]] = []
    for _ in range(60):
        count = rng.randint(1, 32)
        snapshots.append(
            tuple(
                PlacedPiece(rng.choice(kinds), rng.choice(owners), sq)
                for sq in rng.sample(_ALL_SQUARES, count)
            )
        )
    return snapshots
