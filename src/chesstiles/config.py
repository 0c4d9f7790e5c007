"""Rule settings shared by the move generator and the game state."""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8
_MIN_BOARD_SIZE = 3  # pawns need a start rank distinct from the back rank


@dataclass(frozen=True, slots=True)
class RuleSettings:
    """All tunable rule parameters."""

    board_size: int = BOARD_SIZE

    # King and queen rules are absent from the classic table and yield no
    # destinations unless switched on here.
    king_and_queen_moves: bool = False

    def __post_init__(self) -> None:
        if self.board_size < _MIN_BOARD_SIZE:
            raise ValueError(
                f"Board size must be at least {_MIN_BOARD_SIZE}: {self.board_size!r}"
            )


DEFAULT_RULES = RuleSettings()
