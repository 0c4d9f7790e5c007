"""chesstiles — pseudo-legal chess move generation over board snapshots."""

from chesstiles.config import DEFAULT_RULES, RuleSettings
from chesstiles.core import Owner, PieceKind, Square, generate_moves

__all__ = [
    "DEFAULT_RULES",
    "Owner",
    "PieceKind",
    "RuleSettings",
    "Square",
    "generate_moves",
]
