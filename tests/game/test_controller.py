"""Tests for GameController — request routing and events."""

from chesstiles.config import RuleSettings
from chesstiles.core.enums import Owner
from chesstiles.core.types import parse_square
from chesstiles.game.controller import GameController
from chesstiles.game.interfaces import ClearSelection, SelectSquare, TurnUpdate
from chesstiles.game.state import GameState, MoveRecord


def _controller() -> GameController:
    ctrl = GameController()
    ctrl.new_game()
    return ctrl


class TestNewGame:
    def test_white_to_move(self) -> None:
        ctrl = _controller()
        assert ctrl.state.turn == Owner.WHITE
        assert ctrl.state.is_started

    def test_new_game_replaces_state(self) -> None:
        ctrl = _controller()
        first = ctrl.state
        ctrl.new_game("8/8/8/8/8/8/8/R7", RuleSettings())
        assert ctrl.state is not first
        assert len(ctrl.state.board) == 1


class TestEvents:
    def test_selection_event(self) -> None:
        ctrl = _controller()
        seen: list[TurnUpdate] = []
        ctrl.events.on_selection.append(seen.append)

        ctrl.handle(SelectSquare(parse_square("e2")))
        assert len(seen) == 1
        assert seen[0].destinations == {parse_square("e3"), parse_square("e4")}

        ctrl.handle(ClearSelection())
        assert seen[-1].selected is None

    def test_move_event(self) -> None:
        ctrl = _controller()
        moves: list[tuple[MoveRecord, GameState]] = []
        ctrl.events.on_move.append(lambda rec, st: moves.append((rec, st)))

        ctrl.handle(SelectSquare(parse_square("e2")))
        assert moves == []
        update = ctrl.handle(SelectSquare(parse_square("e4")))

        assert update.moved
        assert len(moves) == 1
        record, state = moves[0]
        assert record.target == parse_square("e4")
        assert state.turn == Owner.BLACK

    def test_full_exchange(self) -> None:
        ctrl = _controller()
        for name in ("e2", "e4", "d7", "d5", "e4", "d5"):
            ctrl.handle(SelectSquare(parse_square(name)))
        history = ctrl.state.history
        assert [str(r) for r in history] == ["e2-e4", "d7-d5", "e4xd5"]
        assert len(ctrl.state.board.squares(Owner.BLACK)) == 15
