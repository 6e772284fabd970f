"""
Tests for the reducer (state transitions).

Tests:
- Worked game scenarios
- Reset
- Dispatch errors
- Invariants under random play
"""

import random

import pytest

from ..engine_core.action import Action, ActionType, Notice
from ..engine_core.cards import BinaryOp, BinaryOpCard, ComplexCard, UnaryOp, UnaryOpCard
from ..engine_core.factory import CardFactory
from ..engine_core.reducer import Reducer, apply_action
from .conftest import make_state


def play(reducer, state, *card_ids):
    result = None
    for card_id in card_ids:
        result = reducer.apply(state, Action.select_card(card_id))
        state = result.new_state
    return result


class TestScenarios:
    """Small games played card by card."""

    def test_unary_clears_last_card(self, reducer, hand_cards):
        """(0+3i) * i = -3 is real: board empty, game over."""
        state = make_state([ComplexCard(id="z", a=0, b=3)], hand_cards)

        state = play(reducer, state, "mul_i", "z").new_state

        assert state.board == []
        assert state.total_removed == 1
        assert state.moves == 1
        assert state.game_over

    def test_binary_with_hand_constant(self, reducer, hand_cards):
        """(3+2i) + (-3-2i) = 0 removes the board card only."""
        state = make_state([ComplexCard(id="z", a=3, b=2)], hand_cards)

        result = play(reducer, state, "add", "h1", "z")

        assert result.new_state.board == []
        assert result.new_state.total_removed == 1
        assert result.new_state.moves == 1
        assert result.new_state.game_over
        assert "(3 + 2i) + (-3 - 2i) = 0 is real, removed 1" in result.state_changes

    def test_board_first_pick_then_hand_first(self, reducer, hand_cards):
        board = [ComplexCard(id="z1", a=1, b=1), ComplexCard(id="z2", a=2, b=2)]
        state = make_state(board, hand_cards)

        result = play(reducer, state, "add", "z1")
        assert result.notice == Notice.SELECTION_RESET
        assert result.new_state.selection.is_idle

        result = play(reducer, result.new_state, "add", "h2", "z1")
        new_board = result.new_state.board

        # (1+i) + i = 1 + 2i
        assert len(new_board) == 2
        assert (new_board[0].a, new_board[0].b) == (1, 2)
        assert new_board[1].id == "z2"
        assert result.new_state.total_removed == 0

    def test_apply_action_shares_factory(self, factory, table):
        result = apply_action(factory, table, Action.select_card("add"))
        assert result.new_state.selected_operator.id == "add"


class TestReset:
    """Tests for reset_game."""

    def test_reset_after_win(self, reducer, hand_cards):
        state = make_state([ComplexCard(id="z", a=0, b=3)], hand_cards)
        state = play(reducer, state, "mul_i", "z").new_state
        assert state.game_over

        result = reducer.apply(state, Action.reset_game())
        new_state = result.new_state

        assert result.state_changes == ["New game"]
        assert not new_state.game_over
        assert new_state.moves == 0
        assert new_state.total_removed == 0
        assert len(new_state.board) == 6
        assert len(new_state.hand) == 8
        assert new_state.stock is None
        assert new_state.selection.is_idle

    def test_reset_issues_new_ids(self, reducer):
        state = reducer.new_game()
        old_ids = {c.id for c in state.board + state.hand}

        new_state = reducer.apply(state, Action.reset_game()).new_state

        assert old_ids.isdisjoint(c.id for c in new_state.board + new_state.hand)

    def test_new_game_board_is_non_real(self, reducer):
        state = reducer.new_game()
        assert all(c.b != 0 for c in state.board)


class TestErrors:
    """Tests for dispatch failures."""

    def test_unknown_action_type(self, reducer, table):
        result = reducer.apply(table, Action(action_type="bogus"))

        assert not result.success
        assert result.error_code == "NO_HANDLER"
        assert result.new_state is None

    def test_handler_exception(self, reducer, table, monkeypatch):
        def explode(state):
            raise RuntimeError("boom")

        monkeypatch.setattr(reducer.deck, "draw_next_batch", explode)
        result = reducer.apply(table, Action.draw_next_batch())

        assert not result.success
        assert result.error_code == "HANDLER_ERROR"
        assert result.error == "boom"

    def test_actions_after_game_over_are_accepted(self, reducer, hand_cards):
        state = make_state([ComplexCard(id="z", a=0, b=3)], hand_cards)
        state = play(reducer, state, "mul_i", "z").new_state

        result = reducer.apply(state, Action.draw_next_batch())

        assert result.applied
        assert result.new_state.game_over


class TestRandomPlay:
    """Invariants that hold for any input sequence."""

    ACTIONS = [ActionType.SELECT_CARD] * 6 + [
        ActionType.TOGGLE_STOCK,
        ActionType.PLACE_STOCK_BACK,
        ActionType.DRAW_NEXT_BATCH,
    ]

    def random_action(self, rng, state):
        action_type = rng.choice(self.ACTIONS)
        card_ids = [c.id for c in state.board + state.hand] + ["missing"]
        if state.stock is not None:
            card_ids.append(state.stock.id)
        if action_type == ActionType.SELECT_CARD:
            return Action.select_card(rng.choice(card_ids))
        if action_type == ActionType.TOGGLE_STOCK:
            return Action.toggle_stock(rng.choice(card_ids))
        if action_type == ActionType.PLACE_STOCK_BACK:
            return Action.place_stock_back()
        return Action.draw_next_batch()

    @pytest.mark.parametrize("seed", [1, 7, 2024])
    def test_invariants(self, seed):
        reducer = Reducer(factory=CardFactory(seed=seed))
        rng = random.Random(seed)
        state = reducer.new_game()

        for _ in range(400):
            before = state
            result = reducer.apply(state, self.random_action(rng, state))
            assert result.success
            state = result.new_state

            assert len(state.board) <= len(before.board)
            assert state.moves >= before.moves
            assert state.held_count == 8
            assert all(c.b != 0 for c in state.board)
            ids = [c.id for c in state.board + state.hand]
            if state.stock is not None:
                ids.append(state.stock.id)
            assert len(ids) == len(set(ids))
            assert state.total_removed + len(state.board) == 6
            if state.game_over:
                assert state.board == []
                break

    def test_select_never_touches_unselected_board(self, reducer, table):
        """An absorbed input leaves board and hand as they were."""
        for card_id in ["z1", "z2", "missing"]:
            result = reducer.apply(table, Action.select_card(card_id))
            assert result.new_state.board == table.board
            assert result.new_state.hand == table.hand


class TestOperatorCards:
    """Operator cards in the selection."""

    def test_operator_labels(self):
        assert BinaryOpCard(id="b", op=BinaryOp.MUL).label == "×"
        assert UnaryOpCard(id="u", op=UnaryOp.MUL_NEG_I).label == "×(-i)"


class TestSnapshot:
    """Tests for the read-only view of a state."""

    def test_snapshot_fields(self, reducer, table):
        state = play(reducer, table, "add", "h1").new_state
        view = state.snapshot()

        assert view["board"] == tuple(table.board)
        assert view["selected_operator"].id == "add"
        assert view["selected_targets"] == ("h1",)
        assert view["stock"] is None
        assert (view["moves"], view["total_removed"], view["game_over"]) == (0, 0, False)

    def test_previous_state_untouched(self, reducer, table):
        before = list(table.board)
        play(reducer, table, "conj", "z1")
        assert table.board == before
        assert table.moves == 0


class TestActionShape:
    """Actions carry only what the reducer reads."""

    def test_action_fields(self):
        from dataclasses import fields

        from ..engine_core.action import ActionPayload

        assert [f.name for f in fields(Action)] == ["action_type", "payload"]
        assert [f.name for f in fields(ActionPayload)] == ["card_id"]
