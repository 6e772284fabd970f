"""
Tests for the stock slot and hand redraws.

Tests:
- Stock, unstock and swap
- Placing the stock back
- Drawing the next batch
- Batch composition while a card is stocked
"""

from collections import Counter

import pytest

from ..engine_core.action import Action, Notice
from ..engine_core.cards import CardKind
from ..engine_core.deck import DeckManager


def kinds(cards):
    return Counter(c.kind for c in cards)


class TestToggleStock:
    """Tests for toggle_stock_from_hand."""

    def test_stock_then_swap(self, reducer, table):
        state = reducer.apply(table, Action.toggle_stock("h1")).new_state
        assert len(state.hand) == 7
        assert state.stock.id == "h1"

        state = reducer.apply(state, Action.toggle_stock("h2")).new_state
        assert len(state.hand) == 7
        assert state.hand[-1].id == "h1"
        assert state.stock.id == "h2"

    def test_unstock_appends_to_hand(self, reducer, table):
        state = reducer.apply(table, Action.toggle_stock("mul")).new_state
        state = reducer.apply(state, Action.toggle_stock("mul")).new_state

        assert len(state.hand) == 8
        assert state.hand[-1].id == "mul"
        assert state.stock is None

    def test_clears_selection(self, reducer, table):
        state = reducer.apply(table, Action.select_card("add")).new_state
        state = reducer.apply(state, Action.toggle_stock("h1")).new_state
        assert state.selection.is_idle

    @pytest.mark.parametrize("card_id", ["z1", "nope"])
    def test_not_in_hand(self, reducer, table, card_id):
        result = reducer.apply(table, Action.toggle_stock(card_id))

        assert result.success
        assert result.notice == Notice.NOT_IN_HAND
        assert result.new_state is table


class TestPlaceStockBack:
    """Tests for place_stock_back."""

    def test_empty_stock(self, reducer, table):
        result = reducer.apply(table, Action.place_stock_back())
        assert result.notice == Notice.STOCK_EMPTY
        assert result.new_state is table

    def test_moves_card_to_end_of_hand(self, reducer, table):
        state = reducer.apply(table, Action.toggle_stock("h3")).new_state
        result = reducer.apply(state, Action.place_stock_back())

        assert result.applied
        assert result.new_state.stock is None
        assert result.new_state.hand[-1].id == "h3"
        assert len(result.new_state.hand) == 8

    def test_keeps_selection(self, reducer, table):
        stocked = table.find_in_hand("h4")
        state = table._copy_with(
            hand=[c for c in table.hand if c.id != "h4"],
            stock=stocked,
        )
        state = reducer.apply(state, Action.select_card("add")).new_state

        new_state = reducer.apply(state, Action.place_stock_back()).new_state

        assert new_state.selected_operator.id == "add"


class TestDrawNextBatch:
    """Tests for draw_next_batch."""

    def test_replaces_whole_hand(self, reducer, table):
        state = reducer.apply(table, Action.select_card("add")).new_state
        result = reducer.apply(state, Action.draw_next_batch())
        new_state = result.new_state

        assert len(new_state.hand) == 8
        assert {c.id for c in table.hand}.isdisjoint(c.id for c in new_state.hand)
        assert new_state.selection.is_idle
        assert new_state.board == table.board
        assert new_state.moves == 0
        assert result.state_changes == ["Drew 8 new hand cards"]

    def test_stock_untouched(self, reducer, table):
        state = reducer.apply(table, Action.toggle_stock("conj")).new_state
        new_state = reducer.apply(state, Action.draw_next_batch()).new_state

        assert new_state.stock.id == "conj"
        assert len(new_state.hand) == 7
        assert new_state.held_count == 8


class TestFreshHand:
    """Tests for batch composition around the stock."""

    def test_no_stock_full_batch(self, factory):
        assert len(DeckManager(factory).fresh_hand(None)) == 8

    @pytest.mark.parametrize("card_id", ["add", "h1", "conj"])
    def test_stock_kind_left_out(self, factory, table, card_id):
        stocked = table.find_in_hand(card_id)
        deck = DeckManager(factory)

        for _ in range(20):
            hand = deck.fresh_hand(stocked)
            assert len(hand) == 7
            assert kinds(hand + [stocked]) == {
                CardKind.BINARY: 2,
                CardKind.COMPLEX: 4,
                CardKind.UNARY: 2,
            }
