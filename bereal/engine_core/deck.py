"""
Deck Manager - Hand redraws and the single-slot stock.

The stock holds at most one card taken from the hand. It survives redraws,
and a fresh batch leaves out one card of the stocked card's kind so that
hand plus stock always holds a full batch.
"""

from __future__ import annotations
import logging

from .action import ActionResult, Notice
from .cards import Card
from .factory import CardFactory
from .state import GameState

logger = logging.getLogger(__name__)


class DeckManager:
    """
    Draw and stock operations.

    Each public operation returns an ActionResult, like reducer handlers.
    """

    def __init__(self, factory: CardFactory):
        self.factory = factory

    def fresh_hand(self, stock: Card | None) -> list[Card]:
        """A new batch, shortened by one card of the stock's kind if stock is held."""
        batch = self.factory.generate_hand_batch()
        if stock is None or not batch:
            return batch
        drop_idx = len(batch) - 1
        for idx in range(len(batch) - 1, -1, -1):
            if batch[idx].kind == stock.kind:
                drop_idx = idx
                break
        del batch[drop_idx]
        return batch

    def redraw(self, state: GameState) -> GameState:
        """Discard the whole hand and deal a fresh one; clears selection."""
        return state._copy_with(hand=self.fresh_hand(state.stock)).cleared_selection()

    def draw_next_batch(self, state: GameState) -> ActionResult:
        new_state = self.redraw(state)
        logger.debug("Drew a fresh hand of %d cards", len(new_state.hand))
        return ActionResult.success_with_state(
            new_state,
            changes=[f"Drew {len(new_state.hand)} new hand cards"],
        )

    def toggle_stock_from_hand(self, state: GameState, card_id: str) -> ActionResult:
        """
        Stock, unstock or swap a card.

        - card is the stock: move it back to the end of the hand
        - stock empty: move the hand card into stock
        - stock holds another card: swap, old stock goes to the end of the hand
        """
        stock = state.stock
        if stock is not None and stock.id == card_id:
            new_state = state._copy_with(hand=state.hand + [stock], stock=None)
            return ActionResult.success_with_state(
                new_state.cleared_selection(),
                changes=[f"Moved {stock.label} from stock back to hand"],
            )

        card = state.find_in_hand(card_id)
        if card is None:
            logger.debug("Ignoring stock toggle for %s: not in hand", card_id)
            return ActionResult.absorbed(state, Notice.NOT_IN_HAND)

        new_hand = [c for c in state.hand if c.id != card_id]
        if stock is None:
            changes = [f"Stocked {card.label}"]
        else:
            new_hand.append(stock)
            changes = [f"Stocked {card.label}, returned {stock.label} to hand"]

        new_state = state._copy_with(hand=new_hand, stock=card).cleared_selection()
        return ActionResult.success_with_state(new_state, changes=changes)

    def place_stock_back(self, state: GameState) -> ActionResult:
        stock = state.stock
        if stock is None:
            return ActionResult.absorbed(state, Notice.STOCK_EMPTY)
        new_state = state._copy_with(hand=state.hand + [stock], stock=None)
        return ActionResult.success_with_state(
            new_state,
            changes=[f"Placed {stock.label} back in hand"],
        )
