"""
Reducer - Applies actions to game state.

The reducer is the single point of state mutation.
All state changes must go through apply().

Design principles:
- (state, action) -> ActionResult carrying the new state
- Illegal player input is absorbed, never raised
- Delegates selection to SelectionController, stock and draws to
  DeckManager, board mutation to OperationResolver
"""

from __future__ import annotations
import logging

from .action import Action, ActionResult, ActionType
from .config import GameConfig
from .deck import DeckManager
from .factory import CardFactory
from .operations import OperationEngine
from .resolver import OperationResolver
from .selection import SelectionController
from .state import GameState
from .win import WinDetector

logger = logging.getLogger(__name__)


class Reducer:
    """
    Reducer applies actions to game state.

    Stateless - all state is in GameState. The factory is the only
    source of new cards and randomness.
    """

    def __init__(self, factory: CardFactory | None = None, config: GameConfig | None = None):
        if factory is None:
            factory = CardFactory(config=config)
        self.factory = factory
        self.config = config or factory.config
        self.deck = DeckManager(factory)
        self.win_detector = WinDetector()
        self.resolver = OperationResolver(OperationEngine(factory), self.deck, self.win_detector)
        self.selection = SelectionController(self.resolver, self.config)

    def new_game(self) -> GameState:
        """Fresh board, fresh hand, empty stock, zeroed counters."""
        return GameState(
            board=self.factory.generate_initial_board(self.config.initial_board_size),
            hand=self.factory.generate_hand_batch(),
        )

    def apply(self, state: GameState, action: Action) -> ActionResult:
        """
        Apply an action to the game state.

        Returns ActionResult with new state or error.
        """
        handler = self._get_handler(action.action_type)
        if not handler:
            return ActionResult.failure(
                f"No handler for action type: {action.action_type}",
                error_code="NO_HANDLER",
            )

        try:
            result = handler(state, action)
        except Exception as e:
            logger.exception("Handler for %s failed", action.action_type.value)
            return ActionResult.failure(str(e), error_code="HANDLER_ERROR")

        if result.notice is not None:
            logger.debug("%s absorbed: %s", action.action_type.value, result.notice.value)
        return result

    def _get_handler(self, action_type: ActionType):
        """Get the handler function for an action type."""
        handlers = {
            ActionType.SELECT_CARD: self._handle_select_card,
            ActionType.TOGGLE_STOCK: self._handle_toggle_stock,
            ActionType.PLACE_STOCK_BACK: self._handle_place_stock_back,
            ActionType.DRAW_NEXT_BATCH: self._handle_draw_next_batch,
            ActionType.RESET_GAME: self._handle_reset_game,
        }
        return handlers.get(action_type)

    def _handle_select_card(self, state: GameState, action: Action) -> ActionResult:
        return self.selection.select(state, action.payload.card_id)

    def _handle_toggle_stock(self, state: GameState, action: Action) -> ActionResult:
        return self.deck.toggle_stock_from_hand(state, action.payload.card_id)

    def _handle_place_stock_back(self, state: GameState, action: Action) -> ActionResult:
        return self.deck.place_stock_back(state)

    def _handle_draw_next_batch(self, state: GameState, action: Action) -> ActionResult:
        return self.deck.draw_next_batch(state)

    def _handle_reset_game(self, state: GameState, action: Action) -> ActionResult:
        new_state = self.new_game()
        logger.info("Game reset after %d moves", state.moves)
        return ActionResult.success_with_state(new_state, changes=["New game"])


def apply_action(factory: CardFactory, state: GameState, action: Action) -> ActionResult:
    """
    Convenience function to apply an action.

    Creates a Reducer around the game's factory and applies the action.
    """
    reducer = Reducer(factory=factory)
    return reducer.apply(state, action)
