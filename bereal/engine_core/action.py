"""
Action System - Actions, payloads, and results.

Actions represent the five player inputs:
1. select_card (operator, target or operand pick)
2. toggle_stock_from_hand / place_stock_back
3. draw_next_batch
4. reset_game

All state changes flow through actions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ActionType(Enum):
    """Types of actions in the system."""
    SELECT_CARD = "select_card"
    TOGGLE_STOCK = "toggle_stock"
    PLACE_STOCK_BACK = "place_stock_back"
    DRAW_NEXT_BATCH = "draw_next_batch"
    RESET_GAME = "reset_game"


class Notice(Enum):
    """
    Why an input was absorbed instead of applied.

    Illegal player input never fails; it is reported with one of these.
    """
    UNKNOWN_CARD = "UNKNOWN_CARD"
    WRONG_KIND_FOR_SLOT = "WRONG_KIND_FOR_SLOT"
    DUPLICATE_OPERAND = "DUPLICATE_OPERAND"
    NO_BOARD_OPERAND = "NO_BOARD_OPERAND"
    SELECTION_RESET = "SELECTION_RESET"
    NOT_IN_HAND = "NOT_IN_HAND"
    STOCK_EMPTY = "STOCK_EMPTY"


@dataclass
class ActionPayload:
    """Parameters of an action. Only card actions carry a card id."""
    card_id: str | None = None


@dataclass
class Action:
    """
    A complete action to be applied to the game state.

    Applied atomically by the reducer.
    """
    action_type: ActionType
    payload: ActionPayload = field(default_factory=ActionPayload)

    @classmethod
    def select_card(cls, card_id: str) -> Action:
        return cls(
            action_type=ActionType.SELECT_CARD,
            payload=ActionPayload(card_id=card_id),
        )

    @classmethod
    def toggle_stock(cls, card_id: str) -> Action:
        return cls(
            action_type=ActionType.TOGGLE_STOCK,
            payload=ActionPayload(card_id=card_id),
        )

    @classmethod
    def place_stock_back(cls) -> Action:
        return cls(action_type=ActionType.PLACE_STOCK_BACK)

    @classmethod
    def draw_next_batch(cls) -> Action:
        return cls(action_type=ActionType.DRAW_NEXT_BATCH)

    @classmethod
    def reset_game(cls) -> Action:
        return cls(action_type=ActionType.RESET_GAME)


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether the action was handled (absorbed inputs count as handled)
    - New state
    - Notice when the input was absorbed
    - Human-readable changes for the UI
    """
    success: bool
    new_state: Any | None = None  # GameState
    error: str | None = None
    error_code: str | None = None

    notice: Notice | None = None
    state_changes: list[str] = field(default_factory=list)

    @property
    def applied(self) -> bool:
        """True when the input changed something rather than being absorbed."""
        return self.success and self.notice is None

    @classmethod
    def failure(cls, error: str, error_code: str | None = None) -> ActionResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code)

    @classmethod
    def success_with_state(
        cls,
        state: Any,
        changes: list[str] | None = None,
    ) -> ActionResult:
        """Create a success result with new state."""
        return cls(success=True, new_state=state, state_changes=changes or [])

    @classmethod
    def absorbed(
        cls,
        state: Any,
        notice: Notice,
        changes: list[str] | None = None,
    ) -> ActionResult:
        """Input was not legal here; state is returned unchanged or reset."""
        return cls(success=True, new_state=state, notice=notice, state_changes=changes or [])
