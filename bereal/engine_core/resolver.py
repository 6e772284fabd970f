"""
Operation Resolver - Applies a completed selection to the board.

Board mutation policy:
- A real result removes the board operand(s); a non-real result replaces
  the board operand in place (index preserved).
- A hand or stock constant used as an operand is never consumed.
- Every applied operation counts one move, clears the selection and deals
  a fresh hand. A stocked operator card is spent with it.
"""

from __future__ import annotations
import logging

from .action import ActionResult, Notice
from .cards import BinaryOpCard, Card, ComplexCard, UnaryOpCard
from .deck import DeckManager
from .operations import OperationEngine
from .state import GameState
from .win import WinDetector

logger = logging.getLogger(__name__)


class OperationResolver:
    """
    Resolves unary and binary operations against the current state.

    Stateless - all state is in GameState.
    """

    def __init__(
        self,
        engine: OperationEngine,
        deck: DeckManager,
        win_detector: WinDetector | None = None,
    ):
        self.engine = engine
        self.deck = deck
        self.win_detector = win_detector or WinDetector()

    def apply_unary(
        self,
        state: GameState,
        op_card: UnaryOpCard,
        target: ComplexCard,
    ) -> ActionResult:
        """Apply a unary operator to a board card."""
        idx = state.board_index(target.id)
        if idx == -1:
            return ActionResult.absorbed(state, Notice.WRONG_KIND_FOR_SLOT)

        result = self.engine.apply_unary(op_card.op, target)
        new_board = list(state.board)
        if result.is_real:
            del new_board[idx]
            removed = 1
            changes = [f"{op_card.label}({target.label}) = {result.label} is real, removed"]
        else:
            new_board[idx] = result
            removed = 0
            changes = [f"{op_card.label}({target.label}) = {result.label}"]

        logger.debug("Unary %s on %s -> %s", op_card.op.value, target.label, result.label)
        new_state = state._copy_with(
            board=new_board,
            moves=state.moves + 1,
            total_removed=state.total_removed + removed,
        )
        return self._finish(new_state, op_card, changes)

    def apply_binary(
        self,
        state: GameState,
        op_card: BinaryOpCard,
        first: ComplexCard,
        second: ComplexCard,
    ) -> ActionResult:
        """
        Apply a binary operator.

        The board operand becomes the left side (first wins if both are on
        the board) so the result lands on its slot.
        """
        first_on_board = state.is_on_board(first.id)
        second_on_board = state.is_on_board(second.id)

        if first_on_board:
            left, right, right_on_board = first, second, second_on_board
        elif second_on_board:
            left, right, right_on_board = second, first, first_on_board
        else:
            logger.debug("Binary %s without a board operand, selection cleared", op_card.op.value)
            return ActionResult.absorbed(state.cleared_selection(), Notice.NO_BOARD_OPERAND)

        result = self.engine.apply_binary(op_card.op, left, right)
        expression = f"({left.label}) {op_card.label} ({right.label}) = {result.label}"
        both_on_board = right_on_board and right.id != left.id

        if result.is_real:
            gone = {left.id, right.id} if both_on_board else {left.id}
            new_board = [c for c in state.board if c.id not in gone]
            removed = len(gone)
            changes = [f"{expression} is real, removed {removed}"]
        else:
            new_board = list(state.board)
            new_board[state.board_index(left.id)] = result
            removed = 0
            if both_on_board:
                new_board = [c for c in new_board if c.id != right.id]
                removed = 1
            changes = [expression]

        logger.debug("Binary %s -> %s, removed %d", op_card.op.value, result.label, removed)
        new_state = state._copy_with(
            board=new_board,
            moves=state.moves + 1,
            total_removed=state.total_removed + removed,
        )
        return self._finish(new_state, op_card, changes)

    def _finish(self, state: GameState, op_card: Card, changes: list[str]) -> ActionResult:
        """Post-operation bookkeeping: win check, spent stock, fresh hand."""
        state = self.win_detector.check(state)
        if state.is_stocked(op_card.id):
            state = state._copy_with(stock=None)
        state = self.deck.redraw(state)
        if state.game_over:
            changes = changes + [f"All cleared in {state.moves} moves"]
        return ActionResult.success_with_state(state, changes=changes)
