"""
Selection Controller - Turns card clicks into operations.

States:
    Idle                 no operator selected
    OperatorPending      a unary or binary operator is selected
    (completion)         operator + operand(s) complete, the resolver
                         applies it and the selection returns to Idle

Rules, for a card looked up in hand, then board, then stock:
1. Operator card: becomes the operator, targets cleared.
2. Complex card while Idle: hand/stock cards toggle in and out of the
   targets (two most recent kept); board cards are ignored.
3. Complex card with a unary operator: board cards are resolved at once,
   anything else is ignored.
4. Complex card with a binary operator:
   a. no target yet, card off the board: it becomes the first operand
   b. one target: the card is the second operand and the operation runs
   c. otherwise (no target yet, board card): the selection is reset
"""

from __future__ import annotations
import logging

from .action import ActionResult, Notice
from .cards import CardKind, ComplexCard, is_operator
from .config import GameConfig, DEFAULT_CONFIG
from .resolver import OperationResolver
from .state import GameState, Zone, EMPTY_SELECTION

logger = logging.getLogger(__name__)

MAX_TARGETS = 2


class SelectionController:
    """
    Consumes one card selection at a time.

    Usage:
        controller = SelectionController(resolver)
        result = controller.select(state, card_id)
    """

    def __init__(self, resolver: OperationResolver, config: GameConfig | None = None):
        self.resolver = resolver
        self.config = config or DEFAULT_CONFIG

    def select(self, state: GameState, card_id: str) -> ActionResult:
        located = state.locate(card_id)
        if located is None:
            logger.debug("Ignoring unknown card %s", card_id)
            return ActionResult.absorbed(state, Notice.UNKNOWN_CARD)

        card, zone = located
        on_board = zone == Zone.BOARD

        if is_operator(card):
            return ActionResult.success_with_state(
                state.with_selection(state.selection.with_operator(card)),
                changes=[f"Selected operator {card.label}"],
            )

        operator = state.selection.operator
        if operator is None:
            return self._toggle_target(state, card, on_board)
        if operator.kind == CardKind.UNARY:
            return self._pick_unary_target(state, card, on_board)
        return self._pick_binary_operand(state, card, on_board)

    def _toggle_target(self, state: GameState, card: ComplexCard, on_board: bool) -> ActionResult:
        if on_board:
            return ActionResult.absorbed(state, Notice.WRONG_KIND_FOR_SLOT)

        targets = state.selection.targets
        if card.id in targets:
            new_targets = tuple(t for t in targets if t != card.id)
            change = f"Unselected {card.label}"
        else:
            new_targets = (targets + (card.id,))[-MAX_TARGETS:]
            change = f"Selected {card.label}"

        return ActionResult.success_with_state(
            state.with_selection(state.selection.with_targets(new_targets)),
            changes=[change],
        )

    def _pick_unary_target(self, state: GameState, card: ComplexCard, on_board: bool) -> ActionResult:
        if not on_board:
            return ActionResult.absorbed(state, Notice.WRONG_KIND_FOR_SLOT)
        return self.resolver.apply_unary(state, state.selection.operator, card)

    def _pick_binary_operand(self, state: GameState, card: ComplexCard, on_board: bool) -> ActionResult:
        selection = state.selection
        targets = selection.targets
        first_allowed = not on_board or self.config.allow_board_first_operand

        if not targets and first_allowed:
            return ActionResult.success_with_state(
                state.with_selection(selection.with_targets((card.id,))),
                changes=[f"First operand {card.label}"],
            )

        if len(targets) == 1:
            first_id = targets[0]
            if first_id == card.id:
                return ActionResult.absorbed(state, Notice.DUPLICATE_OPERAND)
            first = state.find_card(first_id)
            if first is None:
                return ActionResult.absorbed(state, Notice.UNKNOWN_CARD)
            if first.kind != CardKind.COMPLEX:
                return ActionResult.absorbed(state.with_selection(EMPTY_SELECTION), Notice.SELECTION_RESET)
            return self.resolver.apply_binary(state, selection.operator, first, card)

        logger.debug("Selection reset by %s", card.id)
        return ActionResult.absorbed(
            state.with_selection(EMPTY_SELECTION),
            Notice.SELECTION_RESET,
            changes=["Selection cleared"],
        )
