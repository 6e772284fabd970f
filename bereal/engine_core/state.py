"""
Game State - The complete state of one game at a point in time.

Design principles:
- Immutable-friendly: all transitions return a new state
- Cards are value objects referenced by id from board, hand and stock
- Observable: snapshot() gives the rendering layer everything it reads
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .cards import Card, ComplexCard


class Zone(Enum):
    """Where a card currently lives."""
    BOARD = "board"
    HAND = "hand"
    STOCK = "stock"


@dataclass(frozen=True)
class Selection:
    """
    Active operator plus up to two target ids.

    Idle when operator is None.
    """
    operator: Card | None = None
    targets: tuple[str, ...] = ()

    @property
    def is_idle(self) -> bool:
        return self.operator is None

    def with_operator(self, operator: Card) -> Selection:
        return Selection(operator=operator, targets=())

    def with_targets(self, targets: tuple[str, ...]) -> Selection:
        return Selection(operator=self.operator, targets=targets)


EMPTY_SELECTION = Selection()


@dataclass
class GameState:
    """
    Board, hand, stock, selection, counters and the terminal flag.

    All state changes go through the reducer.
    """
    board: list[ComplexCard] = field(default_factory=list)
    hand: list[Card] = field(default_factory=list)
    stock: Card | None = None

    selection: Selection = EMPTY_SELECTION

    moves: int = 0
    total_removed: int = 0
    game_over: bool = False

    # =========================================================================
    # Lookups
    # =========================================================================

    def find_in_board(self, card_id: str) -> ComplexCard | None:
        for card in self.board:
            if card.id == card_id:
                return card
        return None

    def find_in_hand(self, card_id: str) -> Card | None:
        for card in self.hand:
            if card.id == card_id:
                return card
        return None

    def board_index(self, card_id: str) -> int:
        """Index of a card on the board, -1 if absent."""
        for idx, card in enumerate(self.board):
            if card.id == card_id:
                return idx
        return -1

    def is_on_board(self, card_id: str) -> bool:
        return self.board_index(card_id) != -1

    def is_stocked(self, card_id: str) -> bool:
        return self.stock is not None and self.stock.id == card_id

    def locate(self, card_id: str) -> tuple[Card, Zone] | None:
        """Find a card by id: hand first, then board, then stock."""
        card = self.find_in_hand(card_id)
        if card is not None:
            return card, Zone.HAND
        card = self.find_in_board(card_id)
        if card is not None:
            return card, Zone.BOARD
        if self.is_stocked(card_id):
            return self.stock, Zone.STOCK
        return None

    def find_card(self, card_id: str) -> Card | None:
        located = self.locate(card_id)
        return located[0] if located else None

    # =========================================================================
    # Derived values
    # =========================================================================

    @property
    def remaining(self) -> int:
        return len(self.board)

    @property
    def held_count(self) -> int:
        """Hand plus stock."""
        return len(self.hand) + (1 if self.stock is not None else 0)

    @property
    def selected_operator(self) -> Card | None:
        return self.selection.operator

    @property
    def selected_targets(self) -> tuple[str, ...]:
        return self.selection.targets

    # =========================================================================
    # Copying
    # =========================================================================

    def with_selection(self, selection: Selection) -> GameState:
        return self._copy_with(selection=selection)

    def cleared_selection(self) -> GameState:
        return self._copy_with(selection=EMPTY_SELECTION)

    def _copy_with(self, **kwargs) -> GameState:
        """Create a copy with some fields replaced."""
        return GameState(
            board=kwargs.get("board", list(self.board)),
            hand=kwargs.get("hand", list(self.hand)),
            stock=kwargs.get("stock", self.stock),
            selection=kwargs.get("selection", self.selection),
            moves=kwargs.get("moves", self.moves),
            total_removed=kwargs.get("total_removed", self.total_removed),
            game_over=kwargs.get("game_over", self.game_over),
        )

    def snapshot(self) -> dict[str, Any]:
        """Read-only view for the rendering layer."""
        return {
            "board": tuple(self.board),
            "hand": tuple(self.hand),
            "stock": self.stock,
            "selected_operator": self.selection.operator,
            "selected_targets": self.selection.targets,
            "moves": self.moves,
            "total_removed": self.total_removed,
            "game_over": self.game_over,
        }
