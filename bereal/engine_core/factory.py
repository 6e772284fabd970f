"""
Card Factory - Creates every card that enters play.

All randomness flows through one injectable random.Random, so a seeded
factory deals the same board, hands and shuffles every time.

Ids come from a per-factory counter with a kind prefix (c_, b_, u_), which
keeps them unique for as long as the factory lives, resets included.
"""

from __future__ import annotations
import itertools
import random
from typing import Sequence, TypeVar

from .cards import (
    BinaryOp,
    BinaryOpCard,
    Card,
    CardKind,
    ComplexCard,
    UnaryOp,
    UnaryOpCard,
)
from .config import GameConfig, DEFAULT_CONFIG


T = TypeVar("T")

ID_PREFIXES = {
    CardKind.COMPLEX: "c",
    CardKind.BINARY: "b",
    CardKind.UNARY: "u",
}


class CardFactory:
    """
    Generates card instances and batches.

    Usage:
        factory = CardFactory(seed=42)
        board = factory.generate_initial_board()
        hand = factory.generate_hand_batch()
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
        seed: int | None = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.rng = rng or random.Random(seed)
        self._counter = itertools.count(1)

    def next_id(self, kind: CardKind) -> str:
        return f"{ID_PREFIXES[kind]}_{next(self._counter)}"

    def sample(self, values: Sequence[T]) -> T:
        """Uniform pick from a finite sequence."""
        return values[self.rng.randrange(len(values))]

    # =========================================================================
    # Single cards
    # =========================================================================

    def make_complex(self, a: int, b: int) -> ComplexCard:
        """Create a complex card with given coefficients and a fresh id."""
        return ComplexCard(id=self.next_id(CardKind.COMPLEX), a=a, b=b)

    def generate_complex(self) -> ComplexCard:
        coefficients = self.config.coefficients
        return self.make_complex(self.sample(coefficients), self.sample(coefficients))

    def generate_non_real_complex(self) -> ComplexCard:
        return self.make_complex(
            self.sample(self.config.coefficients),
            self.sample(self.config.non_zero_coefficients),
        )

    def generate_binary(self) -> BinaryOpCard:
        return BinaryOpCard(id=self.next_id(CardKind.BINARY), op=self.sample(list(BinaryOp)))

    def generate_unary(self) -> UnaryOpCard:
        return UnaryOpCard(id=self.next_id(CardKind.UNARY), op=self.sample(list(UnaryOp)))

    # =========================================================================
    # Batches
    # =========================================================================

    def generate_hand_batch(self) -> list[Card]:
        """
        Create a fresh hand: binary, complex and unary cards in the configured
        amounts, then shuffled (Fisher-Yates).
        """
        composition = self.config.hand
        generators = (
            (CardKind.BINARY, self.generate_binary),
            (CardKind.COMPLEX, self.generate_complex),
            (CardKind.UNARY, self.generate_unary),
        )
        cards: list[Card] = []
        for kind, generate in generators:
            cards.extend(generate() for _ in range(composition.count_for(kind)))
        self.shuffle(cards)
        return cards

    def generate_initial_board(self, n: int | None = None) -> list[ComplexCard]:
        """Create n non-real complex cards, in generation order."""
        if n is None:
            n = self.config.initial_board_size
        return [self.generate_non_real_complex() for _ in range(n)]

    def shuffle(self, cards: list[T]) -> None:
        """In-place Fisher-Yates shuffle."""
        for i in range(len(cards) - 1, 0, -1):
            j = self.rng.randrange(i + 1)
            cards[i], cards[j] = cards[j], cards[i]
