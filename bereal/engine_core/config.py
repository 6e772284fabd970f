"""
Game Config - Rule-set constants fixed at construction.

The engine never embeds these as literals; a variant rule set is a
different GameConfig.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .cards import CardKind


DEFAULT_COEFFICIENTS = tuple(range(-5, 6))


@dataclass(frozen=True)
class HandComposition:
    """How many cards of each kind a fresh hand batch holds."""
    binary: int = 2
    complex: int = 4
    unary: int = 2

    @property
    def size(self) -> int:
        return self.binary + self.complex + self.unary

    def count_for(self, kind: CardKind) -> int:
        return {
            CardKind.BINARY: self.binary,
            CardKind.COMPLEX: self.complex,
            CardKind.UNARY: self.unary,
        }[kind]


@dataclass(frozen=True)
class GameConfig:
    """
    Constants for one rule set.

    allow_board_first_operand switches the binary first-pick rule:
    False keeps the observed behavior (first operand must come from
    hand or stock), True lets a board card be the first operand too.
    """
    coefficients: tuple[int, ...] = DEFAULT_COEFFICIENTS
    hand: HandComposition = field(default_factory=HandComposition)
    initial_board_size: int = 6
    allow_board_first_operand: bool = False

    def __post_init__(self):
        if not self.coefficients:
            raise ValueError("coefficients must not be empty")
        if not self.non_zero_coefficients:
            raise ValueError("coefficients must contain a non-zero value")
        if self.initial_board_size < 0:
            raise ValueError("initial_board_size must be >= 0")
        if min(self.hand.binary, self.hand.complex, self.hand.unary) < 0:
            raise ValueError("hand composition counts must be >= 0")

    @property
    def non_zero_coefficients(self) -> tuple[int, ...]:
        """Coefficients for imaginary parts of board seeds (never real)."""
        return tuple(c for c in self.coefficients if c != 0)

    @property
    def hand_size(self) -> int:
        return self.hand.size


DEFAULT_CONFIG = GameConfig()
