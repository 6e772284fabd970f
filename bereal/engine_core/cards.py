"""
Cards - The three card kinds of the game.

Every card is an immutable value object with an id that is unique for the
lifetime of a game. Arithmetic never mutates a card; it produces a new
ComplexCard with a fresh id.

- ComplexCard: a Gaussian integer a + b*i
- BinaryOpCard: add / sub / mul, takes two operands
- UnaryOpCard: conjugate / mul_i / mul_neg_i, takes one board operand
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


class CardKind(Enum):
    """Discriminator for the Card union."""
    COMPLEX = "complex"
    BINARY = "binary"
    UNARY = "unary"


class BinaryOp(Enum):
    """Binary operators."""
    ADD = "add"
    SUB = "sub"
    MUL = "mul"

    @property
    def symbol(self) -> str:
        return {"add": "+", "sub": "-", "mul": "×"}[self.value]


class UnaryOp(Enum):
    """Unary operators."""
    CONJUGATE = "conjugate"
    MUL_I = "mul_i"
    MUL_NEG_I = "mul_neg_i"

    @property
    def symbol(self) -> str:
        return {"conjugate": "conj", "mul_i": "×i", "mul_neg_i": "×(-i)"}[self.value]


def format_complex(a: int, b: int) -> str:
    """Render a + b*i the short way: 3, 2i, -i, 3 - 2i."""
    if b == 0:
        return f"{a}"
    if a == 0:
        if b == 1:
            return "i"
        if b == -1:
            return "-i"
        return f"{b}i"
    sign = "+" if b >= 0 else "-"
    bb = abs(b)
    return f"{a} {sign} {'' if bb == 1 else bb}i"


@dataclass(frozen=True)
class ComplexCard:
    """A complex-number card a + b*i."""
    id: str
    a: int
    b: int

    kind: ClassVar[CardKind] = CardKind.COMPLEX

    @property
    def is_real(self) -> bool:
        return self.b == 0

    @property
    def label(self) -> str:
        return format_complex(self.a, self.b)


@dataclass(frozen=True)
class BinaryOpCard:
    """An operator card taking two operands."""
    id: str
    op: BinaryOp

    kind: ClassVar[CardKind] = CardKind.BINARY

    @property
    def label(self) -> str:
        return self.op.symbol


@dataclass(frozen=True)
class UnaryOpCard:
    """An operator card taking one board operand."""
    id: str
    op: UnaryOp

    kind: ClassVar[CardKind] = CardKind.UNARY

    @property
    def label(self) -> str:
        return self.op.symbol


Card = Union[ComplexCard, BinaryOpCard, UnaryOpCard]

OPERATOR_KINDS = frozenset({CardKind.BINARY, CardKind.UNARY})


def is_operator(card: Card) -> bool:
    return card.kind in OPERATOR_KINDS
