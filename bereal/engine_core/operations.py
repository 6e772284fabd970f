"""
Operation Engine - Gaussian-integer arithmetic on complex cards.

Pure functions over (a, b) coefficients. Every result is a new ComplexCard;
the id comes from the caller's factory so ids stay unique per game.
Arithmetic over integers is total, nothing here raises.
"""

from __future__ import annotations
from typing import Callable

from .cards import BinaryOp, ComplexCard, UnaryOp
from .factory import CardFactory


Coefficients = tuple[int, int]


def add(z1: ComplexCard, z2: ComplexCard) -> Coefficients:
    return z1.a + z2.a, z1.b + z2.b


def sub(z1: ComplexCard, z2: ComplexCard) -> Coefficients:
    return z1.a - z2.a, z1.b - z2.b


def mul(z1: ComplexCard, z2: ComplexCard) -> Coefficients:
    # (a+bi)(c+di) = (ac - bd) + (ad + bc)i
    return z1.a * z2.a - z1.b * z2.b, z1.a * z2.b + z1.b * z2.a


def conjugate(z: ComplexCard) -> Coefficients:
    return z.a, -z.b


def mul_by_i(z: ComplexCard, sign: int = 1) -> Coefficients:
    """Multiply by i (sign=+1) or by -i (sign=-1)."""
    return -sign * z.b, sign * z.a


def is_real(z: ComplexCard) -> bool:
    return z.b == 0


BINARY_OPERATIONS: dict[BinaryOp, Callable[[ComplexCard, ComplexCard], Coefficients]] = {
    BinaryOp.ADD: add,
    BinaryOp.SUB: sub,
    BinaryOp.MUL: mul,
}

UNARY_OPERATIONS: dict[UnaryOp, Callable[[ComplexCard], Coefficients]] = {
    UnaryOp.CONJUGATE: conjugate,
    UnaryOp.MUL_I: lambda z: mul_by_i(z, 1),
    UnaryOp.MUL_NEG_I: lambda z: mul_by_i(z, -1),
}


class OperationEngine:
    """
    Applies operator cards to complex cards, minting result cards.

    Usage:
        engine = OperationEngine(factory)
        result = engine.apply_binary(BinaryOp.MUL, z1, z2)
    """

    def __init__(self, factory: CardFactory):
        self.factory = factory

    def apply_binary(self, op: BinaryOp, left: ComplexCard, right: ComplexCard) -> ComplexCard:
        a, b = BINARY_OPERATIONS[op](left, right)
        return self.factory.make_complex(a, b)

    def apply_unary(self, op: UnaryOp, target: ComplexCard) -> ComplexCard:
        a, b = UNARY_OPERATIONS[op](target)
        return self.factory.make_complex(a, b)
