"""
Pytest fixtures for BeReal tests.
"""

import pytest

from ..engine_core.cards import (
    BinaryOp,
    BinaryOpCard,
    ComplexCard,
    UnaryOp,
    UnaryOpCard,
)
from ..engine_core.config import GameConfig
from ..engine_core.factory import CardFactory
from ..engine_core.reducer import Reducer
from ..engine_core.state import GameState


@pytest.fixture
def factory() -> CardFactory:
    """Seeded factory for deterministic deals."""
    return CardFactory(seed=1234)


@pytest.fixture
def reducer(factory: CardFactory) -> Reducer:
    """Reducer on the observed rule set."""
    return Reducer(factory=factory)


@pytest.fixture
def board_first_reducer() -> Reducer:
    """Reducer that accepts a board card as first binary operand."""
    config = GameConfig(allow_board_first_operand=True)
    return Reducer(factory=CardFactory(config=config, seed=99))


@pytest.fixture
def hand_cards() -> list:
    """A full hand: 2 binary, 4 complex, 2 unary, with readable ids."""
    return [
        BinaryOpCard(id="add", op=BinaryOp.ADD),
        ComplexCard(id="h1", a=-3, b=-2),
        UnaryOpCard(id="mul_i", op=UnaryOp.MUL_I),
        ComplexCard(id="h2", a=0, b=1),
        BinaryOpCard(id="mul", op=BinaryOp.MUL),
        ComplexCard(id="h3", a=1, b=-1),
        UnaryOpCard(id="conj", op=UnaryOp.CONJUGATE),
        ComplexCard(id="h4", a=2, b=0),
    ]


@pytest.fixture
def table(hand_cards) -> GameState:
    """Three board cards and the readable hand."""
    return GameState(
        board=[
            ComplexCard(id="z1", a=1, b=1),
            ComplexCard(id="z2", a=2, b=2),
            ComplexCard(id="z3", a=0, b=3),
        ],
        hand=list(hand_cards),
    )


def make_state(board, hand, stock=None) -> GameState:
    """Build a state from explicit cards."""
    return GameState(board=list(board), hand=list(hand), stock=stock)
