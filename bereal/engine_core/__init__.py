"""
Engine Core - Deterministic game state management and operation resolution.

The engine is the runtime that:
1. Generates cards (CardFactory)
2. Manages GameState
3. Turns card selections into operations (SelectionController)
4. Applies operations to the board (OperationResolver)
5. Redraws hands and manages the stock (DeckManager)
6. Detects the cleared board (WinDetector)
"""

from .cards import (
    Card,
    CardKind,
    ComplexCard,
    BinaryOpCard,
    UnaryOpCard,
    BinaryOp,
    UnaryOp,
    format_complex,
)
from .config import GameConfig, HandComposition, DEFAULT_CONFIG
from .factory import CardFactory
from .operations import OperationEngine
from .state import GameState, Selection, Zone
from .action import Action, ActionType, ActionPayload, ActionResult, Notice
from .deck import DeckManager
from .resolver import OperationResolver
from .selection import SelectionController
from .win import WinDetector
from .reducer import Reducer, apply_action

__all__ = [
    "Card",
    "CardKind",
    "ComplexCard",
    "BinaryOpCard",
    "UnaryOpCard",
    "BinaryOp",
    "UnaryOp",
    "format_complex",
    "GameConfig",
    "HandComposition",
    "DEFAULT_CONFIG",
    "CardFactory",
    "OperationEngine",
    "GameState",
    "Selection",
    "Zone",
    "Action",
    "ActionType",
    "ActionPayload",
    "ActionResult",
    "Notice",
    "DeckManager",
    "OperationResolver",
    "SelectionController",
    "WinDetector",
    "Reducer",
    "apply_action",
]
