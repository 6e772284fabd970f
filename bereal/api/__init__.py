"""
API Module - HTTP interface to the engine.

Exposes the engine via REST API. A client:
1. Creates a game session
2. Sends card selections, stock moves and draws
3. Renders the returned game state

All state is session-scoped. No persistent user accounts required.
"""

from .schemas import (
    # Requests
    CreateSessionRequest,
    CardRequest,
    # Responses
    ActionResponse,
    GameStateResponse,
    ErrorResponse,
    # Shared
    CardInfo,
    SelectionInfo,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "CreateSessionRequest",
    "CardRequest",
    # Responses
    "ActionResponse",
    "GameStateResponse",
    "ErrorResponse",
    # Shared
    "CardInfo",
    "SelectionInfo",
    # Service
    "APIService",
    "create_app",
]
