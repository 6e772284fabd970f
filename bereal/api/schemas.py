"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the exact contract between a client and the engine.
All responses include explicit types for OpenAPI schema generation.

Error Codes:
- SESSION_NOT_FOUND: Session does not exist or has ended
- VALIDATION_ERROR: Request body is malformed
- ENGINE_ERROR: The engine failed to handle an action
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class SessionStatus(str, Enum):
    """Session status values."""
    ACTIVE = "active"
    GAME_OVER = "game_over"
    ENDED = "ended"


class CardKind(str, Enum):
    """Card discriminator."""
    COMPLEX = "complex"
    BINARY = "binary"
    UNARY = "unary"


class ErrorCode(str, Enum):
    """Structured error codes."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    ENGINE_ERROR = "ENGINE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class Notice(str, Enum):
    """Why an input was absorbed instead of applied."""
    UNKNOWN_CARD = "UNKNOWN_CARD"
    WRONG_KIND_FOR_SLOT = "WRONG_KIND_FOR_SLOT"
    DUPLICATE_OPERAND = "DUPLICATE_OPERAND"
    NO_BOARD_OPERAND = "NO_BOARD_OPERAND"
    SELECTION_RESET = "SELECTION_RESET"
    NOT_IN_HAND = "NOT_IN_HAND"
    STOCK_EMPTY = "STOCK_EMPTY"


# =============================================================================
# Shared Models
# =============================================================================

class CardInfo(BaseModel):
    """Card information for display."""
    card_id: str
    kind: CardKind
    label: str = Field(description="Display text, e.g. '3 - 2i', '+', 'conj'")
    a: Optional[int] = Field(None, description="Real part (complex cards)")
    b: Optional[int] = Field(None, description="Imaginary part (complex cards)")
    op: Optional[str] = Field(None, description="Operator (operator cards)")

    model_config = {"from_attributes": True}


class SelectionInfo(BaseModel):
    """Current selection."""
    operator: Optional[CardInfo] = None
    targets: list[str] = Field(default_factory=list, description="Up to two card ids")


# =============================================================================
# Request Models
# =============================================================================

class CreateSessionRequest(BaseModel):
    """Request to create a new game session."""
    random_seed: Optional[int] = Field(None, description="Seed for reproducible games")
    allow_board_first_operand: bool = Field(
        False, description="Let a board card be the first operand of a binary operator"
    )


class CardRequest(BaseModel):
    """Request naming one card."""
    card_id: str = Field(..., min_length=1, description="Id of the card")


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class GameStateResponse(BaseModel):
    """Complete observable game state."""
    session_id: str
    status: SessionStatus
    board: list[CardInfo] = Field(default_factory=list)
    hand: list[CardInfo] = Field(default_factory=list)
    stock: Optional[CardInfo] = None
    selection: SelectionInfo = Field(default_factory=SelectionInfo)
    moves: int = Field(0, ge=0)
    total_removed: int = Field(0, ge=0)
    remaining: int = Field(0, ge=0, description="Complex cards left on the board")
    game_over: bool = False
    api_version: str = Field("v1", description="API version")


class ActionResponse(BaseModel):
    """Result of one player input."""
    session_id: str
    success: bool
    applied: bool = Field(description="False when the input was absorbed")
    notice: Optional[Notice] = None
    changes: list[str] = Field(default_factory=list)
    game_state: GameStateResponse
    api_version: str = Field("v1", description="API version")


class SessionListResponse(BaseModel):
    """List of active sessions."""
    sessions: list[str]
    count: int


class EndSessionResponse(BaseModel):
    """Response from ending a session."""
    success: bool
    session_id: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
