"""
FastAPI Application - REST API for BeReal clients.

Endpoints:
    POST   /api/v1/sessions                        Create game session
    GET    /api/v1/sessions                        List active sessions
    GET    /api/v1/sessions/{id}                   Get session state
    DELETE /api/v1/sessions/{id}                   End session
    GET    /api/v1/sessions/{id}/state             Get game state
    POST   /api/v1/sessions/{id}/select            Select a card
    POST   /api/v1/sessions/{id}/stock             Stock / unstock / swap a hand card
    POST   /api/v1/sessions/{id}/stock/place-back  Return the stock card to the hand
    POST   /api/v1/sessions/{id}/draw              Draw the next 8 cards
    POST   /api/v1/sessions/{id}/reset             Start over

Illegal inputs are not errors: the action response reports them in
`notice` with `applied=false`. All responses are JSON with explicit
Pydantic schemas.
"""

from typing import Optional, Union
import logging
import os

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from .service import APIService
from .schemas import (
    # Request models
    CreateSessionRequest,
    CardRequest,
    # Response models
    ActionResponse,
    GameStateResponse,
    ErrorResponse,
    SessionListResponse,
    EndSessionResponse,
    HealthResponse,
    # Enums
    ErrorCode,
)
from .. import __version__

# Environment configuration
BEREAL_ENV = os.getenv("BEREAL_ENV", "development")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")

logger = logging.getLogger(__name__)


def create_app(service: Optional[APIService] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="BeReal Engine API",
        description="""
Gaussian-integer puzzle engine. Clear the board by turning every complex
card real with the operator cards in your hand.

## Selection flow

1. Select an operator card from the hand (or stock).
2. Unary operator: select a board card, the operation runs at once.
3. Binary operator: select a hand/stock complex card, then a second card.

## Error Codes

| Code | Description |
|------|-------------|
| `SESSION_NOT_FOUND` | Session does not exist |
| `VALIDATION_ERROR` | Request body is malformed |
| `ENGINE_ERROR` | The engine failed to handle the input |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or APIService()
    app.state.service = api_service

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(error: ErrorResponse, status_code: int = 400) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(status_code=status_code, content=error.model_dump(mode="json"))

    def respond(response, success_type):
        if isinstance(response, success_type):
            return response
        status_code = 404 if response.error_code == ErrorCode.SESSION_NOT_FOUND else 500
        return make_error_response(response, status_code=status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return make_error_response(
            ErrorResponse(
                error="Invalid request",
                error_code=ErrorCode.VALIDATION_ERROR,
                details={"errors": jsonable_encoder(exc.errors())},
            ),
            status_code=422,
        )

    # =========================================================================
    # Session Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions",
        response_model=GameStateResponse,
        status_code=201,
        tags=["Sessions"],
        summary="Create a new game session",
    )
    async def create_session(body: CreateSessionRequest) -> GameStateResponse:
        """Deal a fresh board of 6 and a hand of 8. Pass `random_seed` to replay a deal."""
        return api_service.create_session(body)

    @app.get(
        "/api/v1/sessions",
        response_model=SessionListResponse,
        tags=["Sessions"],
        summary="List active sessions",
    )
    async def list_sessions() -> SessionListResponse:
        sessions = api_service.list_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=GameStateResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Get session state",
    )
    async def get_session(session_id: str) -> Union[GameStateResponse, JSONResponse]:
        return respond(api_service.get_game_state(session_id), GameStateResponse)

    @app.delete(
        "/api/v1/sessions/{session_id}",
        response_model=EndSessionResponse,
        tags=["Sessions"],
        summary="End a game session",
    )
    async def end_session(session_id: str) -> EndSessionResponse:
        """End a game session and release resources."""
        success = api_service.end_session(session_id)
        return EndSessionResponse(success=success, session_id=session_id)

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.get(
        "/api/v1/sessions/{session_id}/state",
        response_model=GameStateResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Get current game state",
    )
    async def get_game_state(session_id: str) -> Union[GameStateResponse, JSONResponse]:
        return respond(api_service.get_game_state(session_id), GameStateResponse)

    @app.post(
        "/api/v1/sessions/{session_id}/select",
        response_model=ActionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Select a card",
    )
    async def select_card(session_id: str, body: CardRequest) -> Union[ActionResponse, JSONResponse]:
        """
        Select an operator, a target or an operand.

        Completing an operator + operand(s) selection applies the operation
        and deals a fresh hand.
        """
        return respond(api_service.select_card(session_id, body.card_id), ActionResponse)

    @app.post(
        "/api/v1/sessions/{session_id}/stock",
        response_model=ActionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Stock, unstock or swap a hand card",
    )
    async def toggle_stock(session_id: str, body: CardRequest) -> Union[ActionResponse, JSONResponse]:
        return respond(api_service.toggle_stock(session_id, body.card_id), ActionResponse)

    @app.post(
        "/api/v1/sessions/{session_id}/stock/place-back",
        response_model=ActionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Return the stock card to the hand",
    )
    async def place_stock_back(session_id: str) -> Union[ActionResponse, JSONResponse]:
        return respond(api_service.place_stock_back(session_id), ActionResponse)

    @app.post(
        "/api/v1/sessions/{session_id}/draw",
        response_model=ActionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Discard the hand and draw the next 8 cards",
    )
    async def draw_next_batch(session_id: str) -> Union[ActionResponse, JSONResponse]:
        return respond(api_service.draw_next_batch(session_id), ActionResponse)

    @app.post(
        "/api/v1/sessions/{session_id}/reset",
        response_model=ActionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Start a new game in this session",
    )
    async def reset_game(session_id: str) -> Union[ActionResponse, JSONResponse]:
        return respond(api_service.reset_game(session_id), ActionResponse)

    # =========================================================================
    # Health Check
    # =========================================================================

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        return HealthResponse(
            status="healthy",
            service="bereal-engine",
            version=__version__,
        )

    @app.get("/", tags=["System"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "BeReal Engine API",
            "version": __version__,
            "environment": BEREAL_ENV,
            "docs": "/api/docs",
            "health": "/health",
        }

    logger.info("API created (env=%s)", BEREAL_ENV)
    return app


# For running directly: uvicorn bereal.api.app:app
app = create_app()
