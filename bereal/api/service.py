"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to engine actions
2. Manages sessions
3. Formats engine state for clients

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Callable

from .schemas import (
    # Requests
    CreateSessionRequest,
    # Responses
    ActionResponse,
    GameStateResponse,
    ErrorResponse,
    # Shared
    CardInfo,
    SelectionInfo,
    # Enums
    CardKind,
    ErrorCode,
    Notice,
    SessionStatus,
)
from ..engine_core.action import ActionResult
from ..engine_core.cards import Card, CardKind as EngineCardKind
from ..engine_core.state import GameState
from ..session import Session, SessionManager


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()

        state = service.create_session(CreateSessionRequest(random_seed=7))
        response = service.select_card(state.session_id, card_id)
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    def create_session(self, request: CreateSessionRequest) -> GameStateResponse:
        """Create a new game session and return its initial state."""
        config = replace(
            self.session_manager.config,
            allow_board_first_operand=request.allow_board_first_operand,
        )
        session = self.session_manager.create_session(
            random_seed=request.random_seed,
            config=config,
        )
        return self._state_to_response(session)

    def get_game_state(self, session_id: str) -> GameStateResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._session_not_found(session_id)
        return self._state_to_response(session)

    def end_session(self, session_id: str) -> bool:
        return self.session_manager.end_session(session_id)

    def list_sessions(self) -> list[str]:
        return self.session_manager.list_active_sessions()

    # =========================================================================
    # Player inputs
    # =========================================================================

    def select_card(self, session_id: str, card_id: str) -> ActionResponse | ErrorResponse:
        return self._run(session_id, lambda s: s.select_card(card_id))

    def toggle_stock(self, session_id: str, card_id: str) -> ActionResponse | ErrorResponse:
        return self._run(session_id, lambda s: s.toggle_stock_from_hand(card_id))

    def place_stock_back(self, session_id: str) -> ActionResponse | ErrorResponse:
        return self._run(session_id, lambda s: s.place_stock_back())

    def draw_next_batch(self, session_id: str) -> ActionResponse | ErrorResponse:
        return self._run(session_id, lambda s: s.draw_next_batch())

    def reset_game(self, session_id: str) -> ActionResponse | ErrorResponse:
        return self._run(session_id, lambda s: s.reset_game())

    def _run(
        self,
        session_id: str,
        step: Callable[[Session], ActionResult],
    ) -> ActionResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._session_not_found(session_id)

        result = step(session)
        if not result.success:
            return ErrorResponse(
                error=result.error or "Action failed",
                error_code=ErrorCode.ENGINE_ERROR,
                details={"engine_error_code": result.error_code},
            )

        return ActionResponse(
            session_id=session_id,
            success=result.success,
            applied=result.applied,
            notice=Notice(result.notice.value) if result.notice else None,
            changes=result.state_changes,
            game_state=self._state_to_response(session, result.new_state),
        )

    # =========================================================================
    # Conversion helpers
    # =========================================================================

    @staticmethod
    def _session_not_found(session_id: str) -> ErrorResponse:
        return ErrorResponse(
            error=f"Session {session_id} not found",
            error_code=ErrorCode.SESSION_NOT_FOUND,
        )

    def _state_to_response(
        self,
        session: Session,
        state: GameState | None = None,
    ) -> GameStateResponse:
        """Render a state of the session; the current one if state is None."""
        if state is None:
            state = session.game_state
            status = SessionStatus(session.state.value)
        else:
            status = SessionStatus.GAME_OVER if state.game_over else SessionStatus.ACTIVE
        return GameStateResponse(
            session_id=session.session_id,
            status=status,
            board=[card_to_info(c) for c in state.board],
            hand=[card_to_info(c) for c in state.hand],
            stock=card_to_info(state.stock) if state.stock else None,
            selection=SelectionInfo(
                operator=card_to_info(state.selected_operator) if state.selected_operator else None,
                targets=list(state.selected_targets),
            ),
            moves=state.moves,
            total_removed=state.total_removed,
            remaining=state.remaining,
            game_over=state.game_over,
        )


def card_to_info(card: Card) -> CardInfo:
    """Convert an engine card to its API model."""
    if card.kind == EngineCardKind.COMPLEX:
        return CardInfo(
            card_id=card.id,
            kind=CardKind.COMPLEX,
            label=card.label,
            a=card.a,
            b=card.b,
        )
    return CardInfo(
        card_id=card.id,
        kind=CardKind(card.kind.value),
        label=card.label,
        op=card.op.value,
    )
