"""
Session Manager - Creates and manages game sessions.

LIFECYCLE:
1. Client starts a session -> fresh board and hand (in-memory only)
2. During the game each input is one Action, applied by the session's
   Reducer under the session lock, so a transition is observed whole
3. Session ends (client quits, or stale cleanup) -> all state deleted

PERSISTENCE RULES:
- NO database for gameplay
- Game state is ephemeral (session-scoped only)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import logging
import threading
import time
import uuid

from ..engine_core.action import Action, ActionResult
from ..engine_core.config import GameConfig, DEFAULT_CONFIG
from ..engine_core.factory import CardFactory
from ..engine_core.reducer import Reducer
from ..engine_core.state import GameState

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """State of a game session."""
    ACTIVE = "active"  # Board not yet cleared
    GAME_OVER = "game_over"  # Board cleared, waiting for reset or end
    ENDED = "ended"  # Removed from the manager


@dataclass
class Session:
    """
    An ephemeral game session.

    Contains:
    - The reducer (with its own seeded card factory)
    - Current canonical game state
    - A lock serializing every entry point

    State is NOT persisted.
    """
    session_id: str
    reducer: Reducer
    game_state: GameState
    created_at: float
    random_seed: int | None = None

    state: SessionState = SessionState.ACTIVE
    last_result: ActionResult | None = None

    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def config(self) -> GameConfig:
        return self.reducer.config

    def is_active(self) -> bool:
        """Check if session is still playable."""
        return self.state in {SessionState.ACTIVE, SessionState.GAME_OVER}

    def dispatch(self, action: Action) -> ActionResult:
        """
        Apply one action atomically.

        The new state replaces the old one only if the reducer handled it.
        """
        with self._lock:
            result = self.reducer.apply(self.game_state, action)
            if result.success and result.new_state is not None:
                self.game_state = result.new_state
                self.state = SessionState.GAME_OVER if self.game_state.game_over else SessionState.ACTIVE
            self.last_result = result
            return result

    def select_card(self, card_id: str) -> ActionResult:
        return self.dispatch(Action.select_card(card_id))

    def toggle_stock_from_hand(self, card_id: str) -> ActionResult:
        return self.dispatch(Action.toggle_stock(card_id))

    def place_stock_back(self) -> ActionResult:
        return self.dispatch(Action.place_stock_back())

    def draw_next_batch(self) -> ActionResult:
        return self.dispatch(Action.draw_next_batch())

    def reset_game(self) -> ActionResult:
        return self.dispatch(Action.reset_game())


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions with their own factory and reducer
    - Track active sessions
    - Clean up finished sessions

    No persistence - sessions are in-memory only.
    """

    def __init__(self, config: GameConfig | None = None):
        self.config = config or DEFAULT_CONFIG
        self._sessions: dict[str, Session] = {}
        self._lock = threading.Lock()

    def create_session(
        self,
        random_seed: int | None = None,
        config: GameConfig | None = None,
    ) -> Session:
        """
        Create a new game session.

        Args:
            random_seed: Seed for a reproducible deal (random if None)
            config: Rule set (manager default if None)

        Returns:
            New Session with the initial board and hand dealt
        """
        session_id = str(uuid.uuid4())
        factory = CardFactory(config=config or self.config, seed=random_seed)
        reducer = Reducer(factory=factory)

        session = Session(
            session_id=session_id,
            reducer=reducer,
            game_state=reducer.new_game(),
            created_at=time.time(),
            random_seed=random_seed,
        )

        with self._lock:
            self._sessions[session_id] = session
        logger.info("Session %s created (seed=%s)", session_id, random_seed)
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str) -> bool:
        """
        End a session and drop it from memory.

        Returns False if the session did not exist.
        """
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if not session:
            return False
        session.state = SessionState.ENDED
        logger.info("Session %s ended after %d moves", session_id, session.game_state.moves)
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of active sessions."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> int:
        """
        End finished sessions older than max_age.

        Returns the number of sessions removed.
        """
        current_time = time.time()
        to_remove = [
            session_id
            for session_id, session in list(self._sessions.items())
            if current_time - session.created_at > max_age_seconds
            and session.state == SessionState.GAME_OVER
        ]

        for session_id in to_remove:
            self.end_session(session_id)
        return len(to_remove)
