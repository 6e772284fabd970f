"""
Win Detector - Latches game_over once the board is cleared.
"""

from __future__ import annotations
import logging

from .state import GameState

logger = logging.getLogger(__name__)


class WinDetector:
    """Re-evaluated after every board mutation."""

    def check(self, state: GameState) -> GameState:
        if state.game_over or state.board:
            return state
        logger.info("Game over! All cleared in %d moves.", state.moves)
        return state._copy_with(game_over=True)
