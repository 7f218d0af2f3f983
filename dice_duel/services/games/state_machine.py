import logging
from typing import Any, Dict, Optional

from dice_duel.models import GameState, STATUS_FINISHED, STATUS_PLAYING, STATUS_WAITING
from .registry import SessionRegistry
from .scoring import all_rolls_used, determine_result

logger = logging.getLogger(__name__)


class GameStateMachine:
    """Owns the status transitions of the authoritative GameState.

    waiting -> playing    when the second player is seated
    playing -> playing    turn advance after a non-final roll
    playing -> finished   when every player has used all rolls
    any     -> waiting    on reset, or when the last player disconnects
    """

    def __init__(self, state: GameState, registry: SessionRegistry):
        self.state = state
        self.registry = registry

    @property
    def is_playing(self) -> bool:
        return self.state.status == STATUS_PLAYING

    @property
    def match_seated(self) -> bool:
        return len(self.state.player_order) == self.state.max_players

    def start_if_ready(self) -> bool:
        if not self.match_seated:
            return False
        for pid in self.state.player_order:
            self.state.players[pid].reset()
        self.state.current_player_index = 0
        self.state.status = STATUS_PLAYING
        logger.info(f"[start] order={self.state.player_order} first={self.state.current_turn}")
        return True

    def advance_turn(self) -> Optional[str]:
        self.state.current_player_index = (self.state.current_player_index + 1) % len(self.state.player_order)
        logger.info(f"[turn] now={self.state.current_turn}")
        return self.state.current_turn

    def finish_if_done(self) -> Optional[Dict[str, Any]]:
        """Move to finished and return the result, or None while rolls remain."""
        if not all_rolls_used(self.state):
            return None
        self.state.status = STATUS_FINISHED
        result = determine_result(self.state)
        logger.info(f"[finish] result={result['type']}")
        return result

    def reset(self) -> None:
        self.state.clear()
        logger.info("[reset] game returned to waiting")

    def handle_departure(self, session_id: str) -> bool:
        """Remove a session; drains back to waiting once nobody is left.

        A sole survivor of a running match stays in ``playing``; no result
        is declared for an abandoned match.
        """
        if not self.registry.remove(session_id):
            return False
        if not self.state.player_order:
            self.state.clear()
        elif self.is_playing:
            logger.info(f"[abandoned] sid={session_id} left mid-match; survivor={self.state.current_turn}")
        return True
