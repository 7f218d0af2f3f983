import logging

from dice_duel.models import GameState, Player
from .errors import AlreadyJoined, EmptyName, GameFull

logger = logging.getLogger(__name__)


def normalize_name(raw) -> str:
    if not isinstance(raw, str):
        raise EmptyName()
    name = raw.strip()
    if not name:
        raise EmptyName()
    return name


class SessionRegistry:
    """Seats sessions into the game in join order.

    Join order is turn order, and decides which slot ("first" or "second")
    a player occupies.
    """

    def __init__(self, state: GameState):
        self.state = state

    def admit(self, session_id: str, display_name) -> Player:
        name = normalize_name(display_name)
        if session_id in self.state.players:
            raise AlreadyJoined()
        if self.state.is_full:
            raise GameFull()
        player = Player(session_id, name)
        self.state.players[session_id] = player
        self.state.player_order.append(session_id)
        logger.info(f"[admit] sid={session_id} name={name} slot={len(self.state.player_order)}")
        return player

    def remove(self, session_id: str) -> bool:
        """Drop a session. Returns False when it was not seated."""
        player = self.state.players.pop(session_id, None)
        if session_id not in self.state.player_order:
            return player is not None
        idx = self.state.player_order.index(session_id)
        self.state.player_order.remove(session_id)
        # Keep the turn pointer on the same player, or wrap onto the next one
        if idx < self.state.current_player_index:
            self.state.current_player_index -= 1
        if self.state.player_order:
            self.state.current_player_index %= len(self.state.player_order)
        else:
            self.state.current_player_index = 0
        logger.info(f"[remove] sid={session_id} remaining={len(self.state.player_order)}")
        return True

