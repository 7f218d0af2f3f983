import logging
import threading
from typing import Optional

from dice_duel.models import GameState
from .broadcast import Broadcaster
from .errors import GameError, GameFull
from .registry import SessionRegistry
from .resolver import RollOutcome, TurnResolver
from .state_machine import GameStateMachine

logger = logging.getLogger(__name__)


class GameCoordinator:
    """Single writer for one GameState.

    Each request runs validate, mutate and publish while holding ``_lock``,
    so broadcasts leave in exactly the order mutations were applied.
    Rejections are answered to the requester only.
    """

    def __init__(self, broadcaster: Broadcaster, rng=None, state: Optional[GameState] = None):
        self.state = state or GameState()
        self.broadcaster = broadcaster
        self.registry = SessionRegistry(self.state)
        self.machine = GameStateMachine(self.state, self.registry)
        self.resolver = TurnResolver(self.state, self.machine, rng=rng)
        self._lock = threading.Lock()

    # ---- snapshots ----

    def snapshot(self) -> dict:
        with self._lock:
            return self.state.to_dict()

    def _state_payload(self) -> dict:
        return {
            'players': self.state.players_dict(),
            'status': self.state.status,
            'currentTurn': self.state.current_turn,
        }

    def _reject(self, session_id: str, exc: GameError) -> None:
        logger.info(f"[reject] sid={session_id} code={exc.code}")
        if isinstance(exc, GameFull):
            self.broadcaster.send(session_id, 'game_full')
        else:
            self.broadcaster.send(session_id, 'error', exc.to_dict())

    # ---- inbound events ----

    def join(self, session_id: str, player_name) -> bool:
        with self._lock:
            try:
                self.registry.admit(session_id, player_name)
            except GameError as exc:
                self._reject(session_id, exc)
                return False
            self.broadcaster.broadcast('game_state_update', self._state_payload())
            if self.machine.start_if_ready():
                self.broadcaster.broadcast('game_start', {
                    'players': self.state.players_dict(),
                    'currentTurn': self.state.current_turn,
                })
            return True

    def roll(self, session_id: str) -> Optional[RollOutcome]:
        with self._lock:
            try:
                outcome = self.resolver.attempt_roll(session_id)
            except GameError as exc:
                self._reject(session_id, exc)
                return None
            self.broadcaster.broadcast('dice_rolled', outcome.to_dict())
            if outcome.ended_game:
                self.broadcaster.broadcast('game_end', {
                    'players': self.state.players_dict(),
                    'result': outcome.result,
                })
            else:
                self.broadcaster.broadcast('turn_change', {
                    'currentTurn': outcome.next_turn,
                    'players': self.state.players_dict(),
                })
            return outcome

    def new_game(self, session_id: Optional[str] = None) -> None:
        with self._lock:
            logger.info(f"[new_game] requested by sid={session_id}")
            self.machine.reset()
            self.broadcaster.broadcast('game_reset')

    def disconnect(self, session_id: str) -> bool:
        with self._lock:
            if not self.machine.handle_departure(session_id):
                return False
            self.broadcaster.broadcast('player_disconnected', {
                'playerId': session_id,
                'players': self.state.players_dict(),
                'status': self.state.status,
            })
            return True
