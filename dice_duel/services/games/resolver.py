import logging
import random
from typing import Any, Dict, Optional

from dice_duel.models import GameState
from .errors import GameNotPlaying, MatchAbandoned, NotYourTurn, TurnLimitReached
from .state_machine import GameStateMachine

logger = logging.getLogger(__name__)

DIE_FACES = 6


class RollOutcome:
    __slots__ = ('player_id', 'player_name', 'dice_value', 'new_total_score', 'turns_taken_after',
                 'next_turn', 'result')

    def __init__(self, player_id, player_name, dice_value, new_total_score, turns_taken_after,
                 next_turn=None, result=None):
        self.player_id = player_id
        self.player_name = player_name
        self.dice_value = dice_value
        self.new_total_score = new_total_score
        self.turns_taken_after = turns_taken_after
        self.next_turn = next_turn
        self.result = result

    @property
    def ended_game(self) -> bool:
        return self.result is not None

    def to_dict(self):
        return {
            'playerId': self.player_id,
            'playerName': self.player_name,
            'diceResult': self.dice_value,
            'totalScore': self.new_total_score,
            'turnsTakenAfter': self.turns_taken_after,
        }


class TurnResolver:
    def __init__(self, state: GameState, machine: GameStateMachine, rng: Optional[random.Random] = None):
        self.state = state
        self.machine = machine
        self.rng = rng or random.Random()

    def validate(self, requester_id: str) -> None:
        if not self.machine.is_playing:
            raise GameNotPlaying()
        if not self.machine.match_seated:
            raise MatchAbandoned()
        if requester_id != self.state.current_turn:
            raise NotYourTurn()
        if not self.state.players[requester_id].has_rolls_left:
            raise TurnLimitReached()

    def roll_die(self) -> int:
        return self.rng.randint(1, DIE_FACES)

    def attempt_roll(self, requester_id: str) -> RollOutcome:
        """Resolve one roll for ``requester_id``.

        Raises a RollRejected subclass, leaving state untouched, when the
        request is not allowed. Otherwise records the value, then either ends
        the match or passes the turn on.
        """
        self.validate(requester_id)
        player = self.state.players[requester_id]
        value = self.roll_die()
        player.record_roll(value)
        logger.info(f"[roll] sid={requester_id} name={player.name} value={value} "
                    f"total={player.total_score} turns={player.turns_taken}")
        outcome = RollOutcome(requester_id, player.name, value, player.total_score, player.turns_taken)
        outcome.result = self.machine.finish_if_done()
        if outcome.result is None:
            outcome.next_turn = self.machine.advance_turn()
        return outcome
