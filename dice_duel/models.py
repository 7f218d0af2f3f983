from typing import Dict, List, Optional

MAX_PLAYERS = 2
ROLLS_PER_PLAYER = 3

STATUS_WAITING = 'waiting'
STATUS_PLAYING = 'playing'
STATUS_FINISHED = 'finished'


class Player:
    __slots__ = ('id', 'name', 'turns_taken', 'total_score', 'dice_history')

    def __init__(self, player_id: str, name: str):
        self.id = player_id
        self.name = name
        self.turns_taken = 1
        self.total_score = 0
        self.dice_history: List[int] = []

    def reset(self) -> None:
        self.turns_taken = 1
        self.total_score = 0
        self.dice_history = []

    @property
    def has_rolls_left(self) -> bool:
        return self.turns_taken <= ROLLS_PER_PLAYER

    def record_roll(self, value: int) -> None:
        self.dice_history.append(value)
        self.total_score += value
        self.turns_taken += 1

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'turnsTaken': self.turns_taken,
            'totalScore': self.total_score,
            'diceHistory': list(self.dice_history),
        }


class GameState:
    """The single authoritative game instance.

    ``current_turn`` is derived from ``player_order`` and
    ``current_player_index``, never stored.
    """

    def __init__(self):
        self.players: Dict[str, Player] = {}
        self.player_order: List[str] = []
        self.current_player_index = 0
        self.status = STATUS_WAITING
        self.max_players = MAX_PLAYERS

    @property
    def current_turn(self) -> Optional[str]:
        if not self.player_order:
            return None
        return self.player_order[self.current_player_index % len(self.player_order)]

    @property
    def is_full(self) -> bool:
        return len(self.players) >= self.max_players

    def clear(self) -> None:
        self.players = {}
        self.player_order = []
        self.current_player_index = 0
        self.status = STATUS_WAITING

    def players_dict(self):
        return {pid: self.players[pid].to_dict() for pid in self.player_order if pid in self.players}

    def to_dict(self):
        return {
            'players': self.players_dict(),
            'status': self.status,
            'currentTurn': self.current_turn,
            'playerOrder': list(self.player_order),
            'maxPlayers': self.max_players,
        }
