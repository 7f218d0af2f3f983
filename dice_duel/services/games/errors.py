"""
Rejections raised by the game services.

Every rejection is a terminal no-op: it is reported back to the session
that made the request and never mutates state or reaches other sessions.

Hierarchy:
- GameError
  - JoinRejected: GameFull, EmptyName, AlreadyJoined
  - RollRejected: GameNotPlaying, MatchAbandoned, NotYourTurn, TurnLimitReached
"""


class GameError(Exception):
    code = 'game_error'
    message = 'Request rejected'

    def __init__(self, message=None):
        super().__init__(message or self.message)

    def to_dict(self):
        return {'code': self.code, 'message': str(self)}


class JoinRejected(GameError):
    code = 'join_rejected'


class GameFull(JoinRejected):
    code = 'game_full'
    message = 'The game already has two players'


class EmptyName(JoinRejected):
    code = 'empty_name'
    message = 'playerName is required'


class AlreadyJoined(JoinRejected):
    code = 'already_joined'
    message = 'You have already joined this game'


class RollRejected(GameError):
    code = 'roll_rejected'


class GameNotPlaying(RollRejected):
    code = 'game_not_playing'
    message = 'The game is not in progress'


class NotYourTurn(RollRejected):
    code = 'not_your_turn'
    message = 'It is not your turn'


class TurnLimitReached(RollRejected):
    code = 'turn_limit_reached'
    message = 'You have already used all of your rolls'


class MatchAbandoned(RollRejected):
    code = 'match_abandoned'
    message = 'Your opponent left; waiting for a new player to join'
