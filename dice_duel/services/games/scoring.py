from typing import Any, Dict, List

from dice_duel.models import GameState, ROLLS_PER_PLAYER


def all_rolls_used(state: GameState) -> bool:
    """True once every seated player has completed all of their rolls."""
    if not state.player_order:
        return False
    return all(state.players[pid].turns_taken > ROLLS_PER_PLAYER for pid in state.player_order)


def final_standings(state: GameState) -> List[Dict[str, Any]]:
    standings = [
        {
            'playerId': pid,
            'name': state.players[pid].name,
            'score': state.players[pid].total_score,
        }
        for pid in state.player_order
    ]
    # sorted() is stable, so join order breaks ties
    return sorted(standings, key=lambda s: s['score'], reverse=True)


def determine_result(state: GameState) -> Dict[str, Any]:
    """Rank the finished match.

    Equal top scores are a draw carrying both records; otherwise the higher
    score wins. With two players this is a single comparison.
    """
    standings = final_standings(state)
    if len(standings) < 2 or standings[0]['score'] == standings[1]['score']:
        return {'type': 'draw', 'players': standings}
    return {'type': 'winner', 'winner': standings[0], 'loser': standings[1]}
