import json
import random

import click

from dice_duel.models import STATUS_FINISHED
from dice_duel.services.games import GameCoordinator, RecordingBroadcaster


class EchoBroadcaster(RecordingBroadcaster):
    def broadcast(self, event, payload=None):
        super().broadcast(event, payload)
        click.echo(f"-> all   {event} {json.dumps(payload) if payload is not None else ''}")

    def send(self, session_id, event, payload=None):
        super().send(session_id, event, payload)
        click.echo(f"-> {session_id} {event} {json.dumps(payload) if payload is not None else ''}")


def play_match(coordinator: GameCoordinator, first: str, second: str) -> dict:
    """Seat two in-process sessions and roll for whoever holds the turn until the match ends."""
    coordinator.join('sid-1', first)
    coordinator.join('sid-2', second)
    while coordinator.state.status != STATUS_FINISHED:
        outcome = coordinator.roll(coordinator.state.current_turn)
        if outcome is None:
            raise click.ClickException('roll was rejected during simulation')
        if outcome.ended_game:
            return outcome.result
    raise click.ClickException('match finished without a result')


@click.command('simulate-match')
@click.option('--seed', type=int, default=None, help='Seed for a reproducible dice sequence.')
@click.option('--first', default='Alice', show_default=True, help='Name of the first player to join.')
@click.option('--second', default='Bob', show_default=True, help='Name of the second player to join.')
def simulate_match_command(seed, first, second):
    """Plays one complete match in-process and prints every broadcast."""
    coordinator = GameCoordinator(EchoBroadcaster(), rng=random.Random(seed))
    result = play_match(coordinator, first, second)
    if result['type'] == 'draw':
        click.echo(f"Draw at {result['players'][0]['score']} points")
    else:
        click.echo(f"{result['winner']['name']} wins {result['winner']['score']} to {result['loser']['score']}")
