from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)


def _coordinator():
    return current_app.extensions['dice_duel']


@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the dice duel server!'})


@main.route('/health')
def health():
    snapshot = _coordinator().snapshot()
    return jsonify({
        'status': 'healthy',
        'players': len(snapshot['playerOrder']),
        'gameStatus': snapshot['status'],
    })


@main.route('/api/game/state', methods=['GET'])
def get_game_state():
    """
    Returns the full authoritative game snapshot.
    """
    return jsonify(_coordinator().snapshot())
