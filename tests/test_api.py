def test_index(client):
    res = client.get('/')
    assert res.status_code == 200
    assert 'message' in res.get_json()


def test_health_reports_empty_game(client):
    res = client.get('/health')
    assert res.status_code == 200
    assert res.get_json() == {'status': 'healthy', 'players': 0, 'gameStatus': 'waiting'}


def test_state_reflects_joins(flask_app, client):
    coordinator = flask_app.extensions['dice_duel']
    coordinator.join('sid-a', 'Alice')
    state = client.get('/api/game/state').get_json()
    assert state['status'] == 'waiting'
    assert state['playerOrder'] == ['sid-a']
    assert state['maxPlayers'] == 2
    assert state['players']['sid-a']['name'] == 'Alice'

    coordinator.join('sid-b', 'Bob')
    coordinator.roll('sid-a')
    state = client.get('/api/game/state').get_json()
    assert state['status'] == 'playing'
    assert state['currentTurn'] == 'sid-b'
    assert state['players']['sid-a']['diceHistory'] == [6]
    assert client.get('/health').get_json()['players'] == 2


def test_cors_headers_present(client):
    res = client.get('/api/game/state', headers={'Origin': 'http://example.com'})
    assert res.headers.get('Access-Control-Allow-Origin') == '*'


def test_cors_echoes_listed_origin(dice):
    from dice_duel import create_app
    from conftest import TestConfig

    class ListedOrigins(TestConfig):
        CORS_ALLOWED_ORIGINS = 'http://localhost:5173, http://127.0.0.1:5173'

    restricted = create_app(ListedOrigins, rng=dice).test_client()
    res = restricted.get('/api/game/state', headers={'Origin': 'http://localhost:5173'})
    assert res.headers.get('Access-Control-Allow-Origin') == 'http://localhost:5173'
    res = restricted.get('/api/game/state', headers={'Origin': 'http://example.com'})
    assert res.headers.get('Access-Control-Allow-Origin') is None
