"""
Tests for the JSON API using Flask's test client.
"""

import json

import pytest

from console_wordle import create_app
from console_wordle.config import BOARD_COLS, TestingConfig
from console_wordle.services.game_service import get_game_service, initialize_game_service
from console_wordle.utils.game_logger import game_logger


@pytest.fixture
def client(word_source, rng):
    initialize_game_service(word_source, rng=rng)
    app = create_app(TestingConfig)
    with app.test_client() as client:
        yield client


def start_game(client, secret="CRANE"):
    response = client.post('/api/new_game')
    assert response.status_code == 200
    game_id = response.get_json()['game_id']
    get_game_service().get_session(game_id).new_round(secret)
    return game_id


class TestGameApi:

    def test_new_game(self, client):
        response = client.post('/api/new_game')
        data = response.get_json()
        assert response.status_code == 200
        assert data['success']
        assert data['state']['answer'] is None
        assert data['state']['max_rounds'] == 6
        assert data['state']['status'] == 'IN_PROGRESS'

    def test_state(self, client):
        game_id = start_game(client)
        response = client.get(f'/api/game/{game_id}/state')
        assert response.status_code == 200
        assert response.get_json()['state']['guesses'] == []

    def test_unknown_game(self, client):
        assert client.get('/api/game/nope/state').status_code == 404
        assert client.post('/api/game/nope/guess', json={'guess': 'CRANE'}).status_code == 404
        assert client.get('/api/game/nope/stats').status_code == 404
        assert client.post('/api/game/nope/next_round').status_code == 404
        assert client.delete('/api/game/nope').status_code == 404

    def test_guess_required(self, client):
        game_id = start_game(client)
        response = client.post(f'/api/game/{game_id}/guess', json={})
        assert response.status_code == 400
        assert response.get_json()['error'] == 'Guess is required'

    @pytest.mark.parametrize("body", [['guess'], 'CRANE', 5])
    def test_guess_body_must_be_an_object(self, client, body):
        game_id = start_game(client)
        response = client.post(f'/api/game/{game_id}/guess', json=body)
        assert response.status_code == 400
        assert response.get_json()['error'] == 'Guess is required'

    def test_new_game_logs_board_width(self, client):
        client.post('/api/new_game')
        for handler in game_logger.logger.handlers:
            handler.flush()
        entries = [json.loads(line.split(' | ', 2)[2])
                   for line in game_logger._log_file().read_text(encoding='utf-8').splitlines()
                   if '"SERVER_RESPONSE"' in line and '"new_game"' in line]
        assert entries[-1]['details']['word_length'] == BOARD_COLS

    @pytest.mark.parametrize("guess,error", [
        ("CRAN", "Guess must be exactly 5 letters (got 4)"),
        ("CR4NE", "Guess must contain only letters"),
        ("ZZZZZ", "Word not in word list"),
    ])
    def test_invalid_guess(self, client, guess, error):
        game_id = start_game(client)
        response = client.post(f'/api/game/{game_id}/guess', json={'guess': guess})
        assert response.status_code == 400
        assert response.get_json()['error'] == error

    def test_play_round(self, client):
        game_id = start_game(client)

        response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'abide'})
        state = response.get_json()['state']
        assert state['current_round'] == 1
        assert state['guess_results'][0] == [['A', 'PRESENT'], ['B', 'ABSENT'], ['I', 'ABSENT'],
                                             ['D', 'ABSENT'], ['E', 'CORRECT']]
        assert state['letter_status']['E'] == 'CORRECT'
        assert state['answer'] is None

        response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'CRANE'})
        state = response.get_json()['state']
        assert state['won'] and state['game_over']
        assert state['answer'] == 'CRANE'

        response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'ABIDE'})
        assert response.status_code == 409
        assert response.get_json()['error'] == 'Game is already over'

    def test_next_round(self, client):
        game_id = start_game(client)
        assert client.post(f'/api/game/{game_id}/next_round').status_code == 409

        client.post(f'/api/game/{game_id}/guess', json={'guess': 'CRANE'})
        response = client.post(f'/api/game/{game_id}/next_round')
        assert response.status_code == 200
        assert response.get_json()['state']['guesses'] == []

    def test_stats(self, client):
        game_id = start_game(client)
        client.post(f'/api/game/{game_id}/guess', json={'guess': 'CRANE'})

        stats = client.get(f'/api/game/{game_id}/stats').get_json()['stats']
        assert stats['games_played'] == 1
        assert stats['guess_distribution'] == [1, 0, 0, 0, 0, 0]
        assert stats['win_percentage'] == 100.0

        stats = client.delete(f'/api/game/{game_id}/stats').get_json()['stats']
        assert stats['games_played'] == 0
        assert stats['win_percentage'] == 0.0

    def test_delete_game(self, client):
        game_id = start_game(client)
        assert client.delete(f'/api/game/{game_id}').get_json() == {'success': True}
        assert client.get(f'/api/game/{game_id}/state').status_code == 404

    def test_health(self, client):
        start_game(client)
        data = client.get('/api/health').get_json()
        assert data['status'] == 'healthy'
        assert data['active_games'] == 1
        assert data['accepted_words'] == 14
