"""Tests for the HTTP game endpoints."""

import pytest

from wordle_app.config.game_settings import TARGET_WORDS
from wordle_app.services.game_service import get_game_service
from wordle_app.services.word_source import ListWordSource, index_selector


def new_game(client, **payload):
    response = client.post('/api/new_game', json=payload)
    assert response.status_code == 200
    return response.get_json()


@pytest.fixture
def daily_game(client):
    """A game for 2022-01-01, whose secret is the first target word."""
    return new_game(client, day="2022-01-01")['game_id']


def non_matching_word():
    return next(word for word in TARGET_WORDS if word != TARGET_WORDS[0])


class TestNewGame:
    """Tests for POST /api/new_game."""

    def test_creates_game(self, client):
        data = new_game(client)
        assert data['success']
        assert data['game_id']
        assert data['state']['outcome'] == 'in-progress'
        assert data['state']['answer'] is None

    def test_rejects_bad_day(self, client):
        response = client.post('/api/new_game', json={'day': 'yesterday'})
        assert response.status_code == 400
        assert not response.get_json()['success']

    def test_rejects_day_before_epoch(self, client):
        response = client.post('/api/new_game', json={'day': '2021-06-01'})
        assert response.status_code == 400

    def test_rejects_non_integer_seed(self, client):
        response = client.post('/api/new_game', json={'seed': 'abc'})
        assert response.status_code == 400

    @pytest.mark.parametrize("payload", [{'seed': True}, {'seed': 1.5}])
    def test_rejects_non_integer_seed_types(self, client, payload):
        assert client.post('/api/new_game', json=payload).status_code == 400

    @pytest.mark.parametrize("flag", ["false", "true", 0, 1, None])
    def test_rejects_non_boolean_auto_settle(self, client, flag):
        response = client.post('/api/new_game', json={'day': '2022-01-01', 'auto_settle': flag})
        assert response.status_code == 400
        assert response.get_json()['error'] == 'auto_settle must be a boolean'

    def test_auto_settle_skips_reveal_lock(self, client):
        game_id = new_game(client, day='2022-01-01', auto_settle=True)['game_id']
        for key in non_matching_word() + '\n':
            client.post(f'/api/game/{game_id}/key', json={'key': 'Enter' if key == '\n' else key})

        state = client.get(f'/api/game/{game_id}/state').get_json()['state']
        assert state['phase'] == 'awaiting-input'
        assert state['accepting_input']


class TestKeyPresses:
    """Tests for POST /api/game/<id>/key and /settle."""

    def press(self, client, game_id, key):
        return client.post(f'/api/game/{game_id}/key', json={'key': key})

    def test_letters_fill_current_row(self, client, daily_game):
        self.press(client, daily_game, 'a')
        response = self.press(client, daily_game, 'B')

        data = response.get_json()
        assert data['success']
        assert data['events'] == []
        row = data['state']['board'][0]
        assert [cell['letter'] for cell in row] == ['a', 'b', None, None, None]
        assert row[0]['status'] == 'active'

    def test_backspace_deletes(self, client, daily_game):
        self.press(client, daily_game, 'a')
        data = self.press(client, daily_game, 'Backspace').get_json()
        assert data['state']['board'][0][0] == {'letter': None, 'status': 'empty'}

    def test_enter_on_partial_row(self, client, daily_game):
        for key in 'abc':
            self.press(client, daily_game, key)
        data = self.press(client, daily_game, 'Enter').get_json()

        assert [event['type'] for event in data['events']] == ['incomplete_guess']
        assert data['events'][0]['hints']['alert'] == 'Not enough letters'
        assert [cell['letter'] for cell in data['state']['board'][0]][:3] == ['a', 'b', 'c']

    def test_unsupported_key(self, client, daily_game):
        response = self.press(client, daily_game, 'Shift')
        assert response.status_code == 400

    def test_missing_key(self, client, daily_game):
        response = client.post(f'/api/game/{daily_game}/key', json={})
        assert response.status_code == 400

    def test_unknown_game(self, client):
        response = self.press(client, 'missing', 'a')
        assert response.status_code == 404

    def test_reveal_blocks_input_until_settled(self, client, daily_game):
        for key in non_matching_word():
            self.press(client, daily_game, key)
        data = self.press(client, daily_game, 'Enter').get_json()

        types = [event['type'] for event in data['events']]
        assert types == ['cell_evaluated'] * 5 + ['row_complete']
        assert [event['hints']['delay_ms'] for event in data['events'][:5]] == [0, 250, 500, 750, 1000]
        assert data['state']['phase'] == 'evaluating'
        assert not data['state']['accepting_input']

        data = self.press(client, daily_game, 'a').get_json()
        assert all(cell['letter'] is None for cell in data['state']['board'][1])

        response = client.post(f'/api/game/{daily_game}/settle')
        assert response.get_json()['state']['accepting_input']

        data = self.press(client, daily_game, 'a').get_json()
        assert data['state']['board'][1][0]['letter'] == 'a'

    def test_settle_unknown_game(self, client):
        assert client.post('/api/game/missing/settle').status_code == 404


class TestGuess:
    """Tests for POST /api/game/<id>/guess."""

    def guess(self, client, game_id, word):
        return client.post(f'/api/game/{game_id}/guess', json={'guess': word})

    def test_winning_guess(self, client, daily_game):
        data = self.guess(client, daily_game, TARGET_WORDS[0].upper()).get_json()

        assert data['success']
        assert data['events'][-1]['type'] == 'won'
        assert data['events'][-1]['hints']['alert'] == 'You Win'
        assert data['state']['won']
        assert data['state']['answer'] == TARGET_WORDS[0]

    def test_unknown_word(self, client, daily_game):
        data = self.guess(client, daily_game, 'zzzzz').get_json()
        assert [event['type'] for event in data['events']] == ['invalid_word']
        assert data['state']['guesses'] == []

    @pytest.mark.parametrize("word", ["abc", "abcdef", "ab1de", 12345])
    def test_malformed_guess(self, client, daily_game, word):
        assert self.guess(client, daily_game, word).status_code == 400

    def test_missing_guess(self, client, daily_game):
        response = client.post(f'/api/game/{daily_game}/guess', json={})
        assert response.status_code == 400

    def test_guess_length_follows_game(self, client):
        source = ListWordSource(dictionary=["planet", "orange"], target_words=["planet"],
                                selector=index_selector(0), word_length=6)
        game_id = get_game_service().create_new_game(word_source=source)

        response = self.guess(client, game_id, 'crane')
        assert response.status_code == 400
        assert response.get_json()['error'] == 'Guess must be exactly 6 letters'

        data = self.guess(client, game_id, 'planet').get_json()
        assert data['state']['won']

    def test_guess_unknown_game(self, client):
        assert self.guess(client, 'missing', 'crane').status_code == 404

    def test_running_out_of_attempts(self, client, daily_game):
        misses = [word for word in TARGET_WORDS if word != TARGET_WORDS[0]][:6]
        for word in misses:
            data = self.guess(client, daily_game, word).get_json()

        assert data['events'][-1]['type'] == 'lost'
        assert data['events'][-1]['hints']['alert'] == TARGET_WORDS[0].upper()
        assert data['state']['outcome'] == 'lost'
        assert data['state']['answer'] == TARGET_WORDS[0]


class TestStateAndDelete:
    """Tests for state, delete and health endpoints."""

    def test_get_state(self, client, daily_game):
        response = client.get(f'/api/game/{daily_game}/state')
        assert response.status_code == 200
        assert response.get_json()['state']['game_id'] == daily_game

    def test_get_state_unknown(self, client):
        assert client.get('/api/game/missing/state').status_code == 404

    def test_delete(self, client, daily_game):
        assert client.delete(f'/api/game/{daily_game}').status_code == 200
        assert client.get(f'/api/game/{daily_game}/state').status_code == 404
        assert client.delete(f'/api/game/{daily_game}').status_code == 404

    def test_health(self, client, daily_game):
        data = client.get('/api/health').get_json()
        assert data['status'] == 'healthy'
        assert data['active_games'] == 1
