def _post(client, player, score, game):
    return client.post('/api/scores', json={'player': player, 'score': score, 'game': game})


def test_index(client):
    res = client.get('/')
    assert res.status_code == 200
    assert 'message' in res.get_json()


def test_submit_new_score(client):
    res = _post(client, 'Alice', 120, 'snake')
    assert res.status_code == 201
    data = res.get_json()
    assert data['message'] == 'Score enregistré !'
    assert data['player']['playerName'] == 'Alice'
    assert data['player']['gameName'] == 'snake'
    assert data['player']['score'] == 120


def test_legacy_field_names_accepted(client):
    res = client.post('/api/scores', json={'playerName': 'Alice', 'score': 5, 'gameName': 'pong'})
    assert res.status_code == 201


def test_player_name_trimmed_and_truncated(client):
    res = _post(client, '   AVeryLongPlayerNameIndeed  ', 10, 'snake')
    assert res.status_code == 201
    assert res.get_json()['player']['playerName'] == 'AVeryLongPlayer'


def test_invalid_payloads_rejected(client):
    assert _post(client, 'Al', 10, 'snake').status_code == 400
    assert _post(client, '  Al  ', 10, 'snake').status_code == 400
    assert _post(client, 'Alice', '10', 'snake').status_code == 400
    assert _post(client, 'Alice', True, 'snake').status_code == 400
    assert _post(client, 'Alice', 10, '').status_code == 400
    res = client.post('/api/scores', data='not json', content_type='text/plain')
    assert res.status_code == 400
    assert 'pseudo' in res.get_json()['message']


def test_non_finite_scores_rejected(client):
    for raw in ("Infinity", "-Infinity", "NaN", "1" + "0" * 400):
        body = '{"player": "Alice", "score": ' + raw + ', "game": "snake"}'
        res = client.post('/api/scores', data=body, content_type='application/json')
        assert res.status_code == 400, raw
        assert 'pseudo' in res.get_json()['message']
    assert client.get('/api/scores/snake').get_json() == []


def test_higher_score_replaces_best(client):
    _post(client, 'Alice', 100, 'snake')
    res = _post(client, 'Alice', 150, 'snake')
    assert res.status_code == 200
    assert res.get_json()['message'] == 'Meilleur score mis à jour !'
    assert res.get_json()['player']['score'] == 150

    res = _post(client, 'Alice', 120, 'snake')
    assert res.status_code == 200
    assert res.get_json()['message'] == "Le score n'a pas dépassé le record."
    board = client.get('/api/scores/snake').get_json()
    assert [row['score'] for row in board] == [150]


def test_lower_is_better_game(client):
    _post(client, 'Alice', 300, 'reflex')
    res = _post(client, 'Alice', 250, 'reflex')
    assert res.get_json()['message'] == 'Meilleur score mis à jour !'
    res = _post(client, 'Alice', 400, 'reflex')
    assert res.get_json()['message'] == "Le score n'a pas dépassé le record."

    _post(client, 'Bobby', 180, 'reflex')
    _post(client, 'Carla', 900, 'reflex')
    board = client.get('/api/scores/reflex').get_json()
    assert [(row['playerName'], row['score']) for row in board] == [
        ('Bobby', 180), ('Alice', 250), ('Carla', 900),
    ]


def test_leaderboard_order_limit_and_filter(client):
    for i in range(12):
        _post(client, f'player{i:02d}', i * 10, 'tetris')
    _post(client, 'negative', -5, 'tetris')
    _post(client, 'other', 999, 'pong')

    board = client.get('/api/scores/tetris').get_json()
    assert len(board) == 10
    scores = [row['score'] for row in board]
    assert scores == sorted(scores, reverse=True)
    assert scores[0] == 110
    assert all(s > 0 for s in scores)
    assert all(row['gameName'] == 'tetris' for row in board)


def test_unknown_game_leaderboard_is_empty(client):
    res = client.get('/api/scores/nothing-here')
    assert res.status_code == 200
    assert res.get_json() == []


def test_static_root_serves_assets(flask_app, tmp_path):
    (tmp_path / 'index.html').write_text('<h1>ArcadeHub</h1>')
    (tmp_path / 'style.css').write_text('body {}')
    flask_app.config['STATIC_ROOT'] = str(tmp_path)
    client = flask_app.test_client()
    assert b'ArcadeHub' in client.get('/').data
    assert client.get('/style.css').status_code == 200
    assert client.get('/missing.js').status_code == 404
