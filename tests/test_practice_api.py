"""
Tests for the practice JSON API, driven through the Flask test client with
the bundled content files.
"""


def _create(client, track='hebrew'):
    resp = client.post('/api/practice/sessions', json={'track': track})
    assert resp.status_code == 201
    return resp.get_json()['data']


def _session(app, session_id):
    return app.extensions['ulpan_sessions'].get(session_id)


def _correct_index(app, session_id):
    exercise = _session(app, session_id).controller.state.exercise
    return exercise.choices.index(exercise.question)


def test_list_tracks(client):
    resp = client.get('/api/practice/tracks')
    assert resp.status_code == 200
    names = [track['name'] for track in resp.get_json()['data']]
    assert names == ['hebrew', 'arabic', 'hard_english']


def test_create_session_starts_with_word_choice(client):
    data = _create(client)
    assert data['track'] == 'hebrew'
    assert data['phase'] == 'awaiting_answer'
    assert data['exercise_id'] == 1
    assert data['exercise']['kind'] == 'english_to_target'
    assert len(data['exercise']['options']) == 10
    assert data['stats'] == {'correct': 0, 'wrong': 0}


def test_missing_track_defaults_to_hebrew(client):
    resp = client.post('/api/practice/sessions')
    assert resp.status_code == 201
    assert resp.get_json()['data']['track'] == 'hebrew'


def test_unknown_track_is_rejected(client):
    resp = client.post('/api/practice/sessions', json={'track': 'klingon'})
    assert resp.status_code == 400
    body = resp.get_json()
    assert body['success'] is False
    assert body['code'] == 'VALIDATION_ERROR'


def test_unknown_session_is_404(client):
    resp = client.get('/api/practice/sessions/nope')
    assert resp.status_code == 404
    assert resp.get_json()['code'] == 'NOT_FOUND'


def test_correct_answer_then_advance_on_poll(app, client, clock):
    session_id = _create(client)['session_id']

    resp = client.post(
        f'/api/practice/sessions/{session_id}/answer',
        json={'option_index': _correct_index(app, session_id)},
    )
    body = resp.get_json()['data']
    assert body['accepted'] is True
    assert body['result']['is_correct'] is True
    assert body['session']['phase'] == 'answered'
    assert body['session']['feedback_message'] == 'Correct!'

    clock.advance(1.5)
    data = client.get(f'/api/practice/sessions/{session_id}').get_json()['data']
    assert data['exercise_id'] == 2
    assert data['exercise']['kind'] == 'target_to_english'
    assert data['stats'] == {'correct': 1, 'wrong': 0}


def test_answer_while_locked_is_not_evaluated(app, client):
    session_id = _create(client)['session_id']
    url = f'/api/practice/sessions/{session_id}/answer'
    index = _correct_index(app, session_id)

    client.post(url, json={'option_index': index})
    body = client.post(url, json={'option_index': index}).get_json()['data']
    assert body['accepted'] is False
    assert body['result'] is None
    assert body['session']['stats']['correct'] == 1


def test_malformed_answers_are_rejected(client):
    session_id = _create(client)['session_id']
    url = f'/api/practice/sessions/{session_id}/answer'

    assert client.post(url, json={}).status_code == 400
    assert client.post(url, json={'option_index': 99}).status_code == 400
    assert client.post(url, json={'option_index': '1'}).status_code == 400
    assert client.post(url, json={'tokens': 'a b'}).status_code == 400
    assert client.post(url, json={'text': 5}).status_code == 400
    assert client.post(url, json=[1, 2]).status_code == 400


def test_mismatched_payload_counts_as_wrong(client):
    session_id = _create(client)['session_id']
    body = client.post(
        f'/api/practice/sessions/{session_id}/answer', json={'text': 'שלום'}
    ).get_json()['data']
    assert body['accepted'] is True
    assert body['result']['is_correct'] is False
    assert body['session']['stats']['wrong'] == 1


def test_give_up_and_acknowledge(client):
    session_id = _create(client)['session_id']

    body = client.post(f'/api/practice/sessions/{session_id}/give-up').get_json()['data']
    assert body['accepted'] is True
    assert body['session']['phase'] == 'revealed'
    assert body['session']['reveal_answer'] is True
    assert body['session']['correct_answer']

    body = client.post(f'/api/practice/sessions/{session_id}/acknowledge').get_json()['data']
    assert body['accepted'] is True
    assert body['session']['exercise_id'] == 2
    assert body['session']['phase'] == 'awaiting_answer'


def test_acknowledge_without_reveal_is_refused(client):
    session_id = _create(client)['session_id']
    body = client.post(f'/api/practice/sessions/{session_id}/acknowledge').get_json()['data']
    assert body['accepted'] is False
    assert body['session']['exercise_id'] == 1


def test_delete_session(client):
    session_id = _create(client)['session_id']
    assert client.delete(f'/api/practice/sessions/{session_id}').status_code == 200
    assert client.get(f'/api/practice/sessions/{session_id}').status_code == 404
    assert client.delete(f'/api/practice/sessions/{session_id}').status_code == 404


def test_other_tracks(client):
    assert _create(client, 'hard_english')['exercise']['kind'] == 'definition_to_word'
    assert _create(client, 'arabic')['exercise']['kind'] in ('letter_to_sound', 'arabic_word_to_english')


def test_unknown_api_route_returns_json(client):
    resp = client.get('/api/practice/nothing-here')
    assert resp.status_code == 404
    assert resp.get_json()['code'] == 'NOT_FOUND'
