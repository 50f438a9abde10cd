# File: ulpan_app/modules/exercises/routes/api.py
# Practice JSON API - thin adapter between HTTP and the session controller.

from flask import current_app, jsonify, request

from .. import practice_bp as blueprint
from ....core.error_handlers import NotFoundError, ValidationError, success_response
from ..schemas import OrderedTokens, SelectedOption, TypedText
from ..tracks import DEFAULT_TRACK, get_track, list_tracks


def _registry():
    return current_app.extensions['ulpan_sessions']


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data


def _load_session(session_id):
    """Fetch a session and fire any feedback timers that are due."""
    session = _registry().get(session_id)
    if session is None:
        raise NotFoundError(f'Session {session_id} not found', resource='session')
    session.run_due()
    return session


def parse_answer(data: dict, options):
    """Map a request body onto an answer payload."""
    if 'option_index' in data:
        index = data['option_index']
        if isinstance(index, bool) or not isinstance(index, int):
            raise ValidationError('option_index must be an integer', {'option_index': index})
        if not 0 <= index < len(options):
            raise ValidationError('option_index out of range', {'option_index': index})
        return SelectedOption(options[index])

    if 'tokens' in data:
        tokens = data['tokens']
        if not isinstance(tokens, list) or not all(isinstance(t, str) for t in tokens):
            raise ValidationError('tokens must be a list of strings')
        return OrderedTokens(tokens)

    if 'text' in data:
        text = data['text']
        if not isinstance(text, str):
            raise ValidationError('text must be a string')
        return TypedText(text)

    raise ValidationError('Answer requires one of option_index, tokens or text')


@blueprint.route('/tracks', methods=['GET'])
def api_list_tracks():
    return jsonify(success_response([track.to_dict() for track in list_tracks()]))


@blueprint.route('/sessions', methods=['POST'])
def api_create_session():
    data = _json_body()
    track_name = data.get('track') or DEFAULT_TRACK
    track = get_track(track_name)
    if track is None:
        raise ValidationError(f'Unknown track: {track_name}', {'track': track_name})

    session = _registry().create(track)
    return jsonify(success_response(session.to_dict())), 201


@blueprint.route('/sessions/<session_id>', methods=['GET'])
def api_get_session(session_id):
    session = _load_session(session_id)
    return jsonify(success_response(session.to_dict()))


@blueprint.route('/sessions/<session_id>/answer', methods=['POST'])
def api_submit_answer(session_id):
    session = _load_session(session_id)
    controller = session.controller
    exercise = controller.state.exercise
    answer = parse_answer(_json_body(), exercise.options if exercise else ())

    result = controller.submit(answer)
    return jsonify(success_response({
        'accepted': result is not None,
        'result': result.to_dict() if result else None,
        'session': session.to_dict(),
    }))


@blueprint.route('/sessions/<session_id>/give-up', methods=['POST'])
def api_give_up(session_id):
    session = _load_session(session_id)
    accepted = session.controller.give_up()
    return jsonify(success_response({'accepted': accepted, 'session': session.to_dict()}))


@blueprint.route('/sessions/<session_id>/acknowledge', methods=['POST'])
def api_acknowledge(session_id):
    session = _load_session(session_id)
    accepted = session.controller.acknowledge() is not None
    return jsonify(success_response({'accepted': accepted, 'session': session.to_dict()}))


@blueprint.route('/sessions/<session_id>', methods=['DELETE'])
def api_delete_session(session_id):
    if not _registry().remove(session_id):
        raise NotFoundError(f'Session {session_id} not found', resource='session')
    return jsonify(success_response(message='Session closed'))
