from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)


def _coordinator():
    return current_app.extensions['wordrooms']


@main.route('/')
def index():
    return jsonify({
        'message': 'Welcome to the word rooms server!',
        'rooms': _coordinator().room_count(),
    })


@main.route('/rooms/<string:room_code>')
def room_state(room_code):
    snapshot = _coordinator().snapshot(room_code)
    if snapshot is None:
        return jsonify({'error': 'Room does not exist'}), 404
    return jsonify(snapshot)
