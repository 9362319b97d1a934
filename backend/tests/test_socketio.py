def named(received, name):
    return [pkt['args'][0] if pkt['args'] else None for pkt in received if pkt['name'] == name]


def create_room(sio_client):
    sio_client.emit('createRoom')
    created = named(sio_client.get_received(), 'roomCreated')
    assert len(created) == 1
    return created[0]['roomCode'], created[0]['playerId']


def test_socket_connect(sio_client):
    assert sio_client.is_connected()


def test_create_room_replies_with_code(flask_app, sio_client):
    code, player_id = create_room(sio_client)

    assert len(code) == 4 and code.isalnum() and code == code.upper()
    assert player_id
    room = flask_app.extensions['wordrooms'].registry.get(code)
    assert [p.id for p in room.players] == [player_id]
    assert room.word_to_guess


def test_join_unknown_room_emits_error(sio_client):
    sio_client.emit('joinRoom', 'ZZZZ')
    received = sio_client.get_received()
    assert named(received, 'error') == [{'message': 'Room does not exist'}]


def test_join_with_malformed_payload_emits_error(sio_client):
    sio_client.emit('joinRoom', {'nothing': 'here'})
    assert named(sio_client.get_received(), 'error') == [{'message': 'Room does not exist'}]


def test_join_broadcasts_to_whole_room(make_client):
    host = make_client()
    guest = make_client()
    code, host_id = create_room(host)

    guest.emit('joinRoom', code.lower())

    guest_events = guest.get_received()
    joined = named(guest_events, 'roomJoined')
    assert joined[0]['roomCode'] == code
    guest_id = joined[0]['playerId']
    for received in (guest_events, host.get_received()):
        players = named(received, 'playerJoined')[0]['players']
        assert players == [{'id': host_id, 'ready': False}, {'id': guest_id, 'ready': False}]


def test_room_full_and_in_progress_errors(make_client):
    host = make_client()
    code, _ = create_room(host)
    others = [make_client() for _ in range(4)]
    for other in others[:3]:
        other.emit('joinRoom', code)
        other.get_received()

    others[3].emit('joinRoom', code)
    assert named(others[3].get_received(), 'error') == [{'message': 'Room is full'}]

    for client in [host] + others[:3]:
        client.emit('playerReady', {'roomCode': code})
    late = make_client()
    late.emit('joinRoom', code)
    assert named(late.get_received(), 'error') == [{'message': 'Game already in progress'}]


def test_full_game_scenario(flask_app, make_client):
    p1 = make_client()
    p2 = make_client()
    code, p1_id = create_room(p1)
    p2.emit('joinRoom', code)
    p2_id = named(p2.get_received(), 'roomJoined')[0]['playerId']
    p1.get_received()

    p1.emit('playerReady', {'roomCode': code})
    p1.get_received()
    first = p2.get_received()
    assert named(first, 'gameStart') == []
    assert named(first, 'playerReadyUpdate')[0]['players'][0] == {'id': p1_id, 'ready': True}

    p2.emit('playerReady', {'roomCode': code})
    received = p1.get_received()
    assert [pkt['name'] for pkt in received] == ['playerReadyUpdate', 'gameStart']
    word = named(received, 'gameStart')[0]['wordToGuess']
    assert word == flask_app.extensions['wordrooms'].registry.get(code).word_to_guess
    p2.get_received()

    p1.emit('playerMove', {'roomCode': code, 'row': 0, 'text': 'CRANE', 'status': ['absent'] * 5})
    assert named(p1.get_received(), 'opponentMove') == []
    assert named(p2.get_received(), 'opponentMove') == [
        {'playerId': p1_id, 'row': 0, 'text': 'CRANE', 'status': ['absent'] * 5},
    ]

    p1.emit('playerWin', {'roomCode': code})
    received = p2.get_received()
    assert [pkt['name'] for pkt in received] == ['roundComplete', 'newRound']
    complete = named(received, 'roundComplete')[0]
    assert complete == {'winner': p1_id, 'scores': {p1_id: 1, p2_id: 0}, 'wordToGuess': word}
    assert named(received, 'newRound')[0]['wordToGuess']
    room = flask_app.extensions['wordrooms'].registry.get(code)
    assert [p.ready for p in room.players] == [False, False]
    p1.get_received()

    p2.disconnect()
    assert named(p1.get_received(), 'playerLeft') == [{'players': [{'id': p1_id, 'ready': False}]}]
    assert room.scores == {p1_id: 1}

    p1.emit('leaveRoom', code)
    assert flask_app.extensions['wordrooms'].registry.get(code) is None
    assert p1.get_received() == []


def test_events_for_unknown_room_are_silent(sio_client):
    sio_client.emit('playerReady', {'roomCode': 'NOPE'})
    sio_client.emit('playerMove', {'roomCode': 'NOPE', 'row': 1})
    sio_client.emit('playerWin', {})
    sio_client.emit('playerReady', 'not-a-dict')
    sio_client.emit('leaveRoom', 'NOPE')
    assert sio_client.get_received() == []


def test_disconnect_without_room_is_harmless(flask_app, make_client):
    watcher = make_client()
    code, _ = create_room(watcher)
    idle = make_client()
    idle.disconnect()
    assert watcher.get_received() == []
    assert flask_app.extensions['wordrooms'].room_count() == 1
    assert flask_app.extensions['wordrooms'].registry.get(code) is not None


def test_left_player_stops_receiving_room_traffic(make_client):
    p1 = make_client()
    p2 = make_client()
    code, _ = create_room(p1)
    p2.emit('joinRoom', code)
    p2.emit('leaveRoom', {'roomCode': code})
    p2.get_received()
    p1.get_received()

    p1.emit('playerReady', {'roomCode': code})
    assert p2.get_received() == []
    assert named(p1.get_received(), 'playerReadyUpdate')
