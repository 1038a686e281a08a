def received_names(sio_client):
    return [message['name'] for message in sio_client.get_received()]


def test_join_game_sends_state(client, sio_client):
    game_id = client.post('/api/new_game').get_json()['game_id']
    sio_client.emit('join_game', {'game_id': game_id})
    received = sio_client.get_received()
    assert received[-1]['name'] == 'game_state'
    assert received[-1]['args'][0]['game_id'] == game_id


def test_join_unknown_game(sio_client):
    sio_client.emit('join_game', {'game_id': 'missing'})
    received = sio_client.get_received()
    assert received[-1]['name'] == 'error'


def test_key_events_are_broadcast_to_room(client, sio_client):
    game_id = client.post('/api/new_game').get_json()['game_id']
    sio_client.emit('join_game', {'game_id': game_id})
    sio_client.get_received()

    sio_client.emit('key', {'game_id': game_id, 'key': 'C'})
    received = sio_client.get_received()
    assert [message['name'] for message in received] == ['letter_added', 'game_state']
    assert received[0]['args'][0]['letter'] == 'C'

    for key in ['R', 'A', 'N', 'E']:
        sio_client.emit('key', {'game_id': game_id, 'key': key})
    sio_client.get_received()

    sio_client.emit('key', {'game_id': game_id, 'key': 'ENTER'})
    names = received_names(sio_client)
    assert names == ['guess_scored', 'keyboard_updated', 'game_over', 'stats_update', 'game_state']


def test_ignored_key_sends_nothing(client, sio_client):
    game_id = client.post('/api/new_game').get_json()['game_id']
    sio_client.emit('join_game', {'game_id': game_id})
    sio_client.get_received()

    sio_client.emit('key', {'game_id': game_id, 'key': 'BACKSPACE'})
    assert sio_client.get_received() == []


def test_key_requires_game(sio_client):
    sio_client.emit('key', {'key': 'A'})
    assert received_names(sio_client) == ['error']
