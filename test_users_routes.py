from datetime import datetime, timedelta, timezone

import jwt

from conftest import bearer


def test_register_and_duplicate(client):
    response = client.post('/api/users/register', json={
        'username': 'alice', 'email': 'Alice@Example.com', 'password': 'secret123', 'full_name': 'Alice Smith'
    })
    assert response.status_code == 201
    data = response.get_json()['data']
    assert data['token']
    assert data['user'] == {'id': data['user']['id'], 'username': 'alice',
                            'email': 'alice@example.com', 'full_name': 'Alice Smith'}

    response = client.post('/api/users/register', json={
        'username': 'alice2', 'email': 'alice@example.com', 'password': 'secret123'
    })
    assert response.status_code == 409
    assert response.get_json()['message'] == 'Username or email already exists'


def test_register_validation(client):
    response = client.post('/api/users/register', json={'username': 'a', 'email': 'bad', 'password': '1'})
    assert response.status_code == 400
    body = response.get_json()
    assert body['success'] is False
    assert len(body['errors']) == 3


def test_login(client, register):
    register('bob', password='hunter22')

    for identifier in ('bob', 'BOB@example.com'):
        response = client.post('/api/users/login', json={'username': identifier, 'password': 'hunter22'})
        assert response.status_code == 200, identifier
        assert response.get_json()['data']['user']['username'] == 'bob'

    response = client.post('/api/users/login', json={'username': 'bob', 'password': 'wrong-pass'})
    assert response.status_code == 401
    assert response.get_json()['message'] == 'Invalid credentials'

    response = client.post('/api/users/login', json={'username': 'nobody', 'password': 'whatever'})
    assert response.status_code == 401

    assert client.post('/api/users/login', json={}).status_code == 400


def test_profile_requires_token(client, register):
    response = client.get('/api/users/profile')
    assert response.status_code == 401
    assert response.get_json()['message'] == 'Access token required'

    response = client.get('/api/users/profile', headers=bearer('not-a-jwt'))
    assert response.get_json()['message'] == 'Invalid token'

    token, user = register()
    response = client.get('/api/users/profile', headers=bearer(token))
    assert response.status_code == 200
    data = response.get_json()['data']
    assert data['user']['username'] == user['username']
    assert data['favorites'] == []
    assert data['medical_info'] is None
    assert data['emergency_contacts'] == []


def test_expired_token_and_deleted_user(client, register):
    from app import app

    _, user = register()
    secret = app.config['JWT_SECRET']

    expired = jwt.encode(
        {'userId': user['id'], 'exp': datetime.now(timezone.utc) - timedelta(minutes=1)},
        secret, algorithm='HS256'
    )
    response = client.get('/api/users/profile', headers=bearer(expired))
    assert response.get_json()['message'] == 'Token expired'

    ghost = jwt.encode(
        {'userId': 9999, 'exp': datetime.now(timezone.utc) + timedelta(hours=1)},
        secret, algorithm='HS256'
    )
    response = client.get('/api/users/profile', headers=bearer(ghost))
    assert response.status_code == 401
    assert response.get_json()['message'] == 'User not found'


def test_admin_token_is_not_a_user_token(client, admin_token):
    response = client.get('/api/users/profile', headers=bearer(admin_token))
    assert response.status_code == 401
    assert response.get_json()['message'] == 'Invalid token'


def test_favorites_add_and_remove(client, user_token):
    headers = bearer(user_token)

    response = client.post('/api/users/favorites', json={'remedy_id': 'ginger-tea'}, headers=headers)
    assert response.status_code == 200
    assert response.get_json()['message'] == 'Added to favorites'

    response = client.post('/api/users/favorites', json={'remedy_id': 'ginger-tea'}, headers=headers)
    assert response.status_code == 409

    response = client.post('/api/users/favorites', json={'first_aid_id': 'choking'}, headers=headers)
    assert response.status_code == 200

    assert client.post('/api/users/favorites', json={}, headers=headers).status_code == 400
    response = client.post('/api/users/favorites', json={'remedy_id': 'ginger-tea', 'first_aid_id': 'choking'},
                           headers=headers)
    assert response.status_code == 400
    response = client.post('/api/users/favorites', json={'remedy_id': 'missing'}, headers=headers)
    assert response.status_code == 404

    favorites = client.get('/api/users/profile', headers=headers).get_json()['data']['favorites']
    assert [(f['type'], f['id']) for f in favorites] == [('first_aid', 'choking'), ('remedy', 'ginger-tea')]
    assert favorites[1]['rating'] == 4.9
    assert favorites[0]['rating'] is None

    response = client.delete('/api/users/favorites', json={'remedy_id': 'ginger-tea'}, headers=headers)
    assert response.status_code == 200
    response = client.delete('/api/users/favorites', json={'remedy_id': 'ginger-tea'}, headers=headers)
    assert response.status_code == 404
    assert response.get_json()['message'] == 'Favorite not found'


def test_favorites_are_per_user(client, register):
    alice_token, _ = register('alice')
    bob_token, _ = register('bob')

    client.post('/api/users/favorites', json={'remedy_id': 'ginger-tea'}, headers=bearer(alice_token))
    favorites = client.get('/api/users/profile', headers=bearer(bob_token)).get_json()['data']['favorites']
    assert favorites == []


def test_favorites_sync(client, user_token):
    headers = bearer(user_token)
    assert client.post('/api/favorites/sync', json={'favorites': []}).status_code == 401

    client.post('/api/users/favorites', json={'remedy_id': 'ginger-tea'}, headers=headers)
    response = client.post('/api/favorites/sync', headers=headers, json={'favorites': [
        {'remedy_id': 'honey-cough'},
        {'first_aid_id': 'burns'},
        {'remedy_id': 'missing'},
    ]})
    assert response.status_code == 200
    assert response.get_json()['data'] == {'inserted': 2, 'skipped': 1}

    favorites = client.get('/api/users/profile', headers=headers).get_json()['data']['favorites']
    assert sorted(f['id'] for f in favorites) == ['burns', 'honey-cough']

    response = client.post('/api/favorites/sync', headers=headers, json={'favorites': 'nope'})
    assert response.status_code == 400


def test_user_data_sync(client, user_token):
    headers = bearer(user_token)
    response = client.post('/api/users/sync', headers=headers, json={'data': {
        'full_name': 'Alice Liddell',
        'medical_info': {'blood_type': 'O-', 'allergies': ['penicillin']},
        'emergency_contacts': [
            {'name': 'Dad', 'phone': '555-0101', 'is_favorite': True},
            {'name': 'Broken'},
        ],
    }})
    assert response.status_code == 200
    applied = response.get_json()['data']
    assert applied['full_name'] == 'Alice Liddell'
    assert applied['medical_info'] == 'created'
    assert applied['emergency_contacts'] == {'inserted': 1, 'skipped': 1}

    profile = client.get('/api/users/profile', headers=headers).get_json()['data']
    assert profile['user']['full_name'] == 'Alice Liddell'
    assert profile['medical_info']['allergies'] == 'penicillin'
    assert [c['name'] for c in profile['emergency_contacts']] == ['Dad']

    response = client.post('/api/users/sync', headers=headers, json={'full_name': 'R2D2'})
    assert response.status_code == 400


def test_favorites_sync_skips_list_ids(client, user_token):
    response = client.post('/api/favorites/sync', headers=bearer(user_token), json={'favorites': [
        {'remedyId': 'ginger-tea'},
        {'remedyId': ['x']},
    ]})
    assert response.status_code == 200
    assert response.get_json()['data'] == {'inserted': 1, 'skipped': 1}


def test_register_race_returns_conflict(client, register, monkeypatch):
    register('alice')
    # Duplicate check misses, as when another request inserted in between
    monkeypatch.setattr('app.fetch_one', lambda *args, **kwargs: None)

    response = client.post('/api/users/register', json={
        'username': 'alice', 'email': 'alice@example.com', 'password': 'secret123'
    })
    assert response.status_code == 409
    assert response.get_json()['message'] == 'Username or email already exists'
