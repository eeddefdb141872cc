from conftest import bearer
from seed_data import all_remedies


NEW_REMEDY = {
    'title': 'Lemon Water',
    'description': 'Warm lemon water in the morning',
    'category': 'Hydration',
    'difficulty': 'easy',
    'prep_time': '2 minutes',
    'ingredients': ['1 lemon', '1 cup warm water'],
    'instructions': ['Squeeze lemon', 'Stir into water'],
}


def test_admin_login(client, admin_token):
    assert client.post('/api/admin/login', json={}).status_code == 400
    response = client.post('/api/admin/login', json={'username': 'admin', 'password': 'wrong'})
    assert response.status_code == 401

    response = client.post('/api/admin/login', json={'username': 'admin@healthhub.com', 'password': 'adminpass'})
    assert response.status_code == 200
    assert response.get_json()['data']['admin']['role'] == 'super_admin'


def test_admin_routes_reject_users(client, user_token):
    assert client.get('/api/admin/dashboard').status_code == 401
    response = client.get('/api/admin/dashboard', headers=bearer(user_token))
    assert response.status_code == 401
    assert response.get_json()['message'] == 'Invalid admin token'


def test_dashboard(client, admin_token):
    client.post('/api/chat/send', json={'message': 'cough'})
    data = client.get('/api/admin/dashboard', headers=bearer(admin_token)).get_json()['data']
    assert data['statistics']['remedies'] == len(all_remedies())
    assert data['statistics']['symptoms'] == 3
    assert data['statistics']['chatMessages'] == 1
    assert len(data['recentActivity']['chats']) == 1


def test_remedy_crud(client, admin_token):
    headers = bearer(admin_token)

    response = client.post('/api/admin/remedies', json={'title': 'Half a remedy'}, headers=headers)
    assert response.status_code == 400
    assert response.get_json()['errors']

    response = client.post('/api/admin/remedies', json=NEW_REMEDY, headers=headers)
    assert response.status_code == 201
    remedy_id = response.get_json()['data']['id']
    assert remedy_id.startswith('remedy_')

    remedy = client.get(f'/api/remedies/{remedy_id}').get_json()['data']
    assert remedy['ingredients'] == NEW_REMEDY['ingredients']
    assert remedy['rating'] == 4.0

    response = client.put(f'/api/admin/remedies/{remedy_id}', headers=headers,
                          json={'title': 'Hot Lemon Water', 'rating': 4.4, 'id = id; --': 'x'})
    assert response.status_code == 200
    remedy = client.get(f'/api/remedies/{remedy_id}').get_json()['data']
    assert remedy['title'] == 'Hot Lemon Water'
    assert remedy['rating'] == 4.4

    response = client.put(f'/api/admin/remedies/{remedy_id}', json={'created_at': 'yesterday'}, headers=headers)
    assert response.status_code == 400
    assert response.get_json()['message'] == 'No fields to update'

    response = client.put(f'/api/admin/remedies/{remedy_id}', json={'difficulty': 'impossible'}, headers=headers)
    assert response.status_code == 400

    assert client.put('/api/admin/remedies/missing', json={'title': 'x'}, headers=headers).status_code == 404

    assert client.delete(f'/api/admin/remedies/{remedy_id}', headers=headers).status_code == 200
    assert client.delete(f'/api/admin/remedies/{remedy_id}', headers=headers).status_code == 404
    assert client.get(f'/api/remedies/{remedy_id}').status_code == 404


def test_admin_list_with_search(client, admin_token):
    body = client.get('/api/admin/remedies?search=Ginger%20Tea&limit=5', headers=bearer(admin_token)).get_json()
    assert [r['id'] for r in body['data']] == ['ginger-tea']
    assert body['pagination']['total'] == 1


def test_first_aid_crud(client, admin_token):
    headers = bearer(admin_token)
    response = client.post('/api/admin/first-aid', headers=headers, json={
        'title': 'Bee Sting',
        'category': 'skin',
        'emergency': True,
        'description': 'Remove the stinger and cool the area',
        'steps': ['Scrape out stinger', 'Apply cold pack'],
        'severity': 'low',
    })
    assert response.status_code == 201
    item_id = response.get_json()['data']['id']

    item = client.get(f'/api/first-aid/{item_id}').get_json()['data']
    assert item['emergency'] is True
    assert item['steps'] == ['Scrape out stinger', 'Apply cold pack']

    response = client.put(f'/api/admin/first-aid/{item_id}', json={'emergency': False}, headers=headers)
    assert response.status_code == 200
    assert client.get(f'/api/first-aid/{item_id}').get_json()['data']['emergency'] is False


def test_symptom_create_and_conflict(client, admin_token):
    headers = bearer(admin_token)
    payload = {
        'name': 'Nausea',
        'severity': 'low',
        'description': 'Feeling of sickness',
        'common_causes': ['Motion sickness'],
        'recommendations': [{'title': 'Ginger', 'content': 'Sip ginger tea'}],
        'when_to_see_doctor': ['Lasts more than two days'],
        'related_remedies': ['ginger-tea'],
    }
    response = client.post('/api/admin/symptoms', json=payload, headers=headers)
    assert response.status_code == 201

    response = client.post('/api/symptoms/analyze', json={'symptoms': ['nausea']})
    assert response.get_json()['data']['analyzed_symptoms'][0]['name'] == 'nausea'

    response = client.post('/api/admin/symptoms', json={**payload, 'name': 'fever'}, headers=headers)
    assert response.status_code == 409


def test_activity_listings(client, admin_token):
    headers = bearer(admin_token)
    client.post('/api/chat/send', json={'message': 'fever', 'userId': 'device-1'})
    client.post('/api/chat/send', json={'message': 'cold', 'userId': 'device-2'})
    client.post('/api/quiz/first-aid/submit', json={'answers': {'1': 1}, 'userId': 'device-1'})

    chats = client.get('/api/admin/chat-history', headers=headers).get_json()['data']
    assert len(chats) == 2
    chats = client.get('/api/admin/chat-history?userId=device-2', headers=headers).get_json()['data']
    assert [c['userMessage'] for c in chats] == ['cold']

    results = client.get('/api/admin/quiz-results?quizType=first-aid', headers=headers).get_json()['data']
    assert len(results) == 1
    assert results[0]['user_id'] == 'device-1'
    assert results[0]['grade'] == 'A+'
