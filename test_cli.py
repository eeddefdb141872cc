import json
import os

import pytest

from app import app, limiter
from database import count_rows, get_db
from quiz import QUIZ_QUESTIONS
from seed_data import SYMPTOMS, all_first_aid, all_remedies


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setitem(app.config, 'DATABASE', str(tmp_path / 'cli.db'))
    return app.test_cli_runner()


def test_init_db_without_seed(runner):
    result = runner.invoke(args=['init-db', '--no-seed'])

    assert result.exit_code == 0, result.output
    assert 'Remedies: 0' in result.output
    assert 'Symptoms: 0' in result.output
    assert 'Database initialization completed successfully!' in result.output


def test_init_db_seeds_content(runner):
    result = runner.invoke(args=['init-db'])

    assert result.exit_code == 0, result.output
    assert f'Remedies: {len(all_remedies())}' in result.output
    assert f'First Aid Instructions: {len(all_first_aid())}' in result.output
    assert f'Symptoms: {len(SYMPTOMS)}' in result.output

    # Running it again updates in place
    result = runner.invoke(args=['init-db'])
    assert result.exit_code == 0, result.output
    assert f'Remedies: {len(all_remedies())}' in result.output


def test_create_admin_once(runner):
    result = runner.invoke(args=['create-admin', '--password', 'adminpass'])
    assert result.exit_code == 0, result.output
    assert 'Admin user created successfully!' in result.output
    assert 'Role: super_admin' in result.output

    result = runner.invoke(args=['create-admin', '--username', 'other', '--email', 'other@example.com',
                                 '--password', 'otherpass'])
    assert result.exit_code == 0, result.output
    assert 'Admin user already exists' in result.output
    assert 'Username: admin' in result.output

    with get_db(app.config['DATABASE']) as conn:
        assert count_rows(conn, 'admin_users') == 1


def test_created_admin_can_log_in(runner):
    runner.invoke(args=['create-admin', '--username', 'root', '--password', 'rootpass', '--role', 'admin'])

    limiter.enabled = False
    with app.test_client() as client:
        response = client.post('/api/admin/login', json={'username': 'root', 'password': 'rootpass'})

    assert response.status_code == 200
    assert response.get_json()['data']['admin']['role'] == 'admin'


def test_export_offline(runner, tmp_path):
    out_dir = tmp_path / 'assets'
    runner.invoke(args=['init-db'])

    result = runner.invoke(args=['export-offline', '--out', str(out_dir)])
    assert result.exit_code == 0, result.output

    expected = ['first_aid_data.json', 'quiz_first_aid.json', 'remedies_data.json', 'symptoms_data.json']
    assert sorted(os.listdir(out_dir)) == expected
    for filename in expected:
        assert f'Wrote {filename}' in result.output

    remedies = json.loads((out_dir / 'remedies_data.json').read_text(encoding='utf-8'))
    assert len(remedies) == len(all_remedies())
    ratings = [r['rating'] for r in remedies]
    assert ratings == sorted(ratings, reverse=True)

    quiz_bundle = json.loads((out_dir / 'quiz_first_aid.json').read_text(encoding='utf-8'))
    assert quiz_bundle['quizType'] == 'first-aid'
    assert len(quiz_bundle['questions']) == len(QUIZ_QUESTIONS['first-aid'])


@pytest.fixture
def rate_limited_client(client):
    limiter.enabled = True
    limiter.reset()
    try:
        yield client
    finally:
        limiter.enabled = False
        limiter.reset()


@pytest.mark.parametrize('path', ['/api/users/login', '/api/admin/login'])
def test_login_rate_limit(rate_limited_client, path):
    payload = {'username': 'nobody', 'password': 'wrongpass'}
    for _ in range(10):
        response = rate_limited_client.post(path, json=payload)
        assert response.status_code != 429

    response = rate_limited_client.post(path, json=payload)
    assert response.status_code == 429
    body = response.get_json()
    assert body['success'] is False
    assert body['message'] == 'Too many requests, please try again later'
    assert '10 per 1 minute' in body['error']


def test_health_is_not_rate_limited(rate_limited_client):
    for _ in range(12):
        assert rate_limited_client.post('/api/users/login', json={}).status_code != 500
    assert rate_limited_client.get('/health').status_code == 200
