import os
import sys

import pytest

sys.path.append(os.path.dirname(os.path.abspath(__file__)))

# Must be set before config is imported
os.environ.setdefault('RATELIMIT_ENABLED', 'true')  # limiter needs storage initialized; client fixture disables it per test
os.environ.setdefault('KAFKA_ENABLED', 'false')
os.environ.setdefault('BCRYPT_ROUNDS', '4')
os.environ.setdefault('JWT_SECRET', 'healthhub-test-suite-signing-secret-0001')

from app import app, limiter  # noqa: E402
from auth import hash_password  # noqa: E402
from database import execute, get_db, init_db  # noqa: E402
from seed_data import seed_database  # noqa: E402


@pytest.fixture
def db_path(tmp_path):
    path = str(tmp_path / 'healthhub-test.db')
    init_db(path)
    seed_database(path, verbose=False)
    return path


@pytest.fixture
def client(db_path):
    app.config.update(TESTING=True, DATABASE=db_path)
    limiter.enabled = False
    with app.test_client() as test_client:
        yield test_client


def bearer(token):
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def register(client):
    """Register a user and return (token, user)"""
    def _register(username='alice', email=None, password='secret123', **extra):
        payload = {
            'username': username,
            'email': email or f'{username}@example.com',
            'password': password,
            **extra
        }
        response = client.post('/api/users/register', json=payload)
        assert response.status_code == 201, response.get_json()
        data = response.get_json()['data']
        return data['token'], data['user']
    return _register


@pytest.fixture
def user_token(register):
    token, _ = register()
    return token


@pytest.fixture
def admin_token(client, db_path):
    with app.app_context():
        password_hash = hash_password('adminpass')
    with get_db(db_path) as conn:
        execute(
            conn,
            'INSERT INTO admin_users (username, email, password_hash, role) VALUES (?, ?, ?, ?)',
            ('admin', 'admin@healthhub.com', password_hash, 'super_admin')
        )
    response = client.post('/api/admin/login', json={'username': 'admin', 'password': 'adminpass'})
    assert response.status_code == 200
    return response.get_json()['data']['token']
