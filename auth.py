from datetime import datetime, timedelta, timezone
from functools import wraps

import bcrypt
import jwt
from flask import current_app, g, jsonify, request

from database import fetch_one, get_db


def hash_password(password):
    rounds = current_app.config.get('BCRYPT_ROUNDS', 12)
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt(rounds)).decode('utf-8')


def check_password(password, password_hash):
    try:
        return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))
    except ValueError:
        # Malformed stored hash
        return False


def issue_token(payload):
    hours = current_app.config.get('JWT_EXPIRES_HOURS', 24)
    claims = dict(payload)
    claims['exp'] = datetime.now(timezone.utc) + timedelta(hours=hours)
    return jwt.encode(claims, current_app.config['JWT_SECRET'], algorithm="HS256")


def _bearer_token():
    header = request.headers.get('Authorization', '')
    if header.startswith('Bearer '):
        return header[7:].strip() or None
    return None


def _decode(token):
    return jwt.decode(token, current_app.config['JWT_SECRET'], algorithms=["HS256"])


def _unauthorized(message):
    return jsonify({"success": False, "message": message}), 401


def _load_user(user_id):
    with get_db(current_app.config['DATABASE']) as conn:
        return fetch_one(
            conn,
            'SELECT id, username, email, full_name, created_at FROM users WHERE id = ?',
            (user_id,)
        )


# Authentication Middleware
def token_required(f):
    @wraps(f)
    def decorated(*args, **kwargs):
        token = _bearer_token()
        if not token:
            return _unauthorized("Access token required")

        try:
            data = _decode(token)
        except jwt.ExpiredSignatureError:
            return _unauthorized("Token expired")
        except jwt.InvalidTokenError:
            return _unauthorized("Invalid token")

        if 'userId' not in data:
            return _unauthorized("Invalid token")

        current_user = _load_user(data['userId'])
        if not current_user:
            return _unauthorized("User not found")

        g.current_user = current_user
        return f(current_user, *args, **kwargs)
    return decorated


def optional_user():
    """User for a valid bearer token, or None when absent/invalid"""
    token = _bearer_token()
    if not token:
        return None
    try:
        data = _decode(token)
    except jwt.InvalidTokenError:
        return None
    if 'userId' not in data:
        return None
    return _load_user(data['userId'])


def admin_required(f):
    @wraps(f)
    def decorated(*args, **kwargs):
        token = _bearer_token()
        if not token:
            return _unauthorized("Access token required")

        try:
            data = _decode(token)
        except jwt.ExpiredSignatureError:
            return _unauthorized("Token expired")
        except jwt.InvalidTokenError:
            return _unauthorized("Invalid token")

        # User tokens carry userId, admin tokens carry id + role
        if 'id' not in data or 'role' not in data:
            return _unauthorized("Invalid admin token")

        with get_db(current_app.config['DATABASE']) as conn:
            admin = fetch_one(
                conn,
                'SELECT id, username, email, role FROM admin_users WHERE id = ?',
                (data['id'],)
            )
        if not admin:
            return _unauthorized("Invalid admin token")

        g.current_admin = admin
        return f(*args, **kwargs)
    return decorated
