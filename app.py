import json
import os
import sqlite3
import uuid
from datetime import datetime, timezone

import click
from flask import Flask, request, jsonify
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

import chatbot
import quiz
from auth import admin_required, check_password, hash_password, issue_token, optional_user, token_required
from config import config
from database import count_rows, execute, fetch_all, fetch_one, get_db, health_check, init_db
from kafka_service import kafka_service
from records import (
    SEVERITY_ORDER_SQL, chat_from_row, contact_from_row, encode_json, first_aid_from_row,
    pagination, quiz_result_from_row, remedy_from_row, symptom_from_row
)
from seed_data import seed_database
from symptom_checker import SYMPTOM_COLUMNS, symptom_checker
from sync import (
    replace_chat_history, replace_emergency_contacts, replace_favorites,
    replace_quiz_results, upsert_medical_info
)
from validation import (
    SEARCH_TYPES, parse_int, validate_chat_message, validate_contact, validate_first_aid_payload,
    validate_login, validate_medical_info, validate_name, validate_registration,
    validate_remedy_payload, validate_remedy_search, validate_symptom_payload
)

app = Flask(__name__)
app.config.update(config.as_flask_config())
app.json.sort_keys = False

CORS(app, resources={r"/api/*": {"origins": config.CORS_ORIGINS}})

limiter = Limiter(
    get_remote_address,
    app=app,
    default_limits=[config.default_rate_limit()],
    storage_uri="memory://",
)

REMEDY_COLUMNS = """
    id, title, description, category, difficulty, rating,
    prep_time, ingredients, instructions, benefits, warnings, image,
    created_at, updated_at
"""

FIRST_AID_COLUMNS = """
    id, title, category, emergency, description, steps, warnings, severity,
    created_at, updated_at
"""

_initialized_paths = set()


# Helpers
def connect():
    return get_db(app.config['DATABASE'])


@app.before_request
def ensure_database():
    path = app.config['DATABASE']
    if path not in _initialized_paths:
        try:
            init_db(path)
            _initialized_paths.add(path)
        except (OSError, sqlite3.Error) as e:
            app.logger.error(f"Database initialization failed: {e}")


def json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def fail(message, status=400, **extra):
    body = {"success": False, "message": message}
    body.update(extra)
    return jsonify(body), status


def validation_error(errors):
    return fail("Validation error", 400, errors=errors)


def server_error(message, error):
    app.logger.error(f"{message}: {error}")
    return fail(message, 500, error=str(error))


def now_iso():
    return datetime.now(timezone.utc).isoformat()


def resolve_user_id(explicit=None):
    """
    Owner id for chat/quiz data. A signed-in user is stored as 'user:<id>';
    anonymous clients use the id they send (default 'anonymous').
    Returns (user_id, error_response).
    """
    user = optional_user()
    if user:
        return f"user:{user['id']}", None
    explicit = str(explicit) if explicit not in (None, '') else 'anonymous'
    if explicit.startswith('user:'):
        return None, fail("Sign in to access this user's data", 403)
    return explicit, None


def search_clause(columns, term):
    clause = '(' + ' OR '.join(f"{column} LIKE ?" for column in columns) + ')'
    return clause, [f"%{term}%"] * len(columns)


# Service endpoints
@app.route('/api', methods=['GET'])
@app.route('/api/', methods=['GET'])
def api_info():
    return jsonify({
        "success": True,
        "message": "HealthHub API",
        "version": "1.0.0",
        "apiVersion": app.config['API_VERSION'],
        "endpoints": {
            "remedies": "/api/remedies",
            "firstAid": "/api/first-aid",
            "symptoms": "/api/symptoms",
            "users": "/api/users",
            "favorites": "/api/favorites",
            "emergency": "/api/emergency",
            "chat": "/api/chat",
            "quiz": "/api/quiz",
            "admin": "/api/admin",
            "health": "/health"
        }
    })


@app.route('/health', methods=['GET'])
@app.route('/api/health', methods=['GET'])
@limiter.exempt
def health():
    db_ok = health_check(app.config['DATABASE'])
    status = {
        "status": "healthy" if db_ok else "unhealthy",
        "timestamp": now_iso(),
        "environment": app.config['APP_ENV'],
        "services": {
            "database": "connected" if db_ok else "disconnected",
            "kafka": "connected" if kafka_service.available else "disabled",
            "chatbot": "active",
            "symptom_checker": "active"
        },
        "version": "1.0.0"
    }
    return jsonify(status), 200 if db_ok else 503


# Remedies
@app.route('/api/remedies', methods=['GET'])
def list_remedies():
    params, errors = validate_remedy_search(request.args)
    if errors:
        return validation_error(errors)

    try:
        where, args = ['1=1'], []
        if params.get('category'):
            where.append('category = ?')
            args.append(params['category'])
        if params.get('difficulty'):
            where.append('difficulty = ?')
            args.append(params['difficulty'])
        if params.get('search'):
            clause, values = search_clause(
                ('title', 'description', 'benefits', 'ingredients'), params['search'])
            where.append(clause)
            args.extend(values)
        condition = ' AND '.join(where)
        limit, offset = params['limit'], params['offset']

        with connect() as conn:
            rows = fetch_all(
                conn,
                f"SELECT {REMEDY_COLUMNS} FROM remedies WHERE {condition} "
                "ORDER BY rating DESC, title ASC LIMIT ? OFFSET ?",
                (*args, limit, offset)
            )
            total = fetch_one(conn, f"SELECT COUNT(*) AS total FROM remedies WHERE {condition}", args)['total']

        return jsonify({
            "success": True,
            "data": [remedy_from_row(row) for row in rows],
            "pagination": pagination(total, limit, offset)
        })
    except Exception as e:
        return server_error("Failed to fetch remedies", e)


@app.route('/api/remedies/featured', methods=['GET'])
def featured_remedies():
    limit = parse_int(request.args.get('limit'), 6, 1, 50)
    try:
        with connect() as conn:
            rows = fetch_all(
                conn,
                f"SELECT {REMEDY_COLUMNS} FROM remedies WHERE rating >= 4.5 "
                "ORDER BY rating DESC, RANDOM() LIMIT ?",
                (limit,)
            )
        return jsonify({"success": True, "data": [remedy_from_row(row) for row in rows]})
    except Exception as e:
        return server_error("Failed to fetch featured remedies", e)


@app.route('/api/remedies/categories/list', methods=['GET'])
def remedy_categories():
    try:
        with connect() as conn:
            rows = fetch_all(conn, """
                SELECT category, COUNT(*) AS count
                FROM remedies
                GROUP BY category
                ORDER BY category ASC
            """)
        return jsonify({"success": True, "data": rows})
    except Exception as e:
        return server_error("Failed to fetch categories", e)


@app.route('/api/remedies/search/suggestions', methods=['GET'])
def remedy_suggestions():
    q = request.args.get('q', '')
    if len(q) < 2:
        return jsonify({"success": True, "data": []})
    try:
        with connect() as conn:
            rows = fetch_all(conn, """
                SELECT DISTINCT title, category, rating
                FROM remedies
                WHERE title LIKE ? OR category LIKE ?
                ORDER BY rating DESC, title ASC
                LIMIT 10
            """, (f"%{q}%", f"%{q}%"))
        for row in rows:
            row['rating'] = float(row['rating'])
        return jsonify({"success": True, "data": rows})
    except Exception as e:
        return server_error("Failed to fetch search suggestions", e)


@app.route('/api/remedies/<remedy_id>', methods=['GET'])
def get_remedy(remedy_id):
    try:
        with connect() as conn:
            row = fetch_one(conn, f"SELECT {REMEDY_COLUMNS} FROM remedies WHERE id = ?", (remedy_id,))
        if not row:
            return fail("Remedy not found", 404)
        return jsonify({"success": True, "data": remedy_from_row(row)})
    except Exception as e:
        return server_error("Failed to fetch remedy", e)


# First aid
@app.route('/api/first-aid', methods=['GET'])
def list_first_aid():
    limit = parse_int(request.args.get('limit'), 50, 1, 100)
    offset = parse_int(request.args.get('offset'), 0, 0)
    try:
        where, args = ['1=1'], []
        if request.args.get('category'):
            where.append('category = ?')
            args.append(request.args['category'])
        if request.args.get('emergency') is not None:
            where.append('emergency = ?')
            args.append(1 if request.args['emergency'] == 'true' else 0)
        if request.args.get('search'):
            clause, values = search_clause(('title', 'description', 'steps'), request.args['search'])
            where.append(clause)
            args.extend(values)
        condition = ' AND '.join(where)

        with connect() as conn:
            rows = fetch_all(
                conn,
                f"SELECT {FIRST_AID_COLUMNS} FROM first_aid WHERE {condition} "
                f"ORDER BY emergency DESC, {SEVERITY_ORDER_SQL} ASC, title ASC LIMIT ? OFFSET ?",
                (*args, limit, offset)
            )
            total = fetch_one(conn, f"SELECT COUNT(*) AS total FROM first_aid WHERE {condition}", args)['total']

        return jsonify({
            "success": True,
            "data": [first_aid_from_row(row) for row in rows],
            "pagination": pagination(total, limit, offset)
        })
    except Exception as e:
        return server_error("Failed to fetch first aid instructions", e)


@app.route('/api/first-aid/emergency', methods=['GET'])
def emergency_first_aid():
    limit = parse_int(request.args.get('limit'), 20, 1, 100)
    try:
        with connect() as conn:
            rows = fetch_all(
                conn,
                f"SELECT {FIRST_AID_COLUMNS} FROM first_aid WHERE emergency = 1 "
                f"ORDER BY {SEVERITY_ORDER_SQL} ASC, title ASC LIMIT ?",
                (limit,)
            )
        return jsonify({"success": True, "data": [first_aid_from_row(row) for row in rows]})
    except Exception as e:
        return server_error("Failed to fetch emergency instructions", e)


@app.route('/api/first-aid/categories/list', methods=['GET'])
def first_aid_categories():
    try:
        with connect() as conn:
            rows = fetch_all(conn, """
                SELECT category, COUNT(*) AS count
                FROM first_aid
                GROUP BY category
                ORDER BY category ASC
            """)
        return jsonify({"success": True, "data": rows})
    except Exception as e:
        return server_error("Failed to fetch categories", e)


@app.route('/api/first-aid/search/suggestions', methods=['GET'])
def first_aid_suggestions():
    q = request.args.get('q', '')
    if len(q) < 2:
        return jsonify({"success": True, "data": []})
    try:
        with connect() as conn:
            rows = fetch_all(conn, f"""
                SELECT DISTINCT title, category, severity, emergency
                FROM first_aid
                WHERE title LIKE ? OR category LIKE ?
                ORDER BY emergency DESC, {SEVERITY_ORDER_SQL} ASC, title ASC
                LIMIT 10
            """, (f"%{q}%", f"%{q}%"))
        return jsonify({"success": True, "data": [first_aid_from_row(row) for row in rows]})
    except Exception as e:
        return server_error("Failed to fetch search suggestions", e)


@app.route('/api/first-aid/<item_id>', methods=['GET'])
def get_first_aid(item_id):
    try:
        with connect() as conn:
            row = fetch_one(conn, f"SELECT {FIRST_AID_COLUMNS} FROM first_aid WHERE id = ?", (item_id,))
        if not row:
            return fail("First aid instruction not found", 404)
        return jsonify({"success": True, "data": first_aid_from_row(row)})
    except Exception as e:
        return server_error("Failed to fetch first aid instruction", e)


# Symptoms
@app.route('/api/symptoms', methods=['GET'])
def list_symptoms():
    limit = parse_int(request.args.get('limit'), 50, 1, 100)
    offset = parse_int(request.args.get('offset'), 0, 0)
    try:
        where, args = ['1=1'], []
        if request.args.get('severity'):
            where.append('severity = ?')
            args.append(request.args['severity'])
        if request.args.get('search'):
            clause, values = search_clause(('name', 'description', 'common_causes'), request.args['search'])
            where.append(clause)
            args.extend(values)
        condition = ' AND '.join(where)

        with connect() as conn:
            rows = fetch_all(
                conn,
                f"SELECT {SYMPTOM_COLUMNS}, created_at, updated_at FROM symptoms WHERE {condition} "
                f"ORDER BY {SEVERITY_ORDER_SQL} ASC, name ASC LIMIT ? OFFSET ?",
                (*args, limit, offset)
            )
            total = fetch_one(conn, f"SELECT COUNT(*) AS total FROM symptoms WHERE {condition}", args)['total']

        return jsonify({
            "success": True,
            "data": [symptom_from_row(row) for row in rows],
            "pagination": pagination(total, limit, offset)
        })
    except Exception as e:
        return server_error("Failed to fetch symptoms", e)


@app.route('/api/symptoms/analyze', methods=['POST'])
def analyze_symptoms():
    symptoms = json_body().get('symptoms')
    if not symptoms or not isinstance(symptoms, list):
        return fail("Symptoms array is required", 400)

    try:
        with connect() as conn:
            analysis = symptom_checker.analyze(conn, symptoms)
        if analysis is None:
            return fail("No matching symptoms found", 404)
        return jsonify({"success": True, "data": analysis})
    except Exception as e:
        return server_error("Failed to analyze symptoms", e)


@app.route('/api/symptoms/search/suggestions', methods=['GET'])
def symptom_suggestions():
    q = request.args.get('q', '')
    if len(q) < 2:
        return jsonify({"success": True, "data": []})
    try:
        with connect() as conn:
            rows = fetch_all(conn, f"""
                SELECT DISTINCT name, severity, description
                FROM symptoms
                WHERE name LIKE ? OR description LIKE ?
                ORDER BY {SEVERITY_ORDER_SQL} ASC, name ASC
                LIMIT 10
            """, (f"%{q}%", f"%{q}%"))
        return jsonify({"success": True, "data": rows})
    except Exception as e:
        return server_error("Failed to fetch search suggestions", e)


@app.route('/api/symptoms/severity/list', methods=['GET'])
def symptom_severities():
    try:
        with connect() as conn:
            rows = fetch_all(conn, f"""
                SELECT severity, COUNT(*) AS count
                FROM symptoms
                GROUP BY severity
                ORDER BY {SEVERITY_ORDER_SQL}
            """)
        return jsonify({"success": True, "data": rows})
    except Exception as e:
        return server_error("Failed to fetch severity levels", e)


@app.route('/api/symptoms/<symptom_id>', methods=['GET'])
def get_symptom(symptom_id):
    try:
        with connect() as conn:
            row = fetch_one(
                conn,
                f"SELECT {SYMPTOM_COLUMNS}, created_at, updated_at FROM symptoms WHERE id = ?",
                (symptom_id,)
            )
        if not row:
            return fail("Symptom not found", 404)
        return jsonify({"success": True, "data": symptom_from_row(row)})
    except Exception as e:
        return server_error("Failed to fetch symptom", e)


# Users
def public_user(user):
    return {
        "id": user['id'],
        "username": user['username'],
        "email": user['email'],
        "full_name": user.get('full_name')
    }


@app.route('/api/users/register', methods=['POST'])
def register():
    data, errors = validate_registration(json_body())
    if errors:
        return validation_error(errors)

    try:
        with connect() as conn:
            existing = fetch_one(
                conn,
                'SELECT id FROM users WHERE username = ? OR email = ?',
                (data['username'], data['email'])
            )
            if existing:
                return fail("Username or email already exists", 409)

            user_id, _ = execute(
                conn,
                'INSERT INTO users (username, email, password_hash, full_name) VALUES (?, ?, ?, ?)',
                (data['username'], data['email'], hash_password(data['password']), data.get('full_name'))
            )

        user = {"id": user_id, **{k: data.get(k) for k in ('username', 'email', 'full_name')}}
        token = issue_token({'userId': user_id, 'username': data['username']})
        kafka_service.user_registered(user)

        return jsonify({
            "success": True,
            "message": "User registered successfully",
            "data": {"user": public_user(user), "token": token}
        }), 201
    except sqlite3.IntegrityError:
        # Lost a race with a concurrent registration
        return fail("Username or email already exists", 409)
    except Exception as e:
        return server_error("Failed to register user", e)


@app.route('/api/users/login', methods=['POST'])
@limiter.limit("10 per minute")
def login():
    data, errors = validate_login(json_body())
    if errors:
        return validation_error(errors)

    try:
        with connect() as conn:
            user = fetch_one(
                conn,
                'SELECT id, username, email, password_hash, full_name FROM users WHERE username = ? OR email = ?',
                (data['username'], data['username'].lower())
            )

        if not user or not check_password(data['password'], user['password_hash']):
            return fail("Invalid credentials", 401)

        token = issue_token({'userId': user['id'], 'username': user['username']})
        return jsonify({
            "success": True,
            "message": "Login successful",
            "data": {"user": public_user(user), "token": token}
        })
    except Exception as e:
        return server_error("Failed to login", e)


@app.route('/api/users/profile', methods=['GET'])
@token_required
def profile(current_user):
    user_id = current_user['id']
    try:
        with connect() as conn:
            favorites = fetch_all(conn, """
                SELECT 'remedy' AS type, r.id, r.title, r.category, r.rating, r.image
                FROM user_favorites uf
                JOIN remedies r ON uf.remedy_id = r.id
                WHERE uf.user_id = ?

                UNION ALL

                SELECT 'first_aid' AS type, fa.id, fa.title, fa.category, NULL AS rating, NULL AS image
                FROM user_favorites uf
                JOIN first_aid fa ON uf.first_aid_id = fa.id
                WHERE uf.user_id = ?

                ORDER BY type, title
            """, (user_id, user_id))
            medical_info = fetch_one(conn, 'SELECT * FROM user_medical_info WHERE user_id = ?', (user_id,))
            contacts = fetch_all(
                conn,
                'SELECT * FROM emergency_contacts WHERE user_id = ? ORDER BY is_favorite DESC, name ASC',
                (user_id,)
            )

        for favorite in favorites:
            if favorite['rating'] is not None:
                favorite['rating'] = float(favorite['rating'])

        return jsonify({
            "success": True,
            "data": {
                "user": current_user,
                "favorites": favorites,
                "medical_info": medical_info,
                "emergency_contacts": [contact_from_row(c) for c in contacts]
            }
        })
    except Exception as e:
        return server_error("Failed to fetch user profile", e)


def _favorite_target(data):
    remedy_id = data.get('remedy_id') or request.args.get('remedy_id')
    first_aid_id = data.get('first_aid_id') or request.args.get('first_aid_id')
    if not remedy_id and not first_aid_id:
        return None, fail("Either remedy_id or first_aid_id is required", 400)
    if remedy_id and first_aid_id:
        return None, fail("Only one of remedy_id or first_aid_id can be specified", 400)
    if remedy_id:
        return ('remedy_id', 'remedies', remedy_id), None
    return ('first_aid_id', 'first_aid', first_aid_id), None


@app.route('/api/users/favorites', methods=['POST'])
@token_required
def add_favorite(current_user):
    target, error = _favorite_target(json_body())
    if error:
        return error
    column, table, item_id = target

    try:
        with connect() as conn:
            if not fetch_one(conn, f'SELECT id FROM {table} WHERE id = ?', (item_id,)):
                label = "Remedy" if table == 'remedies' else "First aid instruction"
                return fail(f"{label} not found", 404)

            existing = fetch_one(
                conn,
                f'SELECT id FROM user_favorites WHERE user_id = ? AND {column} = ?',
                (current_user['id'], item_id)
            )
            if existing:
                return fail("Already in favorites", 409)

            execute(
                conn,
                f'INSERT INTO user_favorites (user_id, {column}) VALUES (?, ?)',
                (current_user['id'], item_id)
            )
        return jsonify({"success": True, "message": "Added to favorites"})
    except Exception as e:
        return server_error("Failed to add to favorites", e)


@app.route('/api/users/favorites', methods=['DELETE'])
@token_required
def remove_favorite(current_user):
    target, error = _favorite_target(json_body())
    if error:
        return error
    column, _, item_id = target

    try:
        with connect() as conn:
            _, removed = execute(
                conn,
                f'DELETE FROM user_favorites WHERE user_id = ? AND {column} = ?',
                (current_user['id'], item_id)
            )
        if removed == 0:
            return fail("Favorite not found", 404)
        return jsonify({"success": True, "message": "Removed from favorites"})
    except Exception as e:
        return server_error("Failed to remove from favorites", e)


@app.route('/api/users/sync', methods=['POST'])
@token_required
def sync_user_data(current_user):
    body = json_body()
    data = body.get('data') if isinstance(body.get('data'), dict) else body
    applied = {}

    errors = []
    full_name = None
    if 'full_name' in data:
        ok, full_name = validate_name(data.get('full_name'))
        if not ok:
            errors.append(full_name)
    medical_info = None
    if isinstance(data.get('medical_info'), dict):
        medical_info, medical_errors = validate_medical_info(data['medical_info'])
        errors.extend(medical_errors)
    contacts = data.get('emergency_contacts')
    if contacts is not None and not isinstance(contacts, list):
        errors.append('"emergency_contacts" must be an array')
    if errors:
        return validation_error(errors)

    try:
        with connect() as conn:
            if 'full_name' in data:
                execute(
                    conn,
                    'UPDATE users SET full_name = ?, updated_at = CURRENT_TIMESTAMP WHERE id = ?',
                    (full_name, current_user['id'])
                )
                applied['full_name'] = full_name
            if medical_info is not None:
                created = upsert_medical_info(conn, current_user['id'], medical_info)
                applied['medical_info'] = 'created' if created else 'updated'
            if contacts is not None:
                applied['emergency_contacts'] = replace_emergency_contacts(conn, current_user['id'], contacts)

        kafka_service.sync_completed(current_user['id'], 'user_data', applied)
        return jsonify({"success": True, "message": "User data synced", "data": applied})
    except Exception as e:
        return server_error("Failed to sync user data", e)


@app.route('/api/favorites/sync', methods=['POST'])
@token_required
def sync_favorites(current_user):
    favorites = json_body().get('favorites', [])
    if not isinstance(favorites, list):
        return fail("favorites array required", 400)

    try:
        with connect() as conn:
            stats = replace_favorites(conn, current_user['id'], favorites)
        kafka_service.sync_completed(current_user['id'], 'favorites', stats)
        return jsonify({"success": True, "message": "Favorites synced", "data": stats})
    except Exception as e:
        return server_error("Failed to sync favorites", e)


# Emergency contacts, medical info and search history
@app.route('/api/emergency/contacts', methods=['GET'])
@token_required
def list_contacts(current_user):
    try:
        with connect() as conn:
            rows = fetch_all(
                conn,
                'SELECT * FROM emergency_contacts WHERE user_id = ? ORDER BY is_favorite DESC, name ASC',
                (current_user['id'],)
            )
        return jsonify({"success": True, "data": [contact_from_row(row) for row in rows]})
    except Exception as e:
        return server_error("Failed to fetch emergency contacts", e)


@app.route('/api/emergency/contacts', methods=['POST'])
@token_required
def add_contact(current_user):
    data, errors = validate_contact(json_body())
    if errors:
        if any(e.endswith('is required') for e in errors):
            return fail("Name and phone are required", 400, errors=errors)
        return validation_error(errors)

    is_favorite = data.get('is_favorite', False)
    try:
        with connect() as conn:
            contact_id, _ = execute(
                conn,
                'INSERT INTO emergency_contacts (user_id, name, phone, relation, is_favorite) VALUES (?, ?, ?, ?, ?)',
                (current_user['id'], data['name'], data['phone'], data.get('relation'), 1 if is_favorite else 0)
            )
        return jsonify({
            "success": True,
            "message": "Emergency contact added successfully",
            "data": {
                "id": contact_id,
                "name": data['name'],
                "phone": data['phone'],
                "relation": data.get('relation'),
                "is_favorite": is_favorite
            }
        }), 201
    except Exception as e:
        return server_error("Failed to add emergency contact", e)


@app.route('/api/emergency/contacts/<int:contact_id>', methods=['PUT'])
@token_required
def update_contact(current_user, contact_id):
    data, errors = validate_contact(json_body(), partial=True)
    if errors:
        return validation_error(errors)

    is_favorite = data.get('is_favorite')
    try:
        with connect() as conn:
            _, changed = execute(conn, """
                UPDATE emergency_contacts
                SET name = COALESCE(?, name),
                    phone = COALESCE(?, phone),
                    relation = COALESCE(?, relation),
                    is_favorite = COALESCE(?, is_favorite),
                    updated_at = CURRENT_TIMESTAMP
                WHERE id = ? AND user_id = ?
            """, (
                data.get('name'), data.get('phone'), data.get('relation'),
                None if is_favorite is None else int(is_favorite),
                contact_id, current_user['id']
            ))
        if changed == 0:
            return fail("Emergency contact not found", 404)
        return jsonify({"success": True, "message": "Emergency contact updated successfully"})
    except Exception as e:
        return server_error("Failed to update emergency contact", e)


@app.route('/api/emergency/contacts/<int:contact_id>', methods=['DELETE'])
@token_required
def delete_contact(current_user, contact_id):
    try:
        with connect() as conn:
            _, removed = execute(
                conn,
                'DELETE FROM emergency_contacts WHERE id = ? AND user_id = ?',
                (contact_id, current_user['id'])
            )
        if removed == 0:
            return fail("Emergency contact not found", 404)
        return jsonify({"success": True, "message": "Emergency contact deleted successfully"})
    except Exception as e:
        return server_error("Failed to delete emergency contact", e)


@app.route('/api/emergency/medical-info', methods=['GET'])
@token_required
def get_medical_info(current_user):
    try:
        with connect() as conn:
            info = fetch_one(conn, 'SELECT * FROM user_medical_info WHERE user_id = ?', (current_user['id'],))
        return jsonify({"success": True, "data": info})
    except Exception as e:
        return server_error("Failed to fetch medical information", e)


@app.route('/api/emergency/medical-info', methods=['POST'])
@token_required
def save_medical_info(current_user):
    data, errors = validate_medical_info(json_body())
    if errors:
        return validation_error(errors)

    try:
        with connect() as conn:
            created = upsert_medical_info(conn, current_user['id'], data)
        message = "Medical information created successfully" if created else "Medical information updated successfully"
        return jsonify({"success": True, "message": message})
    except Exception as e:
        return server_error("Failed to save medical information", e)


@app.route('/api/emergency/search-history', methods=['GET'])
@token_required
def search_history(current_user):
    limit = parse_int(request.args.get('limit'), 20, 1, 100)
    offset = parse_int(request.args.get('offset'), 0, 0)
    try:
        with connect() as conn:
            rows = fetch_all(conn, """
                SELECT * FROM search_history
                WHERE user_id = ?
                ORDER BY created_at DESC, id DESC
                LIMIT ? OFFSET ?
            """, (current_user['id'], limit, offset))
            total = fetch_one(
                conn, 'SELECT COUNT(*) AS total FROM search_history WHERE user_id = ?', (current_user['id'],)
            )['total']
        return jsonify({"success": True, "data": rows, "pagination": pagination(total, limit, offset)})
    except Exception as e:
        return server_error("Failed to fetch search history", e)


@app.route('/api/emergency/search-history', methods=['POST'])
@token_required
def add_search_history(current_user):
    data = json_body()
    search_term = data.get('search_term')
    search_type = data.get('search_type')

    if not search_term or not search_type:
        return fail("Search term and search type are required", 400)
    if search_type not in SEARCH_TYPES:
        return fail("Invalid search type. Must be remedy, first_aid, or symptom", 400)
    if not isinstance(search_term, str) or len(search_term) > 200:
        return fail("Search term must be a string of at most 200 characters", 400)

    try:
        with connect() as conn:
            execute(
                conn,
                'INSERT INTO search_history (user_id, search_term, search_type) VALUES (?, ?, ?)',
                (current_user['id'], search_term.strip(), search_type)
            )
        return jsonify({"success": True, "message": "Search added to history"})
    except Exception as e:
        return server_error("Failed to add to search history", e)


@app.route('/api/emergency/quick-access', methods=['GET'])
@token_required
def quick_access(current_user):
    user_id = current_user['id']
    try:
        with connect() as conn:
            contacts = fetch_all(
                conn,
                'SELECT name, phone, relation FROM emergency_contacts '
                'WHERE user_id = ? AND is_favorite = 1 ORDER BY name',
                (user_id,)
            )
            medical_info = fetch_one(
                conn,
                'SELECT blood_type, allergies, medications, emergency_contact, emergency_phone '
                'FROM user_medical_info WHERE user_id = ?',
                (user_id,)
            )
            recent = fetch_all(
                conn,
                'SELECT search_term, search_type FROM search_history '
                'WHERE user_id = ? ORDER BY created_at DESC, id DESC LIMIT 5',
                (user_id,)
            )
        return jsonify({
            "success": True,
            "data": {
                "emergency_contacts": contacts,
                "medical_info": medical_info,
                "recent_searches": recent
            }
        })
    except Exception as e:
        return server_error("Failed to fetch quick access data", e)


# Chat
@app.route('/api/chat/send', methods=['POST'])
def chat_send():
    data, errors = validate_chat_message(json_body())
    if errors:
        return validation_error(errors)

    user_id, error = resolve_user_id(data.get('userId'))
    if error:
        return error

    try:
        reply = chatbot.generate_response(data['message'])
        entry = {
            "id": uuid.uuid4().hex,
            "userId": user_id,
            "userMessage": data['message'],
            "botResponse": reply['message'],
            "suggestedRemedies": reply['remedies'],
            "timestamp": now_iso()
        }

        with connect() as conn:
            execute(conn, """
                INSERT INTO chat_history (id, user_id, user_message, bot_response, suggested_remedies, timestamp)
                VALUES (?, ?, ?, ?, ?, ?)
            """, (
                entry['id'], user_id, entry['userMessage'], entry['botResponse'],
                encode_json(entry['suggestedRemedies']), entry['timestamp']
            ))

        alert = reply.get('alert')
        kafka_service.chat_message(
            user_id, entry['userMessage'], entry['botResponse'],
            alert_level=alert['level'] if alert else None
        )

        # Both camelCase and snake_case for frontend compatibility
        payload = {
            **entry,
            "user_message": entry['userMessage'],
            "bot_response": entry['botResponse'],
            "suggested_remedies": entry['suggestedRemedies']
        }
        if reply.get('alert'):
            payload['alert'] = reply['alert']
        return jsonify({"success": True, "data": payload})
    except Exception as e:
        return server_error("Failed to process chat message", e)


@app.route('/api/chat/history', methods=['GET'])
def chat_history():
    user_id, error = resolve_user_id(request.args.get('userId'))
    if error:
        return error
    limit = parse_int(request.args.get('limit'), 50, 1, 500)
    offset = parse_int(request.args.get('offset'), 0, 0)

    try:
        with connect() as conn:
            rows = fetch_all(conn, """
                SELECT id, user_message, bot_response, suggested_remedies, timestamp
                FROM chat_history
                WHERE user_id = ?
                ORDER BY timestamp DESC
                LIMIT ? OFFSET ?
            """, (user_id, limit, offset))
        return jsonify({"success": True, "data": [chat_from_row(row) for row in rows]})
    except Exception as e:
        return server_error("Failed to fetch chat history", e)


@app.route('/api/chat/history', methods=['DELETE'])
def clear_chat_history():
    user_id, error = resolve_user_id(json_body().get('userId') or request.args.get('userId'))
    if error:
        return error

    try:
        with connect() as conn:
            _, removed = execute(conn, 'DELETE FROM chat_history WHERE user_id = ?', (user_id,))
        return jsonify({"success": True, "message": "Chat history cleared successfully", "data": {"deleted": removed}})
    except Exception as e:
        return server_error("Failed to clear chat history", e)


@app.route('/api/chat/suggestions', methods=['GET'])
def chat_suggestions():
    return jsonify({"success": True, "data": chatbot.suggestions()})


@app.route('/api/chat/sync', methods=['POST'])
def sync_chat_history():
    body = json_body()
    history = body.get('history')
    if not isinstance(history, list):
        return fail("history array required", 400)

    user_id, error = resolve_user_id(body.get('userId'))
    if error:
        return error

    try:
        with connect() as conn:
            stats = replace_chat_history(conn, user_id, history)
        kafka_service.sync_completed(user_id, 'chat_history', stats)
        return jsonify({"success": True, "message": "Chat history synced", "data": stats})
    except Exception as e:
        return server_error("Failed to sync chat history", e)


# Quiz
@app.route('/api/quiz/types/list', methods=['GET'])
def list_quiz_types():
    return jsonify({"success": True, "data": quiz.quiz_types()})


@app.route('/api/quiz/sync', methods=['POST'])
def sync_quiz_progress():
    body = json_body()
    progress = body.get('progress', {})
    if not isinstance(progress, dict):
        return fail("progress object required", 400)

    user_id, error = resolve_user_id(body.get('userId'))
    if error:
        return error

    try:
        with connect() as conn:
            stats = replace_quiz_results(conn, user_id, progress)
        kafka_service.sync_completed(user_id, 'quiz_progress', stats)
        return jsonify({
            "success": True,
            "message": "Quiz progress synced",
            "data": {**stats, "userId": user_id, "keys": list(progress.keys())}
        })
    except Exception as e:
        return server_error("Failed to sync quiz progress", e)


@app.route('/api/quiz/<quiz_type>', methods=['GET'])
def get_quiz(quiz_type):
    if quiz_type not in quiz.QUIZ_QUESTIONS:
        return fail("Quiz type not found", 404)

    limit = parse_int(request.args.get('limit'), 10, 1, 100)
    questions = quiz.pick_questions(quiz_type, limit)
    return jsonify({
        "success": True,
        "data": {
            "quizType": quiz_type,
            "questions": questions,
            "totalQuestions": len(questions)
        }
    })


@app.route('/api/quiz/<quiz_type>/submit', methods=['POST'])
def submit_quiz(quiz_type):
    if quiz_type not in quiz.QUIZ_QUESTIONS:
        return fail("Quiz type not found", 404)

    body = json_body()
    answers = body.get('answers')
    if not isinstance(answers, dict):
        return fail("Invalid answers format", 400)
    if not answers:
        return fail("No answers provided", 400)

    user_id, error = resolve_user_id(body.get('userId'))
    if error:
        return error

    try:
        graded = quiz.grade_answers(quiz_type, answers)
        result = {
            "id": uuid.uuid4().hex,
            "userId": user_id,
            "quizType": quiz_type,
            "score": graded['score'],
            "totalQuestions": graded['totalQuestions'],
            "percentage": graded['percentage'],
            "answers": answers,
            "completedAt": now_iso()
        }
        with connect() as conn:
            execute(conn, """
                INSERT INTO quiz_results (id, user_id, quiz_type, score, total_questions, answers, completed_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
            """, (
                result['id'], user_id, quiz_type, result['score'], result['totalQuestions'],
                json.dumps(answers), result['completedAt']
            ))
        return jsonify({
            "success": True,
            "data": {**result, "results": graded['results'], "grade": graded['grade']}
        })
    except Exception as e:
        return server_error("Failed to submit quiz", e)


@app.route('/api/quiz/<quiz_type>/results', methods=['GET'])
def quiz_results(quiz_type):
    user_id, error = resolve_user_id(request.args.get('userId'))
    if error:
        return error
    limit = parse_int(request.args.get('limit'), 10, 1, 100)

    try:
        with connect() as conn:
            rows = fetch_all(conn, """
                SELECT id, score, total_questions, answers, completed_at
                FROM quiz_results
                WHERE user_id = ? AND quiz_type = ?
                ORDER BY completed_at DESC
                LIMIT ?
            """, (user_id, quiz_type, limit))
        return jsonify({"success": True, "data": [quiz_result_from_row(row) for row in rows]})
    except Exception as e:
        return server_error("Failed to fetch quiz results", e)


# Admin
REMEDY_EDITABLE = ('title', 'description', 'category', 'difficulty', 'rating', 'prep_time',
                   'ingredients', 'instructions', 'benefits', 'warnings', 'image')
FIRST_AID_EDITABLE = ('title', 'category', 'emergency', 'description', 'steps', 'warnings', 'severity')
SYMPTOM_EDITABLE = ('name', 'severity', 'description', 'common_causes', 'recommendations',
                    'when_to_see_doctor', 'related_remedies')

CONTENT_TABLES = {
    'remedies': {
        'table': 'remedies', 'label': 'Remedy', 'editable': REMEDY_EDITABLE,
        'json': ('ingredients', 'instructions'), 'bool': (),
        'search': ('title', 'description', 'category'),
        'shape': remedy_from_row, 'validate': validate_remedy_payload, 'id_prefix': 'remedy',
    },
    'first-aid': {
        'table': 'first_aid', 'label': 'First aid item', 'editable': FIRST_AID_EDITABLE,
        'json': ('steps',), 'bool': ('emergency',),
        'search': ('title', 'description', 'category'),
        'shape': first_aid_from_row, 'validate': validate_first_aid_payload, 'id_prefix': 'firstaid',
    },
    'symptoms': {
        'table': 'symptoms', 'label': 'Symptom', 'editable': SYMPTOM_EDITABLE,
        'json': ('common_causes', 'recommendations', 'when_to_see_doctor', 'related_remedies'), 'bool': (),
        'search': ('name', 'description'),
        'shape': symptom_from_row, 'validate': validate_symptom_payload, 'id_prefix': 'symptom',
    },
}

CREATE_DEFAULTS = {
    'remedies': {'rating': 4.0, 'benefits': '', 'warnings': '', 'image': '🌿'},
    'first-aid': {'emergency': False, 'warnings': ''},
    'symptoms': {'related_remedies': []},
}


def _column_value(info, column, value):
    if column in info['json']:
        return encode_json(value)
    if column in info['bool']:
        return 1 if value else 0
    if column == 'name' and isinstance(value, str):
        return value.strip().lower()
    return value


@app.route('/api/admin/login', methods=['POST'])
@limiter.limit("10 per minute")
def admin_login():
    data = json_body()
    username = data.get('username')
    password = data.get('password')
    if not username or not password:
        return fail("Username and password are required", 400)

    try:
        with connect() as conn:
            admin = fetch_one(
                conn,
                'SELECT * FROM admin_users WHERE username = ? OR email = ?',
                (username, username)
            )
        if not admin or not check_password(password, admin['password_hash']):
            return fail("Invalid credentials", 401)

        token = issue_token({'id': admin['id'], 'username': admin['username'], 'role': admin['role']})
        return jsonify({
            "success": True,
            "data": {
                "token": token,
                "admin": {
                    "id": admin['id'],
                    "username": admin['username'],
                    "email": admin['email'],
                    "role": admin['role']
                }
            }
        })
    except Exception as e:
        return server_error("Login failed", e)


@app.route('/api/admin/dashboard', methods=['GET'])
@admin_required
def admin_dashboard():
    try:
        with connect() as conn:
            statistics = {
                "remedies": count_rows(conn, 'remedies'),
                "firstAid": count_rows(conn, 'first_aid'),
                "symptoms": count_rows(conn, 'symptoms'),
                "chatMessages": count_rows(conn, 'chat_history'),
                "quizResults": count_rows(conn, 'quiz_results'),
                "users": count_rows(conn, 'users'),
            }
            recent_chats = fetch_all(conn, """
                SELECT user_message, bot_response, timestamp
                FROM chat_history
                ORDER BY timestamp DESC
                LIMIT 5
            """)
            recent_quiz = fetch_all(conn, """
                SELECT user_id, quiz_type, score, total_questions, completed_at
                FROM quiz_results
                ORDER BY completed_at DESC
                LIMIT 5
            """)
        return jsonify({
            "success": True,
            "data": {
                "statistics": statistics,
                "recentActivity": {"chats": recent_chats, "quizResults": recent_quiz}
            }
        })
    except Exception as e:
        return server_error("Failed to fetch dashboard data", e)


@app.route('/api/admin/<any(remedies, "first-aid", symptoms):kind>', methods=['GET'])
@admin_required
def admin_list_content(kind):
    info = CONTENT_TABLES[kind]
    limit = parse_int(request.args.get('limit'), 50, 1, 500)
    offset = parse_int(request.args.get('offset'), 0, 0)

    try:
        where, args = '1=1', []
        if request.args.get('search'):
            where, args = search_clause(info['search'], request.args['search'])
        with connect() as conn:
            rows = fetch_all(
                conn,
                f"SELECT * FROM {info['table']} WHERE {where} ORDER BY created_at DESC, id ASC LIMIT ? OFFSET ?",
                (*args, limit, offset)
            )
            total = fetch_one(conn, f"SELECT COUNT(*) AS total FROM {info['table']} WHERE {where}", args)['total']
        return jsonify({
            "success": True,
            "data": [info['shape'](row) for row in rows],
            "pagination": pagination(total, limit, offset)
        })
    except Exception as e:
        return server_error(f"Failed to fetch {kind}", e)


@app.route('/api/admin/<any(remedies, "first-aid", symptoms):kind>', methods=['POST'])
@admin_required
def admin_create_content(kind):
    info = CONTENT_TABLES[kind]
    data = json_body()
    errors = info['validate'](data)
    if errors:
        return fail("Missing required fields", 400, errors=errors)

    values = {**CREATE_DEFAULTS[kind], **{k: v for k, v in data.items() if k in info['editable']}}
    item_id = f"{info['id_prefix']}_{uuid.uuid4().hex[:12]}"
    columns = ['id'] + list(values.keys())
    params = [item_id] + [_column_value(info, column, values[column]) for column in values]

    try:
        with connect() as conn:
            execute(
                conn,
                f"INSERT INTO {info['table']} ({', '.join(columns)}) VALUES ({', '.join('?' for _ in columns)})",
                params
            )
        return jsonify({
            "success": True,
            "message": f"{info['label']} created successfully",
            "data": {"id": item_id}
        }), 201
    except sqlite3.IntegrityError as e:
        return fail(f"{info['label']} conflicts with an existing record", 409, error=str(e))
    except Exception as e:
        return server_error(f"Failed to create {info['label'].lower()}", e)


@app.route('/api/admin/<any(remedies, "first-aid", symptoms):kind>/<item_id>', methods=['PUT'])
@admin_required
def admin_update_content(kind, item_id):
    info = CONTENT_TABLES[kind]
    data = json_body()
    updates = {k: v for k, v in data.items() if k in info['editable']}
    if not updates:
        return fail("No fields to update", 400)

    errors = info['validate'](updates, partial=True)
    if errors:
        return validation_error(errors)

    assignments = [f"{column} = ?" for column in updates] + ["updated_at = CURRENT_TIMESTAMP"]
    params = [_column_value(info, column, value) for column, value in updates.items()] + [item_id]

    try:
        with connect() as conn:
            _, changed = execute(
                conn,
                f"UPDATE {info['table']} SET {', '.join(assignments)} WHERE id = ?",
                params
            )
        if changed == 0:
            return fail(f"{info['label']} not found", 404)
        return jsonify({"success": True, "message": f"{info['label']} updated successfully"})
    except sqlite3.IntegrityError as e:
        return fail(f"{info['label']} conflicts with an existing record", 409, error=str(e))
    except Exception as e:
        return server_error(f"Failed to update {info['label'].lower()}", e)


@app.route('/api/admin/<any(remedies, "first-aid", symptoms):kind>/<item_id>', methods=['DELETE'])
@admin_required
def admin_delete_content(kind, item_id):
    info = CONTENT_TABLES[kind]
    try:
        with connect() as conn:
            _, removed = execute(conn, f"DELETE FROM {info['table']} WHERE id = ?", (item_id,))
        if removed == 0:
            return fail(f"{info['label']} not found", 404)
        return jsonify({"success": True, "message": f"{info['label']} deleted successfully"})
    except Exception as e:
        return server_error(f"Failed to delete {info['label'].lower()}", e)


@app.route('/api/admin/chat-history', methods=['GET'])
@admin_required
def admin_chat_history():
    limit = parse_int(request.args.get('limit'), 100, 1, 500)
    offset = parse_int(request.args.get('offset'), 0, 0)
    try:
        where, args = ['1=1'], []
        if request.args.get('userId'):
            where.append('user_id = ?')
            args.append(request.args['userId'])
        with connect() as conn:
            rows = fetch_all(
                conn,
                f"SELECT * FROM chat_history WHERE {' AND '.join(where)} ORDER BY timestamp DESC LIMIT ? OFFSET ?",
                (*args, limit, offset)
            )
        return jsonify({"success": True, "data": [chat_from_row(row) for row in rows]})
    except Exception as e:
        return server_error("Failed to fetch chat history", e)


@app.route('/api/admin/quiz-results', methods=['GET'])
@admin_required
def admin_quiz_results():
    limit = parse_int(request.args.get('limit'), 100, 1, 500)
    offset = parse_int(request.args.get('offset'), 0, 0)
    try:
        where, args = ['1=1'], []
        if request.args.get('userId'):
            where.append('user_id = ?')
            args.append(request.args['userId'])
        if request.args.get('quizType'):
            where.append('quiz_type = ?')
            args.append(request.args['quizType'])
        with connect() as conn:
            rows = fetch_all(
                conn,
                f"SELECT * FROM quiz_results WHERE {' AND '.join(where)} ORDER BY completed_at DESC LIMIT ? OFFSET ?",
                (*args, limit, offset)
            )
        return jsonify({"success": True, "data": [quiz_result_from_row(row) for row in rows]})
    except Exception as e:
        return server_error("Failed to fetch quiz results", e)


# Error handlers
@app.errorhandler(404)
def not_found(error):
    return fail("Endpoint not found", 404)


@app.errorhandler(405)
def method_not_allowed(error):
    return fail("Method not allowed", 405)


@app.errorhandler(429)
def rate_limited(error):
    return fail("Too many requests, please try again later", 429, error=str(error.description))


# CLI commands
@app.cli.command('init-db')
@click.option('--no-seed', is_flag=True, help='Create tables without sample content.')
def init_db_command(no_seed):
    """Create the tables and load the sample content."""
    path = app.config['DATABASE']
    print("🚀 Initializing HealthHub Database...")
    init_db(path)
    if not no_seed:
        print("🌱 Starting database seeding...")
        seed_database(path)

    with get_db(path) as conn:
        print("\n📊 Database Statistics:")
        print(f"   • Remedies: {count_rows(conn, 'remedies')}")
        print(f"   • First Aid Instructions: {count_rows(conn, 'first_aid')}")
        print(f"   • Symptoms: {count_rows(conn, 'symptoms')}")
    print("✅ Database initialization completed successfully!")


@app.cli.command('create-admin')
@click.option('--username', default='admin', show_default=True)
@click.option('--email', default='admin@healthhub.com', show_default=True)
@click.option('--password', prompt=True, hide_input=True, confirmation_prompt=True)
@click.option('--role', type=click.Choice(['admin', 'super_admin']), default='super_admin', show_default=True)
def create_admin_command(username, email, password, role):
    """Create the first admin user (no-op when one already exists)."""
    path = app.config['DATABASE']
    print("🔧 Setting up admin user...")
    init_db(path)

    with get_db(path) as conn:
        existing = fetch_one(conn, 'SELECT username, email, role FROM admin_users LIMIT 1')
        if existing:
            print("⚠️  Admin user already exists")
            print(f"   Username: {existing['username']}")
            print(f"   Email: {existing['email']}")
            print(f"   Role: {existing['role']}")
            return

        execute(
            conn,
            'INSERT INTO admin_users (username, email, password_hash, role) VALUES (?, ?, ?, ?)',
            (username, email, hash_password(password), role)
        )

    print("✅ Admin user created successfully!")
    print(f"   Username: {username}")
    print(f"   Email: {email}")
    print(f"   Role: {role}")


@app.cli.command('export-offline')
@click.option('--out', 'out_dir', default=os.path.join('.', 'assets'), show_default=True,
              help='Directory the frontend loads its offline JSON from.')
def export_offline_command(out_dir):
    """Write the JSON bundles the frontend caches for offline use."""
    path = app.config['DATABASE']
    init_db(path)
    os.makedirs(out_dir, exist_ok=True)

    with get_db(path) as conn:
        bundles = {
            'remedies_data.json': [remedy_from_row(r) for r in fetch_all(
                conn, f"SELECT {REMEDY_COLUMNS} FROM remedies ORDER BY rating DESC, title ASC")],
            'first_aid_data.json': [first_aid_from_row(r) for r in fetch_all(
                conn, f"SELECT {FIRST_AID_COLUMNS} FROM first_aid "
                      f"ORDER BY emergency DESC, {SEVERITY_ORDER_SQL} ASC, title ASC")],
            'symptoms_data.json': [symptom_from_row(r) for r in fetch_all(
                conn, f"SELECT {SYMPTOM_COLUMNS} FROM symptoms ORDER BY {SEVERITY_ORDER_SQL} ASC, name ASC")],
        }
    bundles['quiz_first_aid.json'] = {
        'quizType': 'first-aid',
        'questions': quiz.QUIZ_QUESTIONS['first-aid']
    }

    for filename, payload in bundles.items():
        with open(os.path.join(out_dir, filename), 'w', encoding='utf-8') as fh:
            json.dump(payload, fh, ensure_ascii=False, indent=2)
        count = len(payload) if isinstance(payload, list) else len(payload['questions'])
        print(f"✅ Wrote {filename} ({count} items)")


if __name__ == '__main__':
    init_db(app.config['DATABASE'])
    print("🚀 Starting HealthHub API...")
    print("🗄️ Database:", app.config['DATABASE'])
    print("📨 Kafka:", "Enabled" if kafka_service.available else "Disabled")
    print(f"🌐 Live at: http://localhost:{config.PORT}")
    app.run(debug=config.APP_ENV == 'development', host='0.0.0.0', port=config.PORT)
