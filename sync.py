"""Offline sync: the client pushes what it queued while offline and the server
replaces its copy for that user. Last write wins; every replace_* runs a
delete followed by inserts inside the caller's transaction.
"""
import uuid
from datetime import datetime, timezone

from database import execute, fetch_one
from quiz import QUIZ_QUESTIONS
from records import encode_json
from validation import validate_contact

MAX_SYNC_ITEMS = 500
MAX_QUIZ_QUESTIONS = 1000


def _first(entry, *keys):
    for key in keys:
        value = entry.get(key)
        if value not in (None, ''):
            return value
    return None


def _now():
    return datetime.now(timezone.utc).isoformat()


def _timestamp(entry, *keys):
    """Client timestamp when it is a string, else the server time"""
    value = _first(entry, *keys)
    return value if isinstance(value, str) else _now()


def replace_favorites(conn, user_id, favorites):
    execute(conn, 'DELETE FROM user_favorites WHERE user_id = ?', (user_id,))

    inserted, skipped = 0, 0
    seen = set()
    for fav in favorites[:MAX_SYNC_ITEMS]:
        if not isinstance(fav, dict):
            skipped += 1
            continue
        remedy_id = _first(fav, 'remedy_id', 'remedyId')
        first_aid_id = _first(fav, 'first_aid_id', 'firstAidId')
        if bool(remedy_id) == bool(first_aid_id):
            skipped += 1
            continue
        if not isinstance(remedy_id or first_aid_id, str):
            skipped += 1
            continue

        key = ('remedy', remedy_id) if remedy_id else ('first_aid', first_aid_id)
        if key in seen:
            skipped += 1
            continue

        table = 'remedies' if remedy_id else 'first_aid'
        if not fetch_one(conn, f'SELECT id FROM {table} WHERE id = ?', (key[1],)):
            skipped += 1
            continue

        execute(
            conn,
            'INSERT INTO user_favorites (user_id, remedy_id, first_aid_id) VALUES (?, ?, ?)',
            (user_id, remedy_id, first_aid_id)
        )
        seen.add(key)
        inserted += 1

    return {'inserted': inserted, 'skipped': skipped + max(0, len(favorites) - MAX_SYNC_ITEMS)}


def replace_chat_history(conn, user_id, history):
    execute(conn, 'DELETE FROM chat_history WHERE user_id = ?', (user_id,))

    inserted, skipped = 0, 0
    for entry in history[:MAX_SYNC_ITEMS]:
        if not isinstance(entry, dict):
            skipped += 1
            continue
        user_message = _first(entry, 'user_message', 'userMessage')
        bot_response = _first(entry, 'bot_response', 'botResponse')
        if not isinstance(user_message, str) or not isinstance(bot_response, str):
            skipped += 1
            continue
        remedies = _first(entry, 'suggested_remedies', 'suggestedRemedies') or []
        if not isinstance(remedies, list):
            remedies = []

        execute(
            conn,
            """
            INSERT INTO chat_history (id, user_id, user_message, bot_response, suggested_remedies, timestamp)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (
                uuid.uuid4().hex,
                user_id,
                user_message,
                bot_response,
                encode_json(remedies),
                _timestamp(entry, 'timestamp'),
            )
        )
        inserted += 1

    return {'inserted': inserted, 'skipped': skipped + max(0, len(history) - MAX_SYNC_ITEMS)}


def _quiz_entries(progress):
    for quiz_type, value in progress.items():
        items = value if isinstance(value, list) else [value]
        for item in items:
            yield quiz_type, item


def replace_quiz_results(conn, user_id, progress):
    execute(conn, 'DELETE FROM quiz_results WHERE user_id = ?', (user_id,))

    inserted, skipped = 0, []
    for quiz_type, item in _quiz_entries(progress):
        if inserted >= MAX_SYNC_ITEMS:
            skipped.append(quiz_type)
            continue
        if quiz_type not in QUIZ_QUESTIONS or not isinstance(item, dict):
            skipped.append(quiz_type)
            continue
        try:
            score = int(item.get('score'))
            total = int(_first(item, 'totalQuestions', 'total_questions', 'total'))
        except (TypeError, ValueError, OverflowError):
            skipped.append(quiz_type)
            continue
        if total <= 0 or total > MAX_QUIZ_QUESTIONS or score < 0 or score > total:
            skipped.append(quiz_type)
            continue
        answers = item.get('answers') or {}
        if not isinstance(answers, dict):
            answers = {}

        execute(
            conn,
            """
            INSERT INTO quiz_results (id, user_id, quiz_type, score, total_questions, answers, completed_at)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (
                uuid.uuid4().hex,
                user_id,
                quiz_type,
                score,
                total,
                encode_json(answers),
                _timestamp(item, 'completedAt', 'completed_at'),
            )
        )
        inserted += 1

    return {'inserted': inserted, 'skipped': skipped}


def replace_emergency_contacts(conn, user_id, contacts):
    execute(conn, 'DELETE FROM emergency_contacts WHERE user_id = ?', (user_id,))

    inserted, skipped = 0, 0
    for contact in contacts[:MAX_SYNC_ITEMS]:
        cleaned, errors = validate_contact(contact)
        if errors:
            skipped += 1
            continue
        execute(
            conn,
            'INSERT INTO emergency_contacts (user_id, name, phone, relation, is_favorite) VALUES (?, ?, ?, ?, ?)',
            (user_id, cleaned['name'], cleaned['phone'], cleaned.get('relation'),
             1 if cleaned.get('is_favorite') else 0)
        )
        inserted += 1

    return {'inserted': inserted, 'skipped': skipped}


def upsert_medical_info(conn, user_id, info):
    """COALESCE-update the user's medical info, creating it if missing. Returns True when created."""
    existing = fetch_one(conn, 'SELECT id FROM user_medical_info WHERE user_id = ?', (user_id,))
    values = (
        info.get('blood_type'), info.get('allergies'), info.get('medications'),
        info.get('medical_conditions'), info.get('emergency_contact'), info.get('emergency_phone'),
    )
    if existing:
        execute(
            conn,
            """
            UPDATE user_medical_info
            SET blood_type = COALESCE(?, blood_type),
                allergies = COALESCE(?, allergies),
                medications = COALESCE(?, medications),
                medical_conditions = COALESCE(?, medical_conditions),
                emergency_contact = COALESCE(?, emergency_contact),
                emergency_phone = COALESCE(?, emergency_phone),
                updated_at = CURRENT_TIMESTAMP
            WHERE user_id = ?
            """,
            (*values, user_id)
        )
        return False

    execute(
        conn,
        """
        INSERT INTO user_medical_info
        (user_id, blood_type, allergies, medications, medical_conditions, emergency_contact, emergency_phone)
        VALUES (?, ?, ?, ?, ?, ?, ?)
        """,
        (user_id, *values)
    )
    return True
