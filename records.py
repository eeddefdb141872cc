"""Row shaping for the content tables.

Several columns store JSON arrays/objects as TEXT. They are encoded on the
way in and decoded on the way out so that API clients only ever see real
lists and dicts.
"""
import json

REMEDY_JSON_FIELDS = ('ingredients', 'instructions')
FIRST_AID_JSON_FIELDS = ('steps',)
SYMPTOM_JSON_FIELDS = ('common_causes', 'recommendations', 'when_to_see_doctor', 'related_remedies')

SEVERITY_RANK = {'critical': 1, 'high': 2, 'medium': 3, 'low': 4}

# SQL fragment ordering severities critical -> low
SEVERITY_ORDER_SQL = (
    "CASE severity WHEN 'critical' THEN 1 WHEN 'high' THEN 2 "
    "WHEN 'medium' THEN 3 WHEN 'low' THEN 4 ELSE 5 END"
)


def encode_json(value):
    return json.dumps(value if value is not None else [])


def decode_json(value, default=None):
    """Decode a JSON text column; empty or NULL gives the default ([] unless told otherwise)"""
    if default is None:
        default = []
    if value is None or value == '':
        return default
    if isinstance(value, (list, dict)):
        return value
    try:
        return json.loads(value)
    except (TypeError, ValueError):
        return default


def remedy_from_row(row):
    remedy = dict(row)
    for field in REMEDY_JSON_FIELDS:
        if field in remedy:
            remedy[field] = decode_json(remedy[field])
    if remedy.get('rating') is not None:
        remedy['rating'] = float(remedy['rating'])
    return remedy


def first_aid_from_row(row):
    item = dict(row)
    if 'steps' in item:
        item['steps'] = decode_json(item['steps'])
    if 'emergency' in item:
        item['emergency'] = bool(item['emergency'])
    return item


def symptom_from_row(row):
    symptom = dict(row)
    for field in SYMPTOM_JSON_FIELDS:
        if field in symptom:
            symptom[field] = decode_json(symptom[field])
    return symptom


def contact_from_row(row):
    contact = dict(row)
    if 'is_favorite' in contact:
        contact['is_favorite'] = bool(contact['is_favorite'])
    return contact


def chat_from_row(row):
    entry = dict(row)
    remedies = decode_json(entry.get('suggested_remedies'))
    entry['suggested_remedies'] = remedies
    entry['suggestedRemedies'] = remedies
    entry['userMessage'] = entry.get('user_message')
    entry['botResponse'] = entry.get('bot_response')
    if 'user_id' in entry:
        entry['userId'] = entry['user_id']
    return entry


def percentage(score, total):
    if not total:
        return 0
    # Round half up, matching Math.round on the client
    return int(score * 100 / total + 0.5)


def get_grade(percent):
    if percent >= 90:
        return 'A+'
    if percent >= 80:
        return 'A'
    if percent >= 70:
        return 'B'
    if percent >= 60:
        return 'C'
    if percent >= 50:
        return 'D'
    return 'F'


def quiz_result_from_row(row):
    result = dict(row)
    result['answers'] = decode_json(result.get('answers'), default={})
    result['percentage'] = percentage(result['score'], result['total_questions'])
    result['grade'] = get_grade(result['percentage'])
    return result


def pagination(total, limit, offset):
    return {
        'total': total,
        'limit': limit,
        'offset': offset,
        'hasMore': offset + limit < total,
    }
