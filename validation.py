import re

EMAIL_PATTERN = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'

DIFFICULTIES = ('easy', 'medium', 'hard')
FIRST_AID_SEVERITIES = ('low', 'medium', 'high', 'critical')
SYMPTOM_SEVERITIES = ('low', 'medium', 'high')
SEARCH_TYPES = ('remedy', 'first_aid', 'symptom')


# Field validation functions
def validate_email(email):
    """Validate email format with better error handling"""
    if not email or not isinstance(email, str):
        return False, "Email is required"

    email = email.strip()

    if '@' not in email:
        return False, "Email must contain @ symbol"

    if len(email) < 5:
        return False, "Email is too short"

    if len(email) > 100:
        return False, "Email is too long"

    parts = email.split('@')
    if len(parts) != 2:
        return False, "Email must contain exactly one @ symbol"

    local_part, domain = parts

    if len(local_part) == 0:
        return False, "Local part (before @) cannot be empty"

    if '.' not in domain:
        return False, "Domain must contain a dot"

    if '..' in email:
        return False, "Email cannot contain consecutive dots"

    if email.startswith('.') or email.endswith('.'):
        return False, "Email cannot start or end with a dot"

    if not re.match(EMAIL_PATTERN, email):
        return False, "Email format is invalid"

    return True, email.lower()


def validate_username(username):
    if not username or not isinstance(username, str):
        return False, "Username is required"

    username = username.strip()

    if not username.isalnum() or not username.isascii():
        return False, "Username must only contain letters and numbers"

    if len(username) < 3:
        return False, "Username must be at least 3 characters long"

    if len(username) > 30:
        return False, "Username must be at most 30 characters long"

    return True, username


def validate_password(password):
    """Validate password length"""
    if not password or not isinstance(password, str):
        return False, "Password is required"

    if len(password) < 6:
        return False, "Password must be at least 6 characters long"

    if len(password) > 128:
        return False, "Password must be at most 128 characters long"

    return True, "Password is valid"


def validate_name(name):
    """Validate an optional full name"""
    if name is None or name == '':
        return True, None

    if not isinstance(name, str):
        return False, "Full name must be a string"

    if len(name) > 100:
        return False, "Full name must be at most 100 characters"

    # Letters (any script), spaces and basic punctuation
    if not re.match(r"^[^\W\d_]+(?:[\s\-'\.][^\W\d_]*)*$", name.strip()):
        return False, "Full name can only contain letters, spaces, hyphens, and apostrophes"

    return True, name.strip()


def parse_int(value, default, minimum=None, maximum=None):
    """Lenient integer query parsing: bad values fall back to the default, bounds are clamped"""
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    if minimum is not None and number < minimum:
        number = minimum
    if maximum is not None and number > maximum:
        number = maximum
    return number


def _strict_int(value, name, minimum=None, maximum=None, errors=None):
    try:
        number = int(value)
    except (TypeError, ValueError):
        errors.append(f'"{name}" must be a number')
        return None
    if isinstance(value, str) and not re.match(r'^-?\d+$', value.strip()):
        errors.append(f'"{name}" must be an integer')
        return None
    if minimum is not None and number < minimum:
        errors.append(f'"{name}" must be greater than or equal to {minimum}')
        return None
    if maximum is not None and number > maximum:
        errors.append(f'"{name}" must be less than or equal to {maximum}')
        return None
    return number


# Request schemas: each returns (cleaned, errors)
def validate_registration(data):
    data = data if isinstance(data, dict) else {}
    errors = []
    cleaned = {}

    ok, value = validate_username(data.get('username'))
    if ok:
        cleaned['username'] = value
    else:
        errors.append(value)

    ok, value = validate_email(data.get('email'))
    if ok:
        cleaned['email'] = value
    else:
        errors.append(value)

    ok, message = validate_password(data.get('password'))
    if ok:
        cleaned['password'] = data['password']
    else:
        errors.append(message)

    ok, value = validate_name(data.get('full_name'))
    if ok:
        cleaned['full_name'] = value
    else:
        errors.append(value)

    return cleaned, errors


def validate_login(data):
    data = data if isinstance(data, dict) else {}
    errors = []
    username = data.get('username') or data.get('email')
    password = data.get('password')

    if not username or not isinstance(username, str):
        errors.append('"username" is required')
    if not password or not isinstance(password, str):
        errors.append('"password" is required')

    if errors:
        return {}, errors
    return {'username': username.strip(), 'password': password}, []


def validate_remedy_search(args):
    errors = []
    cleaned = {'limit': 50, 'offset': 0}

    category = args.get('category')
    if category:
        cleaned['category'] = category

    difficulty = args.get('difficulty')
    if difficulty:
        if difficulty not in DIFFICULTIES:
            errors.append('"difficulty" must be one of [easy, medium, hard]')
        else:
            cleaned['difficulty'] = difficulty

    search = args.get('search')
    if search:
        if len(search) > 200:
            errors.append('"search" length must be less than or equal to 200 characters long')
        else:
            cleaned['search'] = search

    if args.get('limit') is not None:
        limit = _strict_int(args.get('limit'), 'limit', 1, 100, errors)
        if limit is not None:
            cleaned['limit'] = limit

    if args.get('offset') is not None:
        offset = _strict_int(args.get('offset'), 'offset', 0, None, errors)
        if offset is not None:
            cleaned['offset'] = offset

    return cleaned, errors


def validate_chat_message(data):
    data = data if isinstance(data, dict) else {}
    errors = []
    message = data.get('message')

    if not isinstance(message, str) or not message.strip():
        errors.append('"message" is required')
    elif len(message) > 1000:
        errors.append('"message" length must be less than or equal to 1000 characters long')

    user_id = data.get('userId')
    if user_id is not None:
        if not isinstance(user_id, (str, int)) or len(str(user_id)) > 100:
            errors.append('"userId" must be a string of at most 100 characters')

    if errors:
        return {}, errors
    cleaned = {'message': message.strip()}
    if user_id is not None:
        cleaned['userId'] = str(user_id)
    return cleaned, []


def validate_contact(data, partial=False):
    data = data if isinstance(data, dict) else {}
    errors = []
    cleaned = {}

    for field, max_len in (('name', 100), ('phone', 20), ('relation', 50)):
        value = data.get(field)
        if value is None or value == '':
            if field in ('name', 'phone') and not partial:
                errors.append(f"{field.capitalize()} is required")
            continue
        if not isinstance(value, str):
            errors.append(f'"{field}" must be a string')
        elif len(value) > max_len:
            errors.append(f'"{field}" must be at most {max_len} characters')
        else:
            cleaned[field] = value.strip()

    phone = cleaned.get('phone')
    if phone and not re.match(r'^[0-9+\-\s()]{3,20}$', phone):
        errors.append("Phone number format is invalid")

    if 'is_favorite' in data and data['is_favorite'] is not None:
        cleaned['is_favorite'] = bool(data['is_favorite'])

    return cleaned, errors


MEDICAL_INFO_FIELDS = (
    'blood_type', 'allergies', 'medications', 'medical_conditions',
    'emergency_contact', 'emergency_phone'
)


def validate_medical_info(data):
    data = data if isinstance(data, dict) else {}
    errors = []
    cleaned = {}
    for field in MEDICAL_INFO_FIELDS:
        value = data.get(field)
        if value is None:
            continue
        if isinstance(value, list):
            value = ', '.join(str(v) for v in value)
        if not isinstance(value, str):
            errors.append(f'"{field}" must be a string')
            continue
        cleaned[field] = value
    blood_type = cleaned.get('blood_type')
    if blood_type and len(blood_type) > 10:
        errors.append('"blood_type" must be at most 10 characters')
    return cleaned, errors


def _require(data, fields, errors):
    for field in fields:
        value = data.get(field)
        if value is None or value == '' or value == []:
            errors.append(f'"{field}" is required')


def _require_list(data, fields, errors):
    for field in fields:
        if field in data and data[field] is not None and not isinstance(data[field], list):
            errors.append(f'"{field}" must be an array')


def validate_remedy_payload(data, partial=False):
    data = data if isinstance(data, dict) else {}
    errors = []
    if not partial:
        _require(data, ('title', 'description', 'category', 'difficulty',
                        'prep_time', 'ingredients', 'instructions'), errors)
    _require_list(data, ('ingredients', 'instructions'), errors)
    if data.get('difficulty') is not None and data['difficulty'] not in DIFFICULTIES:
        errors.append('"difficulty" must be one of [easy, medium, hard]')
    if data.get('rating') is not None:
        try:
            rating = float(data['rating'])
            if rating < 0 or rating > 5:
                errors.append('"rating" must be between 0 and 5')
        except (TypeError, ValueError):
            errors.append('"rating" must be a number')
    return errors


def validate_first_aid_payload(data, partial=False):
    data = data if isinstance(data, dict) else {}
    errors = []
    if not partial:
        _require(data, ('title', 'category', 'description', 'steps', 'severity'), errors)
    _require_list(data, ('steps',), errors)
    if data.get('severity') is not None and data['severity'] not in FIRST_AID_SEVERITIES:
        errors.append('"severity" must be one of [low, medium, high, critical]')
    return errors


def validate_symptom_payload(data, partial=False):
    data = data if isinstance(data, dict) else {}
    errors = []
    if not partial:
        _require(data, ('name', 'severity', 'description', 'common_causes',
                        'recommendations', 'when_to_see_doctor'), errors)
    _require_list(data, ('common_causes', 'recommendations', 'when_to_see_doctor',
                         'related_remedies'), errors)
    if data.get('severity') is not None and data['severity'] not in SYMPTOM_SEVERITIES:
        errors.append('"severity" must be one of [low, medium, high]')
    return errors
