from validation import (
    parse_int, validate_chat_message, validate_contact, validate_email, validate_first_aid_payload,
    validate_login, validate_medical_info, validate_name, validate_password, validate_registration,
    validate_remedy_payload, validate_remedy_search, validate_username
)


def test_email_validation():
    """Emails are normalized to lower case"""
    cases = [
        ("test@gmail.com", True),
        ("user.name@domain.co.uk", True),
        ("invalid-email", False),
        ("missing@domain", False),
        ("", False),
        ("two@@signs.com", False),
    ]
    for email, expected in cases:
        ok, _ = validate_email(email)
        assert ok is expected, email

    assert validate_email("Test@Example.COM") == (True, "test@example.com")


def test_username_and_password_rules():
    assert validate_username("alice1") == (True, "alice1")
    assert validate_username("ab")[0] is False
    assert validate_username("alice_1")[0] is False
    assert validate_username("a" * 31)[0] is False

    assert validate_password("secret")[0] is True
    assert validate_password("12345")[0] is False
    assert validate_password("x" * 129)[0] is False
    assert validate_password(None)[0] is False


def test_name_is_optional():
    assert validate_name(None) == (True, None)
    assert validate_name("  Mary-Jane O'Neil ") == (True, "Mary-Jane O'Neil")
    assert validate_name("R2D2")[0] is False
    assert validate_name("x" * 101)[0] is False


def test_registration_collects_every_error():
    cleaned, errors = validate_registration({'username': 'ab', 'email': 'nope', 'password': '1'})
    assert len(errors) == 3

    cleaned, errors = validate_registration({
        'username': 'bob42', 'email': 'Bob@Example.com', 'password': 'secret123'
    })
    assert errors == []
    assert cleaned['email'] == 'bob@example.com'
    assert cleaned['full_name'] is None


def test_login_accepts_email_in_place_of_username():
    cleaned, errors = validate_login({'email': 'bob@example.com', 'password': 'pw'})
    assert errors == []
    assert cleaned['username'] == 'bob@example.com'

    _, errors = validate_login({})
    assert '"username" is required' in errors
    assert '"password" is required' in errors


def test_parse_int_falls_back_and_clamps():
    assert parse_int('abc', 10) == 10
    assert parse_int(None, 7) == 7
    assert parse_int('500', 50, 1, 100) == 100
    assert parse_int('-3', 0, 0) == 0
    assert parse_int('25', 50, 1, 100) == 25


def test_remedy_search_query():
    cleaned, errors = validate_remedy_search({})
    assert errors == []
    assert cleaned == {'limit': 50, 'offset': 0}

    cleaned, errors = validate_remedy_search({'limit': '20', 'offset': '40', 'category': 'Skin'})
    assert errors == []
    assert cleaned == {'limit': 20, 'offset': 40, 'category': 'Skin'}

    for bad in ({'limit': '0'}, {'limit': '101'}, {'limit': 'abc'}, {'offset': '-1'},
                {'difficulty': 'extreme'}, {'search': 'x' * 201}):
        _, errors = validate_remedy_search(bad)
        assert errors, bad


def test_chat_message():
    cleaned, errors = validate_chat_message({'message': '  I have a cough  ', 'userId': 42})
    assert errors == []
    assert cleaned == {'message': 'I have a cough', 'userId': '42'}

    assert validate_chat_message({'message': '   '})[1]
    assert validate_chat_message({'message': 'x' * 1001})[1]
    assert validate_chat_message({'message': 'hi', 'userId': 'u' * 101})[1]
    assert validate_chat_message(None)[1]


def test_contact_validation():
    _, errors = validate_contact({})
    assert errors == ['Name is required', 'Phone is required']

    assert validate_contact({}, partial=True) == ({}, [])

    _, errors = validate_contact({'name': 'Mom', 'phone': 'call me'})
    assert errors == ['Phone number format is invalid']

    cleaned, errors = validate_contact({'name': ' Mom ', 'phone': '+1 (555) 010-0000', 'is_favorite': 1})
    assert errors == []
    assert cleaned == {'name': 'Mom', 'phone': '+1 (555) 010-0000', 'is_favorite': True}


def test_medical_info_joins_lists():
    cleaned, errors = validate_medical_info({'allergies': ['nuts', 'dust'], 'blood_type': 'O+'})
    assert errors == []
    assert cleaned == {'allergies': 'nuts, dust', 'blood_type': 'O+'}

    _, errors = validate_medical_info({'blood_type': 'x' * 11})
    assert errors


def test_admin_payloads():
    errors = validate_remedy_payload({})
    assert '"title" is required' in errors
    assert '"ingredients" is required' in errors

    assert validate_remedy_payload({'rating': 4.2}, partial=True) == []
    assert validate_remedy_payload({'rating': 7}, partial=True)
    assert validate_remedy_payload({'ingredients': 'honey'}, partial=True) == ['"ingredients" must be an array']

    assert validate_first_aid_payload({'severity': 'extreme'}, partial=True)
    assert validate_first_aid_payload({'severity': 'critical'}, partial=True) == []
