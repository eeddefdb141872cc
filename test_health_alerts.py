from health_alerts import AlertManager


def test_critical_phrases():
    alert = AlertManager().analyze("I think I'm having a Heart Attack")
    assert alert['alert_level'] == 'CRITICAL'
    assert alert['matched'] == 'heart attack'
    assert alert['suggested_action'] == 'IMMEDIATE_MEDICAL_ATTENTION'


def test_urgent_phrases():
    alert = AlertManager().analyze("I got a burn from the stove")
    assert alert['alert_level'] == 'URGENT'
    assert alert['suggested_action'] == 'SEEK_MEDICAL_ADVICE_SOON'


def test_critical_wins_over_urgent():
    alert = AlertManager().analyze("high fever and now a seizure")
    assert alert['alert_level'] == 'CRITICAL'


def test_no_alert():
    manager = AlertManager()
    assert manager.analyze("hello there") is None
    assert manager.analyze("") is None
    assert manager.analyze(None) is None
