from GroupSecurity.security_config import SECURITY_SETTINGS, feature_enabled, get_bool, get_int, get_str


def test_defaults():
    assert SECURITY_SETTINGS["GROUP_CREATE_COOLDOWN"] == 60
    assert SECURITY_SETTINGS["JOIN_REQUEST_COOLDOWN"] == 10


def test_get_int_falls_back_on_garbage(monkeypatch):
    monkeypatch.setenv("GROUP_CREATE_COOLDOWN", "soon")
    assert get_int("GROUP_CREATE_COOLDOWN", 60) == 60
    monkeypatch.setenv("GROUP_CREATE_COOLDOWN", "90")
    assert get_int("GROUP_CREATE_COOLDOWN", 60) == 90


def test_get_bool_and_get_str(monkeypatch):
    monkeypatch.setenv("PROMETHEUS_ENABLED", " TRUE ")
    assert get_bool("PROMETHEUS_ENABLED") is True
    monkeypatch.setenv("PROMETHEUS_ENABLED", "yes")
    assert get_bool("PROMETHEUS_ENABLED", True) is False
    monkeypatch.setenv("LOG_LEVEL", "   ")
    assert get_str("LOG_LEVEL", "INFO") == "INFO"


def test_feature_enabled_reads_env_at_call_time(monkeypatch):
    monkeypatch.delenv("FEATURE_AUDIT_TRAIL", raising=False)
    assert feature_enabled("audit-trail") is True
    assert feature_enabled("audit-trail", False) is False
    monkeypatch.setenv("FEATURE_AUDIT_TRAIL", "false")
    assert feature_enabled("audit-trail") is False
