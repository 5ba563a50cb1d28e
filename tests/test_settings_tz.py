from datetime import date, datetime, time

from config.settings import DEFAULT_API_URL, DEFAULT_TIMEOUT_S, load_settings
from utils.constants import CRIME_CLASSES, class_label
from utils.tz import compose_datetime_str, default_query_inputs, fmt_local, is_blank


def test_settings_defaults(monkeypatch):
    for var in ("PREDICT_API_URL", "PREDICT_API_TIMEOUT", "APP_NAME", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    s = load_settings()
    assert s.api_url == DEFAULT_API_URL
    assert s.timeout_s == DEFAULT_TIMEOUT_S
    assert s.log_level == "INFO"


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("PREDICT_API_URL", "https://predict.example.org/")
    monkeypatch.setenv("PREDICT_API_TIMEOUT", "7.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = load_settings()
    assert s.api_url == "https://predict.example.org"
    assert s.timeout_s == 7.5
    assert s.log_level == "DEBUG"


def test_bad_timeout_falls_back(monkeypatch):
    monkeypatch.setenv("PREDICT_API_TIMEOUT", "soon")
    assert load_settings().timeout_s == DEFAULT_TIMEOUT_S
    monkeypatch.setenv("PREDICT_API_TIMEOUT", "-1")
    assert load_settings().timeout_s == DEFAULT_TIMEOUT_S


def test_compose_datetime_str():
    assert compose_datetime_str(date(2024, 12, 31), time(23, 59, 59)) == "2024-12-31T23:59:00"
    assert compose_datetime_str("2024-03-02", "08:15") == "2024-03-02T08:15:00"


def test_default_query_inputs_truncates_seconds():
    d, t = default_query_inputs(datetime(2024, 5, 1, 9, 41, 37, 1234))
    assert d == date(2024, 5, 1)
    assert t == time(9, 41)


def test_is_blank():
    assert is_blank(None) and is_blank("") and is_blank("  ")
    assert not is_blank(date(2024, 1, 1))
    assert not is_blank(time(0, 0))


def test_fmt_local():
    assert fmt_local(datetime(2024, 5, 1, 14, 0, 5)) == "01/05/2024 14:00:05"


def test_class_lookup_is_immutable_and_complete():
    assert len(CRIME_CLASSES) == 57
    assert class_label(13) == "Murder"
    assert class_label(500, "fallback") == "fallback"
    try:
        CRIME_CLASSES[0] = "x"
    except TypeError:
        pass
    else:
        raise AssertionError("class lookup must be read-only")
