"""Tests for environment-driven settings."""

from rpncalc.config import DEFAULT_CHAR_LIMIT, DEFAULT_PROMPT, Settings, load_settings


def test_defaults_from_empty_env():
    assert load_settings({}) == Settings()


def test_reads_rpncalc_variables():
    settings = load_settings({
        "RPNCALC_CHAR_LIMIT": "20",
        "RPNCALC_PROMPT": "expr",
        "RPNCALC_LOG_LEVEL": "debug",
    })
    assert settings.char_limit == 20
    assert settings.prompt == "expr"
    assert settings.log_level == "DEBUG"


def test_bad_values_fall_back():
    settings = load_settings({
        "RPNCALC_CHAR_LIMIT": "lots",
        "RPNCALC_PROMPT": "",
        "RPNCALC_LOG_LEVEL": "loud",
    })
    assert settings.char_limit == DEFAULT_CHAR_LIMIT
    assert settings.prompt == DEFAULT_PROMPT
    assert settings.log_level == "WARNING"


def test_non_positive_char_limit_falls_back():
    assert load_settings({"RPNCALC_CHAR_LIMIT": "0"}).char_limit == DEFAULT_CHAR_LIMIT


def test_defaults_to_process_environment(monkeypatch):
    monkeypatch.setenv("RPNCALC_CHAR_LIMIT", "7")
    assert load_settings().char_limit == 7
