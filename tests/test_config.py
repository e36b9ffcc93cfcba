import pytest
from pydantic import ValidationError

from tek.config import Settings, get_settings


def test_defaults():
    s = Settings()
    assert s.TEK_VERBOSE is False
    assert str(s.TEK_CONFIG_FILE) == "tek.yml"


def test_overrides_and_log_level_normalisation():
    s = get_settings({"TEK_LOG_LEVEL": "debug", "TEK_VERBOSE": True})
    assert s.TEK_LOG_LEVEL == "DEBUG"
    assert s.TEK_VERBOSE is True


def test_invalid_log_level():
    with pytest.raises(ValidationError):
        Settings(TEK_LOG_LEVEL="chatty")


def test_environment(monkeypatch):
    monkeypatch.setenv("TEK_VERBOSE", "1")
    assert Settings().TEK_VERBOSE is True
