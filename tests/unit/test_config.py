"""Settings loading from environment variables."""

import pytest

from lanediff import config
from lanediff.config import Settings, get_settings


def test_defaults(monkeypatch) -> None:
    for name in ("WARD_ANOMALY_THRESHOLD", "LOG_LEVEL", "DEBUG_MODE"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.ward_anomaly_threshold == 200
    assert settings.log_level == "INFO"
    assert settings.debug_mode is False
    assert settings.effective_log_level == "INFO"


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("WARD_ANOMALY_THRESHOLD", "150")
    monkeypatch.setenv("log_level", "warning")
    monkeypatch.setenv("DEBUG_MODE", "false")

    settings = Settings(_env_file=None)

    assert settings.ward_anomaly_threshold == 150
    assert settings.effective_log_level == "WARNING"


def test_debug_mode_forces_debug_level(monkeypatch) -> None:
    monkeypatch.setenv("DEBUG_MODE", "1")

    assert Settings(_env_file=None).effective_log_level == "DEBUG"


def test_negative_threshold_rejected(monkeypatch) -> None:
    monkeypatch.setenv("WARD_ANOMALY_THRESHOLD", "-1")

    with pytest.raises(ValueError):
        Settings(_env_file=None)


def test_get_settings_is_singleton(monkeypatch) -> None:
    monkeypatch.setattr(config, "_settings", None)

    assert get_settings() is get_settings()
