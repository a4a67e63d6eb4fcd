"""
Unit tests for settings.
It asserts expected behavior and guards against regressions in the corresponding component.
"""

import pytest

from src.common import settings as settings_module


def test_load_settings_success() -> None:
    settings_module.get_settings.cache_clear()
    settings = settings_module.get_settings()
    assert settings.PROJECT_NAME
    assert settings.LOG_LEVEL in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def test_load_settings_missing_required(monkeypatch: pytest.MonkeyPatch) -> None:
    settings_module.get_settings.cache_clear()
    monkeypatch.delenv("PROJECT_NAME", raising=False)
    with pytest.raises(RuntimeError, match="Missing required environment variables"):
        settings_module.load_settings(load_env=False)


def test_load_settings_rejects_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(RuntimeError, match="Invalid environment configuration"):
        settings_module.load_settings(load_env=False)


def test_log_level_is_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert settings_module.load_settings(load_env=False).LOG_LEVEL == "DEBUG"
