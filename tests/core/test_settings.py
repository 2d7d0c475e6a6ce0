"""Tests for anukit.core.settings module.

Covers:
- AnuKitSettings defaults
- ANUKIT_ environment variable override
- Validation of async_max_workers
- get_settings caching and reset
"""

import pytest
from pydantic import ValidationError

from anukit.core.settings import AnuKitSettings, get_settings, reset_settings


class TestAnuKitSettingsDefaults:
    def test_default_log_level(self):
        assert AnuKitSettings().log_level == "INFO"

    def test_default_json_logs_auto(self):
        assert AnuKitSettings().json_logs is None

    def test_default_service_name(self):
        assert AnuKitSettings().service_name == "anukit"

    def test_default_async_workers(self):
        assert AnuKitSettings().async_max_workers == 4


class TestAnuKitSettingsEnvOverride:
    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("ANUKIT_LOG_LEVEL", "DEBUG")
        assert AnuKitSettings().log_level == "DEBUG"

    def test_json_logs_from_env(self, monkeypatch):
        monkeypatch.setenv("ANUKIT_JSON_LOGS", "true")
        assert AnuKitSettings().json_logs is True

    def test_async_workers_from_env(self, monkeypatch):
        monkeypatch.setenv("ANUKIT_ASYNC_MAX_WORKERS", "8")
        assert AnuKitSettings().async_max_workers == 8

    def test_unprefixed_env_ignored(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert AnuKitSettings().log_level == "INFO"

    def test_async_workers_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("ANUKIT_ASYNC_MAX_WORKERS", "0")
        with pytest.raises(ValidationError):
            AnuKitSettings()


class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_reset_rereads_environment(self, monkeypatch):
        assert get_settings().service_name == "anukit"
        monkeypatch.setenv("ANUKIT_SERVICE_NAME", "billing")
        assert get_settings().service_name == "anukit"
        reset_settings()
        assert get_settings().service_name == "billing"
