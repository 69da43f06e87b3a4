"""Tests for primer.core.settings."""

from pathlib import Path

import pytest

from primer.core.errors import ConfigError
from primer.core.settings import PrimerSettings, clear_settings_cache, get_settings


class TestPrimerSettings:
    def test_defaults(self):
        settings = PrimerSettings()
        assert settings.log_level == "WARNING"
        assert settings.json_logs is None
        assert settings.workdir is None
        assert settings.seed == 42
        assert settings.service_name == "primer"

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PRIMER_LOG_LEVEL", "debug")
        monkeypatch.setenv("PRIMER_JSON_LOGS", "true")
        monkeypatch.setenv("PRIMER_WORKDIR", str(tmp_path))
        monkeypatch.setenv("PRIMER_SEED", "7")

        settings = PrimerSettings()
        assert settings.log_level == "DEBUG"
        assert settings.json_logs is True
        assert settings.workdir == Path(tmp_path)
        assert settings.seed == 7

    def test_unknown_variables_ignored(self, monkeypatch):
        monkeypatch.setenv("PRIMER_NOT_A_SETTING", "1")
        assert PrimerSettings().seed == 42

    def test_dotenv_file(self, monkeypatch, tmp_path):
        (tmp_path / ".env").write_text("PRIMER_SEED=99\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        assert PrimerSettings().seed == 99


class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_force_reload(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("PRIMER_SEED", "5")
        assert get_settings() is first
        assert get_settings(_force_reload=True).seed == 5

    def test_clear_cache(self, monkeypatch):
        get_settings()
        monkeypatch.setenv("PRIMER_SERVICE_NAME", "tutor")
        clear_settings_cache()
        assert get_settings().service_name == "tutor"

    def test_invalid_level_becomes_config_error(self, monkeypatch):
        monkeypatch.setenv("PRIMER_LOG_LEVEL", "LOUD")
        with pytest.raises(ConfigError, match="Invalid primer settings"):
            get_settings()
