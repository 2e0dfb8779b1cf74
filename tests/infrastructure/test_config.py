"""Tests for settings loading."""

import pytest

from northwind.domain.exceptions import ValidationError
from northwind.infrastructure.config import (
    DEFAULT_DATABASE_URL,
    Settings,
    load_settings,
)


class TestSettingsFromMapping:

    def test_defaults(self):
        settings = Settings.from_mapping({})
        assert settings.database_url == DEFAULT_DATABASE_URL
        assert settings.sql_echo is False
        assert settings.log_level == "WARNING"
        assert settings.auth.username is None
        assert settings.jwt.lifetime_minutes == 60

    def test_reads_prefixed_keys(self):
        settings = Settings.from_mapping({
            "NORTHWIND_DATABASE_URL": "sqlite:///other.db",
            "NORTHWIND_SQL_ECHO": "true",
            "NORTHWIND_LOG_LEVEL": "info",
            "NORTHWIND_AUTH_USERNAME": "admin",
            "NORTHWIND_AUTH_PASSWORD": "pw",
            "NORTHWIND_JWT_KEY": "k",
            "NORTHWIND_JWT_ISSUER": "iss",
            "NORTHWIND_JWT_AUDIENCE": "aud",
            "NORTHWIND_JWT_LIFETIME_MINUTES": "15",
        })
        assert settings.database_url == "sqlite:///other.db"
        assert settings.sql_echo is True
        assert settings.log_level == "INFO"
        assert settings.auth.username == "admin"
        assert settings.auth.password == "pw"
        assert settings.jwt.key == "k"
        assert settings.jwt.issuer == "iss"
        assert settings.jwt.audience == "aud"
        assert settings.jwt.lifetime_minutes == 15

    def test_empty_values_fall_back_to_defaults(self):
        settings = Settings.from_mapping({"NORTHWIND_DATABASE_URL": "", "NORTHWIND_JWT_ISSUER": ""})
        assert settings.database_url == DEFAULT_DATABASE_URL
        assert settings.jwt.issuer is None

    def test_bad_lifetime(self):
        with pytest.raises(ValidationError, match="JWT_LIFETIME_MINUTES"):
            Settings.from_mapping({"NORTHWIND_JWT_LIFETIME_MINUTES": "soon"})

    def test_password_hidden_from_repr(self):
        settings = Settings.from_mapping({"NORTHWIND_AUTH_PASSWORD": "hunter2"})
        assert "hunter2" not in repr(settings)


class TestLoadSettings:

    def test_env_file_is_read(self, tmp_path, monkeypatch):
        monkeypatch.delenv("NORTHWIND_DATABASE_URL", raising=False)
        env_file = tmp_path / "custom.env"
        env_file.write_text("NORTHWIND_DATABASE_URL=sqlite:///from-file.db\n")

        assert load_settings(env_file).database_url == "sqlite:///from-file.db"

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        env_file = tmp_path / "custom.env"
        env_file.write_text("NORTHWIND_DATABASE_URL=sqlite:///from-file.db\n")
        monkeypatch.setenv("NORTHWIND_DATABASE_URL", "sqlite:///from-env.db")

        assert load_settings(env_file).database_url == "sqlite:///from-env.db"

    def test_missing_file_uses_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("NORTHWIND_LOG_LEVEL", "debug")
        settings = load_settings(tmp_path / "absent.env")
        assert settings.log_level == "DEBUG"

    def test_dotenv_in_working_directory(self, tmp_path, monkeypatch):
        monkeypatch.delenv("NORTHWIND_AUTH_USERNAME", raising=False)
        (tmp_path / ".env").write_text("NORTHWIND_AUTH_USERNAME=admin\n")
        monkeypatch.chdir(tmp_path)
        assert load_settings().auth.username == "admin"
