"""Unit tests for application settings configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from blog.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_session_defaults():
    settings = Settings(_env_file=None)
    assert settings.session_cookie_name == "session"
    assert settings.session_lifetime_hours == 24


def test_secure_cookies_only_in_production():
    assert Settings(_env_file=None, app_env="production").secure_cookies is True
    assert Settings(_env_file=None, app_env="development").secure_cookies is False


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("ADMIN_USERNAME", "editor")
    monkeypatch.setenv("SESSION_LIFETIME_HOURS", "12")
    settings = Settings(_env_file=None)
    assert settings.admin_username == "editor"
    assert settings.session_lifetime_hours == 12


def test_session_lifetime_is_bounded():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, session_lifetime_hours=10**9)
