"""Settings: defaults and environment overrides."""

import pytest
from pydantic import ValidationError

from seo_console.config import Settings, get_settings
from seo_console.core.domain_types import SiteMatchMode
from seo_console.infrastructure.fixture_store import DEFAULT_FIXTURE_PATH


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ("PORT", "HOST", "SITE_MATCH_MODE", "FIXTURE_PATH", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)  # no stray .env


def test_defaults(clean_env):
    settings = Settings()
    assert settings.port == 4000
    assert settings.host == "0.0.0.0"
    assert settings.site_match_mode is SiteMatchMode.REWRITE
    assert settings.fixture_path == DEFAULT_FIXTURE_PATH
    assert settings.log_format == "json"


def test_port_from_environment(clean_env, monkeypatch):
    monkeypatch.setenv("PORT", "8123")
    assert Settings().port == 8123


def test_mode_from_environment(clean_env, monkeypatch):
    monkeypatch.setenv("SITE_MATCH_MODE", "strict")
    assert Settings().site_match_mode is SiteMatchMode.STRICT


def test_invalid_mode_rejected(clean_env, monkeypatch):
    monkeypatch.setenv("SITE_MATCH_MODE", "lenient")
    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
