"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache), single instance per process
    - Every setting has a default: the stub runs with no environment at all

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Site match mode is a setting, not a code path chosen at import time:
      strict and rewrite behavior are never mixed within one process
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from seo_console.core.domain_types import SiteMatchMode
from seo_console.infrastructure.fixture_store import DEFAULT_FIXTURE_PATH


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = 4000

    # Fixture data
    fixture_path: Path = DEFAULT_FIXTURE_PATH
    site_match_mode: SiteMatchMode = SiteMatchMode.REWRITE

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
