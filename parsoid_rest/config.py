"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Default content versions are major.minor.patch strings (validated)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: works out-of-the-box without a .env
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from parsoid_rest.core.domain_types import is_content_version


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Content negotiation — used when a client states no version
    default_html_version: str = "2.1.0"
    default_pagebundle_version: str = "2.1.0"

    @field_validator("default_html_version", "default_pagebundle_version")
    @classmethod
    def check_version_shape(cls, v: str) -> str:
        v = v.strip()
        if not is_content_version(v):
            raise ValueError(f"content version must look like 1.2.3, got {v!r}")
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
