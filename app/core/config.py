"""Application configuration via pydantic-settings.

Loads all settings from environment variables (and an optional ``.env``
file).  The settings object is frozen once built; ``create_app`` receives it
explicitly and exposes it to request handlers through ``app.state``.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Supabase (identity provider + document store)
    SUPABASE_URL: str
    SUPABASE_KEY: str
    CANDIDATES_TABLE: str = "candidates"

    # Admin portal
    ADMIN_NAME: str = ""
    ADMIN_PASSWORD: str = ""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # CORS
    ALLOWED_ORIGINS: str = "*"
    ALLOWED_METHODS: str = "*"
    ALLOWED_HEADERS: str = "*"

    # Front-end bundle
    STATIC_DIR: str = "build"

    # Deadline applied to every Supabase call
    EXTERNAL_CALL_TIMEOUT_SECONDS: float = 10.0

    # Logging
    LOG_LEVEL: str = "INFO"

    @staticmethod
    def split_list(value: str) -> list[str]:
        """Parse a comma-separated option; ``*`` stays a single wildcard."""
        raw = value.strip()
        if raw == "*":
            return ["*"]
        return [item.strip() for item in raw.split(",") if item.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, built on first call."""
    return Settings()  # type: ignore[call-arg]
