"""Application configuration via pydantic-settings.

Loads all settings from environment variables with sensible defaults.
A global `settings` singleton is available for import throughout the app.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Supabase (relational store)
    SUPABASE_URL: str
    SUPABASE_KEY: str
    SUPABASE_TIMEOUT: int = 10

    # Redis (response cache)
    REDIS_URL: str = "redis://localhost:6379/0"
    REDIS_SOCKET_TIMEOUT: float = 2.0

    # Auth
    JWT_SECRET: str = "change-me-in-production"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # Bootstrap admin (created on startup when the users table is empty)
    ADMIN_USERNAME: str = "admin"
    ADMIN_EMAIL: str = "admin@example.com"
    ADMIN_PASSWORD: str = ""

    # HTTP
    API_PREFIX: str = "/api/v1"
    ALLOWED_ORIGINS: str = "*"
    RATE_LIMIT_PER_SECOND: float = 10.0
    RATE_LIMIT_BURST: int = 10

    # Seeding
    SEED_SAMPLE_DATA: bool = True

    # Runtime
    ENVIRONMENT: str = "development"
    PORT: int = 8080

    # Logging
    LOG_LEVEL: str = "INFO"


settings = Settings()  # type: ignore[call-arg]
