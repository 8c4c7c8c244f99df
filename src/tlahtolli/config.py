"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from TLAHTOLLI_* environment variables or .env."""

    app_name: str = "Tlahtolli API"
    log_level: str = "INFO"

    # Redis (history, sessions, saved words)
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    key_prefix: str = "tlahtolli"
    history_limit: int = 1000

    # CLI
    api_base_url: str = "http://localhost:8000/api"

    # local dev frontends
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    model_config = SettingsConfigDict(
        env_prefix="TLAHTOLLI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
