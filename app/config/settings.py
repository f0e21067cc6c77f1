from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "127.0.0.1"
    port: int = 8000

    session_secret_key: str = "change-me"
    session_cookie_name: str = "resource_session"
    session_max_age_seconds: int | None = None

    text_max_length: int = 100
    min_publication_year: int = 1500
    digital_min_size_mb: float = 1.0
    digital_max_size_mb: float = 100.0
    physical_min_pages: int | None = None
