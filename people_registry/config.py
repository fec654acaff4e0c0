from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "People Registry API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///data/people.sqlite"
    cors_origins: list[str] = ["*"]

    # Server bind
    host: str = "0.0.0.0"
    port: int = 3000

    # Row cap for the people list endpoint
    people_list_limit: int = 1000

    # Sync client: base URL resolution and transport
    api_base_url: str = ""                              # explicit override, wins when set
    api_local_base_url: str = "http://localhost:3000"
    api_public_base_url: str = ""
    client_host: str = "localhost"
    client_timeout: float = 30.0

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_requests: str = "INFO"         # inbound request log middleware
    log_level_sync: str = "INFO"             # sync client

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance, reads .env once."""
    return Settings()
