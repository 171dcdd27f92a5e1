from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Dashboard Server"
    app_version: str = "0.1.0"
    app_env: str = "development"

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 8080

    # In-memory store
    dashboard_page_size: int = 2

    # Client used by integrations to reach a running server
    dashboard_server_url: str = "http://localhost:8080"
    dashboard_client_timeout: float = 10.0

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_requests: str = "INFO"         # one line per inbound request

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
