from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_PACKAGE_DIR = Path(__file__).resolve().parent
_ENV_FILES = (
    _PACKAGE_DIR.parent / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Console settings loaded from environment variables."""

    app_title: str = "Admin Console"
    app_version: str = "0.1.0"

    # REST backend
    api_base_url: str = "http://localhost:5000"
    api_prefix: str = "/api"
    request_timeout: float = 30.0

    # List presentation
    page_size: int = 10
    locale: str = "en"

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_controller: str = "INFO"       # list / form controllers

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def api_root(self) -> str:
        """Base URL joined with the API prefix, without a trailing slash."""
        prefix = self.api_prefix.strip("/")
        base = self.api_base_url.rstrip("/")
        return f"{base}/{prefix}" if prefix else base


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
