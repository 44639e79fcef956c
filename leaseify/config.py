import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Leaseify API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:5173"]

    # REST backend the client-side stores talk to
    api_base_url: str = "http://localhost:5001/api/"
    api_token: str = ""
    request_timeout: float = 10.0

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_store: str = "INFO"            # resource store lifecycle

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    def model_post_init(self, __context: object) -> None:
        """Normalise the API base URL so relative paths always join under it."""
        if not self.api_base_url.endswith("/"):
            object.__setattr__(self, "api_base_url", self.api_base_url + "/")
        if self.request_timeout <= 0:
            _config_logger.warning(
                "REQUEST_TIMEOUT=%s is not positive; falling back to 10s",
                self.request_timeout,
            )
            object.__setattr__(self, "request_timeout", 10.0)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
