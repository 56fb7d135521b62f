"""
Configuration helpers for the Pessoa data-access layer.

Exposes a frozen Settings object that reads environment variables (database
URL, pool/connect timeouts, paging defaults, logging) so that repositories and
services do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    db_echo: bool
    db_pool_timeout: int
    db_connect_timeout: int
    default_page_size: int
    log_level: str
    log_format: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    app_env = (os.getenv("APP_ENV") or "dev").lower()
    page_size = _int(os.getenv("PESSOA_DEFAULT_PAGE_SIZE", "20"), 20)
    return Settings(
        app_env=app_env,
        database_url=(os.getenv("DATABASE_URL") or "").strip(),
        db_echo=_bool(os.getenv("DB_ECHO"), False),
        db_pool_timeout=_int(os.getenv("DB_POOL_TIMEOUT", "30"), 30),
        db_connect_timeout=_int(os.getenv("DB_CONNECT_TIMEOUT", "10"), 10),
        default_page_size=page_size if page_size >= 1 else 20,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_format=(os.getenv("LOG_FORMAT") or ("json" if app_env == "prod" else "text")).lower(),
    )
