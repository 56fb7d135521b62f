"""Engine/session helpers for the SQL backend."""
from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from pessoas.core.config import get_settings

Base = declarative_base()

# DBAPI keyword used for the connect timeout, by backend
_CONNECT_TIMEOUT_ARG = {
    "sqlite": "timeout",
    "postgresql": "connect_timeout",
    "mysql": "connect_timeout",
    "mariadb": "connect_timeout",
}


def _engine_options(url: str) -> dict:
    settings = get_settings()
    backend = make_url(url).get_backend_name()
    options: dict = {"future": True, "pool_pre_ping": True, "echo": settings.db_echo}
    arg = _CONNECT_TIMEOUT_ARG.get(backend)
    if arg:
        options["connect_args"] = {arg: settings.db_connect_timeout}
    if backend != "sqlite":
        options["pool_timeout"] = settings.db_pool_timeout
    return options


@lru_cache
def get_engine():
    settings = get_settings()
    url = (settings.database_url or "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL must be configured to use the SQL backend.")
    return create_engine(url, **_engine_options(url))


@lru_cache
def _get_sessionmaker():
    return sessionmaker(bind=get_engine(), autoflush=False, autocommit=False, future=True)


@contextmanager
def get_session() -> Session:
    session: Session = _get_sessionmaker()()
    try:
        yield session
    finally:
        session.close()
