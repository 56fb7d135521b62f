"""Utility script to create (or drop) the pessoa schema."""
from __future__ import annotations

import sys

from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # ensure models are imported for metadata


def create_all() -> None:
    Base.metadata.create_all(bind=get_engine())


def drop_all() -> None:
    Base.metadata.drop_all(bind=get_engine())


if __name__ == "__main__":
    action = drop_all if "--drop" in sys.argv[1:] else create_all
    try:
        action()
        print(f"Pessoa schema: {action.__name__} ok.")
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to {action.__name__}: {exc}") from exc
