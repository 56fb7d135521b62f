"""
Shared fixtures: a temporary SQLite database with the pessoa schema.
"""
from __future__ import annotations

import sys
from datetime import date, datetime, timezone
from pathlib import Path

import pytest

# Garante que o pacote pessoas seja importavel durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pessoas.core import config as core_config
from pessoas.db import create_tables
from pessoas.db import session as db_session
from pessoas.db.models import Pessoa, TipoPessoa


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Configura um SQLite temporario e garante teardown completo para nao deixar o arquivo bloqueado no Windows."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    # limpa caches para forcar re-leitura de envs
    _clear_caches()

    engine = db_session.get_engine()
    create_tables.drop_all()
    create_tables.create_all()

    yield db_file

    try:
        create_tables.drop_all()
    except Exception:
        pass
    try:
        engine.dispose()
    except Exception:
        pass
    _clear_caches()
    if db_file.exists():
        try:
            db_file.unlink()
        except Exception:
            pass


DELETED_AT = datetime(2024, 5, 10, 12, 0, tzinfo=timezone.utc)


def make_pessoa(pessoa_id: int, nome: str | None = None, *, deleted: bool = False, **fields) -> Pessoa:
    fields.setdefault("tipo_pessoa", TipoPessoa.FISICA.value)
    if fields["tipo_pessoa"] == TipoPessoa.FISICA.value:
        fields.setdefault("cpf", f"{pessoa_id:011d}")
    return Pessoa(
        id=pessoa_id,
        nome=nome or f"Pessoa {pessoa_id}",
        data_exclusao=DELETED_AT if deleted else None,
        **fields,
    )


@pytest.fixture()
def seed(temp_db):
    """Insere pessoas no banco temporario; devolve os ids inseridos."""

    def _seed(*pessoas: Pessoa) -> list[int]:
        with db_session.get_session() as session:
            session.add_all(pessoas)
            session.commit()
            return [p.id for p in pessoas]

    return _seed


@pytest.fixture()
def scenario(seed):
    """Tres pessoas ativas (1, 2, 3) e uma excluida logicamente (4)."""
    seed(
        make_pessoa(1, "Ana Silva"),
        make_pessoa(2, "Bruno Souza", data_nascimento=date(1990, 3, 1)),
        make_pessoa(3, "Carla Dias"),
        make_pessoa(4, "Diego Lima", deleted=True),
    )
