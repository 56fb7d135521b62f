"""SQLAlchemy queries over active (not soft-deleted) pessoas."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from pessoas.db.models import Pessoa
from pessoas.domain.page import Page, PageRequest, total_from_slice

SORTABLE_COLUMNS = {
    "id": Pessoa.id,
    "nome": Pessoa.nome,
    "data_registro": Pessoa.data_registro,
    "data_nascimento": Pessoa.data_nascimento,
}


def active_filter():
    return Pessoa.data_exclusao.is_(None)


class PessoaRepository:
    """Read-only queries bound to a caller-owned Session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def _ordered(self, stmt: Select, request: PageRequest) -> Select:
        clauses = []
        for order in request.orders:
            column = SORTABLE_COLUMNS[order.field]
            clauses.append(column.desc() if order.descending else column.asc())
        return stmt.order_by(*clauses)

    def find_all_active(self, request: PageRequest) -> Page[Pessoa]:
        stmt = self._ordered(select(Pessoa).where(active_filter()), request)
        stmt = stmt.offset(request.offset).limit(request.page_size)
        content = list(self.session.execute(stmt).scalars().all())
        total = total_from_slice(request, len(content))
        if total is None:
            total = self.count_active()
        return Page.of(content, request, total)

    def find_active_by_id(self, pessoa_id: int) -> Optional[Pessoa]:
        stmt = select(Pessoa).where(Pessoa.id == pessoa_id, active_filter())
        return self.session.execute(stmt).scalar_one_or_none()

    def count_active(self) -> int:
        stmt = select(func.count()).select_from(Pessoa).where(active_filter())
        return int(self.session.execute(stmt).scalar_one())
