"""SQLAlchemy model for the pessoa table (soft delete via data_exclusao)."""
from __future__ import annotations

from enum import Enum

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Index,
    Integer,
    String,
    func,
)

from pessoas.domain.documentos import format_cnpj, format_cpf

from .session import Base


class TipoPessoa(str, Enum):
    FISICA = "PF"
    JURIDICA = "PJ"


class Pessoa(Base):
    __tablename__ = "pessoa"
    __table_args__ = (
        CheckConstraint("tipo_pessoa IN ('PF', 'PJ')", name="ck_pessoa_tipo_pessoa"),
        Index("ix_pessoa_data_exclusao_id", "data_exclusao", "id"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(String(255), nullable=False)
    tipo_pessoa = Column(String(2), nullable=False, default=TipoPessoa.FISICA.value)
    cpf = Column(String(11), unique=True, nullable=True)
    cnpj = Column(String(14), unique=True, nullable=True)
    nome_mae = Column(String(255), nullable=True)
    data_nascimento = Column(Date, nullable=True)
    data_registro = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    # NULL = ativa; qualquer valor = excluida logicamente
    data_exclusao = Column(DateTime(timezone=True), nullable=True)

    @property
    def ativo(self) -> bool:
        return self.data_exclusao is None

    @property
    def documento(self) -> str | None:
        if self.tipo_pessoa == TipoPessoa.JURIDICA.value:
            return self.cnpj
        return self.cpf

    @property
    def documento_formatado(self) -> str:
        if self.tipo_pessoa == TipoPessoa.JURIDICA.value:
            return format_cnpj(self.cnpj)
        return format_cpf(self.cpf)

    def __repr__(self) -> str:
        return f"<Pessoa id={self.id!r} nome={self.nome!r} ativo={self.ativo}>"
