"""Soft-delete aware read access to the pessoa table."""

from pessoas.core.errors import InvalidArgument, PessoaError, StorageUnavailable
from pessoas.domain.page import Page, PageRequest
from pessoas.services.pessoa_query_service import PessoaActiveQueryService

__all__ = [
    "InvalidArgument",
    "Page",
    "PageRequest",
    "PessoaActiveQueryService",
    "PessoaError",
    "StorageUnavailable",
]
