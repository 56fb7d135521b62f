"""Active-pessoa queries: paginated listing and lookup by id."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, ContextManager, Iterator, Optional, Sequence

from sqlalchemy.exc import DisconnectionError, InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.orm import Session

from pessoas.core.config import get_settings
from pessoas.core.errors import InvalidArgument, StorageUnavailable
from pessoas.db.models import Pessoa
from pessoas.db.session import get_session
from pessoas.domain.page import BIGINT_MAX, BIGINT_MIN, Page, PageRequest, parse_sort
from pessoas.repositories.pessoa_repository import SORTABLE_COLUMNS, PessoaRepository

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], ContextManager[Session]]

UNAVAILABLE_ERRORS = (OperationalError, InterfaceError, DisconnectionError, PoolTimeoutError)


def coerce_id(value: Any) -> int:
    """Accept a BIGINT-sized int or a string of ASCII digits; anything else is InvalidArgument."""
    if value is None:
        raise InvalidArgument("id is required", field="id")
    if isinstance(value, bool):
        raise InvalidArgument("id must be an integer", field="id", value=value)
    ident = None
    if isinstance(value, int):
        ident = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            raise InvalidArgument("id is required", field="id", value=value)
        # isdigit() alone also accepts "²", which int() rejects
        if text.isascii() and text.isdigit():
            ident = int(text)
    if ident is None:
        raise InvalidArgument("id must be an integer", field="id", value=value)
    if not BIGINT_MIN <= ident <= BIGINT_MAX:
        raise InvalidArgument("id is out of range", field="id", value=value)
    return ident


class PessoaActiveQueryService:
    """
    Read-only access to pessoas whose data_exclusao is NULL.

    ``session_factory`` is any zero-argument callable returning a context
    manager that yields a Session (a ``sessionmaker`` works). Each call opens
    and closes its own session.
    """

    def __init__(self, session_factory: Optional[SessionFactory] = None) -> None:
        self.session_factory: SessionFactory = session_factory or get_session

    @contextmanager
    def _repository(self, operation: str) -> Iterator[PessoaRepository]:
        try:
            with self.session_factory() as session:
                yield PessoaRepository(session)
        except UNAVAILABLE_ERRORS as exc:
            logger.warning(
                "storage unavailable during %s: %s",
                operation,
                exc.__class__.__name__,
                extra={"error_code": StorageUnavailable.code},
            )
            raise StorageUnavailable(f"storage unavailable during {operation}") from exc

    def list_active(
        self,
        page_number: int = 0,
        page_size: Optional[int] = None,
        sort: str | Sequence[str] | None = None,
    ) -> Page[Pessoa]:
        if page_size is None:
            page_size = get_settings().default_page_size
        try:
            request = PageRequest(page_number, page_size, parse_sort(sort, SORTABLE_COLUMNS))
        except InvalidArgument as exc:
            logger.debug("list_active rejected: %s", exc.message, extra={"error_code": exc.code})
            raise
        with self._repository("list_active") as repo:
            page = repo.find_all_active(request)
        logger.debug(
            "list_active returned %d of %d",
            page.number_of_elements,
            page.total_elements,
            extra={
                "page_number": request.page_number,
                "page_size": request.page_size,
                "sort": request.sort_expression,
                "total_elements": page.total_elements,
            },
        )
        return page

    def get_active_by_id(self, pessoa_id: Any) -> Optional[Pessoa]:
        try:
            ident = coerce_id(pessoa_id)
        except InvalidArgument as exc:
            logger.debug("get_active_by_id rejected: %s", exc.message, extra={"error_code": exc.code})
            raise
        with self._repository("get_active_by_id") as repo:
            pessoa = repo.find_active_by_id(ident)
        logger.debug("get_active_by_id found=%s", pessoa is not None, extra={"pessoa_id": ident})
        return pessoa

    def count_active(self) -> int:
        with self._repository("count_active") as repo:
            return repo.count_active()
