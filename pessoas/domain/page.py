"""Offset-based paging value objects (request, sort orders, result page)."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, Iterator, Sequence, TypeVar

from pessoas.core.errors import InvalidArgument

T = TypeVar("T")
U = TypeVar("U")

ASC = "asc"
DESC = "desc"
TIEBREAK_FIELD = "id"

# signed 64-bit range of SQL BIGINT; ids, OFFSET and LIMIT must fit in it
BIGINT_MIN = -(2**63)
BIGINT_MAX = 2**63 - 1


@dataclass(frozen=True)
class Order:
    field: str
    direction: str = ASC

    @property
    def descending(self) -> bool:
        return self.direction == DESC


def _require_int(name: str, value: Any, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer", field=name, value=value)
    if value < minimum:
        raise InvalidArgument(f"{name} must be >= {minimum}", field=name, value=value)
    return value


def parse_sort(sort: str | Sequence[str] | None, allowed: Iterable[str]) -> tuple[Order, ...]:
    """
    Parse ``"campo"`` / ``"campo,asc|desc"`` expressions into Orders.

    Accepts a single expression or a sequence of them. The tiebreak field is
    appended ascending unless already present, so the ordering is total.
    """
    allowed_fields = set(allowed)
    if sort is None:
        raw: Sequence[str] = ()
    elif isinstance(sort, str):
        raw = (sort,)
    else:
        raw = tuple(sort)

    orders: list[Order] = []
    seen: set[str] = set()
    for expression in raw:
        if not isinstance(expression, str) or not expression.strip():
            raise InvalidArgument("sort expression must be a non-empty string", field="sort", value=expression)
        parts = [p.strip() for p in expression.split(",")]
        if len(parts) > 2:
            raise InvalidArgument(f"invalid sort expression: {expression!r}", field="sort", value=expression)
        name = parts[0]
        direction = (parts[1] if len(parts) == 2 else ASC).lower()
        if name not in allowed_fields:
            raise InvalidArgument(f"cannot sort by {name!r}", field="sort", value=expression)
        if direction not in (ASC, DESC):
            raise InvalidArgument(f"invalid sort direction {direction!r}", field="sort", value=expression)
        if name in seen:
            continue
        seen.add(name)
        orders.append(Order(name, direction))

    if TIEBREAK_FIELD not in seen:
        orders.append(Order(TIEBREAK_FIELD, ASC))
    return tuple(orders)


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page number plus page size, validated on construction."""

    page_number: int
    page_size: int
    orders: tuple[Order, ...] = field(default=(Order(TIEBREAK_FIELD, ASC),))

    def __post_init__(self) -> None:
        _require_int("page_number", self.page_number, 0)
        _require_int("page_size", self.page_size, 1)
        if self.page_size > BIGINT_MAX:
            raise InvalidArgument(f"page_size must be <= {BIGINT_MAX}", field="page_size", value=self.page_size)
        if self.offset + self.page_size > BIGINT_MAX:
            raise InvalidArgument("page_number is out of range", field="page_number", value=self.page_number)

    @property
    def offset(self) -> int:
        return self.page_number * self.page_size

    @property
    def sort_expression(self) -> str:
        return ";".join(f"{o.field},{o.direction}" for o in self.orders)


@dataclass(frozen=True)
class Page(Generic[T]):
    """A slice of an ordered result set plus the total number of matches."""

    content: list[T]
    number: int
    size: int
    total_elements: int

    @classmethod
    def of(cls, content: list[T], request: PageRequest, total_elements: int) -> "Page[T]":
        return cls(
            content=list(content),
            number=request.page_number,
            size=request.page_size,
            total_elements=total_elements,
        )

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size else 0

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def first(self) -> bool:
        return self.number == 0

    @property
    def last(self) -> bool:
        return not self.has_next

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 0

    @property
    def is_empty(self) -> bool:
        return not self.content

    def __iter__(self) -> Iterator[T]:
        return iter(self.content)

    def __len__(self) -> int:
        return len(self.content)

    def map(self, fn: Callable[[T], U]) -> "Page[U]":
        return Page(
            content=[fn(item) for item in self.content],
            number=self.number,
            size=self.size,
            total_elements=self.total_elements,
        )

    def to_dict(self, serialize: Callable[[T], Any] | None = None) -> dict:
        """Render the page envelope (content + totals) with camelCase keys."""
        items = [serialize(item) for item in self.content] if serialize else list(self.content)
        return {
            "content": items,
            "number": self.number,
            "size": self.size,
            "totalElements": self.total_elements,
            "totalPages": self.total_pages,
            "numberOfElements": self.number_of_elements,
            "first": self.first,
            "last": self.last,
            "empty": self.is_empty,
        }


def total_from_slice(request: PageRequest, fetched: int) -> int | None:
    """
    Derive the total without a COUNT query when the slice makes it certain.

    A first page shorter than the page size holds every match; a non-empty
    short page anywhere else is the last one. Returns None otherwise.
    """
    if request.offset == 0 and fetched < request.page_size:
        return fetched
    if 0 < fetched < request.page_size:
        return request.offset + fetched
    return None
