# core/pagination.py
"""Paging and sorting shared by every list and search query.

Page numbers are zero-based. Page sizes above ``MAX_PAGE_SIZE`` are
silently capped and the capped size is what the resulting ``Page``
reports. Sort orders come from the caller as ``(field, direction)``
pairs; the entity id is appended as a descending tiebreaker unless the
caller already sorts by it, so repeated calls over unchanged data always
return rows in the same order.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, List, Mapping, Sequence, Tuple, TypeVar

from sqlalchemy import Select, asc, desc, func, select
from sqlalchemy.orm import Session

from core.exceptions import BadRequestError

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

ASC = "asc"
DESC = "desc"


@dataclass(frozen=True)
class SortOrder:
    field: str
    direction: str = ASC

    def __post_init__(self):
        direction = (self.direction or ASC).lower()
        if direction not in (ASC, DESC):
            raise BadRequestError(
                f"Invalid sort direction '{self.direction}' for field '{self.field}'. Use 'asc' or 'desc'"
            )
        object.__setattr__(self, "direction", direction)

    def __str__(self) -> str:
        return f"{self.field},{self.direction}"


def parse_sort(value: str) -> SortOrder:
    """Parse the ``field[,asc|desc]`` form used by query strings"""
    parts = [part.strip() for part in value.split(",")]
    if not parts[0] or len(parts) > 2:
        raise BadRequestError(f"Invalid sort parameter: '{value}'")
    if len(parts) == 1:
        return SortOrder(parts[0])
    return SortOrder(parts[0], parts[1])


@dataclass(frozen=True)
class PageRequest:
    page: int = 0
    size: int = DEFAULT_PAGE_SIZE
    sort: Tuple[SortOrder, ...] = ()

    @classmethod
    def of(
        cls,
        page: int = 0,
        size: int = DEFAULT_PAGE_SIZE,
        sort: Sequence[SortOrder | str] = (),
    ) -> "PageRequest":
        """Build a validated request, capping ``size`` at MAX_PAGE_SIZE"""
        if page < 0:
            raise BadRequestError("Page index must not be less than zero")
        if size < 1:
            raise BadRequestError("Page size must not be less than one")
        orders = tuple(
            order if isinstance(order, SortOrder) else parse_sort(order)
            for order in sort
        )
        return cls(page=page, size=min(size, MAX_PAGE_SIZE), sort=orders)

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass
class Page(Generic[T]):
    content: List[T]
    number: int
    size: int
    total_elements: int
    total_pages: int = field(init=False)

    def __post_init__(self):
        self.total_pages = math.ceil(self.total_elements / self.size) if self.total_elements else 0

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    def map(self, fn: Callable[[T], U]) -> "Page[U]":
        return Page(
            content=[fn(item) for item in self.content],
            number=self.number,
            size=self.size,
            total_elements=self.total_elements,
        )


def paginate(
    session: Session,
    stmt: Select,
    page_request: PageRequest,
    columns: Mapping[str, Any],
) -> Page:
    """Execute ``stmt`` one page at a time.

    Args:
        session: Session to run the queries on
        stmt: SELECT of a single entity, already filtered but not ordered
        page_request: Page index, size and sort orders
        columns: Sortable fields by name; must include ``id``

    Returns:
        Page with the requested slice and totals over the whole result
    """
    order_by = []
    for order in page_request.sort:
        column = columns.get(order.field)
        if column is None:
            allowed = ", ".join(sorted(columns))
            raise BadRequestError(f"Cannot sort by '{order.field}'. Sortable fields: {allowed}")
        order_by.append(desc(column) if order.direction == DESC else asc(column))

    if not any(order.field == "id" for order in page_request.sort):
        order_by.append(desc(columns["id"]))

    total = session.execute(
        select(func.count()).select_from(stmt.order_by(None).subquery())
    ).scalar_one()

    rows = session.execute(
        stmt.order_by(*order_by).offset(page_request.offset).limit(page_request.size)
    ).scalars().all()

    return Page(
        content=list(rows),
        number=page_request.page,
        size=page_request.size,
        total_elements=total,
    )
