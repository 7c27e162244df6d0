# core/sa/repositories/base.py
from typing import TypeVar, Generic, Optional, Type, Dict, Any, Iterable
from sqlalchemy import select, func, exists, literal
from sqlalchemy.orm import Session

from core.pagination import Page, PageRequest, paginate
from ..models import Base

T = TypeVar('T', bound=Base)

LIKE_ESCAPE = '/'


def equals_ignore_case(column, value: str):
    """Exact match ignoring case, with both sides folded by the database"""
    return func.lower(column) == func.lower(literal(value))


def contains_ignore_case(column, value: str):
    """Substring match ignoring case, with both sides folded by the database.

    LIKE wildcards in ``value`` are matched literally.
    """
    escaped = (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace('%', LIKE_ESCAPE + '%')
        .replace('_', LIKE_ESCAPE + '_')
    )
    return func.lower(column).like(func.lower(literal(f"%{escaped}%")), escape=LIKE_ESCAPE)

class BaseRepository(Generic[T]):
    """Id based lookups and writes shared by every repository.

    Repositories only flush; committing is left to the caller's transaction.
    """

    model: Type[T]

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def sort_columns(self) -> Dict[str, Any]:
        """Fields callers may sort by"""
        return {'id': self.model.id}

    def get_by_id(self, id_value: int) -> Optional[T]:
        return self.session.get(self.model, id_value)

    def get_by_ids(self, ids: Iterable[int]) -> Dict[int, T]:
        """Load several rows at once, keyed by id. Missing ids are simply absent."""
        ids = list(ids)
        if not ids:
            return {}
        rows = self.session.execute(
            select(self.model).where(self.model.id.in_(ids))
        ).scalars().all()
        return {row.id: row for row in rows}

    def exists_by_id(self, id_value: int) -> bool:
        return self.session.execute(
            select(exists().where(self.model.id == id_value))
        ).scalar_one()

    def find_all(self, page_request: PageRequest) -> Page[T]:
        return paginate(self.session, select(self.model), page_request, self.sort_columns())

    def add(self, entity: T) -> T:
        """Stage a new row and flush so it receives its id"""
        self.session.add(entity)
        self.session.flush()
        return entity

    def delete(self, entity: T) -> None:
        self.session.delete(entity)
        self.session.flush()


class NamedEntityRepository(BaseRepository[T]):
    """Lookups by name for entities with a case-insensitively unique ``name``."""

    def sort_columns(self) -> Dict[str, Any]:
        return {'id': self.model.id, 'name': self.model.name}

    def exists_by_name_ignore_case(self, name: Optional[str]) -> bool:
        """Check whether a row with exactly this name, ignoring case, exists.

        A missing or empty name never exists.
        """
        if not name:
            return False
        return self.session.execute(
            select(exists().where(equals_ignore_case(self.model.name, name)))
        ).scalar_one()

    def find_by_name_ignore_case(self, name: Optional[str]) -> Optional[T]:
        """Get the row whose name equals ``name`` ignoring case.

        A missing or empty name is never found, unlike substring search
        where an empty string matches everything.
        """
        if not name:
            return None
        return self.session.execute(
            select(self.model).where(equals_ignore_case(self.model.name, name))
        ).scalars().first()

    def search_by_name_containing(self, name: str, page_request: PageRequest) -> Page[T]:
        """Search rows whose name contains ``name``, ignoring case.

        Args:
            name: Substring to look for; LIKE wildcards are matched literally
            page_request: Page index, size and sort orders

        Returns:
            Page of matching rows
        """
        stmt = select(self.model).where(
            contains_ignore_case(self.model.name, name)
        )
        return paginate(self.session, stmt, page_request, self.sort_columns())

