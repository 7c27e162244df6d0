# api/dependencies.py
from typing import List

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from core.pagination import DEFAULT_PAGE_SIZE, PageRequest
from core.sa.database import get_db
from core.services.author_service import AuthorService
from core.services.book_service import BookService
from core.services.genre_service import GenreService


def get_book_service(db: Session = Depends(get_db)) -> BookService:
    return BookService(db)


def get_author_service(db: Session = Depends(get_db)) -> AuthorService:
    return AuthorService(db)


def get_genre_service(db: Session = Depends(get_db)) -> GenreService:
    return GenreService(db)


def get_page_request(
    page: int = Query(default=0, ge=0, description="Zero-based page index"),
    size: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, description="Page size, capped at 100"),
    sort: List[str] = Query(default=[], description="Sort as field,asc|desc; repeatable"),
) -> PageRequest:
    return PageRequest.of(page=page, size=size, sort=sort)
