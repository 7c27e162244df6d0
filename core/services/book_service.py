# core/services/book_service.py
import logging
from decimal import Decimal
from typing import List, Optional, Sequence, Tuple

from sqlalchemy.orm import Session

from core.exceptions import BadRequestError, NotFoundError
from core.pagination import Page, PageRequest
from core.sa.database import transaction
from core.sa.models import Author, Book, Genre
from core.sa.repositories import AuthorRepository, BookRepository, GenreRepository
from core.validation import unique_ids, validate_price, validate_title

logger = logging.getLogger(__name__)


class BookService:
    """Book management.

    A book always has at least one author; every referenced author and
    genre must exist. Create and update check all references before
    writing anything, and each runs in a single transaction so a failed
    call leaves no partial book behind.
    """

    def __init__(self, session: Session):
        self.session = session
        self.book_repository = BookRepository(session)
        self.author_repository = AuthorRepository(session)
        self.genre_repository = GenreRepository(session)

    def get_all_books(
        self,
        title: Optional[str] = None,
        author: Optional[str] = None,
        genre: Optional[str] = None,
        page_request: PageRequest = PageRequest()
    ) -> Page[Book]:
        logger.debug(
            "Fetching books - page request: %s, title: %s, author: %s, genre: %s",
            page_request, title, author, genre
        )
        books = self.book_repository.find_with_filters(title, author, genre, page_request)
        logger.info("Successfully retrieved %d books", books.number_of_elements)
        return books

    def get_book_by_id(self, book_id: int) -> Book:
        logger.debug("Fetching book with ID: %s", book_id)

        book = self.book_repository.get_by_id(book_id)
        if book is None:
            raise NotFoundError(f"Book not found with ID: {book_id}")

        logger.info("Successfully retrieved book: %s", book.title)
        return book

    def _resolve_references(
        self,
        author_ids: Optional[Sequence[int]],
        genre_ids: Optional[Sequence[int]],
        action: str
    ) -> Tuple[List[Author], List[Genre]]:
        """Load the authors and genres a book should point at.

        Raises:
            BadRequestError: No authors given, or any id does not exist
        """
        if not author_ids:
            raise BadRequestError(f"Cannot {action} book without authors")

        author_ids = unique_ids(author_ids)
        found_authors = self.author_repository.get_by_ids(author_ids)
        for author_id in author_ids:
            if author_id not in found_authors:
                raise BadRequestError(f"Author not found with ID: {author_id}")

        genre_ids = unique_ids(genre_ids)
        found_genres = self.genre_repository.get_by_ids(genre_ids)
        for genre_id in genre_ids:
            if genre_id not in found_genres:
                raise BadRequestError(f"Genre not found with ID: {genre_id}")

        return (
            [found_authors[author_id] for author_id in author_ids],
            [found_genres[genre_id] for genre_id in genre_ids],
        )

    def create_book(
        self,
        title: str,
        price: Decimal,
        author_ids: Optional[Sequence[int]],
        genre_ids: Optional[Sequence[int]] = None
    ) -> Book:
        logger.debug("Creating new book: %s", title)

        with transaction(self.session):
            title = validate_title(title)
            price = validate_price(price)
            authors, genres = self._resolve_references(author_ids, genre_ids, "create")

            book = self.book_repository.add(Book(title=title, price=price))
            self.book_repository.replace_associations(book, authors, genres)
            book_id = book.id

        book = self.book_repository.get_by_id(book_id)
        logger.info("Successfully created book: %s with ID: %s", book.title, book.id)
        return book

    def update_book(
        self,
        book_id: int,
        title: str,
        price: Decimal,
        author_ids: Optional[Sequence[int]],
        genre_ids: Optional[Sequence[int]] = None
    ) -> Book:
        logger.debug("Updating book with ID: %s - new title: %s", book_id, title)

        with transaction(self.session):
            book = self.book_repository.get_by_id(book_id)
            if book is None:
                raise NotFoundError(f"Book not found with ID: {book_id}")

            title = validate_title(title)
            price = validate_price(price)
            authors, genres = self._resolve_references(author_ids, genre_ids, "update")

            book.title = title
            book.price = price
            self.book_repository.replace_associations(book, authors, genres)

        book = self.book_repository.get_by_id(book_id)
        logger.info("Successfully updated book: %s with ID: %s", book.title, book.id)
        return book

    def delete_book(self, book_id: int) -> None:
        logger.debug("Deleting book with ID: %s", book_id)

        with transaction(self.session):
            book = self.book_repository.get_by_id(book_id)
            if book is None:
                raise NotFoundError(f"Book not found with ID: {book_id}")
            self.book_repository.delete(book)

        logger.info("Successfully deleted book with ID: %s", book_id)
