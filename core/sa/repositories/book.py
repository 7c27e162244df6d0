# core/sa/repositories/book.py
from typing import Optional, Dict, Any, Sequence
from sqlalchemy import Select, select, func
from sqlalchemy.orm import selectinload

from core.pagination import Page, PageRequest, paginate
from ..models import Book, Author, Genre, BookAuthor, BookGenre
from .base import BaseRepository, contains_ignore_case


def _has_text(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


class BookRepository(BaseRepository[Book]):
    """Repository for managing Book entities and their author/genre associations."""

    model = Book

    def sort_columns(self) -> Dict[str, Any]:
        return {'id': Book.id, 'title': Book.title, 'price': Book.price}

    def _with_associations(self) -> Select:
        """SELECT of books that also loads authors and genres, refreshing stale copies"""
        return (
            select(Book)
            .options(selectinload(Book.authors), selectinload(Book.genres))
            .execution_options(populate_existing=True)
        )

    def get_by_id(self, book_id: int) -> Optional[Book]:
        """Get a book by id with its authors and genres loaded.

        Args:
            book_id: The id of the book

        Returns:
            Book object with loaded relationships or None if not found
        """
        return self.session.execute(
            self._with_associations().where(Book.id == book_id)
        ).scalars().first()

    def find_with_filters(
        self,
        title: Optional[str] = None,
        author: Optional[str] = None,
        genre: Optional[str] = None,
        page_request: PageRequest = PageRequest()
    ) -> Page[Book]:
        """List books matching every supplied filter.

        Each filter is a case-insensitive substring. A missing or blank
        filter adds no condition, so calling this without filters lists
        every book with the same ordering and paging rules.

        Args:
            title: Substring of the book title
            author: Substring of the name of any of the book's authors
            genre: Substring of the name of any of the book's genres
            page_request: Page index, size and sort orders

        Returns:
            Page of Book objects with loaded authors and genres
        """
        stmt = self._with_associations()

        if _has_text(title):
            stmt = stmt.where(contains_ignore_case(Book.title, title))

        # EXISTS sub-queries, so a book matching through several authors is returned once
        if _has_text(author):
            stmt = stmt.where(Book.authors.any(
                contains_ignore_case(Author.name, author)
            ))

        if _has_text(genre):
            stmt = stmt.where(Book.genres.any(
                contains_ignore_case(Genre.name, genre)
            ))

        return paginate(self.session, stmt, page_request, self.sort_columns())

    def find_by_author(self, author_id: int, page_request: PageRequest) -> Page[Book]:
        """Get books that list the given author"""
        stmt = self._with_associations().where(Book.authors.any(Author.id == author_id))
        return paginate(self.session, stmt, page_request, self.sort_columns())

    def find_by_genre(self, genre_id: int, page_request: PageRequest) -> Page[Book]:
        """Get books tagged with the given genre"""
        stmt = self._with_associations().where(Book.genres.any(Genre.id == genre_id))
        return paginate(self.session, stmt, page_request, self.sort_columns())

    def count_by_author(self, author_id: int) -> int:
        """Count books associated with an author"""
        return self.session.execute(
            select(func.count()).select_from(BookAuthor).where(BookAuthor.author_id == author_id)
        ).scalar_one()

    def count_by_genre(self, genre_id: int) -> int:
        """Count books associated with a genre"""
        return self.session.execute(
            select(func.count()).select_from(BookGenre).where(BookGenre.genre_id == genre_id)
        ).scalar_one()

    def replace_associations(
        self,
        book: Book,
        authors: Sequence[Author],
        genres: Sequence[Genre]
    ) -> None:
        """Replace both association sets of ``book`` wholesale.

        The given order is stored as ``position`` and is the order in which
        authors and genres are returned afterwards.
        """
        book.book_authors.clear()
        book.book_genres.clear()
        # Old rows have to be gone before rows with the same keys are inserted again
        self.session.flush()

        book.book_authors.extend(
            BookAuthor(author=author, position=position)
            for position, author in enumerate(authors)
        )
        book.book_genres.extend(
            BookGenre(genre=genre, position=position)
            for position, genre in enumerate(genres)
        )
        self.session.flush()
