# tests/conftest.py
import sys
from decimal import Decimal
from pathlib import Path

import pytest

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from sqlalchemy.orm import Session
from core.sa.database import Database
from core.sa.models import Author, Genre, Book, BookAuthor, BookGenre


@pytest.fixture
def database():
    """A fresh in-memory database for every test"""
    db = Database("sqlite://")
    db.init_db()
    yield db
    db.drop_db()
    db.engine.dispose()

@pytest.fixture
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def make_author(db_session):
    """Factory that inserts and commits an author."""
    def _make(name: str) -> Author:
        author = Author(name=name)
        db_session.add(author)
        db_session.commit()
        return author
    return _make

@pytest.fixture
def make_genre(db_session):
    """Factory that inserts and commits a genre."""
    def _make(name: str) -> Genre:
        genre = Genre(name=name)
        db_session.add(genre)
        db_session.commit()
        return genre
    return _make

@pytest.fixture
def make_book(db_session):
    """Factory that inserts a book with the given authors and genres."""
    def _make(title: str, price="10.00", authors=(), genres=()) -> Book:
        book = Book(title=title, price=Decimal(price))
        book.book_authors = [
            BookAuthor(author=author, position=i) for i, author in enumerate(authors)
        ]
        book.book_genres = [
            BookGenre(genre=genre, position=i) for i, genre in enumerate(genres)
        ]
        db_session.add(book)
        db_session.commit()
        return book
    return _make

@pytest.fixture
def sample_author(make_author):
    return make_author("Stephen King")

@pytest.fixture
def sample_genre(make_genre):
    return make_genre("Horror")

@pytest.fixture
def sample_book(make_book, sample_author, sample_genre):
    return make_book("The Shining", "12.99", [sample_author], [sample_genre])
