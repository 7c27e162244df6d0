# core/sa/__init__.py
from .database import Database, transaction
from .models import (
    Base, Book, Author, Genre,
    BookAuthor, BookGenre
)

__all__ = [
    'Database',
    'transaction',
    'Base',
    'Book',
    'Author',
    'Genre',
    'BookAuthor',
    'BookGenre'
]
