# core/sa/models/__init__.py
from .base import Base, TimestampMixin
from .author import Author
from .genre import Genre
from .book import Book, BookAuthor, BookGenre

__all__ = [
    'Base',
    'TimestampMixin',
    'Author',
    'Genre',
    'Book',
    'BookAuthor',
    'BookGenre',
]
