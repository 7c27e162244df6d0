# core/sa/repositories/__init__.py
from .book import BookRepository
from .author import AuthorRepository
from .genre import GenreRepository

__all__ = ['BookRepository', 'AuthorRepository', 'GenreRepository']
