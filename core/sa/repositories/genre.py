# core/sa/repositories/genre.py
from ..models import Genre
from .base import NamedEntityRepository

class GenreRepository(NamedEntityRepository[Genre]):
    """Repository for managing Genre entities."""

    model = Genre
