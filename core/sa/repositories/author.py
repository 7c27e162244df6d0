# core/sa/repositories/author.py
from ..models import Author
from .base import NamedEntityRepository

class AuthorRepository(NamedEntityRepository[Author]):
    """Repository for managing Author entities."""

    model = Author
