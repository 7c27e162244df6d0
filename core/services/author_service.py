# core/services/author_service.py
from typing import Optional

from core.pagination import Page, PageRequest
from core.sa.models import Author, Book
from core.sa.models.author import AUTHOR_NAME_MIN_LENGTH, AUTHOR_NAME_MAX_LENGTH
from core.sa.repositories.author import AuthorRepository
from .named_entity_service import NamedEntityService


class AuthorService(NamedEntityService[Author]):
    """Author management: lookups, case-insensitive unique names, guarded deletes"""

    label = "Author"
    model = Author
    repository_class = AuthorRepository
    name_min_length = AUTHOR_NAME_MIN_LENGTH
    name_max_length = AUTHOR_NAME_MAX_LENGTH

    def _count_books(self, entity_id: int) -> int:
        return self.book_repository.count_by_author(entity_id)

    def _find_books(self, entity_id: int, page_request: PageRequest) -> Page[Book]:
        return self.book_repository.find_by_author(entity_id, page_request)

    def get_all_authors(self, name: Optional[str], page_request: PageRequest) -> Page[Author]:
        return self._get_all(name, page_request)

    def get_author_by_id(self, author_id: int) -> Author:
        return self._get_by_id(author_id)

    def create_author(self, name: str) -> Author:
        return self._create(name)

    def update_author(self, author_id: int, name: str) -> Author:
        return self._update(author_id, name)

    def delete_author(self, author_id: int) -> None:
        self._delete(author_id)

    def list_books_by_author(self, author_id: int, page_request: PageRequest) -> Page[Book]:
        return self._list_books(author_id, page_request)
