# core/services/genre_service.py
from typing import Optional

from core.pagination import Page, PageRequest
from core.sa.models import Book, Genre
from core.sa.models.genre import GENRE_NAME_MIN_LENGTH, GENRE_NAME_MAX_LENGTH
from core.sa.repositories.genre import GenreRepository
from .named_entity_service import NamedEntityService


class GenreService(NamedEntityService[Genre]):
    """Genre management: lookups, case-insensitive unique names, guarded deletes"""

    label = "Genre"
    model = Genre
    repository_class = GenreRepository
    name_min_length = GENRE_NAME_MIN_LENGTH
    name_max_length = GENRE_NAME_MAX_LENGTH

    def _count_books(self, entity_id: int) -> int:
        return self.book_repository.count_by_genre(entity_id)

    def _find_books(self, entity_id: int, page_request: PageRequest) -> Page[Book]:
        return self.book_repository.find_by_genre(entity_id, page_request)

    def get_all_genres(self, name: Optional[str], page_request: PageRequest) -> Page[Genre]:
        return self._get_all(name, page_request)

    def get_genre_by_id(self, genre_id: int) -> Genre:
        return self._get_by_id(genre_id)

    def create_genre(self, name: str) -> Genre:
        return self._create(name)

    def update_genre(self, genre_id: int, name: str) -> Genre:
        return self._update(genre_id, name)

    def delete_genre(self, genre_id: int) -> None:
        self._delete(genre_id)

    def list_books_by_genre(self, genre_id: int, page_request: PageRequest) -> Page[Book]:
        return self._list_books(genre_id, page_request)
