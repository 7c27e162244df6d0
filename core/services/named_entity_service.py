# core/services/named_entity_service.py
import logging
from abc import ABC, abstractmethod
from typing import Generic, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.exceptions import ConflictError, NotFoundError
from core.pagination import Page, PageRequest
from core.sa.database import transaction
from core.sa.models import Book
from core.sa.repositories.base import NamedEntityRepository
from core.sa.repositories.book import BookRepository
from core.validation import validate_name

logger = logging.getLogger(__name__)

T = TypeVar('T')

class NamedEntityService(ABC, Generic[T]):
    """Business rules shared by authors and genres.

    Names are unique ignoring case, and an entity cannot be deleted while
    any book refers to it. Every write runs in its own transaction.
    """

    label: str
    model: Type[T]
    repository_class: Type[NamedEntityRepository]
    name_min_length: int
    name_max_length: int

    def __init__(self, session: Session):
        self.session = session
        self.repository = self.repository_class(session)
        self.book_repository = BookRepository(session)

    def _duplicate_message(self, name: str) -> str:
        return f"{self.label} already exists with name: {name}"

    def _get_all(self, name: Optional[str], page_request: PageRequest) -> Page[T]:
        logger.debug("Fetching %ss - name: %s, page request: %s", self.label.lower(), name, page_request)

        if name is not None and name.strip():
            page = self.repository.search_by_name_containing(name.strip(), page_request)
        else:
            page = self.repository.find_all(page_request)

        logger.info("Successfully retrieved %d %ss", page.number_of_elements, self.label.lower())
        return page

    def _get_by_id(self, entity_id: int) -> T:
        logger.debug("Fetching %s with ID: %s", self.label.lower(), entity_id)

        entity = self.repository.get_by_id(entity_id)
        if entity is None:
            raise NotFoundError(f"{self.label} not found with ID: {entity_id}")

        logger.info("Successfully retrieved %s: %s", self.label.lower(), entity.name)
        return entity

    def _create(self, name: str) -> T:
        logger.debug("Creating new %s: %s", self.label.lower(), name)
        validate_name(name, self.label, self.name_min_length, self.name_max_length)

        try:
            with transaction(self.session):
                if self.repository.exists_by_name_ignore_case(name):
                    raise ConflictError(self._duplicate_message(name))
                entity = self.repository.add(self.model(name=name))
        except IntegrityError as e:
            # Lost a race against a concurrent create with the same name
            logger.warning("Unique name constraint hit while creating %s '%s'", self.label.lower(), name)
            raise ConflictError(self._duplicate_message(name)) from e

        logger.info("Successfully created %s: %s with ID: %s", self.label.lower(), entity.name, entity.id)
        return entity

    def _update(self, entity_id: int, name: str) -> T:
        logger.debug("Updating %s with ID: %s - new name: %s", self.label.lower(), entity_id, name)

        try:
            with transaction(self.session):
                entity = self.repository.get_by_id(entity_id)
                if entity is None:
                    raise NotFoundError(f"{self.label} not found with ID: {entity_id}")

                validate_name(name, self.label, self.name_min_length, self.name_max_length)

                # Renaming to the current name, in any case, is not a conflict
                existing = self.repository.find_by_name_ignore_case(name)
                if existing is not None and existing.id != entity_id:
                    raise ConflictError(self._duplicate_message(name))

                entity.name = name
                self.session.flush()
        except IntegrityError as e:
            logger.warning("Unique name constraint hit while renaming %s %s", self.label.lower(), entity_id)
            raise ConflictError(self._duplicate_message(name)) from e

        logger.info("Successfully updated %s: %s with ID: %s", self.label.lower(), entity.name, entity.id)
        return entity

    @abstractmethod
    def _count_books(self, entity_id: int) -> int:
        """Number of books referring to the entity"""

    def _delete(self, entity_id: int) -> None:
        logger.debug("Deleting %s with ID: %s", self.label.lower(), entity_id)

        with transaction(self.session):
            entity = self.repository.get_by_id(entity_id)
            if entity is None:
                raise NotFoundError(f"{self.label} not found with ID: {entity_id}")

            if self._count_books(entity_id) > 0:
                raise ConflictError(
                    f"Cannot delete {self.label.lower()} {entity.name} - has associated books"
                )

            name = entity.name
            self.repository.delete(entity)

        logger.info("Successfully deleted %s: %s with ID: %s", self.label.lower(), name, entity_id)

    @abstractmethod
    def _find_books(self, entity_id: int, page_request: PageRequest) -> Page[Book]:
        """Page of books referring to the entity"""

    def _list_books(self, entity_id: int, page_request: PageRequest) -> Page[Book]:
        logger.debug("Fetching books for %s with ID: %s", self.label.lower(), entity_id)

        if not self.repository.exists_by_id(entity_id):
            raise NotFoundError(f"{self.label} not found with ID: {entity_id}")

        page = self._find_books(entity_id, page_request)
        logger.info("Successfully retrieved %d books", page.number_of_elements)
        return page
