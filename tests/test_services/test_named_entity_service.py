# tests/test_services/test_named_entity_service.py
import pytest
from core.services.named_entity_service import NamedEntityService
from core.services.author_service import AuthorService

def test_base_service_cannot_be_instantiated(db_session):
    """Test the shared service requires the book lookup hooks"""
    with pytest.raises(TypeError):
        NamedEntityService(db_session)

def test_subclass_without_book_lookup_is_rejected(db_session):
    class NoBookLookup(NamedEntityService):
        label = AuthorService.label
        model = AuthorService.model
        repository_class = AuthorService.repository_class

        def _count_books(self, entity_id):
            return 0

    with pytest.raises(TypeError):
        NoBookLookup(db_session)
