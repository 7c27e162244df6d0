# tests/test_services/test_author_service.py
import pytest
from core.exceptions import BadRequestError, ConflictError, NotFoundError
from core.pagination import PageRequest
from core.sa.models import Author
from core.services.author_service import AuthorService
from core.services.book_service import BookService

@pytest.fixture
def author_service(db_session):
    return AuthorService(db_session)

@pytest.fixture
def book_service(db_session):
    return BookService(db_session)

def test_create_author(author_service, db_session):
    """Test creating an author stores it with an id"""
    author = author_service.create_author("Neil Gaiman")
    assert author.id is not None
    assert db_session.get(Author, author.id).name == "Neil Gaiman"

def test_create_author_duplicate_ignores_case(author_service, sample_author):
    """Test a name differing only by case is a duplicate"""
    with pytest.raises(ConflictError) as exc_info:
        author_service.create_author("stephen king")
    assert exc_info.value.message == "Author already exists with name: stephen king"

@pytest.mark.parametrize("name", [None, "", "   ", "A", "x" * 101])
def test_create_author_invalid_name(author_service, db_session, name):
    with pytest.raises(BadRequestError):
        author_service.create_author(name)
    assert db_session.query(Author).count() == 0

def test_create_author_lost_race_is_conflict(author_service, sample_author, monkeypatch):
    """Test the unique index still reports a conflict when the pre-check misses"""
    monkeypatch.setattr(author_service.repository, "exists_by_name_ignore_case", lambda name: False)

    with pytest.raises(ConflictError) as exc_info:
        author_service.create_author("STEPHEN KING")
    assert exc_info.value.message == "Author already exists with name: STEPHEN KING"
    assert author_service.repository.find_by_name_ignore_case("stephen king").id == sample_author.id

def test_get_author_by_id(author_service, sample_author):
    assert author_service.get_author_by_id(sample_author.id).name == "Stephen King"

def test_get_author_not_found(author_service):
    with pytest.raises(NotFoundError) as exc_info:
        author_service.get_author_by_id(999)
    assert exc_info.value.message == "Author not found with ID: 999"

def test_get_all_authors_searches_by_name(author_service, make_author):
    """Test name search is trimmed and case-insensitive"""
    make_author("Stephen King")
    make_author("John Smith")

    page = author_service.get_all_authors("  KING ", PageRequest.of())
    assert [a.name for a in page.content] == ["Stephen King"]

    page = author_service.get_all_authors("   ", PageRequest.of())
    assert page.total_elements == 2

def test_update_author(author_service, sample_author):
    updated = author_service.update_author(sample_author.id, "Richard Bachman")
    assert updated.name == "Richard Bachman"
    assert author_service.get_author_by_id(sample_author.id).name == "Richard Bachman"

def test_update_author_own_name_in_other_case(author_service, sample_author):
    """Test renaming an author to its own name in another case is allowed"""
    updated = author_service.update_author(sample_author.id, "STEPHEN KING")
    assert updated.name == "STEPHEN KING"

def test_update_author_to_taken_name(author_service, sample_author, make_author):
    other = make_author("Peter Straub")
    with pytest.raises(ConflictError):
        author_service.update_author(other.id, "stephen KING")
    assert author_service.get_author_by_id(other.id).name == "Peter Straub"

def test_update_author_lost_race_is_conflict(author_service, sample_author, make_author, monkeypatch):
    other = make_author("Peter Straub")
    monkeypatch.setattr(author_service.repository, "find_by_name_ignore_case", lambda name: None)

    with pytest.raises(ConflictError):
        author_service.update_author(other.id, "Stephen King")
    assert author_service.get_author_by_id(other.id).name == "Peter Straub"

def test_update_author_not_found(author_service):
    """Test a missing author is reported before the name is checked"""
    with pytest.raises(NotFoundError):
        author_service.update_author(999, "")

def test_delete_author(author_service, sample_author):
    author_service.delete_author(sample_author.id)
    with pytest.raises(NotFoundError):
        author_service.get_author_by_id(sample_author.id)

def test_delete_author_not_found(author_service):
    with pytest.raises(NotFoundError):
        author_service.delete_author(999)

def test_delete_author_with_books(author_service, book_service, sample_book, sample_author, make_author):
    """Test an author cannot be deleted until no book refers to it"""
    with pytest.raises(ConflictError) as exc_info:
        author_service.delete_author(sample_author.id)
    assert exc_info.value.message == "Cannot delete author Stephen King - has associated books"
    assert author_service.get_author_by_id(sample_author.id) is not None

    replacement = make_author("Richard Bachman")
    book_service.update_book(sample_book.id, "The Shining", "12.99", [replacement.id])

    author_service.delete_author(sample_author.id)
    with pytest.raises(NotFoundError):
        author_service.get_author_by_id(sample_author.id)

def test_list_books_by_author(author_service, sample_book, sample_author, make_author):
    page = author_service.list_books_by_author(sample_author.id, PageRequest.of())
    assert [b.title for b in page.content] == ["The Shining"]

    page = author_service.list_books_by_author(make_author("Nobody").id, PageRequest.of())
    assert page.content == []
    assert page.total_pages == 0

    with pytest.raises(NotFoundError):
        author_service.list_books_by_author(999, PageRequest.of())
