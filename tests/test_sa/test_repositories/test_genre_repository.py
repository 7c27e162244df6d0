# tests/test_sa/test_repositories/test_genre_repository.py

import pytest
from sqlalchemy.exc import IntegrityError
from core.pagination import PageRequest
from core.sa.repositories.genre import GenreRepository
from core.sa.models import Genre

@pytest.fixture
def genre_repo(db_session):
    """Fixture to create a GenreRepository instance."""
    return GenreRepository(db_session)

def test_find_by_name_ignore_case(genre_repo, make_genre):
    """Test fetching a genre by its name in another case."""
    make_genre("Fantasy")

    fetched = genre_repo.find_by_name_ignore_case("FANTASY")
    assert fetched is not None
    assert fetched.name == "Fantasy"

def test_find_by_nonexistent_name(genre_repo):
    """Test fetching a genre with non-existent name."""
    assert genre_repo.find_by_name_ignore_case("Nonexistent Genre") is None

def test_search_genres(genre_repo, make_genre):
    """Test searching for genres by name."""
    make_genre("Science Fiction")
    make_genre("Science Fantasy")
    make_genre("Horror")

    page = genre_repo.search_by_name_containing("science", PageRequest.of())
    names = [g.name for g in page.content]
    assert "Science Fiction" in names
    assert "Science Fantasy" in names
    assert "Horror" not in names

def test_search_genres_special_characters(genre_repo, make_genre):
    """Test searching with special characters."""
    make_genre("Sci-Fi & Fantasy")
    make_genre("Drama")

    page = genre_repo.search_by_name_containing("&", PageRequest.of())
    assert len(page.content) == 1
    assert page.content[0].name == "Sci-Fi & Fantasy"

def test_search_respects_page_size(genre_repo, make_genre):
    """Test search returns at most one page."""
    for i in range(5):
        make_genre(f"Test Genre {i}")

    page = genre_repo.search_by_name_containing("test", PageRequest.of(size=3))
    assert len(page.content) == 3
    assert page.total_elements == 5
    assert page.total_pages == 2

def test_unique_name_ignores_case_in_storage(genre_repo, db_session, make_genre):
    """Test the unique index rejects a name differing only by case."""
    make_genre("Horror")

    db_session.add(Genre(name="HORROR"))
    with pytest.raises(IntegrityError):
        db_session.flush()
    db_session.rollback()
