# tests/test_api/conftest.py
import pytest
from fastapi.testclient import TestClient

from api.main import app
from core.sa.database import get_db


@pytest.fixture
def client(database):
    """Test client whose requests run against the test database"""
    def override_get_db():
        session = database.get_session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()

@pytest.fixture
def create_author(client):
    def _create(name: str) -> dict:
        response = client.post("/api/v1/authors", json={"name": name})
        assert response.status_code == 201
        return response.json()
    return _create

@pytest.fixture
def create_genre(client):
    def _create(name: str) -> dict:
        response = client.post("/api/v1/genres", json={"name": name})
        assert response.status_code == 201
        return response.json()
    return _create

@pytest.fixture
def create_book(client):
    def _create(title: str, price: float, author_ids, genre_ids=()) -> dict:
        response = client.post("/api/v1/books", json={
            "title": title,
            "price": price,
            "author_ids": list(author_ids),
            "genre_ids": list(genre_ids),
        })
        assert response.status_code == 201, response.text
        return response.json()
    return _create
