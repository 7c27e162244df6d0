# tests/test_api/test_genres_api.py

GENRES = "/api/v1/genres"


def test_genre_crud(client):
    """Test creating, reading, renaming and deleting a genre"""
    response = client.post(GENRES, json={"name": "Horror"})
    assert response.status_code == 201
    genre_id = response.json()["id"]

    assert client.get(f"{GENRES}/{genre_id}").json() == {"id": genre_id, "name": "Horror"}

    response = client.put(f"{GENRES}/{genre_id}", json={"name": "Gothic Horror"})
    assert response.status_code == 200
    assert response.json()["name"] == "Gothic Horror"

    assert client.delete(f"{GENRES}/{genre_id}").status_code == 204
    assert client.get(f"{GENRES}/{genre_id}").status_code == 404

def test_create_duplicate_genre(client, create_genre):
    create_genre("Fantasy")

    response = client.post(GENRES, json={"name": "FANTASY"})
    assert response.status_code == 409
    assert response.json()["message"] == "Genre already exists with name: FANTASY"

def test_create_genre_name_too_long(client):
    response = client.post(GENRES, json={"name": "x" * 51})
    assert response.status_code == 400
    assert response.json()["validation_errors"][0]["field"] == "name"

def test_search_genres(client, create_genre):
    create_genre("Science Fiction")
    create_genre("Horror")

    body = client.get(GENRES, params={"name": " SCIENCE "}).json()
    assert [g["name"] for g in body["content"]] == ["Science Fiction"]

def test_empty_genre_list(client):
    body = client.get(GENRES).json()
    assert body["content"] == []
    assert body["page"]["total_elements"] == 0
    assert body["page"]["total_pages"] == 0

def test_delete_genre_with_books(client, create_author, create_genre, create_book):
    author = create_author("Stephen King")
    genre = create_genre("Horror")
    create_book("The Shining", 12.99, [author["id"]], [genre["id"]])

    response = client.delete(f"{GENRES}/{genre['id']}")
    assert response.status_code == 409
    assert response.json()["message"] == "Cannot delete genre Horror - has associated books"

def test_genre_books(client, create_author, create_genre, create_book):
    author = create_author("Stephen King")
    genre = create_genre("Horror")
    create_book("The Shining", 12.99, [author["id"]], [genre["id"]])
    create_book("Untagged", 5.00, [author["id"]])

    body = client.get(f"{GENRES}/{genre['id']}/books").json()
    assert [b["title"] for b in body["content"]] == ["The Shining"]
