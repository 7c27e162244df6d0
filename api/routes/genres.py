# api/routes/genres.py

from typing import Optional
from fastapi import APIRouter, Depends, Query, Response, status

from core.pagination import PageRequest
from core.services.genre_service import GenreService
from api.dependencies import get_genre_service, get_page_request
from api.schemas import GenreRequest, GenreResponse, BookResponse, PagedResponse, to_paged_response

router = APIRouter(prefix="/genres", tags=["genres"])

@router.get("", response_model=PagedResponse[GenreResponse])
def get_all_genres(
    name: Optional[str] = Query(None, description="Case-insensitive substring of the name"),
    page_request: PageRequest = Depends(get_page_request),
    service: GenreService = Depends(get_genre_service)
):
    genres = service.get_all_genres(name, page_request)
    return to_paged_response(genres, GenreResponse)

@router.get("/{genre_id}", response_model=GenreResponse)
def get_genre_by_id(genre_id: int, service: GenreService = Depends(get_genre_service)):
    return GenreResponse.model_validate(service.get_genre_by_id(genre_id))

@router.get("/{genre_id}/books", response_model=PagedResponse[BookResponse])
def get_genre_books(
    genre_id: int,
    page_request: PageRequest = Depends(get_page_request),
    service: GenreService = Depends(get_genre_service)
):
    """Books tagged with this genre."""
    books = service.list_books_by_genre(genre_id, page_request)
    return to_paged_response(books, BookResponse)

@router.post("", response_model=GenreResponse, status_code=status.HTTP_201_CREATED)
def create_genre(request: GenreRequest, service: GenreService = Depends(get_genre_service)):
    return GenreResponse.model_validate(service.create_genre(request.name))

@router.put("/{genre_id}", response_model=GenreResponse)
def update_genre(genre_id: int, request: GenreRequest, service: GenreService = Depends(get_genre_service)):
    return GenreResponse.model_validate(service.update_genre(genre_id, request.name))

@router.delete("/{genre_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_genre(genre_id: int, service: GenreService = Depends(get_genre_service)):
    """Delete a genre. Refused with 409 while any book is tagged with it."""
    service.delete_genre(genre_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
