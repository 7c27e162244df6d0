# api/routes/authors.py

from typing import Optional
from fastapi import APIRouter, Depends, Query, Response, status

from core.pagination import PageRequest
from core.services.author_service import AuthorService
from api.dependencies import get_author_service, get_page_request
from api.schemas import AuthorRequest, AuthorResponse, BookResponse, PagedResponse, to_paged_response

router = APIRouter(prefix="/authors", tags=["authors"])

@router.get("", response_model=PagedResponse[AuthorResponse])
def get_all_authors(
    name: Optional[str] = Query(None, description="Case-insensitive substring of the name"),
    page_request: PageRequest = Depends(get_page_request),
    service: AuthorService = Depends(get_author_service)
):
    authors = service.get_all_authors(name, page_request)
    return to_paged_response(authors, AuthorResponse)

@router.get("/{author_id}", response_model=AuthorResponse)
def get_author_by_id(author_id: int, service: AuthorService = Depends(get_author_service)):
    return AuthorResponse.model_validate(service.get_author_by_id(author_id))

@router.get("/{author_id}/books", response_model=PagedResponse[BookResponse])
def get_author_books(
    author_id: int,
    page_request: PageRequest = Depends(get_page_request),
    service: AuthorService = Depends(get_author_service)
):
    """Books that list this author."""
    books = service.list_books_by_author(author_id, page_request)
    return to_paged_response(books, BookResponse)

@router.post("", response_model=AuthorResponse, status_code=status.HTTP_201_CREATED)
def create_author(request: AuthorRequest, service: AuthorService = Depends(get_author_service)):
    return AuthorResponse.model_validate(service.create_author(request.name))

@router.put("/{author_id}", response_model=AuthorResponse)
def update_author(author_id: int, request: AuthorRequest, service: AuthorService = Depends(get_author_service)):
    return AuthorResponse.model_validate(service.update_author(author_id, request.name))

@router.delete("/{author_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_author(author_id: int, service: AuthorService = Depends(get_author_service)):
    """Delete an author. Refused with 409 while any book lists them."""
    service.delete_author(author_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
