# api/routes/books.py

from typing import Optional
from fastapi import APIRouter, Depends, Query, Response, status

from core.pagination import PageRequest
from core.services.book_service import BookService
from api.dependencies import get_book_service, get_page_request
from api.schemas import BookRequest, BookResponse, PagedResponse, to_paged_response

router = APIRouter(prefix="/books", tags=["books"])

@router.get("", response_model=PagedResponse[BookResponse])
def get_all_books(
    title: Optional[str] = Query(None, description="Case-insensitive substring of the title"),
    author: Optional[str] = Query(None, description="Case-insensitive substring of any author name"),
    genre: Optional[str] = Query(None, description="Case-insensitive substring of any genre name"),
    page_request: PageRequest = Depends(get_page_request),
    service: BookService = Depends(get_book_service)
):
    """
    Get a paginated list of books, optionally filtered by title, author and genre.

    All given filters must match. Sort with ``sort=title,asc`` (repeatable);
    sortable fields are id, title and price.
    """
    books = service.get_all_books(title, author, genre, page_request)
    return to_paged_response(books, BookResponse)

@router.get("/{book_id}", response_model=BookResponse)
def get_book_by_id(book_id: int, service: BookService = Depends(get_book_service)):
    return BookResponse.model_validate(service.get_book_by_id(book_id))

@router.post("", response_model=BookResponse, status_code=status.HTTP_201_CREATED)
def create_book(request: BookRequest, service: BookService = Depends(get_book_service)):
    book = service.create_book(request.title, request.price, request.author_ids, request.genre_ids)
    return BookResponse.model_validate(book)

@router.put("/{book_id}", response_model=BookResponse)
def update_book(book_id: int, request: BookRequest, service: BookService = Depends(get_book_service)):
    """Replace title, price, authors and genres of a book."""
    book = service.update_book(book_id, request.title, request.price, request.author_ids, request.genre_ids)
    return BookResponse.model_validate(book)

@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(book_id: int, service: BookService = Depends(get_book_service)):
    service.delete_book(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
