# api/schemas.py

from decimal import Decimal
from typing import Any, List, Optional, TypeVar, Generic, Type
from datetime import datetime
from typing_extensions import Annotated
from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

from core.pagination import Page
from core.sa.models.author import AUTHOR_NAME_MIN_LENGTH, AUTHOR_NAME_MAX_LENGTH
from core.sa.models.genre import GENRE_NAME_MIN_LENGTH, GENRE_NAME_MAX_LENGTH
from core.sa.models.book import BOOK_TITLE_MAX_LENGTH, PRICE_INTEGER_DIGITS, PRICE_FRACTION_DIGITS

# Prices travel as JSON numbers
Price = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used='json')]


# Request Schemas
class AuthorRequest(BaseModel):
    name: str = Field(min_length=AUTHOR_NAME_MIN_LENGTH, max_length=AUTHOR_NAME_MAX_LENGTH)


class GenreRequest(BaseModel):
    name: str = Field(min_length=GENRE_NAME_MIN_LENGTH, max_length=GENRE_NAME_MAX_LENGTH)


class BookRequest(BaseModel):
    title: str = Field(min_length=1, max_length=BOOK_TITLE_MAX_LENGTH)
    price: Decimal = Field(
        gt=0,
        max_digits=PRICE_INTEGER_DIGITS + PRICE_FRACTION_DIGITS,
        decimal_places=PRICE_FRACTION_DIGITS
    )
    # Left to the service to reject, so a missing list gets the same error as an empty one
    author_ids: List[int] = Field(default_factory=list)
    genre_ids: List[int] = Field(default_factory=list)


# Reusable Schemas for Models
class AuthorResponse(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class GenreResponse(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class BookResponse(BaseModel):
    id: int
    title: str
    price: Price
    authors: List[AuthorResponse] = []
    genres: List[GenreResponse] = []

    model_config = ConfigDict(from_attributes=True)


DataT = TypeVar('DataT')

class PageInfo(BaseModel):
    size: int
    total_elements: int
    total_pages: int
    number: int


class PagedResponse(BaseModel, Generic[DataT]):
    """
    Generic schema for paginated API responses.
    """
    content: List[DataT]
    page: PageInfo


def to_paged_response(page: Page, schema: Type[BaseModel]) -> PagedResponse:
    """Convert a service Page of ORM objects into its response model"""
    page = page.map(schema.model_validate)
    return PagedResponse[schema](
        content=page.content,
        page=PageInfo(
            size=page.size,
            total_elements=page.total_elements,
            total_pages=page.total_pages,
            number=page.number,
        ),
    )


# Error Schemas
class ValidationErrorDetail(BaseModel):
    field: str
    message: str
    rejected_value: Optional[Any] = None


class ErrorResponse(BaseModel):
    status: int
    error: str
    message: str
    timestamp: datetime
    validation_errors: List[ValidationErrorDetail] = []
