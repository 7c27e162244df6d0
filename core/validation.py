# core/validation.py
from decimal import Decimal, InvalidOperation
from typing import Iterable, List, Optional

from core.exceptions import BadRequestError
from core.sa.models.book import BOOK_TITLE_MAX_LENGTH, PRICE_INTEGER_DIGITS, PRICE_FRACTION_DIGITS


def validate_name(name: Optional[str], entity: str, min_length: int, max_length: int) -> str:
    """Check that a name is present and within its length bounds"""
    if name is None or not name.strip():
        raise BadRequestError(f"{entity} name is required")
    if not min_length <= len(name) <= max_length:
        raise BadRequestError(
            f"{entity} name must be between {min_length} and {max_length} characters"
        )
    return name


def validate_title(title: Optional[str]) -> str:
    if title is None or not title.strip():
        raise BadRequestError("Book title is required")
    if len(title) > BOOK_TITLE_MAX_LENGTH:
        raise BadRequestError(f"Book title must be between 1 and {BOOK_TITLE_MAX_LENGTH} characters")
    return title


def validate_price(price) -> Decimal:
    """Check a price is positive with at most 10 integer and 2 fraction digits"""
    if price is None:
        raise BadRequestError("Price is required")
    try:
        value = price if isinstance(price, Decimal) else Decimal(str(price))
    except InvalidOperation:
        raise BadRequestError(f"Invalid price: {price}")
    if not value.is_finite() or value <= 0:
        raise BadRequestError("Price must be greater than 0")

    sign, digits, exponent = value.normalize().as_tuple()
    fraction_digits = max(-exponent, 0)
    integer_digits = max(len(digits) + exponent, 0)
    if integer_digits > PRICE_INTEGER_DIGITS or fraction_digits > PRICE_FRACTION_DIGITS:
        raise BadRequestError(
            f"Price must have at most {PRICE_INTEGER_DIGITS} digits before decimal "
            f"and {PRICE_FRACTION_DIGITS} after"
        )
    return value


def unique_ids(ids: Optional[Iterable[int]]) -> List[int]:
    """Drop repeated ids, keeping the first occurrence's position"""
    return list(dict.fromkeys(ids or []))
