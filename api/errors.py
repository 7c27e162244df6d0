# api/errors.py
"""Translate exceptions into JSON error responses.

Domain errors map onto 404/409/400. Request validation failures are
reported as 400 with one entry per offending field. Anything else is an
unclassified failure: it is logged with its traceback and answered with
a generic 500.
"""

import logging
from datetime import datetime, UTC
from http import HTTPStatus
from typing import List

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from core.exceptions import BadRequestError, BookstoreError, ConflictError, NotFoundError
from api.schemas import ErrorResponse, ValidationErrorDetail

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    BadRequestError: status.HTTP_400_BAD_REQUEST,
}


def render_error(
    status_code: int,
    message: str,
    validation_errors: List[ValidationErrorDetail] | None = None
) -> JSONResponse:
    body = ErrorResponse(
        status=status_code,
        error=HTTPStatus(status_code).phrase,
        message=message,
        timestamp=datetime.now(UTC),
        validation_errors=validation_errors or [],
    )
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


async def handle_bookstore_error(request: Request, exc: BookstoreError) -> JSONResponse:
    status_code = _STATUS_BY_ERROR.get(type(exc), status.HTTP_400_BAD_REQUEST)
    logger.warning("%s on request to %s: %s", type(exc).__name__, request.url.path, exc.message)
    return render_error(status_code, exc.message)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Validation error on request to %s: %s", request.url.path, exc.errors())
    details = [
        ValidationErrorDetail(
            field=".".join(str(part) for part in error["loc"] if part != "body"),
            message=error["msg"],
            rejected_value=error.get("input"),
        )
        for error in exc.errors()
    ]
    return render_error(status.HTTP_400_BAD_REQUEST, "Validation failed for request", details)


async def handle_integrity_error(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.error("Data integrity violation on request to %s: %s", request.url.path, exc, exc_info=exc)
    return render_error(status.HTTP_409_CONFLICT, "Data integrity constraint violation")


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Internal server error on request to %s: %s", request.url.path, exc, exc_info=exc)
    return render_error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BookstoreError, handle_bookstore_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(IntegrityError, handle_integrity_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
