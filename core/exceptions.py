# core/exceptions.py


class BookstoreError(Exception):
    """Base class for domain errors raised by the service layer."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(BookstoreError):
    """An operation referenced an entity id that does not exist."""


class ConflictError(BookstoreError):
    """A uniqueness rule was violated or a referenced entity cannot be deleted."""


class BadRequestError(BookstoreError):
    """Input violates a structural precondition."""
