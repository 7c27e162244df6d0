# core/sa/models/author.py
from sqlalchemy import Integer, String, Index, func
from sqlalchemy.orm import Mapped, mapped_column
from .base import Base, TimestampMixin

AUTHOR_NAME_MIN_LENGTH = 2
AUTHOR_NAME_MAX_LENGTH = 100

class Author(Base, TimestampMixin):
    __tablename__ = 'author'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(AUTHOR_NAME_MAX_LENGTH), nullable=False)

    # Books written by an author are looked up through BookRepository,
    # there is no in-memory back-reference.

    def __repr__(self) -> str:
        return f"<Author(id={self.id}, name='{self.name}')>"

# Case-insensitive uniqueness
Index('uq_author_name_lower', func.lower(Author.name), unique=True)
