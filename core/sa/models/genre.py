# core/sa/models/genre.py
from sqlalchemy import Integer, String, Index, func
from sqlalchemy.orm import Mapped, mapped_column
from .base import Base, TimestampMixin

GENRE_NAME_MIN_LENGTH = 2
GENRE_NAME_MAX_LENGTH = 50

class Genre(Base, TimestampMixin):
    __tablename__ = 'genre'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(GENRE_NAME_MAX_LENGTH), nullable=False)

    def __repr__(self) -> str:
        return f"<Genre(id={self.id}, name='{self.name}')>"

# Case-insensitive uniqueness
Index('uq_genre_name_lower', func.lower(Genre.name), unique=True)
