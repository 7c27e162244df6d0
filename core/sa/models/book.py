# core/sa/models/book.py
from decimal import Decimal
from sqlalchemy import String, Integer, Numeric, ForeignKey
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

BOOK_TITLE_MAX_LENGTH = 200
PRICE_INTEGER_DIGITS = 10
PRICE_FRACTION_DIGITS = 2

class BookAuthor(Base):
    __tablename__ = 'book_author'

    book_id: Mapped[int] = mapped_column(ForeignKey('book.id'), primary_key=True)
    author_id: Mapped[int] = mapped_column(ForeignKey('author.id'), primary_key=True, index=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Relationships
    book = relationship('Book', back_populates='book_authors')
    author = relationship('Author')

class BookGenre(Base):
    __tablename__ = 'book_genre'

    book_id: Mapped[int] = mapped_column(ForeignKey('book.id'), primary_key=True)
    genre_id: Mapped[int] = mapped_column(ForeignKey('genre.id'), primary_key=True, index=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Relationships
    book = relationship('Book', back_populates='book_genres')
    genre = relationship('Genre')

class Book(Base, TimestampMixin):
    __tablename__ = 'book'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(BOOK_TITLE_MAX_LENGTH), nullable=False)
    price: Mapped[Decimal] = mapped_column(
        Numeric(PRICE_INTEGER_DIGITS + PRICE_FRACTION_DIGITS, PRICE_FRACTION_DIGITS),
        nullable=False
    )

    # Relationships (owned association rows, removed together with the book)
    book_authors = relationship(
        'BookAuthor',
        back_populates='book',
        cascade='all, delete-orphan',
        order_by='BookAuthor.position'
    )
    book_genres = relationship(
        'BookGenre',
        back_populates='book',
        cascade='all, delete-orphan',
        order_by='BookGenre.position'
    )

    # Convenience relationships, must be loaded explicitly with selectinload()
    authors = relationship(
        'Author',
        secondary='book_author',
        order_by='BookAuthor.position',
        viewonly=True,
        lazy='raise'
    )
    genres = relationship(
        'Genre',
        secondary='book_genre',
        order_by='BookGenre.position',
        viewonly=True,
        lazy='raise'
    )

    def __repr__(self) -> str:
        return f"<Book(id={self.id}, title='{self.title[:30]}', price={self.price})>"
