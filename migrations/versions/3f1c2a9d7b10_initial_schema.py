"""initial_schema

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        'author',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(length=100), nullable=False),
        *_timestamps(),
    )
    op.create_index('uq_author_name_lower', 'author', [sa.text('lower(name)')], unique=True)

    op.create_table(
        'genre',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(length=50), nullable=False),
        *_timestamps(),
    )
    op.create_index('uq_genre_name_lower', 'genre', [sa.text('lower(name)')], unique=True)

    op.create_table(
        'book',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('price', sa.Numeric(12, 2), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        'book_author',
        sa.Column('book_id', sa.Integer(), sa.ForeignKey('book.id'), primary_key=True),
        sa.Column('author_id', sa.Integer(), sa.ForeignKey('author.id'), primary_key=True),
        sa.Column('position', sa.Integer(), nullable=False),
    )
    op.create_index('ix_book_author_author_id', 'book_author', ['author_id'])

    op.create_table(
        'book_genre',
        sa.Column('book_id', sa.Integer(), sa.ForeignKey('book.id'), primary_key=True),
        sa.Column('genre_id', sa.Integer(), sa.ForeignKey('genre.id'), primary_key=True),
        sa.Column('position', sa.Integer(), nullable=False),
    )
    op.create_index('ix_book_genre_genre_id', 'book_genre', ['genre_id'])


def downgrade() -> None:
    op.drop_index('ix_book_genre_genre_id', table_name='book_genre')
    op.drop_table('book_genre')
    op.drop_index('ix_book_author_author_id', table_name='book_author')
    op.drop_table('book_author')
    op.drop_table('book')
    op.drop_index('uq_genre_name_lower', table_name='genre')
    op.drop_table('genre')
    op.drop_index('uq_author_name_lower', table_name='author')
    op.drop_table('author')
