import click
from contextlib import contextmanager
from typing import Callable, Iterator
from sqlalchemy.orm import Session

from core.exceptions import BookstoreError
from core.pagination import Page
from core.sa.database import Database


@contextmanager
def open_session(ctx: click.Context) -> Iterator[Session]:
    """Open a session on the CLI's database, turning domain errors into a clean exit"""
    database: Database = ctx.obj['database']
    session = database.get_session()
    try:
        yield session
    except BookstoreError as e:
        click.echo(click.style(f"Error: {e.message}", fg='red'), err=True)
        ctx.exit(1)
    finally:
        session.close()


def print_page(page: Page, render: Callable[[object], str], item_type: str = 'items') -> None:
    """Print one page of results followed by paging information"""
    if not page.content:
        click.echo(click.style(f"No {item_type} found.", fg='yellow'))
        return

    for item in page.content:
        click.echo(render(item))

    click.echo(
        click.style(f"\nPage {page.number + 1} of {page.total_pages}", fg='blue') +
        click.style(f" ({page.total_elements} {item_type}, {page.size} per page)", fg='blue')
    )


def format_book(book) -> str:
    authors = ", ".join(a.name for a in book.authors)
    genres = ", ".join(g.name for g in book.genres)
    line = f"[{book.id}] {book.title} - {book.price} (by {authors})"
    if genres:
        line += f" [{genres}]"
    return line
