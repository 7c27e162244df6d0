import click
from core.pagination import PageRequest
from core.services.book_service import BookService
from ..utils import open_session, print_page, format_book

@click.group()
def book():
    """Book management commands"""
    pass

@book.command()
@click.argument('title')
@click.argument('price')
@click.option('--author-id', 'author_ids', multiple=True, type=int, help='Author of the book (repeatable, at least one)')
@click.option('--genre-id', 'genre_ids', multiple=True, type=int, help='Genre of the book (repeatable)')
@click.pass_context
def add(ctx: click.Context, title: str, price: str, author_ids: tuple, genre_ids: tuple):
    """Create a book called TITLE costing PRICE

    Example:
        bookstore book add "The Shining" 12.99 --author-id 1 --genre-id 3
    """
    with open_session(ctx) as session:
        created = BookService(session).create_book(title, price, list(author_ids), list(genre_ids))
        click.echo(click.style("Created book: ", fg='green') + format_book(created))

@book.command(name="list")
@click.option('--title', default=None, help='Title contains this text')
@click.option('--author', default=None, help='Any author name contains this text')
@click.option('--genre', default=None, help='Any genre name contains this text')
@click.option('--page', default=0, type=int, help='Zero-based page index')
@click.option('--size', default=20, type=int, help='Books per page (max 100)')
@click.option('--sort', multiple=True, help='Sort as field,asc|desc (repeatable)')
@click.pass_context
def list_books(ctx: click.Context, title: str, author: str, genre: str, page: int, size: int, sort: tuple):
    """List books, optionally filtered"""
    with open_session(ctx) as session:
        result = BookService(session).get_all_books(title, author, genre, PageRequest.of(page, size, sort))
        print_page(result, format_book, 'books')

@book.command()
@click.argument('book_id', type=int)
@click.pass_context
def show(ctx: click.Context, book_id: int):
    """Show book BOOK_ID"""
    with open_session(ctx) as session:
        click.echo(format_book(BookService(session).get_book_by_id(book_id)))

@book.command()
@click.argument('book_id', type=int)
@click.pass_context
def delete(ctx: click.Context, book_id: int):
    """Delete book BOOK_ID (its authors and genres are kept)"""
    with open_session(ctx) as session:
        BookService(session).delete_book(book_id)
        click.echo(click.style(f"Deleted book {book_id}", fg='green'))
