import click
from core.pagination import PageRequest
from core.services.author_service import AuthorService
from ..utils import open_session, print_page, format_book

@click.group()
def author():
    """Author management commands"""
    pass

@author.command()
@click.argument('name')
@click.pass_context
def add(ctx: click.Context, name: str):
    """Create an author called NAME"""
    with open_session(ctx) as session:
        created = AuthorService(session).create_author(name)
        click.echo(click.style(f"Created author {created.name} with ID {created.id}", fg='green'))

@author.command(name="list")
@click.option('--name', default=None, help='Only authors whose name contains this text')
@click.option('--page', default=0, type=int, help='Zero-based page index')
@click.option('--size', default=20, type=int, help='Authors per page (max 100)')
@click.option('--sort', multiple=True, help='Sort as field,asc|desc (repeatable)')
@click.pass_context
def list_authors(ctx: click.Context, name: str, page: int, size: int, sort: tuple):
    """List authors"""
    with open_session(ctx) as session:
        result = AuthorService(session).get_all_authors(name, PageRequest.of(page, size, sort))
        print_page(result, lambda a: f"[{a.id}] {a.name}", 'authors')

@author.command()
@click.argument('author_id', type=int)
@click.argument('name')
@click.pass_context
def rename(ctx: click.Context, author_id: int, name: str):
    """Rename author AUTHOR_ID to NAME"""
    with open_session(ctx) as session:
        updated = AuthorService(session).update_author(author_id, name)
        click.echo(click.style(f"Renamed author {updated.id} to {updated.name}", fg='green'))

@author.command()
@click.argument('author_id', type=int)
@click.pass_context
def delete(ctx: click.Context, author_id: int):
    """Delete author AUTHOR_ID (refused while books reference it)"""
    with open_session(ctx) as session:
        AuthorService(session).delete_author(author_id)
        click.echo(click.style(f"Deleted author {author_id}", fg='green'))

@author.command()
@click.argument('author_id', type=int)
@click.option('--page', default=0, type=int, help='Zero-based page index')
@click.option('--size', default=20, type=int, help='Books per page (max 100)')
@click.pass_context
def books(ctx: click.Context, author_id: int, page: int, size: int):
    """List the books of author AUTHOR_ID"""
    with open_session(ctx) as session:
        result = AuthorService(session).list_books_by_author(author_id, PageRequest.of(page, size))
        print_page(result, format_book, 'books')
