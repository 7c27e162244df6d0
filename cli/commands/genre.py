import click
from core.pagination import PageRequest
from core.services.genre_service import GenreService
from ..utils import open_session, print_page, format_book

@click.group()
def genre():
    """Genre management commands"""
    pass

@genre.command()
@click.argument('name')
@click.pass_context
def add(ctx: click.Context, name: str):
    """Create a genre called NAME"""
    with open_session(ctx) as session:
        created = GenreService(session).create_genre(name)
        click.echo(click.style(f"Created genre {created.name} with ID {created.id}", fg='green'))

@genre.command(name="list")
@click.option('--name', default=None, help='Only genres whose name contains this text')
@click.option('--page', default=0, type=int, help='Zero-based page index')
@click.option('--size', default=20, type=int, help='Genres per page (max 100)')
@click.option('--sort', multiple=True, help='Sort as field,asc|desc (repeatable)')
@click.pass_context
def list_genres(ctx: click.Context, name: str, page: int, size: int, sort: tuple):
    """List genres"""
    with open_session(ctx) as session:
        result = GenreService(session).get_all_genres(name, PageRequest.of(page, size, sort))
        print_page(result, lambda g: f"[{g.id}] {g.name}", 'genres')

@genre.command()
@click.argument('genre_id', type=int)
@click.argument('name')
@click.pass_context
def rename(ctx: click.Context, genre_id: int, name: str):
    """Rename genre GENRE_ID to NAME"""
    with open_session(ctx) as session:
        updated = GenreService(session).update_genre(genre_id, name)
        click.echo(click.style(f"Renamed genre {updated.id} to {updated.name}", fg='green'))

@genre.command()
@click.argument('genre_id', type=int)
@click.pass_context
def delete(ctx: click.Context, genre_id: int):
    """Delete genre GENRE_ID (refused while books reference it)"""
    with open_session(ctx) as session:
        GenreService(session).delete_genre(genre_id)
        click.echo(click.style(f"Deleted genre {genre_id}", fg='green'))

@genre.command()
@click.argument('genre_id', type=int)
@click.option('--page', default=0, type=int, help='Zero-based page index')
@click.option('--size', default=20, type=int, help='Books per page (max 100)')
@click.pass_context
def books(ctx: click.Context, genre_id: int, page: int, size: int):
    """List the books tagged with genre GENRE_ID"""
    with open_session(ctx) as session:
        result = GenreService(session).list_books_by_genre(genre_id, PageRequest.of(page, size))
        print_page(result, format_book, 'books')
