# cli/main.py
import click
from core.config import configure_logging
from core.sa.database import Database
from .commands.db import db
from .commands.author import author
from .commands.genre import genre
from .commands.book import book

@click.group()
@click.option('--database-url', envvar='DATABASE_URL', default=None,
              help='Database connection string (defaults to DATABASE_URL or sqlite:///bookstore.db)')
@click.option('--log-level', default='WARNING', help='Logging level')
@click.pass_context
def cli(ctx: click.Context, database_url: str, log_level: str):
    """Bookstore inventory CLI"""
    configure_logging(log_level.upper())
    ctx.ensure_object(dict)
    if 'database' not in ctx.obj:
        ctx.obj['database'] = Database(database_url)

cli.add_command(db)
cli.add_command(author)
cli.add_command(genre)
cli.add_command(book)

def main():
    """Entry point for the CLI"""
    cli(obj={})

if __name__ == '__main__':
    main()
