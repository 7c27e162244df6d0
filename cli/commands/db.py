import click

@click.group()
def db():
    """Database management commands"""
    pass

@db.command()
@click.pass_context
def init(ctx: click.Context):
    """Create all tables"""
    ctx.obj['database'].init_db()
    click.echo(click.style("Database schema created.", fg='green'))
