# cli/main.py
import logging
import os
import click
from catalog.sa.database import Database
from .commands.db import init_db
from .commands.library import library
from .commands.user import user

@click.group()
@click.option('--database-url', envvar='DATABASE_URL', default=None,
              help='Database connection string (defaults to DATABASE_URL or sqlite:///catalog.db)')
@click.pass_context
def cli(ctx, database_url):
    """Library Catalog CLI"""
    logging.basicConfig(
        level=os.getenv("CATALOG_LOG_LEVEL", "INFO").upper(),
        format="%(levelname)s %(name)s: %(message)s"
    )
    ctx.obj = Database(database_url)

cli.add_command(init_db)
cli.add_command(library)
cli.add_command(user)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
