# cli/commands/library.py
import click
from catalog.errors import CatalogError
from catalog.sa.repositories import LibraryRepository
from catalog.sa.repositories.options import LibraryAllOptions
from ..utils import echo_error, echo_row

@click.group()
def library():
    """Manage libraries"""
    pass

@library.command()
@click.argument('name')
@click.argument('scope')
@click.option('--notes', default=None, help='Free text notes')
@click.option('--inactive', is_flag=True, default=False, help='Create the library as inactive')
@click.pass_context
def add(ctx, name, scope, notes, inactive):
    """Create a library. SCOPE is the alphanumeric prefix of its scope tokens."""
    session = ctx.obj.get_session()
    try:
        created = LibraryRepository(session).insert({
            'name': name,
            'scope': scope,
            'active': not inactive,
            'notes': notes,
        })
        click.echo(click.style(f"Created Library {created.id} '{created.name}'", fg='green'))
        echo_row("Admin scope", f"{created.scope}:admin")
        echo_row("Regular scope", f"{created.scope}:regular")
    except CatalogError as e:
        echo_error(e)
        ctx.exit(1)
    finally:
        session.close()

@library.command('list')
@click.option('--active/--all', default=False, help='Only list active libraries')
@click.option('--name', default=None, help='Case insensitive name match')
@click.pass_context
def list_libraries(ctx, active, name):
    """List libraries ordered by name"""
    session = ctx.obj.get_session()
    try:
        libraries = LibraryRepository(session).all(LibraryAllOptions(active=active, name=name))
        if not libraries:
            click.echo(click.style("No libraries found", fg='yellow'))
            return
        for found in libraries:
            status = '' if found.active else click.style(' (inactive)', fg='yellow')
            click.echo(f"{found.id:>4}  {found.name}  [{found.scope}]{status}")
    except CatalogError as e:
        echo_error(e)
        ctx.exit(1)
    finally:
        session.close()
