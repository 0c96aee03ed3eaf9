# cli/commands/user.py
from datetime import timedelta
import click
from catalog.authorizations import ADMIN, REGULAR, SUPERUSER, scopes_of
from catalog.errors import CatalogError
from catalog.sa.repositories import UserRepository
from catalog.sa.repositories.options import UserAllOptions
from catalog.validators import validate_library_scope
from ..utils import echo_error, echo_row

def valid_scope_token(token: str) -> bool:
    if token == SUPERUSER:
        return True
    scope, _, tier = token.rpartition(':')
    return bool(scope) and validate_library_scope(scope) and tier in (ADMIN, REGULAR)

def full_record(found, scope: str) -> dict:
    """The user's current fields with a new scope; the password is kept"""
    return {
        'username': found.username,
        'name': found.name,
        'active': found.active,
        'scope': scope,
        'google_books_api_key': found.google_books_api_key,
    }

@click.group()
def user():
    """Manage users and their access"""
    pass

@user.command()
@click.argument('username')
@click.option('--password', prompt=True, hide_input=True, confirmation_prompt=True, help='Login password')
@click.option('--name', required=True, help='Display name')
@click.option('--scope', default='', help='Space separated scope tokens, e.g. "fiction:admin"')
@click.pass_context
def add(ctx, username, password, name, scope):
    """Create a user"""
    for token in scope.split():
        if not valid_scope_token(token):
            raise click.BadParameter(f"Invalid scope token '{token}'", param_hint='--scope')
    session = ctx.obj.get_session()
    try:
        created = UserRepository(session).insert({
            'username': username,
            'password': password,
            'name': name,
            'scope': ' '.join(scope.split()),
        })
        click.echo(click.style(f"Created User {created.id} '{created.username}'", fg='green'))
    except CatalogError as e:
        echo_error(e)
        ctx.exit(1)
    finally:
        session.close()

@user.command('list')
@click.option('--active/--all', default=False, help='Only list active users')
@click.option('--username', default=None, help='Case insensitive username match')
@click.pass_context
def list_users(ctx, active, username):
    """List users ordered by username"""
    session = ctx.obj.get_session()
    try:
        users = UserRepository(session).all(UserAllOptions(active=active, username=username))
        if not users:
            click.echo(click.style("No users found", fg='yellow'))
            return
        for found in users:
            status = '' if found.active else click.style(' (inactive)', fg='yellow')
            click.echo(f"{found.id:>4}  {found.username}  {found.name}  [{found.scope}]{status}")
    except CatalogError as e:
        echo_error(e)
        ctx.exit(1)
    finally:
        session.close()

@user.command()
@click.argument('username')
@click.argument('token')
@click.option('--revoke', is_flag=True, default=False, help='Remove the scope token instead of adding it')
@click.pass_context
def grant(ctx, username, token, revoke):
    """Grant (or revoke) a scope TOKEN such as "fiction:regular" or "superuser"

    Requests are authorized against the user's current scope, so the change
    applies to access tokens already issued.
    """
    if not valid_scope_token(token):
        raise click.BadParameter(f"Invalid scope token '{token}'", param_hint='TOKEN')
    session = ctx.obj.get_session()
    try:
        repo = UserRepository(session)
        found = repo.exact(username)
        tokens = scopes_of(found)
        if revoke:
            tokens.discard(token)
        else:
            tokens.add(token)
        updated = repo.update(found.id, full_record(found, ' '.join(sorted(tokens))))
        echo_row(updated.username, updated.scope or '(no scope)', 'green')
    except CatalogError as e:
        echo_error(e)
        ctx.exit(1)
    finally:
        session.close()

@user.command()
@click.argument('username')
@click.option('--hours', default=1.0, type=float, show_default=True, help='Token lifetime in hours')
@click.pass_context
def token(ctx, username, hours):
    """Issue a bearer access token for USERNAME"""
    session = ctx.obj.get_session()
    try:
        repo = UserRepository(session)
        found = repo.exact(username)
        access_token = repo.add_access_token(found.id, timedelta(hours=hours))
        click.echo(access_token.token)
        echo_row("Expires", access_token.expires.isoformat(), 'blue')
    except CatalogError as e:
        echo_error(e)
        ctx.exit(1)
    finally:
        session.close()
