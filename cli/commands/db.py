# cli/commands/db.py
import click

@click.command('init-db')
@click.option('--drop/--no-drop', default=False, help='Drop every catalog table first')
@click.pass_obj
def init_db(db, drop):
    """Create the catalog schema"""
    if drop:
        click.confirm('This deletes every library, catalog entry and user. Continue?', abort=True)
        db.drop_db()
    db.init_db()
    click.echo(click.style("Catalog schema is ready", fg='green'))
