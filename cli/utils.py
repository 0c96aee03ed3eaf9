# cli/utils.py
import click
from catalog.errors import CatalogError

def echo_error(error: CatalogError):
    """Print a catalog error in red on stderr"""
    click.echo(click.style(f"{type(error).__name__}: {error.message}", fg='red'), err=True)

def echo_row(label: str, value, color: str = 'cyan'):
    click.echo(click.style(f"{label}: ", fg='blue') + click.style(str(value), fg=color))
