"""CLI tool listing the available markers."""

from typing import Tuple

import click
from rich.console import Console
from rich.table import Table

from .base import TemplateCLI


def describe(fn) -> str:
    """First line of a marker function's docstring."""
    if not callable(fn):
        return ''
    doc = (getattr(fn, '__doc__', None) or '').strip()
    return doc.splitlines()[0] if doc else ''


@click.command()
@click.option('--plugin', '-p', 'plugins', multiple=True, help='Module exposing register(registry)')
def main(plugins: Tuple[str, ...]):
    """List registered markers."""
    cli = TemplateCLI()
    registry = cli.create_processor(plugins).registry

    table = Table(title="Markers")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    for name in registry.names():
        table.add_row(f"{{{{{name}}}}}", describe(registry.get(name)))
    Console().print(table)


if __name__ == '__main__':
    main()
