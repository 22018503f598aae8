"""CLI tool for refreshing markers inside HTML documents."""

from typing import Optional, Tuple

import click
from bs4 import BeautifulSoup

from .. import config
from ..documents import load_document
from .base import TemplateCLI


class HtmlCLI(TemplateCLI):
    """CLI tool for HTML documents."""

    def update_document(self, source: str, selector: str, data: dict,
                        plugins: Tuple[str, ...] = ()) -> Tuple[str, int]:
        """Load an HTML document and process its text nodes under selector.

        Returns:
            Tuple of (updated HTML, number of changed text nodes)
        """
        content, kind = load_document(source)
        if kind != 'html':
            self.console.print(f"[yellow]{source} does not look like HTML; parsing it anyway.[/yellow]")
        soup = BeautifulSoup(content, 'html.parser')
        processor = self.create_processor(plugins)
        changed = processor.auto_update(soup, selector, data)
        return str(soup), changed


@click.command()
@click.argument('source')
@click.option('--selector', '-s', default=config.DEFAULT_SELECTOR, show_default=True, help='CSS selector of the root element')
@click.option('--data', '-d', 'pairs', multiple=True, help='Custom data as KEY=VALUE (repeatable)')
@click.option('--data-file', type=click.Path(exists=True, dir_okay=False), help='JSON object with custom data')
@click.option('--plugin', '-p', 'plugins', multiple=True, help='Module exposing register(registry)')
@click.option('--output', '-o', type=str, help='Output file (defaults to stdout)')
def main(source: str, selector: str, pairs: Tuple[str, ...], data_file: Optional[str],
         plugins: Tuple[str, ...], output: Optional[str] = None):
    """Replace {{markers}} in the text of an HTML file or URL."""
    cli = HtmlCLI()
    try:
        data = cli.load_custom_data(pairs, data_file)
        html, changed = cli.update_document(source, selector, data, plugins)
        cli.console.print(f"[bold cyan]Updated {changed} text node(s)[/bold cyan]")
        cli.write_output(html, output)
    except click.UsageError:
        raise
    except Exception as e:
        cli.console.print(f"[bold red]Error updating document: {str(e)}[/bold red]")
        raise click.Abort()


if __name__ == '__main__':
    main()
