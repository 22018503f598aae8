"""CLI tool for rendering plain-text templates."""

from typing import List, Optional, Tuple

import click

from ..documents import load_document
from ..models import RenderResult
from .base import TemplateCLI


class RenderCLI(TemplateCLI):
    """CLI tool for rendering text templates."""

    def render_sources(self, sources: Tuple[str, ...], data: dict, plugins: Tuple[str, ...] = ()) -> List[RenderResult]:
        """Render each source (path or URL); stdin when there are none."""
        processor = self.create_processor(plugins)
        if not sources:
            text = click.get_text_stream('stdin').read()
            return [processor.render(text, data)]
        results = []
        for source in sources:
            content, _ = load_document(source)
            results.append(processor.render(content, data))
        return results


@click.command()
@click.argument('sources', nargs=-1)
@click.option('--data', '-d', 'pairs', multiple=True, help='Custom data as KEY=VALUE (repeatable)')
@click.option('--data-file', type=click.Path(exists=True, dir_okay=False), help='JSON object with custom data')
@click.option('--plugin', '-p', 'plugins', multiple=True, help='Module exposing register(registry)')
@click.option('--output', '-o', type=str, help='Output file (defaults to stdout)')
@click.option('--check', is_flag=True, help='Fail if any marker is left unresolved')
def main(sources: Tuple[str, ...], pairs: Tuple[str, ...], data_file: Optional[str],
         plugins: Tuple[str, ...], output: Optional[str] = None, check: bool = False):
    """Replace {{markers}} in text files, URLs or stdin."""
    cli = RenderCLI()
    try:
        data = cli.load_custom_data(pairs, data_file)
        results = cli.render_sources(sources, data, plugins)
        cli.write_output(''.join(result.text for result in results), output)
    except click.UsageError:
        raise
    except Exception as e:
        cli.console.print(f"[bold red]Error rendering template: {str(e)}[/bold red]")
        raise click.Abort()

    if check and not all(result.ok for result in results):
        for result in results:
            cli.report_problems(result)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
