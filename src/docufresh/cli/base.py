"""Base class for docufresh CLI tools."""

import importlib
import json
import logging
from typing import Any, Dict, Iterable, Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from .. import config
from ..models import RenderResult
from ..processor import TemplateProcessor

SCALAR_TYPES = (str, int, float, bool)


def configure_logging(level: Optional[str] = None) -> None:
    """Send library logs through rich on stderr."""
    level_name = (level or config.LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


class TemplateCLI:
    """Shared plumbing for CLI tools: processor setup, custom data, output."""

    def __init__(self):
        """Initialize CLI with a stderr console; stdout is kept for rendered output."""
        self.console = Console(stderr=True)
        configure_logging()

    def create_processor(self, plugins: Iterable[str] = ()) -> TemplateProcessor:
        """Create a processor and let each plugin module register its markers.

        Args:
            plugins: Importable module names exposing `register(registry)`
        """
        processor = TemplateProcessor()
        for name in plugins:
            try:
                module = importlib.import_module(name)
            except ImportError as e:
                raise click.UsageError(f"Cannot import plugin '{name}': {e}")
            register = getattr(module, 'register', None)
            if not callable(register):
                raise click.UsageError(f"Plugin '{name}' has no register(registry) function")
            register(processor.registry)
        return processor

    def load_custom_data(self, pairs: Iterable[str] = (), data_file: Optional[str] = None) -> Dict[str, Any]:
        """Build custom data from a JSON file and KEY=VALUE pairs (pairs win)."""
        data: Dict[str, Any] = {}
        if data_file:
            with open(data_file, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
            if not isinstance(loaded, dict):
                raise click.UsageError(f"{data_file} must contain a JSON object")
            for key, value in loaded.items():
                if not isinstance(value, SCALAR_TYPES):
                    raise click.UsageError(f"Value for '{key}' in {data_file} must be a string, number or boolean")
                data[key] = value
        for pair in pairs:
            key, sep, value = pair.partition('=')
            if not sep or not key:
                raise click.UsageError(f"Expected KEY=VALUE, got '{pair}'")
            data[key] = value
        return data

    def write_output(self, text: str, output: Optional[str] = None) -> None:
        """Write text to a file, or to stdout when no file is given."""
        if output:
            with open(output, 'w', encoding='utf-8') as f:
                f.write(text)
            self.console.print(f"[bold green]Wrote {output}[/bold green]")
        else:
            click.echo(text, nl=False)

    def report_problems(self, result: RenderResult) -> None:
        """Print markers that stayed in the output."""
        for marker in result.unresolved:
            self.console.print(f"[yellow]Unknown marker:[/yellow] {marker}")
        for failure in result.failures:
            self.console.print(f"[bold red]Failed marker:[/bold red] {failure.marker} ({failure.error})")
