"""CLI module for the docufresh package."""

from .base import TemplateCLI
from .render import main as render_main
from .html import main as html_main
from .markers import main as markers_main

__all__ = ['TemplateCLI', 'render_main', 'html_main', 'markers_main']
