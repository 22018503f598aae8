"""Replace `{{marker}}` placeholders in text with live values.

`docufresh.process`, `docufresh.register_marker` and `docufresh.auto_update`
use one shared default processor: a marker registered through them is visible
to every caller in the process. Construct a `TemplateProcessor` per isolated
use (e.g. per request) when registering custom markers.
"""

from .markers import MarkerRegistry, MarkerFunction, builtin_markers
from .models import MarkerCall, MarkerFailure, RenderResult
from .processor import TemplateProcessor, find_markers, parse_marker

# Shared default instance
default_processor = TemplateProcessor()

process = default_processor.process
render = default_processor.render
register_marker = default_processor.register_marker
auto_update = default_processor.auto_update

__all__ = [
    'TemplateProcessor',
    'MarkerRegistry',
    'MarkerFunction',
    'MarkerCall',
    'MarkerFailure',
    'RenderResult',
    'builtin_markers',
    'default_processor',
    'find_markers',
    'parse_marker',
    'process',
    'render',
    'register_marker',
    'auto_update',
]

__version__ = "0.1.0"
