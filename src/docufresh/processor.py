"""Template processor replacing `{{marker}}` placeholders in text."""

import logging
import re
from typing import Any, Dict, List, Mapping, Optional

from . import config, dom
from .markers import MarkerFunction, MarkerRegistry
from .markers.coerce import format_number
from .models import MarkerCall, MarkerFailure, RenderResult

logger = logging.getLogger(__name__)

MARKER_RE = re.compile(config.MARKER_PATTERN)

CustomData = Mapping[str, Any]


def stringify(value: Any) -> str:
    """Render a custom data value as text (true/false, 5 rather than 5.0)."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (int, float)):
        return format_number(value)
    if value is None:
        return 'null'
    return str(value)


def parse_marker(content: str, raw: str = "") -> MarkerCall:
    """Parse the content between `{{` and `}}` into a name and parameters."""
    return MarkerCall.from_content(content, raw)


def find_markers(text: str) -> List[MarkerCall]:
    """All marker invocations in text, in order of appearance."""
    return [parse_marker(match.group(1), match.group(0)) for match in MARKER_RE.finditer(text)]


class TemplateProcessor:
    """Resolves markers in text against custom data and a marker registry.

    Each instance owns its registry. Use a fresh instance wherever registered
    markers must not leak between callers.
    """

    def __init__(self, registry: Optional[MarkerRegistry] = None):
        """Initialize processor.

        Args:
            registry: Registry to resolve markers with; defaults to a new one
                      seeded with the built-in markers
        """
        self.registry = registry if registry is not None else MarkerRegistry.with_builtins()

    def register_marker(self, name: str, fn: MarkerFunction) -> None:
        """Register (or override) a marker on this processor's registry."""
        self.registry.register(name, fn)

    def process(self, text: str, custom_data: Optional[CustomData] = None) -> str:
        """Replace all markers in text.

        Args:
            text: Text containing markers
            custom_data: Values for `{{key}}` markers, applied before built-ins

        Returns:
            str: Text with markers replaced; unknown or failing markers are left as-is
        """
        return self.render(text, custom_data).text

    def render(self, text: str, custom_data: Optional[CustomData] = None) -> RenderResult:
        """Replace all markers in text and report what could not be resolved."""
        if not isinstance(text, str):
            raise TypeError(f"text must be a str, got {type(text).__name__}")

        result = self._replace_custom_data(text, custom_data or {})
        return self._replace_markers(result)

    def _replace_custom_data(self, text: str, data: CustomData) -> str:
        """Literal `{{key}}` substitution for all keys in a single scan.

        Inserted values are never matched against other keys.
        """
        if not data:
            return text
        values = {"{{" + str(key) + "}}": stringify(value) for key, value in data.items()}
        pattern = re.compile("|".join(re.escape(marker) for marker in values))
        return pattern.sub(lambda match: values[match.group(0)], text)

    def _replace_markers(self, text: str) -> RenderResult:
        """Resolve every registered marker; identical marker text gets one value."""
        resolved: Dict[str, Optional[str]] = {}
        failures: List[MarkerFailure] = []
        unresolved: List[str] = []

        def resolve(match: 're.Match[str]') -> str:
            raw = match.group(0)
            if raw not in resolved:
                resolved[raw] = self._invoke(parse_marker(match.group(1), raw), failures, unresolved)
            value = resolved[raw]
            return raw if value is None else value

        output = MARKER_RE.sub(resolve, text)
        logger.debug(f"Resolved {sum(v is not None for v in resolved.values())} of {len(resolved)} distinct markers")
        return RenderResult(text=output, failures=failures, unresolved=unresolved)

    def _invoke(self, call: MarkerCall, failures: List[MarkerFailure], unresolved: List[str]) -> Optional[str]:
        fn = self.registry.get(call.name)
        if fn is None:
            unresolved.append(call.raw)
            return None
        try:
            return str(fn(list(call.params)))
        except Exception as e:
            logger.error(f"Error processing marker {call.raw}: {e}")
            failures.append(MarkerFailure(marker=call.raw, name=call.name, error=str(e)))
            return None

    def auto_update(self, document: Any, selector: Optional[str] = None,
                    custom_data: Optional[CustomData] = None) -> int:
        """Process every text node under selector in an HTML document in place.

        Returns:
            int: Number of text nodes that changed
        """
        return dom.auto_update(self, document, selector, custom_data)
