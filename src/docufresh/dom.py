"""In-place marker processing for HTML documents parsed with BeautifulSoup."""

import logging
from typing import Any, Iterator, Mapping, Optional

from bs4 import BeautifulSoup, Tag
from bs4.element import NavigableString, PreformattedString

from . import config

logger = logging.getLogger(__name__)


def iter_text_nodes(root: Tag) -> Iterator[NavigableString]:
    """Depth-first walk yielding text nodes that contain a marker opening.

    Comments, CDATA, doctypes and processing instructions are skipped.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, NavigableString):
            if not isinstance(node, PreformattedString) and config.MARKER_OPEN in node:
                yield node
        elif isinstance(node, Tag):
            # Reversed so children come off the stack in document order
            stack.extend(reversed(list(node.children)))


def auto_update(processor: Any, document: Optional[BeautifulSoup], selector: Optional[str] = None,
                custom_data: Optional[Mapping[str, Any]] = None) -> int:
    """Replace markers in every text node below the element matching selector.

    Args:
        processor: Object with a `process(text, custom_data)` method
        document: Parsed HTML document, or None when there is none
        selector: CSS selector for the root element (defaults to DEFAULT_SELECTOR)
        custom_data: Values for `{{key}}` markers

    Returns:
        int: Number of text nodes that were changed
    """
    if document is None:
        logger.warning("auto_update() needs an HTML document; nothing to update")
        return 0

    selector = selector or config.DEFAULT_SELECTOR
    root = document.select_one(selector)
    if root is None:
        logger.warning(f'Element "{selector}" not found')
        return 0

    # Collect first: replacing nodes while walking would unlink them from the tree
    nodes = list(iter_text_nodes(root))
    changed = 0
    for node in nodes:
        original = str(node)
        updated = processor.process(original, custom_data)
        if updated != original:
            node.replace_with(type(node)(updated))
            changed += 1

    logger.debug(f"Updated {changed} of {len(nodes)} text nodes under {selector}")
    return changed
