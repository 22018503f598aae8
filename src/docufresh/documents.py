"""Loading template documents from local files or URLs."""

import logging
import os
import urllib.parse
from typing import Tuple

import requests

from . import config

logger = logging.getLogger(__name__)


def is_url(source: str) -> bool:
    """Check whether source looks like an http(s) URL."""
    return urllib.parse.urlparse(source).scheme in ('http', 'https')


def fetch_document(url: str) -> Tuple[str, str]:
    """Fetch a document from a URL.

    Args:
        url: The URL to fetch

    Returns:
        Tuple of (content, kind) where kind is 'html' or 'text'

    Raises:
        ValueError: If the URL is invalid or content type is unsupported
        requests.RequestException: For network or HTTP errors
    """
    parsed_url = urllib.parse.urlparse(url)
    if not parsed_url.scheme or not parsed_url.netloc:
        raise ValueError(f"Invalid URL: {url}")

    headers = {'User-Agent': config.USER_AGENT}
    response = requests.get(url, headers=headers, timeout=config.HTTP_TIMEOUT)
    response.raise_for_status()

    content_type = response.headers.get('Content-Type', '').lower()
    if 'html' in content_type:
        return response.text, 'html'
    elif content_type.startswith('text/') or not content_type:
        return response.text, 'text'
    else:
        raise ValueError(f"Unsupported content type: {content_type}")


def read_document(path: str, encoding: str = 'utf-8') -> Tuple[str, str]:
    """Read a document from disk; kind is decided by the file extension."""
    with open(path, 'r', encoding=encoding) as f:
        content = f.read()
    kind = 'html' if path.lower().endswith(config.HTML_EXTENSIONS) else 'text'
    return content, kind


def load_document(source: str) -> Tuple[str, str]:
    """Load a document from a path or URL.

    Returns:
        Tuple of (content, kind) where kind is 'html' or 'text'
    """
    if is_url(source):
        logger.debug(f"Fetching {source}")
        return fetch_document(source)
    return read_document(os.path.expanduser(source))
