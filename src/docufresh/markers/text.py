"""Text transformation markers."""

from typing import Sequence


def capitalize(params: Sequence[str]) -> str:
    """First character upper case, the rest lower case."""
    text = params[0]
    return text[:1].upper() + text[1:].lower()


def upper(params: Sequence[str]) -> str:
    """Text in upper case."""
    return params[0].upper()


def lower(params: Sequence[str]) -> str:
    """Text in lower case."""
    return params[0].lower()


TEXT_MARKERS = {
    'capitalize': capitalize,
    'upper': upper,
    'lower': lower,
}
