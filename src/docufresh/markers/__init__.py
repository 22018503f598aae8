"""Marker registry and the built-in marker catalog."""

from typing import Callable, Dict, Iterator, List, Optional, Sequence

from .dates import DATE_MARKERS
from .numbers import NUMBER_MARKERS
from .text import TEXT_MARKERS

MarkerFunction = Callable[[Sequence[str]], str]


def builtin_markers() -> Dict[str, MarkerFunction]:
    """All built-in markers keyed by name."""
    return {**DATE_MARKERS, **NUMBER_MARKERS, **TEXT_MARKERS}


class MarkerRegistry:
    """Mapping from marker name to the function that resolves it.

    Names are unique: registering an existing name replaces its function,
    built-ins included. There is no removal. The registry is mutated in
    place without locking, so multi-threaded callers must serialize
    `register` against concurrent lookups.
    """

    def __init__(self, markers: Optional[Dict[str, MarkerFunction]] = None):
        self._markers: Dict[str, MarkerFunction] = dict(markers or {})

    @classmethod
    def with_builtins(cls) -> 'MarkerRegistry':
        """Create a registry seeded with the built-in catalog."""
        return cls(builtin_markers())

    def register(self, name: str, fn: MarkerFunction) -> None:
        """Register a marker, replacing any existing one with the same name.

        Args:
            name: Marker name as written between the braces
            fn: Function taking the list of string parameters, returning a string;
                stored as given, a non-callable only fails (and is logged) when used
        """
        self._markers[name] = fn

    def get(self, name: str) -> Optional[MarkerFunction]:
        """Get a marker function by name, or None if it is not registered."""
        return self._markers.get(name)

    def names(self) -> List[str]:
        """Get list of registered marker names."""
        return list(self._markers.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._markers

    def __len__(self) -> int:
        return len(self._markers)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())


__all__ = ['MarkerRegistry', 'MarkerFunction', 'builtin_markers']
