"""
Core interfaces and protocols for dataset proxies.
Defines the contracts the wrapped collaborators must follow.
"""

from collections.abc import Iterator
from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class DataSource(Protocol):
    """Protocol for the underlying data a dataset proxy wraps.

    Any other named operation a concrete dataset forwards must also be
    present on the source; the proxy looks it up by name at call time.
    """

    def __iter__(self) -> Iterator[Any]:
        """Iterate over raw tuples, in the source's own order."""
        ...

    def __eq__(self, other: object) -> Any:
        """Compare against another source of the same kind."""
        ...


Transformer = Callable[[Any], Any]
"""Pure function applied to every raw tuple during iteration."""

Schema = tuple[str, ...]


def identity(tuple_: Any) -> Any:
    """Default no-op tuple transformer."""
    return tuple_


__all__ = [
    "DataSource",
    "Schema",
    "Transformer",
    "identity",
]
