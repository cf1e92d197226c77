"""Lazy, restartable iteration over transformed tuples."""

from collections.abc import Iterable, Iterator
from typing import Any

from .interfaces import Transformer


class TupleSequence:
    """Iterable view yielding ``transformer(tuple)`` for every source tuple.

    Nothing is materialized: every traversal starts a fresh iteration over the
    source, so the sequence can be walked any number of times as long as the
    source itself can. Order and termination are the source's.
    """

    def __init__(self, source: Iterable[Any], transformer: Transformer):
        self._source = source
        self._transformer = transformer

    def __iter__(self) -> Iterator[Any]:
        transformer = self._transformer
        for tuple_ in self._source:
            yield transformer(tuple_)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} over {type(self._source).__name__}>"
