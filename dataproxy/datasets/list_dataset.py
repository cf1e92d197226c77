"""In-memory dataset backed by a list of dict tuples."""

from typing import Any, Callable, Dict, List, Mapping, Optional

from loguru import logger

from dataproxy.errors import DataError

from ..core.proxy import DataProxy


def _raw_tuples(other: Any) -> List[Any]:
    if isinstance(other, DataProxy):
        return list(other.data)
    return list(other)


class ListDataset(DataProxy):
    """Dataset over a Python ``list`` of mapping tuples.

    Besides the forwarded list operations it offers a small relational
    vocabulary (restrict, project, order, join) that always produces new
    datasets, plus insert/delete which change the underlying list in place.

    Example:
        >>> users = ListDataset([{"id": 1, "name": "Jane"}], ["id", "name"])
        >>> users.restrict({"name": "Jane"}).to_list()
        [{'id': 1, 'name': 'Jane'}]
    """

    def restrict(
        self,
        criteria: Optional[Mapping[str, Any]] = None,
        predicate: Optional[Callable[[Dict[str, Any]], bool]] = None,
    ) -> "ListDataset":
        """Keep tuples matching all ``criteria`` values and ``predicate``.

        A criterion only matches tuples that have the key, so ``{"age": None}``
        selects explicit ``None`` values, not tuples without an age.
        """
        criteria = dict(criteria or {})

        def matches(tuple_: Dict[str, Any]) -> bool:
            if any(key not in tuple_ or tuple_[key] != value for key, value in criteria.items()):
                return False
            return predicate is None or bool(predicate(tuple_))

        return self._with_data([tuple_ for tuple_ in self._data if matches(tuple_)])

    def project(self, *names: str) -> "ListDataset":
        """Keep only the given attributes in every tuple."""
        for name in names:
            if name not in self._schema:
                raise DataError.missing_column(name, self._schema)

        projected = [{name: tuple_.get(name) for name in names} for tuple_ in self._data]
        return type(self)(projected, names, self._transformer)

    def order(self, *names: str) -> "ListDataset":
        """Sort tuples by the given attributes; missing values sort last."""
        for name in names:
            if name not in self._schema:
                raise DataError.missing_column(name, self._schema)

        def sort_key(tuple_: Dict[str, Any]):
            return tuple((tuple_.get(name) is None, tuple_.get(name)) for name in names)

        return self._with_data(sorted(self._data, key=sort_key))

    def join(self, other: DataProxy) -> "ListDataset":
        """Natural join with ``other`` on the attributes both schemas share."""
        common = [name for name in self._schema if name in other.schema]
        schema = list(self._schema) + [name for name in other.schema if name not in self._schema]
        right_tuples = list(other.data)

        if not common:
            logger.warning(
                f"Joining {type(self).__name__} and {type(other).__name__} "
                "without shared attributes produces a cross product"
            )

        joined: List[Dict[str, Any]] = []
        for left in self._data:
            for right in right_tuples:
                if all(left.get(name) == right.get(name) for name in common):
                    joined.append({**left, **right})

        return type(self)(joined, schema, self._transformer)

    def insert(self, tuple_: Dict[str, Any]) -> "ListDataset":
        """Append a tuple to the underlying list."""
        self._data.append(tuple_)
        return self

    def __add__(self, other: Any) -> "ListDataset":
        """Concatenate with a list or another dataset (its raw tuples)."""
        return self._with_data(self._data + _raw_tuples(other))

    def __iadd__(self, other: Any) -> "ListDataset":
        self._data += _raw_tuples(other)
        return self

    def delete(self, tuple_: Dict[str, Any]) -> "ListDataset":
        """Remove every tuple equal to ``tuple_`` from the underlying list."""
        self._data[:] = [existing for existing in self._data if existing != tuple_]
        return self


ListDataset.forward(
    "__getitem__",
    "__len__",
    "__mul__",
    ["copy", "count", "index"],
    ["append", "extend", "pop", "remove", "sort", "reverse"],
)
