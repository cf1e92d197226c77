"""Base class for dataset proxies.

A dataset proxy holds a reference to some underlying data (a list, a pandas
Series, a query object, ...) together with the names of the tuple attributes
and a tuple transformer. Concrete datasets declare which operations of the
underlying data they expose with :meth:`DataProxy.forward`; every forwarded
call hands back either the dataset itself, a new dataset of the same class or
the raw result, depending on what the underlying operation returned.
"""

import operator
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Callable, ClassVar, FrozenSet, Optional

from loguru import logger

from dataproxy.errors import ForwardingError

from ..configs import get_config
from .interfaces import Schema, Transformer, identity
from .iteration import TupleSequence

NON_FORWARDABLE: FrozenSet[str] = frozenset({
    # iteration
    "each",
    "__iter__",
    # conversion to list / array
    "to_list",
    "tolist",
    "to_numpy",
    "__array__",
    # type checks
    "__class__",
    "__instancecheck__",
    "__subclasscheck__",
    # the proxy's own state, identity and equality
    "data",
    "schema",
    "transformer",
    "forward",
    "__eq__",
    "__ne__",
    "__hash__",
    "__init__",
    "__new__",
    "__getattr__",
    "__getattribute__",
    "__setattr__",
    "__repr__",
})


def _flatten_names(names: Iterable[Any]) -> Iterator[str]:
    for name in names:
        if isinstance(name, (list, tuple, set, frozenset)):
            yield from _flatten_names(name)
        else:
            yield name


def _is_reserved(name: str) -> bool:
    if name in NON_FORWARDABLE or name in vars(DataProxy):
        return True
    is_dunder = name.startswith("__") and name.endswith("__")
    return name.startswith("_") and not is_dunder


def _forwarder(name: str) -> Callable[..., Any]:
    def forwarded(self, *args, **kwargs):
        response = getattr(self._data, name)(*args, **kwargs)
        return self._wrap_response(name, response)

    forwarded.__name__ = name
    forwarded.__doc__ = f"Forward ``{name}`` to the underlying data."
    return forwarded


class DataProxy:
    """Dataset wrapping an underlying data object.

    Subclasses configure themselves at class level:

    * ``default_transformer`` - tuple transformer used when none is passed to
      the constructor (identity by default)
    * ``data_equals`` - how two underlying data objects are compared
    * ``forward(...)`` - which operations of the data are exposed

    Example:

        class NumbersDataset(DataProxy):
            default_transformer = staticmethod(lambda n: n * 2)

        NumbersDataset.forward("__getitem__", "count")
    """

    default_transformer: ClassVar[Transformer] = staticmethod(identity)
    data_equals: ClassVar[Callable[[Any, Any], Any]] = staticmethod(operator.eq)
    forwarded_names: ClassVar[FrozenSet[str]] = frozenset()

    def __init__(
        self,
        data: Any,
        schema: Sequence[str],
        transformer: Optional[Transformer] = None,
    ):
        """Initialize the dataset.

        Args:
            data: Underlying data object; kept by reference, never copied
            schema: Tuple attribute names
            transformer: Tuple transformer, defaults to the class-level one
        """
        self._data = data
        self._schema: Schema = tuple(schema)
        self._transformer = (
            transformer if transformer is not None else type(self).default_transformer
        )

    @property
    def data(self) -> Any:
        """Underlying data object."""
        return self._data

    @property
    def schema(self) -> Schema:
        """Tuple attribute names."""
        return self._schema

    @property
    def transformer(self) -> Transformer:
        """Tuple transformer applied during iteration."""
        return self._transformer

    def each(self, callback: Optional[Callable[[Any], Any]] = None) -> Optional[TupleSequence]:
        """Iterate over the data, transforming every tuple.

        Returns a lazy, restartable :class:`TupleSequence` when no callback is
        given; otherwise calls ``callback`` with each transformed tuple and
        returns ``None``.
        """
        if callback is None:
            return TupleSequence(self._data, self._transformer)

        transformer = self._transformer
        for tuple_ in self._data:
            callback(transformer(tuple_))
        return None

    def __iter__(self) -> Iterator[Any]:
        return iter(self.each())

    def to_list(self) -> list:
        """Materialize the transformed tuples."""
        return list(self.each())

    def _with_data(self, data: Any) -> "DataProxy":
        return type(self)(data, self._schema, self._transformer)

    def _wrap_response(self, name: str, response: Any) -> Any:
        if response is self._data:
            logger.trace("{}.{} returned its data, keeping dataset", type(self).__name__, name)
            return self
        if isinstance(response, type(self._data)):
            logger.trace("{}.{} returned new data, rewrapping", type(self).__name__, name)
            return self._with_data(response)
        logger.trace(
            "{}.{} returned {}, passing through",
            type(self).__name__,
            name,
            type(response).__name__,
        )
        return response

    @classmethod
    def forward(cls, *names: Any) -> None:
        """Forward the given methods to the underlying data object.

        Names may be strings or nested lists of strings. Reserved names
        (``NON_FORWARDABLE``, anything ``DataProxy`` itself defines, and
        private single-underscore names) raise :class:`ForwardingError`
        unless strict forwarding is disabled in the configuration, in which
        case they are skipped. All names are checked before any method is
        installed, so a rejected call leaves the class unchanged.

        Example:

            class MyDataset(DataProxy):
                pass

            MyDataset.forward("head", ["sort_values", "count"])
        """
        strict = get_config().strict_forwarding
        accepted = []

        for name in _flatten_names(names):
            if not isinstance(name, str):
                raise ForwardingError.invalid_name(name, cls.__name__)
            if _is_reserved(name):
                if strict:
                    raise ForwardingError.reserved_name(name, cls.__name__)
                logger.warning(f"Skipping reserved method '{name}' on {cls.__name__}")
                continue
            accepted.append(name)

        for name in accepted:
            method = _forwarder(name)
            method.__qualname__ = f"{cls.__qualname__}.{name}"
            setattr(cls, name, method)

        cls.forwarded_names = cls.forwarded_names | frozenset(accepted)
        logger.debug(f"{cls.__name__} forwards {sorted(accepted)}")

    def __eq__(self, other: object) -> Any:
        if not isinstance(other, DataProxy):
            return NotImplemented

        mine, theirs = type(self._data), type(other._data)
        if not (issubclass(mine, theirs) or issubclass(theirs, mine)):
            return False

        # a dataset-specific comparison wins over plain ==, whichever side has it
        equals = self.data_equals
        if equals is operator.eq:
            equals = other.data_equals
        return bool(equals(self._data, other._data))

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(data={self._data!r}, schema={list(self._schema)!r})"
