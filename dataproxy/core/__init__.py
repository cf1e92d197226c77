"""Core dataset proxy abstractions."""

from .interfaces import DataSource, Schema, Transformer, identity
from .iteration import TupleSequence
from .proxy import NON_FORWARDABLE, DataProxy

__all__ = [
    "NON_FORWARDABLE",
    "DataProxy",
    "DataSource",
    "Schema",
    "Transformer",
    "TupleSequence",
    "identity",
]
