"""Dataset proxies.

Wrap any iterable data object together with tuple attribute names and a tuple
transformer, and re-expose a curated set of the data's own operations.

Key Features:
- Lazy, restartable iteration over transformed tuples
- Declarative forwarding of data operations with automatic rewrapping
- Equality defined by the wrapped data alone
- Ready-made datasets over Python lists and pandas Series
"""

from .configs import ProxyConfig, configure, get_config, set_config
from .core import NON_FORWARDABLE, DataProxy, TupleSequence, identity
from .datasets import ListDataset, SeriesDataset

__version__ = "0.1.0"

__all__ = [
    # Core abstractions
    "DataProxy",
    "NON_FORWARDABLE",
    "TupleSequence",
    "identity",
    # Datasets
    "ListDataset",
    "SeriesDataset",
    # Configuration
    "ProxyConfig",
    "configure",
    "get_config",
    "set_config",
]
