"""Ready-made dataset proxies."""

from .list_dataset import ListDataset
from .series_dataset import SeriesDataset

__all__ = [
    "ListDataset",
    "SeriesDataset",
]
