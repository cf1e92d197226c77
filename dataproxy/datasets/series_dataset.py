"""Dataset backed by a pandas Series."""

import pandas as pd

from ..core.proxy import DataProxy


class SeriesDataset(DataProxy):
    """Dataset over a ``pandas.Series``.

    Operations returning a Series (``head``, ``sort_values``, ``dropna``, ...)
    come back as new datasets; scalars, arrays and frames are returned as is.
    """

    data_equals = staticmethod(pd.Series.equals)


SeriesDataset.forward(
    "head",
    "tail",
    "sort_values",
    "dropna",
    "where",
    "unique",
    "sum",
    "count",
    "mean",
    "to_frame",
    "__len__",
    "__getitem__",
)
