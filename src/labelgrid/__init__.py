"""labelgrid

Labeled one and two dimensional containers of data,
with label based access, grouping and aggregation.

labelgrid provides a small in-memory tabular engine
that can be embedded by other programs.
Data is stored in Apache Arrow arrays and all the
numeric computations rely on the Arrow compute functions.

The primary components are:

* The containers, :class:`Series`, :class:`Block` and :class:`DataFrame`.
* The :class:`GroupBy`, to compute statistics for groups of rows.
* The :class:`Array` and :class:`Indexer` on which containers are built.

For the user guide and code documentation of each component, refer to the
:mod:`labelgrid.core` package.
"""

from . import core, errors
from .core import (
    Array,
    Block,
    DataFrame,
    DType,
    GroupBy,
    Indexer,
    Series,
    array,
)

__all__ = (
    "core",
    "errors",
    "Array",
    "DType",
    "array",
    "Indexer",
    "Series",
    "Block",
    "DataFrame",
    "GroupBy",
)
