"""The labelgrid tabular engine.

The engine provides labeled containers of data
built on top of a few components:

* :class:`Indexer`, resolving labels to positions.
* :class:`Array`, a column of values of one of the
  supported dtypes, stored as a :class:`pyarrow.Array`.
* :mod:`labelgrid.core.reductions` and :mod:`labelgrid.core.ops`,
  the numeric kernels shared by every container.

The containers themselves are:

* :class:`Series`, a single labeled column.
* :class:`Block`, labeled columns all of the same dtype.
* :class:`DataFrame`, labeled columns each with its own dtype.
* :class:`GroupBy`, the rows of any of the above partitioned by key.

Every container is immutable in practice: transformations like slicing,
sorting, arithmetic or aggregations create a new container.
This allows to chain operations like::

    (Block)--slice_by_label-->(Block)--groupby-->(GroupBy)--mean-->(Block)

>>> from labelgrid.core import Block
>>> b = Block.from_col_vec([1, 2, 3, 4, 5, 6], index=[10, 20, 30], columns=["X", "Y"])
>>> (b + 3).get_column_by_label("X").values.to_pylist()
[4, 5, 6]
>>> b.groupby(["a", "b", "a"]).sum().get_column_by_label("Y").values.to_pylist()
[10, 5]
"""

from .arrays import Array, DType, array
from .block import Block
from .dataframe import DataFrame
from .frame import BaseFrame
from .groupby import GroupBy
from .indexer import Indexer
from .series import Series

__all__ = (
    "Array",
    "DType",
    "array",
    "Indexer",
    "Series",
    "BaseFrame",
    "Block",
    "DataFrame",
    "GroupBy",
)
