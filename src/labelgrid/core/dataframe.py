"""Two dimensional container with a dtype for each column.

A :class:`DataFrame` stores columns of different dtypes
in the same table, for example a column of names next to
a column of prices:

>>> df = DataFrame.from_dict(
...     {"name": ["Flamingo", "Horse", "Centipede"], "n_legs": [2, 4, 100]},
...     index=["a", "b", "c"],
... )
>>> df.dtypes.values.to_pylist()
['str', 'i64']

Statistics only make sense for numeric columns,
so reductions and :meth:`DataFrame.describe` only
consider the columns returned by :meth:`DataFrame.get_numeric_data`:

>>> df.sum().index.values
['n_legs']
>>> df.max().values.to_pylist()
[100]

The data can be moved back and forth from a :class:`pyarrow.Table`:

>>> table = df.to_arrow(index_name="id")
>>> table.column_names
['id', 'name', 'n_legs']
>>> DataFrame.from_arrow(table.select(["name", "n_legs"]), index=["a", "b", "c"]) == df
True
"""

from typing import Any, Hashable, Iterable, Mapping, Self

import pyarrow as pa

from .arrays import Array
from .frame import BaseFrame
from .indexer import Indexer
from .series import Series

__all__ = ("DataFrame",)


class DataFrame(BaseFrame):
    """Labeled columns of equal length, each one with its own dtype."""

    @classmethod
    def from_dict(
        cls,
        mapping: Mapping[Hashable, Iterable[Any] | Array],
        index: Iterable[Hashable] | Indexer | None = None,
    ) -> Self:
        """Create a DataFrame from a ``{column label: values}`` mapping."""
        return cls(list(mapping.values()), index, list(mapping.keys()))

    @classmethod
    def from_arrow(
        cls,
        table: pa.Table | pa.RecordBatch,
        index: Iterable[Hashable] | Indexer | None = None,
    ) -> Self:
        """Create a DataFrame from the columns of an arrow table or record batch."""
        return cls(
            [table.column(i) for i in range(table.num_columns)],
            index,
            table.column_names,
        )

    def to_arrow(self, index_name: str | None = None) -> pa.Table:
        """Convert the DataFrame to a :class:`pyarrow.Table`.

        Column labels are converted to strings.

        :param index_name: When provided, the row labels are
                           included as the first column with this name.
        """
        arrays = [column.data for column in self.values]
        names = [str(label) for label in self.columns]
        if index_name is not None:
            arrays.insert(0, pa.array(self.index.values))
            names.insert(0, index_name)
        return pa.Table.from_arrays(arrays, names=names)

    @property
    def dtypes(self) -> Series:
        """The dtype of each column."""
        return Series([column.dtype for column in self.values], self.columns)

    def get_numeric_data(self) -> Self:
        """New DataFrame with only the ``i64`` and ``f64`` columns, in the same order."""
        selected = [
            (label, column)
            for label, column in zip(self.columns, self.values)
            if column.is_numeric
        ]
        return self.__class__(
            [column for _, column in selected],
            self.index,
            [label for label, _ in selected],
        )

    def _numeric_frame(self) -> Self:
        return self.get_numeric_data()
