"""Two dimensional labeled containers.

The storage of two dimensional containers is column major:
each column is an :class:`~labelgrid.core.arrays.Array`,
and all columns share the same row :class:`~labelgrid.core.indexer.Indexer`.
A second Indexer provides the labels of the columns::

              columns
             X     Y
    index  +-----+-----+
      A    |  1  |  4  |
      B    |  2  |  5  |
      C    |  3  |  6  |
           +-----+-----+
           values[0]   values[1]

This module implements :class:`BaseFrame`, the behaviour shared by
:class:`~labelgrid.core.block.Block` (all columns of the same dtype)
and :class:`~labelgrid.core.dataframe.DataFrame` (each column with its own dtype).

Frames can be created from different layouts of the same data,
which are normalized to the column major storage:

>>> from labelgrid import Block
>>> by_col = Block.from_col_vec([1, 2, 3, 4, 5, 6], ["A", "B", "C"], ["X", "Y"])
>>> by_row = Block.from_row_vec([1, 4, 2, 5, 3, 6], ["A", "B", "C"], ["X", "Y"])
>>> nested = Block.from_nested_vec([[1, 2, 3], [4, 5, 6]], ["A", "B", "C"], ["X", "Y"])
>>> by_col == by_row == nested
True
>>> by_col.get_column_by_label("Y").values.to_pylist()
[4, 5, 6]
"""

import logging
from typing import TYPE_CHECKING, Any, Callable, Hashable, Iterable, Self

import pyarrow as pa

from .. import utils
from ..errors import (
    LengthMismatchError,
    SchemaMismatchError,
    TypeMismatchError,
)
from .arrays import Array
from .indexer import Indexer
from .series import DESCRIBE_LABELS, Series

if TYPE_CHECKING:
    from .groupby import GroupBy

__all__ = ("BaseFrame",)

logger = logging.getLogger(__name__)


class BaseFrame:
    """Columns of equal length sharing the same row labels.

    Every transformation returns a new frame,
    the only operation modifying a frame in place is :meth:`add_columns`.
    """

    def __init__(
        self,
        values: Iterable[Iterable[Any] | Array],
        index: Iterable[Hashable] | Indexer | None = None,
        columns: Iterable[Hashable] | Indexer | None = None,
    ) -> None:
        """
        :param values: The data of each column, one sequence per column.
        :param index: The label of each row, when omitted
                      rows are labeled by their position.
        :param columns: The label of each column, when omitted
                        columns are labeled by their position.
        """
        self.values: list[Array] = [
            value if isinstance(value, Array) else Array(value) for value in values
        ]
        if index is None:
            index = range(len(self.values[0]) if self.values else 0)
        if columns is None:
            columns = range(len(self.values))
        self.index = Indexer(index)
        self.columns = Indexer(columns)

        if len(self.values) != len(self.columns):
            raise LengthMismatchError(
                f"Got {len(self.values)} columns but {len(self.columns)} column labels"
            )
        for label, column in zip(self.columns, self.values):
            if len(column) != len(self.index):
                raise LengthMismatchError(
                    f"Column {label!r} has {len(column)} values, expected {len(self.index)}"
                )
        self._check_dtypes(self.values)
        logger.debug("Created %r", self)

    def _check_dtypes(self, columns: list[Array]) -> None:
        """Verify that ``columns`` can be stored in this frame.

        Any combination of dtypes is accepted by default.
        """

    def _numeric_frame(self) -> Self:
        """The frame on which reductions are computed."""
        return self

    def _empty_column_dtype(self) -> str | None:
        """The dtype of the columns built when transposing a frame without columns."""
        return None

    # Constructors

    @classmethod
    def from_col_vec(
        cls,
        values: Iterable[Any] | Array,
        index: Iterable[Hashable],
        columns: Iterable[Hashable],
    ) -> Self:
        """Create a frame from a flat sequence of values in column major order.

        The first ``len(index)`` values are the first column,
        the next ``len(index)`` values the second column and so on.
        """
        index, columns = Indexer(index), Indexer(columns)
        flat = values if isinstance(values, Array) else Array(values)
        nrows, ncols = len(index), len(columns)
        if len(flat) != nrows * ncols:
            raise LengthMismatchError(
                f"Got {len(flat)} values for {nrows} rows and {ncols} columns"
            )
        # Slicing arrow arrays is zero-copy, all columns share the same buffer.
        data = [Array(flat.data.slice(i * nrows, nrows)) for i in range(ncols)]
        return cls(data, index, columns)

    @classmethod
    def from_row_vec(
        cls,
        values: Iterable[Any] | Array,
        index: Iterable[Hashable],
        columns: Iterable[Hashable],
    ) -> Self:
        """Create a frame from a flat sequence of values in row major order.

        The first ``len(columns)`` values are the first row,
        they get transposed into the column major storage.
        """
        index, columns = Indexer(index), Indexer(columns)
        flat = values if isinstance(values, Array) else Array(values)
        nrows, ncols = len(index), len(columns)
        if len(flat) != nrows * ncols:
            raise LengthMismatchError(
                f"Got {len(flat)} values for {nrows} rows and {ncols} columns"
            )
        data = [flat.ilocs(range(i, nrows * ncols, ncols)) for i in range(ncols)]
        return cls(data, index, columns)

    @classmethod
    def from_nested_vec(
        cls,
        values: Iterable[Iterable[Any] | Array],
        index: Iterable[Hashable],
        columns: Iterable[Hashable],
    ) -> Self:
        """Create a frame from one sequence of values for each column."""
        return cls(values, index, columns)

    from_vec = from_nested_vec

    @classmethod
    def from_series(cls, series: Series, name: Hashable) -> Self:
        """Create a frame with a single column named ``name``."""
        return cls([series.values], series.index, [name])

    # Container protocol

    def __len__(self) -> int:
        return len(self.index)

    @property
    def shape(self) -> tuple[int, int]:
        return len(self.index), len(self.columns)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseFrame):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.index == other.index
            and self.columns == other.columns
            and self.values == other.values
        )

    __hash__ = None

    def __getitem__(self, label: Hashable) -> Series:
        return self.get_column_by_label(label)

    def __repr__(self) -> str:
        name = self.__class__.__name__
        return f"{name}(columns={self.columns.values!r}, rows={len(self)})"

    def __str__(self) -> str:
        return utils.tabulate.tabulate(self)

    # Indexing

    def add_columns(self, values: Iterable[Any] | Array, name: Hashable) -> None:
        """Append a new column named ``name`` at the end of the frame."""
        column = values if isinstance(values, Array) else Array(values)
        if len(column) != len(self):
            raise LengthMismatchError(
                f"Column {name!r} has {len(column)} values, expected {len(self)}"
            )
        self._check_dtypes(self.values + [column])
        self.values.append(column)
        self.columns.push(name)

    def get_column_by_label(self, label: Hashable) -> Series:
        """The column with the given label as a :class:`Series`."""
        position = self.columns.get_label_position(label)
        return Series(self.values[position], self.index)

    def slice_by_index(self, positions: Iterable[int]) -> Self:
        """New frame with only the rows at ``positions``, in the given order."""
        positions = list(positions)
        return self.__class__(
            [column.ilocs(positions) for column in self.values],
            self.index.reindex(positions),
            self.columns,
        )

    def slice_by_label(self, labels: Iterable[Hashable]) -> Self:
        """New frame with only the rows with the given labels."""
        return self.slice_by_index(self.index.slice_label_positions(labels))

    def append(self, other: "BaseFrame") -> Self:
        """Concatenate the rows of ``other`` after the rows of this frame.

        Both frames must have the same columns in the same order.
        """
        if self.columns != other.columns:
            raise SchemaMismatchError(
                f"Cannot append frames with different columns: "
                f"{self.columns.values!r} and {other.columns.values!r}"
            )
        return self.__class__(
            [left.append(right) for left, right in zip(self.values, other.values)],
            self.index.append(other.index),
            self.columns,
        )

    def transpose(self) -> Self:
        """Swap rows and columns.

        The value at row ``i`` and column ``j`` becomes
        the value at row ``j`` and column ``i``.
        All columns must share the same dtype.
        """
        if not self.values:
            dtype = self._empty_column_dtype()
            return self.__class__(
                [Array([], dtype=dtype) for _ in self.index],
                index=[],
                columns=self.index,
            )
        dtypes = {column.dtype for column in self.values}
        if len(dtypes) > 1:
            raise TypeMismatchError(
                f"Cannot transpose columns of different dtypes: {sorted(dtypes)}"
            )
        # The column major values of this frame are the
        # row major values of the transposed frame.
        flat = Array(pa.concat_arrays([column.data for column in self.values]))
        return self.from_row_vec(flat, index=self.columns, columns=self.index)

    def sort_index(self, descending: bool = False) -> Self:
        """New frame with rows reordered so that their labels are sorted."""
        positions, _ = self.index.argsort(descending=descending)
        return self.slice_by_index(positions)

    def sort_values(self, by: Hashable, descending: bool = False) -> Self:
        """New frame with rows reordered by the values of column ``by``."""
        position = self.columns.get_label_position(by)
        positions = self.values[position].argsort(descending=descending)
        return self.slice_by_index(positions)

    def groupby(self, keys: Iterable[Hashable], sort: bool = False) -> "GroupBy":
        """Group the rows by ``keys``, one key for each row.

        See :class:`~labelgrid.core.groupby.GroupBy`.
        """
        from .groupby import GroupBy

        return GroupBy(self, keys, sort=sort)

    # Apply and reductions

    def apply(self, func: Callable[[Array], Any]) -> Series:
        """Invoke ``func`` on each column.

        The results are collected in a :class:`Series`
        labeled by the columns of the frame.
        """
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Applying %s to %d columns",
                utils.inspect.get_qualname(func),
                len(self.values),
            )
        return Series([func(column) for column in self.values], self.columns)

    def _reduce(self, name: str) -> Series:
        return self._numeric_frame().apply(getattr(Array, name))

    def sum(self) -> Series:
        return self._reduce("sum")

    def count(self) -> Series:
        return self._reduce("count")

    def mean(self) -> Series:
        return self._reduce("mean")

    def var(self) -> Series:
        return self._reduce("var")

    def unbiased_var(self) -> Series:
        return self._reduce("unbiased_var")

    def std(self) -> Series:
        return self._reduce("std")

    def unbiased_std(self) -> Series:
        return self._reduce("unbiased_std")

    def min(self) -> Series:
        return self._reduce("min")

    def max(self) -> Series:
        return self._reduce("max")

    def describe(self) -> Self:
        """Summary statistics of each column.

        Returns a frame with rows ``count, mean, std, min, max``
        and one ``f64`` column for each column that was summarized.
        """
        target = self._numeric_frame()
        summaries = [Series(column).describe().values for column in target.values]
        return target.__class__(summaries, DESCRIBE_LABELS, target.columns)

    def _from_group_results(self, keys: list[Hashable], results: list[Any]) -> Self:
        """Build a frame with one row for each group.

        ``results`` has one entry for each group key, each entry
        is either a :class:`Series` labeled by column
        or a sequence with one value for each column of this frame.
        """
        if results and isinstance(results[0], Series):
            columns = results[0].index
            rows = []
            for key, result in zip(keys, results):
                if result.index != columns:
                    raise SchemaMismatchError(
                        f"Group {key!r} produced columns {result.index.values!r}, "
                        f"expected {columns.values!r}"
                    )
                rows.append(result.values.to_pylist())
        else:
            columns = self.columns
            rows = [list(result) for result in results]
            for key, row in zip(keys, rows):
                if len(row) != len(columns):
                    raise LengthMismatchError(
                        f"Group {key!r} produced {len(row)} values, expected {len(columns)}"
                    )
        values = [[row[position] for row in rows] for position in range(len(columns))]
        return self.__class__(values, keys, columns)

    # Arithmetic

    def binary_op(self, name: str, other: Any) -> Self:
        """Combine the frame with a scalar or with another frame.

        When ``other`` is a scalar it is broadcast to every value.
        When ``other`` is a frame, it must have the same index and columns
        and values are paired by position.
        """
        if isinstance(other, BaseFrame):
            if self.index != other.index or self.columns != other.columns:
                raise SchemaMismatchError("Frames must have the same index and columns")
            values = [
                left.binary_op(name, right)
                for left, right in zip(self.values, other.values)
            ]
        else:
            values = [column.binary_op(name, other) for column in self.values]
        return self.__class__(values, self.index, self.columns)

    def add(self, other: Any) -> Self:
        return self.binary_op("add", other)

    def sub(self, other: Any) -> Self:
        return self.binary_op("sub", other)

    def mul(self, other: Any) -> Self:
        return self.binary_op("mul", other)

    def div(self, other: Any) -> Self:
        return self.binary_op("div", other)

    def rem(self, other: Any) -> Self:
        return self.binary_op("rem", other)

    __add__ = add
    __radd__ = add
    __sub__ = sub
    __mul__ = mul
    __rmul__ = mul
    __truediv__ = div
    __mod__ = rem
