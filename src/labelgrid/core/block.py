"""Two dimensional container with a single dtype.

A :class:`Block` is a frame where every column holds
values of the same dtype, like a matrix with labeled
rows and columns. As all values share the same type,
a Block can always be transposed and every reduction
is applied to every column.

>>> b = Block.from_col_vec([1, 2, 3, 4, 5, 6, 7, 8, 9, 10],
...                        index=[10, 20, 30, 40, 50], columns=["X", "Y"])
>>> b.sum().values.to_pylist()
[15, 40]
>>> b.mean().values.to_pylist()
[3.0, 8.0]
>>> b.transpose().index.values
['X', 'Y']

A Block without columns still knows its dtype when it comes from
the transposition of a Block without rows, so that transposing
back restores the original columns:

>>> empty = Block([Array([], dtype="i64")] * 2, index=[], columns=["X", "Y"])
>>> empty.transpose().dtype
'i64'
>>> empty.transpose().transpose() == empty
True
"""

from typing import Any, Hashable, Iterable, Self

from ..errors import TypeMismatchError
from .arrays import Array
from .frame import BaseFrame
from .indexer import Indexer

__all__ = ("Block",)


class Block(BaseFrame):
    """Labeled columns of equal length and equal dtype."""

    def __init__(
        self,
        values: Iterable[Iterable[Any] | Array],
        index: Iterable[Hashable] | Indexer | None = None,
        columns: Iterable[Hashable] | Indexer | None = None,
        dtype: str | None = None,
    ) -> None:
        """
        :param dtype: The dtype of the block, required only
                      to type a block without columns.
        """
        self._dtype = dtype
        super().__init__(values, index, columns)

    def _check_dtypes(self, columns: list[Array]) -> None:
        """Refuse columns whose dtype differs from the block dtype."""
        dtypes = [column.dtype for column in columns]
        if self._dtype is not None:
            dtypes.insert(0, self._dtype)
        if len(set(dtypes)) > 1:
            raise TypeMismatchError(
                f"All columns of a Block must have the same dtype, got {dtypes}"
            )

    @property
    def dtype(self) -> str | None:
        """The dtype shared by all columns.

        ``None`` when there are no columns and no dtype was provided.
        """
        if not self.values:
            return self._dtype
        return self.values[0].dtype

    def _empty_column_dtype(self) -> str | None:
        return self.dtype

    def transpose(self) -> Self:
        transposed = super().transpose()
        if not transposed.values:
            transposed._dtype = self.dtype
        return transposed
