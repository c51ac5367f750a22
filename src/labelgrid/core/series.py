"""One dimensional labeled container.

A :class:`Series` pairs an :class:`~labelgrid.core.arrays.Array`
of values with an :class:`~labelgrid.core.indexer.Indexer`
that provides a label for each value.

>>> s = Series([1, 2, 3, 4, 5], index=[10, 20, 30, 40, 50])
>>> s.sum()
15
>>> s.mean()
3.0
>>> s.get_by_label(30)
3
>>> s.slice_by_label([50, 10]).values.to_pylist()
[5, 1]
"""

import logging
from typing import TYPE_CHECKING, Any, Callable, Hashable, Iterable, Self

from .. import utils
from ..errors import LengthMismatchError, SchemaMismatchError
from .arrays import Array
from .indexer import Indexer

if TYPE_CHECKING:
    from .groupby import GroupBy

__all__ = ("Series", "DESCRIBE_LABELS")

logger = logging.getLogger(__name__)

DESCRIBE_LABELS = ("count", "mean", "std", "min", "max")
"""Labels of the statistics computed by ``describe()``."""


class Series:
    """Values of a single dtype, each one identified by a label."""

    def __init__(
        self,
        values: Iterable[Any] | Array,
        index: Iterable[Hashable] | Indexer | None = None,
    ) -> None:
        """
        :param values: The values, anything accepted by :class:`Array`.
        :param index: The label of each value, when omitted
                      values are labeled by their position.
        """
        self.values = values if isinstance(values, Array) else Array(values)
        if index is None:
            index = range(len(self.values))
        self.index = Indexer(index)
        if len(self.values) != len(self.index):
            raise LengthMismatchError(
                f"Series has {len(self.values)} values but {len(self.index)} labels"
            )

    def __len__(self) -> int:
        return len(self.values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Series):
            return NotImplemented
        return self.index == other.index and self.values == other.values

    __hash__ = None

    def __getitem__(self, label: Hashable) -> Any:
        return self.get_by_label(label)

    def __repr__(self) -> str:
        return f"Series(dtype={self.dtype}, length={len(self)})"

    def __str__(self) -> str:
        return utils.tabulate.tabulate(self)

    @property
    def dtype(self) -> str:
        return self.values.dtype

    def get_by_label(self, label: Hashable) -> Any:
        """Value at the first occurrence of ``label``."""
        return self.values[self.index.get_label_position(label)]

    def slice_by_index(self, positions: Iterable[int]) -> Self:
        """New Series with only the values at ``positions``, in the given order."""
        positions = list(positions)
        return self.__class__(
            self.values.ilocs(positions), self.index.reindex(positions)
        )

    def slice_by_label(self, labels: Iterable[Hashable]) -> Self:
        """New Series with only the values with the given labels."""
        return self.slice_by_index(self.index.slice_label_positions(labels))

    def append(self, other: "Series") -> Self:
        """Concatenate ``other`` after this series, labels included."""
        return self.__class__(
            self.values.append(other.values), self.index.append(other.index)
        )

    def apply(self, func: Callable[["Series"], Any]) -> Any:
        """Invoke ``func`` with the series and return its result."""
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Applying %s to %r", utils.inspect.get_qualname(func), self)
        return func(self)

    def groupby(self, keys: Iterable[Hashable], sort: bool = False) -> "GroupBy":
        """Group the values by ``keys``, one key for each value.

        See :class:`~labelgrid.core.groupby.GroupBy`.
        """
        from .groupby import GroupBy

        return GroupBy(self, keys, sort=sort)

    def _from_group_results(self, keys: list[Hashable], results: list[Any]) -> Self:
        """Build a Series with the single value computed for each group."""
        return self.__class__(results, keys)

    # Sorting

    def sort_index(self, descending: bool = False) -> Self:
        """New Series with values reordered so that labels are sorted.

        >>> Series([1, 2, 3, 4], index=["d", "b", "a", "c"]).sort_index().values.to_pylist()
        [3, 2, 4, 1]
        """
        positions, index = self.index.argsort(descending=descending)
        return self.__class__(self.values.ilocs(positions), index)

    def sort_values(self, descending: bool = False) -> Self:
        """New Series with labels reordered so that values are sorted."""
        positions = self.values.argsort(descending=descending)
        return self.slice_by_index(positions)

    # Reductions

    def sum(self) -> Any:
        return self.values.sum()

    def count(self) -> int:
        return self.values.count()

    def mean(self) -> float:
        return self.values.mean()

    def var(self) -> float:
        return self.values.var()

    def unbiased_var(self) -> float:
        return self.values.unbiased_var()

    def std(self) -> float:
        return self.values.std()

    def unbiased_std(self) -> float:
        return self.values.unbiased_std()

    def min(self) -> Any:
        return self.values.min()

    def max(self) -> Any:
        return self.values.max()

    def describe(self) -> Self:
        """Summary statistics of the values.

        Returns a ``f64`` Series labeled ``count, mean, std, min, max``
        where ``std`` is the population standard deviation.
        """
        values = self.values
        summary = [
            values.count(),
            values.mean(),
            values.std(),
            values.min(),
            values.max(),
        ]
        return self.__class__(Array(summary, dtype="f64"), DESCRIBE_LABELS)

    # Arithmetic

    def binary_op(self, name: str, other: Any) -> Self:
        """Combine the values with a scalar or with another Series.

        When ``other`` is a Series, it must have the same labels
        in the same order and values are paired by position.
        """
        if isinstance(other, Series):
            if self.index != other.index:
                raise SchemaMismatchError("Series must have the same index")
            other = other.values
        return self.__class__(self.values.binary_op(name, other), self.index)

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
    __sub__ = sub
    __mul__ = mul
    __truediv__ = div
    __mod__ = rem
