"""Grouping of rows and per group aggregations.

Frequently when analysing data it is necessary to compute
statistics for groups of rows that share the same key,
for example the total of employees of the shops in each city::

    city, n_employees
    New York, 10
    New York, 15
    Los Angeles, 8
    Los Angeles, 12
    New York, 20

Grouping by city and summing would lead to::

    city, n_employees
    New York, 45
    Los Angeles, 20

The :class:`GroupBy` receives the container to group
and the key of each one of its rows. It partitions the row positions
by key and then slices the container to retrieve the rows of each group.

>>> from labelgrid import Series
>>> s = Series([1, 2, 3, 4, 5], index=[10, 20, 30, 40, 50])
>>> gb = s.groupby([1, 1, 1, 2, 2])
>>> gb.groups()
[1, 2]
>>> gb.get_group(1).values.to_pylist()
[1, 2, 3]
>>> result = gb.sum()
>>> result.index.values, result.values.to_pylist()
([1, 2], [6, 9])

Groups are listed in the order their key is first seen,
unless ``sort=True`` is requested.
"""

import logging
from operator import methodcaller
from typing import TYPE_CHECKING, Any, Callable, Hashable, Iterable, Iterator

import pyarrow as pa
import pyarrow.compute as pc

from .. import utils
from ..errors import KeyNotFoundError, LengthMismatchError, UnsupportedOperationError
from .arrays import Array, has_uniform_scalar_type
from .series import Series

if TYPE_CHECKING:
    from .frame import BaseFrame

__all__ = ("GroupBy",)

logger = logging.getLogger(__name__)


class GroupBy:
    """Rows of a container partitioned by key.

    The GroupBy does not copy the grouped container,
    which must not be modified while the GroupBy is in use.
    """

    def __init__(
        self,
        data: "Series | BaseFrame",
        keys: Iterable[Hashable] | Array | Series,
        sort: bool = False,
    ) -> None:
        """
        :param data: The :class:`Series`, :class:`Block` or :class:`DataFrame` to group.
        :param keys: The group key of each row of ``data``.
        :param sort: List the groups by ascending key instead
                     of the order in which keys are first seen.
        """
        if isinstance(keys, Series):
            keys = keys.values
        keys = keys.to_pylist() if isinstance(keys, Array) else list(keys)
        if len(keys) != len(data):
            raise LengthMismatchError(
                f"Got {len(keys)} group keys for {len(data)} rows"
            )

        self.data = data
        self.grouper = self._partition(keys)
        if sort:
            self.grouper = dict(sorted(self.grouper.items(), key=lambda item: item[0]))
        logger.debug("Partitioned %d rows in %d groups", len(keys), len(self.grouper))

    @staticmethod
    def _partition(keys: list[Hashable]) -> dict[Hashable, list[int]]:
        """Map each key to the positions of the rows having that key."""
        if not keys:
            return {}
        if any(key is None for key in keys):
            raise UnsupportedOperationError("Group keys cannot be missing")

        grouper: dict[Hashable, list[int]] = {}
        if not has_uniform_scalar_type(keys):
            # Keys arrow can't store unchanged, like tuples of multiple keys,
            # enum members or mixed types, are scanned one by one.
            for position, key in enumerate(keys):
                grouper.setdefault(key, []).append(position)
            return grouper

        # Dictionary encoding finds the unique keys in the order
        # they are first seen and gives back for each row
        # the index of its key within the unique keys.
        encoded = pc.dictionary_encode(pa.array(keys))
        unique_keys = encoded.dictionary.to_pylist()
        for key in unique_keys:
            grouper[key] = []
        for position, key_index in enumerate(encoded.indices.to_pylist()):
            grouper[unique_keys[key_index]].append(position)
        return grouper

    def __len__(self) -> int:
        return len(self.grouper)

    def __iter__(self) -> Iterator[tuple[Hashable, Any]]:
        for key in self.grouper:
            yield key, self.get_group(key)

    def __repr__(self) -> str:
        return f"GroupBy(groups={len(self)}, data={self.data!r})"

    def groups(self) -> list[Hashable]:
        """The group keys."""
        return list(self.grouper)

    def get_group(self, key: Hashable) -> "Series | BaseFrame":
        """The rows of the group ``key``, in their original order."""
        try:
            positions = self.grouper[key]
        except KeyError:
            raise KeyNotFoundError(f"Group not found: {key!r}") from None
        return self.data.slice_by_index(positions)

    def size(self) -> Series:
        """Number of rows in each group."""
        return Series(
            Array([len(positions) for positions in self.grouper.values()], dtype="i64"),
            self.groups(),
        )

    def apply(self, func: Callable[[Any], Any]) -> "Series | BaseFrame":
        """Invoke ``func`` on each group and combine the results.

        When grouping a :class:`Series`, ``func`` is expected to
        return a single value and the result is a Series
        labeled by the group keys.

        When grouping a frame, ``func`` is expected to return a Series
        labeled by column (like frame reductions do) or a sequence with
        one value for each column. The result is a frame of the same class
        with one row for each group.
        """
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Applying %s to %d groups", utils.inspect.get_qualname(func), len(self)
            )
        groups = self.groups()
        results = [func(self.get_group(key)) for key in groups]
        return self.data._from_group_results(groups, results)

    def _aggregate(self, name: str) -> "Series | BaseFrame":
        return self.apply(methodcaller(name))

    def sum(self) -> "Series | BaseFrame":
        return self._aggregate("sum")

    def count(self) -> "Series | BaseFrame":
        return self._aggregate("count")

    def mean(self) -> "Series | BaseFrame":
        return self._aggregate("mean")

    def var(self) -> "Series | BaseFrame":
        return self._aggregate("var")

    def unbiased_var(self) -> "Series | BaseFrame":
        return self._aggregate("unbiased_var")

    def std(self) -> "Series | BaseFrame":
        return self._aggregate("std")

    def unbiased_std(self) -> "Series | BaseFrame":
        return self._aggregate("unbiased_std")

    def min(self) -> "Series | BaseFrame":
        return self._aggregate("min")

    def max(self) -> "Series | BaseFrame":
        return self._aggregate("max")
