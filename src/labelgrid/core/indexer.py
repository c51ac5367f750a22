"""Label based addressing of rows and columns.

Each container identifies its rows (and columns, for 2-D containers)
through labels. The :class:`Indexer` keeps the ordered labels
together with a reverse lookup from each label to the positions
where it appears, so that labels can be resolved to positions
in constant time.

Labels do not have to be unique:

>>> idx = Indexer(["A", "B", "A"])
>>> idx.get_label_position("A")
0
>>> idx.get_label_positions("A")
[0, 2]
>>> idx.slice_label_positions(["B", "A", "B"])
[1, 0, 1]
"""

import logging
from typing import Hashable, Iterable, Iterator, Self

import pyarrow as pa
import pyarrow.compute as pc

from ..errors import KeyNotFoundError
from .arrays import has_uniform_scalar_type

__all__ = ("Indexer",)

logger = logging.getLogger(__name__)


class Indexer:
    """Ordered sequence of labels with a reverse lookup.

    The ``values`` and the label to positions mapping
    always describe the same labels: they are built together
    and :meth:`push` is the only way to extend both of them.
    Reordering, slicing or concatenating produces a new Indexer.
    """

    def __init__(self, labels: Iterable[Hashable] = ()) -> None:
        """
        :param labels: The labels in positional order.
        """
        self.values: list[Hashable] = list(labels)
        self._positions: dict[Hashable, list[int]] = {}
        for position, label in enumerate(self.values):
            self._positions.setdefault(label, []).append(position)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.values)

    def __contains__(self, label: Hashable) -> bool:
        return label in self._positions

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Indexer):
            return NotImplemented
        return self.values == other.values

    __hash__ = None

    def __repr__(self) -> str:
        return f"Indexer({self.values!r})"

    def copy(self) -> Self:
        return self.__class__(self.values)

    def get_label_position(self, label: Hashable) -> int:
        """Position of the first occurrence of ``label``."""
        return self.get_label_positions(label)[0]

    def get_label_positions(self, label: Hashable) -> list[int]:
        """Positions of all the occurrences of ``label``."""
        try:
            return list(self._positions[label])
        except KeyError:
            raise KeyNotFoundError(f"Label not found: {label!r}") from None

    def slice_label_positions(self, labels: Iterable[Hashable]) -> list[int]:
        """Position of the first occurrence of each one of ``labels``.

        The result has one entry for each requested label,
        in the same order labels were provided.
        """
        return [self.get_label_position(label) for label in labels]

    def push(self, label: Hashable) -> None:
        """Append ``label`` at the end of the indexer."""
        self._positions.setdefault(label, []).append(len(self.values))
        self.values.append(label)

    def reindex(self, positions: Iterable[int]) -> Self:
        """New indexer with the labels at ``positions``, in the given order."""
        return self.__class__(self.values[position] for position in positions)

    def append(self, other: "Indexer") -> Self:
        """New indexer with the labels of ``other`` after these ones."""
        return self.__class__(self.values + other.values)

    def argsort(self, descending: bool = False) -> tuple[list[int], Self]:
        """Sort the labels.

        Returns the positions that would sort the labels
        and the sorted indexer. The sort is stable, so duplicated
        labels keep their original relative order.

        >>> Indexer(["d", "b", "a", "c"]).argsort()
        ([2, 1, 3, 0], Indexer(['a', 'b', 'c', 'd']))

        Labels arrow can't store as they are, like tuples,
        are compared as python objects:

        >>> Indexer([(2, "a"), (1, "b")]).argsort()
        ([1, 0], Indexer([(1, 'b'), (2, 'a')]))
        """
        if not self.values:
            return [], self.copy()
        order = "descending" if descending else "ascending"
        if has_uniform_scalar_type(self.values):
            positions = pc.array_sort_indices(pa.array(self.values), order=order)
            positions = positions.to_pylist()
        else:
            positions = sorted(
                range(len(self.values)),
                key=self.values.__getitem__,
                reverse=descending,
            )
        logger.debug("Sorted %d labels in %s order", len(positions), order)
        return positions, self.reindex(positions)
