"""Typed column storage.

An :class:`Array` is a single column of values without any label.
It can hold one of a closed set of element types, identified
by a short tag (the ``dtype``):

======== ===================== ==========
dtype    element type          arrow type
======== ===================== ==========
``i64``  64-bit integers       int64
``f64``  64-bit floats         float64
``bool`` booleans              bool
``str``  text                  string
======== ===================== ==========

The values are stored in a :class:`pyarrow.Array`,
and the element type of the input decides the dtype:

>>> Array([1, 2, 3]).dtype
'i64'
>>> Array([1.1, 2.1, 3.1, 4.1]).dtype
'f64'
>>> Array(["A", "B", "C"]).dtype
'str'

Every operation works the same way regardless of the dtype,
but numeric operations like reductions and arithmetic are only
available for ``i64`` and ``f64`` arrays:

>>> Array([1, 2, 3]).ilocs([2, 0]).to_pylist()
[3, 1]
>>> Array([1, 2, 3]).sum()
6
>>> Array(["A", "B"]).sum()
Traceback (most recent call last):
    ...
labelgrid.errors.UnsupportedOperationError: sum is not supported for dtype str
"""

import enum
from typing import Any, Iterable, Iterator, Self

import pyarrow as pa
import pyarrow.compute as pc

from ..errors import (
    LengthMismatchError,
    TypeMismatchError,
    UnsupportedOperationError,
)
from . import ops, reductions

__all__ = ("Array", "DType", "array", "has_uniform_scalar_type")


class DType(enum.Enum):
    """The element types an :class:`Array` can hold."""

    I64 = "i64"
    F64 = "f64"
    BOOL = "bool"
    STR = "str"

    @property
    def arrow_type(self) -> pa.DataType:
        """The arrow type used to store values of this dtype."""
        return _ARROW_TYPES[self]

    @property
    def is_numeric(self) -> bool:
        return self in (DType.I64, DType.F64)

    @classmethod
    def from_arrow(cls, arrow_type: pa.DataType) -> "DType":
        """Detect the dtype that can store values of an arrow type.

        Integers of any width are stored as ``i64``, and
        floats of any width as ``f64``.
        Arrays that only contain missing values (arrow ``null`` type)
        are considered ``f64``, as NaN is the only missing value supported.
        """
        if pa.types.is_integer(arrow_type):
            return cls.I64
        elif pa.types.is_floating(arrow_type) or pa.types.is_null(arrow_type):
            return cls.F64
        elif pa.types.is_boolean(arrow_type):
            return cls.BOOL
        elif pa.types.is_string(arrow_type) or pa.types.is_large_string(arrow_type):
            return cls.STR
        raise TypeMismatchError(f"Unsupported element type: {arrow_type}")


_ARROW_TYPES = {
    DType.I64: pa.int64(),
    DType.F64: pa.float64(),
    DType.BOOL: pa.bool_(),
    DType.STR: pa.string(),
}


class Array:
    """A homogeneous column of values.

    The array is immutable, every operation returns a new :class:`Array`
    which might share the underlying arrow buffers with the original one.
    """

    def __init__(
        self,
        values: "Iterable[Any] | pa.Array | pa.ChunkedArray | Array",
        dtype: str | DType | None = None,
    ) -> None:
        """
        :param values: The values of the column, a python sequence,
                       an arrow array or another :class:`Array`.
        :param dtype: Force the dtype of the array instead of
                      detecting it from the values.
        """
        if isinstance(values, Array):
            data = values.data
        elif isinstance(values, pa.ChunkedArray):
            data = values.combine_chunks()
        elif isinstance(values, pa.Array):
            data = values
        else:
            target = DType(dtype).arrow_type if dtype is not None else None
            try:
                data = pa.array(list(values), type=target)
            except (pa.ArrowInvalid, pa.ArrowTypeError, OverflowError) as exc:
                raise TypeMismatchError(
                    f"Cannot build an array from the values: {exc}"
                ) from exc

        kind = DType(dtype) if dtype is not None else DType.from_arrow(data.type)
        if data.null_count:
            if kind is not DType.F64:
                raise UnsupportedOperationError(
                    f"Missing values are only supported as NaN in f64 arrays, got {kind.value}"
                )
            data = pc.fill_null(data.cast(kind.arrow_type), float("nan"))
        if data.type != kind.arrow_type:
            try:
                data = data.cast(kind.arrow_type)
            except (pa.ArrowInvalid, pa.ArrowNotImplementedError) as exc:
                raise TypeMismatchError(
                    f"Cannot store {data.type} values as {kind.value}: {exc}"
                ) from exc

        self.data: pa.Array = data
        self._dtype = kind

    @property
    def dtype(self) -> str:
        """The tag of the element type, for example ``"i64"``."""
        return self._dtype.value

    @property
    def is_numeric(self) -> bool:
        return self._dtype.is_numeric

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.data.to_pylist())

    def __getitem__(self, position: int) -> Any:
        return self.data[position].as_py()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        return self._dtype is other._dtype and self.data.equals(other.data)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Array({self.data.to_pylist()!r}, dtype={self.dtype!r})"

    def to_pylist(self) -> list[Any]:
        """The values as a list of python objects."""
        return self.data.to_pylist()

    def ilocs(self, positions: Iterable[int]) -> Self:
        """Gather the values at ``positions``.

        Positions can be repeated and are honoured in the given order.
        """
        indices = pa.array(list(positions), type=pa.int64())
        return self.__class__(self.data.take(indices))

    def append(self, other: "Array") -> Self:
        """Concatenate ``other`` after the values of this array."""
        if self._dtype is not other._dtype:
            raise TypeMismatchError(
                f"Cannot append a {other.dtype} array to a {self.dtype} array"
            )
        return self.__class__(pa.concat_arrays([self.data, other.data]))

    def argsort(self, descending: bool = False) -> list[int]:
        """Positions that would sort the array.

        The sort is stable and NaN values are placed at the end.
        """
        order = "descending" if descending else "ascending"
        return pc.array_sort_indices(self.data, order=order).to_pylist()

    # Reductions

    def _reduce(self, name: str) -> Any:
        if not self.is_numeric:
            raise UnsupportedOperationError(
                f"{name} is not supported for dtype {self.dtype}"
            )
        return getattr(reductions, name)(self.data)

    def sum(self) -> Any:
        return self._reduce("sum")

    def count(self) -> int:
        return self._reduce("count")

    def mean(self) -> float:
        return self._reduce("mean")

    def var(self) -> float:
        return self._reduce("var")

    def unbiased_var(self) -> float:
        return self._reduce("unbiased_var")

    def std(self) -> float:
        return self._reduce("std")

    def unbiased_std(self) -> float:
        return self._reduce("unbiased_std")

    def min(self) -> Any:
        return self._reduce("min")

    def max(self) -> Any:
        return self._reduce("max")

    # Arithmetic

    def binary_op(self, name: str, other: Any) -> Self:
        """Combine the array with a scalar or with another array.

        :param name: The operation, one of ``add``, ``sub``, ``mul``, ``div``, ``rem``.
        :param other: A number to broadcast or an :class:`Array` of the same length.
        """
        if isinstance(other, Array):
            if not (self.is_numeric and other.is_numeric):
                raise UnsupportedOperationError(
                    f"{name} is not supported between {self.dtype} and {other.dtype}"
                )
            if len(self) != len(other):
                raise LengthMismatchError(
                    f"Arrays of different length: {len(self)} and {len(other)}"
                )
            other = other.data
        elif not self.is_numeric:
            raise UnsupportedOperationError(
                f"{name} is not supported for dtype {self.dtype}"
            )
        return self.__class__(ops.binary_op(name, self.data, other))

    def __add__(self, other: Any) -> Self:
        return self.binary_op("add", other)

    def __sub__(self, other: Any) -> Self:
        return self.binary_op("sub", other)

    def __mul__(self, other: Any) -> Self:
        return self.binary_op("mul", other)

    def __truediv__(self, other: Any) -> Self:
        return self.binary_op("div", other)

    def __mod__(self, other: Any) -> Self:
        return self.binary_op("rem", other)


def array(values: Iterable[Any]) -> Array:
    """Build an :class:`Array` detecting the dtype from the values.

    >>> array([True, False]).dtype
    'bool'
    """
    return Array(values)


_SCALAR_TYPES = (bool, int, float, str)
_INT64_RANGE = range(-(2**63), 2**63)


def has_uniform_scalar_type(values: list[Any]) -> bool:
    """Whether arrow can store ``values`` without changing any of them.

    That is the case when all values have the same builtin scalar type,
    integers must also fit in 64 bits. Mixed types would be coerced
    by arrow (``1`` stored as ``1.0`` next to a float) or refused.

    >>> has_uniform_scalar_type([3, 1, 2])
    True
    >>> has_uniform_scalar_type([1, 2.5])
    False
    >>> has_uniform_scalar_type([(1, "a"), (2, "b")])
    False
    """
    kinds = {type(value) for value in values}
    if len(kinds) != 1:
        return False
    kind = kinds.pop()
    if kind not in _SCALAR_TYPES:
        return False
    return kind is not int or all(value in _INT64_RANGE for value in values)
