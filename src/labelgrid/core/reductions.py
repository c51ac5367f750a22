"""Numeric reductions shared by every container.

Computing statistics like the sum, the mean or the
variance of some values is needed by :class:`Series`,
by each column of a :class:`Block` or :class:`DataFrame`
and by each group of a :class:`GroupBy`.

All of them end up invoking the functions in this module
on the :class:`pyarrow.Array` that stores the values,
so that there is a single implementation of each statistic.

Floating point columns use NaN to represent missing values.
Statistical reductions skip NaN entries, while :func:`count`
counts every entry:

>>> import pyarrow as pa
>>> data = pa.array([1.0, float("nan"), 3.0])
>>> count(data)
3
>>> mean(data)
2.0

When there are no values left to reduce, the reductions
that cannot provide a meaningful result raise
:class:`labelgrid.errors.EmptyReductionError`,
this is the same for every container:

>>> mean(pa.array([float("nan")]))
Traceback (most recent call last):
    ...
labelgrid.errors.EmptyReductionError: mean of zero present values
"""

import math
from typing import Any

import pyarrow as pa
import pyarrow.compute as pc

from ..errors import EmptyReductionError, InsufficientDataError

__all__ = (
    "REDUCTIONS",
    "present_values",
    "count",
    "sum",
    "mean",
    "var",
    "unbiased_var",
    "std",
    "unbiased_std",
    "min",
    "max",
)

REDUCTIONS = (
    "sum",
    "count",
    "mean",
    "var",
    "unbiased_var",
    "std",
    "unbiased_std",
    "min",
    "max",
)
"""Name of every reduction supported by the containers."""


def present_values(data: pa.Array) -> pa.Array:
    """Drop the NaN entries of a floating point array.

    Arrays of any other type are returned unchanged
    as they have no way to represent missing values.
    """
    if pa.types.is_floating(data.type):
        return data.filter(pc.invert(pc.is_nan(data)))
    return data


def count(data: pa.Array) -> int:
    """Number of entries, NaN included."""
    return len(data)


def sum(data: pa.Array) -> Any:
    """Sum of the present values.

    The sum of zero values is ``0`` (or ``0.0`` for floats).
    """
    return pc.sum(present_values(data), min_count=0).as_py()


def mean(data: pa.Array) -> float:
    """Arithmetic mean of the present values."""
    values = present_values(data)
    if len(values) == 0:
        raise EmptyReductionError("mean of zero present values")
    return pc.mean(values).as_py()


def _variance(data: pa.Array, ddof: int) -> float:
    """Compute the variance using ``len(values) - ddof`` as the divisor.

    The mean and the squared deviations are computed
    by Arrow over the same present values used by :func:`mean`.
    """
    values = present_values(data)
    if ddof and len(values) <= ddof:
        raise InsufficientDataError(
            f"unbiased variance needs more than {ddof} present values, got {len(values)}"
        )
    if len(values) == 0:
        raise EmptyReductionError("variance of zero present values")
    return pc.variance(values, ddof=ddof).as_py()


def var(data: pa.Array) -> float:
    """Population variance (divisor ``n``)."""
    return _variance(data, ddof=0)


def unbiased_var(data: pa.Array) -> float:
    """Unbiased variance (divisor ``n - 1``)."""
    return _variance(data, ddof=1)


def std(data: pa.Array) -> float:
    """Population standard deviation."""
    return math.sqrt(var(data))


def unbiased_std(data: pa.Array) -> float:
    """Unbiased standard deviation."""
    return math.sqrt(unbiased_var(data))


def min(data: pa.Array) -> Any:
    """Smallest present value, NaN is never selected."""
    values = present_values(data)
    if len(values) == 0:
        raise EmptyReductionError("min of zero present values")
    return pc.min(values).as_py()


def max(data: pa.Array) -> Any:
    """Largest present value, NaN is never selected."""
    values = present_values(data)
    if len(values) == 0:
        raise EmptyReductionError("max of zero present values")
    return pc.max(values).as_py()
