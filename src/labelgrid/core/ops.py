"""Arithmetic kernels shared by every container.

Containers support two shapes of arithmetic:

* **broadcast**, where the right operand is a scalar
  that gets combined with every entry::

      [1, 2, 3] + 3 -> [4, 5, 6]

* **element-wise**, where both operands have the same
  length and entries are paired by position::

      [1, 2, 3] + [1, 2, 3] -> [2, 4, 6]

Both shapes are handled by the same kernels,
as the :mod:`pyarrow.compute` functions they rely on
accept either a scalar or an array as their arguments.

Division and remainder follow the native semantic of
the element type: integers truncate toward zero, while
floats perform floating point division.

>>> import pyarrow as pa
>>> binary_op("div", pa.array([7, -7]), 2).to_pylist()
[3, -3]
>>> binary_op("rem", pa.array([7, -7]), 2).to_pylist()
[1, -1]
>>> binary_op("div", pa.array([7.0, -7.0]), 2).to_pylist()
[3.5, -3.5]
"""

from typing import Any, Callable

import numpy
import pyarrow as pa
import pyarrow.compute as pc

__all__ = ("BINARY_OPS", "binary_op")


def remainder(left: Any, right: Any) -> pa.Array:
    """Remainder of the division truncated toward zero.

    The sign of the result follows the dividend,
    like C ``%`` for integers and ``fmod`` for floats.

    >>> remainder(pa.array([1e20, -7.5]), 7.0).to_pylist()
    [2.0, -0.5]
    """
    if not (_is_floating(left) or _is_floating(right)):
        return pc.subtract(left, pc.multiply(pc.divide(left, right), right))
    with numpy.errstate(invalid="ignore"):
        # Remainder by zero is NaN, like floating point division.
        return pa.array(numpy.fmod(_to_numpy(left), _to_numpy(right)))


def _is_floating(value: Any) -> bool:
    if isinstance(value, pa.Array):
        return pa.types.is_floating(value.type)
    return isinstance(value, float)


def _to_numpy(value: Any) -> Any:
    if isinstance(value, pa.Array):
        return value.cast(pa.float64()).to_numpy(zero_copy_only=False)
    return float(value)


BINARY_OPS: dict[str, Callable[[Any, Any], pa.Array]] = {
    "add": pc.add,
    "sub": pc.subtract,
    "mul": pc.multiply,
    "div": pc.divide,
    "rem": remainder,
}
"""The supported operations and the compute function implementing them."""


def binary_op(name: str, left: pa.Array, right: Any) -> pa.Array:
    """Apply the arithmetic operation ``name`` to ``left`` and ``right``.

    :param name: One of the keys of :data:`BINARY_OPS`.
    :param left: The array on the left of the operator.
    :param right: A scalar or an array of the same length of ``left``.
    """
    try:
        func = BINARY_OPS[name]
    except KeyError:
        raise ValueError(f"Unsupported arithmetic operation: {name}") from None
    return func(left, right)
