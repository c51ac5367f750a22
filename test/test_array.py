import math

import pyarrow as pa
import pytest

from labelgrid import Array, DType, array
from labelgrid.errors import (
    LengthMismatchError,
    TypeMismatchError,
    UnsupportedOperationError,
)


@pytest.mark.parametrize(
    "values, dtype",
    [
        ([1, 2, 3], "i64"),
        ([1.1, 2.1, 3.1, 4.1], "f64"),
        (["A", "B", "C"], "str"),
        ([True, False], "bool"),
        ([], "f64"),
    ],
)
def test_creation(values, dtype):
    arr = Array(values)
    assert arr.dtype == dtype
    assert len(arr) == len(values)
    assert arr.to_pylist() == values


def test_array_helper():
    assert array([1, 2, 3]).dtype == "i64"
    assert array(["A", "B"]).dtype == "str"


def test_creation_with_dtype():
    arr = Array([1, 2, 3], dtype="f64")
    assert arr.dtype == "f64"
    assert arr.to_pylist() == [1.0, 2.0, 3.0]
    assert Array([1, 2], dtype=DType.I64).dtype == "i64"


def test_creation_from_arrow():
    assert Array(pa.array([1, 2, 3], type=pa.int32())).dtype == "i64"
    assert Array(pa.array([1.5], type=pa.float32())).dtype == "f64"
    assert Array(pa.chunked_array([[1, 2], [3]])).to_pylist() == [1, 2, 3]
    assert Array(pa.array(["a"], type=pa.large_string())).dtype == "str"


def test_creation_unsupported_type():
    with pytest.raises(TypeMismatchError):
        Array(pa.array([b"bytes"]))


@pytest.mark.parametrize(
    "values, dtype",
    [
        ([1, "a"], None),
        (["a"], "i64"),
        ([object()], None),
        ([2**70], None),
    ],
)
def test_creation_unconvertible_values(values, dtype):
    with pytest.raises(TypeMismatchError):
        Array(values, dtype=dtype)


def test_creation_arrow_cast_failure():
    with pytest.raises(TypeMismatchError):
        Array(pa.array(["a"]), dtype="i64")


def test_missing_values_become_nan():
    arr = Array([1.0, None, 3.0])
    assert arr.dtype == "f64"
    assert math.isnan(arr[1])
    assert arr.count() == 3


def test_missing_values_not_float():
    with pytest.raises(UnsupportedOperationError):
        Array([1, None, 3])


def test_eq():
    iarr1 = Array([1, 2, 3])
    assert iarr1 == Array([1, 2, 3])
    assert iarr1 != Array([2, 3, 4])
    assert iarr1 != Array([1, 2, 3, 4, 5])

    farr1 = Array([1.0, 2.0, 3.0])
    assert farr1 == Array([1.0, 2.0, 3.0])
    assert farr1 != Array([2.0, 3.0, 4.0])

    # Different dtypes are never equal
    assert (iarr1 == farr1) is False
    assert (Array(["1"]) == Array([1])) is False


def test_getitem_and_iter():
    arr = Array([10, 20, 30])
    assert arr[0] == 10
    assert arr[-1] == 30
    assert list(arr) == [10, 20, 30]


def test_ilocs():
    assert Array([1, 2, 3, 4, 5]).ilocs([1, 4, 0]).to_pylist() == [2, 5, 1]
    assert Array([1.1, 2.1, 3.1, 4.1, 5.1]).ilocs([1, 4, 0]).to_pylist() == [2.1, 5.1, 1.1]
    assert Array(["a", "b"]).ilocs([1, 1, 0]).to_pylist() == ["b", "b", "a"]
    empty = Array([1, 2]).ilocs([])
    assert len(empty) == 0
    assert empty.dtype == "i64"


def test_container_of_arrays():
    container = [array([1, 2, 3]), array([1.1, 2.1, 3.1])]
    assert [arr.dtype for arr in container] == ["i64", "f64"]


def test_append():
    res = Array([1, 2, 3]).append(Array([1, 2, 3]))
    assert res.dtype == "i64"
    assert res == Array([1, 2, 3, 1, 2, 3])


def test_append_type_mismatch():
    with pytest.raises(TypeMismatchError):
        Array([1, 2, 3]).append(Array([1.0]))


def test_argsort():
    assert Array([3, 1, 2]).argsort() == [1, 2, 0]
    assert Array([3, 1, 2]).argsort(descending=True) == [0, 2, 1]
    assert Array(["b", "a", "b"]).argsort() == [1, 0, 2]


def test_reductions():
    arr = Array([1, 2, 3, 4, 5])
    assert arr.sum() == 15
    assert arr.count() == 5
    assert arr.mean() == 3.0
    assert arr.var() == pytest.approx(2.0)
    assert arr.unbiased_var() == pytest.approx(2.5)
    assert arr.std() == pytest.approx(math.sqrt(2.0))
    assert arr.unbiased_std() == pytest.approx(math.sqrt(2.5))
    assert arr.min() == 1
    assert arr.max() == 5


@pytest.mark.parametrize(
    "reduction",
    ["sum", "count", "mean", "var", "unbiased_var", "std", "unbiased_std", "min", "max"],
)
@pytest.mark.parametrize("values", [["a", "b"], [True, False]])
def test_reductions_non_numeric(reduction, values):
    with pytest.raises(UnsupportedOperationError):
        getattr(Array(values), reduction)()


@pytest.mark.parametrize(
    "op, expected",
    [
        ("add", [4, 5, 6]),
        ("sub", [-2, -1, 0]),
        ("mul", [3, 6, 9]),
        ("div", [0, 0, 1]),
        ("rem", [1, 2, 0]),
    ],
)
def test_binary_op_broadcast(op, expected):
    res = Array([1, 2, 3]).binary_op(op, 3)
    assert res.dtype == "i64"
    assert res.to_pylist() == expected


def test_binary_op_float():
    res = Array([7.0, -7.0]) / 2
    assert res.to_pylist() == [3.5, -3.5]
    res = Array([5.5, -5.5]) % 2
    assert res.to_pylist() == [1.5, -1.5]


def test_remainder_large_floats():
    assert (Array([1e20]) % 7.0).to_pylist() == [math.fmod(1e20, 7.0)]
    assert (Array([1e20, -1e20]) % Array([7.0, 7.0])).to_pylist() == [2.0, -2.0]


def test_remainder_int_by_float():
    res = Array([7, -7]) % 2.5
    assert res.dtype == "f64"
    assert res.to_pylist() == [2.0, -2.0]


def test_remainder_float_by_zero():
    assert math.isnan((Array([1.0]) % 0.0)[0])


def test_binary_op_elementwise():
    arr = Array([1, 2, 3])
    assert (arr + arr).to_pylist() == [2, 4, 6]
    assert (arr * arr).to_pylist() == [1, 4, 9]
    assert (arr - arr).to_pylist() == [0, 0, 0]


def test_binary_op_length_mismatch():
    with pytest.raises(LengthMismatchError):
        Array([1, 2, 3]) + Array([1, 2])


def test_binary_op_non_numeric():
    with pytest.raises(UnsupportedOperationError):
        Array(["a"]) + 1
    with pytest.raises(UnsupportedOperationError):
        Array([1]) + Array(["a"])
