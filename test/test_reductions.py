import math

import pyarrow as pa
import pytest

from labelgrid.core import reductions
from labelgrid.errors import EmptyReductionError, InsufficientDataError

NAN = float("nan")


def test_present_values():
    assert reductions.present_values(pa.array([1.0, NAN, 2.0])).to_pylist() == [1.0, 2.0]
    assert reductions.present_values(pa.array([1, 2])).to_pylist() == [1, 2]


def test_count_includes_nan():
    assert reductions.count(pa.array([1.0, NAN, NAN])) == 3
    assert reductions.count(pa.array([], type=pa.float64())) == 0


def test_nan_are_skipped():
    data = pa.array([1.0, NAN, 2.0, 3.0, NAN])
    assert reductions.sum(data) == 6.0
    assert reductions.mean(data) == 2.0
    assert reductions.var(data) == pytest.approx(2.0 / 3.0)
    assert reductions.unbiased_var(data) == pytest.approx(1.0)
    assert reductions.min(data) == 1.0
    assert reductions.max(data) == 3.0


def test_sum_of_nothing():
    assert reductions.sum(pa.array([], type=pa.int64())) == 0
    assert reductions.sum(pa.array([NAN, NAN])) == 0.0


@pytest.mark.parametrize("reduction", ["mean", "var", "std", "min", "max"])
@pytest.mark.parametrize(
    "data", [pa.array([], type=pa.float64()), pa.array([NAN, NAN])]
)
def test_empty_reduction(reduction, data):
    with pytest.raises(EmptyReductionError):
        getattr(reductions, reduction)(data)


@pytest.mark.parametrize("reduction", ["unbiased_var", "unbiased_std"])
@pytest.mark.parametrize(
    "data",
    [pa.array([], type=pa.int64()), pa.array([5]), pa.array([1.0, NAN])],
)
def test_insufficient_data(reduction, data):
    with pytest.raises(InsufficientDataError):
        getattr(reductions, reduction)(data)


@pytest.mark.parametrize(
    "values",
    [
        [1, 2, 3, 4, 5],
        [6, 7, 8, 9, 10],
        [0.5, 1.25, -3.0, 8.0],
        [1e9 + 1, 1e9 + 2, 1e9 + 3],
    ],
)
def test_consistency(values):
    data = pa.array(values)
    assert reductions.sum(data) == pytest.approx(
        reductions.count(data) * reductions.mean(data)
    )
    assert reductions.var(data) == pytest.approx(reductions.std(data) ** 2)
    assert reductions.unbiased_var(data) == pytest.approx(
        reductions.unbiased_std(data) ** 2
    )
    n = len(values)
    assert reductions.unbiased_var(data) == pytest.approx(
        reductions.var(data) * n / (n - 1)
    )


def test_population_variance():
    data = pa.array([2, 4, 4, 4, 5, 5, 7, 9])
    assert reductions.var(data) == pytest.approx(4.0)
    assert reductions.std(data) == pytest.approx(2.0)
    assert reductions.unbiased_var(data) == pytest.approx(32 / 7)
    assert reductions.unbiased_std(data) == pytest.approx(math.sqrt(32 / 7))


def test_integer_results_keep_type():
    data = pa.array([3, 2, 1, 4, 5])
    assert isinstance(reductions.sum(data), int)
    assert isinstance(reductions.min(data), int)
    assert isinstance(reductions.mean(data), float)
