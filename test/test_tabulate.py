import pytest

from labelgrid import DataFrame, Series
from labelgrid.utils.inspect import get_qualname
from labelgrid.utils.tabulate import format_value, tabulate


@pytest.mark.parametrize(
    "value,expected",
    [
        (1.0, "1.00"),
        (3.14159, "3.14"),
        (True, "true"),
        (False, "false"),
        (42, "42"),
        ("x" * 40, "x" * 27 + "..."),
    ],
)
def test_format_value(value, expected):
    assert format_value(value) == expected


def test_tabulate_frame():
    df = DataFrame.from_dict({"name": ["Horse", "Flamingo"], "legs": [4, 2]})
    assert tabulate(df).splitlines() == [
        "  | name     | legs",
        "- | -------- | ----",
        "0 | Horse    | 4",
        "1 | Flamingo | 2",
    ]


def test_tabulate_truncates_rows():
    s = Series(list(range(30)))
    lines = tabulate(s, max_rows=5).splitlines()
    assert len(lines) == 6
    assert lines[-1] == "... and 25 more rows"


def test_tabulate_nan():
    s = Series([float("nan")], index=["a"])
    assert tabulate(s) == "a | nan"


def test_container_str_uses_tabulate():
    df = DataFrame.from_dict({"x": [1.5]}, index=["r"])
    assert str(df) == tabulate(df)


def test_get_qualname():
    assert get_qualname(Series.sum) == "labelgrid.core.series.Series.sum"
    assert get_qualname(Series) == "labelgrid.core.series.Series"
    assert get_qualname(Series([1]).sum) == "labelgrid.core.series.Series.sum"
