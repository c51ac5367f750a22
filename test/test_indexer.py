import pytest

from labelgrid.core.indexer import Indexer
from labelgrid.errors import KeyNotFoundError

LABELS = ["A", "B", "A", "C", "B"]


def test_creation():
    idx = Indexer(LABELS)
    assert len(idx) == 5
    assert idx.values == LABELS
    assert list(idx) == LABELS
    assert "C" in idx
    assert "Z" not in idx


def test_creation_copies_labels():
    labels = ["A", "B"]
    idx = Indexer(labels)
    labels.append("C")
    assert idx.values == ["A", "B"]


@pytest.mark.parametrize("label", ["A", "B", "C"])
def test_get_label_position_is_first_occurrence(label):
    idx = Indexer(LABELS)
    position = idx.get_label_position(label)
    assert LABELS[position] == label
    assert position == LABELS.index(label)


def test_get_label_positions():
    idx = Indexer(LABELS)
    assert idx.get_label_positions("A") == [0, 2]
    assert idx.get_label_positions("C") == [3]


def test_get_label_position_missing():
    idx = Indexer(LABELS)
    with pytest.raises(KeyNotFoundError):
        idx.get_label_position("Z")
    # Also a KeyError for callers not aware of labelgrid errors.
    with pytest.raises(KeyError):
        idx.get_label_positions("Z")


def test_slice_label_positions():
    idx = Indexer(LABELS)
    assert idx.slice_label_positions(["C", "A", "C"]) == [3, 0, 3]
    assert idx.slice_label_positions([]) == []


def test_slice_label_positions_missing():
    idx = Indexer(LABELS)
    with pytest.raises(KeyNotFoundError):
        idx.slice_label_positions(["A", "Z"])


def test_push():
    idx = Indexer([])
    idx.push(1)
    idx.push(3)
    idx.push(1)
    assert idx.values == [1, 3, 1]
    assert idx.get_label_position(3) == 1
    assert idx.get_label_positions(1) == [0, 2]


def test_reindex():
    idx = Indexer(["A", "B", "C"])
    new = idx.reindex([2, 0, 0])
    assert new.values == ["C", "A", "A"]
    assert new.get_label_positions("A") == [1, 2]
    # The original indexer is not modified
    assert idx.values == ["A", "B", "C"]


def test_append():
    idx = Indexer(["A", "B"]).append(Indexer(["B", "C"]))
    assert idx.values == ["A", "B", "B", "C"]
    assert idx.get_label_positions("B") == [1, 2]


@pytest.mark.parametrize(
    "labels, expected_positions, expected_labels",
    [
        ([5, 4, 3, 2, 1], [4, 3, 2, 1, 0], [1, 2, 3, 4, 5]),
        (["d", "b", "a", "c"], [2, 1, 3, 0], ["a", "b", "c", "d"]),
        (["b", "a", "b", "a"], [1, 3, 0, 2], ["a", "a", "b", "b"]),
        ([(2, "a"), (1, "b"), (2, "a")], [1, 0, 2], [(1, "b"), (2, "a"), (2, "a")]),
        ([1, 2.5, 0], [2, 0, 1], [0, 1, 2.5]),
        ([], [], []),
    ],
)
def test_argsort(labels, expected_positions, expected_labels):
    positions, sorted_idx = Indexer(labels).argsort()
    assert positions == expected_positions
    assert sorted_idx.values == expected_labels


def test_argsort_descending():
    positions, sorted_idx = Indexer([1, 3, 2]).argsort(descending=True)
    assert positions == [1, 2, 0]
    assert sorted_idx.values == [3, 2, 1]


def test_argsort_tuple_labels_descending():
    labels = [(1, "b"), (2, "a"), (1, "b"), (0, "z")]
    positions, sorted_idx = Indexer(labels).argsort(descending=True)
    assert positions == [1, 0, 2, 3]
    assert sorted_idx.values == [(2, "a"), (1, "b"), (1, "b"), (0, "z")]


def test_equality():
    assert Indexer([1, 2, 3]) == Indexer([1, 2, 3])
    assert Indexer([1, 2, 3]) != Indexer([3, 2, 1])
    assert Indexer([1, 2]) != Indexer([1, 2, 3])
    assert Indexer([1, 2]).copy() == Indexer([1, 2])
