import pytest

from enginecore.sequences import index_of, take


def test_index_of_finds_first_match():
    values = [4, 7, 7, 1]
    assert index_of(values, 7) == values.index(7)


def test_index_of_missing_returns_minus_one():
    assert index_of([1, 2, 3], 9) == -1


def test_index_of_empty_returns_minus_one():
    assert index_of([], 0) == -1


@pytest.mark.parametrize("values", [[0, 5, 10], (3, 2, 1), [65535, 0]])
def test_index_of_points_at_value(values):
    for value in values:
        assert values[index_of(values, value)] == value


def test_take_returns_prefix():
    data = [1.5, 2.5, 3.5, 4.5]
    assert take(data, 2) == data[:2]


def test_take_whole_sequence_is_copy():
    data = ["a", "b"]
    result = take(data, len(data))
    assert result == data
    result.append("c")
    assert data == ["a", "b"]


def test_take_zero_is_empty():
    assert take([1, 2, 3], 0) == []


def test_take_from_tuple_gives_list():
    assert take((1, 2, 3), 3) == [1, 2, 3]


def test_take_too_many_raises():
    with pytest.raises(ValueError):
        take([1, 2], 3)


def test_take_negative_raises():
    with pytest.raises(ValueError):
        take([1, 2], -1)