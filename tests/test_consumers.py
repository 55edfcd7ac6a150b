import pytest

from generator_utils import for_each, range, take, to_array


def test_for_each():
    values = []
    assert for_each(range(2, 5), values.append) is None
    assert values == [2, 3, 4, 5]


def test_for_each_ignores_callback_result():
    assert for_each(range(0, 2), lambda x: x * 10) is None


def test_for_each_accepts_native_iterables():
    values = []
    for_each([1, 2], values.append)
    assert values == [1, 2]


def test_for_each_propagates_callback_errors():
    values = []

    def callback(value):
        if value == 2:
            raise ValueError(value)
        values.append(value)

    with pytest.raises(ValueError):
        for_each(range(0, 5), callback)
    assert values == [0, 1]


def test_to_array():
    assert to_array(range(7, 9)) == [7, 8, 9]
    assert to_array(range(1, 0)) == []


def test_take_from_infinite(naturals):
    assert take(naturals(), 10) == [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]


def test_take_fewer_than_requested():
    assert take(range(0, 3), 5) == [0, 1, 2, 3]


def test_take_resumes_where_it_stopped(naturals):
    s = naturals()
    assert take(s, 2) == [0, 1]
    assert take(s, 2) == [2, 3]


def test_take_zero_or_negative_does_not_pull(recording):
    s = recording([1, 2, 3])
    assert take(s, 0) == []
    assert take(s, -4) == []
    assert s.pulls == 0


def test_take_stops_pulling_at_count(recording):
    s = recording([1, 2, 3])
    assert take(s, 2) == [1, 2]
    assert s.pulls == 2


def test_take_after_exhaustion(recording):
    s = recording([1])
    assert take(s, 3) == [1]
    assert take(s, 3) == []
    assert s.pulls == 2
