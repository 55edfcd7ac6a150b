from generator_utils import DONE, empty, from_array, range, take, to_array


def test_range():
    assert to_array(range(0, 3)) == [0, 1, 2, 3]
    assert to_array(range(-2, 1)) == [-2, -1, 0, 1]
    assert len(to_array(range(10, 109))) == 100


def test_range_single_value():
    assert to_array(range(0, 0)) == [0]


def test_range_min_above_max_is_empty():
    assert to_array(range(0, -1)) == []
    assert to_array(range(5, 1)) == []


def test_range_is_lazy_over_large_bounds():
    assert take(range(0, 10 ** 18), 3) == [0, 1, 2]


def test_from_array():
    assert to_array(from_array([1, 2, 3])) == [1, 2, 3]
    assert to_array(from_array([0, 4, 7, 9])) == [0, 4, 7, 9]


def test_from_array_empty():
    assert to_array(from_array([])) == []


def test_from_array_does_not_mutate_input():
    items = [3, 1, 2]
    assert to_array(from_array(items)) == [3, 1, 2]
    assert items == [3, 1, 2]


def test_from_array_sequences_are_independent():
    items = [1, 2]
    first = from_array(items)
    second = from_array(items)
    assert first.next().value == 1
    assert to_array(second) == [1, 2]
    assert to_array(first) == [2]


def test_empty():
    s = empty()
    assert s.next() == DONE
    assert to_array(s) == []


def test_exhaustion_is_idempotent():
    for s in (range(0, 1), from_array([1]), empty()):
        to_array(s)
        assert s.next() == DONE
        assert s.next() == DONE
