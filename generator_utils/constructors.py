"""
Leaf sequences built from plain data.
"""
from generator_utils.base import Sequence, Iteration, DONE


class Empty(Sequence):
    def _next(self):
        return DONE


class FromArray(Sequence):
    """
    Yields the items of a list in order. The list is read by index and never copied or
    mutated, so it must not be changed while the sequence is being consumed.
    """

    def __init__(self, items):
        self.items = items
        self.offset = 0

    def _next(self):
        if self.offset >= len(self.items):
            return DONE
        value = self.items[self.offset]
        self.offset += 1
        return Iteration(value, False)


class Range(Sequence):
    def __init__(self, minimum, maximum):
        self.current = minimum
        self.maximum = maximum

    def _next(self):
        if self.current > self.maximum:
            return DONE
        value = self.current
        self.current += 1
        return Iteration(value, False)


def empty():
    """
    Returns a sequence which is exhausted from the start

    >>> empty().next().done
    True
    """
    return Empty()


def from_array(items):
    """
    Returns a sequence yielding the values from the given list in order.

    >>> from generator_utils import to_array
    >>> to_array(from_array([1, 2, 3]))
    [1, 2, 3]

    :param items: list or tuple to read from
    :return: sequence over items
    """
    return FromArray(items)


def range(minimum, maximum):  # pylint: disable=redefined-builtin
    """
    Returns a sequence yielding the integers from minimum up to and including maximum. Yields
    nothing when minimum > maximum.

    >>> from generator_utils import to_array
    >>> to_array(range(8, 10))
    [8, 9, 10]
    >>> to_array(range(0, -1))
    []

    :param minimum: first value
    :param maximum: last value, inclusive
    :return: sequence of integers
    """
    return Range(minimum, maximum)
