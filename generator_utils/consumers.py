"""
Consumers drive a sequence to exhaustion (for_each, to_array) or to a bound (take). The first
two never return on an infinite sequence.
"""
from generator_utils.base import as_sequence


def for_each(sequence, callback):
    """
    Calls callback for each value of a sequence, in order. Return values of callback are
    ignored.

    >>> from generator_utils import range
    >>> for_each(range(1, 3), print)
    1
    2
    3

    :param sequence: finite sequence to drain
    :param callback: function of one value
    """
    sequence = as_sequence(sequence)
    while True:
        iteration = sequence.next()
        if iteration.done:
            return
        callback(iteration.value)


def to_array(sequence):
    """
    Reads all values from a sequence into a list. Never returns on an infinite sequence.

    >>> from generator_utils import range
    >>> to_array(range(7, 9))
    [7, 8, 9]

    :param sequence: finite sequence to drain
    :return: list of values
    """
    result = []
    for_each(sequence, result.append)
    return result


def take(sequence, count):
    """
    Returns up to the first count values of a sequence, fewer if it ends first. Zero or negative
    counts return an empty list without pulling anything. Safe on infinite sequences.

    >>> from generator_utils import range
    >>> take(range(10, 20), 3)
    [10, 11, 12]
    >>> take(range(0, 3), 5)
    [0, 1, 2, 3]

    :param sequence: sequence to read from
    :param count: maximum number of values
    :return: list of values
    """
    result = []
    if count <= 0:
        return result
    sequence = as_sequence(sequence)
    while len(result) < count:
        iteration = sequence.next()
        if iteration.done:
            break
        result.append(iteration.value)
    return result
