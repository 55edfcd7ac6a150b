"""
Transformers wrapping one or more sequences. None of them pull their inputs before their own
``next`` is called, and none catch exceptions raised by the callbacks they are given.
"""
from generator_utils.base import Sequence, Iteration, DONE, as_sequence
from generator_utils.constructors import empty


class Map(Sequence):
    def __init__(self, sequence, transform):
        self.sequence = sequence
        self.transform = transform

    def _next(self):
        iteration = self.sequence.next()
        if iteration.done:
            return DONE
        return Iteration(self.transform(iteration.value), False)


class Filter(Sequence):
    def __init__(self, sequence, predicate):
        self.sequence = sequence
        self.predicate = predicate

    def _next(self):
        while True:
            iteration = self.sequence.next()
            if iteration.done or self.predicate(iteration.value):
                return iteration


class FilterMap(Sequence):
    def __init__(self, sequence, transform):
        self.sequence = sequence
        self.transform = transform

    def _next(self):
        while True:
            iteration = self.sequence.next()
            if iteration.done:
                return DONE

            skipped = False

            def skip():
                nonlocal skipped
                skipped = True

            value = self.transform(iteration.value, skip)
            if not skipped and value is not None:
                return Iteration(value, False)


class Flatten(Sequence):
    def __init__(self, sequence):
        self.sequence = sequence
        self.current = None

    def _next(self):
        while True:
            if self.current is None:
                outer = self.sequence.next()
                if outer.done:
                    return DONE
                self.current = as_sequence(outer.value)
            iteration = self.current.next()
            if not iteration.done:
                return iteration
            self.current = None


class Concat(Sequence):
    def __init__(self, sequences):
        self.sequences = sequences
        self.offset = 0

    def _next(self):
        while self.offset < len(self.sequences):
            iteration = self.sequences[self.offset].next()
            if not iteration.done:
                return iteration
            self.offset += 1
        return DONE


def map(sequence, transform):  # pylint: disable=redefined-builtin
    """
    Maps one sequence to another by passing every value through transform. transform is called
    once per value, only when that value is pulled.

    >>> from generator_utils import range, to_array
    >>> to_array(map(range(2, 5), lambda x: x * 2))
    [4, 6, 8, 10]

    :param sequence: sequence to read from
    :param transform: function applied to each value
    :return: mapped sequence
    """
    return Map(as_sequence(sequence), transform)


def filter(sequence, predicate):  # pylint: disable=redefined-builtin
    """
    Returns a sequence of the values passing predicate. Safe on infinite sequences as long as
    the predicate keeps passing some value; a predicate that never passes makes ``next`` loop
    forever.

    >>> from generator_utils import range, to_array
    >>> to_array(filter(range(0, 5), lambda x: x % 2 == 0))
    [0, 2, 4]

    :param sequence: sequence to read from
    :param predicate: function returning True for values to keep
    :return: filtered sequence
    """
    return Filter(as_sequence(sequence), predicate)


def filter_map(sequence, transform):
    """
    Combines filter and map in one pass. transform is called as ``transform(value, skip)``; the
    value is dropped if transform calls ``skip()`` or returns None, otherwise the return value
    is yielded.

    >>> from generator_utils import range, to_array
    >>> to_array(filter_map(range(0, 5), lambda x, skip: skip() if x % 2 == 0 else x * x))
    [1, 9, 25]

    :param sequence: sequence to read from
    :param transform: function of (value, skip)
    :return: filtered and mapped sequence
    """
    return FilterMap(as_sequence(sequence), transform)


def flatten(sequence):
    """
    Makes one sequence out of a sequence producing other sequences. The outer sequence is read
    one inner sequence at a time; an infinite inner sequence hides everything after it.

    >>> from generator_utils import from_array, range, to_array
    >>> to_array(flatten(from_array([range(2, 5), range(6, 7)])))
    [2, 3, 4, 5, 6, 7]

    :param sequence: sequence of sequences (or of iterables)
    :return: flattened sequence
    """
    return Flatten(as_sequence(sequence))


def concat(sequences):
    """
    Returns a sequence yielding all the values of the given sequences in order. With exactly one
    sequence, that sequence itself is returned. Values from sequences after an infinite one are
    never read.

    >>> from generator_utils import range, to_array
    >>> to_array(concat([range(0, 1), range(4, 5)]))
    [0, 1, 4, 5]

    :param sequences: list of sequences
    :return: concatenated sequence
    """
    sequences = list(sequences)
    if len(sequences) == 0:
        return empty()
    if len(sequences) == 1:
        if isinstance(sequences[0], Sequence):
            return sequences[0]
        return as_sequence(sequences[0])
    return Concat([as_sequence(s) for s in sequences])
