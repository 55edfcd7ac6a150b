from abc import ABC, abstractmethod
from collections import namedtuple

from generator_utils.util import is_iterable


Iteration = namedtuple("Iteration", ["value", "done"])
Iteration.__doc__ = """
Result of pulling a Sequence once. ``done`` is True when the sequence has no
more values, in which case ``value`` carries nothing meaningful.
"""

DONE = Iteration(None, True)


class Sequence(ABC):
    """
    A pull source: something that can be asked, repeatedly, for its next element until
    exhausted. Subclasses implement ``_next``; ``next`` makes exhaustion idempotent, so once a
    sequence has reported done its inputs are never pulled again.

    Every Sequence is also a native Python iterator.

    >>> from generator_utils import range
    >>> [x for x in range(1, 3)]
    [1, 2, 3]
    """

    _exhausted = False

    @abstractmethod
    def _next(self):
        pass

    def next(self):
        """
        Pull the next element
        :return: Iteration(value, False), or DONE once the sequence is exhausted
        """
        if self._exhausted:
            return DONE
        iteration = self._next()
        if iteration.done:
            self._exhausted = True
            return DONE
        return iteration

    def __iter__(self):
        return self

    def __next__(self):
        iteration = self.next()
        if iteration.done:
            raise StopIteration
        return iteration.value


class IterableSequence(Sequence):
    """
    Adapts a native Python iterable (list, generator, builtin range...) to the Sequence
    interface. The iterable is turned into an iterator once, lazily advanced by ``next``.
    """

    def __init__(self, iterable):
        self.iterator = iter(iterable)

    def _next(self):
        try:
            return Iteration(next(self.iterator), False)
        except StopIteration:
            return DONE


def as_sequence(obj):
    """
    Returns the Sequence to read obj through. A Sequence gives its own iterator, which is
    itself for every single-pass sequence and a fresh cursor for a Copy. Any other iterable is
    wrapped.

    >>> s = as_sequence([1, 2])
    >>> as_sequence(s) is s
    True
    >>> as_sequence(3)
    Traceback (most recent call last):
      ...
    TypeError: expected a Sequence or an iterable, got int

    :param obj: Sequence or iterable
    :return: Sequence over obj
    """
    if isinstance(obj, Sequence):
        return iter(obj)
    if is_iterable(obj):
        return IterableSequence(obj)
    raise TypeError(f"expected a Sequence or an iterable, got {type(obj).__name__}")
