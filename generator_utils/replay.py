"""
Memoizing replay of a single-pass sequence. A ReplayBuffer pulls its source only when a cursor
asks for a position nobody has read yet, so any number of cursors can walk the same values
while the source is driven at most once per element.
"""
from generator_utils.base import Sequence, Iteration, DONE, as_sequence
from generator_utils.logger import get_logger

logger = get_logger()


class ReplayBuffer(object):
    """
    Append-only cache over a source sequence. ``length`` stays None until the source reports
    exhaustion, after which it holds the final number of values and the source is dropped.
    """

    def __init__(self, source):
        self.source = source
        self.values = []
        self.length = None

    @property
    def exhausted(self):
        return self.length is not None

    def get(self, offset):
        """
        Read one position, pulling the source up to it if it has not been read yet
        :param offset: zero based position
        :return: Iteration holding the value, or DONE if the source ended before offset
        """
        while offset >= len(self.values):
            if self.exhausted:
                return DONE
            iteration = self.source.next()
            if iteration.done:
                self.length = len(self.values)
                self.source = None
                logger.d("replay buffer sealed after %d values", self.length)
                return DONE
            self.values.append(iteration.value)
        return Iteration(self.values[offset], False)


class Cursor(Sequence):
    """
    One independent read position over a ReplayBuffer. Cursors only read; every cursor starts at
    the first value no matter how far others have already gone.
    """

    def __init__(self, buffer):
        self.buffer = buffer
        self.offset = 0

    def _next(self):
        iteration = self.buffer.get(self.offset)
        if not iteration.done:
            self.offset += 1
        return iteration


class Copy(Sequence):
    """
    A sequence that can be iterated any number of times. ``cursor()`` (or ``iter()``) starts a
    fresh iteration from the first value, and so does handing the Copy to any consumer or
    combinator. Calling ``next`` on the Copy itself reads from a default cursor created along
    with it.
    """

    def __init__(self, sequence):
        self.buffer = ReplayBuffer(sequence)
        self.default = Cursor(self.buffer)

    def cursor(self):
        return Cursor(self.buffer)

    def _next(self):
        return self.default.next()

    def __iter__(self):
        return self.cursor()


def copy(sequence):
    """
    Wraps a single-pass sequence so it can be iterated repeatedly and independently, each
    iteration replaying the same values from the start. The underlying sequence is pulled at
    most once per element. Building the copy pulls nothing, so infinite sequences are fine as
    long as no iteration is drained.

    >>> from generator_utils import range, to_array
    >>> copied = copy(range(0, 2))
    >>> to_array(copied.cursor()), to_array(copied.cursor())
    ([0, 1, 2], [0, 1, 2])
    >>> list(copied) == list(copied)
    True

    :param sequence: sequence to replay
    :return: Copy of the sequence
    """
    return Copy(as_sequence(sequence))
