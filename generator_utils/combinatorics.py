"""
Cross products of sequences in odometer order: the last sequence varies fastest.
"""
from generator_utils.base import Sequence, Iteration, DONE, as_sequence
from generator_utils.constructors import empty
from generator_utils.logger import get_logger
from generator_utils.replay import ReplayBuffer
from generator_utils.transformations import map
from generator_utils.util import prepend

logger = get_logger()


class Product(Sequence):
    """
    Pairs of (left, right). The left sequence is pulled one value at a time. The right sequence
    is read into a ReplayBuffer the first time through and replayed from the buffer for every
    later left value, so only the left side may be infinite. Left holds on its first value for
    as long as an infinite right side keeps producing.
    """

    def __init__(self, left, right):
        self.left = left
        self.right = ReplayBuffer(right)
        self.holding = False
        self.current = None
        self.offset = 0

    def _next(self):
        while True:
            if not self.holding:
                iteration = self.left.next()
                if iteration.done:
                    return DONE
                self.holding = True
                self.current = iteration.value
                self.offset = 0

            right = self.right.get(self.offset)
            if not right.done:
                self.offset += 1
                return Iteration((self.current, right.value), False)

            # an empty right side empties the whole product, however long left is
            if self.right.length == 0:
                return DONE
            self.holding = False
            self.current = None


def combine(sequences):
    """
    Creates a sequence yielding all in-order combinations of values from the given sequences,
    as tuples, varying the last position fastest. Every sequence but the first is replayed once
    per value of the sequences before it, so only the first may be infinite.

    >>> from generator_utils import range, to_array
    >>> to_array(combine([range(0, 1), range(4, 5)]))
    [(0, 4), (0, 5), (1, 4), (1, 5)]
    >>> to_array(combine([range(0, 2)]))
    [(0,), (1,), (2,)]

    :param sequences: list of sequences
    :return: sequence of tuples, one element per input sequence
    """
    sequences = [as_sequence(s) for s in sequences]
    logger.d("combining %d sequences", len(sequences))
    if len(sequences) == 0:
        return empty()
    if len(sequences) == 1:
        return map(sequences[0], lambda value: (value,))
    if len(sequences) == 2:
        return Product(sequences[0], sequences[1])
    return map(Product(sequences[0], combine(sequences[1:])), prepend)
