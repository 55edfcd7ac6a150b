"""
Composable lazy sequence combinators. Constructors, transformers and consumers all operate on
generator_utils.base.Sequence, a pull source evaluated one element at a time, so infinite
sequences can be processed without materializing them.
"""

from generator_utils.base import Sequence, Iteration, DONE, as_sequence
from generator_utils.constructors import empty, from_array, range
from generator_utils.transformations import map, filter, filter_map, flatten, concat
from generator_utils.replay import copy
from generator_utils.combinatorics import combine
from generator_utils.consumers import for_each, to_array, take

__all__ = [
    "Sequence",
    "Iteration",
    "DONE",
    "as_sequence",
    "combine",
    "concat",
    "copy",
    "empty",
    "filter",
    "filter_map",
    "flatten",
    "for_each",
    "from_array",
    "map",
    "range",
    "take",
    "to_array",
]

__license__ = "MIT"
__version__ = "0.0.1"
__status__ = "Development"
