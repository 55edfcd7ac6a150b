# tests/conftest.py
"""
Shared fixtures: an infinite sequence of natural numbers and a sequence that records every
pull made on it, so tests can check exactly how far a combinator drove its input.
"""

import pytest

from generator_utils.base import Sequence, Iteration, DONE


class Naturals(Sequence):
    def __init__(self):
        self.current = 0

    def _next(self):
        value = self.current
        self.current += 1
        return Iteration(value, False)


class RecordingSequence(Sequence):
    """
    Yields the given values and logs each one as it is pulled. ``pulls`` also counts the final
    pull that reports exhaustion.
    """

    def __init__(self, values):
        self.values = list(values)
        self.log = []
        self.pulls = 0

    def _next(self):
        self.pulls += 1
        if len(self.log) >= len(self.values):
            return DONE
        value = self.values[len(self.log)]
        self.log.append(value)
        return Iteration(value, False)


class NonIdempotent(object):
    """
    A badly behaved source that starts producing again after reporting done once.
    """

    def __init__(self):
        self.calls = 0

    def next(self):
        self.calls += 1
        if self.calls == 2:
            return DONE
        return Iteration(self.calls, False)


@pytest.fixture
def naturals():
    return Naturals


@pytest.fixture
def recording():
    return RecordingSequence


@pytest.fixture
def non_idempotent():
    return NonIdempotent
