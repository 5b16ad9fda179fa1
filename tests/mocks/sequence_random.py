"""
Deterministic random sources

Stand-ins for ``random.Random`` that replay fixed uniform(0, 1) draws, so a
test can force every branch of a stochastic function and count how many
draws it consumed.
"""

from typing import Iterable, List, Optional


class SequenceRandom:
    """
    Replays ``values`` in order.

    Args:
        values: Draws to return, each in [0, 1)
        fill: Value returned once ``values`` is used up; when None an
            exhausted sequence fails the test
    """

    def __init__(self, values: Iterable[float], fill: Optional[float] = None):
        self.values: List[float] = list(values)
        self.fill = fill
        self.draws_used = 0

    def random(self) -> float:
        if self.draws_used < len(self.values):
            value = self.values[self.draws_used]
        elif self.fill is not None:
            value = self.fill
        else:
            raise AssertionError(
                f"SequenceRandom exhausted after {self.draws_used} draws"
            )
        self.draws_used += 1
        return value


class ConstantRandom(SequenceRandom):
    """Returns the same draw forever."""

    def __init__(self, value: float):
        super().__init__([], fill=value)
