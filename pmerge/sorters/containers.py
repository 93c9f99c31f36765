"""
Container Strategies
====================
The two sequence containers the sorter is timed against.

- ``VECTOR``: contiguous ``list`` (O(1) indexing, O(n) insert-shift)
- ``DEQUE``: segmented ``collections.deque`` (cheap at both ends,
  O(n) indexing towards the middle)

Any factory that builds a mutable sequence supporting ``len``, indexing,
``append`` and ``insert`` can be plugged in as an extra strategy.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterable, MutableSequence, Tuple

ChainFactory = Callable[[Iterable[int]], MutableSequence[int]]


@dataclass(frozen=True)
class ContainerStrategy:
    """A named way of building main chains."""
    name: str              # stable key used in reports and CSV columns
    label: str             # human readable label for console output
    factory: ChainFactory  # builds a chain from an iterable of ints

    def build(self, values: Iterable[int]) -> MutableSequence[int]:
        return self.factory(values)


VECTOR = ContainerStrategy(name="vector", label="list", factory=list)
DEQUE = ContainerStrategy(name="deque", label="deque", factory=deque)

DEFAULT_STRATEGIES: Tuple[ContainerStrategy, ...] = (VECTOR, DEQUE)
