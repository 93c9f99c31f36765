"""
Merge-Insertion Sort
====================
Ford-Johnson merge-insertion sort for sequences of positive integers.

The algorithm pairs adjacent elements, recursively sorts the larger
element of every pair into a "main chain", then binary-inserts the
smaller elements (and the unpaired straggler, if any) into that chain.

The same code runs on every container strategy: the chain type is
chosen by the *factory* argument (``list``, ``collections.deque``, ...),
so the only difference between strategies is the cost of
``chain.insert``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, MutableSequence, Optional, Sequence

from pmerge.sorters.containers import ChainFactory
from pmerge.sorters.sort_errors import DEFAULT_INSERTION_ORDER
from pmerge.sorters.sort_metrics import SortMetrics

logger = logging.getLogger(__name__)


@dataclass
class Split:
    """Result of one pairing pass."""
    maxes: MutableSequence[int]   # larger element of each pair, pair order
    mins: MutableSequence[int]    # smaller element of each pair, same order
    straggler: Optional[int] = None

    @property
    def has_straggler(self) -> bool:
        return self.straggler is not None


def pair_and_split(
    seq: Sequence[int],
    factory: ChainFactory = list,
    metrics: Optional[SortMetrics] = None,
) -> Split:
    """
    Pair positions (0, 1), (2, 3), ... and split every pair into max/min.

    Parameters
    ----------
    seq : sequence of int
        Input to pair. Not reordered or mutated.
    factory : callable
        Builds the ``maxes`` and ``mins`` containers.
    metrics : SortMetrics, optional
        Receives one comparison per pair.

    Returns
    -------
    Split
        ``maxes[i]`` and ``mins[i]`` come from the same pair.  ``straggler``
        is the last element when ``len(seq)`` is odd, otherwise ``None``.
    """
    n = len(seq)
    straggler = seq[-1] if n % 2 == 1 else None

    maxes = factory(())
    mins = factory(())

    it = iter(seq)
    for a, b in zip(it, it):
        if a > b:
            maxes.append(a)
            mins.append(b)
        else:
            maxes.append(b)
            mins.append(a)

    if metrics is not None:
        metrics.comparisons += n // 2
        if straggler is not None:
            metrics.stragglers += 1

    return Split(maxes=maxes, mins=mins, straggler=straggler)


def lower_bound(
    chain: Sequence[int],
    value: int,
    metrics: Optional[SortMetrics] = None,
) -> int:
    """Return the leftmost index whose occupant is not less than *value*."""
    left = 0
    right = len(chain)
    probes = 0

    while left < right:
        mid = left + (right - left) // 2
        probes += 1
        if chain[mid] < value:
            left = mid + 1
        else:
            right = mid

    if metrics is not None:
        metrics.comparisons += probes
    return left


def binary_insert(
    chain: MutableSequence[int],
    value: int,
    metrics: Optional[SortMetrics] = None,
) -> int:
    """
    Insert *value* into the sorted *chain* at its lower-bound position.

    Equal values land before the existing equal run.  Returns the index
    the value was inserted at.
    """
    index = lower_bound(chain, value, metrics)
    chain.insert(index, value)
    if metrics is not None:
        metrics.insertions += 1
    return index


def _jacobsthal_group_sizes() -> Iterator[int]:
    # Sizes 2, 2, 6, 10, 22, 42, ...: every two adjacent groups sum to a
    # power of two.
    prev = 0
    power = 2
    while True:
        size = power - prev
        yield size
        prev = size
        power *= 2


def insertion_order(count: int, policy: str = DEFAULT_INSERTION_ORDER) -> List[int]:
    """
    Return the order in which the *count* pair-minimums are inserted.

    ``"sequential"`` keeps pairing order.  ``"jacobsthal"`` walks groups of
    Jacobsthal-derived sizes, each group from its highest index down.  Every
    insertion still searches the whole chain, so the sorted result is the
    same for both policies.  Either way the order is a permutation of
    ``range(count)``.
    """
    if policy == "sequential":
        return list(range(count))
    if policy != "jacobsthal":
        raise ValueError(f"unknown insertion order: {policy!r}")

    order: List[int] = []
    start = 0
    for size in _jacobsthal_group_sizes():
        if start >= count:
            break
        end = min(start + size, count)
        order.extend(range(end - 1, start - 1, -1))
        start = end
    return order


def merge_insertion_sort(
    seq: Sequence[int],
    factory: ChainFactory = list,
    order: str = DEFAULT_INSERTION_ORDER,
    metrics: Optional[SortMetrics] = None,
    _depth: int = 1,
) -> MutableSequence[int]:
    """
    Return a new container of *seq*'s elements in non-decreasing order.

    Parameters
    ----------
    seq : sequence of int
        Input items.  Never mutated.
    factory : callable
        Container type of every chain built along the way, and of the
        returned result.
    order : str
        Insertion-order policy for the pair-minimums, see
        :func:`insertion_order`.  Does not change the result.
    metrics : SortMetrics, optional
        Collects comparison/insertion counts and recursion depth.

    Returns
    -------
    MutableSequence[int]
        A fresh sorted container built by *factory*.
    """
    if metrics is not None:
        metrics.record_depth(_depth)

    if len(seq) <= 1:
        return factory(seq)

    split = pair_and_split(seq, factory, metrics)
    logger.debug(
        "depth %d: %d pairs, straggler=%s",
        _depth, len(split.maxes), split.straggler,
    )

    # Main chain: the pair maxima, sorted by the same algorithm.
    chain = merge_insertion_sort(split.maxes, factory, order, metrics, _depth + 1)

    for index in insertion_order(len(split.mins), order):
        binary_insert(chain, split.mins[index], metrics)

    if split.has_straggler:
        binary_insert(chain, split.straggler, metrics)

    return chain
