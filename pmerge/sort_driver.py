"""
Sort Driver
===========
Runs the merge-insertion sort once per container strategy and reports
the original sequence, the sorted sequence and the wall-clock time of
every run.

Runs are sequential, each on its own fresh copy of the input, so the
timings reflect isolated, uncontended execution.  The clock covers
building the container from the input as well as the sort itself.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from pmerge.sorters.containers import DEFAULT_STRATEGIES, ContainerStrategy
from pmerge.sorters.merge_insertion import merge_insertion_sort
from pmerge.sorters.sort_errors import StrategyMismatchError, resolve_insertion_order
from pmerge.sorters.sort_metrics import SortMetrics

logger = logging.getLogger(__name__)

TIME_PRECISION = 5  # digits after the decimal point in timing lines


@dataclass(frozen=True)
class SortReport:
    """Everything a caller needs to print the before/after/timing report."""
    original: Tuple[int, ...]
    sorted_values: Tuple[int, ...]
    strategies: Tuple[ContainerStrategy, ...]
    timings: Dict[str, float]                       # microseconds by strategy name
    order: str = "sequential"
    metrics: Dict[str, SortMetrics] = field(default_factory=dict)

    def time_for(self, name: str) -> float:
        return self.timings[name]

    @property
    def size(self) -> int:
        return len(self.original)


def _first_difference(a: Sequence[int], b: Sequence[int]) -> Optional[int]:
    for i, (x, y) in enumerate(zip(a, b)):
        if x != y:
            return i
    if len(a) != len(b):
        return min(len(a), len(b))
    return None


def _timed_sort(
    original: Tuple[int, ...],
    strategy: ContainerStrategy,
    order: str,
    metrics: Optional[SortMetrics],
) -> Tuple[Tuple[int, ...], float]:
    """Return (sorted values, elapsed microseconds) for one strategy."""
    start = time.perf_counter()
    chain = strategy.build(original)
    chain = merge_insertion_sort(chain, strategy.factory, order, metrics)
    elapsed_us = (time.perf_counter() - start) * 1_000_000
    return tuple(chain), elapsed_us


def sort_and_report(
    values: Iterable[int],
    strategies: Sequence[ContainerStrategy] = DEFAULT_STRATEGIES,
    order: Optional[str] = None,
    collect_metrics: bool = False,
) -> SortReport:
    """
    Sort *values* with every strategy and return a :class:`SortReport`.

    *values* must already be validated positive integers.  *order* is
    resolved through :func:`resolve_insertion_order` (argument, then
    ``PMERGE_INSERTION_ORDER``, then the default).  Collecting metrics adds
    bookkeeping to the timed section, so leave it off for clean timings.
    """
    strategies = tuple(strategies)
    if not strategies:
        raise ValueError("at least one container strategy is required")
    names = [s.name for s in strategies]
    if len(set(names)) != len(names):
        raise ValueError(f"duplicate container strategy names: {names}")

    original = tuple(values)
    policy = resolve_insertion_order(order)

    timings: Dict[str, float] = {}
    metrics: Dict[str, SortMetrics] = {}
    reference: Optional[Tuple[int, ...]] = None

    for strategy in strategies:
        run_metrics = SortMetrics() if collect_metrics else None
        result, elapsed_us = _timed_sort(original, strategy, policy, run_metrics)
        timings[strategy.name] = elapsed_us
        if run_metrics is not None:
            metrics[strategy.name] = run_metrics
        logger.debug(
            "%s: %d elements in %.*f us (order=%s)",
            strategy.name, len(original), TIME_PRECISION, elapsed_us, policy,
        )

        if reference is None:
            reference = result
        elif result != reference:
            raise StrategyMismatchError(
                strategies[0].name,
                strategy.name,
                index=_first_difference(reference, result),
            )

    return SortReport(
        original=original,
        sorted_values=reference,
        strategies=strategies,
        timings=timings,
        order=policy,
        metrics=metrics,
    )


def format_sequence(values: Iterable[int]) -> str:
    return " ".join(str(v) for v in values)


def format_report(report: SortReport) -> List[str]:
    """
    Render the report as console lines:

        Before: 3 5 1
        After: 1 3 5
        Time to process a range of 3 elements with list  : 12.34567 us
        Time to process a range of 3 elements with deque : 15.00000 us
    """
    lines = [
        f"Before: {format_sequence(report.original)}",
        f"After: {format_sequence(report.sorted_values)}",
    ]
    width = max(len(s.label) for s in report.strategies)
    for strategy in report.strategies:
        lines.append(
            f"Time to process a range of {report.size} elements with "
            f"{strategy.label:<{width}} : "
            f"{report.timings[strategy.name]:.{TIME_PRECISION}f} us"
        )
    return lines


def format_metrics(report: SortReport) -> List[str]:
    """One summary line per strategy that collected metrics."""
    lines = []
    for strategy in report.strategies:
        m = report.metrics.get(strategy.name)
        if m is None:
            continue
        lines.append(
            f"{strategy.label}: {m.comparisons} comparisons, "
            f"{m.insertions} insertions, depth {m.max_depth}, "
            f"{m.stragglers} stragglers"
        )
    return lines
