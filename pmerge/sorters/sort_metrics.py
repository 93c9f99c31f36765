"""
Sort Metrics
============
Counters collected while a merge-insertion sort runs.

The counters are optional: every sorter entry point accepts
``metrics=None`` and skips all bookkeeping in that case.
"""

from dataclasses import dataclass


@dataclass
class SortMetrics:
    """Work done by one sort run."""
    comparisons: int = 0      # element comparisons (pairing + binary search)
    insertions: int = 0       # values inserted into a main chain
    max_depth: int = 0        # deepest recursion frame reached (top level = 1)
    stragglers: int = 0       # odd-length splits seen across all frames

    def record_depth(self, depth: int):
        if depth > self.max_depth:
            self.max_depth = depth
