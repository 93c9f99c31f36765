"""
Sorter errors and configuration resolution.
"""

from __future__ import annotations

import os
from typing import Any, Optional

INSERTION_ORDERS = ("sequential", "jacobsthal")
DEFAULT_INSERTION_ORDER = "sequential"
INSERTION_ORDER_ENV = "PMERGE_INSERTION_ORDER"

GENERIC_ERROR_MESSAGE = "Error"


class InvalidArgumentError(ValueError):
    """
    Raised by the argument parser when a token is not a valid positive int.
    The sorter itself never raises this.
    """

    def __init__(self, token: Optional[str], reason: str) -> None:
        super().__init__(f"invalid argument {token!r}: {reason}")
        self.token = token
        self.reason = reason


class StrategyMismatchError(RuntimeError):
    """
    Raised when two container strategies disagree on the sorted output.
    """

    def __init__(self, expected_strategy: str, actual_strategy: str, *, index: int | None = None) -> None:
        message = f"{actual_strategy} result differs from {expected_strategy} result"
        if index is not None:
            message += f" at index {index}"
        super().__init__(message)
        self.expected_strategy = expected_strategy
        self.actual_strategy = actual_strategy
        self.index = index


def resolve_insertion_order(requested: Any = None) -> str:
    """
    Resolve the insertion-order policy for pair-minimums.

    Priority:
    1) explicit *requested* value (must be a known policy)
    2) env PMERGE_INSERTION_ORDER (ignored when unknown)
    3) DEFAULT_INSERTION_ORDER
    """
    if requested is not None:
        policy = str(requested).strip().lower()
        if policy not in INSERTION_ORDERS:
            raise ValueError(f"unknown insertion order: {requested!r}")
        return policy

    raw = os.getenv(INSERTION_ORDER_ENV)
    if raw is None:
        return DEFAULT_INSERTION_ORDER

    policy = raw.strip().lower()
    if policy in INSERTION_ORDERS:
        return policy
    return DEFAULT_INSERTION_ORDER
