"""
Argument Validators
===================
Strict parsing of command-line tokens into positive integers.

Accepted: an optional leading ``+`` followed by ASCII digits, no leading
zeros, value in ``1..INT_MAX``.  Everything else is rejected with
:class:`InvalidArgumentError` before the sorter is ever called.
"""

from typing import List, Sequence

from pmerge.sorters.sort_errors import InvalidArgumentError

INT_MAX = 2 ** 31 - 1
_DIGITS = frozenset("0123456789")


def parse_positive_int(token: str) -> int:
    """
    Parse one token.
    Returns: the integer value; raises InvalidArgumentError otherwise.
    """
    if not isinstance(token, str) or not token:
        raise InvalidArgumentError(token, "empty token")

    digits = token[1:] if token[0] == "+" else token
    if not digits:
        raise InvalidArgumentError(token, "sign without digits")

    if not all(ch in _DIGITS for ch in digits):
        raise InvalidArgumentError(token, "not a decimal integer")

    # "0" itself falls through to the zero check below
    if digits[0] == "0" and len(digits) > 1:
        raise InvalidArgumentError(token, "leading zero")

    value = int(digits)
    if value == 0:
        raise InvalidArgumentError(token, "zero is not positive")
    if value > INT_MAX:
        raise InvalidArgumentError(token, f"exceeds {INT_MAX}")
    return value


def parse_args(tokens: Sequence[str]) -> List[int]:
    """Parse every token in order; at least one token is required."""
    if not tokens:
        raise InvalidArgumentError(None, "no arguments")
    return [parse_positive_int(token) for token in tokens]
