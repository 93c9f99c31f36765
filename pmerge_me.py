"""
PmergeMe
========
Sort positive integers with merge-insertion on a list and on a deque,
and print how long each container took.

Run:  python pmerge_me.py 3 5 9 7 4
      python pmerge_me.py --order jacobsthal --metrics `shuf -i 1-100000 -n 3000`

Any invalid argument prints ``Error`` on stderr and exits with status 1.
There is no -h/--help: every unknown option is an invalid argument.
Options may appear anywhere among the numbers.
"""

import sys
import argparse
import logging
from typing import List, Optional

from pmerge.sort_driver import format_metrics, format_report, sort_and_report
from pmerge.sorters.sort_errors import GENERIC_ERROR_MESSAGE, INSERTION_ORDERS, InvalidArgumentError
from pmerge.validators import parse_args

log = logging.getLogger("pmerge")


class StrictArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage problems as the generic error."""

    def error(self, message):
        log.debug("argument error: %s", message)
        print(GENERIC_ERROR_MESSAGE, file=sys.stderr)
        raise SystemExit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = StrictArgumentParser(description="Merge-insertion sort timing on list vs deque",
                                  add_help=False)
    parser.add_argument("numbers", nargs="*", help="Positive integers to sort")
    parser.add_argument("--order", choices=INSERTION_ORDERS, default=None,
                        help="Insertion order of pair minimums (default: $PMERGE_INSERTION_ORDER or sequential)")
    parser.add_argument("--metrics", action="store_true", help="Also print comparison counts")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging on stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_intermixed_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s - %(message)s",
    )

    try:
        values = parse_args(args.numbers)
    except InvalidArgumentError as e:
        log.debug("rejected input: %s", e)
        print(GENERIC_ERROR_MESSAGE, file=sys.stderr)
        return 1

    report = sort_and_report(values, order=args.order, collect_metrics=False)
    for line in format_report(report):
        print(line)

    if args.metrics:
        # Separate run so the counters do not skew the timings above.
        counted = sort_and_report(values, order=report.order, collect_metrics=True)
        for line in format_metrics(counted):
            print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
