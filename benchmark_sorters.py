import sys
import os
import csv
import random
import argparse
import logging
from typing import Dict, Any, List, Optional

# Add project root to path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from pmerge.sort_driver import sort_and_report
from pmerge.sorters.containers import DEFAULT_STRATEGIES
from pmerge.sorters.sort_errors import INSERTION_ORDERS
from pmerge.validators import INT_MAX

log = logging.getLogger("pmerge.benchmark")

DEFAULT_SIZES = [10, 100, 1000, 3000]
DEFAULT_RUNS = 5
DEFAULT_MAX_VALUE = 100000


def run_single_benchmark(run_id: int, size: int, max_value: int, rng: random.Random,
                         order: Optional[str] = None) -> Dict[str, Any]:
    """
    Sorts one random input with every container strategy.
    Timings come from a plain run; comparison counts from a second,
    instrumented run of the same input.
    """
    values = [rng.randint(1, max_value) for _ in range(size)]

    timed = sort_and_report(values, order=order)
    counted = sort_and_report(values, order=timed.order, collect_metrics=True)

    result = {
        "run_id": run_id,
        "size": size,
        "order": timed.order,
        "sorted_ok": list(timed.sorted_values) == sorted(values),
    }
    for strategy in DEFAULT_STRATEGIES:
        m = counted.metrics[strategy.name]
        result[f"{strategy.name}_time_us"] = timed.time_for(strategy.name)
        result[f"{strategy.name}_comparisons"] = m.comparisons
    result["max_depth"] = counted.metrics[DEFAULT_STRATEGIES[0].name].max_depth

    return result


def run_benchmark(sizes: List[int], runs: int, max_value: int, seed: Optional[int] = None,
                  order: Optional[str] = None) -> List[Dict[str, Any]]:
    rng = random.Random(seed)
    results = []
    total = len(sizes) * runs
    done = 0

    for size in sizes:
        for _ in range(runs):
            done += 1
            log.info("run %d/%d: %d elements", done, total, size)
            results.append(run_single_benchmark(done, size, max_value, rng, order))

    return results


def write_csv(results: List[Dict[str, Any]], path: str):
    keys = results[0].keys()
    with open(path, "w", newline="") as f:
        dict_writer = csv.DictWriter(f, fieldnames=keys)
        dict_writer.writeheader()
        dict_writer.writerows(results)


def print_summary(results: List[Dict[str, Any]]):
    print("\nSummary Statistics:")
    header = f"{'Size':>6} | {'Runs':>4}"
    for strategy in DEFAULT_STRATEGIES:
        header += f" | {strategy.label + ' us':>14}"
    header += f" | {'Comparisons':>11}"
    print(header)
    print("-" * len(header))

    for size in sorted({r["size"] for r in results}):
        rows = [r for r in results if r["size"] == size]
        line = f"{size:>6} | {len(rows):>4}"
        for strategy in DEFAULT_STRATEGIES:
            avg_time = sum(r[f"{strategy.name}_time_us"] for r in rows) / len(rows)
            line += f" | {avg_time:>14.5f}"
        avg_cmp = sum(r[f"{DEFAULT_STRATEGIES[0].name}_comparisons"] for r in rows) / len(rows)
        line += f" | {avg_cmp:>11.1f}"
        print(line)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark merge-insertion sort on list vs deque")
    parser.add_argument("--runs", type=int, default=DEFAULT_RUNS, help="Runs per input size")
    parser.add_argument("--sizes", type=int, nargs="+", default=DEFAULT_SIZES, help="Input sizes")
    parser.add_argument("--max-value", type=int, default=DEFAULT_MAX_VALUE, help="Largest random value")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--order", choices=INSERTION_ORDERS, default=None, help="Insertion order policy")
    parser.add_argument("--output", type=str, default="benchmark_results.csv", help="Output CSV file")

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s - %(message)s")

    if args.runs < 1 or any(s < 0 for s in args.sizes):
        parser.error("--runs must be positive and --sizes non-negative")
    if not 1 <= args.max_value <= INT_MAX:
        parser.error(f"--max-value must be in 1..{INT_MAX}")

    print(f"Starting Benchmark: {args.runs} runs x sizes {args.sizes}")
    results = run_benchmark(args.sizes, args.runs, args.max_value, args.seed, args.order)

    failures = sum(1 for r in results if not r["sorted_ok"])
    print(f"\nBenchmark Complete! Incorrect results: {failures}/{len(results)}")

    write_csv(results, args.output)
    print(f"Results saved to {args.output}")

    print_summary(results)
    return 0 if failures == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
