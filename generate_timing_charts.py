"""
Timing Chart Generator
======================
Charts comparing merge-insertion sort on list vs deque.
Run:  python generate_timing_charts.py --input benchmark_results.csv
      python generate_timing_charts.py --runs 3        (fresh benchmark)
Output: timing_charts/ folder with 2 PNG files.
"""

import sys
import os
import csv
import math
import argparse
import logging
import numpy as np
from typing import Dict, Any, List, Optional
from collections import defaultdict

# Ensure project root is on the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for file output
import matplotlib.pyplot as plt

from benchmark_sorters import DEFAULT_MAX_VALUE, DEFAULT_SIZES, run_benchmark
from pmerge.sorters.containers import DEFAULT_STRATEGIES

log = logging.getLogger("pmerge.charts")

# ─────────────────────────────────────────────────────────────
# Color Palette & Styling
# ─────────────────────────────────────────────────────────────
COLORS = {
    "vector": "#339AF0",   # Sky Blue
    "deque":  "#51CF66",   # Emerald Green
}
BOUND_COLOR = "#E0AF68"    # Gold accent
BG_COLOR = "#1A1B26"
CARD_COLOR = "#24283B"
TEXT_COLOR = "#C0CAF5"
GRID_COLOR = "#414868"

INT_COLUMNS = ("run_id", "size", "max_depth")


def setup_style():
    """Apply a dark, presentation-friendly matplotlib style."""
    plt.rcParams.update({
        "figure.facecolor": BG_COLOR,
        "axes.facecolor": CARD_COLOR,
        "axes.edgecolor": GRID_COLOR,
        "axes.labelcolor": TEXT_COLOR,
        "axes.titleweight": "bold",
        "text.color": TEXT_COLOR,
        "xtick.color": TEXT_COLOR,
        "ytick.color": TEXT_COLOR,
        "grid.color": GRID_COLOR,
        "grid.alpha": 0.3,
        "font.size": 12,
        "legend.facecolor": CARD_COLOR,
        "legend.edgecolor": GRID_COLOR,
        "savefig.dpi": 150,
        "savefig.bbox": "tight",
        "savefig.facecolor": BG_COLOR,
    })


# ─────────────────────────────────────────────────────────────
# Data
# ─────────────────────────────────────────────────────────────
def load_results(path: str) -> List[Dict[str, Any]]:
    """Read a benchmark CSV back into typed rows."""
    rows = []
    with open(path, newline="") as f:
        for raw in csv.DictReader(f):
            row: Dict[str, Any] = dict(raw)
            for key, value in raw.items():
                if key in INT_COLUMNS or key.endswith("_comparisons"):
                    row[key] = int(value)
                elif key.endswith("_time_us"):
                    row[key] = float(value)
                elif key == "sorted_ok":
                    row[key] = value == "True"
            rows.append(row)
    return rows


def group_by_size(results: List[Dict[str, Any]]) -> Dict[int, List[Dict[str, Any]]]:
    grouped = defaultdict(list)
    for r in results:
        grouped[r["size"]].append(r)
    return dict(sorted(grouped.items()))


def comparison_lower_bound(n: int) -> float:
    """ceil(log2(n!)): the information-theoretic minimum number of comparisons."""
    if n < 2:
        return 0.0
    return float(math.ceil(math.lgamma(n + 1) / math.log(2)))


# ─────────────────────────────────────────────────────────────
# Chart Generators
# ─────────────────────────────────────────────────────────────
def chart_1_timing(grouped, out_dir) -> str:
    """Grouped bars: average time per container, per input size."""
    fig, ax = plt.subplots(figsize=(10, 6))
    sizes = list(grouped.keys())
    x = np.arange(len(sizes))
    width = 0.35

    for i, strategy in enumerate(DEFAULT_STRATEGIES):
        times = [np.mean([r[f"{strategy.name}_time_us"] for r in grouped[s]]) for s in sizes]
        ax.bar(x + i * width, times, width, label=strategy.label,
               color=COLORS.get(strategy.name, TEXT_COLOR), edgecolor="none",
               alpha=0.9, zorder=3)

    ax.set_xticks(x + width / 2)
    ax.set_xticklabels([str(s) for s in sizes])
    ax.set_xlabel("Input size (elements)")
    ax.set_ylabel("Average time (us)")
    ax.set_title("Merge-Insertion Sort: list vs deque")
    ax.legend(loc="upper left")
    ax.grid(axis="y", zorder=0)

    path = os.path.join(out_dir, "1_timing.png")
    fig.savefig(path)
    plt.close(fig)
    print("  ✓ Chart 1: Timing Comparison")
    return path


def chart_2_comparisons(grouped, out_dir) -> str:
    """Line chart: measured comparisons against ceil(log2(n!))."""
    fig, ax = plt.subplots(figsize=(10, 6))
    sizes = np.array(list(grouped.keys()))
    key = f"{DEFAULT_STRATEGIES[0].name}_comparisons"
    measured = np.array([np.mean([r[key] for r in grouped[s]]) for s in sizes])
    bound = np.array([comparison_lower_bound(int(s)) for s in sizes])

    ax.plot(sizes, measured, marker="o", color=COLORS["vector"], label="merge-insertion")
    ax.plot(sizes, bound, linestyle="--", color=BOUND_COLOR, label="ceil(log2 n!)")
    ax.set_xlabel("Input size (elements)")
    ax.set_ylabel("Comparisons")
    ax.set_title("Comparisons vs Information-Theoretic Bound")
    ax.legend(loc="upper left")
    ax.grid(zorder=0)

    path = os.path.join(out_dir, "2_comparisons.png")
    fig.savefig(path)
    plt.close(fig)
    print("  ✓ Chart 2: Comparison Counts")
    return path


def generate_charts(results: List[Dict[str, Any]], out_dir: str) -> List[str]:
    if not results:
        raise ValueError("no benchmark results to chart")
    os.makedirs(out_dir, exist_ok=True)
    setup_style()
    grouped = group_by_size(results)
    return [chart_1_timing(grouped, out_dir), chart_2_comparisons(grouped, out_dir)]


# ─────────────────────────────────────────────────────────────
# Main
# ─────────────────────────────────────────────────────────────
def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Generate Timing Charts")
    parser.add_argument("--input", type=str, default=None,
                        help="Benchmark CSV to chart (default: run a fresh benchmark)")
    parser.add_argument("--runs", type=int, default=3,
                        help="Runs per size for a fresh benchmark (default: 3)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--output-dir", type=str, default=None,
                        help="Output folder (default: ./timing_charts)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s - %(message)s")

    out_dir = args.output_dir or os.path.join(
        os.path.dirname(os.path.abspath(__file__)), "timing_charts")

    if args.input:
        log.info("Loading %s", args.input)
        results = load_results(args.input)
    else:
        print("Running Benchmarks...")
        results = run_benchmark(DEFAULT_SIZES, args.runs, DEFAULT_MAX_VALUE, args.seed)

    print("\nGenerating Charts...")
    try:
        paths = generate_charts(results, out_dir)
    except ValueError as e:
        parser.error(str(e))
    print(f"{len(paths)} charts saved to: {out_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
