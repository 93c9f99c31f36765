import unittest
import sys
import os
import io
import tempfile
from contextlib import redirect_stderr, redirect_stdout

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pmerge_me
import benchmark_sorters


def run_cli(argv):
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        try:
            code = pmerge_me.main(argv)
        except SystemExit as e:
            code = e.code
    return code, out.getvalue(), err.getvalue()


class TestPmergeMeCli(unittest.TestCase):

    def test_sorts_and_reports(self):
        code, out, err = run_cli(["3", "5", "9", "7", "4"])
        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertEqual(lines[0], "Before: 3 5 9 7 4")
        self.assertEqual(lines[1], "After: 3 4 5 7 9")
        self.assertEqual(len(lines), 4)
        self.assertIn("with list  :", lines[2])
        self.assertIn("with deque :", lines[3])
        self.assertEqual(err, "")

    def test_no_arguments_is_error(self):
        code, out, err = run_cli([])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertEqual(err.strip(), "Error")

    def test_negative_number_is_error(self):
        code, _, err = run_cli(["1", "-2"])
        self.assertEqual(code, 1)
        self.assertEqual(err.strip(), "Error")

    def test_overflow_is_error(self):
        code, _, err = run_cli(["2147483648"])
        self.assertEqual(code, 1)
        self.assertEqual(err.strip(), "Error")

    def test_unknown_option_is_error(self):
        code, _, err = run_cli(["--bogus", "1"])
        self.assertEqual(code, 1)
        self.assertEqual(err.strip(), "Error")

    def test_options_between_numbers(self):
        code, out, err = run_cli(["3", "--metrics", "5", "--order", "jacobsthal", "1"])
        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertEqual(lines[0], "Before: 3 5 1")
        self.assertEqual(lines[1], "After: 1 3 5")
        self.assertEqual(len(lines), 6)
        self.assertEqual(err, "")

    def test_help_flag_is_error(self):
        for flag in ("-h", "--help"):
            with self.subTest(flag=flag):
                code, out, err = run_cli([flag])
                self.assertEqual(code, 1)
                self.assertEqual(out, "")
                self.assertEqual(err.strip(), "Error")

    def test_metrics_flag(self):
        code, out, _ = run_cli(["--metrics", "--order", "jacobsthal", "2", "1"])
        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertEqual(len(lines), 6)
        self.assertTrue(lines[4].startswith("list: "))
        self.assertTrue(lines[5].startswith("deque: "))


class TestBenchmark(unittest.TestCase):

    def test_run_benchmark_rows(self):
        results = benchmark_sorters.run_benchmark([0, 1, 17], runs=2, max_value=50, seed=7)
        self.assertEqual(len(results), 6)
        for row in results:
            self.assertTrue(row["sorted_ok"])
            self.assertGreaterEqual(row["vector_time_us"], 0.0)
            self.assertGreaterEqual(row["deque_time_us"], 0.0)
            self.assertEqual(row["vector_comparisons"], row["deque_comparisons"])

    def test_seed_is_reproducible(self):
        a = benchmark_sorters.run_benchmark([20], runs=1, max_value=100, seed=3)
        b = benchmark_sorters.run_benchmark([20], runs=1, max_value=100, seed=3)
        self.assertEqual(a[0]["vector_comparisons"], b[0]["vector_comparisons"])

    def test_main_writes_csv(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "results.csv")
            with redirect_stdout(io.StringIO()):
                code = benchmark_sorters.main(["--runs", "1", "--sizes", "5", "9", "--seed", "1", "--output", path])
            self.assertEqual(code, 0)
            with open(path) as f:
                header = f.readline().strip().split(",")
            self.assertIn("vector_time_us", header)
            self.assertIn("deque_time_us", header)


if __name__ == '__main__':
    unittest.main()
