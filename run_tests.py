import sys, os, random
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from pmerge.sort_driver import sort_and_report, format_report
from pmerge.sorters.merge_insertion import merge_insertion_sort, pair_and_split
from pmerge.validators import parse_args
from pmerge.sorters.sort_errors import InvalidArgumentError

results = []

# Test 1: Concrete scenarios
try:
    cases = [([3, 5, 1], [1, 3, 5]), ([5, 3, 5, 3], [3, 3, 5, 5]), ([1], [1]), ([], [])]
    ok = all(list(sort_and_report(i).sorted_values) == e for i, e in cases)
    results.append("PASS" if ok else "FAIL")
    print("T1(scenarios): " + results[-1])
except Exception as ex:
    results.append("FAIL")
    print("T1 ERROR: " + str(ex))

# Test 2: Top-level straggler
try:
    data = [9, 8, 7, 6, 5, 4, 3, 2, 1]
    split = pair_and_split(data)
    ok2 = split.straggler == 1 and merge_insertion_sort(data) == list(range(1, 10))
    results.append("PASS" if ok2 else "FAIL")
    print("T2(straggler): " + str(split.straggler) + " - " + results[-1])
except Exception as ex:
    results.append("FAIL")
    print("T2 ERROR: " + str(ex))

# Test 3: Random inputs vs sorted()
try:
    rng = random.Random(42)
    bad = 0
    for n in range(0, 300, 7):
        values = [rng.randint(1, 50) for _ in range(n)]
        if list(sort_and_report(values, order="jacobsthal").sorted_values) != sorted(values):
            bad += 1
    results.append("PASS" if bad == 0 else "FAIL")
    print("T3(random): " + str(bad) + " mismatches - " + results[-1])
except Exception as ex:
    results.append("FAIL")
    print("T3 ERROR: " + str(ex))

# Test 4: Parser rejects bad tokens
try:
    rejected = 0
    for tokens in (["0"], ["-1"], ["007"], ["2147483648"], ["x"], []):
        try:
            parse_args(tokens)
        except InvalidArgumentError:
            rejected += 1
    results.append("PASS" if rejected == 6 else "FAIL")
    print("T4(parser): " + str(rejected) + "/6 rejected - " + results[-1])
except Exception as ex:
    results.append("FAIL")
    print("T4 ERROR: " + str(ex))

# Test 5: Report format
try:
    lines = format_report(sort_and_report([3000, 1, 20]))
    ok5 = lines[0] == "Before: 3000 1 20" and lines[1] == "After: 1 20 3000" and len(lines) == 4
    results.append("PASS" if ok5 else "FAIL")
    print("T5(report): " + lines[2] + " - " + results[-1])
except Exception as ex:
    results.append("FAIL")
    print("T5 ERROR: " + str(ex))

passed = results.count("PASS")
failed = results.count("FAIL")
print("---")
print("TOTAL: " + str(passed) + " passed, " + str(failed) + " failed")
