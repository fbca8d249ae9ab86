from bigo_cli.engine.notation import ComplexityClass
from bigo_cli.engine.structure import (
    LoopTracker,
    analyze_recursion,
    count_nested_loops,
    count_self_calls,
    fallback_class,
    loop_depth_class,
    recursion_class,
)

NESTED = [
    "    for i in items:",
    "        for j in items:",
    "            print(i, j)",
]

SEQUENTIAL = [
    "    for i in items:",
    "        print(i)",
    "    for j in items:",
    "        print(j)",
]


def test_count_nested_loops():
    assert count_nested_loops([]) == 0
    assert count_nested_loops(NESTED) == 2
    assert count_nested_loops(SEQUENTIAL) == 1


def test_rejected_loops_do_not_add_depth():
    accept = lambda line: "DIRECTIONS" not in line
    lines = [
        "    for cell in grid:",
        "        for d in DIRECTIONS:",
        "            for x in cell:",
        "                print(x, d)",
    ]
    assert count_nested_loops(lines) == 3
    assert count_nested_loops(lines, accept) == 2


def test_loop_tracker_reports_headers():
    tracker = LoopTracker()
    assert tracker.feed("    while queue:")
    assert tracker.depth == 1
    assert not tracker.feed("        queue.pop()")
    assert not tracker.feed("    return None")
    assert tracker.depth == 0
    assert tracker.max_depth == 1


def test_loop_depth_class_clamps_deep_nesting():
    assert loop_depth_class(0) == ComplexityClass.CONSTANT
    assert loop_depth_class(2) == ComplexityClass.QUADRATIC
    assert loop_depth_class(5) == ComplexityClass.CUBIC


def test_count_self_calls_ignores_attribute_calls():
    assert count_self_calls("    return fib(n - 1) + fib(n - 2)", "fib") == 2
    assert count_self_calls("    return self.fib(n - 1)", "fib") == 0
    assert count_self_calls("    return fibonacci(n)", "fib") == 0


def test_recursion_shapes():
    fib = [
        "    if n <= 1:",
        "        return n",
        "    return fib(n - 1) + fib(n - 2)",
    ]
    info = analyze_recursion(fib, "fib")
    assert info.is_recursive and info.has_base_case
    assert info.shape == "binary"
    assert recursion_class(info, fib, "fib") == ComplexityClass.EXPONENTIAL

    tri = ["    return tri(a, b, c) + tri(b, c, a) + tri(c, a, b)"]
    assert analyze_recursion(tri, "tri").shape == "multiple"
    assert recursion_class(analyze_recursion(tri, "tri"), tri, "tri") == ComplexityClass.EXPONENTIAL_K


def test_linear_recursion_with_linear_work_is_quadratic():
    lines = [
        "    if not arr:",
        "        return 0",
        "    best = max(arr)",
        "    return best + walk(arr[1:])",
    ]
    info = analyze_recursion(lines, "walk")
    assert info.shape == "linear"
    assert recursion_class(info, lines, "walk") == ComplexityClass.QUADRATIC
    assert fallback_class(lines, "walk") == ComplexityClass.QUADRATIC
