"""
Time-complexity pattern detectors.

Each detector is a predicate over a function's own code lines. They are
evaluated in a fixed order and the first one that fires decides the class,
so specific signals (sorting, halving, permutations) pre-empt generic loop
counting. When nothing fires, the loop-depth and recursion-shape estimates
are combined instead.
"""

import re
from dataclasses import dataclass
from functools import cached_property
from typing import Callable, List, Optional, Tuple, Union

from bigo_cli.core.config import AnalyzerConfig
from bigo_cli.engine.lines import (
    block_after,
    is_comprehension,
    is_loop,
    loop_iterable,
)
from bigo_cli.engine.models import ComplexityResult
from bigo_cli.engine.notation import ComplexityClass
from bigo_cli.engine.structure import (
    RECURSION_LINEAR,
    LoopTracker,
    RecursionInfo,
    analyze_recursion,
    count_nested_loops,
    count_self_calls,
    fallback_class,
)

# Sorting and divide-and-conquer
SORT_CALL_RE = re.compile(r"(?<![\w.])sorted\s*\(|\.sort\s*\(")
HEAPIFY_RE = re.compile(r"\bheapify\s*\(")
HEAPPOP_RE = re.compile(r"\bheappop\s*\(")
DIVIDE_CALL_RE = re.compile(r"(?<![\w.])(merge|partition)\s*\(")
NAMED_SORT_RE = re.compile(
    r"\b(merge_?sort|quick_?sort|heap_?sort)\b", re.IGNORECASE
)
HALF_SLICE_RE = re.compile(r"\[\s*:\s*\w+\s*\]|\[\s*\w+\s*:\s*\]")
HALVING_RE = re.compile(r"//\s*2\b|>>\s*1\b")

# Logarithmic
LOG_MATH_RE = re.compile(r"\bmath\.log\w*\s*\(|(?<![\w.])log(2|10)\s*\(")
HEAP_OP_RE = re.compile(r"\bheap(push|pop|pushpop|replace)\s*\(")
HALVING_ASSIGN_RE = re.compile(
    r"\w+\s*//=\s*2\b|\w+\s*>>=\s*1\b|\b(\w+)\s*=\s*\1\s*(//\s*2|>>\s*1)\b"
)
DOUBLING_ASSIGN_RE = re.compile(r"\w+\s*\*=\s*2\b|\w+\s*<<=\s*1\b")
_LOW = r"(?:left|lo|low|start)\w*"
_HIGH = r"(?:right|hi|high|end)\w*"
BOUNDS_WHILE_RE = re.compile(rf"^\s*while\s+{_LOW}\s*<=?\s*{_HIGH}\b")
MIDPOINT_RE = re.compile(
    rf"\(\s*{_LOW}\s*\+\s*{_HIGH}\s*\)\s*//\s*2"
    rf"|{_LOW}\s*\+\s*\(\s*{_HIGH}\s*-\s*{_LOW}\s*\)\s*//\s*2"
)
POINTER_UPDATE_RE = re.compile(rf"^\s*(?:{_LOW}|{_HIGH})\s*=\s*mid\w*\b")
BISECT_RE = re.compile(r"\b(bisect(_left|_right)?|insort(_left|_right)?)\s*\(")
TREE_TERMS_RE = re.compile(r"root|node|bst|tree", re.IGNORECASE)
TREE_STEP_RE = re.compile(r"^\s*(\w+)\s*=\s*\1\.(left|right)\b")
VALUE_COMPARE_RE = re.compile(r"^\s*(if|elif)\b.*[<>]")
WORKLIST_RE = re.compile(r"\.(pop|popleft|append|appendleft)\s*\(")

# Factorial
ITERTOOLS_PERMUTATIONS_RE = re.compile(r"\bitertools\.permutations\s*\(")
BARE_PERMUTATIONS_RE = re.compile(r"(?<![\w.])permutations\s*\(")
PERMUTATIONS_IMPORT_RE = re.compile(r"from\s+itertools\s+import\s+[^\n]*\bpermutations\b")
INDEX_LOOP_RE = re.compile(r"^range\(\s*len\(|^enumerate\(")
OFFSET_INDEX_LOOP_RE = re.compile(r"^range\(\s*\w+\s*,\s*len\(")
SWAP_RE = re.compile(r"(\w+\[[^\]]+\])\s*,\s*(\w+\[[^\]]+\])\s*=\s*\2\s*,\s*\1")
COMBINE_RE = re.compile(r"\+|\.(append|extend|pop|insert)\s*\(|\[\s*:\s*\w+\s*\]|\[\s*\w+\s*\+\s*1\s*:\s*\]")

# K-ary exponential
K_RANGE_RE = re.compile(r"^range\(\s*([A-Za-z_]\w*)\s*\)$")

# Exponential
POWER_OF_TWO_RE = re.compile(
    r"\b2\s*\*\*\s*[A-Za-z_(]|\bpow\(\s*2\s*,|\b1\s*<<\s*[A-Za-z_(]"
)
EXPONENTIAL_NAME_RE = re.compile(r"fibonacci|fib\b|subset|powerset|hanoi", re.IGNORECASE)

# Linear
LINEAR_BUILTIN_RE = re.compile(
    r"(?<![\w.])(sum|max|min|reversed|any|all|list|tuple|set)\s*\((?!\s*\))"
    r"|\.(count|index|remove|join)\s*\("
)

# Constant
SIMPLE_KEYWORD_RE = re.compile(
    r"^(return\b|if\b|elif\b|else\s*:|pass$|raise\b|break$|continue$)"
)
ASSIGNMENT_RE = re.compile(
    r"^[A-Za-z_][\w.\[\]'\"\s,]*?\s*(?:[+\-*/%&|^@]|//|\*\*|<<|>>)?=(?!=)"
)

COMPREHENSION_CLAUSE_RE = re.compile(
    r"\bfor\s+[^=]+?\s+in\s+([\w.]+(?:\((?:[^()]|\([^()]*\))*\))?|\[[^\]]*\]|\([^)]*\))"
)
LITERAL_COLLECTION_RE = re.compile(r"^(\[.*\]|\(.*\)|\{.*\}|'[^']*'|\"[^\"]*\")$")
SMALL_RANGE_RE = re.compile(r"^range\(\s*(\d+)\s*(?:,\s*(\d+)\s*)?\)$")
CONSTANT_NAME_RE = re.compile(r"^[A-Z][A-Z0-9_]+$")


class BodyContext:
    """Lazily computed facts about one function body shared by the detectors."""

    def __init__(
        self,
        lines: List[str],
        function_name: str,
        file_text: str = "",
        config: Optional[AnalyzerConfig] = None,
    ):
        self.lines = lines
        self.name = function_name
        self.file_text = file_text
        self.config = config or AnalyzerConfig()

    def self_calls(self, line: str) -> int:
        return count_self_calls(line, self.name)

    def is_constant_iterable(self, iterable: str) -> bool:
        """True when ``iterable`` names a collection of small, fixed size."""
        iterable = iterable.strip()
        if LITERAL_COLLECTION_RE.match(iterable):
            return True

        match = SMALL_RANGE_RE.match(iterable)
        if match:
            low, high = match.group(1), match.group(2)
            size = int(high) - int(low) if high else int(low)
            return size <= self.config.small_range_limit

        if CONSTANT_NAME_RE.match(iterable):
            return True

        name = iterable.lower()
        return any(
            name == known or name.endswith("_" + known)
            for known in self.config.constant_collection_names
        )

    def counts_as_loop(self, line: str) -> bool:
        """Guard for nesting: loops over fixed-size collections do not count."""
        return not self.is_constant_iterable(loop_iterable(line))

    def comprehension_levels(self, line: str) -> int:
        if not is_comprehension(line):
            return 0
        return sum(
            1
            for iterable in COMPREHENSION_CLAUSE_RE.findall(line)
            if not self.is_constant_iterable(iterable)
        )

    @cached_property
    def recursion(self) -> RecursionInfo:
        return analyze_recursion(self.lines, self.name)

    @cached_property
    def raw_depth(self) -> int:
        return count_nested_loops(self.lines)

    @cached_property
    def loop_lines(self) -> List[int]:
        return [index for index, line in enumerate(self.lines) if is_loop(line)]

    @cached_property
    def loop_depths(self) -> List[int]:
        """Guarded loop depth at each line, loop headers included."""
        tracker = LoopTracker(self.counts_as_loop)
        depths = []
        for line in self.lines:
            tracker.feed(line)
            depths.append(tracker.depth)
        return depths

    @cached_property
    def guarded_depth(self) -> int:
        """Deepest guarded nesting, counting comprehensions as inner loops."""
        deepest = 0
        for line, depth in zip(self.lines, self.loop_depths):
            extra = 0 if is_loop(line) else self.comprehension_levels(line)
            deepest = max(deepest, depth + extra)
        return deepest

    @cached_property
    def has_comprehension(self) -> bool:
        return any(is_comprehension(line) for line in self.lines)


# ---- Detector predicates ----


def detect_sorting(ctx: BodyContext) -> bool:
    lines = ctx.lines
    if any(SORT_CALL_RE.search(line) for line in lines):
        return True

    # Binary search repeated once per element
    if binary_search_in_loop(ctx):
        return True

    # Heap sort: heapify, then pop everything
    if any(HEAPIFY_RE.search(line) for line in lines):
        for index in ctx.loop_lines:
            if any(HEAPPOP_RE.search(line) for line in block_after(lines, index)):
                return True
        if any(HEAPPOP_RE.search(line) and ("range" in line or "len(" in line) for line in lines):
            return True

    for line in lines:
        if DIVIDE_CALL_RE.search(line) or NAMED_SORT_RE.search(line):
            return True
        if is_comprehension(line) and "pivot" in line:
            return True

    # Recursion over halves of the input
    if ctx.recursion.total_calls >= 2 and any(HALVING_RE.search(line) for line in lines):
        return any(
            ctx.self_calls(line) and HALF_SLICE_RE.search(line) for line in lines
        )
    return False


def binary_search_loop(ctx: BodyContext) -> bool:
    """A bounds ``while`` that computes a midpoint and moves a bound to it."""
    lines = ctx.lines
    return (
        any(BOUNDS_WHILE_RE.match(line) for line in lines)
        and any(MIDPOINT_RE.search(line) for line in lines)
        and any(POINTER_UPDATE_RE.match(line) for line in lines)
    )


def binary_search_recursion(ctx: BodyContext) -> bool:
    """Recursing on one side of a computed midpoint."""
    if not ctx.recursion.is_recursive:
        return False
    lines = ctx.lines
    return any(MIDPOINT_RE.search(line) for line in lines) and any(
        ctx.self_calls(line) and "mid" in line for line in lines
    )


def tree_descent(ctx: BodyContext) -> bool:
    """Walking one root-to-leaf path of a search tree in a ``while`` loop."""
    lines = ctx.lines
    if not any(TREE_TERMS_RE.search(line) for line in lines):
        return False
    # An explicit stack or queue means the whole tree is visited
    if any(WORKLIST_RE.search(line) for line in lines):
        return False

    for index in ctx.loop_lines:
        if not lines[index].strip().startswith("while "):
            continue
        block = block_after(lines, index)
        if any(TREE_STEP_RE.match(line) for line in block) and any(
            VALUE_COMPARE_RE.match(line) for line in block
        ):
            return True
    return False


def binary_search_in_loop(ctx: BodyContext) -> bool:
    """A bisect call or a binary-search loop nested inside another loop."""
    tracker = LoopTracker()
    for line in ctx.lines:
        opened = tracker.feed(line)
        enclosing = tracker.depth - (1 if opened else 0)
        if BISECT_RE.search(line) and enclosing >= 1:
            return True
        if opened and enclosing >= 1 and BOUNDS_WHILE_RE.match(line):
            if binary_search_loop(ctx):
                return True
    return False


def detect_logarithmic(ctx: BodyContext) -> bool:
    lines = ctx.lines
    for line in lines:
        if (
            LOG_MATH_RE.search(line)
            or HEAP_OP_RE.search(line)
            or HALVING_ASSIGN_RE.search(line)
            or BISECT_RE.search(line)
        ):
            return True

    if binary_search_loop(ctx) or binary_search_recursion(ctx) or tree_descent(ctx):
        return True

    has_while = any(line.strip().startswith("while ") for line in lines)
    return has_while and any(DOUBLING_ASSIGN_RE.search(line) for line in lines)


def detect_factorial(ctx: BodyContext) -> bool:
    lines = ctx.lines
    if any(ITERTOOLS_PERMUTATIONS_RE.search(line) for line in lines):
        return True
    if PERMUTATIONS_IMPORT_RE.search(ctx.file_text) and any(
        BARE_PERMUTATIONS_RE.search(line) for line in lines
    ):
        return True

    if not ctx.recursion.is_recursive:
        return False

    # Recursing once per remaining element while building arrangements
    for index in ctx.loop_lines:
        iterable = loop_iterable(lines[index])
        block = block_after(lines, index)
        if not any(ctx.self_calls(line) for line in block):
            continue
        if INDEX_LOOP_RE.match(iterable) and any(
            COMBINE_RE.search(line) or SWAP_RE.search(line) for line in block
        ):
            return True
        if OFFSET_INDEX_LOOP_RE.match(iterable) and any(
            SWAP_RE.search(line) for line in block
        ):
            return True
    return False


def detect_k_exponential(ctx: BodyContext) -> bool:
    if not ctx.recursion.is_recursive:
        return False

    lines = ctx.lines
    depths = ctx.loop_depths
    for index in ctx.loop_lines:
        line = lines[index]
        iterable = loop_iterable(line)
        block = block_after(lines, index)

        # Iterating the recursive result alongside another unbounded loop
        if ctx.self_calls(iterable):
            enclosed = depths[index] >= 2
            has_inner = any(
                is_loop(inner) and ctx.counts_as_loop(inner) for inner in block
            )
            if enclosed or has_inner:
                return True

        # k-way branching: one recursive call per choice in range(k)
        match = K_RANGE_RE.match(iterable)
        if match and not ctx.is_constant_iterable(iterable):
            if any(ctx.self_calls(inner) for inner in block):
                return True
    return False


def detect_exponential(ctx: BodyContext) -> bool:
    lines = ctx.lines
    if any(POWER_OF_TWO_RE.search(line) for line in lines):
        return True

    if not ctx.recursion.is_recursive:
        return False
    if ctx.recursion.calls_per_line >= 2:
        return True

    # Separate recursive call sites outside any loop, e.g. include/exclude
    tracker = LoopTracker()
    call_sites = 0
    for line in lines:
        tracker.feed(line)
        if tracker.depth == 0 and ctx.self_calls(line):
            call_sites += 1
    return call_sites >= 2


def detect_cubic(ctx: BodyContext) -> bool:
    return ctx.guarded_depth >= 3


def detect_quadratic(ctx: BodyContext) -> bool:
    return ctx.guarded_depth == 2


def detect_linear(ctx: BodyContext) -> bool:
    if ctx.raw_depth >= 1 or ctx.has_comprehension:
        return True
    return any(LINEAR_BUILTIN_RE.search(line) for line in ctx.lines)


def is_simple_statement(line: str) -> bool:
    stripped = line.strip()
    return bool(SIMPLE_KEYWORD_RE.match(stripped) or ASSIGNMENT_RE.match(stripped))


def detect_constant(ctx: BodyContext) -> bool:
    if ctx.recursion.is_recursive or ctx.raw_depth > 0 or ctx.has_comprehension:
        return False
    if len(ctx.lines) > ctx.config.constant_max_lines:
        return False
    return all(is_simple_statement(line) for line in ctx.lines)


def linear_confidence(ctx: BodyContext) -> int:
    # A single loop with nothing nested is the clearest linear signal
    if ctx.raw_depth == 1 and len(ctx.loop_lines) == 1:
        return 90
    return 85


@dataclass(frozen=True)
class TimeDetector:
    name: str
    predicate: Callable[[BodyContext], bool]
    complexity: ComplexityClass
    confidence: Union[int, Callable[[BodyContext], int]]

    def score(self, ctx: BodyContext) -> int:
        if callable(self.confidence):
            return self.confidence(ctx)
        return self.confidence


# Evaluated top to bottom; the first detector that fires wins
TIME_DETECTORS: Tuple[TimeDetector, ...] = (
    TimeDetector("sorting", detect_sorting, ComplexityClass.LINEARITHMIC, 85),
    TimeDetector("logarithmic", detect_logarithmic, ComplexityClass.LOGARITHMIC, 85),
    TimeDetector("factorial", detect_factorial, ComplexityClass.FACTORIAL, 90),
    TimeDetector("k_exponential", detect_k_exponential, ComplexityClass.EXPONENTIAL_K, 80),
    TimeDetector("exponential", detect_exponential, ComplexityClass.EXPONENTIAL, 85),
    TimeDetector("cubic", detect_cubic, ComplexityClass.CUBIC, 85),
    TimeDetector("quadratic", detect_quadratic, ComplexityClass.QUADRATIC, 85),
    TimeDetector("linear", detect_linear, ComplexityClass.LINEAR, linear_confidence),
    TimeDetector("constant", detect_constant, ComplexityClass.CONSTANT, 90),
)


def estimate_confidence(ctx: BodyContext, complexity: ComplexityClass) -> int:
    """Confidence for the fallback path, from body size and pattern strength."""
    confidence = 50
    lines = ctx.lines

    if complexity == ComplexityClass.CONSTANT:
        if all(is_simple_statement(line) for line in lines):
            confidence = 95
    elif complexity == ComplexityClass.LINEAR:
        recursion = ctx.recursion
        if recursion.shape == RECURSION_LINEAR and recursion.has_base_case:
            confidence = 80
        else:
            confidence = 60
    elif complexity == ComplexityClass.QUADRATIC:
        confidence = 70
    elif complexity == ComplexityClass.CUBIC:
        confidence = 75
    elif complexity == ComplexityClass.EXPONENTIAL:
        named = any(EXPONENTIAL_NAME_RE.search(line) for line in lines)
        confidence = 90 if named else 75
    elif complexity in (ComplexityClass.EXPONENTIAL_K, ComplexityClass.FACTORIAL):
        confidence = 75

    if len(lines) < 3:
        confidence -= 20

    return max(10, min(100, confidence))


def classify_time(
    lines: List[str],
    function_name: str,
    file_text: str = "",
    config: Optional[AnalyzerConfig] = None,
) -> Tuple[ComplexityResult, str]:
    """Classify a function body; returns the result and the deciding rule."""
    if not lines:
        return ComplexityResult.of(ComplexityClass.CONSTANT, 95), "empty"

    ctx = BodyContext(lines, function_name, file_text, config)
    for detector in TIME_DETECTORS:
        if detector.predicate(ctx):
            description = detector.complexity.description
            if detector.complexity == ComplexityClass.CUBIC and ctx.guarded_depth > 3:
                # Deeper nesting is reported as cubic, the degree kept for readers
                description = f"{description} (degree-{ctx.guarded_depth} polynomial)"
            return (
                ComplexityResult(detector.complexity, description, detector.score(ctx)),
                detector.name,
            )

    complexity = fallback_class(lines, function_name)
    return (
        ComplexityResult.of(complexity, estimate_confidence(ctx, complexity)),
        "fallback",
    )
