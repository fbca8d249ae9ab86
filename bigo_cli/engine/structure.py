"""
Structural analyzers: loop nesting depth and recursion shape.
"""

import re
from dataclasses import dataclass
from typing import Callable, List, Optional

from bigo_cli.engine.lines import indent_of, is_loop
from bigo_cli.engine.notation import ComplexityClass, worst_of

RECURSION_NONE = "none"
RECURSION_LINEAR = "linear"
RECURSION_BINARY = "binary"
RECURSION_MULTIPLE = "multiple"

LINEAR_WORK_RE = re.compile(r"\b(for|while)\b|\b(sum|max|min)\s*\(")

DEPTH_CLASSES = {
    0: ComplexityClass.CONSTANT,
    1: ComplexityClass.LINEAR,
    2: ComplexityClass.QUADRATIC,
    3: ComplexityClass.CUBIC,
}

RECURSION_CLASSES = {
    RECURSION_NONE: ComplexityClass.CONSTANT,
    RECURSION_LINEAR: ComplexityClass.LINEAR,
    RECURSION_BINARY: ComplexityClass.EXPONENTIAL,
    RECURSION_MULTIPLE: ComplexityClass.EXPONENTIAL_K,
}


@dataclass
class RecursionInfo:
    is_recursive: bool
    calls_per_line: int
    total_calls: int
    has_base_case: bool
    shape: str


class LoopTracker:
    """Indentation stack of the loops enclosing the current line."""

    def __init__(self, accept: Optional[Callable[[str], bool]] = None):
        self.accept = accept
        self.stack: List[int] = []
        self.max_depth = 0

    def feed(self, line: str) -> bool:
        """Advance to ``line``; return True when it opens a counted loop."""
        indent = indent_of(line)
        while self.stack and self.stack[-1] >= indent:
            self.stack.pop()

        if is_loop(line) and (self.accept is None or self.accept(line)):
            self.stack.append(indent)
            self.max_depth = max(self.max_depth, len(self.stack))
            return True
        return False

    @property
    def depth(self) -> int:
        return len(self.stack)


def count_nested_loops(
    lines: List[str], accept: Optional[Callable[[str], bool]] = None
) -> int:
    """Maximum number of loops nested inside one another.

    ``accept`` filters which loop headers count; rejected loops neither add
    depth nor hide the loops nested inside them.
    """
    tracker = LoopTracker(accept)
    for line in lines:
        tracker.feed(line)
    return tracker.max_depth


def loop_depth_class(depth: int) -> ComplexityClass:
    """Map nesting depth to a class; anything deeper than three is cubic."""
    return DEPTH_CLASSES.get(depth, ComplexityClass.CUBIC)


def count_self_calls(line: str, function_name: str) -> int:
    """Count direct calls to ``function_name`` on ``line``, skipping ``obj.name(``."""
    pattern = re.compile(rf"(?<![\w.]){re.escape(function_name)}\s*\(")
    return len(pattern.findall(line))


def analyze_recursion(lines: List[str], function_name: str) -> RecursionInfo:
    total_calls = 0
    max_calls = 0
    has_base_case = False

    for line in lines:
        stripped = line.strip()
        if stripped.startswith("if ") and (
            "return" in stripped or "<=" in stripped or "==" in stripped
        ):
            has_base_case = True

        calls = count_self_calls(line, function_name)
        total_calls += calls
        max_calls = max(max_calls, calls)

    if max_calls == 0:
        shape = RECURSION_NONE
    elif max_calls == 1:
        shape = RECURSION_LINEAR
    elif max_calls == 2:
        shape = RECURSION_BINARY
    else:
        shape = RECURSION_MULTIPLE

    return RecursionInfo(
        is_recursive=total_calls > 0,
        calls_per_line=max_calls,
        total_calls=total_calls,
        has_base_case=has_base_case,
        shape=shape,
    )


def recursion_class(
    info: RecursionInfo, lines: List[str], function_name: str
) -> ComplexityClass:
    if info.shape == RECURSION_LINEAR:
        # Linear recursion doing O(n) work per call
        has_linear_work = any(
            LINEAR_WORK_RE.search(line) and not count_self_calls(line, function_name)
            for line in lines
        )
        if has_linear_work:
            return ComplexityClass.QUADRATIC
    return RECURSION_CLASSES[info.shape]


def fallback_class(lines: List[str], function_name: str) -> ComplexityClass:
    """Worse of the loop-depth estimate and the recursion-shape estimate."""
    depth = count_nested_loops(lines)
    info = analyze_recursion(lines, function_name)
    return worst_of(
        [loop_depth_class(depth), recursion_class(info, lines, function_name)]
    )
