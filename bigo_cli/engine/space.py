"""
Space-complexity analysis over a function's own lines.
"""

import re
from typing import List, Set

from bigo_cli.core.constants import GROWTH_METHODS, IN_PLACE_METHODS
from bigo_cli.engine.models import SpaceComplexityResult
from bigo_cli.engine.notation import ComplexityClass
from bigo_cli.engine.structure import LoopTracker, count_self_calls

BASE_CONFIDENCE = 80
IN_PLACE_BONUS = 10

ASSIGN_TARGET_RE = re.compile(r"^\s*([A-Za-z_][\w.]*)\s*(?::\s*[^=]+)?=(?!=)\s*(.+)$")
RETURN_RE = re.compile(r"^\s*return\s+(.+)$")
EMPTY_LIST_RE = re.compile(r"^(\[\s*\]|list\(\s*\)|deque\(\s*\))$")
EMPTY_DICT_RE = re.compile(
    r"^(\{\s*\}|dict\(\s*\)|defaultdict\([^)]*\)|Counter\(\s*\)|OrderedDict\(\s*\))$"
)
EMPTY_SET_RE = re.compile(r"^set\(\s*\)$")
STRING_INIT_RE = re.compile(r"^[rbuf]?(''|\"\"|'[^']*'|\"[^\"]*\")$")
MATRIX_RE = re.compile(
    r"^\[\s*\[.*\]\s*(\*\s*\w+\s*)?\bfor\b|^\[\s*\[.*\]\s*\*\s*\w+\s*\]\s*\*\s*\w+"
)
DICT_RE = re.compile(
    r"^\{[^{}]*:[^{}]*\}|(?<![\w.])(dict|Counter|defaultdict|OrderedDict)\s*\((?!\s*\))"
)
SET_RE = re.compile(r"^\{[^{}:]+\}$|(?<![\w.])(set|frozenset)\s*\((?!\s*\))")
LIST_RE = re.compile(
    r"^\[.*\]|(?<![\w.])(list|sorted|tuple)\s*\((?!\s*\))|\w\[[^\[\]:]*:[^\[\]]*\]"
)
JOIN_RE = re.compile(r"\.join\s*\(")
GROWTH_RE = re.compile(rf"\b([A-Za-z_]\w*)\.({'|'.join(GROWTH_METHODS)})\s*\(")
IN_PLACE_RE = re.compile(rf"\.({'|'.join(IN_PLACE_METHODS)})\s*\(")
STRING_APPEND_RE = re.compile(r"^\s*([A-Za-z_]\w*)\s*\+=")


class SpaceAnalyzer:
    """Walks a body once, tracking allocations and the largest class seen."""

    def __init__(self, function_name: str):
        self.function_name = function_name
        self.data_structures: List[str] = []
        self.max_space = ComplexityClass.CONSTANT
        self.confidence = BASE_CONFIDENCE
        self.empty_collections: Set[str] = set()
        self.string_names: Set[str] = set()
        self.loops = LoopTracker()

    def _raise_to(self, complexity: ComplexityClass, label: str) -> None:
        self.data_structures.append(label)
        if complexity > self.max_space:
            self.max_space = complexity

    def _classify_assignment(self, target: str, value: str) -> None:
        value = value.strip()
        if EMPTY_LIST_RE.match(value):
            self.empty_collections.add(target)
            self.data_structures.append("list")
        elif EMPTY_DICT_RE.match(value):
            self.empty_collections.add(target)
            self.data_structures.append("dictionary")
        elif EMPTY_SET_RE.match(value):
            self.empty_collections.add(target)
            self.data_structures.append("set")
        elif STRING_INIT_RE.match(value):
            self.string_names.add(target)
        else:
            self._classify_allocation(value)

    def _classify_allocation(self, text: str) -> None:
        if MATRIX_RE.search(text):
            self._raise_to(ComplexityClass.QUADRATIC, "matrix")
        elif DICT_RE.search(text):
            self._raise_to(ComplexityClass.LINEAR, "dictionary")
        elif SET_RE.search(text):
            self._raise_to(ComplexityClass.LINEAR, "set")
        elif LIST_RE.search(text):
            self._raise_to(ComplexityClass.LINEAR, "list")
        elif JOIN_RE.search(text):
            self._raise_to(ComplexityClass.LINEAR, "string")

    def feed(self, line: str) -> None:
        self.loops.feed(line)
        inside_loop = self.loops.depth > 0

        match = ASSIGN_TARGET_RE.match(line)
        if match and not line.strip().startswith(("if ", "elif ", "while ", "return ")):
            self._classify_assignment(match.group(1), match.group(2))
        else:
            returned = RETURN_RE.match(line)
            if returned:
                self._classify_allocation(returned.group(1).strip())

        appended = STRING_APPEND_RE.match(line)
        if appended and appended.group(1) in self.string_names:
            self._raise_to(ComplexityClass.LINEAR, "string")

        for name, _method in GROWTH_RE.findall(line):
            if inside_loop and name in self.empty_collections:
                self._raise_to(ComplexityClass.LINEAR, "dynamic list growth")

        if count_self_calls(line, self.function_name):
            self._raise_to(ComplexityClass.LINEAR, "recursion stack")

        if IN_PLACE_RE.search(line):
            self.confidence = min(100, self.confidence + IN_PLACE_BONUS)

    def result(self) -> SpaceComplexityResult:
        return SpaceComplexityResult.of(
            self.max_space, self.confidence, self.data_structures
        )


def analyze_space(lines: List[str], function_name: str) -> SpaceComplexityResult:
    """Estimate the space complexity of one function body."""
    analyzer = SpaceAnalyzer(function_name)
    for line in lines:
        analyzer.feed(line)
    return analyzer.result()
