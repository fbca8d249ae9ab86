"""
Hierarchy propagation: callers inherit the worst complexity of their callees.
"""

from typing import List, Optional

from bigo_cli.core.config import AnalyzerConfig
from bigo_cli.core.constants import INCLUDES_CALLS_NOTE
from bigo_cli.core.logging import log_debug
from bigo_cli.engine.callgraph import CallEdges
from bigo_cli.engine.models import (
    ComplexityResult,
    MethodAnalysis,
    SpaceComplexityResult,
    describe,
)
from bigo_cli.engine.notation import worst_of


def decay_confidence(confidence: int, decay: int, floor: int) -> int:
    """Lower ``confidence`` by ``decay`` without dropping below ``floor``.

    A confidence that already sits below the floor is left where it is.
    """
    return min(confidence, max(confidence - decay, floor))


def _inherit_time(
    method: MethodAnalysis, callees: List[MethodAnalysis], config: AnalyzerConfig
) -> bool:
    own = method.complexity
    worst = worst_of([own.complexity] + [callee.complexity.complexity for callee in callees])
    if worst <= own.complexity:
        return False

    method.complexity = ComplexityResult.of(
        worst,
        decay_confidence(own.confidence, config.propagation_decay, config.confidence_floor),
    )
    log_debug(
        f"{method.name} time {own.notation} -> {worst.notation} from calls",
        function=method.name,
    )
    return True


def _inherit_space(
    method: MethodAnalysis, callees: List[MethodAnalysis], config: AnalyzerConfig
) -> bool:
    own = method.space_complexity
    worst = worst_of(
        [own.complexity] + [callee.space_complexity.complexity for callee in callees]
    )
    if worst <= own.complexity:
        return False

    method.space_complexity = SpaceComplexityResult.of(
        worst,
        decay_confidence(own.confidence, config.propagation_decay, config.confidence_floor),
        own.data_structures,
    )
    log_debug(
        f"{method.name} space {own.notation} -> {worst.notation} from calls",
        function=method.name,
    )
    return True


def _finalize(
    methods: List[MethodAnalysis], index: int, callees: List[int], config: AnalyzerConfig
) -> None:
    method = methods[index]
    callee_methods = [methods[callee] for callee in callees]
    if not callee_methods:
        return

    own_description = describe(method.complexity, method.space_complexity)
    time_changed = _inherit_time(method, callee_methods, config)
    space_changed = _inherit_space(method, callee_methods, config)
    if not (time_changed or space_changed):
        return

    # Custom explanations (failures, deep nesting notes) are kept as written
    if method.explanation == own_description:
        method.explanation = describe(method.complexity, method.space_complexity)
    if not method.explanation.endswith(INCLUDES_CALLS_NOTE):
        method.explanation += INCLUDES_CALLS_NOTE


def propagate(
    methods: List[MethodAnalysis],
    edges: CallEdges,
    config: Optional[AnalyzerConfig] = None,
) -> List[MethodAnalysis]:
    """Raise each function to the worst class among itself and its callees.

    Callees are finalised before their callers (depth-first post-order). A
    callee still being visited, i.e. part of a cycle, contributes the value it
    has at that moment, which breaks mutual recursion without looping.
    ``methods`` is updated in place and returned.
    """
    config = config or AnalyzerConfig()
    count = len(methods)
    visiting = [False] * count
    visited = [False] * count

    for root in range(count):
        if visited[root]:
            continue

        visiting[root] = True
        stack = [(root, 0)]
        while stack:
            node, position = stack[-1]
            children = edges[node]
            if position < len(children):
                stack[-1] = (node, position + 1)
                child = children[position]
                if not visited[child] and not visiting[child]:
                    visiting[child] = True
                    stack.append((child, 0))
                continue

            stack.pop()
            _finalize(methods, node, children, config)
            visiting[node] = False
            visited[node] = True

    return methods
