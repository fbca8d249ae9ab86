"""
Intra-file call and nesting graph.
"""

from typing import Dict, List

from bigo_cli.core.constants import BUILTIN_FUNCTIONS
from bigo_cli.engine.lines import ANY_CALL_RE
from bigo_cli.engine.models import CallGraph, FunctionUnit

# Unit index -> callee unit indices
CallEdges = List[List[int]]


def extract_calls(lines: List[str]) -> List[str]:
    """Names called in ``lines``, built-ins removed, in first-seen order."""
    calls: List[str] = []
    for line in lines:
        for name in ANY_CALL_RE.findall(line):
            if name in BUILTIN_FUNCTIONS or name in calls:
                continue
            calls.append(name)
    return calls


def resolve_names(units: List[FunctionUnit], duplicate_names: str = "first") -> Dict[str, int]:
    """Map each function name to the unit index it resolves to.

    With ``"first"`` the earliest definition of a shared name wins, with
    ``"last"`` the latest one does.
    """
    resolved: Dict[str, int] = {}
    for index, unit in enumerate(units):
        if duplicate_names == "last" or unit.name not in resolved:
            resolved[unit.name] = index
    return resolved


def build_call_graph(units: List[FunctionUnit], duplicate_names: str = "first"):
    """Build the name-keyed graph and its index-level edge lists.

    A unit's callees are the other units it calls directly plus the units
    lexically nested inside it. Self-calls are recursion, not edges.

    Returns:
        Tuple of (CallGraph keyed by name, CallEdges indexed like ``units``)
    """
    resolved = resolve_names(units, duplicate_names)
    edges: CallEdges = [[] for _ in units]

    for index, unit in enumerate(units):
        for name in extract_calls(unit.body_lines):
            if name == unit.name or name not in resolved:
                continue
            callee = resolved[name]
            if callee != index and callee not in edges[index]:
                edges[index].append(callee)

    for index, unit in enumerate(units):
        if unit.parent is not None and index not in edges[unit.parent]:
            edges[unit.parent].append(index)

    graph: CallGraph = {}
    for name, index in resolved.items():
        graph[name] = list(dict.fromkeys(units[callee].name for callee in edges[index]))

    # Keep definition order for readers of the graph
    ordered: CallGraph = {}
    for unit in units:
        if unit.name in graph and unit.name not in ordered:
            ordered[unit.name] = graph[unit.name]
    return ordered, edges
