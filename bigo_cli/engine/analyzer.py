"""
Complexity analysis engine entry point.

``analyze`` segments a source file into functions, classifies each one,
builds the intra-file call graph and propagates callee complexity into
callers. It performs no I/O and keeps no state between calls.
"""

from typing import Optional

from bigo_cli.core.config import AnalyzerConfig
from bigo_cli.core.logging import log_debug, log_warning, logged_operation
from bigo_cli.engine.callgraph import build_call_graph
from bigo_cli.engine.detectors import classify_time
from bigo_cli.engine.hierarchy import propagate
from bigo_cli.engine.models import (
    AnalysisResult,
    ComplexityResult,
    FunctionUnit,
    MethodAnalysis,
    SpaceComplexityResult,
    describe,
)
from bigo_cli.engine.notation import ComplexityClass
from bigo_cli.engine.segmenter import segment
from bigo_cli.engine.space import analyze_space

FAILED_CONFIDENCE = 10


class ComplexityAnalyzer:
    """Analyzes one Python source text per ``analyze`` call."""

    def __init__(
        self, config: Optional[AnalyzerConfig] = None, source_name: Optional[str] = None
    ):
        self.config = config or AnalyzerConfig()
        self.source_name = source_name

    def analyze_unit(self, unit: FunctionUnit, source: str) -> MethodAnalysis:
        """Classify one function in isolation (before propagation)."""
        complexity, rule = classify_time(
            unit.body_lines, unit.name, source, self.config
        )
        space = analyze_space(unit.body_lines, unit.name)
        log_debug(
            f"{unit.name}: {complexity.notation} via {rule}, space {space.notation}",
            function=unit.name,
        )
        return MethodAnalysis(
            name=unit.name,
            line_start=unit.line_start,
            line_end=unit.line_end,
            complexity=complexity,
            space_complexity=space,
            explanation=describe(complexity, space),
        )

    def _failed_unit(self, unit: FunctionUnit, error: Exception) -> MethodAnalysis:
        return MethodAnalysis(
            name=unit.name,
            line_start=unit.line_start,
            line_end=unit.line_end,
            complexity=ComplexityResult.of(ComplexityClass.CONSTANT, FAILED_CONFIDENCE),
            space_complexity=SpaceComplexityResult.of(
                ComplexityClass.CONSTANT, FAILED_CONFIDENCE
            ),
            explanation=f"Analysis failed: {error}",
        )

    @logged_operation("analyze")
    def analyze(self, source: str) -> AnalysisResult:
        units = segment(source)
        if not units:
            log_debug("No function definitions found")
            return AnalysisResult()

        methods = []
        for unit in units:
            try:
                methods.append(self.analyze_unit(unit, source))
            except Exception as e:
                # One bad function must not discard the rest of the file
                log_warning(f"Could not analyze {unit.name}: {e}", function=unit.name)
                methods.append(self._failed_unit(unit, e))

        hierarchy, edges = build_call_graph(units, self.config.duplicate_names)
        propagate(methods, edges, self.config)
        return AnalysisResult(methods=methods, hierarchy=hierarchy)


def analyze(
    source: str,
    config: Optional[AnalyzerConfig] = None,
    source_name: Optional[str] = None,
) -> AnalysisResult:
    """Analyze every function in ``source`` and return methods plus call graph."""
    return ComplexityAnalyzer(config, source_name).analyze(source)
