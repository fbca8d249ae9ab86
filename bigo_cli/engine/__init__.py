from bigo_cli.engine.analyzer import ComplexityAnalyzer, analyze
from bigo_cli.engine.models import (
    AnalysisResult,
    CallGraph,
    ComplexityResult,
    FunctionUnit,
    MethodAnalysis,
    SpaceComplexityResult,
)
from bigo_cli.engine.notation import COMPLEXITY_ORDER, ComplexityClass, worst_of

__all__ = [
    "analyze",
    "ComplexityAnalyzer",
    "AnalysisResult",
    "CallGraph",
    "ComplexityClass",
    "ComplexityResult",
    "COMPLEXITY_ORDER",
    "FunctionUnit",
    "MethodAnalysis",
    "SpaceComplexityResult",
    "worst_of",
]
