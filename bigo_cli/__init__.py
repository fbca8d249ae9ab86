from bigo_cli.core.config import AnalyzerConfig
from bigo_cli.engine import (
    AnalysisResult,
    ComplexityAnalyzer,
    ComplexityClass,
    MethodAnalysis,
    analyze,
)


__all__ = [
    "analyze",
    "AnalysisResult",
    "AnalyzerConfig",
    "ComplexityAnalyzer",
    "ComplexityClass",
    "MethodAnalysis",
]
