"""
Data model for complexity analysis results.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from bigo_cli.engine.notation import ComplexityClass

MIN_CONFIDENCE = 10
MAX_CONFIDENCE = 100

# Function name -> intra-file callee names
CallGraph = Dict[str, List[str]]


def clamp_confidence(value: int) -> int:
    """Clamp a confidence score into the [10, 100] range."""
    return max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, int(value)))


@dataclass
class ComplexityResult:
    """A complexity class with a human description and a confidence score."""

    complexity: ComplexityClass
    description: str
    confidence: int

    def __post_init__(self):
        self.confidence = clamp_confidence(self.confidence)

    @property
    def notation(self) -> str:
        return self.complexity.notation

    @classmethod
    def of(cls, complexity: ComplexityClass, confidence: int) -> "ComplexityResult":
        """Build a time result carrying the canonical description."""
        return cls(complexity, complexity.description, confidence)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "notation": self.notation,
            "description": self.description,
            "confidence": self.confidence,
        }


@dataclass
class SpaceComplexityResult(ComplexityResult):
    """Space complexity plus the data structures responsible for it."""

    data_structures: List[str] = field(default_factory=list)

    def __post_init__(self):
        super().__post_init__()
        # dict.fromkeys keeps first-seen order while dropping duplicates
        self.data_structures = list(dict.fromkeys(self.data_structures))

    @classmethod
    def of(
        cls,
        complexity: ComplexityClass,
        confidence: int,
        data_structures: Optional[List[str]] = None,
    ) -> "SpaceComplexityResult":
        return cls(
            complexity,
            complexity.space_description,
            confidence,
            list(data_structures or []),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["data_structures"] = list(self.data_structures)
        return data


@dataclass
class FunctionUnit:
    """One function definition found by the segmenter.

    Line numbers are 0-based indices into ``source.splitlines()``.
    ``body_lines`` holds the unit's own non-blank, non-comment lines; lines of
    lexically nested functions belong to those functions instead.
    """

    name: str
    line_start: int
    line_end: int
    indent: int
    parent: Optional[int] = None
    body_lines: List[str] = field(default_factory=list)


@dataclass
class MethodAnalysis:
    """Analysis of one function: time, space and a short explanation."""

    name: str
    line_start: int
    line_end: int
    complexity: ComplexityResult
    space_complexity: SpaceComplexityResult
    explanation: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "line_start": self.line_start,
            "line_end": self.line_end,
            "complexity": self.complexity.to_dict(),
            "space_complexity": self.space_complexity.to_dict(),
            "explanation": self.explanation,
        }


@dataclass
class AnalysisResult:
    """Everything one ``analyze`` call produces."""

    methods: List[MethodAnalysis] = field(default_factory=list)
    hierarchy: CallGraph = field(default_factory=dict)

    def get_method(self, name: str) -> Optional[MethodAnalysis]:
        """Return the first analysed function called ``name``."""
        for method in self.methods:
            if method.name == name:
                return method
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "methods": [method.to_dict() for method in self.methods],
            "hierarchy": {name: list(calls) for name, calls in self.hierarchy.items()},
        }


def describe(time: ComplexityResult, space: SpaceComplexityResult) -> str:
    """Explanation line shared by analysis and propagation."""
    return f"Time: {time.notation}, Space: {space.notation}"
