"""
Big-O complexity classes and their ordering.
"""

from enum import Enum
from functools import total_ordering
from typing import Iterable


@total_ordering
class ComplexityClass(Enum):
    """Closed set of asymptotic growth classes, ordered best to worst."""

    CONSTANT = "O(1)"
    LOGARITHMIC = "O(log n)"
    LINEAR = "O(n)"
    LINEARITHMIC = "O(n log n)"
    QUADRATIC = "O(n²)"
    CUBIC = "O(n³)"
    EXPONENTIAL = "O(2^n)"
    EXPONENTIAL_K = "O(k^n)"
    FACTORIAL = "O(n!)"

    @property
    def notation(self) -> str:
        return self.value

    @property
    def rank(self) -> int:
        """Position in the ordering, 1 for O(1) up to 9 for O(n!)."""
        return _RANKS[self]

    @property
    def description(self) -> str:
        return TIME_DESCRIPTIONS[self]

    @property
    def space_description(self) -> str:
        return SPACE_DESCRIPTIONS[self]

    @property
    def rating(self) -> str:
        return RATINGS[self]

    @classmethod
    def from_notation(cls, notation: str) -> "ComplexityClass":
        """Look up a class by its notation string, e.g. ``"O(n log n)"``."""
        try:
            return cls(notation.strip())
        except ValueError:
            raise ValueError(f"Unknown complexity notation: {notation!r}") from None

    def __lt__(self, other):
        if not isinstance(other, ComplexityClass):
            return NotImplemented
        return self.rank < other.rank

    def __str__(self) -> str:
        return self.value


COMPLEXITY_ORDER = (
    ComplexityClass.CONSTANT,
    ComplexityClass.LOGARITHMIC,
    ComplexityClass.LINEAR,
    ComplexityClass.LINEARITHMIC,
    ComplexityClass.QUADRATIC,
    ComplexityClass.CUBIC,
    ComplexityClass.EXPONENTIAL,
    ComplexityClass.EXPONENTIAL_K,
    ComplexityClass.FACTORIAL,
)

_RANKS = {cls: index for index, cls in enumerate(COMPLEXITY_ORDER, start=1)}

TIME_DESCRIPTIONS = {
    ComplexityClass.CONSTANT: "Constant time - excellent performance",
    ComplexityClass.LOGARITHMIC: "Logarithmic time - very good performance",
    ComplexityClass.LINEAR: "Linear time - good performance",
    ComplexityClass.LINEARITHMIC: "Linearithmic time - acceptable performance",
    ComplexityClass.QUADRATIC: "Quadratic time - poor performance for large inputs",
    ComplexityClass.CUBIC: "Cubic time - very poor performance",
    ComplexityClass.EXPONENTIAL: "Exponential time - impractical for large inputs",
    ComplexityClass.EXPONENTIAL_K: "K-ary exponential time - impractical beyond tiny inputs",
    ComplexityClass.FACTORIAL: "Factorial time - only suitable for very small inputs",
}

SPACE_DESCRIPTIONS = {
    ComplexityClass.CONSTANT: "Constant space - uses fixed amount of memory",
    ComplexityClass.LOGARITHMIC: "Logarithmic space - typically from recursion depth",
    ComplexityClass.LINEAR: "Linear space - memory usage grows with input size",
    ComplexityClass.LINEARITHMIC: "Linearithmic space - grows slightly faster than input",
    ComplexityClass.QUADRATIC: "Quadratic space - often from 2D data structures",
    ComplexityClass.CUBIC: "Cubic space - typically from 3D data structures",
    ComplexityClass.EXPONENTIAL: "Exponential space - often from generating all subsets",
    ComplexityClass.EXPONENTIAL_K: "K-ary exponential space - from k-way branching results",
    ComplexityClass.FACTORIAL: "Factorial space - often from generating all permutations",
}

RATINGS = {
    ComplexityClass.CONSTANT: "EXCELLENT",
    ComplexityClass.LOGARITHMIC: "GOOD",
    ComplexityClass.LINEAR: "GOOD",
    ComplexityClass.LINEARITHMIC: "FAIR",
    ComplexityClass.QUADRATIC: "POOR",
    ComplexityClass.CUBIC: "POOR",
    ComplexityClass.EXPONENTIAL: "BAD",
    ComplexityClass.EXPONENTIAL_K: "BAD",
    ComplexityClass.FACTORIAL: "TERRIBLE",
}


def worst_of(classes: Iterable[ComplexityClass]) -> ComplexityClass:
    """Return the worst class in ``classes``; O(1) when empty."""
    return max(classes, default=ComplexityClass.CONSTANT)


def compare(first: ComplexityClass, second: ComplexityClass) -> int:
    """Three-way comparison: negative, zero or positive like ``cmp``."""
    return first.rank - second.rank
