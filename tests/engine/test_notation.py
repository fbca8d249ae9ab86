import itertools

import pytest

from bigo_cli.engine.notation import (
    COMPLEXITY_ORDER,
    ComplexityClass,
    compare,
    worst_of,
)


def test_sorting_all_classes_gives_canonical_order():
    shuffled = list(reversed(list(ComplexityClass)))
    assert sorted(shuffled) == list(COMPLEXITY_ORDER)
    assert [c.notation for c in sorted(shuffled)] == [
        "O(1)",
        "O(log n)",
        "O(n)",
        "O(n log n)",
        "O(n²)",
        "O(n³)",
        "O(2^n)",
        "O(k^n)",
        "O(n!)",
    ]


def test_ordering_is_a_strict_total_order():
    for a, b in itertools.product(ComplexityClass, repeat=2):
        outcomes = [a < b, a == b, a > b]
        assert outcomes.count(True) == 1
        assert (compare(a, b) < 0) == (a < b)


def test_rank_and_rating():
    assert ComplexityClass.CONSTANT.rank == 1
    assert ComplexityClass.FACTORIAL.rank == 9
    assert ComplexityClass.CONSTANT.rating == "EXCELLENT"
    assert ComplexityClass.LINEARITHMIC.rating == "FAIR"
    assert ComplexityClass.FACTORIAL.rating == "TERRIBLE"


def test_worst_of():
    assert worst_of([]) == ComplexityClass.CONSTANT
    assert (
        worst_of([ComplexityClass.LINEAR, ComplexityClass.CUBIC, ComplexityClass.LOGARITHMIC])
        == ComplexityClass.CUBIC
    )


def test_from_notation():
    assert ComplexityClass.from_notation("O(n log n)") == ComplexityClass.LINEARITHMIC
    assert ComplexityClass.from_notation(" O(1) ") == ComplexityClass.CONSTANT
    with pytest.raises(ValueError):
        ComplexityClass.from_notation("O(n^4)")


def test_descriptions_cover_every_class():
    for complexity in ComplexityClass:
        assert complexity.description
        assert complexity.space_description
        assert str(complexity) == complexity.notation
