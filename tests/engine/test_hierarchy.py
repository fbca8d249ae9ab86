from bigo_cli.core.config import AnalyzerConfig
from bigo_cli.core.constants import INCLUDES_CALLS_NOTE
from bigo_cli.engine.hierarchy import decay_confidence, propagate
from bigo_cli.engine.models import (
    ComplexityResult,
    MethodAnalysis,
    SpaceComplexityResult,
    describe,
)
from bigo_cli.engine.notation import ComplexityClass


def method(name, time, confidence=90, space=ComplexityClass.CONSTANT):
    time_result = ComplexityResult.of(time, confidence)
    space_result = SpaceComplexityResult.of(space, 80)
    return MethodAnalysis(name, 0, 1, time_result, space_result, describe(time_result, space_result))


def test_decay_confidence():
    assert decay_confidence(90, 10, 70) == 80
    assert decay_confidence(75, 10, 70) == 70
    assert decay_confidence(60, 10, 70) == 60
    assert decay_confidence(100, 10, 70) == 90


def test_caller_inherits_worse_callee():
    methods = [method("run", ComplexityClass.CONSTANT), method("helper", ComplexityClass.QUADRATIC, 85)]
    propagate(methods, [[1], []])

    run = methods[0]
    assert run.complexity.complexity == ComplexityClass.QUADRATIC
    assert run.complexity.confidence == 80
    assert run.explanation == "Time: O(n²), Space: O(1)" + INCLUDES_CALLS_NOTE
    assert methods[1].complexity.confidence == 85


def test_better_callee_changes_nothing():
    methods = [method("run", ComplexityClass.CUBIC), method("helper", ComplexityClass.LINEAR)]
    before = methods[0].explanation
    propagate(methods, [[1], []])
    assert methods[0].complexity.complexity == ComplexityClass.CUBIC
    assert methods[0].complexity.confidence == 90
    assert methods[0].explanation == before


def test_space_propagates_independently():
    methods = [
        method("run", ComplexityClass.LINEAR),
        method("helper", ComplexityClass.CONSTANT, space=ComplexityClass.QUADRATIC),
    ]
    propagate(methods, [[1], []])
    assert methods[0].complexity.complexity == ComplexityClass.LINEAR
    assert methods[0].space_complexity.complexity == ComplexityClass.QUADRATIC
    assert methods[0].explanation.endswith(INCLUDES_CALLS_NOTE)


def test_chain_propagates_transitively():
    methods = [
        method("a", ComplexityClass.CONSTANT),
        method("b", ComplexityClass.LINEAR),
        method("c", ComplexityClass.FACTORIAL),
    ]
    propagate(methods, [[1], [2], []])
    assert [m.complexity.complexity for m in methods] == [ComplexityClass.FACTORIAL] * 3


def test_cycle_terminates():
    methods = [method("a", ComplexityClass.LINEAR), method("b", ComplexityClass.QUADRATIC)]
    propagate(methods, [[1], [0]])
    assert methods[0].complexity.complexity == ComplexityClass.QUADRATIC
    assert methods[1].complexity.complexity == ComplexityClass.QUADRATIC


def test_propagation_is_idempotent():
    methods = [method("run", ComplexityClass.CONSTANT), method("helper", ComplexityClass.CUBIC)]
    propagate(methods, [[1], []])
    first = [m.to_dict() for m in methods]
    propagate(methods, [[1], []])
    assert [m.to_dict() for m in methods] == first


def test_custom_decay():
    methods = [method("run", ComplexityClass.CONSTANT, 95), method("helper", ComplexityClass.LINEAR)]
    propagate(methods, [[1], []], AnalyzerConfig(propagation_decay=30, confidence_floor=50))
    assert methods[0].complexity.confidence == 65


def test_failed_function_keeps_its_explanation_when_inheriting():
    failed = method("broken", ComplexityClass.CONSTANT, confidence=10)
    failed.explanation = "Analysis failed: boom"
    methods = [failed, method("helper", ComplexityClass.QUADRATIC)]
    propagate(methods, [[1], []])

    assert failed.complexity.complexity == ComplexityClass.QUADRATIC
    assert failed.complexity.confidence == 10
    assert failed.explanation == "Analysis failed: boom" + INCLUDES_CALLS_NOTE
