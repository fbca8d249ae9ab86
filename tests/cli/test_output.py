from bigo_cli import output
from bigo_cli.engine.models import (
    AnalysisResult,
    ComplexityResult,
    MethodAnalysis,
    SpaceComplexityResult,
)
from bigo_cli.engine.notation import ComplexityClass


def make_method(name="solve", explanation="Time: O(1), Space: O(1)"):
    return MethodAnalysis(
        name,
        0,
        2,
        ComplexityResult.of(ComplexityClass.CONSTANT, 10),
        SpaceComplexityResult.of(ComplexityClass.CONSTANT, 80, ["dict[str]"]),
        explanation,
    )


def test_method_details_print_brackets_literally():
    method = make_method(explanation="Analysis failed: unexpected [/oops] tag")
    with output.console.capture() as capture:
        output.print_method_details(method)

    text = capture.get()
    assert "Analysis failed: unexpected [/oops] tag" in text
    assert "dict[str]" in text


def test_header_prints_source_name_literally():
    with output.console.capture() as capture:
        output.print_analysis_header("[red]weird.py")

    assert "[red]weird.py" in capture.get()


def test_methods_table_lists_each_function():
    result = AnalysisResult(methods=[make_method("solve"), make_method("helper")], hierarchy={"solve": ["helper"]})
    with output.console.capture() as capture:
        output.console.print(output.build_methods_table(result))

    text = capture.get()
    assert "solve" in text
    assert "helper" in text
