import json
from typing import Any, Optional, Union

from rich.box import ROUNDED
from rich.console import Console, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.style import Style
from rich.table import Table
from rich.tree import Tree

from bigo_cli.core.formatting import (
    format_complexity,
    format_confidence,
    format_line_range,
    format_rating,
)
from bigo_cli.engine.models import AnalysisResult, MethodAnalysis

# ==============================================================================
# Constants & Global Console
# ==============================================================================

console = Console()

WARNING_STYLE = Style(color="yellow", bold=True)
INFO_STYLE = Style(color="blue", bold=True)
CYAN_STYLE = Style(color="cyan")
DIM_STYLE = Style(dim=True)

# ==============================================================================
# Private Helper Functions
# ==============================================================================


def _create_panel(
    content: RenderableType,
    title: Optional[str] = None,
    border_style: Union[str, Style] = "blue",
    padding: tuple = (1, 2),
    box: Any = ROUNDED,
    **kwargs: Any,
) -> Panel:
    """Helper function to create a Rich Panel."""
    return Panel(
        content,
        title=title,
        border_style=border_style,
        padding=padding,
        box=box,
        **kwargs,
    )


def _create_table(
    title: Optional[str] = None,
    box: Any = ROUNDED,
    show_header: bool = True,
    header_style: Union[str, Style] = "bold blue",
    **kwargs: Any,
) -> Table:
    """Helper function to create a Rich Table."""
    return Table(
        title=title,
        box=box,
        show_header=show_header,
        header_style=header_style,
        **kwargs,
    )


def _print_status_message(icon: str, msg: str, style: Union[str, Style]):
    console.print(f"[{str(style)}]{icon}[/{str(style)}]  [{str(style)}]{msg}[/{str(style)}]")


# ==============================================================================
# Simple Status Messages
# ==============================================================================


def print_warning(msg: str):
    """Print a warning message (caution but not error)."""
    _print_status_message("⚠", msg, WARNING_STYLE)


# ==============================================================================
# Complexity Analysis Output
# ==============================================================================


def print_analysis_header(source_name: str):
    """Print complexity analysis header."""
    console.print()
    console.print(
        _create_panel(f"[bold]COMPLEXITY ANALYSIS[/bold]  [dim]{escape(source_name)}[/dim]")
    )


def build_methods_table(result: AnalysisResult) -> Table:
    """One row per analysed function."""
    table = _create_table(title="[bold]Functions[/bold]")
    table.add_column("Function", style=CYAN_STYLE)
    table.add_column("Lines", justify="right", style=DIM_STYLE)
    table.add_column("Time")
    table.add_column("Space")
    table.add_column("Confidence", justify="right")
    table.add_column("Rating", justify="center")
    table.add_column("Calls")

    for method in result.methods:
        calls = result.hierarchy.get(method.name, [])
        table.add_row(
            escape(method.name),
            format_line_range(method.line_start, method.line_end),
            method.complexity.notation,
            method.space_complexity.notation,
            format_confidence(method.complexity.confidence),
            format_rating(method.complexity.complexity),
            escape(", ".join(calls)) if calls else "-",
        )
    return table


def print_method_details(method: MethodAnalysis):
    """Explanation and data structures for one function."""
    tree = Tree(f"[bold blue]{escape(method.name)}[/bold blue]")
    tree.add(f"[cyan]Time:[/cyan] {format_complexity(method.complexity)} {escape(method.complexity.description)}")
    tree.add(f"[cyan]Space:[/cyan] {format_complexity(method.space_complexity)} {escape(method.space_complexity.description)}")
    if method.space_complexity.data_structures:
        tree.add(
            f"[cyan]Data structures:[/cyan] {escape(', '.join(method.space_complexity.data_structures))}"
        )
    tree.add(f"[dim]{escape(method.explanation)}[/dim]")
    console.print(tree)


def print_analysis(result: AnalysisResult, source_name: str, verbose: bool = False):
    """Print an analysis as rich tables and trees."""
    print_analysis_header(source_name)

    if not result.methods:
        print_warning("No function definitions found")
        return

    console.print(build_methods_table(result))

    if verbose:
        for method in result.methods:
            print_method_details(method)

    console.print(Rule(style=INFO_STYLE))


def print_analysis_json(result: AnalysisResult):
    """Print an analysis as JSON on stdout."""
    console.print(
        json.dumps(result.to_dict(), indent=2),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )
