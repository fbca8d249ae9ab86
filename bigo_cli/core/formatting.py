from bigo_cli.engine.models import ComplexityResult
from bigo_cli.engine.notation import ComplexityClass

RATING_STYLES = {
    "EXCELLENT": "bold green",
    "GOOD": "green",
    "FAIR": "yellow",
    "POOR": "dark_orange",
    "BAD": "red",
    "TERRIBLE": "bold red",
}


def format_line_range(line_start: int, line_end: int) -> str:
    """
    Format a 0-based inclusive line span for humans.
    Args:
        line_start: First line, 0-based
        line_end: Last line, 0-based
    Returns:
        1-based range string (e.g., "3-10", or "3" for a single line)
    """
    if line_end <= line_start:
        return str(line_start + 1)
    return f"{line_start + 1}-{line_end + 1}"


def format_confidence(confidence: int) -> str:
    """Format a confidence score as a percentage."""
    return f"{confidence}%"


def format_complexity(result: ComplexityResult) -> str:
    """
    Format a classification with its confidence.
    Returns:
        String such as "O(n log n) (85%)"
    """
    return f"{result.notation} ({format_confidence(result.confidence)})"


def rating_style(complexity: ComplexityClass) -> str:
    """Rich style name for a class's rating."""
    return RATING_STYLES.get(complexity.rating, "white")


def format_rating(complexity: ComplexityClass) -> str:
    """Format a class's rating as rich markup."""
    style = rating_style(complexity)
    return f"[{style}]{complexity.rating}[/{style}]"
