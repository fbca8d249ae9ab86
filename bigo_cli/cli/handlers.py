"""
Command handlers for bigo-cli - business logic separated from CLI interface.
"""

from pathlib import Path

from bigo_cli.core.exceptions import SourceReadError
from bigo_cli.core.logging import log_context, log_info, logged_operation
from bigo_cli.engine.analyzer import ComplexityAnalyzer
from bigo_cli.engine.models import AnalysisResult
from bigo_cli.output import print_analysis, print_analysis_json

from .options import ResolvedOptions


class CommandHandlers:
    """Handles the business logic for CLI commands."""

    @staticmethod
    def read_source(path: Path) -> str:
        """Read a Python source file as UTF-8 text."""
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(f"Cannot read {path}: {e}") from e

    @staticmethod
    @logged_operation("analyze_command")
    def handle_analyze(options: ResolvedOptions, source_path: str) -> AnalysisResult:
        """Handle the analyze command."""
        path = Path(source_path)
        with log_context(source=path.name):
            source = CommandHandlers.read_source(path)
            log_info(f"Analyzing {path} ({len(source.splitlines())} lines)")

            analyzer = ComplexityAnalyzer(options.config.analyzer, source_name=path.name)
            result = analyzer.analyze(source)
            log_info(f"Analyzed {len(result.methods)} functions")

            if options.output_format == "json":
                print_analysis_json(result)
            else:
                print_analysis(result, str(path), verbose=options.verbose)
            return result
