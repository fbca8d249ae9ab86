"""
Main Typer app and command definitions for bigo-cli.
"""

from pathlib import Path
from typing import Optional

import typer

from bigo_cli.core.config import BigOConfig
from bigo_cli.output import console

from .decorators import with_error_handling
from .handlers import CommandHandlers
from .options import resolve_options

# Create main typer app
app = typer.Typer(
    help="bigo - heuristic Big-O complexity estimates for Python source",
    add_completion=False,
    rich_markup_mode="markdown",
    no_args_is_help=True,
)


# ---- Commands ----


@app.command()
@with_error_handling
def analyze(
    path: str = typer.Argument(..., help="Python source file to analyze"),
    json_output: bool = typer.Option(False, "--json", help="Print results as JSON"),
    config: Optional[str] = typer.Option(None, "--config", help="Config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show per-function details"),
    debug: bool = typer.Option(False, "--debug", help="Debug mode"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Write logs to a file"),
):
    """Estimate time and space complexity of every function in a file."""
    options = resolve_options(
        config_override=config,
        json_override=json_output,
        debug_override=debug,
        verbose_override=verbose,
        log_file=log_file,
    )
    CommandHandlers.handle_analyze(options, path)


@app.command("init-config")
@with_error_handling
def init_config(
    path: Optional[str] = typer.Option(
        None, "--path", help="Where to write the config (default: ~/.bigo_cli_config.json)"
    ),
):
    """Write a config file holding the default settings."""
    target = Path(path) if path else None
    BigOConfig().save(target)
    console.print(f"[green]✓[/green] Wrote default config to {target or 'home directory'}")


def main():
    app()


if __name__ == "__main__":
    main()
