"""
Decorators for bigo-cli commands.
"""

from functools import wraps
from typing import Callable

import typer
from rich.console import Console

from bigo_cli.core.exceptions import BigOCLIError
from bigo_cli.core.logging import log_error

console = Console(stderr=True)


def with_error_handling(func: Callable) -> Callable:
    """Decorator to handle common error patterns in CLI commands."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except BigOCLIError as e:
            log_error(f"{func.__name__} failed: {e}")
            console.print(f"[bold red]Error:[/bold red] {e}")
            raise typer.Exit(code=1)
        except Exception as e:
            console.print(f"[bold red]Error in {func.__name__}:[/bold red] {e}")
            if kwargs.get("debug"):
                import traceback

                console.print(traceback.format_exc())
            raise typer.Exit(code=1)

    return wrapper
