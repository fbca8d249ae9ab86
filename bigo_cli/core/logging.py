"""
Logging for bigo-cli.

Console records go through rich on stderr so they never mix with the analysis
printed on stdout. An optional log file receives every record, prefixed with
the source file and function being analysed.
"""

import logging
import time
from contextlib import contextmanager
from functools import wraps
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, Optional

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)

LOGGER_NAME = "bigo_cli"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(message)s"
CONTEXT_FIELDS = ("source", "function")

_logger: Optional[logging.Logger] = None
_context_filter: Optional["ContextFilter"] = None


class ContextFilter(logging.Filter):
    """Stamps the active analysis context onto every record."""

    def __init__(self):
        super().__init__()
        self.context: Dict[str, Any] = {}

    def set_context(self, **kwargs):
        self.context.update(kwargs)

    def filter(self, record):
        for key, value in self.context.items():
            setattr(record, key, value)
        return True


class BigOLogFormatter(logging.Formatter):
    """File formatter: ``[source=a.py, function=f] <record>``."""

    def format(self, record):
        message = super().format(record)
        fields = [
            f"{name}={getattr(record, name)}"
            for name in CONTEXT_FIELDS
            if getattr(record, name, None)
        ]
        if not fields:
            return message
        return f"[{', '.join(fields)}] {message}"


def _console_level(debug: bool, verbose: bool) -> int:
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logger(
    debug: bool = False, log_file: Optional[Path] = None, verbose: bool = False
) -> logging.Logger:
    """
    Attach the rich console handler and, optionally, a file handler.

    Args:
        debug: Show debug records, source paths and locals in tracebacks
        log_file: Also write every record to this file
        verbose: Show info records

    Returns:
        The ``bigo_cli`` logger. Later calls return it unchanged until
        ``reset_logger`` runs.
    """
    global _logger, _context_filter

    if _logger is not None:
        return _logger

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    logger.handlers.clear()

    _context_filter = ContextFilter()
    logger.addFilter(_context_filter)

    console_handler = RichHandler(
        console=console,
        show_time=False,
        show_path=debug,
        rich_tracebacks=True,
        tracebacks_show_locals=debug,
        markup=False,
    )
    console_handler.setLevel(_console_level(debug, verbose))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(BigOLogFormatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    _logger = logger
    return logger


def reset_logger() -> None:
    """Close handlers and forget the logger so the next setup starts fresh."""
    global _logger, _context_filter

    if _logger is not None:
        for handler in list(_logger.handlers):
            handler.close()
            _logger.removeHandler(handler)
        if _context_filter is not None:
            _logger.removeFilter(_context_filter)
    _logger = None
    _context_filter = None


def get_logger() -> logging.Logger:
    """The configured logger, set up with defaults on first use."""
    if _logger is None:
        return setup_logger()
    return _logger


@contextmanager
def log_context(**kwargs) -> Iterator[None]:
    """
    Tag records logged inside the block with ``source``/``function``.

    Example:
        with log_context(source="sort.py"):
            log_debug("classified", function="merge")
    """
    get_logger()
    if _context_filter is None:
        yield
        return

    saved = dict(_context_filter.context)
    _context_filter.set_context(**kwargs)
    try:
        yield
    finally:
        _context_filter.context = saved


def _log(level: int, message: str, exc_info=None, **kwargs) -> None:
    with log_context(**kwargs):
        get_logger().log(level, message, exc_info=exc_info)


def log_debug(message: str, **kwargs):
    _log(logging.DEBUG, message, **kwargs)


def log_info(message: str, **kwargs):
    _log(logging.INFO, message, **kwargs)


def log_warning(message: str, **kwargs):
    _log(logging.WARNING, message, **kwargs)


def log_error(message: str, exc_info=None, **kwargs):
    _log(logging.ERROR, message, exc_info=exc_info, **kwargs)


def logged_operation(operation_name: str) -> Callable:
    """
    Log start, finish and elapsed time of the wrapped call at debug level.

    When the first argument has a ``source_name`` attribute, it becomes the
    ``source`` context of every record logged during the call. Failures are
    logged at error level and re-raised.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            context = {}
            source = getattr(args[0], "source_name", None) if args else None
            if source:
                context["source"] = source

            with log_context(**context):
                log_debug(f"{operation_name}: started")
                started = time.perf_counter()
                try:
                    result = func(*args, **kwargs)
                except Exception as error:
                    elapsed = time.perf_counter() - started
                    log_error(f"{operation_name}: failed after {elapsed:.3f}s: {error}")
                    raise
                elapsed = time.perf_counter() - started
                log_debug(f"{operation_name}: finished in {elapsed:.3f}s")
                return result

        return wrapper

    return decorator


def configure_logging(
    debug: bool = False, verbose: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """Reconfigure logging from CLI flags, replacing any earlier setup."""
    reset_logger()
    return setup_logger(
        debug=debug,
        log_file=Path(log_file) if log_file else None,
        verbose=verbose,
    )
