"""
Resolved options and configuration handling for bigo-cli.
"""

from dataclasses import dataclass
from typing import Optional

from bigo_cli.core.config import BigOConfig, load_config_file, set_config
from bigo_cli.core.logging import configure_logging, log_debug, log_info


@dataclass
class ResolvedOptions:
    """Container for resolved CLI options."""

    output_format: str
    verbose: bool
    debug: bool
    config: BigOConfig


def resolve_options(
    config_override: Optional[str] = None,
    json_override: bool = False,
    debug_override: bool = False,
    verbose_override: bool = False,
    log_file: Optional[str] = None,
) -> ResolvedOptions:
    """Resolves options based on command args, config files, and defaults."""
    # Configure logging first
    configure_logging(debug=debug_override, verbose=verbose_override, log_file=log_file)

    log_debug("Starting option resolution")

    log_debug(f"Loading config file: {config_override or 'default locations'}")
    config_data = load_config_file(config_override)
    config = BigOConfig.from_dict(config_data)

    # Command-line flags override config
    if json_override:
        config.output_format = "json"
    if debug_override:
        config.debug = True

    set_config(config)

    resolved = ResolvedOptions(
        output_format=config.output_format,
        verbose=verbose_override,
        debug=config.debug,
        config=config,
    )

    log_info(
        "Options resolved",
        output_format=resolved.output_format,
        duplicate_names=config.analyzer.duplicate_names,
    )

    return resolved
