import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from bigo_cli.core.constants import CONFIG_FILENAME, CONSTANT_COLLECTION_NAMES
from bigo_cli.core.exceptions import ConfigurationError

# Configuration defaults - all constants at the top
DEFAULT_CONSTANT_MAX_LINES = 5
DEFAULT_PROPAGATION_DECAY = 10
DEFAULT_CONFIDENCE_FLOOR = 70
DEFAULT_SMALL_RANGE_LIMIT = 20
DEFAULT_DUPLICATE_NAMES = "first"
DEFAULT_OUTPUT_FORMAT = "table"
DUPLICATE_NAME_POLICIES = ("first", "last")
OUTPUT_FORMATS = ("table", "json")

# Global configuration instance
_config: Optional["BigOConfig"] = None


@dataclass
class AnalyzerConfig:
    """Tunables for the complexity analysis engine."""

    constant_max_lines: int = DEFAULT_CONSTANT_MAX_LINES
    propagation_decay: int = DEFAULT_PROPAGATION_DECAY
    confidence_floor: int = DEFAULT_CONFIDENCE_FLOOR
    small_range_limit: int = DEFAULT_SMALL_RANGE_LIMIT
    constant_collection_names: Tuple[str, ...] = CONSTANT_COLLECTION_NAMES
    duplicate_names: str = DEFAULT_DUPLICATE_NAMES

    def __post_init__(self):
        self.constant_collection_names = tuple(self.constant_collection_names)

        if self.constant_max_lines < 0:
            raise ConfigurationError("constant_max_lines must not be negative")
        if not 0 <= self.propagation_decay <= 100:
            raise ConfigurationError("propagation_decay must be between 0 and 100")
        if not 10 <= self.confidence_floor <= 100:
            raise ConfigurationError("confidence_floor must be between 10 and 100")
        if self.small_range_limit < 0:
            raise ConfigurationError("small_range_limit must not be negative")
        if self.duplicate_names not in DUPLICATE_NAME_POLICIES:
            raise ConfigurationError(
                f"duplicate_names must be one of {', '.join(DUPLICATE_NAME_POLICIES)}"
            )


@dataclass
class BigOConfig:
    """Main configuration class for bigo-cli."""

    analyzer: AnalyzerConfig = field(default_factory=AnalyzerConfig)
    output_format: str = DEFAULT_OUTPUT_FORMAT
    debug: bool = False

    def __post_init__(self):
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"output_format must be one of {', '.join(OUTPUT_FORMATS)}"
            )

    @classmethod
    def from_file(cls, config_path: Optional[Path] = None) -> "BigOConfig":
        """Load configuration from file."""
        config_data = load_config_file(config_path)
        return cls.from_dict(config_data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BigOConfig":
        """Create config from dictionary."""
        config_data = data.copy()

        # Map flat JSON keys to config fields
        field_mapping = {
            "constant_max_lines": "analyzer.constant_max_lines",
            "propagation_decay": "analyzer.propagation_decay",
            "confidence_floor": "analyzer.confidence_floor",
            "small_range_limit": "analyzer.small_range_limit",
            "constant_collection_names": "analyzer.constant_collection_names",
            "duplicate_names": "analyzer.duplicate_names",
            "format": "output_format",
        }

        for json_key, config_key in field_mapping.items():
            if json_key in config_data:
                value = config_data.pop(json_key)
                if "." in config_key:  # Nested field
                    parent, child = config_key.split(".", 1)
                    if parent not in config_data:
                        config_data[parent] = {}
                    config_data[parent][child] = value
                else:
                    config_data[config_key] = value

        if "analyzer" in config_data and isinstance(config_data["analyzer"], dict):
            try:
                config_data["analyzer"] = AnalyzerConfig(**config_data["analyzer"])
            except TypeError as e:
                raise ConfigurationError(f"Unknown analyzer setting: {e}") from e

        try:
            return cls(**config_data)
        except TypeError as e:
            raise ConfigurationError(f"Unknown configuration key: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for serialization."""
        data = asdict(self)
        data["analyzer"]["constant_collection_names"] = list(
            self.analyzer.constant_collection_names
        )
        return data

    def save(self, path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = Path.home() / f".{CONFIG_FILENAME}"

        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)


def load_config_file(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from file."""
    paths = []

    if config_path:
        paths.append(Path(config_path))

    paths.extend(
        [
            Path.cwd() / CONFIG_FILENAME,
            Path.home() / f".{CONFIG_FILENAME}",
        ]
    )

    for path in paths:
        if path.exists():
            try:
                with open(path, "r") as f:
                    return json.load(f)
            except (json.JSONDecodeError, IOError):
                continue

    return {}


def get_config() -> BigOConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = BigOConfig.from_file()
    return _config


def set_config(config: BigOConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
