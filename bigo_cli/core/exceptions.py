class BigOCLIError(Exception):
    """Base exception for all bigo-cli errors."""

    pass


class ConfigurationError(BigOCLIError):
    """Raised when configuration is invalid or missing."""

    pass


class SourceReadError(BigOCLIError):
    """Raised when a source file cannot be read or decoded."""

    pass
