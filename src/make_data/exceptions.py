"""Project-specific exceptions."""


class MakeDataError(Exception):
    """Base exception for the project."""


class ConfigError(MakeDataError):
    """Raised when runtime configuration is missing or invalid."""


class OutputFileError(MakeDataError):
    """Raised when the output CSV cannot be opened or written."""
