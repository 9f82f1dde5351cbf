"""CLI-level errors."""

class CliError(Exception):
    """Base CLI error."""


class ConfigError(CliError):
    """Configuration resolution error."""
