"""Configuration-related exceptions.

This module defines exceptions for configuration errors:
- ConfigurationError: Base class for configuration errors
- ConfigFileInvalidError: Config file has invalid syntax
- ConfigValidationError: Config values fail validation
"""

from typing import Any

from .base import OscGridError


class ConfigurationError(OscGridError):
    """Configuration is invalid or cannot be loaded."""

    RECOVERABLE = True


class ConfigFileInvalidError(ConfigurationError):
    """Configuration file has invalid JSON syntax."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Initialize config file invalid error.

        Args:
            file_path: Path to the invalid config file
            parse_error: The parsing error message
        """
        detail = "Configuration file has invalid syntax"
        recovery = (
            "Check for trailing commas, missing quotes and unclosed braces.\n"
            f"  - Edit: {file_path}\n"
            "  - Or recreate it with 'oscgrid config init --force'"
        )

        if "trailing comma" in parse_error.lower():
            detail = "Configuration file has a trailing comma"
            recovery = f"Remove the trailing comma from {file_path}"
        elif "empty" in parse_error.lower():
            detail = "Configuration file is empty"

        self.file_path = file_path
        self.parse_error = parse_error
        super().__init__(detail, source=file_path, recovery_hint=recovery)

    @property
    def technical_message(self) -> str:
        return f"JSON parse error in {self.file_path}: {self.parse_error}"


class ConfigValidationError(ConfigurationError):
    """Configuration values fail validation."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: str | None = None):
        """
        Initialize config validation error.

        Args:
            field: The config field that failed validation
            value: The invalid value
            error_msg: Validation error message
            file_path: Optional path to config file
        """
        recovery = f"Update the '{field}' value in your configuration"
        if file_path:
            recovery += f"\nConfig file: {file_path}"
        if field in ("rows", "columns"):
            recovery += "\nGrid dimensions must be positive integers (e.g. 8 rows x 16 columns)"
        elif field == "prefix":
            recovery += "\nPrefixes look like '/monome' (leading slash, no trailing slash)"

        self.field = field
        self.value = value
        self.error_msg = error_msg
        self.file_path = file_path
        super().__init__(
            f"Invalid configuration value for '{field}': {error_msg}",
            source=file_path,
            recovery_hint=recovery,
        )

    @property
    def technical_message(self) -> str:
        return f"Config validation failed for {self.field}={self.value}: {self.error_msg}"
