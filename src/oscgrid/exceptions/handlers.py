"""
Error handling utilities.

Each layer translates errors to be more useful at the next level up:

```
CLI             formats error.user_message, shows error.recovery_hint
  ↑ OscGridError
Session/config  converts pydantic/IO errors, drops parse errors
  ↑ ValidationError, OSError, ParseError
Parser/grid     raises ParseError and GridIndexError
```

| Pattern | Code |
|---------|------|
| Convert a pydantic failure | `raise wrap_pydantic_error(e, str(path)) from e` |
| Show an error to the user | `message, hint = format_error_for_display(e)` |
| Try many operations, report all failures | `collector = collect_errors("replay"); with collector.try_operation(...): ...` |
"""

import logging
from typing import Optional

from .base import OscGridError
from .config import ConfigFileInvalidError, ConfigValidationError

logger = logging.getLogger(__name__)


def wrap_pydantic_error(error: Exception, file_path: str) -> OscGridError:
    """
    Convert Pydantic validation errors to oscgrid exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    # Invalid JSON surfaces as a ValidationError with type=json_invalid
    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg
        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get("loc", ("unknown",))) or "config"
            return ConfigValidationError(
                field=field,
                value=first_error.get("input"),
                error_msg=first_error.get("msg", "validation failed"),
                file_path=file_path,
            )
        if errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get("loc", ("unknown",)))
                error_lines.append(f"  - {field}: {err.get('msg', 'validation failed')}")

            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=f"{len(errors)} validation errors:\n" + "\n".join(error_lines),
                file_path=file_path,
            )

    return ConfigValidationError(field="unknown", value=None, error_msg=error_msg, file_path=file_path)


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, OscGridError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None


def collect_errors(operation: str) -> "ErrorCollector":
    """
    Create an error collector for batch operations.

    Example:
        ```python
        collector = collect_errors("replay messages")

        for lineno, line in enumerate(lines, start=1):
            with collector.try_operation(f"line {lineno}"):
                session.run(parse_message(to_message(line)))

        if collector.has_errors:
            print(collector.get_summary())
        ```
    """
    return ErrorCollector(operation)


class ErrorCollector:
    """
    Collects oscgrid errors during batch operations.

    Only OscGridError subclasses are collected; anything else is a bug
    and propagates.
    """

    def __init__(self, operation: str):
        self.operation = operation
        self.errors: list[tuple[str, OscGridError]] = []
        self.success_count = 0

    @property
    def has_errors(self) -> bool:
        """Check if any errors were collected."""
        return len(self.errors) > 0

    @property
    def error_count(self) -> int:
        """Get the number of errors collected."""
        return len(self.errors)

    def try_operation(self, sub_operation: str):
        """
        Context manager for a single operation within the batch.

        Args:
            sub_operation: Description of this specific operation
        """
        return self._OperationContext(self, sub_operation)

    def get_summary(self) -> str:
        """Get a multi-line summary of collected errors."""
        if not self.has_errors:
            return f"All operations completed successfully ({self.success_count} total)"

        summary = f"Failed {self.error_count} of {self.error_count + self.success_count} operations:\n"
        for sub_op, error in self.errors:
            summary += f"  - {sub_op}: {error.user_message}\n"

        return summary.rstrip()

    class _OperationContext:
        """Internal context manager for individual operations."""

        def __init__(self, collector: "ErrorCollector", sub_operation: str):
            self.collector = collector
            self.sub_operation = sub_operation

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            if exc_type is None:
                self.collector.success_count += 1
                return False

            if not isinstance(exc_val, OscGridError):
                return False

            logger.debug(
                f"{self.collector.operation}: {self.sub_operation} failed: {exc_val.technical_message}"
            )
            self.collector.errors.append((self.sub_operation, exc_val))
            return True
