"""Base exception class for oscgrid.

Errors come in three families, each a subclass of OscGridError:

- parse errors: an incoming message could not become a command or event.
  Recoverable: the message is logged and dropped.
- grid errors: a cell, column or region does not fit the grid. They
  propagate to whoever applied the command.
- configuration errors: the config file is unreadable or invalid.

Every error carries a ``detail`` payload describing what went wrong and
optionally the ``source`` it came from (an address, a file path). The
family supplies the message prefix, the default recoverability and the
default hint, so subclasses only describe the failure itself.
"""

from typing import Any, ClassVar, Optional


class OscGridError(Exception):
    """
    Base exception for all oscgrid errors.

    Class attributes (set per family):
        CATEGORY: Prefix for the user message, e.g. "Parse Error"
        RECOVERABLE: Default for ``recoverable``
        HINT: Default recovery hint

    Attributes:
        detail: Diagnostic payload, usually a string
        source: Where the failure came from (address, path), if known
        recoverable: True if the caller can drop the input and carry on
        recovery_hint: Suggestion for how to fix the issue
    """

    CATEGORY: ClassVar[Optional[str]] = None
    RECOVERABLE: ClassVar[bool] = False
    HINT: ClassVar[Optional[str]] = None

    def __init__(
        self,
        detail: Any,
        source: Optional[str] = None,
        recoverable: Optional[bool] = None,
        recovery_hint: Optional[str] = None,
    ):
        self.detail = detail
        self.source = source
        self.recoverable = self.RECOVERABLE if recoverable is None else recoverable
        self.recovery_hint = self.HINT if recovery_hint is None else recovery_hint
        super().__init__(self.user_message)

    @property
    def user_message(self) -> str:
        """``CATEGORY: detail``, or the bare detail for uncategorized errors."""
        if self.CATEGORY:
            return f"{self.CATEGORY}: {self.detail}"
        return str(self.detail)

    @property
    def technical_message(self) -> str:
        """The detail qualified by its source, for logs."""
        if self.source:
            return f"{self.source}: {self.detail}"
        return str(self.detail)

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, if any."""
        msg = self.user_message
        if self.recovery_hint:
            msg += f"\n\nSuggestion: {self.recovery_hint}"
        return msg
