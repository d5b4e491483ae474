"""Custom exceptions for the scriptcore API and scripts.

The parsing core itself never raises: every line resolves to some element
type. These exceptions belong to the surfaces that hand text to the core.
"""

from typing import Any


class ScriptCoreException(Exception):
    """Base exception for scriptcore."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(ScriptCoreException):
    """Raised when request validation fails."""

    pass


class DocumentTooLargeException(ValidationException):
    """Raised when a submitted document exceeds the configured size limit."""

    pass


class SourceReadException(ScriptCoreException):
    """Raised when a screenplay source file cannot be read."""

    pass
