"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class UtilsError(Exception):
    """Base exception for all library errors."""

    pass


class InvariantViolation(UtilsError, AssertionError):
    """Internal consistency check failed.

    Signals clock or arithmetic corruption rather than bad input. Callers
    should not catch and retry these.
    """

    pass


class TimestampOverflow(InvariantViolation):
    """Timestamp did not fit in the 48-bit identifier prefix."""

    def __init__(self, message: str, timestamp_ms: int) -> None:
        super().__init__(message)
        self.timestamp_ms = timestamp_ms


class LengthInvariantViolation(InvariantViolation):
    """Assembled identifier has the wrong length."""

    def __init__(self, message: str, length: int) -> None:
        super().__init__(message)
        self.length = length


class ValidationError(UtilsError, ValueError):
    """Caller supplied an invalid argument."""

    pass


class InvalidChunkSizeError(ValidationError):
    """Chunk size is not a positive integer."""

    def __init__(self, message: str, chunk_size: Any) -> None:
        super().__init__(message)
        self.chunk_size = chunk_size


class InvalidPushIdError(ValidationError):
    """Value is not a well-formed push identifier."""

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class MissingFunctionError(UtilsError):
    """Function to wrap could not be resolved."""

    pass


class CallbackError(UtilsError):
    """Callback-style API reported a non-exception error value."""

    def __init__(self, message: str, error: Any = None) -> None:
        super().__init__(message)
        self.error = error
