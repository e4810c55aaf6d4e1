"""Core components."""

from .clock import Clock, ManualClock, SystemClock
from .config import (
    BASE,
    DEFAULT_CHUNK_SIZE,
    MAX_TIMESTAMP_MS,
    PUSH_CHARS,
    PUSH_ID_LENGTH,
    RANDOM_DIGITS,
    TIMESTAMP_DIGITS,
)
from .exceptions import (
    CallbackError,
    InvalidChunkSizeError,
    InvalidPushIdError,
    InvariantViolation,
    LengthInvariantViolation,
    MissingFunctionError,
    TimestampOverflow,
    UtilsError,
    ValidationError,
)

__all__ = [
    "Clock",
    "SystemClock",
    "ManualClock",
    "PUSH_CHARS",
    "BASE",
    "TIMESTAMP_DIGITS",
    "RANDOM_DIGITS",
    "PUSH_ID_LENGTH",
    "MAX_TIMESTAMP_MS",
    "DEFAULT_CHUNK_SIZE",
    "UtilsError",
    "InvariantViolation",
    "TimestampOverflow",
    "LengthInvariantViolation",
    "ValidationError",
    "InvalidChunkSizeError",
    "InvalidPushIdError",
    "MissingFunctionError",
    "CallbackError",
]
