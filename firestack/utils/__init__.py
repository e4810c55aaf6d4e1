"""Firestack utils - time-ordered push identifiers and cooperative chunked iteration."""

from .core import (
    DEFAULT_CHUNK_SIZE,
    PUSH_CHARS,
    PUSH_ID_LENGTH,
    CallbackError,
    Clock,
    InvalidChunkSizeError,
    InvalidPushIdError,
    InvariantViolation,
    LengthInvariantViolation,
    ManualClock,
    MissingFunctionError,
    SystemClock,
    TimestampOverflow,
    UtilsError,
    ValidationError,
)
from .helpers import noop, promisify, reverse_key_values
from .ids import (
    GeneratorState,
    PushIdGenerator,
    decode_timestamp,
    encode_timestamp,
    generate_push_id,
    get_default_generator,
    increment_digits,
)
from .models import PushId, is_push_id
from .runtime.chunking import (
    Chunk,
    ChunkExecutor,
    ChunkPlanner,
    ChunkPolicy,
    ChunkResult,
    chunked_each,
    chunked_map,
)

__version__ = "0.1.0"

__all__ = [
    # Identifiers
    "PushIdGenerator",
    "GeneratorState",
    "generate_push_id",
    "get_default_generator",
    "encode_timestamp",
    "decode_timestamp",
    "increment_digits",
    "PushId",
    "is_push_id",
    # Chunked iteration
    "chunked_each",
    "chunked_map",
    "ChunkExecutor",
    "ChunkPlanner",
    "ChunkPolicy",
    "Chunk",
    "ChunkResult",
    # Helpers
    "reverse_key_values",
    "noop",
    "promisify",
    # Clocks
    "Clock",
    "SystemClock",
    "ManualClock",
    # Constants
    "PUSH_CHARS",
    "PUSH_ID_LENGTH",
    "DEFAULT_CHUNK_SIZE",
    # Exceptions
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
