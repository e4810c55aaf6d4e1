"""Time-ordered push identifiers."""

from .codec import (
    decode_digits,
    decode_timestamp,
    encode_digits,
    encode_timestamp,
    increment_digits,
    is_push_id,
)
from .generator import PushIdGenerator, generate_push_id, get_default_generator
from .state import GeneratorState

__all__ = [
    "GeneratorState",
    "PushIdGenerator",
    "generate_push_id",
    "get_default_generator",
    "encode_timestamp",
    "decode_timestamp",
    "encode_digits",
    "decode_digits",
    "increment_digits",
    "is_push_id",
]
