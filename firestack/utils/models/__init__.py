"""Data models.

All models are Pydantic v2 and immutable (frozen=True).
"""

from ..ids.codec import is_push_id
from .push_id import PushId

__all__ = [
    "PushId",
    "is_push_id",
]
