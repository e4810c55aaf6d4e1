"""Push identifier data model."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from functools import total_ordering

from pydantic import BaseModel, ConfigDict, field_validator

from ..core.config import PUSH_ID_LENGTH, TIMESTAMP_DIGITS
from ..core.exceptions import InvalidPushIdError
from ..ids.codec import decode_digits, decode_timestamp, is_push_id

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


@total_ordering
class PushId(BaseModel):
    """Parsed push identifier.

    Ordering follows the raw string, which is also (timestamp, suffix) order.
    """

    value: str

    model_config = ConfigDict(frozen=True)

    @field_validator("value")
    @classmethod
    def validate_push_id(cls, v: str) -> str:
        """Validate length and alphabet."""
        if not is_push_id(v):
            raise ValueError(
                f"expected {PUSH_ID_LENGTH} characters from the push alphabet, got {v!r}"
            )
        return v

    @classmethod
    def parse(cls, value: str) -> PushId:
        """Build a PushId, raising InvalidPushIdError on malformed input."""
        try:
            return cls(value=value)
        except ValueError as e:
            raise InvalidPushIdError(f"Invalid push id {value!r}", value=value) from e

    @property
    def timestamp_ms(self) -> int:
        """Embedded effective timestamp in milliseconds."""
        return decode_timestamp(self.value[:TIMESTAMP_DIGITS])

    @property
    def timestamp(self) -> datetime:
        """Embedded timestamp as an aware UTC datetime."""
        try:
            return _EPOCH + timedelta(milliseconds=self.timestamp_ms)
        except OverflowError as e:
            raise InvalidPushIdError(
                f"Timestamp {self.timestamp_ms} ms is outside the datetime range",
                value=self.value,
            ) from e

    @property
    def suffix(self) -> str:
        """Random/incremented 12-character suffix."""
        return self.value[TIMESTAMP_DIGITS:]

    @property
    def suffix_digits(self) -> list[int]:
        return decode_digits(self.suffix)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PushId):
            return NotImplemented
        return self.value < other.value

    def __str__(self) -> str:
        return self.value
