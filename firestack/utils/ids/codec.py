"""Base-64 digit codec for push identifiers.

Digits are integers in ``[0, 63]`` mapped through ``PUSH_CHARS``. Timestamps
are written most-significant digit first so that lexicographic order of the
encoded text follows numeric order of the timestamp.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..core.config import BASE, PUSH_CHARS, PUSH_ID_LENGTH, RANDOM_DIGITS, TIMESTAMP_DIGITS
from ..core.exceptions import InvalidPushIdError, TimestampOverflow

logger = logging.getLogger(__name__)

_CHAR_VALUES = {char: value for value, char in enumerate(PUSH_CHARS)}


def encode_timestamp(timestamp_ms: int) -> str:
    """Encode a millisecond timestamp as eight push characters.

    Args:
        timestamp_ms: Milliseconds since the epoch (plus any server offset)

    Returns:
        Eight-character prefix, most-significant digit first

    Raises:
        TimestampOverflow: If the value does not fit in 48 bits. Negative
            values never reduce to zero and overflow as well.

    Examples:
        >>> encode_timestamp(0)
        '--------'
        >>> encode_timestamp(64)
        '-------0'
    """
    chars = [""] * TIMESTAMP_DIGITS
    remaining = timestamp_ms
    for i in range(TIMESTAMP_DIGITS - 1, -1, -1):
        chars[i] = PUSH_CHARS[remaining % BASE]
        remaining //= BASE

    if remaining != 0:
        logger.critical(
            "push_id_timestamp_overflow",
            extra={"timestamp_ms": timestamp_ms, "remaining": remaining},
        )
        raise TimestampOverflow(
            f"Timestamp {timestamp_ms} was not fully converted into "
            f"{TIMESTAMP_DIGITS} digits",
            timestamp_ms=timestamp_ms,
        )

    return "".join(chars)


def decode_timestamp(chars: str) -> int:
    """Decode an eight-character prefix back into milliseconds."""
    if len(chars) != TIMESTAMP_DIGITS:
        raise InvalidPushIdError(
            f"Timestamp prefix must be {TIMESTAMP_DIGITS} characters, got {len(chars)}",
            value=chars,
        )
    timestamp_ms = 0
    for value in decode_digits(chars):
        timestamp_ms = timestamp_ms * BASE + value
    return timestamp_ms


def encode_digits(digits: Sequence[int]) -> str:
    """Map base-64 digit values to their push characters."""
    return "".join(PUSH_CHARS[digit] for digit in digits)


def decode_digits(chars: str) -> list[int]:
    """Map push characters back to digit values.

    Raises:
        InvalidPushIdError: If a character is outside the alphabet
    """
    try:
        return [_CHAR_VALUES[char] for char in chars]
    except KeyError as e:
        raise InvalidPushIdError(f"Invalid push character {e.args[0]!r}", value=chars) from e


def increment_digits(digits: Sequence[int]) -> list[int]:
    """Return the base-64 successor of ``digits``.

    The scan starts at the least-significant (rightmost) digit: every 63
    becomes 0 and carries left, the first digit below 63 is incremented and
    the scan stops. A sequence made entirely of 63s wraps to all zeros.

    Examples:
        >>> increment_digits([0, 0, 1])
        [0, 0, 2]
        >>> increment_digits([0, 5, 63])
        [0, 6, 0]
        >>> increment_digits([63, 63, 63])
        [0, 0, 0]
    """
    result = list(digits)
    i = len(result) - 1
    while i >= 0 and result[i] == BASE - 1:
        result[i] = 0
        i -= 1

    if i >= 0:
        result[i] += 1
    else:
        # Capacity of the suffix exhausted within one millisecond
        logger.debug("push_id_suffix_wrapped", extra={"digits": len(result)})

    return result


def validate_digits(digits: Sequence[int], count: int = RANDOM_DIGITS) -> None:
    """Check that ``digits`` holds ``count`` values in ``[0, 63]``.

    Raises:
        ValueError: If the length or any value is out of range
    """
    if len(digits) != count:
        raise ValueError(f"Expected {count} digits, got {len(digits)}")
    for digit in digits:
        if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit < BASE:
            raise ValueError(f"Digit {digit!r} is outside [0, {BASE - 1}]")


def is_push_id(value: object) -> bool:
    """Check whether ``value`` is a well-formed push identifier string."""
    return (
        isinstance(value, str)
        and len(value) == PUSH_ID_LENGTH
        and all(char in _CHAR_VALUES for char in value)
    )
