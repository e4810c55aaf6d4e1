"""Shared constants for identifier encoding and chunked iteration.

Push identifiers are built from a 64-symbol alphabet modeled after web-safe
base64 but reordered by ASCII code, so that plain string comparison matches
numeric comparison of the encoded digits.
"""

from __future__ import annotations

# Ordered by ASCII code; index == digit value
PUSH_CHARS = "-0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ_abcdefghijklmnopqrstuvwxyz"
BASE = len(PUSH_CHARS)

# 8 digits * 6 bits = 48-bit millisecond timestamp
TIMESTAMP_DIGITS = 8
# 12 digits * 6 bits = 72 bits of randomness per millisecond
RANDOM_DIGITS = 12
PUSH_ID_LENGTH = TIMESTAMP_DIGITS + RANDOM_DIGITS

MAX_TIMESTAMP_MS = BASE**TIMESTAMP_DIGITS - 1

# Elements processed per scheduling turn
DEFAULT_CHUNK_SIZE = 50
