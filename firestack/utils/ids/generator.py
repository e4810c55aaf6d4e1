"""Push identifier generation.

Architecture:
    A push identifier is 20 characters: 8 characters of millisecond
    timestamp followed by 12 characters of randomness. Identifiers created
    later sort after earlier ones, and identifiers from different clients
    are very unlikely to collide.

    When two identifiers are requested within the same millisecond, the
    previous random suffix is reused and incremented by one instead of
    drawing fresh randomness, which keeps the output strictly increasing
    under high call rates.

Design Decisions:
    - Owned state: Each generator holds its own GeneratorState, injected
      for deterministic tests
    - Thread-safe: A lock guards the read-modify-write of the state
    - Injected clock and random source: Wall clock and SystemRandom by
      default
    - Module default: ``generate_push_id`` delegates to one shared,
      lock-protected generator
"""

from __future__ import annotations

import logging
import random
import threading

from ..core.clock import Clock, SystemClock
from ..core.config import BASE, PUSH_ID_LENGTH, RANDOM_DIGITS
from ..core.exceptions import LengthInvariantViolation
from .codec import encode_digits, encode_timestamp, increment_digits
from .state import GeneratorState

logger = logging.getLogger(__name__)


class PushIdGenerator:
    """Generates lexicographically time-ordered push identifiers."""

    def __init__(
        self,
        *,
        state: GeneratorState | None = None,
        clock: Clock | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize generator.

        Args:
            state: Starting state (defaults to a fresh GeneratorState)
            clock: Millisecond clock (defaults to the system wall clock)
            rng: Random source for suffixes (defaults to SystemRandom)
        """
        self._state = state if state is not None else GeneratorState()
        self._clock = clock or SystemClock()
        self._random = rng or random.SystemRandom()
        self._lock = threading.Lock()

    @property
    def state(self) -> GeneratorState:
        """Copy of the current state."""
        with self._lock:
            return self._state.snapshot()

    def generate(self, server_time_offset_ms: int = 0) -> str:
        """Generate the next push identifier.

        Args:
            server_time_offset_ms: Offset between local and server clocks,
                added to the local time

        Returns:
            20-character identifier

        Raises:
            TimestampOverflow: If the effective time does not fit in 48 bits
            LengthInvariantViolation: If the assembled identifier is not 20
                characters long
        """
        with self._lock:
            now = self._clock.now_ms() + server_time_offset_ms
            prefix = encode_timestamp(now)

            if now == self._state.last_push_time_ms:
                self._state.last_random_digits = increment_digits(self._state.last_random_digits)
            else:
                self._state.last_random_digits = [
                    self._random.randrange(BASE) for _ in range(RANDOM_DIGITS)
                ]
            self._state.last_push_time_ms = now

            push_id = prefix + encode_digits(self._state.last_random_digits)

        if len(push_id) != PUSH_ID_LENGTH:
            logger.critical(
                "push_id_length_invalid",
                extra={"push_id": push_id, "length": len(push_id)},
            )
            raise LengthInvariantViolation(
                f"Push id length should be {PUSH_ID_LENGTH}, got {len(push_id)}",
                length=len(push_id),
            )

        return push_id


_default_generator: PushIdGenerator | None = None
_default_lock = threading.Lock()


def get_default_generator() -> PushIdGenerator:
    """Get the process-wide generator, creating it on first use."""
    global _default_generator
    with _default_lock:
        if _default_generator is None:
            _default_generator = PushIdGenerator()
        return _default_generator


def generate_push_id(server_time_offset_ms: int = 0) -> str:
    """Generate a push identifier with the process-wide generator.

    Example:
        >>> key = generate_push_id()
        >>> len(key)
        20
    """
    return get_default_generator().generate(server_time_offset_ms)
