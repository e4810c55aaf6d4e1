"""Mutable state carried between identifier generations."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..core.config import RANDOM_DIGITS
from .codec import validate_digits


@dataclass
class GeneratorState:
    """State of the most recent identifier produced by a generator.

    Attributes:
        last_push_time_ms: Effective timestamp of the last identifier
            (None before the first one)
        last_random_digits: Twelve base-64 digits of the last suffix
    """

    last_push_time_ms: int | None = None
    last_random_digits: list[int] = field(default_factory=lambda: [0] * RANDOM_DIGITS)

    def __post_init__(self) -> None:
        """Validate the suffix digits."""
        self.last_random_digits = list(self.last_random_digits)
        validate_digits(self.last_random_digits)

    def snapshot(self) -> GeneratorState:
        """Return an independent copy of this state."""
        return GeneratorState(
            last_push_time_ms=self.last_push_time_ms,
            last_random_digits=list(self.last_random_digits),
        )
