"""Chunking policy and data structures.

This module defines the data structures used to describe how a collection
is split into chunks, and the result of iterating over those chunks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...core.config import DEFAULT_CHUNK_SIZE
from ...core.exceptions import InvalidChunkSizeError


@dataclass(frozen=True)
class ChunkPolicy:
    """Chunking policy for cooperative iteration.

    Attributes:
        chunk_size: Maximum number of elements processed per scheduling turn
    """

    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self) -> None:
        """Validate chunk size."""
        if isinstance(self.chunk_size, bool) or not isinstance(self.chunk_size, int):
            raise InvalidChunkSizeError(
                f"chunk_size must be an integer, got {type(self.chunk_size).__name__}",
                chunk_size=self.chunk_size,
            )
        if self.chunk_size <= 0:
            raise InvalidChunkSizeError(
                f"chunk_size must be positive, got {self.chunk_size}",
                chunk_size=self.chunk_size,
            )


@dataclass(frozen=True)
class Chunk:
    """Contiguous half-open range ``[start, end)`` of a collection.

    Attributes:
        start: Index of the first element
        end: Index one past the last element
        chunk_index: Zero-based index of this chunk in the plan
    """

    start: int
    end: int
    chunk_index: int = 0

    @property
    def size(self) -> int:
        return self.end - self.start

    def indices(self) -> range:
        return range(self.start, self.end)


@dataclass
class ChunkResult:
    """Result of chunked iteration.

    Attributes:
        data: Accumulated results (map) or None (each)
        chunks_used: Number of chunks processed
        total_items: Number of elements the operation was applied to
        yields: Number of times control was yielded to the scheduler
    """

    data: Any
    chunks_used: int
    total_items: int = 0
    yields: int = 0
