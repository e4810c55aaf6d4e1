"""Chunk planning logic.

This module provides the ChunkPlanner class that splits a collection of a
given length into contiguous chunks bounded by the policy's chunk size.
"""

from __future__ import annotations

from .definitions import Chunk, ChunkPolicy
from .telemetry import log_chunk_plan


class ChunkPlanner:
    """Plans chunk ranges over a collection."""

    def __init__(self, policy: ChunkPolicy | None = None) -> None:
        """Initialize chunk planner.

        Args:
            policy: Chunking policy (defaults to ChunkPolicy())
        """
        self._policy = policy or ChunkPolicy()

    @property
    def policy(self) -> ChunkPolicy:
        return self._policy

    def plan(self, length: int) -> list[Chunk]:
        """Plan chunks for a collection.

        Chunks cover ``[0, length)`` in order without gaps or overlap. The
        last chunk ends exactly at ``length``.

        Args:
            length: Number of elements in the collection

        Returns:
            List of chunks (empty for an empty collection)

        Raises:
            ValueError: If length is negative
        """
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")

        chunk_size = self._policy.chunk_size
        plans = [
            Chunk(start=start, end=min(start + chunk_size, length), chunk_index=index)
            for index, start in enumerate(range(0, length, chunk_size))
        ]

        log_chunk_plan(
            total_chunks=len(plans),
            chunk_size=chunk_size,
            total_items=length,
        )

        return plans
