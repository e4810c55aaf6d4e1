"""Runtime scheduling components."""

from .chunking import (
    Chunk,
    ChunkExecutor,
    ChunkPlanner,
    ChunkPolicy,
    ChunkResult,
    chunked_each,
    chunked_map,
)

__all__ = [
    "Chunk",
    "ChunkExecutor",
    "ChunkPlanner",
    "ChunkPolicy",
    "ChunkResult",
    "chunked_each",
    "chunked_map",
]
