"""Cooperative chunked iteration.

Applies an operation over a large collection without monopolizing the event
loop: elements are processed in bounded chunks and control is yielded back
to the loop between chunks.

Architecture:
    The chunking layer consists of:
    - definitions.py: Chunk structures (ChunkPolicy, Chunk, ChunkResult)
    - planners.py: Chunk planning logic (splits a length into ranges)
    - executors.py: Chunk execution logic (applies operations, yields)
    - iteration.py: chunked_each / chunked_map entry points
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .definitions import Chunk, ChunkPolicy, ChunkResult
from .executors import ChunkExecutor, yield_to_loop
from .iteration import chunked_each, chunked_map
from .planners import ChunkPlanner

__all__ = [
    "ChunkPolicy",
    "Chunk",
    "ChunkResult",
    "ChunkPlanner",
    "ChunkExecutor",
    "yield_to_loop",
    "chunked_each",
    "chunked_map",
]
