"""Chunked ``each``/``map`` entry points.

Both functions validate their arguments immediately and return an
awaitable; nothing runs until it is awaited (or wrapped in a task). Errors
raised by ``operation`` propagate through the awaitable and stop the
remaining chunks.

Usage:
    doubled = await chunked_map([1, 2, 3], lambda x, i, items: x * 2, chunk_size=1)
    # [2, 4, 6]
"""

from __future__ import annotations

from collections.abc import Callable, Coroutine, Sequence
from typing import Any, TypeVar

from ...core.config import DEFAULT_CHUNK_SIZE
from .definitions import ChunkPolicy
from .executors import ChunkExecutor

T = TypeVar("T")
R = TypeVar("R")


def chunked_each(
    collection: Sequence[T],
    operation: Callable[[T, int], Any],
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    on_complete: Callable[[], Any] | None = None,
) -> Coroutine[Any, Any, None]:
    """Apply ``operation(element, index)`` over ``collection`` in chunks.

    Args:
        collection: Elements to visit
        operation: Called exactly once per element, in index order
        chunk_size: Elements processed per scheduling turn
        on_complete: Optional callback invoked once after the last chunk

    Returns:
        Awaitable that completes after every element has been visited

    Raises:
        InvalidChunkSizeError: Immediately, if chunk_size is not a positive int
    """
    executor = ChunkExecutor(ChunkPolicy(chunk_size=chunk_size))

    async def run() -> None:
        await executor.each(collection, operation)
        if on_complete is not None:
            on_complete()

    return run()


def chunked_map(
    collection: Sequence[T],
    operation: Callable[[T, int, Sequence[T]], R],
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    on_complete: Callable[[list[R]], Any] | None = None,
) -> Coroutine[Any, Any, list[R]]:
    """Map ``operation(element, index, collection)`` over ``collection`` in chunks.

    Args:
        collection: Elements to transform
        operation: Called exactly once per element, in index order
        chunk_size: Elements processed per scheduling turn
        on_complete: Optional callback receiving the results list

    Returns:
        Awaitable resolving to the results, in input order

    Raises:
        InvalidChunkSizeError: Immediately, if chunk_size is not a positive int
    """
    executor = ChunkExecutor(ChunkPolicy(chunk_size=chunk_size))

    async def run() -> list[R]:
        result = await executor.map(collection, operation)
        if on_complete is not None:
            on_complete(result.data)
        return result.data

    return run()
