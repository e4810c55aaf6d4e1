"""Chunk execution logic for cooperative iteration.

This module provides the ChunkExecutor class that walks a chunk plan,
applies an operation to every element of each chunk synchronously, and
yields to the event loop between chunks so other tasks can run.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from time import perf_counter
from typing import Any, TypeVar

from .definitions import ChunkPolicy, ChunkResult
from .planners import ChunkPlanner
from .telemetry import log_chunk_completed, log_chunk_error, log_chunk_execution_complete

T = TypeVar("T")
R = TypeVar("R")

YieldControl = Callable[[], Awaitable[None]]


async def yield_to_loop() -> None:
    """Re-enter the running loop's ready queue once."""
    await asyncio.sleep(0)


def _operation_name(operation: Callable[..., Any]) -> str:
    return getattr(operation, "__qualname__", None) or type(operation).__name__


class ChunkExecutor:
    """Applies operations over collections in bounded chunks.

    Every element is visited exactly once, in index order. Elements within
    one chunk are processed without yielding; control returns to the event
    loop after each chunk, and once for an empty collection, before the
    result is returned.
    """

    def __init__(
        self,
        policy: ChunkPolicy | None = None,
        *,
        planner: ChunkPlanner | None = None,
        yield_control: YieldControl | None = None,
    ) -> None:
        """Initialize chunk executor.

        Args:
            policy: Chunking policy (defaults to ChunkPolicy())
            planner: Optional planner (defaults to one built from policy)
            yield_control: Coroutine function awaited between chunks
                (defaults to yielding once to the running loop)
        """
        self._policy = policy or ChunkPolicy()
        self._planner = planner or ChunkPlanner(self._policy)
        self._yield_control = yield_control or yield_to_loop

    @property
    def policy(self) -> ChunkPolicy:
        return self._policy

    async def each(
        self,
        collection: Sequence[T],
        operation: Callable[[T, int], Any],
    ) -> ChunkResult:
        """Call ``operation(element, index)`` for every element.

        Args:
            collection: Elements to visit
            operation: Called once per element; its return value is ignored

        Returns:
            ChunkResult with ``data`` set to None
        """

        def apply(element: T, index: int) -> None:
            operation(element, index)

        return await self._run(collection, apply, _operation_name(operation))

    async def map(
        self,
        collection: Sequence[T],
        operation: Callable[[T, int, Sequence[T]], R],
    ) -> ChunkResult:
        """Collect ``operation(element, index, collection)`` for every element.

        Args:
            collection: Elements to transform
            operation: Called once per element

        Returns:
            ChunkResult whose ``data`` lists the results in input order
        """
        results: list[R] = []

        def apply(element: T, index: int) -> None:
            results.append(operation(element, index, collection))

        result = await self._run(collection, apply, _operation_name(operation))
        result.data = results
        return result

    async def _run(
        self,
        collection: Sequence[T],
        apply: Callable[[T, int], None],
        operation_name: str,
    ) -> ChunkResult:
        plans = self._planner.plan(len(collection))
        started = perf_counter()
        chunks_used = 0
        total_items = 0
        yields = 0

        for chunk in plans:
            chunk_start = perf_counter()
            index = chunk.start
            try:
                for index in chunk.indices():
                    apply(collection[index], index)
            except Exception as e:
                log_chunk_error(
                    operation=operation_name,
                    chunk_index=chunk.chunk_index,
                    index=index,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise

            chunks_used += 1
            total_items += chunk.size
            log_chunk_completed(
                operation=operation_name,
                chunk_index=chunk.chunk_index,
                start=chunk.start,
                end=chunk.end,
                latency_ms=(perf_counter() - chunk_start) * 1000.0,
            )

            await self._yield_control()
            yields += 1

        if not plans:
            # Completion is always deferred by at least one turn
            await self._yield_control()
            yields += 1

        result = ChunkResult(
            data=None,
            chunks_used=chunks_used,
            total_items=total_items,
            yields=yields,
        )

        log_chunk_execution_complete(
            operation=operation_name,
            result=result,
            total_latency_ms=(perf_counter() - started) * 1000.0,
        )

        return result
