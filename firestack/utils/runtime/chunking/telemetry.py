"""Structured logging for chunked iteration.

This module provides telemetry hooks for chunking operations, emitting
structured logs for observability.
"""

from __future__ import annotations

import logging

from .definitions import ChunkResult

logger = logging.getLogger(__name__)


def log_chunk_plan(
    *,
    total_chunks: int,
    chunk_size: int,
    total_items: int,
) -> None:
    """Log chunk plan creation.

    Args:
        total_chunks: Total number of chunks planned
        chunk_size: Maximum elements per chunk
        total_items: Length of the collection
    """
    logger.info(
        "chunk_plan_created",
        extra={
            "total_chunks": total_chunks,
            "chunk_size": chunk_size,
            "total_items": total_items,
        },
    )


def log_chunk_completed(
    *,
    operation: str,
    chunk_index: int,
    start: int,
    end: int,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single chunk.

    Emitted at DEBUG since large collections produce many chunks.

    Args:
        operation: Name of the operation applied
        chunk_index: Zero-based index of the chunk
        start: First index of the chunk
        end: One past the last index of the chunk
        latency_ms: Time spent in the chunk in milliseconds (optional)
    """
    logger.debug(
        "chunk_completed",
        extra={
            "operation": operation,
            "chunk_index": chunk_index,
            "start": start,
            "end": end,
            "latency_ms": latency_ms,
        },
    )


def log_chunk_execution_complete(
    *,
    operation: str,
    result: ChunkResult,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of chunked iteration.

    Args:
        operation: Name of the operation applied
        result: ChunkResult from execution
        total_latency_ms: Total wall time in milliseconds (optional)
    """
    logger.info(
        "chunk_execution_complete",
        extra={
            "operation": operation,
            "chunks_used": result.chunks_used,
            "total_items": result.total_items,
            "yields": result.yields,
            "total_latency_ms": total_latency_ms,
        },
    )


def log_chunk_error(
    *,
    operation: str,
    chunk_index: int,
    index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log an operation failure inside a chunk.

    Args:
        operation: Name of the operation applied
        chunk_index: Zero-based index of the chunk that failed
        index: Index of the element being processed
        error_type: Exception class name
        error_message: Exception message
    """
    logger.error(
        "chunk_error",
        extra={
            "operation": operation,
            "chunk_index": chunk_index,
            "index": index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
