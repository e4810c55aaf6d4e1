"""Unit tests for chunk execution logic."""

from __future__ import annotations

import asyncio
import logging

import pytest

from firestack.utils.runtime.chunking import ChunkExecutor, ChunkPolicy


def make_counting_yield():
    """Build a yield_control hook that counts how often it is awaited."""
    counter = {"yields": 0}

    async def counting_yield() -> None:
        counter["yields"] += 1
        await asyncio.sleep(0)

    return counter, counting_yield


class TestChunkExecutorEach:
    """Test ChunkExecutor.each functionality."""

    @pytest.mark.asyncio
    async def test_each_visits_every_index_once_in_order(self):
        """Test 237 elements in chunks of 50."""
        counter, counting_yield = make_counting_yield()
        executor = ChunkExecutor(ChunkPolicy(chunk_size=50), yield_control=counting_yield)
        seen: list[int] = []

        result = await executor.each(list(range(237)), lambda value, index: seen.append(index))

        assert seen == list(range(237))
        assert result.data is None
        assert result.chunks_used == 5
        assert result.total_items == 237
        assert result.yields == 5
        assert counter["yields"] == 5

    @pytest.mark.asyncio
    async def test_yield_happens_after_each_chunk(self):
        """Test that no element of the next chunk runs before the yield."""
        events: list[str] = []

        async def recording_yield() -> None:
            events.append("yield")

        executor = ChunkExecutor(ChunkPolicy(chunk_size=2), yield_control=recording_yield)

        await executor.each(["a", "b", "c"], lambda value, index: events.append(value))

        assert events == ["a", "b", "yield", "c", "yield"]

    @pytest.mark.asyncio
    async def test_single_chunk_yields_once(self):
        """Test chunk_size >= length gives one chunk and one yield."""
        counter, counting_yield = make_counting_yield()
        executor = ChunkExecutor(ChunkPolicy(chunk_size=100), yield_control=counting_yield)

        result = await executor.each([1, 2, 3], lambda value, index: None)

        assert result.chunks_used == 1
        assert counter["yields"] == 1

    @pytest.mark.asyncio
    async def test_empty_collection_still_yields(self):
        """Test that an empty collection processes nothing but yields once."""
        counter, counting_yield = make_counting_yield()
        executor = ChunkExecutor(yield_control=counting_yield)
        calls: list[int] = []

        result = await executor.each([], lambda value, index: calls.append(index))

        assert calls == []
        assert result.chunks_used == 0
        assert result.yields == 1
        assert counter["yields"] == 1

    @pytest.mark.asyncio
    async def test_operation_error_aborts_remaining_chunks(self):
        """Test that a failing operation propagates and stops iteration."""
        executor = ChunkExecutor(ChunkPolicy(chunk_size=50))
        seen: list[int] = []

        def operation(value: int, index: int) -> None:
            seen.append(index)
            if index == 60:
                raise RuntimeError("bad element")

        with pytest.raises(RuntimeError, match="bad element"):
            await executor.each(list(range(200)), operation)

        assert seen == list(range(61))

    @pytest.mark.asyncio
    async def test_operation_error_is_logged(self, caplog):
        """Test that the failing chunk and element are logged."""
        caplog.set_level(logging.ERROR, logger="firestack.utils.runtime.chunking.telemetry")
        executor = ChunkExecutor(ChunkPolicy(chunk_size=10))

        def operation(value: int, index: int) -> None:
            if index == 15:
                raise KeyError("missing")

        with pytest.raises(KeyError):
            await executor.each(list(range(20)), operation)

        records = [r for r in caplog.records if r.getMessage() == "chunk_error"]
        assert len(records) == 1
        assert records[0].chunk_index == 1
        assert records[0].index == 15
        assert records[0].error_type == "KeyError"

    @pytest.mark.asyncio
    async def test_execution_complete_is_logged(self, caplog):
        """Test completion telemetry."""
        caplog.set_level(logging.INFO, logger="firestack.utils.runtime.chunking.telemetry")
        executor = ChunkExecutor(ChunkPolicy(chunk_size=4))

        await executor.each(list(range(10)), lambda value, index: None)

        records = [r for r in caplog.records if r.getMessage() == "chunk_execution_complete"]
        assert len(records) == 1
        assert records[0].chunks_used == 3
        assert records[0].total_items == 10


class TestChunkExecutorMap:
    """Test ChunkExecutor.map functionality."""

    @pytest.mark.asyncio
    async def test_map_preserves_order(self):
        """Test results keep input order with single-element chunks."""
        executor = ChunkExecutor(ChunkPolicy(chunk_size=1))

        result = await executor.map([1, 2, 3], lambda value, index, items: value * 2)

        assert result.data == [2, 4, 6]
        assert result.chunks_used == 3

    @pytest.mark.asyncio
    async def test_map_passes_index_and_collection(self):
        """Test that the operation receives index and the original collection."""
        executor = ChunkExecutor(ChunkPolicy(chunk_size=2))
        items = ["a", "b", "c"]
        received = []

        def operation(value, index, collection):
            received.append(collection)
            return f"{index}:{value}"

        result = await executor.map(items, operation)

        assert result.data == ["0:a", "1:b", "2:c"]
        assert all(collection is items for collection in received)

    @pytest.mark.asyncio
    async def test_map_empty(self):
        """Test mapping an empty collection."""
        executor = ChunkExecutor()

        result = await executor.map([], lambda value, index, items: value)

        assert result.data == []
        assert result.yields == 1
