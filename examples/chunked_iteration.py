#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from firestack.utils import chunked_each, chunked_map


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Process a large list without blocking the loop")
    p.add_argument("size", nargs="?", type=int, default=1000, help="Number of elements")
    p.add_argument("--chunk-size", type=int, default=50)
    p.add_argument("--verbose", action="store_true", help="Show chunking telemetry")
    return p.parse_args()


async def heartbeat(stop: asyncio.Event) -> int:
    beats = 0
    while not stop.is_set():
        beats += 1
        await asyncio.sleep(0)
    return beats


async def main() -> None:
    args = parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    items = list(range(args.size))
    stop = asyncio.Event()
    beats = asyncio.create_task(heartbeat(stop))

    squares = await chunked_map(items, lambda x, i, _: x * x, chunk_size=args.chunk_size)
    total = 0

    def accumulate(value: int, index: int) -> None:
        nonlocal total
        total += value

    await chunked_each(squares, accumulate, chunk_size=args.chunk_size)
    stop.set()

    print(f"sum of squares 0..{args.size - 1} = {total}")
    print(f"heartbeat ran {await beats} times while iterating")


if __name__ == "__main__":
    asyncio.run(main())
