#!/usr/bin/env python3
from __future__ import annotations

import argparse

from firestack.utils import PushId, PushIdGenerator


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate and inspect push identifiers")
    p.add_argument("count", nargs="?", type=int, default=5, help="Identifiers to generate")
    p.add_argument("--offset-ms", type=int, default=0, help="Server time offset in milliseconds")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    generator = PushIdGenerator()

    for _ in range(args.count):
        push_id = PushId.parse(generator.generate(args.offset_ms))
        print(f"{push_id} | {push_id.timestamp.isoformat()} | suffix={push_id.suffix}")


if __name__ == "__main__":
    main()
