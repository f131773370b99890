"""Command-line smoke test: write a strided pattern, then read it back."""

from __future__ import annotations

import argparse

from .constants import MemoryConfig
from .physical import PhysicalMemory
from .virtual import VirtualMemory


def _parser(config: MemoryConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vmsim",
        description="Write values to strided virtual pages and verify them.",
    )
    parser.add_argument("--count", type=int, default=2 * config.num_frames,
                        help="number of values to write (default: twice the frame count)")
    parser.add_argument("--stride", type=int, default=5,
                        help="distance in pages between consecutive values")
    parser.add_argument("--show-evictions", action="store_true",
                        help="print the number of page evictions at the end")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the write/read check; return 0 on success, 1 on a mismatch."""
    config = MemoryConfig()
    args = _parser(config).parse_args(argv)
    physical = PhysicalMemory(config)
    vm = VirtualMemory(physical)
    vm.initialize()

    def address(i: int) -> int:
        return args.stride * i * config.page_size

    for i in range(args.count):
        print(f"writing to {i}")
        vm.write(address(i), i)

    for i in range(args.count):
        value = vm.read(address(i))
        print(f"reading from {i} {value}")
        if value != i:
            print(f"mismatch at {i}: expected {i}, got {value}")
            return 1

    print("success")
    if args.show_evictions:
        print(physical.evict_count)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())