# vmsim

vmsim simulates the virtual memory of a small computer. A virtual address passes through a tree of page tables and lands in a small physical RAM. When RAM is full, pages are moved out to a simulated swap store.

## How it works

- Memory is made of integer words.
  - A page holds `2 ** offset_width` words, and so does a frame.
  - Every page table has that same number of entries.
- The page-table tree is rooted at frame 0.
  - Its depth is `ceil((virtual_address_width - offset_width) / offset_width)`.
  - A table entry of `0` means the next level is not mapped.
- When a page fault needs a frame, the simulator tries three things in order:
  1. It reuses a table frame whose entries are all empty. This frame must not be the root, and must not be the table currently being walked. It is unlinked from its parent before reuse.
  2. It takes the frame just above the highest frame referenced from the tree, if that frame exists.
  3. It evicts the mapped page that is cyclically farthest from the page being loaded.
     - The evicted page's contents go to the swap store.
     - They are restored when that page is next accessed.

## Installation

```
pip install .
```

To run the test suite, install the test extra:

```
pip install ".[test]"
pytest
```

## Library use

```python
from vmsim.constants import MemoryConfig
from vmsim.physical import PhysicalMemory
from vmsim.virtual import VirtualMemory, AddressError

config = MemoryConfig()              # 4-bit offset, 10-bit RAM, 20-bit virtual space
ram = PhysicalMemory(config)
vm = VirtualMemory(ram)
vm.initialize()

vm.write(0x1234, 42)
assert vm.read(0x1234) == 42

try:
    vm.read(config.virtual_memory_size)
except AddressError:
    print("address out of range")
```

### `vmsim.constants.MemoryConfig`

A frozen dataclass with three fields:

| Field | Default |
| --- | --- |
| `offset_width` | 4 |
| `physical_address_width` | 10 |
| `virtual_address_width` | 20 |

It derives these properties from the fields:

- `page_size`
- `ram_size`
- `virtual_memory_size`
- `num_frames`
- `num_pages`
- `tables_depth`
- `offset_mask`

It raises `ValueError` in each of these cases:

- `offset_width` is not positive.
- `physical_address_width` is smaller than `offset_width`.
- `virtual_address_width` does not exceed `offset_width`.

### `vmsim.physical.PhysicalMemory`

- `read(address)` and `write(address, value)` access one RAM word.
- `evict(frame_index, page_index)` copies a frame into the swap store and increments `evict_count`.
- `restore(frame_index, page_index)` moves a swapped page back into a frame. If the page was never swapped out, the frame is left as it is.
- `is_swapped(page_index)` tells whether a page is currently in swap.
- `dump()` yields every RAM word as `(address, value)` pairs, in address order.

`PhysicalMemoryError` is raised in these cases:

- An address is outside RAM.
- A frame or page index is out of range.
- A page is evicted while it is already in swap.

### `vmsim.virtual.VirtualMemory`

- `initialize()` clears the root table.
- `translate(address)` returns the physical address for a virtual address. It maps in any tables and pages that are needed.
- `read(address)` and `write(address, value)` access one word through that translation.

An address outside `[0, virtual_memory_size)` raises `AddressError`, which is a subclass of `ValueError`.

If no `PhysicalMemory` is passed, `VirtualMemory` creates one with the default configuration.

## Command line

```
vmsim [--count N] [--stride S] [--show-evictions]
```

The command writes `i` to virtual address `stride * i * page_size` for each `i` in `range(count)`, then reads every value back. It prints each step as it goes.

| Option | Default | Effect |
| --- | --- | --- |
| `--count` | twice the number of frames | how many values to write |
| `--stride` | 5 | distance in pages between consecutive values |
| `--show-evictions` | off | print the number of page evictions at the end |

If every value matches, the command prints `success` and exits with status 0. At the first mismatch it prints the expected and actual values and exits with status 1. The command always uses the default `MemoryConfig`.

## What it does not do

- The swap store exists only in memory, for the lifetime of a `PhysicalMemory` object. Nothing is written to disk.
- The command line offers no way to change the memory geometry.
- The command line offers no way to inspect RAM contents. Use `PhysicalMemory.dump()` from Python for that.