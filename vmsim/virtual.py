"""Hierarchical page-table virtual memory on top of simulated physical memory."""

from __future__ import annotations

from dataclasses import dataclass

from .physical import PhysicalMemory

ROOT_FRAME = 0
PAGE_FAULT = 0


class AddressError(ValueError):
    """Raised for a virtual address outside the address space."""


@dataclass
class _EvictionCandidate:
    parent: int = 0
    child_offset: int = 0
    page: int = 0
    distance: int = 0


class VirtualMemory:
    """Virtual memory that maps pages to frames through a tree of tables."""

    def __init__(self, physical: PhysicalMemory | None = None) -> None:
        self.physical = physical if physical is not None else PhysicalMemory()
        self.config = self.physical.config

    def initialize(self) -> None:
        """Clear the root table."""
        for row in range(self.config.page_size):
            self.physical.write(row, 0)

    def _row_address(self, frame: int, row: int) -> int:
        return frame * self.config.page_size + row

    def _entries(self, frame: int):
        for row in range(self.config.page_size):
            yield row, self.physical.read(self._row_address(frame, row))

    def _page_index(self, address: int, level: int) -> int:
        shift = self.config.offset_width * (self.config.tables_depth - level)
        return (address >> shift) & self.config.offset_mask

    def _is_frame_empty(self, frame: int) -> bool:
        return all(value == PAGE_FAULT for _, value in self._entries(frame))

    def _find_empty_table(self, original: int, current: int, parent: int,
                          parent_row: int, depth: int) -> int | None:
        if depth == self.config.tables_depth or current == original:
            return None
        if self._is_frame_empty(current):
            if current == ROOT_FRAME:
                return None
            self.physical.write(self._row_address(parent, parent_row), 0)
            return current
        for row, child in self._entries(current):
            if child != PAGE_FAULT:
                found = self._find_empty_table(original, child, current, row, depth + 1)
                if found is not None:
                    return found
        return None

    def _max_frame(self, frame: int, depth: int) -> int:
        if depth == self.config.tables_depth:
            return frame
        return max(
            [frame]
            + [self._max_frame(child, depth + 1)
               for _, child in self._entries(frame) if child != PAGE_FAULT]
        )

    def _unused_frame(self) -> int | None:
        candidate = self._max_frame(ROOT_FRAME, 0) + 1
        return candidate if candidate < self.config.num_frames else None

    def _cyclic_distance(self, a: int, b: int) -> int:
        distance = abs(a - b)
        return min(self.config.num_pages - distance, distance)

    def _eviction_candidate(self, swap_in_page: int, frame: int, parent: int,
                            parent_row: int, page: int, depth: int) -> _EvictionCandidate:
        if depth == self.config.tables_depth:
            return _EvictionCandidate(parent, parent_row, page,
                                      self._cyclic_distance(swap_in_page, page))
        best = _EvictionCandidate()
        for row, child in self._entries(frame):
            if child == PAGE_FAULT:
                continue
            candidate = self._eviction_candidate(
                swap_in_page, child, frame, row,
                (page << self.config.offset_width) + row, depth + 1,
            )
            if candidate.distance > best.distance:
                best = candidate
        return best

    def _evict_page(self, swap_in_page: int) -> int:
        target = self._eviction_candidate(swap_in_page, ROOT_FRAME, ROOT_FRAME, 0, 0, 0)
        reference = self._row_address(target.parent, target.child_offset)
        child = self.physical.read(reference)
        self.physical.evict(child, target.page)
        self.physical.write(reference, 0)
        return child

    def _handle_page_fault(self, current_frame: int, page_number: int) -> int:
        frame = self._find_empty_table(current_frame, ROOT_FRAME, ROOT_FRAME, 0, 0)
        if frame is not None:
            return frame
        frame = self._unused_frame()
        if frame is not None:
            return frame
        return self._evict_page(page_number)

    def _check(self, address: int) -> None:
        if not 0 <= address < self.config.virtual_memory_size:
            raise AddressError(f"virtual address {address} out of range")

    def translate(self, address: int) -> int:
        """Map a virtual address to a physical one, faulting pages in as needed."""
        self._check(address)
        depth = self.config.tables_depth
        page_number = address >> self.config.offset_width
        frame = ROOT_FRAME
        for level in range(depth):
            entry = self._row_address(frame, self._page_index(address, level))
            next_frame = self.physical.read(entry)
            if next_frame == PAGE_FAULT:
                next_frame = self._handle_page_fault(frame, page_number)
                if level < depth - 1:
                    for row in range(self.config.page_size):
                        self.physical.write(self._row_address(next_frame, row), 0)
                self.physical.write(entry, next_frame)
                if level == depth - 1:
                    self.physical.restore(next_frame, page_number)
            frame = next_frame
        return self._row_address(frame, address & self.config.offset_mask)

    def read(self, address: int) -> int:
        """Return the word at a virtual address."""
        return self.physical.read(self.translate(address))

    def write(self, address: int, value: int) -> None:
        """Store a word at a virtual address."""
        self.physical.write(self.translate(address), value)