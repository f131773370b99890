"""Simulated physical memory: frames of RAM backed by a swap store."""

from __future__ import annotations

from collections.abc import Iterator

from .constants import MemoryConfig


class PhysicalMemoryError(Exception):
    """Raised when physical memory is used outside its contract."""


class PhysicalMemory:
    """RAM made of fixed-size frames, plus a swap store keyed by page index."""

    def __init__(self, config: MemoryConfig | None = None) -> None:
        self.config = config if config is not None else MemoryConfig()
        self._frames: list[list[int]] = [
            [0] * self.config.page_size for _ in range(self.config.num_frames)
        ]
        self._swap: dict[int, list[int]] = {}
        self.evict_count = 0

    def _locate(self, address: int) -> tuple[int, int]:
        if not 0 <= address < self.config.ram_size:
            raise PhysicalMemoryError(f"physical address {address} out of range")
        return divmod(address, self.config.page_size)

    def _check_frame(self, frame_index: int) -> None:
        if not 0 <= frame_index < self.config.num_frames:
            raise PhysicalMemoryError(f"frame index {frame_index} out of range")

    def read(self, address: int) -> int:
        """Return the word stored at a physical address."""
        frame, offset = self._locate(address)
        return self._frames[frame][offset]

    def write(self, address: int, value: int) -> None:
        """Store a word at a physical address."""
        frame, offset = self._locate(address)
        self._frames[frame][offset] = value

    def evict(self, frame_index: int, page_index: int) -> None:
        """Copy a frame's contents to swap under the given page index."""
        if page_index in self._swap:
            raise PhysicalMemoryError(f"page {page_index} is already swapped out")
        self._check_frame(frame_index)
        if not 0 <= page_index < self.config.num_pages:
            raise PhysicalMemoryError(f"page index {page_index} out of range")
        self._swap[page_index] = list(self._frames[frame_index])
        self.evict_count += 1

    def restore(self, frame_index: int, page_index: int) -> None:
        """Move a swapped page back into a frame.

        A page that was never swapped out is being referenced for the first
        time, so the frame is left as it is.
        """
        self._check_frame(frame_index)
        page = self._swap.pop(page_index, None)
        if page is not None:
            self._frames[frame_index] = page

    def is_swapped(self, page_index: int) -> bool:
        """Whether a page currently lives in swap."""
        return page_index in self._swap

    def dump(self) -> Iterator[tuple[int, int]]:
        """Yield every (address, value) pair of RAM in address order."""
        for frame_index, frame in enumerate(self._frames):
            base = frame_index * self.config.page_size
            for offset, value in enumerate(frame):
                yield base + offset, value