"""Geometry of the simulated memory: word, page, RAM and address-space sizes."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class MemoryConfig:
    """Bit widths that determine every size of the simulated memory.

    A page holds ``2 ** offset_width`` words, which is also the number of
    entries in one page table.
    """

    offset_width: int = 4
    physical_address_width: int = 10
    virtual_address_width: int = 20

    def __post_init__(self) -> None:
        if self.offset_width <= 0:
            raise ValueError("offset_width must be positive")
        if self.physical_address_width < self.offset_width:
            raise ValueError("physical_address_width must be at least offset_width")
        if self.virtual_address_width <= self.offset_width:
            raise ValueError("virtual_address_width must exceed offset_width")

    @property
    def page_size(self) -> int:
        """Words per page/frame, and entries per table."""
        return 1 << self.offset_width

    @property
    def ram_size(self) -> int:
        """RAM size in words."""
        return 1 << self.physical_address_width

    @property
    def virtual_memory_size(self) -> int:
        """Virtual address space size in words."""
        return 1 << self.virtual_address_width

    @property
    def num_frames(self) -> int:
        """Number of frames in RAM."""
        return self.ram_size // self.page_size

    @property
    def num_pages(self) -> int:
        """Number of pages in virtual memory."""
        return self.virtual_memory_size // self.page_size

    @property
    def tables_depth(self) -> int:
        """Number of page-table levels between the root and a page."""
        return math.ceil((self.virtual_address_width - self.offset_width) / self.offset_width)

    @property
    def offset_mask(self) -> int:
        """Mask selecting the offset bits of an address."""
        return self.page_size - 1