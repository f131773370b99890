import pytest

from vmsim.constants import MemoryConfig
from vmsim.physical import PhysicalMemory, PhysicalMemoryError


@pytest.fixture
def memory():
    return PhysicalMemory(MemoryConfig())


def test_fresh_memory_reads_zero(memory):
    assert all(value == 0 for _, value in memory.dump())


def test_write_then_read(memory):
    memory.write(37, 99)
    assert memory.read(37) == 99
    assert memory.read(36) == 0


@pytest.mark.parametrize("address", [-1, MemoryConfig().ram_size])
def test_out_of_range_address(memory, address):
    with pytest.raises(PhysicalMemoryError):
        memory.read(address)
    with pytest.raises(PhysicalMemoryError):
        memory.write(address, 1)


def test_evict_and_restore_round_trip(memory):
    size = memory.config.page_size
    for offset in range(size):
        memory.write(2 * size + offset, offset + 100)
    memory.evict(2, 500)
    assert memory.evict_count == 1
    assert memory.is_swapped(500)
    for offset in range(size):
        memory.write(2 * size + offset, 0)
    memory.restore(5, 500)
    assert not memory.is_swapped(500)
    assert [memory.read(5 * size + o) for o in range(size)] == [o + 100 for o in range(size)]


def test_evicting_same_page_twice_fails(memory):
    memory.evict(1, 7)
    with pytest.raises(PhysicalMemoryError):
        memory.evict(2, 7)


def test_evict_bad_indices(memory):
    with pytest.raises(PhysicalMemoryError):
        memory.evict(memory.config.num_frames, 1)
    with pytest.raises(PhysicalMemoryError):
        memory.evict(0, memory.config.num_pages)
    assert memory.evict_count == 0


def test_restore_unknown_page_keeps_frame(memory):
    size = memory.config.page_size
    memory.write(3 * size, 42)
    memory.restore(3, 1234)
    assert memory.read(3 * size) == 42


def test_restore_bad_frame(memory):
    with pytest.raises(PhysicalMemoryError):
        memory.restore(memory.config.num_frames, 0)


def test_dump_covers_whole_ram(memory):
    memory.write(10, 5)
    entries = list(memory.dump())
    assert [address for address, _ in entries] == list(range(memory.config.ram_size))
    assert dict(entries)[10] == 5