import pytest

from vmsim.constants import MemoryConfig


def test_default_sizes_match_documented_geometry():
    config = MemoryConfig()
    assert config.page_size == 1 << 4
    assert config.ram_size == 1 << 10
    assert config.virtual_memory_size == 1 << 20
    assert config.tables_depth == 4


def test_frames_and_pages_are_consistent():
    config = MemoryConfig()
    assert config.num_frames * config.page_size == config.ram_size
    assert config.num_pages * config.page_size == config.virtual_memory_size


def test_tables_depth_rounds_up():
    config = MemoryConfig(offset_width=4, physical_address_width=10, virtual_address_width=18)
    exact = (config.virtual_address_width - config.offset_width) / config.offset_width
    assert config.tables_depth >= exact
    assert config.tables_depth - exact < 1
    assert config.tables_depth == 4


def test_offset_mask_covers_page():
    config = MemoryConfig()
    assert config.offset_mask + 1 == config.page_size


@pytest.mark.parametrize(
    "kwargs",
    [
        {"offset_width": 0},
        {"offset_width": 4, "physical_address_width": 2},
        {"offset_width": 4, "virtual_address_width": 4},
    ],
)
def test_invalid_widths_rejected(kwargs):
    with pytest.raises(ValueError):
        MemoryConfig(**kwargs)


def test_config_is_immutable():
    config = MemoryConfig()
    with pytest.raises(AttributeError):
        config.offset_width = 5
    assert config.offset_width == 4
    assert config.page_size == 1 << 4