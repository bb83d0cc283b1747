import mmap

import pytest

from blockworld.memory import pretty_bytes, total_system_memory

SUFFIXES = ["B", "KB", "MB", "GB", "TB", "PB", "EB"]


@pytest.mark.parametrize("n", [0, 1, 512, 1023])
def test_small_counts_are_bytes(n):
    assert pretty_bytes(n) == f"{n}B"


@pytest.mark.parametrize("power", range(1, 7))
def test_whole_powers_use_suffix(power):
    assert pretty_bytes(1024**power) == "1" + SUFFIXES[power]


def test_one_kilobyte():
    assert pretty_bytes(1024) == "1KB"


def test_fractional_uses_fixed_format():
    assert pretty_bytes(1536) == "0.015000KB"


def test_largest_size_t():
    assert pretty_bytes(16 * 1024**6) == "16EB"


def test_negative_rejected():
    with pytest.raises(ValueError):
        pretty_bytes(-1)


def test_too_large_rejected():
    with pytest.raises(ValueError):
        pretty_bytes(1024**7)


def test_total_memory_is_whole_pages():
    total = total_system_memory()
    assert total > 0
    assert total % mmap.PAGESIZE == 0