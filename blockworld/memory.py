"""Memory size helpers."""

import os

_SUFFIXES = ("B", "KB", "MB", "GB", "TB", "PB", "EB")


def pretty_bytes(num_bytes):
    """Render a byte count with a binary unit suffix (B, KB, ... EB)."""
    if num_bytes < 0:
        raise ValueError("byte count cannot be negative")
    count = float(num_bytes)
    suffix_index = 0
    while count >= 1024 and suffix_index < len(_SUFFIXES):
        suffix_index += 1
        count /= 1024
    if suffix_index >= len(_SUFFIXES):
        raise ValueError(f"byte count too large: {num_bytes}")
    suffix = _SUFFIXES[suffix_index]
    if count.is_integer():
        return f"{int(count)}{suffix}"
    return f"{count / 100:f}{suffix}"


def total_system_memory():
    """Return the total physical memory of the machine in bytes."""
    try:
        pages = os.sysconf("SC_PHYS_PAGES")
        page_size = os.sysconf("SC_PAGE_SIZE")
    except (AttributeError, ValueError, OSError) as exc:
        raise OSError("total system memory is not available on this platform") from exc
    if pages < 0 or page_size < 0:
        raise OSError("total system memory is not available on this platform")
    return pages * page_size