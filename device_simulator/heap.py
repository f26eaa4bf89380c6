"""
Heap Report

Human-readable free memory for the simulated device's "/heap" page.
The host's available memory stands in for the device heap.
"""

from typing import Callable

import psutil

SIZE_UNITS = ["kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB"]
SIZE_THRESHOLD = 1024

MemoryProbe = Callable[[], int]


def human_size(size: int | float) -> str:
    """
    Format a byte count with 1024-based units.
    
    Below 1024 the value is printed unscaled ("512 B"); above it is
    scaled and printed with one decimal ("1.5 kB"). Scaling stops at YB.
    """
    if abs(size) < SIZE_THRESHOLD:
        return f"{size} B"
    
    unit = -1
    value = float(size)
    while True:
        value /= SIZE_THRESHOLD
        unit += 1
        if abs(value) < SIZE_THRESHOLD or unit >= len(SIZE_UNITS) - 1:
            break
    return f"{value:.1f} {SIZE_UNITS[unit]}"


def free_memory() -> int:
    """Bytes of memory currently available to new allocations."""
    return psutil.virtual_memory().available


def heap_report(probe: MemoryProbe = free_memory) -> str:
    return human_size(probe())
