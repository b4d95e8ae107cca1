"""RAM and swap fields."""

from __future__ import annotations

import math
from collections.abc import Sequence

from barstats.cli import all_ram_flags, all_swp_flags
from barstats.sampling import System

BYTES_PER_GB = 1_073_741_824.0


def _percentage(used: int, total: int) -> int:
    return math.floor(used / total * 100 + 0.5) if total > 0 else 0


def get_memory_stats(system: System, flags: Sequence[str]) -> list[str]:
    """Build RAM and swap fields for the given flags, in order."""
    ram_flags = set(all_ram_flags())
    swp_flags = set(all_swp_flags())

    if any(flag in ram_flags for flag in flags):
        ram_total, ram_used = system.total_memory, system.used_memory
    else:
        ram_total = ram_used = 0
    if any(flag in swp_flags for flag in flags):
        swp_total, swp_used = system.total_swap, system.used_swap
    else:
        swp_total = swp_used = 0

    result = []
    for flag in flags:
        match flag:
            case "ram_available":
                result.append(f'RAM_AVAILABLE="{system.available_memory / BYTES_PER_GB:.1f}GB" ')
            case "ram_total":
                result.append(f'RAM_TOTAL="{ram_total / BYTES_PER_GB:.1f}GB" ')
            case "ram_used":
                result.append(f'RAM_USED="{ram_used / BYTES_PER_GB:.1f}GB" ')
            case "ram_usage":
                result.append(f'RAM_USAGE="{_percentage(ram_used, ram_total)}%" ')
            case "swp_free":
                result.append(f'SWP_FREE="{system.free_swap / BYTES_PER_GB:.1f}GB" ')
            case "swp_total":
                result.append(f'SWP_TOTAL="{swp_total / BYTES_PER_GB:.1f}GB" ')
            case "swp_used":
                result.append(f'SWP_USED="{swp_used / BYTES_PER_GB:.1f}GB" ')
            case "swp_usage":
                result.append(f'SWP_USAGE="{_percentage(swp_used, swp_total)}%" ')
    return result