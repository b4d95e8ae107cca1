"""Disk count, space and usage fields."""

from __future__ import annotations

import math
from collections.abc import Sequence

from barstats.sampling import Disks

BYTES_PER_GB = 1_073_741_824.0


def get_disk_stats(disks: Disks, flags: Sequence[str]) -> list[str]:
    """Build disk fields summed over all disks, in flag order."""
    total_space = sum(disk.total_space for disk in disks)
    used_space = sum(disk.total_space - disk.available_space for disk in disks)
    usage = math.floor(used_space / total_space * 100 + 0.5) if total_space > 0 else 0

    result = []
    for flag in flags:
        match flag:
            case "count":
                result.append(f'DISK_COUNT="{len(disks)}" ')
            case "free":
                result.append(f'DISK_FREE="{(total_space - used_space) / BYTES_PER_GB:.1f}GB" ')
            case "total":
                result.append(f'DISK_TOTAL="{total_space / BYTES_PER_GB:.1f}GB" ')
            case "used":
                result.append(f'DISK_USED="{used_space / BYTES_PER_GB:.1f}GB" ')
            case "usage":
                result.append(f'DISK_USAGE="{usage}%" ')
    return result