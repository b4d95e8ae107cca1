"""Snapshots of CPU, memory, disk and network state taken with psutil."""

from __future__ import annotations

import time
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field

import psutil


@dataclass(frozen=True)
class CpuSample:
    """One logical CPU; frequency in MHz."""

    frequency: int


def _cpu_frequencies() -> list[int]:
    reader = getattr(psutil, "cpu_freq", None)
    if reader is None:
        return []
    try:
        freqs = reader(percpu=True)
    except (NotImplementedError, OSError, RuntimeError):
        return []
    return [int(freq.current) for freq in freqs or []]


@dataclass
class System:
    """CPU usage, CPU frequencies, RAM and swap figures (bytes)."""

    cpus: list[CpuSample] = field(default_factory=list)
    global_cpu_usage: float = 0.0
    total_memory: int = 0
    used_memory: int = 0
    available_memory: int = 0
    total_swap: int = 0
    used_swap: int = 0
    free_swap: int = 0

    def refresh(self) -> None:
        """Read CPU usage and frequency, RAM and swap."""
        count = psutil.cpu_count() or 0
        freqs = _cpu_frequencies()
        if len(freqs) == count:
            mhz = freqs
        elif freqs:
            mhz = [freqs[0]] * count
        else:
            mhz = [0] * count
        self.cpus = [CpuSample(value) for value in mhz]
        self.global_cpu_usage = float(psutil.cpu_percent(interval=None))

        ram = psutil.virtual_memory()
        self.total_memory = int(ram.total)
        self.used_memory = int(ram.used)
        self.available_memory = int(ram.available)

        swap = psutil.swap_memory()
        self.total_swap = int(swap.total)
        self.used_swap = int(swap.used)
        self.free_swap = int(swap.free)


@dataclass(frozen=True)
class DiskSample:
    """Space on one mounted disk, in bytes."""

    mount_point: str
    total_space: int
    available_space: int


class Disks:
    """The mounted disks; read from the system unless given."""

    def __init__(self, disks: Iterable[DiskSample] | None = None) -> None:
        self.entries: list[DiskSample] = []
        if disks is None:
            self.refresh()
        else:
            self.entries = list(disks)

    def refresh(self) -> None:
        samples = []
        seen = set()
        for partition in psutil.disk_partitions(all=False):
            if partition.mountpoint in seen:
                continue
            try:
                usage = psutil.disk_usage(partition.mountpoint)
            except OSError:
                continue
            seen.add(partition.mountpoint)
            samples.append(DiskSample(partition.mountpoint, int(usage.total), int(usage.free)))
        self.entries = samples

    def __iter__(self) -> Iterator[DiskSample]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class NetworkData:
    """Bytes received and transmitted since the previous refresh."""

    received: int
    transmitted: int


class Networks:
    """Per-interface traffic since the last refresh.

    Built without data, it takes a baseline from the system, so every
    interface starts at zero traffic.
    """

    def __init__(self, interfaces: Mapping[str, NetworkData] | None = None) -> None:
        self._counters: dict[str, tuple[int, int]] = {}
        self._interfaces: dict[str, NetworkData] = {}
        if interfaces is None:
            self.refresh()
        else:
            self._interfaces = dict(interfaces)

    def refresh(self) -> None:
        counters = psutil.net_io_counters(pernic=True)
        interfaces = {}
        latest = {}
        for name, counter in counters.items():
            current = (int(counter.bytes_recv), int(counter.bytes_sent))
            previous = self._counters.get(name, current)
            interfaces[name] = NetworkData(
                received=max(current[0] - previous[0], 0),
                transmitted=max(current[1] - previous[1], 0),
            )
            latest[name] = current
        self._counters = latest
        self._interfaces = interfaces

    def get(self, name: str) -> NetworkData | None:
        return self._interfaces.get(name)

    def keys(self) -> list[str]:
        return list(self._interfaces)


def uptime() -> int:
    """Seconds since the system booted."""
    return max(int(time.time() - psutil.boot_time()), 0)