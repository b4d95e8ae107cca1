"""CPU count, frequency, temperature and usage fields."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

import psutil

from barstats.sampling import System

_CPU_LABELS = ("CPU", "PMU", "SOC")


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _read_temperatures() -> list[tuple[str, float | None]]:
    reader = getattr(psutil, "sensors_temperatures", None)
    if reader is None:
        return []
    try:
        sensors = reader()
    except (OSError, RuntimeError):
        return []
    return [
        (f"{chip} {entry.label}".strip(), entry.current)
        for chip, entries in sensors.items()
        for entry in entries
    ]


def _format_temperature(readings: Iterable[tuple[str, float | None]]) -> str:
    values = [
        temperature
        for label, temperature in readings
        if temperature is not None and any(tag in label for tag in _CPU_LABELS)
    ]
    if not values:
        return "N/A"
    average = sum(values) / len(values)
    return "N/A" if average == -1.0 else f"{average:.1f}"


def get_cpu_stats(
    system: System,
    flags: Sequence[str],
    temperatures: Iterable[tuple[str, float | None]] | None = None,
) -> list[str]:
    """Build CPU fields for the given flags, in order; unknown flags are ignored.

    ``temperatures`` holds (label, degrees) pairs; when omitted the sensors are read.
    """
    cpu_count = len(system.cpus)
    result = []
    for flag in flags:
        match flag:
            case "count":
                result.append(f'CPU_COUNT="{cpu_count}" ')
            case "frequency":
                total = sum(cpu.frequency for cpu in system.cpus)
                result.append(f'CPU_FREQUENCY="{total // cpu_count}MHz" ')
            case "temperature":
                readings = _read_temperatures() if temperatures is None else temperatures
                result.append(f'CPU_TEMP="{_format_temperature(readings)}°C" ')
            case "usage":
                result.append(f'CPU_USAGE="{_round_half_away(system.global_cpu_usage)}%" ')
    return result