"""Per-interface network throughput fields."""

from __future__ import annotations

from collections.abc import Sequence

from barstats.sampling import Networks


def get_network_stats(
    networks: Networks, interfaces: Sequence[str] | None, interval: int
) -> list[str]:
    """Build rx/tx fields in KB/s; all interfaces when ``interfaces`` is None.

    Interfaces that are not present are skipped.
    """
    names = networks.keys() if interfaces is None else interfaces
    result = []
    for name in names:
        data = networks.get(name)
        if data is None:
            continue
        rx = data.received // 1024 // interval
        tx = data.transmitted // 1024 // interval
        result.append(f'NETWORK_RX_{name}="{rx}KB/s" NETWORK_TX_{name}="{tx}KB/s" ')
    return result