"""The stats loop: builds messages from the selected stats and hands them to a sender."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from typing import NoReturn

from barstats.cli import (
    Cli,
    all_cpu_flags,
    all_disk_flags,
    all_memory_flags,
    all_system_flags,
)
from barstats.cpu import get_cpu_stats
from barstats.disk import get_disk_stats
from barstats.memory import get_memory_stats
from barstats.network import get_network_stats
from barstats.sampling import Disks, Networks, System, uptime
from barstats.system import HostInfo, get_system_stats

EVENT = "system_stats"
_NETWORK_REFRESH_RATE = 5

Sender = Callable[[str, str, "str | None"], object]


def _uptime_field(seconds: int) -> str:
    return f'UPTIME="{seconds // 60} mins" '


class StatsProvider:
    """Collects the stats chosen on the command line into event payloads.

    The samplers may be supplied; by default they read the running system.
    The network sampler is rebuilt from ``networks_factory`` every fifth
    refresh so that interfaces that appear or vanish are picked up.
    """

    def __init__(
        self,
        cli: Cli,
        *,
        system: System | None = None,
        disks: Disks | None = None,
        networks_factory: Callable[[], Networks] = Networks,
        host: HostInfo | None = None,
        temperatures: Iterable[tuple[str, float | None]] | None = None,
        uptime_source: Callable[[], int] = uptime,
    ) -> None:
        self.cli = cli
        self.system = System() if system is None else system
        self.disks = Disks() if disks is None else disks
        self._networks_factory = networks_factory
        self.networks = networks_factory()
        self._host = host
        self._temperatures = None if temperatures is None else tuple(temperatures)
        self._uptime_source = uptime_source
        self._include_uptime = False
        self._network_refresh_counter = 0

    def initial_message(self) -> str | None:
        """Payload of the static system stats, or None when none were asked for."""
        cli = self.cli
        if not (cli.all or cli.system is not None):
            return None
        self.system.refresh()
        flags = cli.system if cli.system is not None else all_system_flags()
        self._include_uptime = "uptime" in flags
        return "".join(get_system_stats(flags, self._host))

    def _refresh(self) -> None:
        self.system.refresh()
        self.disks.refresh()
        self._network_refresh_counter += 1
        if self._network_refresh_counter >= _NETWORK_REFRESH_RATE:
            self.networks = self._networks_factory()
            self._network_refresh_counter = 0
        else:
            self.networks.refresh()

    def next_message(self) -> str:
        """Refresh the samplers and build the payload of the changing stats."""
        self._refresh()
        cli = self.cli
        commands: list[str] = []
        if cli.all:
            commands.append(
                "".join(get_cpu_stats(self.system, all_cpu_flags(), self._temperatures))
            )
            commands.append("".join(get_disk_stats(self.disks, all_disk_flags())))
            commands.append("".join(get_memory_stats(self.system, all_memory_flags())))
            commands.append("".join(get_network_stats(self.networks, None, cli.interval)))
            commands.append(_uptime_field(self._uptime_source()))
        else:
            if cli.cpu is not None:
                commands.append(
                    "".join(get_cpu_stats(self.system, cli.cpu, self._temperatures))
                )
            if cli.disk is not None:
                commands.append("".join(get_disk_stats(self.disks, cli.disk)))
            if cli.memory is not None:
                commands.append("".join(get_memory_stats(self.system, cli.memory)))
            if cli.network is not None:
                commands.append(
                    "".join(get_network_stats(self.networks, cli.network, cli.interval))
                )
            if self._include_uptime:
                commands.append(_uptime_field(self._uptime_source()))
        return "".join(commands)

    def run(self, send: Sender, sleep: Callable[[float], object] = time.sleep) -> NoReturn:
        """Register the event, then trigger it with fresh stats every interval.

        ``send(flag, event, payload)`` delivers one message; this never returns
        unless ``send`` or ``sleep`` raises.
        """
        verbose = self.cli.verbose
        send("add event", EVENT, None)
        initial = self.initial_message()
        if initial is not None:
            send("trigger", EVENT, initial)
        while True:
            sleep(self.cli.interval)
            message = self.next_message()
            if verbose:
                print(f"Current message: {message}")
            send("trigger", EVENT, message)