import time
from types import SimpleNamespace

import psutil
import pytest

from barstats.sampling import (
    CpuSample,
    DiskSample,
    Disks,
    NetworkData,
    Networks,
    System,
    uptime,
)


@pytest.fixture
def fake_host(monkeypatch):
    monkeypatch.setattr(psutil, "cpu_count", lambda logical=True: 4)
    monkeypatch.setattr(
        psutil,
        "cpu_freq",
        lambda percpu=False: [SimpleNamespace(current=2400.0 + i) for i in range(4)],
    )
    monkeypatch.setattr(psutil, "cpu_percent", lambda interval=None, percpu=False: 37.5)
    monkeypatch.setattr(
        psutil,
        "virtual_memory",
        lambda: SimpleNamespace(total=8000, used=3000, available=4500),
    )
    monkeypatch.setattr(
        psutil, "swap_memory", lambda: SimpleNamespace(total=2000, used=500, free=1500)
    )


def test_system_refresh_reads_everything(fake_host):
    system = System()
    system.refresh()
    assert system.cpus == [CpuSample(2400 + i) for i in range(4)]
    assert system.global_cpu_usage == 37.5
    assert (system.total_memory, system.used_memory, system.available_memory) == (8000, 3000, 4500)
    assert (system.total_swap, system.used_swap, system.free_swap) == (2000, 500, 1500)


def test_single_frequency_is_shared_by_all_cpus(fake_host, monkeypatch):
    monkeypatch.setattr(psutil, "cpu_freq", lambda percpu=False: [SimpleNamespace(current=3200.0)])
    system = System()
    system.refresh()
    assert system.cpus == [CpuSample(3200)] * 4


def test_missing_frequency_gives_zero(fake_host, monkeypatch):
    def broken(percpu=False):
        raise NotImplementedError

    monkeypatch.setattr(psutil, "cpu_freq", broken)
    system = System()
    system.refresh()
    assert [cpu.frequency for cpu in system.cpus] == [0, 0, 0, 0]


def test_disks_refresh_skips_unreadable_and_duplicate_mounts(monkeypatch):
    partitions = [
        SimpleNamespace(mountpoint="/"),
        SimpleNamespace(mountpoint="/locked"),
        SimpleNamespace(mountpoint="/"),
        SimpleNamespace(mountpoint="/data"),
    ]
    usages = {"/": (1000, 400), "/data": (5000, 2500)}

    def disk_usage(path):
        if path not in usages:
            raise PermissionError(path)
        total, free = usages[path]
        return SimpleNamespace(total=total, free=free)

    monkeypatch.setattr(psutil, "disk_partitions", lambda all=False: partitions)
    monkeypatch.setattr(psutil, "disk_usage", disk_usage)
    disks = Disks()
    assert list(disks) == [DiskSample("/", 1000, 400), DiskSample("/data", 5000, 2500)]
    assert len(disks) == 2


def test_disks_given_explicitly():
    sample = DiskSample("/", 10, 5)
    disks = Disks([sample])
    assert disks.entries == [sample]


def _counters(**values):
    return {
        name: SimpleNamespace(bytes_recv=recv, bytes_sent=sent)
        for name, (recv, sent) in values.items()
    }


def test_networks_report_deltas(monkeypatch):
    snapshots = iter(
        [
            _counters(en0=(1000, 500)),
            _counters(en0=(4000, 900), lo0=(50, 50)),
        ]
    )
    monkeypatch.setattr(psutil, "net_io_counters", lambda pernic=False: next(snapshots))
    networks = Networks()
    assert networks.get("en0") == NetworkData(0, 0)
    networks.refresh()
    assert networks.get("en0") == NetworkData(received=3000, transmitted=400)
    assert networks.get("lo0") == NetworkData(0, 0)
    assert networks.keys() == ["en0", "lo0"]


def test_networks_drop_vanished_interfaces_and_never_go_negative(monkeypatch):
    snapshots = iter([_counters(en0=(1000, 1000), utun1=(7, 7)), _counters(en0=(10, 10))])
    monkeypatch.setattr(psutil, "net_io_counters", lambda pernic=False: next(snapshots))
    networks = Networks()
    networks.refresh()
    assert networks.keys() == ["en0"]
    assert networks.get("utun1") is None
    assert networks.get("en0") == NetworkData(0, 0)


def test_uptime_from_boot_time(monkeypatch):
    monkeypatch.setattr(psutil, "boot_time", lambda: time.time() - 120)
    assert 119 <= uptime() <= 121