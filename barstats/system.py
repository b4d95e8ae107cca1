"""Static host information fields."""

from __future__ import annotations

import platform
import socket
from collections.abc import Sequence
from dataclasses import dataclass

from barstats.sampling import uptime


def _os_release() -> dict[str, str]:
    try:
        return platform.freedesktop_os_release()
    except OSError:
        return {}


@dataclass(frozen=True)
class HostInfo:
    """Facts about the host; ``uptime`` is in seconds."""

    arch: str
    distro: str
    host_name: str
    kernel_version: str
    name: str
    os_version: str
    long_os_version: str
    uptime: int

    @staticmethod
    def current() -> HostInfo:
        """Read the facts of the running host."""
        system = platform.system()
        if system == "Darwin":
            version = platform.mac_ver()[0]
            distro, name, long_version = "macos", system, f"macOS {version}".strip()
        elif system == "Linux":
            release = _os_release()
            distro = release.get("ID", "linux")
            name = release.get("NAME", system)
            version = release.get("VERSION_ID", "")
            long_version = f"Linux ({release.get('PRETTY_NAME', name)})"
        else:
            version = platform.version()
            distro, name = system.lower(), system
            long_version = f"{system} {version}".strip()
        return HostInfo(
            arch=platform.machine(),
            distro=distro,
            host_name=socket.gethostname(),
            kernel_version=platform.release(),
            name=name,
            os_version=version,
            long_os_version=long_version,
            uptime=uptime(),
        )


def get_system_stats(flags: Sequence[str], host: HostInfo | None = None) -> list[str]:
    """Build host fields for the given flags, in order; reads the host when not given."""
    info = HostInfo.current() if host is None else host
    result = []
    for flag in flags:
        match flag:
            case "arch":
                result.append(f'ARCH="{info.arch}" ')
            case "distro":
                result.append(f'DISTRO="{info.distro}" ')
            case "host_name":
                result.append(f'HOST_NAME="{info.host_name}" ')
            case "kernel_version":
                result.append(f'KERNEL_VERSION="{info.kernel_version}" ')
            case "name":
                result.append(f'SYSTEM_NAME="{info.name}" ')
            case "os_version":
                result.append(f'OS_VERSION="{info.os_version}" ')
            case "long_os_version":
                result.append(f'LONG_OS_VERSION="{info.long_os_version}" ')
            case "uptime":
                result.append(f'UPTIME="{info.uptime // 60} mins" ')
    return result