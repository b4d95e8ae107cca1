"""Command-line options for the stats provider."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass

_VERSION = "0.6.4"


@dataclass
class Cli:
    """Parsed command-line options."""

    all: bool = False
    cpu: list[str] | None = None
    disk: list[str] | None = None
    memory: list[str] | None = None
    network: list[str] | None = None
    system: list[str] | None = None
    interval: int = 5
    bar: str | None = None
    verbose: bool = False


def all_cpu_flags() -> list[str]:
    return ["count", "frequency", "temperature", "usage"]


def all_disk_flags() -> list[str]:
    return ["count", "free", "total", "usage", "used"]


def all_ram_flags() -> list[str]:
    return ["ram_available", "ram_total", "ram_usage", "ram_used"]


def all_swp_flags() -> list[str]:
    return ["swp_free", "swp_total", "swp_usage", "swp_used"]


def all_memory_flags() -> list[str]:
    return [*all_ram_flags(), *all_swp_flags()]


def all_system_flags() -> list[str]:
    return [
        "arch",
        "distro",
        "host_name",
        "kernel_version",
        "name",
        "os_version",
        "long_os_version",
        "uptime",
    ]


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid interval: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"interval must not be negative: {text!r}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="barstats",
        description="A simple system stats event provider for SketchyBar.",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_VERSION}")
    parser.add_argument("-a", "--all", action="store_true", help="Get all stats")
    parser.add_argument("-c", "--cpu", nargs="+", choices=all_cpu_flags(), help="Get CPU stats")
    parser.add_argument("-d", "--disk", nargs="+", choices=all_disk_flags(), help="Get disk stats")
    parser.add_argument(
        "-m", "--memory", nargs="+", choices=all_memory_flags(), help="Get memory stats"
    )
    parser.add_argument(
        "-n",
        "--network",
        nargs="+",
        help="Network rx/tx in KB/s. Specify network interfaces (e.g., -n eth0 en0 lo0). "
        "At least one is required.",
    )
    parser.add_argument(
        "-s", "--system", nargs="+", choices=all_system_flags(), help="Get system stats"
    )
    parser.add_argument(
        "-i", "--interval", type=_non_negative_int, default=5, help="Refresh interval in seconds"
    )
    parser.add_argument("-b", "--bar", help="Bar name (optional)")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> Cli:
    """Parse options; with no arguments at all, print help and exit."""
    args = list(sys.argv[1:] if argv is None else argv)
    parser = _build_parser()
    if not args:
        parser.print_help(sys.stderr)
        raise SystemExit(2)
    namespace = parser.parse_args(args)
    return Cli(**vars(namespace))