# barstats

`barstats` samples system statistics (CPU, disk, memory, network and host
information) with `psutil` and renders them as one line of `KEY="value" `
fields, meant as the payload of a `system_stats` status-bar event.

## What it reports

Each statistic is chosen by a flag. The flag lists come from functions in
`barstats.cli`:

| Group   | Flags (function)                                                                                   |
|---------|----------------------------------------------------------------------------------------------------|
| CPU     | `count`, `frequency`, `temperature`, `usage` (`all_cpu_flags()`)                                   |
| Disk    | `count`, `free`, `total`, `usage`, `used` (`all_disk_flags()`)                                     |
| Memory  | `ram_available`, `ram_total`, `ram_usage`, `ram_used` (`all_ram_flags()`) and `swp_free`, `swp_total`, `swp_usage`, `swp_used` (`all_swp_flags()`); both together from `all_memory_flags()` |
| System  | `arch`, `distro`, `host_name`, `kernel_version`, `name`, `os_version`, `long_os_version`, `uptime` (`all_system_flags()`) |
| Network | any interface name, e.g. `en0`, `eth0`, `lo0`                                                      |

A message looks like this:

```
CPU_USAGE="12%" RAM_USED="7.4GB" DISK_USAGE="48%" NETWORK_RX_en0="35KB/s" NETWORK_TX_en0="4KB/s" UPTIME="312 mins" 
```

- Sizes are in gigabytes (2^30 bytes) with one decimal; disk figures are
  summed over all mounted disks.
- Percentages are rounded to whole numbers.
- CPU frequency is the mean over logical CPUs, in MHz.
- CPU temperature is the mean of the sensors whose label contains `CPU`,
  `PMU` or `SOC`, or `N/A` when there is none.
- Network rates are the bytes moved since the previous refresh, in whole
  KB, divided by the interval.
- Uptime is in whole minutes.

Unknown flags are ignored; fields come out in the order the flags are given.

## Options

`barstats.cli.parse_args(argv)` parses a list of arguments into a `Cli`
dataclass:

- `-a`, `--all` – every statistic
- `-c`, `--cpu FLAG...` – CPU statistics
- `-d`, `--disk FLAG...` – disk statistics
- `-m`, `--memory FLAG...` – memory statistics
- `-n`, `--network IFACE...` – network rx/tx for the given interfaces
- `-s`, `--system FLAG...` – host information, produced once at start
  (`uptime` is then also produced on every refresh)
- `-i`, `--interval SECONDS` – refresh interval, a non-negative integer, default `5`
- `-b`, `--bar NAME` – bar name, stored on `Cli.bar`
- `--verbose` – print each message as it is built
- `-V`, `--version` – print the version and exit

Flags outside the lists above are rejected. With an empty argument list the
help text is printed to standard error and `SystemExit(2)` is raised.

```python
from barstats.cli import parse_args

cli = parse_args(["--cpu", "usage", "temperature", "--memory", "ram_used", "-n", "en0"])
```

## Producing messages

`barstats.provider.StatsProvider(cli)` builds the payloads:

- `initial_message()` returns the host information line when `--system` or
  `--all` was given, otherwise `None`;
- `next_message()` refreshes the samples and returns the next combined line;
- `run(send, sleep=time.sleep)` calls `send("add event", "system_stats", None)`,
  then `send("trigger", "system_stats", payload)` with the initial message
  and, after every `sleep(interval)`, with the next message. It loops until
  `send` or `sleep` raises.

The samplers, host information, temperature readings and uptime source can
be passed to `StatsProvider` as keyword arguments, which makes it usable
without touching the running system. The network sampler is rebuilt every
fifth refresh so that new or removed interfaces are noticed; on that refresh
every interface reports zero traffic.

The collectors can also be used on their own:
`barstats.cpu.get_cpu_stats`, `barstats.disk.get_disk_stats`,
`barstats.memory.get_memory_stats`, `barstats.network.get_network_stats` and
`barstats.system.get_system_stats`, each returning a list of `KEY="value" `
fragments. The samples they read come from `barstats.sampling` (`System`,
`Disks`, `Networks`, `uptime()`) and `barstats.system.HostInfo.current()`.

```python
from barstats.sampling import System
from barstats.memory import get_memory_stats

system = System()
system.refresh()
print("".join(get_memory_stats(system, ["ram_used", "ram_usage"])))
```

## What it does not do

- There is no installed command; the loop is started from Python with
  `StatsProvider.run`.
- It does not talk to a status bar. Delivering the message is up to the
  `send` callable you supply; the `--bar` option is parsed but not used by
  the package.

## Tests

The test suite uses pytest and is installed with the `test` extra.