import pytest

from barstats.cpu import get_cpu_stats
from barstats.sampling import CpuSample, System


def _system(freqs, usage=0.0):
    return System(cpus=[CpuSample(f) for f in freqs], global_cpu_usage=usage)


def test_count():
    system = _system([2400] * 6)
    assert get_cpu_stats(system, ["count"], []) == [f'CPU_COUNT="{len(system.cpus)}" ']


def test_frequency_is_average_of_equal_cpus():
    system = _system([2400] * 4)
    assert get_cpu_stats(system, ["frequency"], []) == [f'CPU_FREQUENCY="{2400}MHz" ']


def test_frequency_truncates():
    assert get_cpu_stats(_system([1, 2]), ["frequency"], []) == ['CPU_FREQUENCY="1MHz" ']


def test_frequency_without_cpus_fails():
    with pytest.raises(ZeroDivisionError):
        get_cpu_stats(_system([]), ["frequency"], [])


def test_temperature_averages_cpu_sensors_only():
    readings = [("CPU die", 50.0), ("GPU", 90.0), ("SOC MTR", 60.0), ("PMU tdie", None)]
    assert get_cpu_stats(_system([1]), ["temperature"], readings) == ['CPU_TEMP="55.0°C" ']


def test_temperature_not_available():
    result = get_cpu_stats(_system([1]), ["temperature"], [("GPU", 40.0), ("CPU", None)])
    assert result == ['CPU_TEMP="N/A°C" ']


def test_usage_rounds_half_away_from_zero():
    assert get_cpu_stats(_system([1], usage=42.5), ["usage"], []) == ['CPU_USAGE="43%" ']


def test_whole_usage_is_kept():
    result = get_cpu_stats(_system([1], usage=17.0), ["usage"], [])
    assert result == [f'CPU_USAGE="{17}%" ']


def test_order_follows_flags_and_unknown_flags_are_ignored():
    system = _system([1000] * 2, usage=10.0)
    result = get_cpu_stats(system, ["usage", "bogus", "count", "frequency"], [])
    assert len(result) == 3
    assert result[0].startswith("CPU_USAGE=")
    assert result[1].startswith("CPU_COUNT=")
    assert result[2].startswith("CPU_FREQUENCY=")
    assert all(item.endswith('" ') for item in result)