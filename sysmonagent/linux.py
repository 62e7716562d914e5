"""Metric collection from the Linux proc filesystem."""

from __future__ import annotations

from datetime import datetime

from .datatypes import CpuStats, MemoryStats

PROC_STAT = "/proc/stat"
PROC_MEMINFO = "/proc/meminfo"

_CPU_FIELDS = 10
_KIB = 1024


def parse_cpu_stats(text: str) -> CpuStats:
    """Build CPU cycle counters from the aggregate line of /proc/stat."""
    first_line = text.splitlines()[0] if text else ""
    tokens = first_line.split()[1:]
    values = [int(token) for token in tokens[:_CPU_FIELDS]]
    values += [0] * (_CPU_FIELDS - len(values))
    user, nice, system, idle, iowait, irq, softirq, steal, _guest, _guest_nice = values

    user_cycles = user + nice
    return CpuStats(
        user_cycles=user_cycles,
        system_cycles=system,
        idle_cycles=idle,
        total_cycles=user_cycles + system + idle + iowait + irq + softirq + steal,
        usage_percent=0.0,
        idle_percent=0.0,
        timestamp=datetime.now(),
    )


def _kib_value(rest: str, label: str) -> int:
    parts = rest.split()
    if not parts:
        raise ValueError(f"missing value for {label}")
    return int(parts[0]) * _KIB


def parse_memory_stats(text: str) -> MemoryStats:
    """Build memory usage from the contents of /proc/meminfo."""
    values = {"MemTotal": 0, "MemAvailable": 0, "SwapTotal": 0, "SwapFree": 0}
    for line in text.splitlines():
        label, sep, rest = line.partition(":")
        if sep and label in values:
            values[label] = _kib_value(rest, label)

    total = values["MemTotal"]
    free = values["MemAvailable"]
    used = total - free
    swap_total = values["SwapTotal"]
    swap_free = values["SwapFree"]
    return MemoryStats(
        total_bytes=total,
        free_bytes=free,
        used_bytes=used,
        usage_percent=used / total * 100.0 if total > 0 else 0.0,
        swap_total_bytes=swap_total,
        swap_free_bytes=swap_free,
        swap_used_bytes=swap_total - swap_free,
        timestamp=datetime.now(),
    )


def get_cpu_stats(path: str = PROC_STAT) -> CpuStats:
    """Read CPU counters; an unreadable file yields empty stats."""
    try:
        with open(path, encoding="ascii") as handle:
            text = handle.read()
    except OSError:
        return CpuStats()
    return parse_cpu_stats(text)


def get_memory_stats(path: str = PROC_MEMINFO) -> MemoryStats:
    """Read memory usage; an unreadable file yields empty stats."""
    try:
        with open(path, encoding="ascii") as handle:
            text = handle.read()
    except OSError:
        return MemoryStats()
    return parse_memory_stats(text)