"""Metric collection through psutil, with Windows-style CPU accounting."""

from __future__ import annotations

import os
import sys
from collections import deque
from dataclasses import dataclass
from datetime import datetime

import psutil

from .datatypes import (
    CpuStats,
    DiskIoStats,
    LogEntry,
    MemoryStats,
    NetworkIoStats,
    ProcessInfo,
    ProcessStatus,
    ServiceState,
    ServiceStatus,
)

_SERVICE_STATES = {
    "running": ServiceState.RUNNING,
    "stopped": ServiceState.STOPPED,
    "paused": ServiceState.PAUSED,
    "start_pending": ServiceState.START_PENDING,
    "stop_pending": ServiceState.STOP_PENDING,
    "continue_pending": ServiceState.CONTINUE_PENDING,
    "pause_pending": ServiceState.PAUSE_PENDING,
}


@dataclass
class _CpuTimes:
    idle: float
    kernel: float
    user: float


class CpuTimesTracker:
    """Turns successive cumulative CPU times into utilisation percentages.

    Kernel time is expected to include idle time.
    """

    def __init__(self) -> None:
        self._last: _CpuTimes | None = None

    def update(self, idle: float, kernel: float, user: float) -> CpuStats:
        stats = CpuStats(timestamp=datetime.now())
        current = _CpuTimes(idle, kernel, user)
        previous, self._last = self._last, current

        if previous is None:
            stats.usage_percent = 0.0
            stats.idle_percent = 100.0
            return stats

        d_idle = current.idle - previous.idle
        d_kernel = current.kernel - previous.kernel
        d_user = current.user - previous.user
        total = d_kernel + d_user

        if total > 0:
            stats.idle_percent = d_idle / total * 100.0
            stats.usage_percent = 100.0 - stats.idle_percent
            stats.user_percent = d_user / total * 100.0
            stats.system_percent = (d_kernel - d_idle) / total * 100.0
        else:
            stats.usage_percent = 0.0
            stats.idle_percent = 100.0
            stats.user_percent = 0.0
            stats.system_percent = 0.0
        return stats


_tracker = CpuTimesTracker()


def map_service_state(state: str) -> ServiceState:
    """Map a service state name to a ServiceState; unknown names give UNKNOWN."""
    return _SERVICE_STATES.get(state, ServiceState.UNKNOWN)


def get_cpu_stats() -> CpuStats:
    """CPU utilisation since the previous call; the first call reports idle."""
    try:
        times = psutil.cpu_times()
    except (psutil.Error, OSError) as exc:
        print(f"Error getting system times: {exc}", file=sys.stderr)
        return CpuStats()
    return _tracker.update(times.idle, times.system + times.idle, times.user)


def get_memory_stats() -> MemoryStats:
    """Physical memory and swap usage."""
    stats = MemoryStats()
    try:
        memory = psutil.virtual_memory()
        swap = psutil.swap_memory()
    except (psutil.Error, OSError) as exc:
        print(f"Error getting memory status: {exc}", file=sys.stderr)
        return stats
    stats.total_bytes = memory.total
    stats.free_bytes = memory.available
    stats.used_bytes = memory.total - memory.available
    stats.usage_percent = float(memory.percent)
    stats.swap_total_bytes = swap.total
    stats.swap_used_bytes = swap.used
    stats.swap_free_bytes = swap.free
    return stats


def get_disk_io_stats(disk_name: str) -> DiskIoStats:
    """Disk I/O counters summed over all physical disks, labelled with disk_name."""
    stats = DiskIoStats(disk_name=disk_name)
    try:
        counters = psutil.disk_io_counters()
    except (psutil.Error, OSError):
        counters = None
    if counters is not None:
        stats.bytes_read = counters.read_bytes
        stats.bytes_written = counters.write_bytes
        stats.reads_completed = counters.read_count
        stats.writes_completed = counters.write_count
    return stats


def get_network_io_stats() -> list[NetworkIoStats]:
    """Traffic counters for every network interface."""
    try:
        counters = psutil.net_io_counters(pernic=True)
    except (psutil.Error, OSError) as exc:
        print(f"Error getting adapters info: {exc}", file=sys.stderr)
        return []
    return [
        NetworkIoStats(
            interface_name=name,
            bytes_sent=io.bytes_sent,
            bytes_received=io.bytes_recv,
            packets_sent=io.packets_sent,
            packets_received=io.packets_recv,
            timestamp=datetime.now(),
        )
        for name, io in counters.items()
    ]


def get_process_list() -> list[ProcessInfo]:
    """Processes that can be opened, with name and working-set size."""
    processes = []
    for proc in psutil.process_iter():
        if proc.pid == 0:
            continue
        info = ProcessInfo(
            pid=proc.pid, status=ProcessStatus.RUNNING, timestamp=datetime.now()
        )
        try:
            info.memory_bytes = proc.memory_info().rss
        except (psutil.NoSuchProcess, psutil.AccessDenied):
            continue
        try:
            info.name = proc.name()
        except psutil.Error:
            pass
        processes.append(info)
    return processes


def get_service_status(service_name: str) -> ServiceStatus:
    """State of a system service; UNKNOWN when it cannot be queried."""
    status = ServiceStatus(
        name=service_name,
        display_name=service_name,
        state=ServiceState.UNKNOWN,
        timestamp=datetime.now(),
    )
    lookup = getattr(psutil, "win_service_get", None)
    if lookup is None:
        return status
    try:
        service = lookup(service_name)
        status.state = map_service_state(service.status())
    except psutil.NoSuchProcess:
        pass
    except (psutil.Error, OSError) as exc:
        print(f"Error opening service {service_name}: {exc}", file=sys.stderr)
    return status


def read_log_file(file_path: str, max_lines: int) -> list[LogEntry]:
    """The last max_lines lines of a log file as INFO entries."""
    if not os.path.exists(file_path):
        print(f"Log file does not exist: {file_path}", file=sys.stderr)
        return []
    try:
        with open(file_path, encoding="utf-8", errors="replace") as handle:
            lines = deque((line.rstrip("\n") for line in handle), maxlen=max_lines)
    except OSError:
        print(f"Error opening log file: {file_path}", file=sys.stderr)
        return []
    return [
        LogEntry(
            timestamp=datetime.now(),
            level="INFO",
            message=line,
            source_file=file_path,
        )
        for line in lines
    ]