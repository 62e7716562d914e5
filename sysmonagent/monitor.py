"""Platform-independent access to system metrics."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any

from . import linux, windows
from .datatypes import (
    CpuStats,
    DiskIoStats,
    LogEntry,
    MemoryStats,
    NetworkIoStats,
    ProcessInfo,
    ServiceStatus,
)


class UnsupportedPlatformError(RuntimeError):
    """Raised when a metric cannot be collected on the current platform."""


_BACKENDS: dict[str, dict[str, Callable[..., Any]]] = {
    "win32": {
        "cpu": windows.get_cpu_stats,
        "memory": windows.get_memory_stats,
        "disk": windows.get_disk_io_stats,
        "network": windows.get_network_io_stats,
        "processes": windows.get_process_list,
        "service": windows.get_service_status,
        "log": windows.read_log_file,
    },
    "linux": {
        "cpu": linux.get_cpu_stats,
        "memory": linux.get_memory_stats,
    },
}


class SysMonitor:
    """Collects metrics with the backend that matches a platform name."""

    def __init__(self, platform: str | None = None) -> None:
        self.platform = sys.platform if platform is None else platform
        self._backend = _BACKENDS.get(self.platform, {})

    def _call(self, operation: str, label: str, *args: Any) -> Any:
        try:
            collector = self._backend[operation]
        except KeyError:
            raise UnsupportedPlatformError(
                f"Unsupported platform for {label}."
            ) from None
        return collector(*args)

    def get_cpu_stats(self) -> CpuStats:
        return self._call("cpu", "CPU stats")

    def get_memory_stats(self) -> MemoryStats:
        return self._call("memory", "Memory stats")

    def get_disk_io_stats(self, disk_name: str) -> DiskIoStats:
        return self._call("disk", "Disk I/O stats", disk_name)

    def get_network_io_stats(self) -> list[NetworkIoStats]:
        return self._call("network", "Network I/O stats")

    def get_process_list(self) -> list[ProcessInfo]:
        return self._call("processes", "Process list")

    def get_service_status(self, service_name: str) -> ServiceStatus:
        return self._call("service", "Service status", service_name)

    def read_log_file(self, file_path: str, max_lines: int) -> list[LogEntry]:
        return self._call("log", "Log file reading", file_path, max_lines)