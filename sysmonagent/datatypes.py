"""Metric records produced by the system monitor."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto


@dataclass
class CpuStats:
    """Processor utilisation and raw cycle counters."""

    usage_percent: float = 0.0
    idle_percent: float = 0.0
    user_percent: float = 0.0
    system_percent: float = 0.0
    core_usages: dict[str, float] = field(default_factory=dict)
    total_cycles: int = 0
    idle_cycles: int = 0
    user_cycles: int = 0
    system_cycles: int = 0
    interrupt_cycles: int = 0
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class MemoryStats:
    """Physical memory and swap usage in bytes."""

    total_bytes: int = 0
    used_bytes: int = 0
    free_bytes: int = 0
    usage_percent: float = 0.0
    swap_total_bytes: int = 0
    swap_used_bytes: int = 0
    swap_free_bytes: int = 0
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class DiskIoStats:
    """Cumulative I/O counters of one disk."""

    disk_name: str = ""
    bytes_read: int = 0
    bytes_written: int = 0
    reads_completed: int = 0
    writes_completed: int = 0
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class NetworkIoStats:
    """Cumulative traffic counters of one network interface."""

    interface_name: str = ""
    bytes_sent: int = 0
    bytes_received: int = 0
    packets_sent: int = 0
    packets_received: int = 0
    timestamp: datetime = field(default_factory=datetime.now)


class ProcessStatus(Enum):
    """Scheduling state of a process."""

    RUNNING = auto()
    SLEEPING = auto()
    STOPPED = auto()
    ZOMBIE = auto()
    UNKNOWN = auto()


@dataclass
class ProcessInfo:
    """One entry of the process list."""

    pid: int = 0
    name: str = ""
    user: str = ""
    cpu_percent: float = 0.0
    memory_bytes: int = 0
    status: ProcessStatus = ProcessStatus.UNKNOWN
    command_line: str = ""
    timestamp: datetime = field(default_factory=datetime.now)


class ServiceState(Enum):
    """State of a system service."""

    RUNNING = auto()
    STOPPED = auto()
    PAUSED = auto()
    START_PENDING = auto()
    STOP_PENDING = auto()
    CONTINUE_PENDING = auto()
    PAUSE_PENDING = auto()
    UNKNOWN = auto()


@dataclass
class ServiceStatus:
    """State of a named system service."""

    name: str = ""
    display_name: str = ""
    state: ServiceState = ServiceState.UNKNOWN
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class LogEntry:
    """One line read from a log file."""

    timestamp: datetime = field(default_factory=datetime.now)
    level: str = ""
    message: str = ""
    source_file: str = ""