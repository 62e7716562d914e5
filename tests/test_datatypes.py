from datetime import datetime, timedelta

from sysmonagent.datatypes import (
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


def test_cpu_stats_defaults_are_zero():
    stats = CpuStats()
    assert stats.usage_percent == 0.0
    assert stats.total_cycles == 0
    assert stats.core_usages == {}


def test_core_usages_not_shared_between_instances():
    first = CpuStats()
    second = CpuStats()
    first.core_usages["cpu0"] = 50.0
    assert second.core_usages == {}


def test_timestamp_defaults_to_now():
    before = datetime.now()
    stats = MemoryStats()
    after = datetime.now()
    assert before <= stats.timestamp <= after


def test_timestamps_are_independent():
    first = NetworkIoStats(interface_name="eth0")
    second = NetworkIoStats(interface_name="eth1")
    assert abs(second.timestamp - first.timestamp) < timedelta(seconds=5)
    assert first.interface_name == "eth0"
    assert second.interface_name == "eth1"


def test_disk_io_stats_keeps_fields():
    stats = DiskIoStats(disk_name="C:", bytes_read=10, bytes_written=20)
    assert (stats.disk_name, stats.bytes_read, stats.bytes_written) == ("C:", 10, 20)
    assert stats.reads_completed == 0


def test_process_status_members():
    infos = [ProcessInfo(pid=index, status=status) for index, status in enumerate(ProcessStatus)]
    assert [info.status.name for info in infos] == [
        "RUNNING",
        "SLEEPING",
        "STOPPED",
        "ZOMBIE",
        "UNKNOWN",
    ]


def test_service_state_members_unique():
    statuses = [ServiceStatus(name="svc", display_name="svc", state=state) for state in ServiceState]
    values = [status.state.value for status in statuses]
    assert len(values) == len(set(values))
    assert ServiceStatus(name="svc", state=ServiceState["START_PENDING"]).state is ServiceState.START_PENDING


def test_process_info_default_status_unknown():
    info = ProcessInfo(pid=42, name="init")
    assert info.status is ProcessStatus.UNKNOWN
    assert info.pid == 42


def test_service_status_default_state_unknown():
    status = ServiceStatus(name="svc", display_name="svc")
    assert status.state is ServiceState.UNKNOWN


def test_log_entry_equality():
    stamp = datetime(2024, 1, 1)
    a = LogEntry(timestamp=stamp, level="INFO", message="hi", source_file="x.log")
    b = LogEntry(timestamp=stamp, level="INFO", message="hi", source_file="x.log")
    assert a == b