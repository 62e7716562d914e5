# sysmonagent

A small system monitoring agent. It reads CPU, memory and network I/O
statistics from the local machine and prints a report at a fixed interval.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Running the agent

```
sysmonagent
```

Options:

- `--interval SECONDS` – time between collections (default 5).
- `--iterations N` – stop after N collections; without it the agent runs
  until interrupted with Ctrl+C.

Each round prints a CPU block, a memory block (sizes in GB) and a block of
per-interface network counters, for example:

```
--- CPU Stats ---
Timestamp: 2024-01-01 12:00:00
Usage:     12.34%
Idle:      87.66%
User:      8.00%
System:    4.34%
-----------------
```

If collecting fails, the error is written to standard error as
`Error collecting metrics: ...` and the agent carries on with the next
round. Blocks already printed in that round stay printed.

### What each platform provides

On Windows (`sys.platform == "win32"`) all collectors are available: CPU
utilisation measured between successive calls (the first call reports
0% usage and 100% idle), memory and swap, network counters per interface,
disk I/O totals, the process list, service states and log file reading.

On Linux only CPU and memory are collected, from `/proc/stat` and
`/proc/meminfo`. The CPU record carries raw cycle counters; its
percentages stay at 0.00. Network, disk, process, service and log
collection raise `UnsupportedPlatformError` there, so the agent prints the
CPU and memory blocks and then reports
`Error collecting metrics: Unsupported platform for Network I/O stats.`

On any other platform every collector raises `UnsupportedPlatformError`.

## The server command

```
sysmonagent-server
```

This prints `Dies ist der Server` and exits with status 0.

## What the package does not do

The agent only prints metrics to standard output; it does not send them
anywhere. The server command does not listen for connections, receive
metrics or store them.

## Using the library

```python
from sysmonagent.monitor import SysMonitor
from sysmonagent.agent import format_cpu_stats, format_memory_stats

monitor = SysMonitor()
print(format_cpu_stats(monitor.get_cpu_stats()))
print(format_memory_stats(monitor.get_memory_stats()))
```

`SysMonitor(platform)` picks its collectors by platform name, defaulting
to `sys.platform`. Its methods are `get_cpu_stats`, `get_memory_stats`,
`get_disk_io_stats(disk_name)`, `get_network_io_stats`,
`get_process_list`, `get_service_status(service_name)` and
`read_log_file(file_path, max_lines)`.

`AgentApp(monitor, interval, out, err)` runs the collection loop;
`run(iterations)` and `collect_metrics()` drive it, and
`format_cpu_stats`, `format_memory_stats` and `format_network_io_stats`
in `sysmonagent.agent` render the text blocks.

The Linux parsers work on text you supply, which suits tests and offline
analysis:

```python
from sysmonagent.linux import parse_memory_stats

stats = parse_memory_stats("MemTotal: 1024 kB\nMemAvailable: 512 kB\n")
print(stats.used_bytes, stats.usage_percent)  # 524288 50.0
```

`sysmonagent.windows.CpuTimesTracker` turns successive cumulative idle,
kernel and user times into percentages, and `map_service_state` maps a
service state name such as `"running"` to a `ServiceState`.

The metric records (`CpuStats`, `MemoryStats`, `DiskIoStats`,
`NetworkIoStats`, `ProcessInfo`, `ServiceStatus`, `LogEntry`) and the
enums `ProcessStatus` and `ServiceState` are defined in
`sysmonagent.datatypes`.