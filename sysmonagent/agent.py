"""Agent that periodically collects and prints system metrics."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence
from typing import TextIO

from .datatypes import CpuStats, MemoryStats, NetworkIoStats
from .monitor import SysMonitor

_GIB = 1024.0 * 1024.0 * 1024.0
_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_cpu_stats(stats: CpuStats) -> str:
    """Render CPU stats as a text block."""
    return (
        "--- CPU Stats ---\n"
        f"Timestamp: {stats.timestamp.strftime(_TIME_FORMAT)}\n"
        f"Usage:     {stats.usage_percent:.2f}%\n"
        f"Idle:      {stats.idle_percent:.2f}%\n"
        f"User:      {stats.user_percent:.2f}%\n"
        f"System:    {stats.system_percent:.2f}%\n"
        "-----------------\n\n"
    )


def format_memory_stats(stats: MemoryStats) -> str:
    """Render memory stats as a text block, sizes in GB."""
    return (
        "--- Memory Stats ---\n"
        f"Timestamp:   {stats.timestamp.strftime(_TIME_FORMAT)}\n"
        f"Total:       {stats.total_bytes / _GIB:.2f} GB\n"
        f"Used:        {stats.used_bytes / _GIB:.2f} GB\n"
        f"Free:        {stats.free_bytes / _GIB:.2f} GB\n"
        f"Usage:       {stats.usage_percent:.2f}%\n"
        f"Swap Total:  {stats.swap_total_bytes / _GIB:.2f} GB\n"
        f"Swap Used:   {stats.swap_used_bytes / _GIB:.2f} GB\n"
        "--------------------\n\n"
    )


def format_network_io_stats(stats_list: Sequence[NetworkIoStats]) -> str:
    """Render per-interface traffic counters as a text block."""
    lines = ["--- Network I/O Stats ---"]
    if not stats_list:
        lines.append("No network interfaces found or data available.")
        return "\n".join(lines) + "\n"
    lines.append(f"Timestamp: {stats_list[0].timestamp.strftime(_TIME_FORMAT)}")
    for stats in stats_list:
        lines += [
            f"  Interface:   {stats.interface_name}",
            f"    Bytes Sent:    {stats.bytes_sent}",
            f"    Bytes Received: {stats.bytes_received}",
            f"    Packets Sent:   {stats.packets_sent}",
            f"    Packets Received: {stats.packets_received}",
            "  -----------------------",
        ]
    lines.append("-------------------------")
    return "\n".join(lines) + "\n\n"


class AgentApp:
    """Collects metrics from a monitor and writes them out at a fixed interval."""

    def __init__(
        self,
        monitor: SysMonitor | None = None,
        interval: float = 5.0,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.monitor = monitor if monitor is not None else SysMonitor()
        self.interval = interval
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        print("AgentApp initialized.", file=self.out)

    def run(self, iterations: int | None = None) -> None:
        """Collect metrics repeatedly; forever when iterations is None."""
        print(
            f"AgentApp started. Collecting metrics every {self.interval:g} seconds...",
            file=self.out,
        )
        done = 0
        while iterations is None or done < iterations:
            self.collect_metrics()
            done += 1
            if iterations is None or done < iterations:
                time.sleep(self.interval)

    def collect_metrics(self) -> None:
        """Collect one round of metrics and print them."""
        print("Collecting metrics...", file=self.out)
        try:
            self.out.write(format_cpu_stats(self.monitor.get_cpu_stats()))
            self.out.write(format_memory_stats(self.monitor.get_memory_stats()))
            self.out.write(format_network_io_stats(self.monitor.get_network_io_stats()))
        except Exception as exc:  # noqa: BLE001 - keep the agent loop alive
            print(f"Error collecting metrics: {exc}", file=self.err)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Collect and print system metrics.")
    parser.add_argument("--interval", type=float, default=5.0,
                        help="seconds between collections")
    parser.add_argument("--iterations", type=int, default=None,
                        help="stop after this many collections")
    args = parser.parse_args(argv)

    print("Starting Agent Application...")
    app = AgentApp(interval=args.interval)
    try:
        app.run(args.iterations)
    except KeyboardInterrupt:
        pass
    print("Agent Application stopped.")
    return 0


if __name__ == "__main__":
    sys.exit(main())