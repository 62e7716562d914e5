import pytest

from sysmonagent.linux import (
    get_cpu_stats,
    get_memory_stats,
    parse_cpu_stats,
    parse_memory_stats,
)

STAT = "cpu  10 2 3 40 5 6 7 8 9 10\ncpu0 1 1 1 1 1 1 1 1 1 1\n"
MEMINFO = (
    "MemTotal:        1000 kB\n"
    "MemFree:          100 kB\n"
    "MemAvailable:     250 kB\n"
    "SwapTotal:        400 kB\n"
    "SwapFree:         300 kB\n"
)


def test_parse_cpu_user_includes_nice():
    stats = parse_cpu_stats(STAT)
    assert stats.user_cycles == 10 + 2
    assert stats.system_cycles == 3
    assert stats.idle_cycles == 40


def test_parse_cpu_total_excludes_guest():
    stats = parse_cpu_stats(STAT)
    assert stats.total_cycles == 10 + 2 + 3 + 40 + 5 + 6 + 7 + 8


def test_parse_cpu_percentages_left_zero():
    stats = parse_cpu_stats(STAT)
    assert stats.usage_percent == 0.0
    assert stats.idle_percent == 0.0


def test_parse_cpu_short_line_pads_missing_fields():
    stats = parse_cpu_stats("cpu 1 2 3 4\n")
    assert stats.total_cycles == stats.user_cycles + stats.system_cycles + stats.idle_cycles


def test_parse_cpu_rejects_garbage():
    with pytest.raises(ValueError):
        parse_cpu_stats("cpu a b c d\n")


def test_parse_memory_converts_kib():
    stats = parse_memory_stats(MEMINFO)
    assert stats.total_bytes == 1000 * 1024
    assert stats.free_bytes == 250 * 1024
    assert stats.used_bytes + stats.free_bytes == stats.total_bytes


def test_parse_memory_usage_percent():
    stats = parse_memory_stats(MEMINFO)
    assert stats.usage_percent == pytest.approx(75.0)


def test_parse_memory_swap():
    stats = parse_memory_stats(MEMINFO)
    assert stats.swap_total_bytes == 400 * 1024
    assert stats.swap_used_bytes + stats.swap_free_bytes == stats.swap_total_bytes


def test_parse_memory_zero_total_keeps_zero_usage():
    stats = parse_memory_stats("MemFree: 10 kB\n")
    assert stats.total_bytes == 0
    assert stats.usage_percent == 0.0


def test_parse_memory_rejects_missing_value():
    with pytest.raises(ValueError):
        parse_memory_stats("MemTotal:\n")


def test_get_cpu_stats_reads_file(tmp_path):
    path = tmp_path / "stat"
    path.write_text(STAT)
    assert get_cpu_stats(str(path)) == parse_cpu_stats(STAT).__class__(
        **{**parse_cpu_stats(STAT).__dict__, "timestamp": get_cpu_stats(str(path)).timestamp}
    )


def test_get_cpu_stats_missing_file(tmp_path):
    stats = get_cpu_stats(str(tmp_path / "absent"))
    assert stats.total_cycles == 0
    assert stats.user_cycles == 0


def test_get_memory_stats_reads_file(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text(MEMINFO)
    stats = get_memory_stats(str(path))
    assert stats.total_bytes == 1000 * 1024


def test_get_memory_stats_missing_file(tmp_path):
    stats = get_memory_stats(str(tmp_path / "absent"))
    assert stats.total_bytes == 0
    assert stats.usage_percent == 0.0