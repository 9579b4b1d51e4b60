import pytest

from hwprobe.ram import RAM, MemInfo, parse_meminfo_lines, read_meminfo

SAMPLE = [
    "MemTotal:       16000 kB\n",
    "MemFree:         2000 kB\n",
    "MemAvailable:    8000 kB\n",
    "Buffers:          100 kB\n",
]


def test_parse_all_fields():
    info = parse_meminfo_lines(SAMPLE)
    assert info == MemInfo(total=16000 * 1024, free=2000 * 1024, available=8000 * 1024)


def test_missing_fields_stay_unknown():
    info = parse_meminfo_lines(["MemFree: 5 kB\n"])
    assert info.total == -1
    assert info.available == -1
    assert info.free == 5 * 1024


def test_value_without_unit_is_ignored():
    info = parse_meminfo_lines(["MemTotal: 12\n"])
    assert info.total == -1


def test_reading_stops_when_complete():
    info = parse_meminfo_lines(SAMPLE[:3] + ["MemTotal: 1 kB\n"])
    assert info.total == 16000 * 1024


def test_non_numeric_value_raises():
    with pytest.raises(ValueError):
        parse_meminfo_lines(["MemTotal: lots kB\n"])


def test_read_meminfo_file(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text("".join(SAMPLE))
    assert read_meminfo(path) == parse_meminfo_lines(SAMPLE)


def test_partial_file_keeps_free(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text("MemFree: 7 kB\n")
    assert read_meminfo(path).free == 7 * 1024


def test_missing_file_leaves_free_unknown(tmp_path):
    assert read_meminfo(tmp_path / "absent").free == -1


def test_ram_from_system(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text("".join(SAMPLE))
    ram = RAM.from_system(path)
    assert ram.total_bytes == 16000 * 1024
    assert ram.free_bytes == 2000 * 1024
    assert ram.available_bytes == 8000 * 1024
    assert ram.vendor == "<unknown>"
    assert ram.serial_number == "<unknown>"