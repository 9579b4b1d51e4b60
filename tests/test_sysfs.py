import pytest

from hwprobe.sysfs import (
    Jiffies,
    directory_entries,
    exists,
    read_first_line,
    read_int,
    read_jiffies,
)


def test_exists_file_and_directory(tmp_path):
    target = tmp_path / "file"
    target.write_text("x")
    assert exists(target) is True
    assert exists(tmp_path) is True
    assert exists(tmp_path / "missing") is False


def test_directory_entries_lists_children(tmp_path):
    (tmp_path / "sda").mkdir()
    (tmp_path / "nvme0n1").write_text("")
    assert sorted(directory_entries(tmp_path)) == ["nvme0n1", "sda"]


def test_directory_entries_missing_is_empty(tmp_path):
    assert directory_entries(tmp_path / "missing") == []


def test_read_first_line(tmp_path):
    target = tmp_path / "vendor"
    target.write_text("ATA     \nsecond\n")
    assert read_first_line(target) == "ATA     "


def test_read_first_line_empty_file(tmp_path):
    target = tmp_path / "empty"
    target.write_text("")
    assert read_first_line(target) == ""


def test_read_first_line_missing(tmp_path):
    assert read_first_line(tmp_path / "missing") is None


def test_read_int_plain(tmp_path):
    target = tmp_path / "scaling_max_freq"
    target.write_text("2400000\n")
    assert read_int(target) == 2400000


def test_read_int_ignores_trailing_text(tmp_path):
    target = tmp_path / "value"
    target.write_text("  42 kB\n")
    assert read_int(target) == 42


@pytest.mark.parametrize("content", ["", "abc\n", "kB 42\n"])
def test_read_int_invalid_gives_minus_one(tmp_path, content):
    target = tmp_path / "value"
    target.write_text(content)
    assert read_int(target) == -1


def test_read_int_missing_gives_minus_one(tmp_path):
    assert read_int(tmp_path / "missing") == -1


def test_jiffies_default_is_minus_one():
    assert Jiffies() == Jiffies(total=-1, working=-1)


@pytest.fixture
def stat_file(tmp_path):
    target = tmp_path / "stat"
    target.write_text(
        "cpu  349585 0 30513 875546 0 935 0 0 0 0\n"
        "cpu0 10 0 0 0 0 0 0 0 0 0\n"
        "cpu1 1 2 3 4 5 6 7 8 9 10\n"
        "intr 1 2\n"
    )
    return target


def test_read_jiffies_selects_line(stat_file):
    assert read_jiffies(1, stat_file) == Jiffies(total=10, working=10)


def test_read_jiffies_sums(stat_file):
    assert read_jiffies(2, stat_file) == Jiffies(total=55, working=6)


def test_read_jiffies_working_not_above_total(stat_file):
    jiffies = read_jiffies(0, stat_file)
    assert 0 <= jiffies.working <= jiffies.total


def test_read_jiffies_missing_file(tmp_path):
    assert read_jiffies(0, tmp_path / "missing") == Jiffies()


@pytest.mark.parametrize("index", [3, 99])
def test_read_jiffies_malformed_line_raises(stat_file, index):
    with pytest.raises(ValueError):
        read_jiffies(index, stat_file)