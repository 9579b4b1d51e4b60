import math

import pytest

from hwprobe.battery import Battery, get_all_batteries


def _battery_dir(root, index, **files):
    directory = root / f"BAT{index}"
    directory.mkdir(parents=True)
    for name, value in files.items():
        (directory / name).write_text(value + "\n")
    return directory


@pytest.fixture
def supply(tmp_path):
    _battery_dir(
        tmp_path,
        0,
        manufacturer="Example Corp",
        model_name="Cell 1",
        serial_number="SN-EXAMPLE",
        technology="Li-ion",
        energy_full="50000",
        energy_now="25000",
        status="Charging",
    )
    return tmp_path


def test_text_fields(supply):
    battery = Battery(0, str(supply))
    assert battery.vendor() == "Example Corp"
    assert battery.model() == "Cell 1"
    assert battery.serial_number() == "SN-EXAMPLE"
    assert battery.technology() == "Li-ion"


def test_energy_and_capacity(supply):
    battery = Battery(0, str(supply))
    assert battery.energy_full() == 50000
    assert battery.energy_now() == 25000
    assert battery.capacity() == pytest.approx(25000 / 50000)


def test_charging_flags(supply):
    battery = Battery(0, str(supply))
    assert battery.charging() is True
    assert battery.discharging() is False
    (supply / "BAT0" / "status").write_text("Discharging\n")
    assert battery.charging() is False
    assert battery.discharging() is True


def test_missing_files_give_defaults(tmp_path):
    _battery_dir(tmp_path, 0)
    battery = Battery(0, str(tmp_path))
    assert battery.vendor() == "<unknown>"
    assert battery.energy_full() == 0
    assert battery.energy_now() == 0
    assert battery.charging() is False
    assert math.isnan(battery.capacity())


def test_non_numeric_energy_is_zero(tmp_path):
    _battery_dir(tmp_path, 0, energy_now="n/a")
    assert Battery(0, str(tmp_path)).energy_now() == 0


def test_negative_id_is_unknown(supply):
    battery = Battery(-1, str(supply))
    assert battery.vendor() == "<unknown>"
    assert battery.energy_full() == 0


def test_text_is_cached(supply):
    battery = Battery(0, str(supply))
    first = battery.vendor()
    (supply / "BAT0" / "manufacturer").write_text("Other\n")
    assert battery.vendor() == first


def test_get_all_batteries_counts_consecutive(tmp_path):
    _battery_dir(tmp_path, 0)
    _battery_dir(tmp_path, 1)
    _battery_dir(tmp_path, 3)
    batteries = get_all_batteries(str(tmp_path))
    assert [battery.id for battery in batteries] == [0, 1]


def test_get_all_batteries_empty(tmp_path):
    assert get_all_batteries(str(tmp_path)) == []