from __future__ import annotations

import pytest

from conftest import FakeChassisProvider, FakePowerProvider, make_raw
from powerstate.config import InspectSettings
from powerstate.system import ACLineStatus, BatteryChargeStatus, PowerStatusRecord
from powerstate.system import power
from powerstate.system.power import (
    power_status,
    derive_is_laptop,
    derive_is_using_ac_power,
    normalize_life_percent,
)

NO_BATTERY = [BatteryChargeStatus.NO_SYSTEM_BATTERY, BatteryChargeStatus.UNKNOWN]
WITH_BATTERY = [
    BatteryChargeStatus.HIGH,
    BatteryChargeStatus.LOW,
    BatteryChargeStatus.CRITICAL,
    BatteryChargeStatus.CHARGING,
]


@pytest.mark.parametrize("charge", NO_BATTERY)
@pytest.mark.parametrize("raw_percent", [0.0, 0.42, 1.0])
def test_percent_forced_to_zero_without_battery(make_inspector, charge, raw_percent):
    rec = make_inspector(make_raw(charge=charge, percent=raw_percent)).inspect(full_record=True)
    assert rec.battery_life_percent == 0.0


@pytest.mark.parametrize("charge", WITH_BATTERY)
def test_percent_kept_with_battery(charge):
    assert normalize_life_percent(0.42, charge) == 0.42


@pytest.mark.parametrize("charge", NO_BATTERY + WITH_BATTERY)
def test_online_means_ac(charge):
    assert derive_is_using_ac_power(ACLineStatus.ONLINE, charge) is True


@pytest.mark.parametrize("charge", NO_BATTERY + WITH_BATTERY)
def test_offline_means_battery(charge):
    assert derive_is_using_ac_power(ACLineStatus.OFFLINE, charge) is False


@pytest.mark.parametrize("charge", NO_BATTERY)
def test_unknown_line_without_battery_assumes_ac(charge):
    assert derive_is_using_ac_power(ACLineStatus.UNKNOWN, charge) is True


@pytest.mark.parametrize("charge", WITH_BATTERY)
def test_unknown_line_with_battery_assumes_battery(charge):
    assert derive_is_using_ac_power(ACLineStatus.UNKNOWN, charge) is False


@pytest.mark.parametrize(
    "chassis, expected",
    [
        ([3], False),
        ([9], True),
        ([10], True),
        ([14], True),
        ([3, 9], True),
        ([9, 3], False),
        ([], True),
        ([7], True),
    ],
)
def test_chassis_overrides_battery_seed(make_inspector, chassis, expected):
    inspector = make_inspector(make_raw(charge=BatteryChargeStatus.HIGH), chassis=chassis)
    assert inspector.inspect(full_record=True).is_laptop is expected


def test_seed_desktop_without_battery(make_inspector):
    rec = make_inspector(make_raw(charge=BatteryChargeStatus.NO_SYSTEM_BATTERY), chassis=[]).inspect(full_record=True)
    assert rec.is_laptop is False


def test_laptop_chassis_wins_over_missing_battery(make_inspector):
    rec = make_inspector(make_raw(charge=BatteryChargeStatus.UNKNOWN), chassis=[10]).inspect(full_record=True)
    assert rec.is_laptop is True


def test_custom_chassis_sets():
    assert derive_is_laptop(BatteryChargeStatus.NO_SYSTEM_BATTERY, [31], laptop_types=[31], desktop_types=[3]) is True
    assert derive_is_laptop(BatteryChargeStatus.HIGH, [7], laptop_types=[9], desktop_types=[3, 7]) is False


def test_settings_chassis_sets_used_by_inspector(make_inspector):
    settings = InspectSettings(desktop_chassis_types=[3, 35])
    rec = make_inspector(make_raw(), chassis=[35], settings=settings).inspect(full_record=True)
    assert rec.is_laptop is False


@pytest.mark.parametrize(
    "line, charge, expected",
    [
        (ACLineStatus.ONLINE, BatteryChargeStatus.HIGH, True),
        (ACLineStatus.OFFLINE, BatteryChargeStatus.LOW, False),
        (ACLineStatus.UNKNOWN, BatteryChargeStatus.UNKNOWN, True),
    ],
)
def test_boolean_result(make_inspector, line, charge, expected):
    result = make_inspector(make_raw(line=line, charge=charge)).inspect()
    assert isinstance(result, bool)
    assert result is expected


def test_full_record(make_inspector):
    raw = make_raw(
        line=ACLineStatus.OFFLINE,
        charge=BatteryChargeStatus.LOW,
        percent=0.25,
        remaining=3600,
        full=14400,
    )
    rec = make_inspector(raw, chassis=[10]).inspect(full_record=True)
    assert rec == PowerStatusRecord(
        ac_power_line_status=ACLineStatus.OFFLINE,
        battery_charge_status=BatteryChargeStatus.LOW,
        battery_life_percent=0.25,
        battery_life_remaining=3600,
        battery_full_lifetime=14400,
        is_using_ac_power=False,
        is_laptop=True,
    )
    assert rec.to_dict() == {
        "ACPowerLineStatus": "Offline",
        "BatteryChargeStatus": "Low",
        "BatteryLifePercent": 0.25,
        "BatteryLifeRemaining": 3600,
        "BatteryFullLifetime": 14400,
        "IsUsingACPower": False,
        "IsLaptop": True,
    }


def test_each_call_queries_fresh_snapshot(make_inspector):
    inspector = make_inspector(make_raw())
    first = inspector.inspect(full_record=True)
    second = inspector.inspect(full_record=True)
    assert first == second
    assert first is not second
    assert inspector.power_provider.calls == 2


def test_logs_power_source_and_device_type(make_inspector, captured_logs):
    make_inspector(make_raw(line=ACLineStatus.OFFLINE), chassis=[3]).inspect()
    messages = [r.getMessage() for r in captured_logs.records]
    assert "System is using battery power." in messages
    assert "Chassis types reported: 3 Desktop." in messages
    assert "Device type is desktop." in messages
    assert all(r.name == "powerstate.system.power" for r in captured_logs.records)


def test_logs_unknown_line_heuristic(make_inspector, captured_logs):
    make_inspector(make_raw(line=ACLineStatus.UNKNOWN, charge=BatteryChargeStatus.NO_SYSTEM_BATTERY)).inspect()
    assert any("assuming AC power" in r.getMessage() for r in captured_logs.records)


@pytest.fixture
def default_host(monkeypatch):
    seen = []

    def power_provider(settings=None):
        seen.append(settings)
        return FakePowerProvider(make_raw(line=ACLineStatus.OFFLINE, charge=BatteryChargeStatus.LOW))

    def chassis_provider(settings=None):
        seen.append(settings)
        return FakeChassisProvider([35])

    monkeypatch.setattr(power, "default_power_provider", power_provider)
    monkeypatch.setattr(power, "default_chassis_provider", chassis_provider)
    return seen


def test_power_status_returns_bool(default_host):
    result = power_status()
    assert isinstance(result, bool)
    assert result is False


def test_power_status_full_record_uses_settings(default_host):
    settings = InspectSettings(desktop_chassis_types=[3, 35])
    rec = power_status(full_record=True, settings=settings)
    assert isinstance(rec, PowerStatusRecord)
    assert rec.is_using_ac_power is False
    assert rec.is_laptop is False
    assert default_host == [settings, settings]
