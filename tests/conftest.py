from __future__ import annotations

import logging
from typing import Iterator, List, Optional

import pytest

from powerstate.config import InspectSettings
from powerstate.logging import ROOT_LOGGER
from powerstate.system import (
    ACLineStatus,
    BatteryChargeStatus,
    PowerStatusInspector,
    RawPowerStatus,
)


class FakePowerProvider:
    def __init__(self, raw: RawPowerStatus) -> None:
        self.raw = raw
        self.calls = 0

    def read_power_status(self) -> RawPowerStatus:
        self.calls += 1
        return self.raw


class FakeChassisProvider:
    def __init__(self, codes: Optional[List[int]] = None) -> None:
        self.codes = list(codes or [])

    def read_chassis_types(self) -> List[int]:
        return list(self.codes)


def make_raw(
    line: ACLineStatus = ACLineStatus.ONLINE,
    charge: BatteryChargeStatus = BatteryChargeStatus.HIGH,
    percent: float = 0.8,
    remaining: int = -1,
    full: int = -1,
) -> RawPowerStatus:
    return RawPowerStatus(
        ac_line_status=line,
        battery_charge_status=charge,
        battery_life_percent=percent,
        battery_life_remaining=remaining,
        battery_full_lifetime=full,
    )


@pytest.fixture
def make_inspector():
    def _make(raw: RawPowerStatus, chassis: Optional[List[int]] = None, settings: Optional[InspectSettings] = None) -> PowerStatusInspector:
        return PowerStatusInspector(
            power_provider=FakePowerProvider(raw),
            chassis_provider=FakeChassisProvider(chassis),
            settings=settings,
        )
    return _make


@pytest.fixture(autouse=True)
def _reset_log_level() -> Iterator[None]:
    root = logging.getLogger(ROOT_LOGGER)
    level = root.level
    yield
    root.setLevel(level)


@pytest.fixture
def captured_logs(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    # The package root does not propagate, so attach the capture handler directly.
    root = logging.getLogger(ROOT_LOGGER)
    root.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger=ROOT_LOGGER)
    try:
        yield caplog
    finally:
        root.removeHandler(caplog.handler)
