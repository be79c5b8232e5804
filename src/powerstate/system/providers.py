from __future__ import annotations

"""
Host power and chassis providers.

Two small capability interfaces isolate the platform-coupled queries:

- PowerInfoProvider: point-in-time power/battery snapshot
  * Windows: kernel32.GetSystemPowerStatus (SYSTEM_POWER_STATUS)
  * elsewhere: psutil.sensors_battery()
- ChassisInfoProvider: enclosure chassis type codes
  * Windows: Get-CimInstance Win32_SystemEnclosure, then wmic (fallback)
  * Linux: /sys/class/dmi/id/chassis_type

Providers never raise when the host has nothing to report; they return an
unknown snapshot or an empty list and log a warning.
"""

import ctypes
import re
import sys
from pathlib import Path
from typing import List, Optional, Protocol

import psutil

from powerstate.config import InspectSettings
from powerstate.logging import get_logger
from powerstate.system.types import ACLineStatus, BatteryChargeStatus, RawPowerStatus
from powerstate.utils import run_cmd, which

log = get_logger(__name__)

UNKNOWN_BYTE = 255
UNKNOWN_DWORD = 0xFFFFFFFF


# --------------------------
# Interfaces
# --------------------------

class PowerInfoProvider(Protocol):
    def read_power_status(self) -> RawPowerStatus: ...


class ChassisInfoProvider(Protocol):
    def read_chassis_types(self) -> List[int]: ...


def _is_windows() -> bool:
    return sys.platform.startswith("win")


# --------------------------
# SYSTEM_POWER_STATUS decoding
# --------------------------

def decode_ac_line_status(value: int) -> ACLineStatus:
    if value == 0:
        return ACLineStatus.OFFLINE
    if value == 1:
        return ACLineStatus.ONLINE
    return ACLineStatus.UNKNOWN


def decode_battery_flag(value: int) -> BatteryChargeStatus:
    """
    BatteryFlag is a bit set; collapse it to a single status.
    0 means a battery is present, not charging, between low and high.
    """
    if value == UNKNOWN_BYTE:
        return BatteryChargeStatus.UNKNOWN
    if value & BatteryChargeStatus.NO_SYSTEM_BATTERY:
        return BatteryChargeStatus.NO_SYSTEM_BATTERY
    for status in (
        BatteryChargeStatus.CHARGING,
        BatteryChargeStatus.CRITICAL,
        BatteryChargeStatus.LOW,
        BatteryChargeStatus.HIGH,
    ):
        if value & status:
            return status
    return BatteryChargeStatus.HIGH


def decode_life_percent(value: int) -> float:
    # 255 is "unknown"; surfaced as 1.0 and normalized by the inspector
    if value == UNKNOWN_BYTE:
        return 1.0
    return round(min(max(value, 0), 100) / 100.0, 2)


def decode_seconds(value: int) -> int:
    if value == UNKNOWN_DWORD or value < 0:
        return -1
    return int(value)


class SYSTEM_POWER_STATUS(ctypes.Structure):
    _fields_ = [
        ("ACLineStatus", ctypes.c_ubyte),
        ("BatteryFlag", ctypes.c_ubyte),
        ("BatteryLifePercent", ctypes.c_ubyte),
        ("SystemStatusFlag", ctypes.c_ubyte),
        ("BatteryLifeTime", ctypes.c_uint32),
        ("BatteryFullLifeTime", ctypes.c_uint32),
    ]


# --------------------------
# Power providers
# --------------------------

class WindowsPowerProvider:
    def read_power_status(self) -> RawPowerStatus:
        windll = getattr(ctypes, "windll", None)
        if windll is None:
            log.warning("GetSystemPowerStatus is only available on Windows")
            return RawPowerStatus.unknown()
        status = SYSTEM_POWER_STATUS()
        if not windll.kernel32.GetSystemPowerStatus(ctypes.byref(status)):
            log.warning("GetSystemPowerStatus failed (error %s)", windll.kernel32.GetLastError())
            return RawPowerStatus.unknown()
        return RawPowerStatus(
            ac_line_status=decode_ac_line_status(status.ACLineStatus),
            battery_charge_status=decode_battery_flag(status.BatteryFlag),
            battery_life_percent=decode_life_percent(status.BatteryLifePercent),
            battery_life_remaining=decode_seconds(status.BatteryLifeTime),
            battery_full_lifetime=decode_seconds(status.BatteryFullLifeTime),
        )


def _charge_status_from_percent(percent: float, plugged: Optional[bool]) -> BatteryChargeStatus:
    # Same thresholds Windows uses for BatteryFlag
    if plugged and percent < 100:
        return BatteryChargeStatus.CHARGING
    if percent <= 5:
        return BatteryChargeStatus.CRITICAL
    if percent < 33:
        return BatteryChargeStatus.LOW
    return BatteryChargeStatus.HIGH


class PsutilPowerProvider:
    def read_power_status(self) -> RawPowerStatus:
        sensors_func = getattr(psutil, "sensors_battery", None)
        try:
            b = sensors_func() if sensors_func else None
        except (OSError, RuntimeError) as e:
            log.warning("Battery sensors unavailable: %s", e)
            return RawPowerStatus.unknown()
        if b is None:
            return RawPowerStatus(
                ac_line_status=ACLineStatus.UNKNOWN,
                battery_charge_status=BatteryChargeStatus.NO_SYSTEM_BATTERY,
                battery_life_percent=0.0,
            )

        if b.power_plugged is None:
            line = ACLineStatus.UNKNOWN
        else:
            line = ACLineStatus.ONLINE if b.power_plugged else ACLineStatus.OFFLINE

        secs = b.secsleft
        if secs is None or secs in (psutil.POWER_TIME_UNLIMITED, psutil.POWER_TIME_UNKNOWN):
            remaining = -1
        else:
            remaining = max(int(secs), -1)

        return RawPowerStatus(
            ac_line_status=line,
            battery_charge_status=_charge_status_from_percent(b.percent, b.power_plugged),
            battery_life_percent=round(min(max(float(b.percent), 0.0), 100.0) / 100.0, 2),
            battery_life_remaining=remaining,
        )


# --------------------------
# Chassis providers
# --------------------------

def parse_chassis_output(text: str) -> List[int]:
    """Pull chassis codes out of PowerShell lines or wmic '{9,10}' rows."""
    return [int(m) for m in re.findall(r"\d+", text or "")]


class WindowsChassisProvider:
    def __init__(self, timeout: float = 5.0) -> None:
        self.timeout = timeout

    def read_chassis_types(self) -> List[int]:
        if which("powershell"):
            rc, out, _ = run_cmd([
                "powershell", "-NoProfile", "-Command",
                "(Get-CimInstance -ClassName Win32_SystemEnclosure).ChassisTypes",
            ], timeout=self.timeout)
            if rc == 0 and out.strip():
                return parse_chassis_output(out)
        if which("wmic"):
            rc, out, _ = run_cmd(["wmic", "systemenclosure", "get", "chassistypes"], timeout=self.timeout)
            if rc == 0 and out.strip():
                return parse_chassis_output(out)
        log.warning("No chassis information returned by Win32_SystemEnclosure")
        return []


class DmiChassisProvider:
    def __init__(self, path: Path = Path("/sys/class/dmi/id/chassis_type")) -> None:
        self.path = path

    def read_chassis_types(self) -> List[int]:
        try:
            text = self.path.read_text(encoding="utf-8", errors="ignore")
        except OSError:
            log.warning("Chassis type not readable at %s", self.path)
            return []
        return parse_chassis_output(text)


# --------------------------
# Selection
# --------------------------

def default_power_provider(settings: Optional[InspectSettings] = None) -> PowerInfoProvider:
    choice = (settings or InspectSettings()).provider
    if choice == "windows" or (choice == "auto" and _is_windows()):
        return WindowsPowerProvider()
    return PsutilPowerProvider()


def default_chassis_provider(settings: Optional[InspectSettings] = None) -> ChassisInfoProvider:
    s = settings or InspectSettings()
    if s.provider == "windows" or (s.provider == "auto" and _is_windows()):
        return WindowsChassisProvider(timeout=s.query_timeout)
    return DmiChassisProvider()
