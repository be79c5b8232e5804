from __future__ import annotations

"""
Power and chassis data models.

The enum values are the raw codes Windows reports in SYSTEM_POWER_STATUS
(ACLineStatus, BatteryFlag); other providers map onto the same values so the
inspector never needs to know which platform produced a snapshot.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict


# --------------------------
# Enums
# --------------------------

class ACLineStatus(IntEnum):
    OFFLINE = 0
    ONLINE = 1
    UNKNOWN = 255

    @property
    def label(self) -> str:
        return self.name.capitalize()


class BatteryChargeStatus(IntEnum):
    HIGH = 1
    LOW = 2
    CRITICAL = 4
    CHARGING = 8
    NO_SYSTEM_BATTERY = 128
    UNKNOWN = 255

    @property
    def label(self) -> str:
        return "".join(part.capitalize() for part in self.name.split("_"))

    @property
    def has_battery(self) -> bool:
        """False when the OS reports no battery or cannot read it."""
        return self not in (BatteryChargeStatus.NO_SYSTEM_BATTERY, BatteryChargeStatus.UNKNOWN)


# --------------------------
# Data models
# --------------------------

@dataclass(frozen=True)
class RawPowerStatus:
    ac_line_status: ACLineStatus
    battery_charge_status: BatteryChargeStatus
    battery_life_percent: float
    battery_life_remaining: int = -1
    battery_full_lifetime: int = -1

    @classmethod
    def unknown(cls) -> "RawPowerStatus":
        return cls(
            ac_line_status=ACLineStatus.UNKNOWN,
            battery_charge_status=BatteryChargeStatus.UNKNOWN,
            battery_life_percent=0.0,
        )


@dataclass(frozen=True)
class PowerStatusRecord:
    ac_power_line_status: ACLineStatus
    battery_charge_status: BatteryChargeStatus
    battery_life_percent: float
    battery_life_remaining: int
    battery_full_lifetime: int
    is_using_ac_power: bool
    is_laptop: bool

    def to_dict(self) -> Dict[str, object]:
        return {
            "ACPowerLineStatus": self.ac_power_line_status.label,
            "BatteryChargeStatus": self.battery_charge_status.label,
            "BatteryLifePercent": self.battery_life_percent,
            "BatteryLifeRemaining": self.battery_life_remaining,
            "BatteryFullLifetime": self.battery_full_lifetime,
            "IsUsingACPower": self.is_using_ac_power,
            "IsLaptop": self.is_laptop,
        }


# --------------------------
# Chassis types (SMBIOS / Win32_SystemEnclosure.ChassisTypes)
# --------------------------

CHASSIS_TYPE_NAMES: Dict[int, str] = {
    1: "Other",
    2: "Unknown",
    3: "Desktop",
    4: "Low Profile Desktop",
    5: "Pizza Box",
    6: "Mini Tower",
    7: "Tower",
    8: "Portable",
    9: "Laptop",
    10: "Notebook",
    11: "Hand Held",
    12: "Docking Station",
    13: "All in One",
    14: "Sub Notebook",
    15: "Space-Saving",
    16: "Lunch Box",
    17: "Main System Chassis",
    18: "Expansion Chassis",
    19: "SubChassis",
    20: "Bus Expansion Chassis",
    21: "Peripheral Chassis",
    22: "Storage Chassis",
    23: "Rack Mount Chassis",
    24: "Sealed-Case PC",
    25: "Multi-system Chassis",
    26: "Compact PCI",
    27: "Advanced TCA",
    28: "Blade",
    29: "Blade Enclosure",
    30: "Tablet",
    31: "Convertible",
    32: "Detachable",
    33: "IoT Gateway",
    34: "Embedded PC",
    35: "Mini PC",
    36: "Stick PC",
}


def chassis_type_name(code: int) -> str:
    return CHASSIS_TYPE_NAMES.get(code, f"Unknown ({code})")
