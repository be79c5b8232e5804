from __future__ import annotations

from .types import (
    ACLineStatus,
    BatteryChargeStatus,
    RawPowerStatus,
    PowerStatusRecord,
    CHASSIS_TYPE_NAMES,
    chassis_type_name,
)
from .providers import (
    PowerInfoProvider,
    ChassisInfoProvider,
    WindowsPowerProvider,
    PsutilPowerProvider,
    WindowsChassisProvider,
    DmiChassisProvider,
    default_power_provider,
    default_chassis_provider,
)
from .power import PowerStatusInspector, power_status, chassis_info

__all__ = [
    "ACLineStatus",
    "BatteryChargeStatus",
    "RawPowerStatus",
    "PowerStatusRecord",
    "CHASSIS_TYPE_NAMES",
    "chassis_type_name",
    "PowerInfoProvider",
    "ChassisInfoProvider",
    "WindowsPowerProvider",
    "PsutilPowerProvider",
    "WindowsChassisProvider",
    "DmiChassisProvider",
    "default_power_provider",
    "default_chassis_provider",
    "PowerStatusInspector",
    "power_status",
    "chassis_info",
]
