from __future__ import annotations

from typing import Dict, Iterable, Optional, Union

from powerstate.config import InspectSettings
from powerstate.logging import get_logger
from powerstate.system.providers import (
    ChassisInfoProvider,
    PowerInfoProvider,
    default_chassis_provider,
    default_power_provider,
)
from powerstate.system.types import (
    ACLineStatus,
    BatteryChargeStatus,
    PowerStatusRecord,
    chassis_type_name,
)

log = get_logger(__name__)


def normalize_life_percent(percent: float, charge: BatteryChargeStatus) -> float:
    # Missing or damaged batteries can report 1.0
    if not charge.has_battery:
        return 0.0
    return percent


def derive_is_using_ac_power(line: ACLineStatus, charge: BatteryChargeStatus) -> bool:
    if line == ACLineStatus.ONLINE:
        return True
    if line == ACLineStatus.OFFLINE:
        return False
    # Unknown line status: without a readable battery the machine must be on mains
    return not charge.has_battery


def derive_is_laptop(
    charge: BatteryChargeStatus,
    chassis_types: Iterable[int],
    laptop_types: Iterable[int],
    desktop_types: Iterable[int],
) -> bool:
    """
    Seed from battery presence, then let chassis codes override it.
    Codes are applied in the order given; the last matching code wins.
    """
    laptop = set(laptop_types)
    desktop = set(desktop_types)
    is_laptop = charge.has_battery
    for code in chassis_types:
        if code in laptop:
            is_laptop = True
        elif code in desktop:
            is_laptop = False
    return is_laptop


class PowerStatusInspector:
    """Classify the host as AC/battery powered and laptop/desktop."""

    def __init__(
        self,
        power_provider: Optional[PowerInfoProvider] = None,
        chassis_provider: Optional[ChassisInfoProvider] = None,
        settings: Optional[InspectSettings] = None,
    ) -> None:
        self.settings = settings or InspectSettings()
        self.power_provider = power_provider or default_power_provider(self.settings)
        self.chassis_provider = chassis_provider or default_chassis_provider(self.settings)

    def record(self) -> PowerStatusRecord:
        raw = self.power_provider.read_power_status()
        charge = raw.battery_charge_status
        line = raw.ac_line_status

        on_ac = derive_is_using_ac_power(line, charge)
        if line == ACLineStatus.UNKNOWN:
            if on_ac:
                log.info("Power line status is unknown and no battery was detected (%s); assuming AC power.", charge.label)
            else:
                log.info("Power line status is unknown but a battery is present (%s); assuming battery power.", charge.label)
        elif on_ac:
            log.info("System is using AC power.")
        else:
            log.info("System is using battery power.")

        chassis = self.chassis_provider.read_chassis_types()
        is_laptop = derive_is_laptop(
            charge,
            chassis,
            self.settings.laptop_chassis_types,
            self.settings.desktop_chassis_types,
        )
        if charge.has_battery:
            log.info("Battery detected (%s); device seeded as laptop.", charge.label)
        else:
            log.info("No system battery (%s); device seeded as desktop.", charge.label)
        if chassis:
            names = ", ".join(f"{c} {chassis_type_name(c)}" for c in chassis)
            log.info("Chassis types reported: %s.", names)
        else:
            log.debug("No chassis types reported; keeping battery-based classification.")
        log.info("Device type is %s.", "laptop" if is_laptop else "desktop")

        return PowerStatusRecord(
            ac_power_line_status=line,
            battery_charge_status=charge,
            battery_life_percent=normalize_life_percent(raw.battery_life_percent, charge),
            battery_life_remaining=raw.battery_life_remaining,
            battery_full_lifetime=raw.battery_full_lifetime,
            is_using_ac_power=on_ac,
            is_laptop=is_laptop,
        )

    def inspect(self, full_record: bool = False) -> Union[bool, PowerStatusRecord]:
        rec = self.record()
        if full_record:
            return rec
        return rec.is_using_ac_power


def power_status(
    full_record: bool = False,
    settings: Optional[InspectSettings] = None,
) -> Union[bool, PowerStatusRecord]:
    return PowerStatusInspector(settings=settings).inspect(full_record=full_record)


def chassis_info(settings: Optional[InspectSettings] = None) -> Dict[str, object]:
    s = settings or InspectSettings()
    codes = default_chassis_provider(s).read_chassis_types()
    return {
        "chassis": [
            {
                "code": c,
                "name": chassis_type_name(c),
                "laptop": c in s.laptop_chassis_types,
                "desktop": c in s.desktop_chassis_types,
            }
            for c in codes
        ],
    }
