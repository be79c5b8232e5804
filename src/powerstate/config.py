from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field, model_validator

# SMBIOS chassis codes: 9 Laptop, 10 Notebook, 14 Sub Notebook
DEFAULT_LAPTOP_CHASSIS: list[int] = [9, 10, 14]
# 3 Desktop
DEFAULT_DESKTOP_CHASSIS: list[int] = [3]

ProviderName = Literal["auto", "windows", "psutil"]

class InspectSettings(BaseModel):
    laptop_chassis_types: List[int] = Field(default_factory=lambda: DEFAULT_LAPTOP_CHASSIS.copy())
    desktop_chassis_types: List[int] = Field(default_factory=lambda: DEFAULT_DESKTOP_CHASSIS.copy())
    provider: ProviderName = "auto"
    # Seconds allowed for the PowerShell / WMIC enclosure query
    query_timeout: float = Field(default=5.0, gt=0)

    @model_validator(mode="after")
    def _disjoint_chassis_sets(self) -> "InspectSettings":
        overlap = sorted(set(self.laptop_chassis_types) & set(self.desktop_chassis_types))
        if overlap:
            raise ValueError(f"Chassis types cannot be both laptop and desktop: {overlap}")
        return self
