from __future__ import annotations

from .config import InspectSettings
from .system import PowerStatusInspector, PowerStatusRecord, power_status

__version__ = "0.1.0"

__all__ = [
    "InspectSettings",
    "PowerStatusInspector",
    "PowerStatusRecord",
    "power_status",
]
