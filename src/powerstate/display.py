from __future__ import annotations

from typing import Any, Dict, Iterable, Tuple

from rich import box
from rich.panel import Panel
from rich.table import Table

from .logging import console


def _kv_lines(items: Iterable[Tuple[str, Any]]) -> str:
    return "\n".join(f"[bold]{k}[/]: {v}" for k, v in items)


def _seconds(value: Any) -> str:
    if value is None or value == -1:
        return "unknown"
    return f"{value}s"


def print_data(data: Any, renderable: Any, as_json: bool) -> None:
    if as_json:
        console().print_json(data=data)
    else:
        console().print(renderable)


def build_power_render(data: Dict[str, Any]) -> Panel:
    percent = data.get("BatteryLifePercent")
    content = _kv_lines([
        ("AC Line", data.get("ACPowerLineStatus")),
        ("Battery", data.get("BatteryChargeStatus")),
        ("Charge", f"{percent:.0%}" if isinstance(percent, (int, float)) else percent),
        ("Remaining", _seconds(data.get("BatteryLifeRemaining"))),
        ("Full Lifetime", _seconds(data.get("BatteryFullLifetime"))),
        ("Using AC Power", "Yes" if data.get("IsUsingACPower") else "No"),
        ("Device", "Laptop" if data.get("IsLaptop") else "Desktop"),
    ])
    return Panel(content, title="Power Status", box=box.SIMPLE)


def build_chassis_render(data: Dict[str, Any]) -> Panel | Table:
    entries = data.get("chassis", []) or []
    if not entries:
        return Panel("No chassis information reported.", title="Chassis")
    t = Table(title="Chassis Types", box=box.SIMPLE_HEAVY, show_lines=False)
    for h in ("Code", "Name", "Class"):
        t.add_column(h)
    for c in entries:
        kind = "laptop" if c.get("laptop") else "desktop" if c.get("desktop") else "-"
        t.add_row(str(c.get("code", "")), str(c.get("name", "")), kind)
    return t

