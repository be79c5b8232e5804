from __future__ import annotations

import logging

import typer

from powerstate.config import InspectSettings
from powerstate.display import build_chassis_render, build_power_render, print_data
from powerstate.logging import console, set_level
from powerstate.system import PowerStatusInspector, PowerStatusRecord, chassis_info

app = typer.Typer(
    name="powerstate",
    add_completion=True,
    no_args_is_help=True,
    help="Detect AC/battery power and laptop/desktop chassis for deployment scripts.",
)

@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log warnings and errors."),
) -> None:
    if verbose:
        set_level(logging.DEBUG)
    elif quiet:
        set_level(logging.WARNING)


def _settings(provider: str) -> InspectSettings:
    try:
        return InspectSettings(provider=provider)
    except ValueError as e:
        raise typer.BadParameter(f"Unknown provider '{provider}'.", param_hint="--provider") from e


@app.command("status")
def status_cmd(
    full: bool = typer.Option(False, "--full", "--passthru", help="Show the full power record instead of a boolean."),
    json: bool = typer.Option(False, "--json", help="Raw JSON output."),
    exit_code: bool = typer.Option(False, "--exit-code", help="Exit 0 on AC power, 1 on battery."),
    provider: str = typer.Option("auto", "--provider", help="Power provider: auto, windows or psutil."),
) -> None:
    """Report whether the machine is on AC power (or the full record with --full)."""
    settings = _settings(provider)
    result = PowerStatusInspector(settings=settings).inspect(full_record=full)
    if isinstance(result, PowerStatusRecord):
        data = result.to_dict()
        print_data(data, build_power_render(data), json)
        on_ac = result.is_using_ac_power
    else:
        if json:
            console().print_json(data=result)
        else:
            console().print(str(result), highlight=False)
        on_ac = result
    if exit_code and not on_ac:
        raise typer.Exit(code=1)


@app.command("chassis")
def chassis_cmd(
    json: bool = typer.Option(False, "--json", help="Raw JSON output."),
    provider: str = typer.Option("auto", "--provider", help="Provider: auto, windows or psutil (DMI sysfs on Linux)."),
) -> None:
    """List the chassis type codes reported by the hardware enclosure."""
    data = chassis_info(_settings(provider))
    print_data(data, build_chassis_render(data), json)


if __name__ == "__main__":
    app()
