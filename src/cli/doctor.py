"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from cli.devices import INPUT_FACTORIES, OUTPUT_FACTORIES, DeviceContext
from cli.ui_components import build_devices_table
from core.config import AppSettings
from core.interfaces.capabilities import Inputable, Outputable

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


@app.command()
def run() -> None:
    """Show registered devices, their capabilities and the effective settings."""

    settings = AppSettings()
    ctx = DeviceContext(settings=settings, console=_console)

    devices = build_devices_table()
    registered = [(f"input:{k.value}", f(ctx)) for k, f in INPUT_FACTORIES.items()]
    registered += [(f"output:{k.value}", f(ctx)) for k, f in OUTPUT_FACTORIES.items()]
    for name, device in registered:
        devices.add_row(
            name,
            device.__class__.__name__,
            _yes_no(isinstance(device, Inputable)),
            _yes_no(isinstance(device, Outputable)),
        )
    _console.print(devices)

    table = Table(title="Settings")
    table.add_column("Setting", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("transfer_count", str(settings.transfer_count))
    table.add_row("random_seed", "random" if settings.random_seed is None else str(settings.random_seed))
    table.add_row("network_printer_host", settings.network_printer_host)
    table.add_row("log_level", settings.log_level)
    _console.print(table)
