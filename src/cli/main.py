"""CLI principal (Typer).

Por qué Typer:
- Opciones tipadas (Enum) que se validan antes de construir dispositivos.
- Subcomandos (`doctor`) montados como apps independientes.
"""

from __future__ import annotations

import random
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from adapters.ducks import default_flock
from cli import doctor
from cli.devices import DeviceContext, InputDevice, OutputDevice, build_sink, build_source
from cli.ui_components import build_summary_panel, print_banner
from core.config import MAX_TRANSFER_COUNT, AppSettings, normalize_log_level
from core.domain.errors import CapabilityFailure
from core.domain.models import TransferSummary
from core.logging_setup import configure_logging
from core.services.flock import flight_log
from core.services.transfer import TransferHooks, copy, device_name

app = typer.Typer(no_args_is_help=True, help="Copy values from an input device to an output device.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override COPY_PROGRAM_LOG_LEVEL."),
) -> None:
    level = None
    if log_level is not None:
        try:
            level = normalize_log_level(log_level)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--log-level") from exc

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}", highlight=False)
        raise typer.Exit(code=2) from exc
    configure_logging(level or settings.log_level)


@app.command(name="copy")
def copy_command(
    input_device: InputDevice = typer.Option(InputDevice.KEYBOARD, "--input", "-i", help="Input device."),
    output_device: OutputDevice = typer.Option(OutputDevice.PRINTER, "--output", "-o", help="Output device."),
    count: Optional[int] = typer.Option(None, "--count", "-n", min=0, max=MAX_TRANSFER_COUNT, help="Values to copy (default: settings)."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for random devices."),
    summary: bool = typer.Option(True, "--summary/--no-summary", help="Show a summary panel at the end."),
    banner: bool = typer.Option(False, "--banner/--no-banner", help="Show the banner first."),
) -> None:
    """Copy values read from INPUT to OUTPUT, one at a time."""

    settings = AppSettings()
    if seed is None:
        seed = settings.random_seed
    total = settings.transfer_count if count is None else count

    if banner:
        print_banner(_console)

    ctx = DeviceContext(settings=settings, console=_console, rng=random.Random(seed))
    source = build_source(input_device, ctx)
    sink = build_sink(output_device, ctx)

    result = TransferSummary(source=device_name(source), sink=device_name(sink))
    hooks = TransferHooks(on_value=lambda _index, value: result.values.append(value))

    try:
        copy(source, sink, count=total, hooks=hooks)
        result.completed = True
    except CapabilityFailure as exc:
        result.error = str(exc)

    if summary:
        _console.print(build_summary_panel(result))
    if not result.completed:
        _console.print(f"[red]Copy failed:[/red] {escape(result.error or '')}", highlight=False)
        raise typer.Exit(code=1)


@app.command()
def ducks() -> None:
    """Release the flock; only ducks that can fly report back."""

    flock = default_flock()
    flights = flight_log(flock)
    for name, message in flights:
        _console.print(f"{name}: {message}", highlight=False)
    _console.print(f"[dim]{len(flights)}/{len(flock)} ducks flew[/dim]")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
