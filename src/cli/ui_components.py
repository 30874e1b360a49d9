"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import TransferSummary


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué opcional:
    - La salida de las impresoras debe poder canalizarse (pipes) sin ruido.
    """

    title = Text("COPY PROGRAM", style="bold cyan")
    subtitle = Text("Input • Copy • Output", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_devices_table() -> Table:
    table = Table(title="Devices")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Class", style="white")
    table.add_column("Inputable", style="green")
    table.add_column("Outputable", style="magenta")
    return table


def build_summary_panel(summary: TransferSummary) -> Panel:
    """Panel para presentar el `TransferSummary` de una copia."""

    ok = summary.completed
    body = Text()
    body.append(f"{summary.source} -> {summary.sink}\n\n", style="bold")
    body.append("Values: ")
    body.append(" ".join(str(v) for v in summary.values) or "-")
    body.append(f"\nTransferred: {len(summary.values)}")
    if summary.error:
        body.append(f"\nError: {summary.error}", style="red")

    title = Text("Copy complete" if ok else "Copy aborted", style="bold green" if ok else "bold red")
    return Panel(body, title=title, border_style="green" if ok else "red")
