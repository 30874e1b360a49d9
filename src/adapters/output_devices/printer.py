"""Sumidero: impresora de consola (Rich).

Formato de línea: `<Dispositivo>.write prints <valor>`.
"""

from __future__ import annotations

from rich.console import Console

from core.interfaces.capabilities import Outputable


class ConsolePrinter(Outputable):
    """Imprime cada valor en la consola."""

    label = "Printer"

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def write(self, value: int) -> None:
        self._console.print(f"{self.label}.write prints {value}", highlight=False)
