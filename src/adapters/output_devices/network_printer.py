"""Sumidero: impresora de red (stub).

No abre sockets: la "red" es una etiqueta con el host configurado delante de
cada línea impresa en consola.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from core.config import AppSettings
from core.interfaces.capabilities import Outputable


class NetworkPrinter(Outputable):
    def __init__(self, settings: AppSettings | None = None, *, console: Console | None = None) -> None:
        self._settings = settings or AppSettings()
        self._console = console or Console()

    @property
    def host(self) -> str:
        return self._settings.network_printer_host

    def write(self, value: int) -> None:
        self._console.print(f"NetworkPrinter.write {escape(f'[{self.host}]')} prints {value}", highlight=False)
