"""Dispositivo combinado: lee y escribe.

Por qué existe:
- Demuestra que un mismo objeto puede cumplir ambos contratos y pasarse como
  fuente y como sumidero del bucle de copia.
"""

from __future__ import annotations

import random

from rich.console import Console

from core.domain.models import VALUE_LIMIT, VALUE_MIN
from core.interfaces.capabilities import Inputable, Outputable


class CrazyPrinterCopier(Inputable, Outputable):
    def __init__(self, rng: random.Random | None = None, *, console: Console | None = None) -> None:
        self._rng = rng or random.Random()
        self._console = console or Console()

    def read(self) -> int:
        return self._rng.randrange(VALUE_MIN, VALUE_LIMIT)

    def write(self, value: int) -> None:
        self._console.print(f"CrazyPrinterCopier.write prints {value}", highlight=False)
