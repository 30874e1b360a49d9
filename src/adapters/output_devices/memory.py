"""Sumidero en memoria.

Por qué existe:
- Cualquier sumidero futuro cumple el mismo contrato; este guarda los valores
  en una lista para inspeccionarlos (tests, resúmenes).
"""

from __future__ import annotations

from core.interfaces.capabilities import Outputable


class MemoryRecorder(Outputable):
    def __init__(self) -> None:
        self.values: list[int] = []

    def write(self, value: int) -> None:
        self.values.append(value)
