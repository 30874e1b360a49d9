"""Fuente determinista: reproduce una secuencia fija.

Por qué existe:
- Permite verificar orden y conteo del bucle sin aleatoriedad.
- Una secuencia agotada es un fallo de capacidad, no un valor inventado.
"""

from __future__ import annotations

from typing import Iterable

from core.domain.errors import CapabilityFailure
from core.interfaces.capabilities import Inputable


class SequenceReader(Inputable):
    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self._position = 0

    @property
    def reads(self) -> int:
        return self._position

    def read(self) -> int:
        if self._position >= len(self._values):
            raise CapabilityFailure(
                f"sequence exhausted after {len(self._values)} values",
                capability=self.__class__.__name__,
                operation="read",
            )
        value = self._values[self._position]
        self._position += 1
        return value
