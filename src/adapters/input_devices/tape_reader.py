"""Fuente: lector de cinta perforada (stub)."""

from __future__ import annotations

import random

from core.domain.models import VALUE_LIMIT, VALUE_MIN
from core.interfaces.capabilities import Inputable


class TapeReader(Inputable):
    """Simula la lectura de una posición de la cinta.

    Mismo contrato que `Keyboard`: el bucle de copia no distingue entre ambos.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def read(self) -> int:
        return self._rng.randrange(VALUE_MIN, VALUE_LIMIT)
