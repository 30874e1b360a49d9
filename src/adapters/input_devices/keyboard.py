"""Fuente: teclado (stub).

No hay teclado real: cada pulsación se simula con un valor aleatorio en [0, 10).
"""

from __future__ import annotations

import random

from core.domain.models import VALUE_LIMIT, VALUE_MIN
from core.interfaces.capabilities import Inputable


class Keyboard(Inputable):
    """Simula la lectura de una tecla."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def read(self) -> int:
        return self._rng.randrange(VALUE_MIN, VALUE_LIMIT)
