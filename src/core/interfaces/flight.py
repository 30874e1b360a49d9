"""Contrato de vuelo (segregación de interfaces).

Por qué fuera de `Duck`:
- Un pato de goma o un señuelo no deberían depender de un método `fly` que no
  pueden cumplir.
- El comportamiento por defecto vive una sola vez aquí; quien hereda
  explícitamente de `Flyable` lo reutiliza sin duplicarlo.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

DEFAULT_FLIGHT = "this is default behaviour"


@runtime_checkable
class Flyable(Protocol):
    def fly(self) -> str:
        """Devuelve la descripción del vuelo."""

        return DEFAULT_FLIGHT
