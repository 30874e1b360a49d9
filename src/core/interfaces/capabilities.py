"""Contratos de entrada/salida del programa de copia.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que teclados, lectores de cinta o impresoras sean intercambiables
  y testeables sin acoplar el bucle de copia a implementaciones concretas.
- Dos contratos separados: un dispositivo que solo lee no depende de `write`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Inputable(Protocol):
    """Contrato mínimo de una fuente de valores."""

    def read(self) -> int:
        """Produce un único valor en [0, 10)."""

        ...


@runtime_checkable
class Outputable(Protocol):
    """Contrato mínimo de un sumidero de valores."""

    def write(self, value: int) -> None:
        """Consume un único valor (efecto externo: consola, red, memoria...)."""

        ...
