"""Errores del dominio.

Por qué un único tipo:
- Un dispositivo que no puede leer o escribir es siempre el mismo problema
  para quien llama al bucle de copia: la transferencia se aborta.
- `capability` y `operation` conservan el contexto sin exponer el tipo concreto.
"""

from __future__ import annotations


class CapabilityFailure(Exception):
    """Fallo de una capacidad de entrada (`read`) o salida (`write`)."""

    def __init__(self, message: str, *, capability: str | None = None, operation: str | None = None) -> None:
        super().__init__(message)
        self.capability = capability
        self.operation = operation

    def __str__(self) -> str:
        base = super().__str__()
        if self.capability and self.operation:
            return f"{self.capability}.{self.operation}: {base}"
        return base
