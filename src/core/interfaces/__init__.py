"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el Core depende de abstracciones.
"""

from core.interfaces.capabilities import Inputable, Outputable
from core.interfaces.flight import Flyable

__all__ = [
	"Flyable",
	"Inputable",
	"Outputable",
]
