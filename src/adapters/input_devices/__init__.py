"""Dispositivos de entrada (fuentes concretas).

Por qué un paquete:
- Agrupa un módulo por dispositivo (teclado, lector de cinta, secuencias).
- Cada módulo implementa `core.interfaces.capabilities.Inputable`.
"""

from adapters.input_devices.keyboard import Keyboard
from adapters.input_devices.sequence import SequenceReader
from adapters.input_devices.tape_reader import TapeReader

__all__ = [
	"Keyboard",
	"SequenceReader",
	"TapeReader",
]
