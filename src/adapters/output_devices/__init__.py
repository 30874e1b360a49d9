"""Dispositivos de salida (sumideros concretos).

Cada módulo implementa `core.interfaces.capabilities.Outputable`.
"""

from adapters.output_devices.memory import MemoryRecorder
from adapters.output_devices.network_printer import NetworkPrinter
from adapters.output_devices.printer import ConsolePrinter

__all__ = [
	"ConsolePrinter",
	"MemoryRecorder",
	"NetworkPrinter",
]
