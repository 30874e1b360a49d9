"""Registro de dispositivos (composition root).

Por qué aquí y no en el Core:
- Elegir un dispositivo concreto a partir de un nombre es un detalle de la CLI.
- El bucle de copia recibe instancias ya construidas; no hay flags de modo.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from rich.console import Console

from adapters.crazy_printer_copier import CrazyPrinterCopier
from adapters.input_devices import Keyboard, TapeReader
from adapters.output_devices import ConsolePrinter, NetworkPrinter
from core.config import AppSettings
from core.interfaces.capabilities import Inputable, Outputable


class InputDevice(str, Enum):
    KEYBOARD = "keyboard"
    TAPE = "tape"
    CRAZY = "crazy"


class OutputDevice(str, Enum):
    PRINTER = "printer"
    NETWORK = "network"
    CRAZY = "crazy"


@dataclass
class DeviceContext:
    """Dependencias compartidas por las factorías de dispositivos."""

    settings: AppSettings
    console: Console
    rng: random.Random = field(default_factory=random.Random)
    shared: dict[str, object] = field(default_factory=dict)

    def crazy(self) -> CrazyPrinterCopier:
        """Una única instancia por contexto: fuente y sumidero son el mismo objeto."""

        device = self.shared.get("crazy")
        if device is None:
            device = CrazyPrinterCopier(self.rng, console=self.console)
            self.shared["crazy"] = device
        return device  # type: ignore[return-value]


INPUT_FACTORIES: dict[InputDevice, Callable[[DeviceContext], Inputable]] = {
    InputDevice.KEYBOARD: lambda ctx: Keyboard(ctx.rng),
    InputDevice.TAPE: lambda ctx: TapeReader(ctx.rng),
    InputDevice.CRAZY: lambda ctx: ctx.crazy(),
}

OUTPUT_FACTORIES: dict[OutputDevice, Callable[[DeviceContext], Outputable]] = {
    OutputDevice.PRINTER: lambda ctx: ConsolePrinter(ctx.console),
    OutputDevice.NETWORK: lambda ctx: NetworkPrinter(ctx.settings, console=ctx.console),
    OutputDevice.CRAZY: lambda ctx: ctx.crazy(),
}


def build_source(device: InputDevice, ctx: DeviceContext) -> Inputable:
    return INPUT_FACTORIES[device](ctx)


def build_sink(device: OutputDevice, ctx: DeviceContext) -> Outputable:
    return OUTPUT_FACTORIES[device](ctx)
