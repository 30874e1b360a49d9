"""Logging de la aplicación (Rich).

Por qué aquí:
- El Core solo usa `logging.getLogger(__name__)`; quién y cómo se renderiza
  lo decide el entrypoint (CLI) una sola vez.
- `RichHandler` escribe en stderr para no mezclar diagnósticos con la salida
  de las impresoras.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "copy-program"


def configure_logging(level: str = "WARNING", *, console: Console | None = None) -> logging.Logger:
    """Configura el logger raíz con un `RichHandler` (idempotente)."""

    root = logging.getLogger()
    root.setLevel(level)

    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    root.addHandler(handler)
    return root
