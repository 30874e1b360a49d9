"""Copy (transfer) loop.

The loop is the high-level policy of the program: it moves values from a
source to a sink and knows nothing about keyboards, tapes or printers. Devices
are chosen by the caller and handed in already built, so adding a new device
never touches this module.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from core.config import TRANSFER_COUNT
from core.domain.errors import CapabilityFailure
from core.domain.models import validate_value
from core.interfaces.capabilities import Inputable, Outputable

logger = logging.getLogger(__name__)


@dataclass
class TransferHooks:
    """Optional callbacks for UI layers (progress, summaries)."""

    on_value: Callable[[int, int], None] | None = None


def device_name(device: object) -> str:
    return device.__class__.__name__


def _read(source: Inputable) -> int:
    name = device_name(source)
    try:
        raw = source.read()
    except CapabilityFailure:
        raise
    except Exception as exc:
        raise CapabilityFailure(str(exc) or exc.__class__.__name__, capability=name, operation="read") from exc
    return validate_value(raw, capability=name)


def _write(sink: Outputable, value: int) -> None:
    try:
        sink.write(value)
    except CapabilityFailure:
        raise
    except Exception as exc:
        raise CapabilityFailure(
            str(exc) or exc.__class__.__name__, capability=device_name(sink), operation="write"
        ) from exc


def copy(
    source: Inputable,
    sink: Outputable,
    *,
    count: int = TRANSFER_COUNT,
    hooks: TransferHooks | None = None,
) -> None:
    """Read `count` values from `source`, writing each one to `sink` before the next read.

    Any failure of either device aborts the transfer and is raised as
    `CapabilityFailure`; values already written stay written.
    """

    if source is None or sink is None:
        raise TypeError("copy() requires both a source and a sink")
    if count < 0:
        raise ValueError("count must be >= 0")

    hooks = hooks or TransferHooks()
    logger.debug("copy %s -> %s (%d values)", device_name(source), device_name(sink), count)

    for index in range(count):
        try:
            value = _read(source)
            _write(sink, value)
        except CapabilityFailure as exc:
            logger.error("transfer aborted after %d values: %s", index, exc)
            raise
        logger.debug("value %d/%d: %d", index + 1, count, value)
        if hooks.on_value:
            hooks.on_value(index, value)
