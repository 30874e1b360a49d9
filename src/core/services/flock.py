"""Flock helpers (interface segregation)."""

from __future__ import annotations

import logging
from typing import Iterable

from core.interfaces.flight import Flyable

logger = logging.getLogger(__name__)


def _name_of(duck: object) -> str:
    return getattr(duck, "name", duck.__class__.__name__)


def flight_log(ducks: Iterable[object]) -> list[tuple[str, str]]:
    """Return `(name, message)` for every duck that can fly, in order.

    Ducks are filtered by the `Flyable` contract, never by concrete type, so a
    decoy or a rubber duck is skipped without the caller knowing they exist.
    """

    flights: list[tuple[str, str]] = []
    for duck in ducks:
        name = _name_of(duck)
        if not isinstance(duck, Flyable):
            logger.debug("%s cannot fly, skipping", name)
            continue
        flights.append((name, duck.fly()))
    return flights


def fly_all(ducks: Iterable[object]) -> list[str]:
    return [message for _name, message in flight_log(ducks)]
