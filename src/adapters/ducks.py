"""Patos (segregación de interfaces).

Reglas de diseño:
- `Duck` no declara `fly`: nadie está obligado a implementar lo que no usa.
- Solo quien vuela hereda `Flyable`; `CanadaGoose` reutiliza el comportamiento
  por defecto y `Mallard` lo sobrescribe.
"""

from __future__ import annotations

from core.interfaces.flight import Flyable


class Duck:
    @property
    def name(self) -> str:
        return self.__class__.__name__


class Mallard(Duck, Flyable):
    def fly(self) -> str:
        return "yay, I can fly!"


class CanadaGoose(Duck, Flyable):
    pass


class Decoy(Duck):
    pass


class RubberDuck(Duck):
    pass


def default_flock() -> list[Duck]:
    return [Mallard(), Decoy(), CanadaGoose(), RubberDuck()]
