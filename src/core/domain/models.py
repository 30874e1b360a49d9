"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- El rango de `Value` se declara una sola vez (Field) y se valida en el borde
  entre el bucle de copia y los dispositivos.
- Facilita serializar el resumen de una transferencia para la CLI.

Nota:
- Estos modelos describen *qué* se transfiere, no *cómo* se lee o escribe.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, Field, StrictInt, TypeAdapter, ValidationError

from core.domain.errors import CapabilityFailure

VALUE_MIN = 0
VALUE_LIMIT = 10

Value = Annotated[StrictInt, Field(ge=VALUE_MIN, lt=VALUE_LIMIT)]

_VALUE_ADAPTER: TypeAdapter[int] = TypeAdapter(Value)


def validate_value(raw: Any, *, capability: str | None = None) -> int:
    """Valida que `raw` sea un `Value` en [0, 10).

    Por qué `StrictInt`:
    - Un dispositivo que devuelve `"7"`, `7.0` o `True` no cumple el contrato;
      no queremos coerciones silenciosas.
    """

    try:
        return _VALUE_ADAPTER.validate_python(raw)
    except ValidationError as exc:
        raise CapabilityFailure(
            f"produced {raw!r}, expected an integer in [{VALUE_MIN}, {VALUE_LIMIT})",
            capability=capability,
            operation="read",
        ) from exc


class TransferSummary(BaseModel):
    """Resumen de una invocación del bucle de copia (solo presentación).

    Por qué es un modelo separado:
    - El bucle no devuelve nada; la CLI compone este resumen a partir de hooks.
    """

    source: str = Field(
        ...,
        min_length=1,
        description="Nombre del dispositivo de entrada.",
    )
    sink: str = Field(
        ...,
        min_length=1,
        description="Nombre del dispositivo de salida.",
    )
    values: list[Value] = Field(
        default_factory=list,
        description="Valores escritos con éxito, en orden.",
    )
    completed: bool = Field(
        default=False,
        description="Indica si la transferencia llegó al final sin fallos.",
    )
    error: str | None = Field(
        default=None,
        description="Texto del fallo de capacidad que abortó la transferencia.",
    )
