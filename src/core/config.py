"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (impresora de red, fuentes aleatorias) lean config
  de forma consistente.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

TRANSFER_COUNT = 10
MAX_TRANSFER_COUNT = 10_000

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def normalize_log_level(value: str) -> str:
    """Normaliza un nivel de logging; `ValueError` si no es uno de `_LOG_LEVELS`."""

    level = value.strip().upper()
    if level not in _LOG_LEVELS:
        raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
    return level


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="COPY_PROGRAM_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    transfer_count: int = Field(
        default=TRANSFER_COUNT,
        ge=0,
        le=MAX_TRANSFER_COUNT,
        description="Número de lecturas/escrituras por invocación del bucle de copia.",
    )
    random_seed: int | None = Field(
        default=None,
        description="Semilla para las fuentes aleatorias (teclado/cinta). None = no determinista.",
    )
    network_printer_host: str = Field(
        default="printer.local",
        min_length=1,
        max_length=253,
        description="Host que etiqueta la salida de la impresora de red.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (CRITICAL/ERROR/WARNING/INFO/DEBUG).",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return normalize_log_level(value)
