"""Modelos y entidades del dominio.

Por qué:
- Aquí viven el tipo `Value`, el único error del dominio y los modelos Pydantic.
- El dominio no conoce consola, CLI ni dispositivos concretos: solo conceptos del problema.
"""

from core.domain.errors import CapabilityFailure
from core.domain.models import VALUE_LIMIT, VALUE_MIN, TransferSummary, Value, validate_value

__all__ = [
	"CapabilityFailure",
	"TransferSummary",
	"VALUE_LIMIT",
	"VALUE_MIN",
	"Value",
	"validate_value",
]
