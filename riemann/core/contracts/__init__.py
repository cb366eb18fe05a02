"""
Contract Validation Module

Опциональный слой обмена: JSON контракт значения (schema/complex_value.json)
и его (де)сериализация. Ядро алгебры от него не зависит; импорт только
явный, через riemann.core.contracts (extra "contracts" ставит jsonschema).
"""

from .serialization import SCHEMA_VERSION, from_contract, to_contract
from .validators import (
    ComplexValueValidator,
    ContractValidator,
    SchemaLoader,
    validate_complex_value,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ComplexValueValidator",
    # Functions
    "validate_complex_value",
    "to_contract",
    "from_contract",
    # Constants
    "SCHEMA_VERSION",
]
