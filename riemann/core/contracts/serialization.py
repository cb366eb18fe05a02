"""
Value Contract — Сериализация значений в JSON-совместимый dict

Формат (schema/complex_value.json, schema_version "1"):
    {"schema_version": "1", "kind": "finite", "re": 2.5, "im": 3.1}
    {"schema_version": "1", "kind": "infinity"}
    {"schema_version": "1", "kind": "nan"}

Синглтоны не несут компонент: (inf, inf) / (nan, nan) не представимы
в строгом JSON и не несут информации.
"""

from typing import Any, Dict, Optional

from riemann.core.contracts.validators import validate_complex_value
from riemann.core.domain.complex_value import ComplexLike, ValueKind, is_degenerate
from riemann.core.domain.factory import ComplexFactory
from riemann.core.math.arithmetic import DEFAULT_ALGEBRA, ComplexAlgebra

SCHEMA_VERSION = "1"


def to_contract(z: ComplexLike) -> Dict[str, Any]:
    """
    Сериализация значения в dict по контракту complex_value.

    Raises:
        ValueError: Для degenerate значения (FINITE с inf/NaN компонентой)
    """
    if is_degenerate(z):
        raise ValueError(f"degenerate value ({z.re!r}, {z.im!r}) has no contract form")

    data: Dict[str, Any] = {"schema_version": SCHEMA_VERSION, "kind": z.kind.value}
    if z.kind is ValueKind.FINITE:
        data["re"] = z.re
        data["im"] = z.im
    return data


def from_contract(
    data: Dict[str, Any],
    factory: Optional[ComplexFactory] = None,
) -> ComplexLike:
    """
    Десериализация значения из dict с валидацией по схеме.

    Args:
        data: Документ complex_value
        factory: Фабрика значений (default: DefaultComplexFactory)

    Returns:
        Значение, созданное фабрикой

    Raises:
        jsonschema.ValidationError: Если документ не соответствует схеме
    """
    validate_complex_value(data)

    algebra = DEFAULT_ALGEBRA if factory is None else ComplexAlgebra(factory=factory)
    kind = ValueKind(data["kind"])
    if kind is ValueKind.INFINITY:
        return algebra.infinity
    if kind is ValueKind.NAN:
        return algebra.nan
    return algebra.canonical(float(data["re"]), float(data["im"]))
