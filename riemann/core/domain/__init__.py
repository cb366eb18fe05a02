"""
Domain models and value objects.

Contains the extended complex value (ComplexValue) and its construction seam
(ComplexFactory).
"""

from riemann.core.domain.complex_value import (
    ComplexLike,
    ComplexValue,
    ValueKind,
    argument,
    is_degenerate,
    is_infinite,
    is_nan,
    is_zero,
    modulus,
)
from riemann.core.domain.factory import (
    DEFAULT_FACTORY,
    ComplexFactory,
    DefaultComplexFactory,
    make,
)

__all__ = [
    # Value model
    "ComplexLike",
    "ComplexValue",
    "ValueKind",
    # Predicates & polar
    "argument",
    "is_degenerate",
    "is_infinite",
    "is_nan",
    "is_zero",
    "modulus",
    # Factory
    "DEFAULT_FACTORY",
    "ComplexFactory",
    "DefaultComplexFactory",
    "make",
]
