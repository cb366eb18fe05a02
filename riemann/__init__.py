"""
riemann — closed algebra of complex numbers on the Riemann sphere

Finite values, one unsigned point at infinity (INFINITY) and one
essential singularity (NAN), with arithmetic, text round-tripping and the
principal branches of exp, ln, sqrt, sin, cos and pow.

JSON interchange (riemann.core.contracts) is optional and not imported here.
"""

from riemann.core.domain import (
    ComplexFactory,
    ComplexLike,
    ComplexValue,
    DefaultComplexFactory,
    ValueKind,
    make,
)
from riemann.core.math import (
    INFINITY,
    NAN,
    ONE,
    ZERO,
    AlgebraConfig,
    ComplexAlgebra,
    ElementaryFunctions,
    add,
    conjugate,
    cos,
    divide,
    exp,
    imaginary,
    is_close_complex as is_close,
    lift,
    ln,
    multiply,
    negate,
    power,
    power_real,
    sin,
    sqrt,
    subtract,
    zero_snap,
)
from riemann.core.math import I  # noqa: E741
from riemann.core.text import (
    ComplexFormatError,
    NumberLocale,
    format_complex,
    parse_complex,
)

__version__ = "0.1.0"

__all__ = [
    # Value model
    "ComplexValue",
    "ComplexLike",
    "ValueKind",
    # Construction
    "ComplexFactory",
    "DefaultComplexFactory",
    "make",
    "lift",
    "imaginary",
    # Constants
    "ZERO",
    "ONE",
    "I",
    "INFINITY",
    "NAN",
    # Arithmetic
    "AlgebraConfig",
    "ComplexAlgebra",
    "add",
    "subtract",
    "multiply",
    "divide",
    "negate",
    "conjugate",
    "zero_snap",
    "is_close",
    # Elementary functions
    "ElementaryFunctions",
    "exp",
    "ln",
    "sqrt",
    "sin",
    "cos",
    "power",
    "power_real",
    # Text
    "ComplexFormatError",
    "NumberLocale",
    "format_complex",
    "parse_complex",
]
