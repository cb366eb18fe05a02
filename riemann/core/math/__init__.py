"""
Core math modules

Extended arithmetic, elementary functions and the float safeguards beneath them.
"""

# Numerical Safeguards
from riemann.core.math.numerical_safeguards import (
    # Epsilon constants
    DEFAULT_ZERO_SNAP_PRECISION,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Float classification
    has_inf,
    has_nan,
    is_valid_float,
    # Epsilon comparisons
    is_close,
    snap_to_zero,
    to_float,
    # Overflow-safe primitives
    safe_cosh,
    safe_exp,
    safe_sinh,
    scale,
    # Validation
    validate_non_negative,
    validate_positive,
)

# Arithmetic Algebra
from riemann.core.math.arithmetic import (
    DEFAULT_ALGEBRA,
    INFINITY,
    NAN,
    ONE,
    ZERO,
    AlgebraConfig,
    ComplexAlgebra,
    add,
    conjugate,
    divide,
    imaginary,
    lift,
    multiply,
    negate,
    subtract,
    zero_snap,
)
from riemann.core.math.arithmetic import I  # noqa: E741
from riemann.core.math.arithmetic import is_close as is_close_complex

# Elementary Functions
from riemann.core.math.transcendental import (
    DEFAULT_FUNCTIONS,
    ElementaryFunctions,
    cos,
    exp,
    ln,
    power,
    power_real,
    sin,
    sqrt,
)

__all__ = [
    # Numerical Safeguards: Epsilon constants
    "DEFAULT_ZERO_SNAP_PRECISION",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards: Float classification
    "has_inf",
    "has_nan",
    "is_valid_float",
    # Numerical Safeguards: Epsilon comparisons
    "is_close",
    "snap_to_zero",
    "to_float",
    # Numerical Safeguards: Overflow-safe primitives
    "safe_cosh",
    "safe_exp",
    "safe_sinh",
    "scale",
    # Numerical Safeguards: Validation
    "validate_non_negative",
    "validate_positive",
    # Arithmetic: Constants
    "ZERO",
    "ONE",
    "I",
    "INFINITY",
    "NAN",
    # Arithmetic: Types
    "AlgebraConfig",
    "ComplexAlgebra",
    "DEFAULT_ALGEBRA",
    # Arithmetic: Functions
    "add",
    "conjugate",
    "divide",
    "imaginary",
    "is_close_complex",
    "lift",
    "multiply",
    "negate",
    "subtract",
    "zero_snap",
    # Elementary Functions
    "DEFAULT_FUNCTIONS",
    "ElementaryFunctions",
    "cos",
    "exp",
    "ln",
    "power",
    "power_real",
    "sin",
    "sqrt",
]
