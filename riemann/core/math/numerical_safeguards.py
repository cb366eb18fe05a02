"""
Numerical Safeguards — Float-примитивы для расширенной комплексной алгебры

Модуль обеспечивает численную устойчивость покомпонентных вычислений:
- Классификация float (finite / inf / NaN) и тотальное преобразование в float
- Epsilon-сравнения float с учётом машинной точности
- Zero-snap: округление малых компонент до точного нуля
- Overflow-safe exp/cosh/sinh (math.* бросает OverflowError, а не возвращает inf)
- Валидация параметров конфигурации

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. safe_exp/safe_cosh/safe_sinh никогда не бросают OverflowError
2. Переполнение насыщается до ±inf (дальше результат канонизируется в INFINITY)
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Any, Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Порог zero-snap по умолчанию: |c| <= порога → c = 0.0
DEFAULT_ZERO_SNAP_PRECISION: Final[float] = 1e-13

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# КЛАССИФИКАЦИЯ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """True если компонента конечна (не NaN, не ±Inf)."""
    return math.isfinite(value)


def to_float(value: Any) -> float:
    """
    Преобразование вещественного числа в float без исключений.

    float() бросает OverflowError для int/Fraction вне диапазона double
    и ValueError для Decimal("sNaN"); здесь они насыщаются до ±inf / nan.

    Examples:
        to_float(10**400) == inf
        to_float(Fraction(-10**400, 3)) == -inf
        to_float(Decimal("sNaN"))  → nan
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf
    except ValueError:
        return math.nan


def has_nan(*values: float) -> bool:
    """True если хотя бы одно значение — NaN."""
    return any(math.isnan(v) for v in values)


def has_inf(*values: float) -> bool:
    """True если хотя бы одно значение — ±Inf."""
    return any(math.isinf(v) for v in values)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Покомпонентное сравнение float: math.isclose с толерантностями алгебры.

    NaN не близок ничему, включая NaN.
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def snap_to_zero(value: float, precision: float = DEFAULT_ZERO_SNAP_PRECISION) -> float:
    """
    Zero-snap одной компоненты.

    Args:
        value: Исходное значение
        precision: Порог (включительно)

    Returns:
        0.0 если abs(value) <= precision, иначе value без изменений

    Examples:
        >>> snap_to_zero(1e-15)
        0.0
        >>> snap_to_zero(-1e-15)
        0.0
        >>> snap_to_zero(0.5)
        0.5
    """
    if abs(value) <= precision:
        return 0.0
    return value


# =============================================================================
# OVERFLOW-SAFE ТРАНСЦЕНДЕНТНЫЕ ПРИМИТИВЫ
# =============================================================================


def safe_exp(value: float) -> float:
    """
    exp(value) с насыщением до +inf вместо OverflowError.

    Examples:
        >>> safe_exp(0.0)
        1.0
        >>> safe_exp(1000.0)
        inf
    """
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


def safe_cosh(value: float) -> float:
    """cosh(value) с насыщением до +inf вместо OverflowError."""
    try:
        return math.cosh(value)
    except OverflowError:
        return math.inf


def safe_sinh(value: float) -> float:
    """sinh(value) с насыщением до ±inf (знак аргумента) вместо OverflowError."""
    try:
        return math.sinh(value)
    except OverflowError:
        return math.copysign(math.inf, value)


def scale(factor: float, value: float) -> float:
    """
    Произведение factor * value, в котором точный ноль поглощает ±inf.

    Examples:
        scale(0.0, inf) == 0.0   (exp(1000 + 0i) → im = e^1000 · sin 0)
        scale(-1.0, inf) == -inf
    """
    if factor == 0.0 or value == 0.0:
        return 0.0
    return factor * value


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение положительное и конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное и конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
