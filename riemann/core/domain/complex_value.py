"""
ComplexValue — Модель значения расширенной комплексной плоскости

Immutable Pydantic модель: tagged variant FINITE | INFINITY | NAN.

- FINITE(re, im): пара IEEE-754 double
- INFINITY: единственная беззнаковая бесконечность (северный полюс сферы Римана)
- NAN: единственная существенная особенность ("не определено")

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Принадлежность к INFINITY/NAN определяется тегом kind, а не компонентами
2. FINITE с inf/NaN компонентой (degenerate) НЕ равен синглтону NAN/INFINITY
3. Равенство FINITE покомпонентное по IEEE: 0.0 == -0.0
4. Значения неизменяемы (frozen=True)

Арифметика и функции живут в riemann.core.math; операторы модели
делегируют в DEFAULT_ALGEBRA / DEFAULT_FUNCTIONS.
"""

import math
import numbers
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Protocol

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class ValueKind(str, Enum):
    """Тег варианта комплексного значения"""

    FINITE = "finite"
    INFINITY = "infinity"
    NAN = "nan"


# =============================================================================
# PROTOCOL
# =============================================================================


class ComplexLike(Protocol):
    """
    Минимальный интерфейс представления комплексного значения.

    Любая альтернативная реализация (через ComplexFactory) обязана
    предоставлять re, im и kind с семантикой ComplexValue.
    """

    @property
    def re(self) -> float: ...

    @property
    def im(self) -> float: ...

    @property
    def kind(self) -> ValueKind: ...


# =============================================================================
# ПРЕДИКАТЫ И ПОЛЯРНЫЕ ВЕЛИЧИНЫ
# =============================================================================


def is_nan(z: ComplexLike) -> bool:
    """True только для синглтона NAN."""
    return z.kind is ValueKind.NAN


def is_infinite(z: ComplexLike) -> bool:
    """True только для синглтона INFINITY."""
    return z.kind is ValueKind.INFINITY


def is_degenerate(z: ComplexLike) -> bool:
    """True для FINITE значения с inf или NaN компонентой."""
    return z.kind is ValueKind.FINITE and not (math.isfinite(z.re) and math.isfinite(z.im))


def is_zero(z: ComplexLike) -> bool:
    """True если обе компоненты == 0.0 (знак нуля не важен)."""
    return z.kind is ValueKind.FINITE and z.re == 0.0 and z.im == 0.0


def modulus(z: ComplexLike) -> float:
    """
    Модуль |z| = sqrt(re² + im²).

    Returns:
        math.hypot(re, im) для FINITE, nan для INFINITY/NAN
    """
    if z.kind is not ValueKind.FINITE:
        return math.nan
    return math.hypot(z.re, z.im)


def argument(z: ComplexLike) -> float:
    """
    Аргумент arg(z) в полуинтервале (-π, π].

    Returns:
        - nan для INFINITY/NAN
        - 0.0 для точного нуля
        - π на отрицательной вещественной оси (в т.ч. при im == -0.0)
        - atan2(im, re) иначе
    """
    if z.kind is not ValueKind.FINITE:
        return math.nan
    if z.im == 0.0:
        if z.re < 0.0:
            return math.pi
        if z.re == 0.0:
            return 0.0
    angle = math.atan2(z.im, z.re)
    # atan2 округляет до -π при im чуть ниже отрицательной вещественной оси
    return math.pi if angle == -math.pi else angle


# =============================================================================
# COMPLEX VALUE MODEL
# =============================================================================


def _algebra():
    # Отложенный импорт: riemann.core.math.arithmetic зависит от этого модуля
    from riemann.core.math.arithmetic import DEFAULT_ALGEBRA

    return DEFAULT_ALGEBRA


def _functions():
    from riemann.core.math.transcendental import DEFAULT_FUNCTIONS

    return DEFAULT_FUNCTIONS


def _is_operand(other: Any) -> bool:
    return isinstance(other, (ComplexValue, numbers.Number))


class ComplexValue(BaseModel):
    """
    Значение расширенной комплексной плоскости.

    Immutable модель (frozen=True). Создаётся через ComplexFactory
    (DefaultComplexFactory.make / infinity / nan), а не напрямую.

    Операторы Python (+, -, *, /, **, унарный -, ~, abs) работают
    со значениями ComplexValue и вещественными числами; вещественный
    операнд поднимается в комплексный через lift().
    """

    re: float = Field(0.0, description="Вещественная часть")
    im: float = Field(0.0, description="Мнимая часть")
    kind: ValueKind = Field(ValueKind.FINITE, description="Тег варианта")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def canonicalize_singleton_components(cls, data: Any) -> Any:
        """
        Компоненты синглтонов фиксированы: INFINITY = (inf, inf), NAN = (nan, nan).
        """
        if not isinstance(data, dict):
            return data
        kind = ValueKind(data.get("kind", ValueKind.FINITE))
        if kind is ValueKind.INFINITY:
            return {"re": math.inf, "im": math.inf, "kind": kind}
        if kind is ValueKind.NAN:
            return {"re": math.nan, "im": math.nan, "kind": kind}
        return data

    # -------------------------------------------------------------------------
    # Polar
    # -------------------------------------------------------------------------

    @property
    def modulus(self) -> float:
        """Модуль (радиус полярного представления)."""
        return modulus(self)

    @property
    def argument(self) -> float:
        """Аргумент (угол полярного представления) в (-π, π]."""
        return argument(self)

    # -------------------------------------------------------------------------
    # Predicates
    # -------------------------------------------------------------------------

    def is_nan(self) -> bool:
        return is_nan(self)

    def is_infinite(self) -> bool:
        return is_infinite(self)

    def is_zero(self) -> bool:
        return is_zero(self)

    def is_degenerate(self) -> bool:
        return is_degenerate(self)

    def is_real(self) -> bool:
        """True для FINITE значения с нулевой мнимой частью."""
        return self.kind is ValueKind.FINITE and self.im == 0.0

    # -------------------------------------------------------------------------
    # Equality
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        """
        Явное равенство (не структурное равенство pydantic).

        - INFINITY == INFINITY, NAN == NAN
        - FINITE: re == re' и im == im' по IEEE (0.0 == -0.0, nan != nan)
        - число Python: точное числовое сравнение FINITE значения как complex
          (make(3, 0) == 3, make(0.5, 0) == Fraction(1, 2));
          синглтоны не равны никакому числу, в т.ч. inf и nan

        Так равные объекты имеют равный hash (числовой hash Python).
        """
        if isinstance(other, Decimal) and other.is_nan():
            return False
        if isinstance(other, (numbers.Real, Decimal)):
            return self.kind is ValueKind.FINITE and self.im == 0.0 and self.re == other
        if isinstance(other, complex):
            return self.kind is ValueKind.FINITE and self.re == other.real and self.im == other.imag
        if not isinstance(other, ComplexValue):
            return NotImplemented
        if self.kind is not other.kind:
            return False
        if self.kind is not ValueKind.FINITE:
            return True
        return self.re == other.re and self.im == other.im

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        if self.kind is ValueKind.INFINITY:
            return hash(math.inf)
        if self.kind is ValueKind.NAN:
            return hash(ValueKind.NAN)
        # hash(complex) совпадает с hash(float/int) при im == 0 и не различает -0.0
        return hash(complex(self.re, self.im))

    # -------------------------------------------------------------------------
    # Arithmetic operators
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "ComplexValue":
        if not _is_operand(other):
            return NotImplemented
        return _algebra().add(self, other)

    def __radd__(self, other: Any) -> "ComplexValue":
        if not _is_operand(other):
            return NotImplemented
        return _algebra().add(other, self)

    def __sub__(self, other: Any) -> "ComplexValue":
        if not _is_operand(other):
            return NotImplemented
        return _algebra().subtract(self, other)

    def __rsub__(self, other: Any) -> "ComplexValue":
        if not _is_operand(other):
            return NotImplemented
        return _algebra().subtract(other, self)

    def __mul__(self, other: Any) -> "ComplexValue":
        if not _is_operand(other):
            return NotImplemented
        return _algebra().multiply(self, other)

    def __rmul__(self, other: Any) -> "ComplexValue":
        if not _is_operand(other):
            return NotImplemented
        return _algebra().multiply(other, self)

    def __truediv__(self, other: Any) -> "ComplexValue":
        if not _is_operand(other):
            return NotImplemented
        return _algebra().divide(self, other)

    def __rtruediv__(self, other: Any) -> "ComplexValue":
        if not _is_operand(other):
            return NotImplemented
        return _algebra().divide(other, self)

    def __pow__(self, other: Any) -> "ComplexValue":
        if not _is_operand(other):
            return NotImplemented
        return _functions().pow(self, other)

    def __rpow__(self, other: Any) -> "ComplexValue":
        if not _is_operand(other):
            return NotImplemented
        return _functions().pow(other, self)

    def __neg__(self) -> "ComplexValue":
        return _algebra().negate(self)

    def __pos__(self) -> "ComplexValue":
        return self

    def __invert__(self) -> "ComplexValue":
        """~z — комплексное сопряжение."""
        return _algebra().conjugate(self)

    def __abs__(self) -> float:
        return self.modulus

    def __complex__(self) -> complex:
        if self.kind is not ValueKind.FINITE:
            raise ValueError(f"cannot convert {self.kind.value} to builtin complex")
        return complex(self.re, self.im)

    def conjugate(self) -> "ComplexValue":
        """Комплексное сопряжение (re, -im)."""
        return _algebra().conjugate(self)

    def zero_snap(self, precision: Optional[float] = None) -> "ComplexValue":
        """
        Zero-snap: компоненты с |c| <= precision заменяются точным 0.0.

        Args:
            precision: Порог (default: AlgebraConfig.zero_snap_precision = 1e-13)

        Returns:
            Новое значение; синглтоны возвращаются без изменений
        """
        return _algebra().zero_snap(self, precision)

    # -------------------------------------------------------------------------
    # Text
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "ComplexValue":
        """
        Создание значения из строки вида "2.5+3.1i".

        Raises:
            ComplexFormatError: Если строка пустая или не разбирается
        """
        from riemann.core.text.parsing import parse_complex

        return parse_complex(text)

    def __str__(self) -> str:
        from riemann.core.text.formatting import format_complex

        return format_complex(self)

    def __format__(self, format_spec: str) -> str:
        from riemann.core.text.formatting import format_complex

        return format_complex(self, format_spec)
