"""
Arithmetic Algebra — Проективная арифметика на сфере Римана

Четыре бинарные операции, отрицание и сопряжение над расширенной областью
FINITE | INFINITY | NAN. Специальные случаи проверяются строго в порядке
приоритета ДО общей формулы:

| Операция | NaN операнд | Бесконечные операнды                                   |
|----------|-------------|--------------------------------------------------------|
| add/sub  | → NaN       | ровно один ∞ → ∞; оба ∞ → NaN                          |
| multiply | → NaN       | ∞ и ненулевой → ∞; ∞ и ноль → NaN (0·∞)                |
| divide   | → NaN       | ∞/∞ → NaN; ∞/z → ∞; z/∞ → 0; z/0 → ∞; 0/0 → NaN        |

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все операции тотальны: неопределённость → NAN, исключения не бросаются
2. Вещественный операнд поднимается через lift() до диспетчеризации
3. Degenerate операнд (FINITE с inf/NaN компонентой) ведёт себя как NAN
4. Результат общей формулы канонизируется: NaN компонента → NAN, inf → INFINITY
5. Все значения создаются только через инжектированную ComplexFactory
"""

import logging
import math
import numbers
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from riemann.core.domain.complex_value import (
    ComplexLike,
    ValueKind,
    is_degenerate,
    is_infinite,
    is_nan,
    is_zero,
)
from riemann.core.domain.factory import DEFAULT_FACTORY, ComplexFactory
from riemann.core.math.numerical_safeguards import (
    DEFAULT_ZERO_SNAP_PRECISION,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    has_inf,
    has_nan,
    is_close as is_close_float,
    snap_to_zero,
    to_float,
    validate_non_negative,
    validate_positive,
)

logger = logging.getLogger(__name__)

Operand = Union[ComplexLike, int, float, complex, Decimal, numbers.Real]


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class AlgebraConfig:
    """Конфигурация ComplexAlgebra."""

    # zero_snap() без явного порога
    zero_snap_precision: float = DEFAULT_ZERO_SNAP_PRECISION

    # is_close() без явных толерантностей
    close_rel_tol: float = EPS_FLOAT_COMPARE_REL
    close_abs_tol: float = EPS_FLOAT_COMPARE_ABS

    def __post_init__(self) -> None:
        validate_non_negative(self.zero_snap_precision, "zero_snap_precision")
        validate_positive(self.close_rel_tol, "close_rel_tol")
        validate_non_negative(self.close_abs_tol, "close_abs_tol")


# =============================================================================
# ALGEBRA
# =============================================================================


class ComplexAlgebra:
    """
    Арифметика расширенной комплексной плоскости.

    Все операции принимают комплексное значение или вещественное число
    (int, float, Fraction, Decimal, builtin complex) и возвращают значение,
    созданное фабрикой self.factory.
    """

    def __init__(
        self,
        factory: Optional[ComplexFactory] = None,
        config: Optional[AlgebraConfig] = None,
    ):
        """
        Args:
            factory: Фабрика значений (default: DefaultComplexFactory)
            config: Конфигурация (default: AlgebraConfig())
        """
        self.factory = factory or DEFAULT_FACTORY
        self.config = config or AlgebraConfig()

        if factory is not None:
            logger.debug("ComplexAlgebra bound to factory %s", type(factory).__name__)

        self.zero = self.factory.make(0.0, 0.0)
        self.one = self.factory.make(1.0, 0.0)
        self.i = self.factory.make(0.0, 1.0)
        self.infinity = self.factory.infinity()
        self.nan = self.factory.nan()

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    def canonical(self, re: float, im: float) -> ComplexLike:
        """
        Значение из пары компонент с канонизацией.

        Returns:
            NAN если есть NaN компонента, INFINITY если есть ±inf, иначе make(re, im)
        """
        if has_nan(re, im):
            return self.nan
        if has_inf(re, im):
            return self.infinity
        return self.factory.make(re, im)

    def lift(self, x: Operand) -> ComplexLike:
        """
        Явное преобразование операнда в комплексное значение.

        - комплексное значение (re, im, kind) возвращается как есть
        - вещественное число → (x, 0); NaN → NAN, ±inf → INFINITY
        - число вне диапазона double (10**400, Decimal("sNaN")) → INFINITY / NAN
        - builtin complex → (x.real, x.imag) с той же канонизацией

        Raises:
            TypeError: Если тип операнда не поддерживается
        """
        if isinstance(getattr(x, "kind", None), ValueKind):
            return x
        if isinstance(x, (numbers.Real, Decimal)):
            return self.canonical(to_float(x), 0.0)
        if isinstance(x, complex):
            return self.canonical(x.real, x.imag)
        raise TypeError(f"cannot convert {type(x).__name__} to a complex value")

    def imaginary(self, x: Operand) -> ComplexLike:
        """x · i (мнимое число с коэффициентом x)."""
        return self.multiply(x, self.i)

    def is_undefined(self, z: ComplexLike) -> bool:
        """True для NAN и degenerate значений (оба ведут себя как NaN)."""
        if is_nan(z):
            return True
        if is_degenerate(z):
            logger.debug("degenerate operand (%r, %r) treated as NaN", z.re, z.im)
            return True
        return False

    # -------------------------------------------------------------------------
    # Бинарные операции
    # -------------------------------------------------------------------------

    def add(self, a: Operand, b: Operand) -> ComplexLike:
        """
        Сумма a + b.

        Порядок: NaN → NaN; ∞ + ∞ → NaN; ровно один ∞ → ∞; иначе покомпонентно.
        """
        a, b = self.lift(a), self.lift(b)
        if self.is_undefined(a) or self.is_undefined(b):
            return self.nan
        a_inf, b_inf = is_infinite(a), is_infinite(b)
        if a_inf or b_inf:
            return self.nan if (a_inf and b_inf) else self.infinity
        return self.canonical(a.re + b.re, a.im + b.im)

    def subtract(self, a: Operand, b: Operand) -> ComplexLike:
        """
        Разность a - b.

        Бесконечность беззнаковая, поэтому правила те же, что у add.
        """
        a, b = self.lift(a), self.lift(b)
        if self.is_undefined(a) or self.is_undefined(b):
            return self.nan
        a_inf, b_inf = is_infinite(a), is_infinite(b)
        if a_inf or b_inf:
            return self.nan if (a_inf and b_inf) else self.infinity
        return self.canonical(a.re - b.re, a.im - b.im)

    def multiply(self, a: Operand, b: Operand) -> ComplexLike:
        """
        Произведение a · b.

        Порядок: NaN → NaN; ∞ · 0 → NaN; ∞ · (≠0) → ∞;
        иначе (re1·re2 − im1·im2, im1·re2 + re1·im2).
        """
        a, b = self.lift(a), self.lift(b)
        if self.is_undefined(a) or self.is_undefined(b):
            return self.nan
        if is_infinite(a):
            return self.nan if is_zero(b) else self.infinity
        if is_infinite(b):
            return self.nan if is_zero(a) else self.infinity
        return self.canonical(
            a.re * b.re - a.im * b.im,
            a.im * b.re + a.re * b.im,
        )

    def divide(self, a: Operand, b: Operand) -> ComplexLike:
        """
        Частное a / b.

        Порядок:
        1. NaN операнд → NaN
        2. ∞ / ∞ → NaN, ∞ / z → ∞
        3. z / ∞ → 0
        4. 0 / 0 → NaN, z / 0 → ∞
        5. ((re1·re2 + im1·im2) / d, (im1·re2 − re1·im2) / d), d = re2² + im2²
        """
        a, b = self.lift(a), self.lift(b)
        if self.is_undefined(a) or self.is_undefined(b):
            return self.nan
        if is_infinite(a):
            return self.nan if is_infinite(b) else self.infinity
        if is_infinite(b):
            return self.zero
        if is_zero(b):
            return self.nan if is_zero(a) else self.infinity

        d = b.re * b.re + b.im * b.im
        if d == 0.0 or math.isinf(d):
            # d под/переполнился: делим на делитель, масштабированный по max(|re2|, |im2|)
            s = max(abs(b.re), abs(b.im))
            br, bi = b.re / s, b.im / s
            d = br * br + bi * bi
            return self.canonical(
                (a.re * br + a.im * bi) / d / s,
                (a.im * br - a.re * bi) / d / s,
            )
        return self.canonical(
            (a.re * b.re + a.im * b.im) / d,
            (a.im * b.re - a.re * b.im) / d,
        )

    # -------------------------------------------------------------------------
    # Унарные операции
    # -------------------------------------------------------------------------

    def negate(self, z: Operand) -> ComplexLike:
        """-z: NaN → NaN, ∞ → ∞, иначе (−re, −im)."""
        z = self.lift(z)
        if self.is_undefined(z):
            return self.nan
        if is_infinite(z):
            return self.infinity
        return self.factory.make(-z.re, -z.im)

    def conjugate(self, z: Operand) -> ComplexLike:
        """Сопряжение: NaN → NaN, ∞ → ∞, иначе (re, −im)."""
        z = self.lift(z)
        if self.is_undefined(z):
            return self.nan
        if is_infinite(z):
            return self.infinity
        return self.factory.make(z.re, -z.im)

    def zero_snap(self, z: Operand, precision: Optional[float] = None) -> ComplexLike:
        """
        Zero-snap: компоненты с |c| <= precision заменяются точным 0.0.

        Args:
            z: Значение
            precision: Порог (default: config.zero_snap_precision)

        Returns:
            Новое значение; INFINITY/NAN без изменений, degenerate → NAN

        Raises:
            ValueError: Если precision отрицательный или NaN/Inf
        """
        if precision is None:
            precision = self.config.zero_snap_precision
        validate_non_negative(precision, "precision")

        z = self.lift(z)
        if self.is_undefined(z):
            return self.nan
        if is_infinite(z):
            return self.infinity
        return self.factory.make(
            snap_to_zero(z.re, precision),
            snap_to_zero(z.im, precision),
        )

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def is_close(
        self,
        a: Operand,
        b: Operand,
        rel_tol: Optional[float] = None,
        abs_tol: Optional[float] = None,
    ) -> bool:
        """
        Приближённое равенство значений.

        Синглтоны близки только сами себе; FINITE сравниваются
        покомпонентно через numerical_safeguards.is_close.
        """
        a, b = self.lift(a), self.lift(b)
        if a.kind is not ValueKind.FINITE or b.kind is not ValueKind.FINITE:
            return a.kind is b.kind
        rel = self.config.close_rel_tol if rel_tol is None else rel_tol
        abs_ = self.config.close_abs_tol if abs_tol is None else abs_tol
        return is_close_float(a.re, b.re, rel, abs_) and is_close_float(a.im, b.im, rel, abs_)


# =============================================================================
# DEFAULT INSTANCE & CONVENIENCE FUNCTIONS
# =============================================================================

DEFAULT_ALGEBRA = ComplexAlgebra()

ZERO = DEFAULT_ALGEBRA.zero
ONE = DEFAULT_ALGEBRA.one
I = DEFAULT_ALGEBRA.i  # noqa: E741
INFINITY = DEFAULT_ALGEBRA.infinity
NAN = DEFAULT_ALGEBRA.nan


def lift(x: Operand) -> ComplexLike:
    return DEFAULT_ALGEBRA.lift(x)


def imaginary(x: Operand) -> ComplexLike:
    return DEFAULT_ALGEBRA.imaginary(x)


def add(a: Operand, b: Operand) -> ComplexLike:
    return DEFAULT_ALGEBRA.add(a, b)


def subtract(a: Operand, b: Operand) -> ComplexLike:
    return DEFAULT_ALGEBRA.subtract(a, b)


def multiply(a: Operand, b: Operand) -> ComplexLike:
    return DEFAULT_ALGEBRA.multiply(a, b)


def divide(a: Operand, b: Operand) -> ComplexLike:
    return DEFAULT_ALGEBRA.divide(a, b)


def negate(z: Operand) -> ComplexLike:
    return DEFAULT_ALGEBRA.negate(z)


def conjugate(z: Operand) -> ComplexLike:
    return DEFAULT_ALGEBRA.conjugate(z)


def zero_snap(z: Operand, precision: Optional[float] = None) -> ComplexLike:
    return DEFAULT_ALGEBRA.zero_snap(z, precision)


def is_close(
    a: Operand,
    b: Operand,
    rel_tol: Optional[float] = None,
    abs_tol: Optional[float] = None,
) -> bool:
    return DEFAULT_ALGEBRA.is_close(a, b, rel_tol, abs_tol)
