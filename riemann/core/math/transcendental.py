"""
Elementary Functions — exp, ln, sqrt, sin, cos, pow на расширенной плоскости

Каждая функция сначала проверяет специальные случаи, затем применяет
замкнутую формулу. Используются главные ветви (arg в (-π, π]).

| Функция | Специальные случаи                                          |
|---------|-------------------------------------------------------------|
| exp     | NaN, ∞ → NaN (направление к ∞ потеряно)                     |
| ln      | 0, ∞, NaN → NaN                                             |
| sqrt    | 0 → 0, ∞ → ∞, NaN → NaN                                     |
| sin/cos | NaN, ∞ → NaN                                                |
| pow_real| x < 0, x ∈ {±inf, nan}, w ∈ {∞, NaN} → NaN; w = 0 → 1; x = 0 → 0 |

ФОРМУЛЫ:
    exp(z)  = e^re · (cos im + i·sin im)
    ln(z)   = ln|z| + i·arg(z)
    sqrt(z) = полуугловая схема: t = sqrt((|re| + |z|) / 2)
              re >= 0 → (t, im / 2t);  re < 0 → (|im| / 2t, sign(im)·t)
    sin(z)  = sin re·cosh im + i·cos re·sinh im
    cos(z)  = cos re·cosh im − i·sin re·sinh im
    pow(z, w)      = pow_real(|z|, w) · exp(i·arg(z)·w)
    pow_real(x, w) = exp(ln(x) · w)

Переполнение exp/cosh/sinh насыщается до ±inf (numerical_safeguards),
результат канонизируется в INFINITY.
"""

import math
import numbers
from decimal import Decimal
from typing import Optional

from riemann.core.domain.complex_value import (
    ComplexLike,
    argument,
    is_infinite,
    is_zero,
    modulus,
)
from riemann.core.math.arithmetic import DEFAULT_ALGEBRA, ComplexAlgebra, Operand
from riemann.core.math.numerical_safeguards import (
    safe_cosh,
    safe_exp,
    safe_sinh,
    scale,
    to_float,
)

# Показатель степени двойки для пересчёта sqrt вне диапазона double
_SQRT_RESCALE_EXP = 53


class ElementaryFunctions:
    """
    Набор трансцендентных функций поверх ComplexAlgebra.

    Значения создаются фабрикой алгебры, поэтому подмена представления
    делается через ElementaryFunctions(algebra=ComplexAlgebra(factory=...)).
    """

    def __init__(self, algebra: Optional[ComplexAlgebra] = None):
        """
        Args:
            algebra: Алгебра (default: DEFAULT_ALGEBRA)
        """
        self.algebra = algebra or DEFAULT_ALGEBRA

    def _undefined_or_infinite(self, z: ComplexLike) -> bool:
        return self.algebra.is_undefined(z) or is_infinite(z)

    def exp(self, z: Operand) -> ComplexLike:
        """
        Экспонента.

        Returns:
            NaN для NaN/∞ (e^∞ зависит от направления), иначе e^re·(cos im + i·sin im)
        """
        z = self.algebra.lift(z)
        if self._undefined_or_infinite(z):
            return self.algebra.nan
        r = safe_exp(z.re)
        return self.algebra.canonical(scale(r, math.cos(z.im)), scale(r, math.sin(z.im)))

    def ln(self, z: Operand) -> ComplexLike:
        """
        Главная ветвь натурального логарифма.

        Returns:
            NaN для 0, ∞, NaN; иначе (ln|z|, arg z)
        """
        z = self.algebra.lift(z)
        if self._undefined_or_infinite(z) or is_zero(z):
            return self.algebra.nan
        return self.algebra.canonical(math.log(modulus(z)), argument(z))

    def sqrt(self, z: Operand) -> ComplexLike:
        """
        Главная ветвь квадратного корня.

        Полуугловая схема избегает потери точности около отрицательной
        вещественной оси, которую дал бы exp(ln(z) / 2).

        Returns:
            0 → 0, ∞ → ∞, NaN → NaN; иначе главное значение sqrt(z)
        """
        z = self.algebra.lift(z)
        if self.algebra.is_undefined(z):
            return self.algebra.nan
        if is_infinite(z):
            return self.algebra.infinity
        if is_zero(z):
            return self.algebra.zero

        t = math.sqrt((abs(z.re) + modulus(z)) / 2)
        if t == 0.0 or math.isinf(t):
            # (|re| + |z|) / 2 ушёл в underflow/overflow: sqrt(4^k·z) = 2^k·sqrt(z)
            k = _SQRT_RESCALE_EXP if t == 0.0 else -_SQRT_RESCALE_EXP
            root = self.sqrt(self.algebra.factory.make(math.ldexp(z.re, 2 * k), math.ldexp(z.im, 2 * k)))
            return self.algebra.canonical(math.ldexp(root.re, -k), math.ldexp(root.im, -k))
        if z.re >= 0.0:
            return self.algebra.canonical(t, z.im / (2 * t))
        return self.algebra.canonical(abs(z.im) / (2 * t), math.copysign(1.0, z.im) * t)

    def sin(self, z: Operand) -> ComplexLike:
        """Синус: NaN/∞ → NaN, иначе (sin re·cosh im, cos re·sinh im)."""
        z = self.algebra.lift(z)
        if self._undefined_or_infinite(z):
            return self.algebra.nan
        return self.algebra.canonical(
            scale(math.sin(z.re), safe_cosh(z.im)),
            scale(math.cos(z.re), safe_sinh(z.im)),
        )

    def cos(self, z: Operand) -> ComplexLike:
        """Косинус: NaN/∞ → NaN, иначе (cos re·cosh im, −sin re·sinh im)."""
        z = self.algebra.lift(z)
        if self._undefined_or_infinite(z):
            return self.algebra.nan
        return self.algebra.canonical(
            scale(math.cos(z.re), safe_cosh(z.im)),
            -scale(math.sin(z.re), safe_sinh(z.im)),
        )

    def pow(self, z: Operand, w: Operand) -> ComplexLike:
        """
        Комплексная степень z^w (главное значение).

        Вещественное основание (int, float, Fraction, Decimal) уходит в pow_real,
        комплексное вычисляется как pow_real(|z|, w) · exp(i·arg(z)·w).

        Args:
            z: Основание
            w: Показатель

        Returns:
            z^w
        """
        if isinstance(z, (numbers.Real, Decimal)):
            return self.pow_real(z, w)
        z = self.algebra.lift(z)
        w = self.algebra.lift(w)
        magnitude = self.pow_real(modulus(z), w)
        rotation = self.exp(self.algebra.multiply(self.algebra.imaginary(argument(z)), w))
        return self.algebra.multiply(magnitude, rotation)

    def pow_real(self, x: float, w: Operand) -> ComplexLike:
        """
        Степень с вещественным основанием x^w.

        Порядок проверок:
        1. x < 0, x = ±inf, x = NaN → NaN (отрицательное основание многозначно)
        2. w = ∞ или NaN → NaN
        3. w = 0 → 1 (в т.ч. 0^0 = 1)
        4. x = 0 → 0
        5. exp(ln(x) · w)

        Args:
            x: Вещественное основание
            w: Показатель

        Returns:
            x^w
        """
        x = to_float(x)
        if math.isnan(x) or math.isinf(x) or x < 0.0:
            return self.algebra.nan
        w = self.algebra.lift(w)
        if self._undefined_or_infinite(w):
            return self.algebra.nan
        if is_zero(w):
            return self.algebra.one
        if x == 0.0:
            return self.algebra.zero
        return self.exp(self.algebra.multiply(math.log(x), w))


# =============================================================================
# DEFAULT INSTANCE & CONVENIENCE FUNCTIONS
# =============================================================================

DEFAULT_FUNCTIONS = ElementaryFunctions()


def exp(z: Operand) -> ComplexLike:
    return DEFAULT_FUNCTIONS.exp(z)


def ln(z: Operand) -> ComplexLike:
    return DEFAULT_FUNCTIONS.ln(z)


def sqrt(z: Operand) -> ComplexLike:
    return DEFAULT_FUNCTIONS.sqrt(z)


def sin(z: Operand) -> ComplexLike:
    return DEFAULT_FUNCTIONS.sin(z)


def cos(z: Operand) -> ComplexLike:
    return DEFAULT_FUNCTIONS.cos(z)


def power(z: Operand, w: Operand) -> ComplexLike:
    """z^w; вещественное основание → power_real."""
    return DEFAULT_FUNCTIONS.pow(z, w)


def power_real(x: float, w: Operand) -> ComplexLike:
    return DEFAULT_FUNCTIONS.pow_real(x, w)
