"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Классификацию float (finite / inf / NaN)
2. Epsilon-сравнения float
3. Zero-snap компонент
4. Overflow-safe exp/cosh/sinh и scale
5. Валидацию параметров
"""

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from riemann.core.math.numerical_safeguards import (
    DEFAULT_ZERO_SNAP_PRECISION,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    has_inf,
    has_nan,
    is_close,
    is_valid_float,
    safe_cosh,
    safe_exp,
    safe_sinh,
    scale,
    snap_to_zero,
    to_float,
    validate_non_negative,
    validate_positive,
)

# =============================================================================
# ТЕСТЫ КЛАССИФИКАЦИИ FLOAT
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_normal_values_valid(self) -> None:
        """Обычные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-0.0)
        assert is_valid_float(1e308)
        assert is_valid_float(-1e-10)

    def test_nan_invalid(self) -> None:
        """NaN невалиден"""
        assert not is_valid_float(float("nan"))

    def test_inf_invalid(self) -> None:
        """Inf невалиден"""
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


class TestHasNanHasInf:
    """Тесты для has_nan / has_inf"""

    def test_has_nan(self) -> None:
        assert has_nan(1.0, math.nan)
        assert not has_nan(1.0, math.inf)
        assert not has_nan()

    def test_has_inf(self) -> None:
        assert has_inf(-math.inf, 0.0)
        assert not has_inf(1.0, math.nan)


class TestToFloat:
    """Тесты для to_float"""

    def test_regular_numbers(self) -> None:
        assert to_float(3) == 3.0
        assert to_float(Fraction(1, 4)) == 0.25
        assert to_float(Decimal("-2.5")) == -2.5

    @pytest.mark.parametrize(
        "value, expected",
        [
            (10**400, math.inf),
            (-(10**400), -math.inf),
            (Fraction(10**400, 3), math.inf),
            (Fraction(-(10**400), 3), -math.inf),
            (Decimal("1e400"), math.inf),
            (Decimal("-1e400"), -math.inf),
        ],
    )
    def test_out_of_range_saturates(self, value, expected: float) -> None:
        """Число вне диапазона double насыщается до ±inf вместо OverflowError"""
        assert to_float(value) == expected

    @pytest.mark.parametrize("value", [Decimal("sNaN"), Decimal("NaN"), math.nan])
    def test_nan_values(self, value) -> None:
        """Decimal("sNaN") даёт nan вместо ValueError"""
        assert math.isnan(to_float(value))


# =============================================================================
# ТЕСТЫ EPSILON-СРАВНЕНИЙ
# =============================================================================


class TestIsClose:
    """Тесты для is_close"""

    def test_exact_equality(self) -> None:
        """Точное равенство"""
        assert is_close(1.0, 1.0)
        assert is_close(0.0, -0.0)

    def test_relative_tolerance(self) -> None:
        """Относительная толерантность"""
        assert is_close(1.0, 1.0 + 1e-10)
        assert not is_close(1.0, 1.1)
        assert is_close(1e10, 1e10 + 1.0)

    def test_absolute_tolerance_near_zero(self) -> None:
        """Абсолютная толерантность у нуля"""
        assert is_close(0.0, 1e-13)
        assert not is_close(0.0, 1e-11)

    def test_nan_never_close(self) -> None:
        """NaN не близок ничему"""
        assert not is_close(math.nan, math.nan)


class TestSnapToZero:
    """Тесты для snap_to_zero"""

    def test_small_values_snapped(self) -> None:
        """Малые значения → 0.0"""
        assert snap_to_zero(1e-15) == 0.0
        assert snap_to_zero(-1e-15) == 0.0

    def test_boundary_inclusive(self) -> None:
        """Граница включительно"""
        assert snap_to_zero(DEFAULT_ZERO_SNAP_PRECISION) == 0.0
        assert snap_to_zero(-DEFAULT_ZERO_SNAP_PRECISION) == 0.0

    def test_large_values_unchanged(self) -> None:
        """Значения выше порога не меняются"""
        assert snap_to_zero(0.5) == 0.5
        assert snap_to_zero(1e-12) == 1e-12

    def test_custom_precision(self) -> None:
        """Пользовательский порог"""
        assert snap_to_zero(0.01, precision=0.1) == 0.0
        assert snap_to_zero(0.2, precision=0.1) == 0.2


# =============================================================================
# ТЕСТЫ OVERFLOW-SAFE ПРИМИТИВОВ
# =============================================================================


class TestOverflowSafe:
    """Тесты для safe_exp / safe_cosh / safe_sinh"""

    def test_normal_range_matches_math(self) -> None:
        """В нормальном диапазоне совпадает с math.*"""
        assert safe_exp(1.5) == math.exp(1.5)
        assert safe_cosh(2.0) == math.cosh(2.0)
        assert safe_sinh(-2.0) == math.sinh(-2.0)

    def test_exp_overflow_saturates(self) -> None:
        """exp переполнение → +inf"""
        assert safe_exp(1000.0) == math.inf

    def test_exp_underflow_is_zero(self) -> None:
        """exp большой отрицательный → 0.0"""
        assert safe_exp(-1000.0) == 0.0

    def test_cosh_overflow_saturates(self) -> None:
        """cosh переполнение → +inf для обоих знаков"""
        assert safe_cosh(1000.0) == math.inf
        assert safe_cosh(-1000.0) == math.inf

    def test_sinh_overflow_keeps_sign(self) -> None:
        """sinh переполнение сохраняет знак"""
        assert safe_sinh(1000.0) == math.inf
        assert safe_sinh(-1000.0) == -math.inf


class TestScale:
    """Тесты для scale"""

    def test_regular_product(self) -> None:
        assert scale(2.0, 3.0) == 6.0

    def test_zero_factor_absorbs_infinity(self) -> None:
        """0 · inf → 0.0, а не NaN"""
        assert scale(0.0, math.inf) == 0.0
        assert scale(math.inf, 0.0) == 0.0

    def test_infinite_product(self) -> None:
        assert scale(-1.0, math.inf) == -math.inf


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidatePositive:
    """Тесты для validate_positive"""

    def test_positive_passes(self) -> None:
        validate_positive(1e-9, "tol")

    def test_zero_raises(self) -> None:
        with pytest.raises(ValueError, match="tol must be positive"):
            validate_positive(0.0, "tol")

    def test_nan_raises(self) -> None:
        with pytest.raises(ValueError, match="tol must be a valid float"):
            validate_positive(float("nan"), "tol")


class TestValidateNonNegative:
    """Тесты для validate_non_negative"""

    def test_zero_passes(self) -> None:
        validate_non_negative(0.0, "precision")

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="precision must be non-negative"):
            validate_non_negative(-1e-13, "precision")

    def test_inf_raises(self) -> None:
        with pytest.raises(ValueError, match="precision must be a valid float"):
            validate_non_negative(float("inf"), "precision")


def test_epsilon_constants_consistency() -> None:
    """Константы epsilon согласованы"""
    assert DEFAULT_ZERO_SNAP_PRECISION == 1e-13
    assert EPS_FLOAT_COMPARE_REL > 0
    assert EPS_FLOAT_COMPARE_ABS > 0
    assert EPS_FLOAT_COMPARE_ABS <= EPS_FLOAT_COMPARE_REL
