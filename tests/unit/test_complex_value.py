"""
Тесты для модели ComplexValue и фабрики значений

Проверяет:
1. Полярные величины (modulus, argument) и их граничные случаи
2. Теговые предикаты (is_nan, is_infinite, is_zero, is_degenerate)
3. Явное равенство и hash (0.0 == -0.0, синглтоны, degenerate)
4. Immutability (frozen=True) и канонизацию компонент синглтонов
5. Python-протокол: операторы, abs, complex(), str()
"""

import math
from decimal import Decimal
from fractions import Fraction

import pytest
from pydantic import ValidationError

from riemann import I, INFINITY, NAN, ONE, ZERO, ComplexValue, ValueKind, make
from riemann.core.domain import DefaultComplexFactory, argument, is_degenerate, modulus


# =============================================================================
# ПОЛЯРНЫЕ ВЕЛИЧИНЫ
# =============================================================================


class TestModulus:
    """Тесты для modulus"""

    def test_pythagorean_triple(self) -> None:
        """make(3, 4).modulus == 5.0"""
        assert make(3, 4).modulus == 5.0

    def test_zero(self) -> None:
        assert ZERO.modulus == 0.0

    def test_negative_components(self) -> None:
        assert make(-3, -4).modulus == 5.0

    def test_singletons_undefined(self) -> None:
        """Модуль INFINITY/NAN не определён"""
        assert math.isnan(INFINITY.modulus)
        assert math.isnan(NAN.modulus)

    def test_abs_is_modulus(self) -> None:
        assert abs(make(3, -4)) == 5.0

    def test_no_intermediate_overflow(self) -> None:
        """Большие компоненты не переполняют re² + im²"""
        assert modulus(make(3e200, 4e200)) == pytest.approx(5e200)


class TestArgument:
    """Тесты для argument"""

    @pytest.mark.parametrize(
        "re, im, expected",
        [
            (1.0, 0.0, 0.0),
            (0.0, 1.0, math.pi / 2),
            (0.0, -1.0, -math.pi / 2),
            (-1.0, 0.0, math.pi),
            (1.0, 1.0, math.pi / 4),
            (-1.0, 1.0, 3 * math.pi / 4),
            (-1.0, -1.0, -3 * math.pi / 4),
        ],
    )
    def test_quadrants(self, re: float, im: float, expected: float) -> None:
        """Аргумент по квадрантам в (-π, π]"""
        assert argument(make(re, im)) == pytest.approx(expected)

    def test_zero_argument_is_zero(self) -> None:
        """arg(0) = 0, в т.ч. для отрицательного нуля"""
        assert ZERO.argument == 0.0
        assert make(-0.0, 0.0).argument == 0.0
        assert make(-0.0, -0.0).argument == 0.0

    def test_negative_real_axis_is_pi(self) -> None:
        """Отрицательная вещественная ось → π, даже при im == -0.0"""
        assert make(-2.0, -0.0).argument == math.pi

    def test_just_below_negative_real_axis_stays_in_range(self) -> None:
        """atan2 даёт ровно -π: результат переносится в π, чтобы остаться в (-π, π]"""
        z = make(-1.0, -4.9118336684857276e-201)
        assert -math.pi < z.argument <= math.pi
        assert z.argument == math.pi

    def test_singletons_undefined(self) -> None:
        assert math.isnan(INFINITY.argument)
        assert math.isnan(NAN.argument)


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


class TestPredicates:
    """Тесты теговых предикатов"""

    def test_singletons(self) -> None:
        assert INFINITY.is_infinite()
        assert not INFINITY.is_nan()
        assert NAN.is_nan()
        assert not NAN.is_infinite()

    def test_zero_is_signed_zero_insensitive(self) -> None:
        assert ZERO.is_zero()
        assert make(-0.0, -0.0).is_zero()
        assert not make(0.0, 1e-300).is_zero()
        assert not NAN.is_zero()
        assert not INFINITY.is_zero()

    def test_infinite_components_are_not_infinity(self) -> None:
        """make(inf, inf) — degenerate FINITE, а не синглтон INFINITY"""
        z = make(math.inf, math.inf)
        assert z.kind is ValueKind.FINITE
        assert not z.is_infinite()
        assert z.is_degenerate()

    def test_nan_components_are_not_nan(self) -> None:
        """make(nan, nan) — degenerate FINITE, а не синглтон NAN"""
        z = make(math.nan, math.nan)
        assert not z.is_nan()
        assert is_degenerate(z)

    def test_regular_values_not_degenerate(self) -> None:
        assert not make(1.0, -2.0).is_degenerate()
        assert not INFINITY.is_degenerate()
        assert not NAN.is_degenerate()

    def test_is_real(self) -> None:
        assert make(2.0, 0.0).is_real()
        assert make(2.0, -0.0).is_real()
        assert not I.is_real()
        assert not INFINITY.is_real()


# =============================================================================
# РАВЕНСТВО И HASH
# =============================================================================


class TestEquality:
    """Тесты явного равенства"""

    def test_componentwise(self) -> None:
        assert make(1.0, 2.0) == make(1.0, 2.0)
        assert make(1.0, 2.0) != make(2.0, 1.0)

    def test_signed_zero_insensitive(self) -> None:
        """0.0 и -0.0 равны в обеих компонентах"""
        assert make(0.0, 0.0) == make(-0.0, -0.0)
        assert make(-0.0, 3.0) == make(0.0, 3.0)

    def test_singletons_equal_themselves(self) -> None:
        assert NAN == NAN
        assert INFINITY == INFINITY
        assert NAN != INFINITY

    def test_degenerate_not_equal_to_singleton(self) -> None:
        """FINITE с NaN компонентами не взаимозаменяем с NAN"""
        assert make(math.nan, math.nan) != NAN
        assert make(math.inf, math.inf) != INFINITY

    def test_degenerate_nan_not_equal_to_itself(self) -> None:
        z = make(math.nan, 0.0)
        assert z != z

    def test_equality_with_real_numbers(self) -> None:
        """Точное числовое сравнение FINITE значения с вещественным числом"""
        assert make(3.0, 0.0) == 3
        assert 3 == make(3.0, 0.0)
        assert make(0.5, 0.0) == Fraction(1, 2)
        assert make(0.5, 0.0) == Decimal("0.5")
        assert make(3.0, 1.0) != 3

    def test_real_number_comparison_is_exact(self) -> None:
        """0.1 как double не равен десятичному 0.1"""
        assert make(0.1, 0.0) != Decimal("0.1")
        assert make(0.1, 0.0) != Fraction(1, 10)
        assert make(1e308, 0.0) != 10**400

    def test_equality_with_builtin_complex(self) -> None:
        assert make(1.0, 2.0) == complex(1.0, 2.0)

    @pytest.mark.parametrize(
        "number",
        [
            math.inf,
            -math.inf,
            complex(math.inf, 5.0),
            complex(math.inf, math.inf),
        ],
    )
    def test_infinity_not_equal_to_infinite_numbers(self, number: object) -> None:
        """INFINITY не равен числам с бесконечностью: иначе hash разошёлся бы с ==."""
        assert INFINITY != number
        assert number != INFINITY

    @pytest.mark.parametrize(
        "number",
        [math.nan, complex(math.nan, 0.0), Decimal("NaN"), Decimal("sNaN")],
    )
    def test_nan_not_equal_to_nan_numbers(self, number: object) -> None:
        assert NAN != number
        assert not (NAN == number)

    def test_unrelated_types_not_equal(self) -> None:
        assert make(1.0, 0.0) != "1.0"
        assert make(1.0, 0.0) != None  # noqa: E711


class TestHash:
    """Тесты hash, согласованного с равенством"""

    def test_signed_zero_hash(self) -> None:
        assert hash(make(0.0, 0.0)) == hash(make(-0.0, -0.0))

    @pytest.mark.parametrize(
        "value, number",
        [
            (make(3.0, 0.0), 3),
            (make(0.5, 0.0), Fraction(1, 2)),
            (make(0.5, 0.0), Decimal("0.5")),
            (make(1.5, 2.0), complex(1.5, 2.0)),
        ],
    )
    def test_equal_numbers_hash_equal(self, value: ComplexValue, number: object) -> None:
        """a == b ⇒ hash(a) == hash(b) для чисел Python"""
        assert value == number
        assert hash(value) == hash(number)

    def test_dict_lookup_by_equal_number(self) -> None:
        table = {make(2.0, 0.0): "two", make(1.0, -1.0): "one-minus-i"}
        assert table[2] == "two"
        assert table[complex(1.0, -1.0)] == "one-minus-i"

    def test_singletons_do_not_collide_with_numbers(self) -> None:
        """inf и nan как ключи не находят INFINITY/NAN"""
        table = {INFINITY: "pole", NAN: "undefined"}
        assert math.inf not in table
        assert -math.inf not in table
        assert table[INFINITY] == "pole"
        assert table[NAN] == "undefined"

    def test_usable_in_sets(self) -> None:
        values = {make(1.0, 2.0), make(1.0, 2.0), INFINITY, INFINITY, NAN, NAN}
        assert len(values) == 3


# =============================================================================
# IMMUTABILITY И КОНСТРУИРОВАНИЕ
# =============================================================================


class TestConstruction:
    """Тесты конструирования и неизменяемости"""

    def test_frozen(self) -> None:
        """Присваивание полю запрещено"""
        z = make(1.0, 2.0)
        with pytest.raises(ValidationError):
            z.re = 5.0

    def test_singleton_components_canonical(self) -> None:
        """Компоненты синглтонов фиксированы независимо от входа"""
        z = ComplexValue(re=1.0, im=2.0, kind=ValueKind.INFINITY)
        assert z.re == math.inf and z.im == math.inf
        n = ComplexValue(re=1.0, kind="nan")
        assert math.isnan(n.re) and math.isnan(n.im)

    def test_invalid_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ComplexValue(re=1.0, kind="bogus")

    def test_factory_coerces_to_float(self) -> None:
        z = DefaultComplexFactory().make(1, 2)
        assert isinstance(z.re, float)
        assert isinstance(z.im, float)

    def test_factory_singletons_shared(self) -> None:
        factory = DefaultComplexFactory()
        assert factory.infinity() is INFINITY
        assert factory.nan() is NAN

    def test_constants(self) -> None:
        assert ZERO == make(0, 0)
        assert ONE == make(1, 0)
        assert I == make(0, 1)


# =============================================================================
# PYTHON-ПРОТОКОЛ
# =============================================================================


class TestPythonProtocol:
    """Тесты операторов и преобразований"""

    def test_operators_with_values(self) -> None:
        a, b = make(1, 2), make(3, -1)
        assert a + b == make(4, 1)
        assert a - b == make(-2, 3)
        assert a * b == make(5, 5)
        assert -a == make(-1, -2)
        assert +a == a

    def test_operators_with_real_numbers(self) -> None:
        """Вещественный операнд слева и справа"""
        z = make(1, 2)
        assert z + 1 == make(2, 2)
        assert 1 + z == make(2, 2)
        assert 1 - z == make(0, -2)
        assert z * 2 == make(2, 4)
        assert 2 * z == make(2, 4)
        assert z / 2 == make(0.5, 1)

    def test_reflected_division(self) -> None:
        """1 / i == -i"""
        assert 1 / I == make(0, -1)

    def test_conjugate(self) -> None:
        assert make(1, 2).conjugate() == make(1, -2)
        assert ~make(1, 2) == make(1, -2)

    def test_power_operators(self) -> None:
        assert (make(2, 0) ** 3).re == pytest.approx(8.0)
        assert (2 ** make(3, 0)).re == pytest.approx(8.0)

    def test_unsupported_operand(self) -> None:
        with pytest.raises(TypeError):
            make(1, 2) + "x"

    def test_builtin_complex_conversion(self) -> None:
        assert complex(make(1.5, -2.0)) == complex(1.5, -2.0)
        with pytest.raises(ValueError):
            complex(INFINITY)

    def test_str_and_format(self) -> None:
        assert str(make(2.5, 3.1)) == "2.5+3.1i"
        assert str(NAN) == "NaN"
        assert f"{make(1.5, 2.0):.1f}" == "1.5+2.0i"

    def test_parse_classmethod(self) -> None:
        assert ComplexValue.parse("2.5+3.1i") == make(2.5, 3.1)

    def test_zero_snap_method(self) -> None:
        assert make(1e-15, 2.0).zero_snap() == make(0.0, 2.0)
        assert make(0.05, 2.0).zero_snap(0.1) == make(0.0, 2.0)
