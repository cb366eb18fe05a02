"""
ComplexFactory — Единственная точка конструирования комплексных значений

Все компоненты (алгебра, функции, парсер, контракт) создают значения только
через инжектированную фабрику. Подмена представления (кэширование, логирование,
другая точность) делается передачей своей фабрики в ComplexAlgebra /
ElementaryFunctions / parse_complex / from_contract, а не глобальной переприсвойкой.

КОНТРАКТ ФАБРИКИ:
1. make(re, im) всегда возвращает FINITE значение (без канонизации)
2. infinity() / nan() возвращают синглтоны с тегами INFINITY / NAN
3. Реализация обязана сохранять равенство ComplexValue (0.0 == -0.0, теговые синглтоны)
"""

from typing import Protocol

from riemann.core.domain.complex_value import ComplexLike, ComplexValue, ValueKind


# =============================================================================
# PROTOCOL
# =============================================================================


class ComplexFactory(Protocol):
    """Стратегия конструирования значений."""

    def make(self, re: float, im: float = 0.0) -> ComplexLike:
        """FINITE значение из пары (re, im)."""
        ...

    def infinity(self) -> ComplexLike:
        """Синглтон INFINITY."""
        ...

    def nan(self) -> ComplexLike:
        """Синглтон NAN."""
        ...


# =============================================================================
# DEFAULT FACTORY
# =============================================================================

_INFINITY = ComplexValue(kind=ValueKind.INFINITY)
_NAN = ComplexValue(kind=ValueKind.NAN)


class DefaultComplexFactory:
    """
    Фабрика по умолчанию: создаёт ComplexValue.

    INFINITY и NAN — общие экземпляры на процесс (неизменяемы).
    """

    def make(self, re: float, im: float = 0.0) -> ComplexValue:
        return ComplexValue(re=float(re), im=float(im))

    def infinity(self) -> ComplexValue:
        return _INFINITY

    def nan(self) -> ComplexValue:
        return _NAN


DEFAULT_FACTORY = DefaultComplexFactory()


def make(re: float, im: float = 0.0) -> ComplexValue:
    """
    Создание FINITE значения фабрикой по умолчанию.

    Компоненты не канонизируются: make(inf, 0) — degenerate FINITE значение,
    а не INFINITY. Для канонизации используйте lift().
    """
    return DEFAULT_FACTORY.make(re, im)
