"""
Parsing — Разбор строки в комплексное значение

Грамматика: необязательный знак, вещественный литерал, необязательный второй
знаковый член с мнимым маркером i/I.

Распознаются: "Infinity", "NaN", "2.5", "3i", "i", "-i", "2.5+3.1i", "-2.5-3.1i".

Алгоритм:
1. "Infinity" / "NaN" → синглтоны
2. Токенизация по "+"/"-" с сохранением разделителей (пустые токены отбрасываются)
3. Сборка по числу токенов:
   1 → "re" или "im i"
   2 → "±re" или "±im i"
   3 → "re ± im i"
   4 → "±re ± im i"
4. Мнимый токен с пустой мантиссой ("i") означает коэффициент 1

ОГРАНИЧЕНИЕ: экспоненциальная запись со знаком внутри ("1e-5", "2e+3i")
разрезается токенизатором и не поддерживается.
"""

import logging
import re
from typing import List, Optional

from riemann.core.domain.complex_value import ComplexLike
from riemann.core.domain.factory import ComplexFactory
from riemann.core.math.arithmetic import DEFAULT_ALGEBRA, ComplexAlgebra

logger = logging.getLogger(__name__)

_SIGN_SPLIT = re.compile(r"([+-])")

IMAGINARY_MARKER = "i"


class ComplexFormatError(ValueError):
    """
    Строка не является представлением комплексного значения.

    Единственная операция ядра, которая бросает исключение вместо NaN:
    у некорректной строки нет числовой интерпретации.
    """

    pass


def tokenize(text: str) -> List[str]:
    """
    Разбиение по "+"/"-" с сохранением знаков; "I" приводится к "i".

    Examples:
        >>> tokenize("-2.5+3.1I")
        ['-', '2.5', '+', '3.1i']
    """
    return [part.replace("I", IMAGINARY_MARKER) for part in _SIGN_SPLIT.split(text) if part]


def _imaginary_literal(token: str) -> str:
    mantissa = token[: -len(IMAGINARY_MARKER)]
    return mantissa if mantissa else "1.0"


def _to_float(literal: str, text: str) -> float:
    try:
        return float(literal)
    except ValueError as e:
        logger.debug("invalid numeric literal %r in %r", literal, text)
        raise ComplexFormatError(f'For input string: "{text}"') from e


def parse_complex(text: str, factory: Optional[ComplexFactory] = None) -> ComplexLike:
    """
    Создание значения из строки, например "2.5+3.1i".

    Args:
        text: Строковое представление
        factory: Фабрика значений (default: DefaultComplexFactory)

    Returns:
        Значение; неконечные литералы ("inf", "nan") канонизируются в синглтоны

    Raises:
        ComplexFormatError: Пустая строка или строка вне грамматики

    Examples:
        parse_complex("2.5+3.1i") == make(2.5, 3.1)
        parse_complex("-i") == make(0.0, -1.0)
        parse_complex("1e-5")  # ComplexFormatError: "1e" не литерал
    """
    algebra = DEFAULT_ALGEBRA if factory is None else ComplexAlgebra(factory=factory)

    if text == "Infinity":
        return algebra.infinity
    if text == "NaN":
        return algebra.nan

    parts = tokenize(text)
    count = len(parts)

    if count == 0:
        raise ComplexFormatError("empty String")

    if count == 1:
        if parts[0].endswith(IMAGINARY_MARKER):
            return algebra.canonical(0.0, _to_float(_imaginary_literal(parts[0]), text))
        return algebra.canonical(_to_float(parts[0], text), 0.0)

    if count == 2:
        if parts[1].endswith(IMAGINARY_MARKER):
            return algebra.canonical(0.0, _to_float(parts[0] + _imaginary_literal(parts[1]), text))
        return algebra.canonical(_to_float(parts[0] + parts[1], text), 0.0)

    if count in (3, 4) and not parts[-1].endswith(IMAGINARY_MARKER):
        logger.debug("second term of %r has no imaginary marker", text)
        raise ComplexFormatError(f'For input string: "{text}"')

    if count == 3:
        return algebra.canonical(
            _to_float(parts[0], text),
            _to_float(parts[1] + _imaginary_literal(parts[2]), text),
        )

    if count == 4:
        return algebra.canonical(
            _to_float(parts[0] + parts[1], text),
            _to_float(parts[2] + _imaginary_literal(parts[3]), text),
        )

    logger.debug("cannot reassemble %d tokens from %r", count, text)
    raise ComplexFormatError(f'For input string: "{text}"')
