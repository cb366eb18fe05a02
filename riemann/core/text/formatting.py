"""
Formatting — Текстовое представление комплексных значений

Каноническая форма "<re><sign><im>i":
- NAN → "NaN", INFINITY → "Infinity"
- im == 0 → "<re>"; re == 0 → "<im>i"; обе нулевые → "0.0"
- коэффициент 1 / -1 → "i" / "-i"
- "+" между частями, если мнимая часть не отрицательна (иначе она несёт свой "-")
- degenerate значение выводит сырые компоненты: "inf+nani"

Без fmt компоненты выводятся через repr(float) (обратимо для parse_complex).
С fmt используется format-spec mini-language Python (например ".3f"),
после чего десятичная точка и разделитель разрядов заменяются на
символы NumberLocale.
"""

import locale as _locale
from dataclasses import dataclass
from typing import Optional

from riemann.core.domain.complex_value import ComplexLike, ValueKind


@dataclass(frozen=True)
class NumberLocale:
    """Символы локали для форматирования чисел."""

    decimal_point: str = "."
    thousands_sep: str = ","

    @classmethod
    def current(cls) -> "NumberLocale":
        """
        Локаль процесса (locale.localeconv()).

        Пустой разделитель разрядов ("C" локаль) заменяется на ",".
        """
        conv = _locale.localeconv()
        return cls(
            decimal_point=conv["decimal_point"] or ".",
            thousands_sep=conv["thousands_sep"] or ",",
        )


def _render(value: float, fmt: str, number_locale: Optional[NumberLocale]) -> str:
    if not fmt:
        return repr(value)
    loc = number_locale or NumberLocale.current()
    text = format(value, fmt)
    return text.translate({ord("."): loc.decimal_point, ord(","): loc.thousands_sep})


def format_complex(
    z: ComplexLike,
    fmt: str = "",
    locale: Optional[NumberLocale] = None,
) -> str:
    """
    Строковое представление значения, например "2.5+3.1i".

    Args:
        z: Значение
        fmt: Format spec для обеих компонент (пусто → repr)
        locale: Символы локали (default: NumberLocale.current())

    Returns:
        Каноническая строка

    Examples:
        format_complex(make(2.5, 3.1)) == "2.5+3.1i"
        format_complex(make(0.0, -1.0)) == "-i"
        format_complex(make(1.25, 0.5), ".2f", NumberLocale(",", ".")) == "1,25+0,50i"
    """
    if z.kind is ValueKind.NAN:
        return "NaN"
    if z.kind is ValueKind.INFINITY:
        return "Infinity"

    re, im = z.re, z.im
    re_text = _render(re, fmt, locale)
    if im == 1.0:
        im_text = "i"
    elif im == -1.0:
        im_text = "-i"
    else:
        im_text = f"{_render(im, fmt, locale)}i"

    if re == 0.0:
        return "0.0" if im == 0.0 else im_text
    if im == 0.0:
        return re_text
    if im < 0.0:
        return f"{re_text}{im_text}"
    return f"{re_text}+{im_text}"
