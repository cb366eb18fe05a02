"""
Textual conversion: canonical "<re><sign><im>i" strings in both directions.
"""

from riemann.core.text.formatting import NumberLocale, format_complex
from riemann.core.text.parsing import ComplexFormatError, parse_complex, tokenize

__all__ = [
    "ComplexFormatError",
    "NumberLocale",
    "format_complex",
    "parse_complex",
    "tokenize",
]
