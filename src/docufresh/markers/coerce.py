"""Number parsing and rendering shared by the built-in markers.

Marker parameters arrive as text and results leave as text, so these helpers
pin down the conversions: lenient prefix parsing on the way in, and a
rendering on the way out where whole numbers carry no fractional part and
non-finite values are spelled `NaN`, `Infinity` and `-Infinity`.
"""

import math
import re
from typing import Sequence

from .. import config

NAN = float('nan')

_FLOAT_PREFIX = re.compile(
    r'[+-]?(?:Infinity|[0-9]+\.?[0-9]*(?:[eE][+-]?[0-9]+)?|\.[0-9]+(?:[eE][+-]?[0-9]+)?)'
)
_INT_PREFIX = re.compile(r'[+-]?[0-9]+')
_EXPONENT = re.compile(r'e([+-])0*([0-9]+)$')


def parse_float(text: str) -> float:
    """Parse the longest numeric prefix of text, or NaN when there is none."""
    match = _FLOAT_PREFIX.match(text.lstrip())
    if not match:
        return NAN
    number = match.group(0)
    if number.lstrip('+-') == 'Infinity':
        return -math.inf if number.startswith('-') else math.inf
    return float(number)


def parse_int(text: str) -> float:
    """Parse the leading decimal integer of text, or NaN when there is none."""
    match = _INT_PREFIX.match(text.lstrip())
    return float(match.group(0)) if match else NAN


def first_param(params: Sequence[str]) -> str:
    """First parameter, or an empty string when the marker was given none."""
    return params[0] if params else ''


def format_number(value: float) -> str:
    """Render a number the way it reads in prose: 10, 2.5, NaN, Infinity."""
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value == int(value) and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    # 1e-07 -> 1e-7
    return _EXPONENT.sub(lambda m: 'e' + m.group(1) + m.group(2), text)


def format_grouped(value: float, separator: str = None, decimal: str = None) -> str:
    """Render a number with thousands grouping and at most 3 fraction digits."""
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return '∞' if value > 0 else '-∞'
    separator = config.THOUSANDS_SEPARATOR if separator is None else separator
    if decimal is None:
        decimal = config.DECIMAL_SEPARATOR or (',' if separator == '.' else '.')
    text = f"{value:,.3f}".rstrip('0').rstrip('.')
    # Swap both marks in one pass
    return text.translate(str.maketrans({',': separator, '.': decimal}))


def divide(numerator: float, denominator: float) -> float:
    """Floating point division that yields infinities and NaN instead of raising."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return NAN
        negative = (numerator < 0) != (math.copysign(1.0, denominator) < 0)
        return -math.inf if negative else math.inf
    return numerator / denominator
