"""Math, random and number formatting markers."""

import math
import random as _random
from functools import reduce
from typing import Sequence

from .coerce import divide as _divide
from .coerce import first_param, format_grouped, format_number, parse_float, parse_int


def add(params: Sequence[str]) -> str:
    """Sum of all parameters."""
    return format_number(reduce(lambda total, n: total + parse_float(n), params, 0.0))


def subtract(params: Sequence[str]) -> str:
    """First parameter minus each of the rest."""
    if not params:
        return '0'
    first, *rest = params
    return format_number(reduce(lambda total, n: total - parse_float(n), rest, parse_float(first)))


def multiply(params: Sequence[str]) -> str:
    """Product of all parameters."""
    return format_number(reduce(lambda total, n: total * parse_float(n), params, 1.0))


def divide(params: Sequence[str]) -> str:
    """First parameter divided by each of the rest in turn."""
    if not params:
        return '0'
    first, *rest = params
    return format_number(reduce(lambda total, n: _divide(total, parse_float(n)), rest, parse_float(first)))


def random(params: Sequence[str]) -> str:
    """Random integer between min and max, inclusive."""
    low = parse_int(params[0]) if len(params) > 0 else math.nan
    high = parse_int(params[1]) if len(params) > 1 else math.nan
    if math.isnan(low) or math.isnan(high):
        return format_number(math.nan)
    value = _random.random() * (high - low + 1) + low
    return format_number(math.floor(value) if math.isfinite(value) else value)


def format_number_marker(params: Sequence[str]) -> str:
    """Number with thousands separators, e.g. 1,000,000."""
    return format_grouped(parse_float(first_param(params)))


NUMBER_MARKERS = {
    'add': add,
    'subtract': subtract,
    'multiply': multiply,
    'divide': divide,
    'random': random,
    'format_number': format_number_marker,
}
