"""Module for miscellaneous multi-use functions"""

__all__ = ['as_float', 'format_number', 'is_truthy']

from decimal import Decimal
import math
from typing import Any, Union


def as_float(value: Any) -> float:
    """
    Interprets a value as a float, degrading to NaN where no such
    interpretation exists (e.g. None or a non-numeric string). Integers too
    large for a float become signed infinity.

    Args:
        value:
            The value to be converted

    Returns:
        float
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf
    except (TypeError, ValueError):
        return math.nan


def is_truthy(value: Any) -> bool:
    """Truthiness where NaN counts as false"""
    if isinstance(value, float) and math.isnan(value):
        return False

    return bool(value)


def format_number(value: Union[int, float]) -> str:
    """
    Renders a number for display, the way JavaScript's Number.toString()
    does: the shortest round-tripping digits, in plain notation between
    1e-7 and 1e21 and in exponent notation outside of it.

    Args:
        value:
            The number to be rendered

    Returns:
        str
    """
    if isinstance(value, int) and abs(value) < 10 ** 21:
        return str(value)

    value = float(value)
    if math.isnan(value):
        return 'NaN'

    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'

    if value == 0:
        return '0'

    sign, digits, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = ''.join(map(str, digits))
    prefix = '-' if sign else ''

    # Position of the decimal point relative to the start of the digits
    point = len(digits) + exponent

    if len(digits) <= point <= 21:
        return prefix + digits + '0' * (point - len(digits))

    if 0 < point <= 21:
        return prefix + digits[:point] + '.' + digits[point:]

    if -6 < point <= 0:
        return prefix + '0.' + '0' * -point + digits

    exp = point - 1
    mantissa = digits if len(digits) == 1 else digits[0] + '.' + digits[1:]
    return f"{prefix}{mantissa}e{'+' if exp >= 0 else '-'}{abs(exp)}"
