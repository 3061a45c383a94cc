#!/usr/bin/env python3
from decimal import Decimal
from typing import Any

from .models import Sample, SellQuoteResult


def to_decimal_string(value: Decimal) -> str:
    """Renders a Decimal in plain base-10 notation, without exponent or trailing zeros.

    Formatting is exact for any number of digits; no context rounding is applied.
    """
    text = format(value, 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


def stringify_decimals(value: Any) -> Any:
    """Recursively replaces Decimal values with decimal strings.

    Records are expanded through ``to_dict``; lists, tuples and dicts are rebuilt;
    any other value (str, int, float, bool, None) is returned unchanged.
    """
    if isinstance(value, Decimal):
        return to_decimal_string(value)
    if isinstance(value, (Sample, SellQuoteResult)):
        return stringify_decimals(value.to_dict())
    if isinstance(value, (list, tuple)):
        return [stringify_decimals(item) for item in value]
    if isinstance(value, dict):
        return {key: stringify_decimals(item) for key, item in value.items()}
    return value
