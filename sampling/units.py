#!/usr/bin/env python3
from decimal import Decimal, Inexact, localcontext
from typing import Optional, Union

from config import TokenInfo
from constants import DECIMAL_PRECISION, NATIVE_DECIMALS

Amount = Union[Decimal, int, str, float]


def to_decimal(amount: Amount) -> Decimal:
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, float):
        # str() keeps the shortest repr, so 0.1 stays 0.1 rather than its binary expansion
        return Decimal(str(amount))
    return Decimal(amount)


def to_base_units(amount: Amount, token: Optional[TokenInfo] = None) -> Decimal:
    """Scales a human-readable amount by ``10 ** decimals``.

    Without a token the native 18-decimal convention applies. The multiplication
    runs with the Inexact trap set, so a result that would need rounding raises
    ``decimal.Inexact`` instead of losing precision.
    """
    decimals = token.decimals if token is not None else NATIVE_DECIMALS
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        ctx.traps[Inexact] = True
        value = to_decimal(amount) * (Decimal(10) ** decimals)
        if value == value.to_integral_value():
            return value.quantize(Decimal(1))
        return value
