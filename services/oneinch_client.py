#!/usr/bin/env python3
import logging
from decimal import Decimal, InvalidOperation
from typing import Dict

from aiohttp import ClientSession

from constants import ONEINCH_DISABLED_EXCHANGES, ONEINCH_SOURCE_NAME
from sampling.serializer import to_decimal_string

logger = logging.getLogger(__name__)


class QuoteResponseError(ValueError):
    """Raised when a quote response lacks a parseable toTokenAmount."""


class OneInchClient:
    def __init__(self, session: ClientSession, *, quote_url: str) -> None:
        self.session = session
        self.quote_url = quote_url

    @staticmethod
    def quote_params(from_token: str, to_token: str, amount: Decimal) -> Dict[str, str]:
        return {
            'fromTokenSymbol': from_token,
            'toTokenSymbol': to_token,
            'amount': to_decimal_string(amount),
            'disabledExchangesList': ','.join(ONEINCH_DISABLED_EXCHANGES),
        }

    @staticmethod
    def parse_quote(response: Dict[str, object]) -> Decimal:
        to_token_amount = response.get('toTokenAmount')
        if to_token_amount is None:
            raise QuoteResponseError("1inch quote response missing toTokenAmount")
        try:
            amount = Decimal(str(to_token_amount))
        except InvalidOperation:
            raise QuoteResponseError(f"1inch toTokenAmount is not a number: {to_token_amount!r}") from None
        # is_finite() first: comparing a signalling NaN raises InvalidOperation
        if not amount.is_finite() or amount.is_signed() or amount != amount.to_integral_value():
            raise QuoteResponseError(f"1inch toTokenAmount is not a base-unit integer: {to_token_amount!r}")
        return amount

    async def fetch_quote(self, from_token: str, to_token: str, amount: Decimal) -> Decimal:
        """Returns the quoted buy amount, in base units of ``to_token``."""
        params = self.quote_params(from_token, to_token, amount)
        logger.debug("1inch quote %s -> %s amount=%s", from_token, to_token, params['amount'])
        async with self.session.get(self.quote_url, params=params) as response:
            response.raise_for_status()
            data = await response.json()
        return self.parse_quote(data)

    async def fetch_sell_quotes(self, maker_token: str, taker_token: str, amount: Decimal) -> Dict[str, Decimal]:
        """Collects sell quotes for ``amount`` keyed by source name."""
        return {
            ONEINCH_SOURCE_NAME: await self.fetch_quote(taker_token, maker_token, amount),
        }
