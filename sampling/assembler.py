#!/usr/bin/env python3
import asyncio
import logging
from decimal import Decimal
from typing import Any, Awaitable, List

from config import AppConfig, PairConfig, resolve_token, split_pair
from services.oneinch_client import OneInchClient
from services.orderbook_client import OrderbookClient
from services.rpc_client import RpcClient
from .models import Sample, SellQuoteResult
from .units import to_base_units


async def gather_all(*aws: Awaitable[Any]) -> List[Any]:
    """Runs awaitables concurrently and returns their results in order.

    If any of them fails, the still-running siblings are cancelled and awaited
    before the original exception is re-raised.
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


class SampleAssembler:
    def __init__(
        self,
        config: AppConfig,
        rpc_client: RpcClient,
        orderbook_client: OrderbookClient,
        quote_client: OneInchClient,
    ):
        self.config = config
        self.rpc_client = rpc_client
        self.orderbook_client = orderbook_client
        self.quote_client = quote_client
        self.logger = logging.getLogger(__name__)

    async def fetch_samples(self) -> List[Sample]:
        """Samples every configured pair, one pair at a time, in config order."""
        samples: List[Sample] = []
        for pair in self.config.pairs:
            samples.append(await self.fetch_sample(pair))
        return samples

    async def fetch_sample(self, pair: PairConfig) -> Sample:
        maker_token, taker_token = split_pair(pair.pair)
        maker_info = resolve_token(self.config.tokens, maker_token)
        taker_info = resolve_token(self.config.tokens, taker_token)
        amounts = [to_base_units(amount, maker_info) for amount in pair.sell_amounts]

        block_number, orders, sell_quotes = await gather_all(
            self.rpc_client.get_block_number(),
            self.orderbook_client.fetch_native_orders(maker_token, taker_token),
            self._fetch_sell_quotes(maker_token, taker_token, amounts),
        )

        self.logger.info(
            "%s @ block %s: %d orders, %d sell quotes",
            pair.pair,
            block_number,
            len(orders),
            len(sell_quotes),
        )
        return Sample(
            block_number=block_number,
            maker_token=maker_token,
            taker_token=taker_token,
            orders=orders,
            sell_quotes=sell_quotes,
            maker_token_address=maker_info.address,
            taker_token_address=taker_info.address,
        )

    async def _fetch_sell_quotes(self, maker_token: str, taker_token: str, amounts: List[Decimal]) -> List[SellQuoteResult]:
        return await gather_all(*(
            self._fetch_sell_quote(maker_token, taker_token, amount) for amount in amounts
        ))

    async def _fetch_sell_quote(self, maker_token: str, taker_token: str, amount: Decimal) -> SellQuoteResult:
        sources = await self.quote_client.fetch_sell_quotes(maker_token, taker_token, amount)
        return SellQuoteResult(amount=amount, sources=sources)
