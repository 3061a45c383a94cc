#!/usr/bin/env python3
import logging
from typing import Any, Dict, List

from aiohttp import ClientSession

from config import TokenInfo, resolve_token
from constants import ORDERBOOK_PER_PAGE
from sampling.asset_data import encode_erc20_asset_data

logger = logging.getLogger(__name__)


class OrderbookResponseError(ValueError):
    """Raised when an orders page is missing its records list."""


class OrderbookClient:
    """Reads open orders from a 0x Standard Relayer API (v3) endpoint."""

    def __init__(
        self,
        session: ClientSession,
        *,
        base_url: str,
        tokens: Dict[str, TokenInfo],
        per_page: int = ORDERBOOK_PER_PAGE,
    ) -> None:
        self.session = session
        self.base_url = base_url.rstrip('/')
        self.tokens = tokens
        self.per_page = per_page

    async def fetch_native_orders(self, maker_token: str, taker_token: str) -> List[Dict[str, Any]]:
        """Returns every open order selling ``maker_token`` for ``taker_token``."""
        maker_asset_data = encode_erc20_asset_data(resolve_token(self.tokens, maker_token).address)
        taker_asset_data = encode_erc20_asset_data(resolve_token(self.tokens, taker_token).address)
        return await self.get_orders(maker_asset_data, taker_asset_data)

    async def get_orders(self, maker_asset_data: str, taker_asset_data: str) -> List[Dict[str, Any]]:
        orders: List[Dict[str, Any]] = []
        page = 1
        while True:
            data = await self._get_page(maker_asset_data, taker_asset_data, page)
            records = data.get('records')
            if not isinstance(records, list):
                raise OrderbookResponseError(f"Orders page {page} has no records list")
            orders.extend(record['order'] for record in records)

            total = int(data.get('total', len(orders)))
            if not records or page * self.per_page >= total:
                return orders
            page += 1

    async def _get_page(self, maker_asset_data: str, taker_asset_data: str, page: int) -> Dict[str, Any]:
        params = {
            'makerAssetData': maker_asset_data,
            'takerAssetData': taker_asset_data,
            'page': str(page),
            'perPage': str(self.per_page),
        }
        logger.debug("SRA orders page=%s maker=%s taker=%s", page, maker_asset_data, taker_asset_data)
        async with self.session.get(f"{self.base_url}/v3/orders", params=params) as response:
            response.raise_for_status()
            return await response.json()
