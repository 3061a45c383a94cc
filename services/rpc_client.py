#!/usr/bin/env python3
import asyncio
import logging

from aiohttp import ClientSession

logger = logging.getLogger(__name__)


class RpcError(RuntimeError):
    """Raised when the node answers with a JSON-RPC error member."""


class RpcClient:
    """Queries an Ethereum JSON-RPC endpoint over the shared aiohttp session."""

    def __init__(self, session: ClientSession, *, rpc_url: str) -> None:
        self._session = session
        self._rpc_url = rpc_url
        self._id_lock = asyncio.Lock()
        self._next_request_id = 1

    async def get_block_number(self) -> int:
        result = await self._rpc_call("eth_blockNumber", [])
        if not isinstance(result, str):
            raise RpcError(f"eth_blockNumber returned a non-hex result: {result!r}")
        return int(result, 16)

    async def _rpc_call(self, method: str, params: list):
        request_id = await self._get_request_id()
        payload = {
            "jsonrpc": "2.0",
            "method": method,
            "params": params,
            "id": request_id,
        }
        logger.debug("RPC %s -> %s", method, self._rpc_url)
        async with self._session.post(self._rpc_url, json=payload) as response:
            response.raise_for_status()
            data = await response.json()
        if 'error' in data:
            raise RpcError(data['error'])
        return data.get('result')

    async def _get_request_id(self) -> int:
        async with self._id_lock:
            request_id = self._next_request_id
            self._next_request_id += 1
        return request_id
