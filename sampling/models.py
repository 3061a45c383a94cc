"""Dataclasses for the records a sampling run produces."""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List


@dataclass(frozen=True, slots=True)
class SellQuoteResult:
    amount: Decimal
    sources: Dict[str, Decimal] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {'amount': self.amount, 'sources': dict(self.sources)}


@dataclass(frozen=True, slots=True)
class Sample:
    """One pair's snapshot: block height, resting orders and aggregator quotes."""
    block_number: int
    maker_token: str
    taker_token: str
    orders: List[Dict[str, Any]]
    sell_quotes: List[SellQuoteResult]
    maker_token_address: str
    taker_token_address: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'blockNumber': self.block_number,
            'makerToken': self.maker_token,
            'takerToken': self.taker_token,
            'orders': list(self.orders),
            'sellQuotes': [quote.to_dict() for quote in self.sell_quotes],
            'makerTokenAddress': self.maker_token_address,
            'takerTokenAddress': self.taker_token_address,
        }
