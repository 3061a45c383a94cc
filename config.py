#!/usr/bin/env python3
import argparse
import json
import logging
import os
import re
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple, Union

import constants

_ADDRESS_RE = re.compile(r'^0x[0-9a-fA-F]{40}$')


class ConfigError(ValueError):
    """Raised for malformed pair labels, unknown tokens or bad settings."""


class TokenInfo(NamedTuple):
    address: str
    decimals: int


class PairConfig(NamedTuple):
    """A "TAKER/MAKER" pair label and the maker-token amounts to quote."""
    pair: str
    sell_amounts: Tuple[Decimal, ...]


class AppConfig(NamedTuple):
    """Typed configuration object."""
    output_file: str
    pairs: Tuple[PairConfig, ...]
    tokens: Dict[str, TokenInfo]
    rpc_url: str
    orderbook_url: str
    quote_url: str
    request_timeout: float
    log_level: str


def split_pair(label: str) -> Tuple[str, str]:
    """Splits a pair label into ``(maker_token, taker_token)``.

    The label is written taker first, so "ETH/DAI" yields maker DAI and taker ETH.
    """
    parts = label.split('/')
    if len(parts) != 2 or not all(part.strip() for part in parts):
        raise ConfigError(f"Malformed pair label '{label}'; expected 'TAKER/MAKER'.")
    taker_token, maker_token = (part.strip() for part in parts)
    return maker_token, taker_token


def resolve_token(tokens: Dict[str, TokenInfo], symbol: str) -> TokenInfo:
    try:
        return tokens[symbol]
    except KeyError:
        raise ConfigError(f"Token '{symbol}' is missing from the token metadata table.") from None


def load_token_metadata(path: Union[str, Path]) -> Dict[str, TokenInfo]:
    """Reads the static ``{symbol: {address, decimals}}`` table."""
    with Path(path).open('r', encoding='utf-8') as fh:
        raw = json.load(fh)
    if not isinstance(raw, dict):
        raise ConfigError(f"Token metadata in {path} must be a JSON object.")

    tokens: Dict[str, TokenInfo] = {}
    for symbol, entry in raw.items():
        if not isinstance(entry, dict):
            raise ConfigError(f"Token '{symbol}' must map to an object with address and decimals.")
        address = entry.get('address')
        decimals = entry.get('decimals')
        if not isinstance(address, str) or not _ADDRESS_RE.match(address):
            raise ConfigError(f"Token '{symbol}' has an invalid address: {address!r}")
        if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
            raise ConfigError(f"Token '{symbol}' has invalid decimals: {decimals!r}")
        tokens[symbol] = TokenInfo(address=address.lower(), decimals=decimals)
    return tokens


def build_pairs(raw_pairs: Iterable[Dict[str, object]]) -> Tuple[PairConfig, ...]:
    pairs: List[PairConfig] = []
    for entry in raw_pairs:
        label = entry['pair']
        try:
            amounts = tuple(Decimal(str(amount)) for amount in entry.get('sellAmounts', []))
        except InvalidOperation:
            raise ConfigError(f"Pair '{label}' has a non-numeric sell amount.") from None
        pairs.append(PairConfig(pair=label, sell_amounts=amounts))
    return tuple(pairs)


def validate_pairs(pairs: Iterable[PairConfig], tokens: Dict[str, TokenInfo]) -> None:
    """Fails fast if any pair is malformed or references an unknown token."""
    for pair in pairs:
        for symbol in split_pair(pair.pair):
            resolve_token(tokens, symbol)


def _env_float(name: str, default: float) -> float:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {value!r}.") from None


def load_config(argv: Optional[Sequence[str]] = None) -> AppConfig:
    """
    Parses command-line arguments and loads environment variables to create a configuration object.
    """
    parser = argparse.ArgumentParser(
        description="Sample 0x order book orders and 1inch sell quotes for a fixed set of pairs.",
        epilog="Example: ./main.py samples.jsonl"
    )
    parser.add_argument(
        'output_file',
        nargs='?',
        default=constants.DEFAULT_OUTPUT_FILE,
        help=f'File to append the JSON sample line to (default: {constants.DEFAULT_OUTPUT_FILE}).',
    )
    args = parser.parse_args(argv)

    tokens_file = os.environ.get(constants.TOKENS_FILE_ENV_VAR) or constants.DEFAULT_TOKENS_FILE
    tokens = load_token_metadata(tokens_file)
    pairs = build_pairs(constants.DEFAULT_PAIRS)
    validate_pairs(pairs, tokens)

    request_timeout = _env_float(constants.REQUEST_TIMEOUT_ENV_VAR, constants.DEFAULT_REQUEST_TIMEOUT)
    if request_timeout <= 0:
        raise ConfigError(f"{constants.REQUEST_TIMEOUT_ENV_VAR} must be positive.")

    log_level = (os.environ.get(constants.LOG_LEVEL_ENV_VAR) or constants.DEFAULT_LOG_LEVEL).upper()
    # getLevelName returns the numeric level for known names, a "Level X" string otherwise
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"{constants.LOG_LEVEL_ENV_VAR} must be a logging level name, got {log_level!r}.")

    return AppConfig(
        output_file=args.output_file,
        pairs=pairs,
        tokens=tokens,
        rpc_url=os.environ.get(constants.RPC_URL_ENV_VAR) or constants.DEFAULT_RPC_URL,
        orderbook_url=os.environ.get(constants.ORDERBOOK_URL_ENV_VAR) or constants.ORDERBOOK_API_BASE_URL,
        quote_url=os.environ.get(constants.QUOTE_URL_ENV_VAR) or constants.ONEINCH_QUOTE_API_URL,
        request_timeout=request_timeout,
        log_level=log_level,
    )
