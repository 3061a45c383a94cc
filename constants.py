#!/usr/bin/env python3
from pathlib import Path
from typing import Dict, List, Union

# --- ANSI Color Codes ---
C_GREEN = '\033[92m'
C_BLUE = '\033[94m'
C_RESET = '\033[0m'

# --- API Configuration ---
ORDERBOOK_API_BASE_URL = 'https://api.0x.org/sra'
ONEINCH_QUOTE_API_URL = 'https://api.1inch.exchange/v1.1/quote'
DEFAULT_RPC_URL = 'https://cloudflare-eth.com'
USER_AGENT = 'DexSampler/1.0'
DEFAULT_REQUEST_TIMEOUT = 30.0

# --- Environment Variable Names ---
TOKENS_FILE_ENV_VAR = 'SAMPLER_TOKENS_FILE'
RPC_URL_ENV_VAR = 'SAMPLER_RPC_URL'
ORDERBOOK_URL_ENV_VAR = 'SAMPLER_ORDERBOOK_URL'
QUOTE_URL_ENV_VAR = 'SAMPLER_QUOTE_URL'
REQUEST_TIMEOUT_ENV_VAR = 'SAMPLER_REQUEST_TIMEOUT'
LOG_LEVEL_ENV_VAR = 'SAMPLER_LOG_LEVEL'

# --- Output ---
DEFAULT_OUTPUT_FILE = './output'
DEFAULT_LOG_LEVEL = 'INFO'
DEFAULT_TOKENS_FILE = Path(__file__).resolve().parent / 'sampling' / 'tokens.json'

# --- Order Book (0x Standard Relayer API v3) ---
ORDERBOOK_PER_PAGE = 100
ERC20_ASSET_DATA_SIGNATURE = 'ERC20Token(address)'

# --- Quote Sources ---
ONEINCH_SOURCE_NAME = '1inch'
ONEINCH_DISABLED_EXCHANGES = ('Bancor', 'AirSwap', 'PMM')

# --- Precision ---
NATIVE_DECIMALS = 18
# uint256 max has 78 decimal digits
DECIMAL_PRECISION = 78

# --- Sampled Pairs ("TAKER/MAKER"; sell amounts in human units of the maker token) ---
DEFAULT_PAIRS: List[Dict[str, Union[str, List[str]]]] = [
    {'pair': 'ETH/DAI', 'sellAmounts': ['0.1', '1', '10', '100']},
    {'pair': 'DAI/ETH', 'sellAmounts': ['50', '100', '1000', '10000']},
    {'pair': 'ETH/USDC', 'sellAmounts': ['0.1', '10', '100', '1000']},
    {'pair': 'USDC/ETH', 'sellAmounts': ['50', '100', '1000', '10000']},
    {'pair': 'ETH/ZRX', 'sellAmounts': ['0.1', '1', '10', '100']},
    {'pair': 'ZRX/ETH', 'sellAmounts': ['50', '100', '1000', '10000']},
    {'pair': 'ETH/BAT', 'sellAmounts': ['0.1', '1', '10', '100']},
    {'pair': 'BAT/ETH', 'sellAmounts': ['50', '100', '1000', '10000']},
    {'pair': 'DAI/ZRX', 'sellAmounts': ['50', '100', '1000', '10000']},
    {'pair': 'ZRX/DAI', 'sellAmounts': ['50', '100', '1000', '10000']},
]
