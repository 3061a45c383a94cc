#!/usr/bin/env python3
from web3 import Web3

from constants import ERC20_ASSET_DATA_SIGNATURE

# 0xf47261b0
ERC20_PROXY_ID = bytes(Web3.keccak(text=ERC20_ASSET_DATA_SIGNATURE)[:4])


def encode_erc20_asset_data(token_address: str) -> str:
    """Encodes a token address as 0x v3 ERC20 asset data.

    The result is the ERC20 proxy id followed by the address left-padded to 32 bytes,
    which is the form the Standard Relayer API expects for makerAssetData/takerAssetData.
    """
    hex_address = token_address[2:] if token_address.lower().startswith('0x') else token_address
    try:
        address_bytes = bytes.fromhex(hex_address)
    except ValueError:
        raise ValueError(f"Token address is not valid hex: {token_address!r}") from None
    if len(address_bytes) != 20:
        raise ValueError(f"Token address must be 20 bytes, got {len(address_bytes)}: {token_address!r}")
    return '0x' + (ERC20_PROXY_ID + address_bytes.rjust(32, b'\x00')).hex()
