#!/usr/bin/env python3
import asyncio
import logging
from typing import List, Optional, Sequence

import aiohttp

import constants
from config import AppConfig, load_config
from sampling.assembler import SampleAssembler
from sampling.models import Sample
from services.oneinch_client import OneInchClient
from services.orderbook_client import OrderbookClient
from services.rpc_client import RpcClient
from storage import append_samples


async def run(config: AppConfig) -> List[Sample]:
    """Samples every configured pair and appends the batch to the output file.

    Nothing is written unless every pair was sampled successfully.
    """
    timeout = aiohttp.ClientTimeout(total=config.request_timeout)
    async with aiohttp.ClientSession(headers={'User-Agent': constants.USER_AGENT}, timeout=timeout) as session:
        assembler = SampleAssembler(
            config,
            RpcClient(session, rpc_url=config.rpc_url),
            OrderbookClient(session, base_url=config.orderbook_url, tokens=config.tokens),
            OneInchClient(session, quote_url=config.quote_url),
        )
        samples = await assembler.fetch_samples()
    append_samples(config.output_file, samples)
    return samples


def main(argv: Optional[Sequence[str]] = None) -> int:
    """The main synchronous entry point for the application."""
    config = load_config(argv)
    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    print(f"{constants.C_BLUE}Sampling {len(config.pairs)} pairs into {config.output_file}{constants.C_RESET}")
    samples = asyncio.run(run(config))
    print(f"{constants.C_GREEN}Appended {len(samples)} samples to {config.output_file}{constants.C_RESET}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
