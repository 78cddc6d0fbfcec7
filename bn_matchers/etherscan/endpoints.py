"""Chain lookups and API key resolution.

Usage:
    from bn_matchers.etherscan import EtherscanConfig, get_chain_config, resolve_api_key

    urls = get_chain_config("polygon").urls
    key = resolve_api_key(EtherscanConfig(apiKey={"polygon": "ABC"}), "polygon")
"""

from __future__ import annotations

import structlog

from bn_matchers.errors import MissingApiKey, UnsupportedChain
from bn_matchers.etherscan.chains import CHAIN_CONFIG
from bn_matchers.etherscan.types import (
    Chain,
    EtherscanChainConfig,
    EtherscanConfig,
    EtherscanNetworkEntry,
)

logger = structlog.get_logger()


def to_chain(name: str | Chain) -> Chain:
    """Resolve a chain name to its Chain member.

    Raises:
        UnsupportedChain: If the name is not a known chain
    """
    if isinstance(name, Chain):
        return name
    try:
        return Chain(name)
    except ValueError as err:
        logger.debug("unsupported_chain_name", chain=name)
        supported = ", ".join(c.value for c in Chain)
        raise UnsupportedChain(
            f"Chain '{name}' is not supported. Supported chains: {supported}"
        ) from err


def get_chain_config(name: str | Chain) -> EtherscanChainConfig:
    """Return chain id and explorer URLs for a named chain.

    Raises:
        UnsupportedChain: If the name is not a known chain
    """
    return CHAIN_CONFIG[to_chain(name)]


def get_network_entry(chain_id: int) -> EtherscanNetworkEntry:
    """Find the network whose chain id matches.

    Raises:
        UnsupportedChain: If no configured chain has this id
    """
    for chain, config in CHAIN_CONFIG.items():
        if config.chain_id == chain_id:
            return EtherscanNetworkEntry(network=chain, urls=config.urls)
    logger.debug("unsupported_chain_id", chain_id=chain_id)
    raise UnsupportedChain(f"No explorer configured for chain id {chain_id}")


def resolve_api_key(config: EtherscanConfig, name: str | Chain) -> str:
    """Pick the API key to use for a chain.

    A single string key applies to every chain; a mapping is looked up by
    chain.

    Raises:
        UnsupportedChain: If the name is not a known chain
        MissingApiKey: If no non-empty key is configured for the chain
    """
    chain = to_chain(name)
    api_key = config.api_key
    if isinstance(api_key, dict):
        api_key = api_key.get(chain)
    if not api_key:
        raise MissingApiKey(f"No explorer API key configured for chain '{chain.value}'")
    return api_key
