"""Block-explorer endpoints for supported chains.

Static configuration only: chain name to chain id and explorer URLs, plus
resolution of user-supplied API keys.
"""

from bn_matchers.etherscan.chains import CHAIN_CONFIG
from bn_matchers.etherscan.endpoints import (
    get_chain_config,
    get_network_entry,
    resolve_api_key,
    to_chain,
)
from bn_matchers.etherscan.types import (
    Chain,
    EtherscanChainConfig,
    EtherscanConfig,
    EtherscanNetworkEntry,
    EtherscanURLs,
)

__all__ = [
    # Types
    "Chain",
    "EtherscanChainConfig",
    "EtherscanConfig",
    "EtherscanNetworkEntry",
    "EtherscanURLs",
    # Data
    "CHAIN_CONFIG",
    # Lookups
    "get_chain_config",
    "get_network_entry",
    "resolve_api_key",
    "to_chain",
]
