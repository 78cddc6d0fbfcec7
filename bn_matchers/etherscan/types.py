"""Pydantic models for block-explorer configuration.

Field aliases follow the camelCase keys used in hardhat-style config files
(apiURL, browserURL, chainId, apiKey).
"""

from __future__ import annotations

import os
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Chain(str, Enum):
    """Networks with a known block explorer."""

    MAINNET = "mainnet"
    ROPSTEN = "ropsten"
    RINKEBY = "rinkeby"
    GOERLI = "goerli"
    KOVAN = "kovan"
    # binance smart chain
    BSC = "bsc"
    BSC_TESTNET = "bscTestnet"
    # huobi eco chain
    HECO = "heco"
    HECO_TESTNET = "hecoTestnet"
    # fantom
    OPERA = "opera"
    FTM_TESTNET = "ftmTestnet"
    # optimism
    OPTIMISTIC_ETHEREUM = "optimisticEthereum"
    OPTIMISTIC_KOVAN = "optimisticKovan"
    # polygon
    POLYGON = "polygon"
    POLYGON_MUMBAI = "polygonMumbai"
    # arbitrum
    ARBITRUM_ONE = "arbitrumOne"
    ARBITRUM_TESTNET = "arbitrumTestnet"
    # avalanche
    AVALANCHE = "avalanche"
    AVALANCHE_FUJI_TESTNET = "avalancheFujiTestnet"
    # moonbeam
    MOONBEAM = "moonbeam"
    MOONRIVER = "moonriver"
    MOONBASE_ALPHA = "moonbaseAlpha"
    # harmony
    HARMONY = "harmony"
    HARMONY_TEST = "harmonyTest"
    # gnosis
    XDAI = "xdai"
    SOKOL = "sokol"
    # aurora
    AURORA = "aurora"
    AURORA_TESTNET = "auroraTestnet"
    CRONOS = "cronos"
    # bittorrent chain
    BTTC = "bttc"
    BTTC_TESTNET = "bttcTestnet"


class EtherscanURLs(BaseModel):
    """Explorer endpoints for one chain."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    api_url: str = Field(alias="apiURL", description="Verification API endpoint")
    browser_url: str = Field(alias="browserURL", description="Human-facing explorer URL")


class EtherscanChainConfig(BaseModel):
    """Chain id plus explorer endpoints."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    chain_id: int = Field(alias="chainId", gt=0)
    urls: EtherscanURLs


class EtherscanNetworkEntry(BaseModel):
    """A resolved network: its name and explorer endpoints."""

    model_config = ConfigDict(frozen=True)

    network: Chain
    urls: EtherscanURLs


class EtherscanConfig(BaseModel):
    """User-supplied explorer credentials.

    api_key is either one key used for every chain, or a mapping from chain
    name to key. Mapping keys must name a known chain.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    api_key: str | dict[Chain, str] | None = Field(default=None, alias="apiKey")

    @classmethod
    def from_env(cls, var: str = "ETHERSCAN_API_KEY") -> EtherscanConfig:
        """Build a config holding the single key found in the environment, if any."""
        return cls(api_key=os.environ.get(var) or None)
