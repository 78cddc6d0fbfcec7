"""Static explorer configuration for every supported chain."""

from bn_matchers.etherscan.types import Chain, EtherscanChainConfig, EtherscanURLs


def _entry(chain_id: int, api_url: str, browser_url: str) -> EtherscanChainConfig:
    return EtherscanChainConfig(
        chain_id=chain_id,
        urls=EtherscanURLs(api_url=api_url, browser_url=browser_url),
    )


CHAIN_CONFIG: dict[Chain, EtherscanChainConfig] = {
    Chain.MAINNET: _entry(1, "https://api.etherscan.io/api", "https://etherscan.io"),
    Chain.ROPSTEN: _entry(3, "https://api-ropsten.etherscan.io/api", "https://ropsten.etherscan.io"),
    Chain.RINKEBY: _entry(4, "https://api-rinkeby.etherscan.io/api", "https://rinkeby.etherscan.io"),
    Chain.GOERLI: _entry(5, "https://api-goerli.etherscan.io/api", "https://goerli.etherscan.io"),
    Chain.KOVAN: _entry(42, "https://api-kovan.etherscan.io/api", "https://kovan.etherscan.io"),
    Chain.BSC: _entry(56, "https://api.bscscan.com/api", "https://bscscan.com"),
    Chain.BSC_TESTNET: _entry(
        97, "https://api-testnet.bscscan.com/api", "https://testnet.bscscan.com"
    ),
    Chain.HECO: _entry(128, "https://api.hecoinfo.com/api", "https://hecoinfo.com"),
    Chain.HECO_TESTNET: _entry(
        256, "https://api-testnet.hecoinfo.com/api", "https://testnet.hecoinfo.com"
    ),
    Chain.OPERA: _entry(250, "https://api.ftmscan.com/api", "https://ftmscan.com"),
    Chain.FTM_TESTNET: _entry(
        4002, "https://api-testnet.ftmscan.com/api", "https://testnet.ftmscan.com"
    ),
    Chain.OPTIMISTIC_ETHEREUM: _entry(
        10, "https://api-optimistic.etherscan.io/api", "https://optimistic.etherscan.io/"
    ),
    Chain.OPTIMISTIC_KOVAN: _entry(
        69,
        "https://api-kovan-optimistic.etherscan.io/api",
        "https://kovan-optimistic.etherscan.io/",
    ),
    Chain.POLYGON: _entry(137, "https://api.polygonscan.com/api", "https://polygonscan.com"),
    Chain.POLYGON_MUMBAI: _entry(
        80001, "https://api-testnet.polygonscan.com/api", "https://mumbai.polygonscan.com/"
    ),
    Chain.ARBITRUM_ONE: _entry(42161, "https://api.arbiscan.io/api", "https://arbiscan.io/"),
    Chain.ARBITRUM_TESTNET: _entry(
        421611, "https://api-testnet.arbiscan.io/api", "https://testnet.arbiscan.io/"
    ),
    Chain.AVALANCHE: _entry(43114, "https://api.snowtrace.io/api", "https://snowtrace.io/"),
    Chain.AVALANCHE_FUJI_TESTNET: _entry(
        43113, "https://api-testnet.snowtrace.io/api", "https://testnet.snowtrace.io/"
    ),
    Chain.MOONBEAM: _entry(1284, "https://api-moonbeam.moonscan.io/api", "https://moonscan.io"),
    Chain.MOONRIVER: _entry(
        1285, "https://api-moonriver.moonscan.io/api", "https://moonriver.moonscan.io"
    ),
    Chain.MOONBASE_ALPHA: _entry(
        1287, "https://api-moonbase.moonscan.io/api", "https://moonbase.moonscan.io/"
    ),
    Chain.HARMONY: _entry(
        1666600000, "https://ctrver.t.hmny.io/verify", "https://explorer.harmony.one"
    ),
    Chain.HARMONY_TEST: _entry(
        1666700000,
        "https://ctrver.t.hmny.io/verify?network=testnet",
        "https://explorer.pops.one",
    ),
    Chain.XDAI: _entry(
        100, "https://blockscout.com/xdai/mainnet/api", "https://blockscout.com/xdai/mainnet"
    ),
    Chain.SOKOL: _entry(
        77, "https://blockscout.com/poa/sokol/api", "https://blockscout.com/poa/sokol"
    ),
    Chain.AURORA: _entry(
        1313161554, "https://explorer.mainnet.aurora.dev/api", "https://aurorascan.dev/"
    ),
    Chain.AURORA_TESTNET: _entry(
        1313161555, "https://explorer.testnet.aurora.dev/api", "https://testnet.aurorascan.dev"
    ),
    Chain.CRONOS: _entry(25, "https://api.cronoscan.com/api", "https://cronoscan.com"),
    Chain.BTTC: _entry(199, "https://api.bttcscan.com/api", "https://bttcscan.com/"),
    Chain.BTTC_TESTNET: _entry(
        1029, "https://api-testnet.bttcscan.com/api", "https://testnet.bttcscan.com/"
    ),
}
