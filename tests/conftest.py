import pytest

from txexplain.explainer.registry import AssetInfo, LookupTables


@pytest.fixture()
def evm_lookups() -> LookupTables:
    return LookupTables(
        {"0xFF970A61A04B1CA14834A43F5DE4533EBDDB5CC8": AssetInfo(symbol="USDC", decimals=6)},
        {"0xe592427a0aece92de3edee1f18e0157c05861564": "Uniswap V3 Router"},
        chain="arbitrum",
    )


@pytest.fixture()
def sui_lookups() -> LookupTables:
    return LookupTables(
        {"0x2::sui::SUI": AssetInfo(symbol="SUI", decimals=9)},
        {"0x2": "Sui Framework"},
        chain="sui",
    )
