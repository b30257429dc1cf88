"""LookupTables — read-only symbol/decimals and display-name tables per chain."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Protocol

from pydantic import BaseModel, ConfigDict

from txexplain.domain.enums import Chain, LedgerFamily, ledger_family
from txexplain.explainer.utils.gas import native_minor_unit
from txexplain.explainer.utils.gas import native_symbol as chain_native_symbol

if TYPE_CHECKING:
    from txexplain.config import Settings

logger = logging.getLogger(__name__)


class AssetInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    symbol: str
    decimals: int


class NameResolver(Protocol):
    """Resolves an address to a human name (ENS, SuiNS...). None = no resolution."""

    def resolve(self, address: str) -> str | None: ...


class NullNameResolver:
    """Name-service stub: never resolves, never fails."""

    def resolve(self, address: str) -> str | None:
        return None


# Known tokens on Arbitrum (lowercase addresses)
ARBITRUM_TOKENS: dict[str, AssetInfo] = {
    # Arbitrum One
    "0xff970a61a04b1ca14834a43f5de4533ebddb5cc8": AssetInfo(symbol="USDC", decimals=6),
    "0xfd086bc7cd5c481dcc9c85ebe478a1c0b69fcbb9": AssetInfo(symbol="USDT", decimals=6),
    "0xda10009cbd5d07dd0cecc66161fc93d7c9000da1": AssetInfo(symbol="DAI", decimals=18),
    "0x82af49447d8a07e3bd95bd0d56f35241523fbab1": AssetInfo(symbol="WETH", decimals=18),
    "0x912ce59144191c1204e64559fe8253a0e49e6548": AssetInfo(symbol="ARB", decimals=18),
    "0x539bde0d7dbd336b79148aa742883198bbf60342": AssetInfo(symbol="MAGIC", decimals=18),
    "0x0c880f6761f1af8d9aa9c466984b80dab9a8c9e8": AssetInfo(symbol="PENDLE", decimals=18),
    "0x4e352cf164e64adcbad318c3a1e222e9eba4ce42": AssetInfo(symbol="MCB", decimals=18),
    "0xfc5a1a6eb076a2c7ad06ed22c90d7e710e35ad0a": AssetInfo(symbol="GMX", decimals=18),
    "0x3d9907f9a368ad0a51be2f8d4b8e4507dfb52c6a": AssetInfo(symbol="GRAIL", decimals=18),
    # Arbitrum Sepolia
    "0x75faf114eafb1bdbe2f0316df893fd58ce46aa4d": AssetInfo(symbol="USDC", decimals=6),
    "0x980b62da83eff3d4576c647993b0c1d7faf17c73": AssetInfo(symbol="WETH", decimals=18),
}

ARBITRUM_CONTRACTS: dict[str, str] = {
    # DEXs
    "0xc31e54c7a869b9fcbecc14363cf510d1c41fa443": "Uniswap V3 Router",
    "0xe592427a0aece92de3edee1f18e0157c05861564": "Uniswap V3 Router 2",
    "0x68b3465833fb72a70ecdf485e0e4c7bd8665fc45": "Uniswap V3 Swap Router",
    "0x1b02da8cb0d097eb8d57a175b88c7d8b47997506": "SushiSwap Router",
    # Lending
    "0xa5edbdd9646f8dff606d7448e414884c7d905dca": "Aave V3 Pool",
    "0x794a61358d6845594f94dc1db02a252b5b4814ad": "Aave V3 Pool (Arbitrum)",
    # Bridges
    "0x72ce9c846789fdb6fc1f34ac4ad25dd9ef7031ef": "Arbitrum Bridge",
    "0x8315177ab297ba92a06054ce80a67ed4dbd7ed3a": "Arbitrum Bridge (L1)",
    # Tokens & system
    "0x912ce59144191c1204e64559fe8253a0e49e6548": "Arbitrum Token (ARB)",
    "0x0000000000000000000000000000000000000064": "Arbitrum One L1 Gas Oracle",
    "0x000000000000000000000000000000000000006c": "ArbGasInfo Precompile",
}

SUI_COINS: dict[str, AssetInfo] = {
    "0x2::sui::SUI": AssetInfo(symbol="SUI", decimals=9),
    "0xdba34672e30cb065b1f93e3ab55318768fd6fef66c15942c9f7cb846e2f900e7::usdc::USDC": AssetInfo(
        symbol="USDC", decimals=6
    ),
    "0xc060006111016b8a020ad5b33834984a437aaa7d3c74c18e09a95d48aceab08c::coin::COIN": AssetInfo(
        symbol="USDT", decimals=6
    ),
}

SUI_PACKAGES: dict[str, str] = {
    "0x1": "Move Stdlib",
    "0x2": "Sui Framework",
    "0x3": "Sui System",
    "0xdee9": "DeepBook",
}


class LookupTables:
    """Immutable lookup configuration passed into the pipeline.

    Keys are normalized to lowercase on construction and the tables are
    exposed as read-only mappings, so one instance can be shared between
    concurrent callers.
    """

    def __init__(
        self,
        assets: Mapping[str, AssetInfo] | None = None,
        contract_names: Mapping[str, str] | None = None,
        *,
        chain: str = Chain.ARBITRUM.value,
        native_symbol: str | None = None,
        native_decimals: int | None = None,
        fallback_symbol: str | None = None,
        fallback_decimals: int | None = None,
        minor_unit: str | None = None,
        name_resolver: NameResolver | None = None,
    ) -> None:
        object_model = ledger_family(chain) == LedgerFamily.OBJECT
        default_decimals = 9 if object_model else 18
        self._chain = chain
        self._assets: Mapping[str, AssetInfo] = MappingProxyType(
            {k.lower(): v for k, v in (assets or {}).items()}
        )
        self._contract_names: Mapping[str, str] = MappingProxyType(
            {k.lower(): v for k, v in (contract_names or {}).items()}
        )
        self._native = AssetInfo(
            symbol=native_symbol or chain_native_symbol(chain),
            decimals=default_decimals if native_decimals is None else native_decimals,
        )
        self._fallback = AssetInfo(
            symbol=fallback_symbol or ("coins" if object_model else "tokens"),
            decimals=default_decimals if fallback_decimals is None else fallback_decimals,
        )
        self._minor_unit = minor_unit or native_minor_unit(chain)
        self._name_resolver: NameResolver = name_resolver or NullNameResolver()

    @property
    def chain(self) -> str:
        return self._chain

    @property
    def assets(self) -> Mapping[str, AssetInfo]:
        return self._assets

    @property
    def contract_names(self) -> Mapping[str, str]:
        return self._contract_names

    @property
    def native(self) -> AssetInfo:
        return self._native

    @property
    def fallback(self) -> AssetInfo:
        return self._fallback

    @property
    def minor_unit(self) -> str:
        return self._minor_unit

    def asset_info(self, asset_id: str | None) -> AssetInfo:
        """Symbol/decimals for an asset id. Empty id = native; unlisted = fallback."""
        if not asset_id:
            return self._native
        return self._assets.get(asset_id.lower(), self._fallback)

    def contract_name(self, address: str | None) -> str | None:
        if not address:
            return None
        return self._contract_names.get(address.lower())

    def resolve_name(self, address: str) -> str | None:
        try:
            return self._name_resolver.resolve(address)
        except Exception:
            logger.warning("Name resolution failed for %s", address, exc_info=True)
            return None


def build_default_lookups(chain: str = Chain.ARBITRUM.value, settings: Settings | None = None) -> LookupTables:
    """Create LookupTables with the bundled static tables for a chain."""
    kwargs: dict = {}
    if settings is not None:
        kwargs = {
            "fallback_symbol": settings.fallback_symbol_for(chain),
            "fallback_decimals": settings.fallback_decimals_for(chain),
        }

    if ledger_family(chain) == LedgerFamily.OBJECT:
        return LookupTables(SUI_COINS, SUI_PACKAGES, chain=chain, **kwargs)
    if chain == Chain.ARBITRUM.value:
        return LookupTables(ARBITRUM_TOKENS, ARBITRUM_CONTRACTS, chain=chain, **kwargs)
    return LookupTables(chain=chain, **kwargs)
