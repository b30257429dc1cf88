from enum import Enum


class Chain(str, Enum):
    """Supported networks. Values lowercase to match RPC/API conventions."""

    ETHEREUM = "ethereum"
    ARBITRUM = "arbitrum"
    OPTIMISM = "optimism"
    POLYGON = "polygon"
    BASE = "base"
    BSC = "bsc"
    AVALANCHE = "avalanche"
    SUI = "sui"


class LedgerFamily(str, Enum):
    """How a ledger reports execution: event logs (evm) or object effects (object)."""

    EVM = "evm"
    OBJECT = "object"


def ledger_family(chain: str) -> LedgerFamily:
    if chain == Chain.SUI.value:
        return LedgerFamily.OBJECT
    return LedgerFamily.EVM
