"""Fee calculation for both ledger families."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from txexplain.domain.enums import LedgerFamily
from txexplain.domain.models.fee import FeeBreakdown
from txexplain.explainer.utils.decimals import parse_int_or_zero

if TYPE_CHECKING:
    from txexplain.domain.models.raw import RawFeeFields, RawTransaction

logger = logging.getLogger(__name__)

# Native token symbol per chain
NATIVE_SYMBOLS: dict[str, str] = {
    "ethereum": "ETH",
    "arbitrum": "ETH",
    "optimism": "ETH",
    "base": "ETH",
    "polygon": "MATIC",
    "bsc": "BNB",
    "avalanche": "AVAX",
    "sui": "SUI",
}

# Smallest denomination label, used when an amount can't be formatted
NATIVE_MINOR_UNITS: dict[str, str] = {
    "sui": "MIST",
}


def native_symbol(chain: str) -> str:
    return NATIVE_SYMBOLS.get(chain, "ETH")


def native_minor_unit(chain: str) -> str:
    return NATIVE_MINOR_UNITS.get(chain, "wei")


def resolve_effective_gas_price(fees: RawFeeFields) -> int:
    """Receipt effective price, else maxFeePerGas, else legacy gasPrice, else 0."""
    for candidate in (fees.effective_gas_price, fees.max_fee_per_gas, fees.gas_price):
        if candidate is not None:
            return parse_int_or_zero(candidate)
    return 0


def resolve_l1_fee(fees: RawFeeFields) -> int:
    """L1 data fee: reported l1Fee, else l1GasPrice * l1GasUsed when both are present, else 0."""
    if fees.l1_fee is not None:
        return parse_int_or_zero(fees.l1_fee)
    if fees.l1_gas_price is not None and fees.l1_gas_used is not None:
        return parse_int_or_zero(fees.l1_gas_price) * parse_int_or_zero(fees.l1_gas_used)
    return 0


def calculate_evm_fee(fees: RawFeeFields) -> FeeBreakdown:
    """gasUsed x effectiveGasPrice + L1 data fee (rollups)."""
    gas_used = parse_int_or_zero(fees.gas_used)
    gas_price = resolve_effective_gas_price(fees)
    execution_cost = gas_used * gas_price
    l1_fee = resolve_l1_fee(fees)
    return FeeBreakdown(
        execution_cost=execution_cost,
        data_or_storage_cost=l1_fee,
        rebate=None,
        total=execution_cost + l1_fee,
        gas_used=gas_used,
        effective_gas_price=gas_price,
    )


def calculate_object_fee(fees: RawFeeFields) -> FeeBreakdown:
    """computation + storage - rebate. Signed: a rebate larger than the cost gives a negative total."""
    computation = parse_int_or_zero(fees.computation_cost)
    storage = parse_int_or_zero(fees.storage_cost)
    rebate = parse_int_or_zero(fees.storage_rebate)
    total = computation + storage - rebate
    if total < 0:
        logger.debug("Storage rebate %d exceeds cost %d, net fee %d", rebate, computation + storage, total)
    return FeeBreakdown(
        execution_cost=computation,
        data_or_storage_cost=storage,
        rebate=rebate,
        total=total,
    )


def resolve_fees(tx: RawTransaction) -> FeeBreakdown:
    if tx.ledger == LedgerFamily.OBJECT:
        return calculate_object_fee(tx.fees)
    return calculate_evm_fee(tx.fees)
