"""Rules-based explanation sentences for actions, fees and the transaction as a whole."""

from txexplain.domain.enums import ActionType, LedgerFamily, ledger_family
from txexplain.domain.models.action import Action
from txexplain.domain.models.fee import FeeBreakdown
from txexplain.explainer.registry import LookupTables
from txexplain.explainer.utils.decimals import (
    format_large_number,
    format_native_amount,
    shorten_address,
    to_decimal_string,
)

UNRECOGNIZED_ACTION = "Unrecognized action"


def display_name(address: str | None, lookups: LookupTables) -> str:
    """Resolved name if the name service knows the address, else the shortened address."""
    if not address:
        return "unknown"
    return lookups.resolve_name(address) or shorten_address(address)


def format_token_amount(asset_id: str | None, raw_amount: str | None, lookups: LookupTables) -> tuple[str, str]:
    """(amount, symbol) for a fungible asset; unparseable amounts pass through."""
    info = lookups.asset_info(asset_id)
    if not raw_amount:
        return "0", info.symbol
    return to_decimal_string(raw_amount, info.decimals), info.symbol


def _render_fungible(action: Action, lookups: LookupTables) -> str:
    amount, symbol = format_token_amount(action.asset_id, action.amount, lookups)
    from_name = display_name(action.from_address, lookups)
    to_name = display_name(action.to_address, lookups)
    return f"{from_name} sent {amount} {symbol} to {to_name}"


def _render_non_fungible(action: Action, lookups: LookupTables) -> str:
    from_name = display_name(action.from_address, lookups)
    to_name = display_name(action.to_address, lookups)
    token_id = action.token_id or "unknown"
    quantity = f" (x{action.amount})" if action.amount and action.amount != "1" else ""
    return f"NFT #{token_id}{quantity} transferred from {from_name} to {to_name}"


def _render_batch(action: Action, lookups: LookupTables) -> str:
    from_name = display_name(action.from_address, lookups)
    to_name = display_name(action.to_address, lookups)
    return f"Multiple NFTs transferred from {from_name} to {to_name}"


def _render_creation(action: Action, lookups: LookupTables) -> str:
    count = action.amount or "0"
    noun = "object" if count == "1" else "objects"
    return f"{display_name(action.from_address, lookups)} created {count} {noun}"


def _render_call(action: Action, lookups: LookupTables) -> str:
    known = lookups.contract_name(action.to_address)
    if known is None:
        known = display_name(action.to_address, lookups)
    return f"User interacted with {known}"


_RENDERERS = {
    ActionType.FUNGIBLE_TRANSFER: _render_fungible,
    ActionType.NON_FUNGIBLE_TRANSFER: _render_non_fungible,
    ActionType.BATCH_NON_FUNGIBLE_TRANSFER: _render_batch,
    ActionType.CREATION_SUMMARY: _render_creation,
    ActionType.CALL_INTERACTION: _render_call,
}


def render(action: Action, lookups: LookupTables) -> str:
    """One sentence per action. Unknown action types render a fixed fallback."""
    renderer = _RENDERERS.get(action.type)
    if renderer is None:
        return UNRECOGNIZED_ACTION
    return renderer(action, lookups)


def render_all(actions: list[Action] | tuple[Action, ...], lookups: LookupTables) -> list[str]:
    return [render(action, lookups) for action in actions]


def format_native(raw: int | str | None, lookups: LookupTables) -> str:
    return format_native_amount(raw, lookups.native.symbol, lookups.native.decimals, lookups.minor_unit)


def render_headline(
    sender: str | None,
    target: str | None,
    native_value: int,
    lookups: LookupTables,
) -> str:
    """Transaction summary: "<from> sent 1.5 ETH to <to>." or "<from> interacted with <to>."."""
    from_name = display_name(sender, lookups)
    to_name = lookups.contract_name(target) or display_name(target, lookups)
    if native_value > 0:
        return f"{from_name} sent {format_native(native_value, lookups)} to {to_name}."
    return f"{from_name} interacted with {to_name}."


def render_fee_lines(fee: FeeBreakdown, lookups: LookupTables) -> list[str]:
    """Human-readable fee breakdown, labelled per ledger family."""
    lines = [f"Total cost: {format_native(fee.total, lookups)}"]
    if ledger_family(lookups.chain) == LedgerFamily.OBJECT:
        lines.append(f"Computation cost: {format_native(fee.execution_cost, lookups)}")
        lines.append(f"Storage cost: {format_native(fee.data_or_storage_cost or 0, lookups)}")
        lines.append(f"Storage rebate: {format_native(fee.rebate or 0, lookups)}")
        return lines

    lines.append(f"Execution fee: {format_native(fee.execution_cost, lookups)}")
    if fee.data_or_storage_cost:
        lines.append(f"L1 data fee: {format_native(fee.data_or_storage_cost, lookups)}")
    if fee.gas_used is not None:
        lines.append(f"Gas used: {format_large_number(fee.gas_used)}")
    if fee.effective_gas_price is not None:
        lines.append(f"Gas price: {format_large_number(fee.effective_gas_price)} {lookups.minor_unit}")
    return lines
