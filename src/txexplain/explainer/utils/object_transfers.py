"""Extract transfers from object-model (Sui) events and object changes."""

import logging
from typing import Any

from txexplain.domain.enums import ObjectChangeKind
from txexplain.domain.models.raw import RawObjectChange, RawObjectEvent, RawTransaction
from txexplain.domain.models.transfer import FungibleTokenTransfer, NativeTransfer, NonFungibleTransfer, Transfer
from txexplain.explainer.utils.decimals import parse_int_or_zero

logger = logging.getLogger(__name__)

SUI_COIN_TYPE = "0x2::sui::SUI"
# System packages (0x1, 0x2, 0x3, 0xdee9) are written in short form
SHORT_ADDRESS_MAX_HEX = 4

# Payload keys accepted for each transfer field, in priority order
AMOUNT_KEYS = ("amount", "value")
RECIPIENT_KEYS = ("recipient", "to")
SENDER_KEYS = ("sender", "from")
ASSET_KEYS = ("coin_type", "asset_type", "type")


def normalize_object_address(address: str) -> str:
    """0x000...0002 -> 0x2 for system packages; other addresses are only lowercased."""
    body = address[2:] if address[:2].lower() == "0x" else address
    body = body.lower()
    stripped = body.lstrip("0") or "0"
    if len(stripped) <= SHORT_ADDRESS_MAX_HEX:
        return f"0x{stripped}"
    return f"0x{body}"


def normalize_type(type_tag: str) -> str:
    """Normalize the package address of a type tag: 0x000...02::sui::SUI -> 0x2::sui::SUI."""
    package, sep, rest = type_tag.partition("::")
    if not sep:
        return type_tag
    return f"{normalize_object_address(package)}::{rest}"


def is_native_coin(coin_type: str | None) -> bool:
    return not coin_type or normalize_type(coin_type) == SUI_COIN_TYPE


def is_coin_object(object_type: str) -> bool:
    return normalize_type(object_type).startswith("0x2::coin::Coin<")


def _first(payload: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        value = payload.get(key)
        if value is not None and value != "":
            return value
    return None


def _is_transfer_shaped(payload: dict[str, Any]) -> bool:
    return _first(payload, AMOUNT_KEYS) is not None and _first(payload, RECIPIENT_KEYS) is not None


def decode_object_event(event: RawObjectEvent) -> Transfer | None:
    """Turn a transfer-shaped event payload into a transfer. Missing fields fall back to ledger defaults."""
    payload = event.payload
    if not isinstance(payload, dict) or not _is_transfer_shaped(payload):
        return None

    sender = _first(payload, SENDER_KEYS) or event.sender
    recipient = _first(payload, RECIPIENT_KEYS)
    amount = max(parse_int_or_zero(_first(payload, AMOUNT_KEYS)), 0)
    coin_type = _first(payload, ASSET_KEYS)
    if not isinstance(coin_type, str):
        coin_type = None

    from_address = str(sender).lower() if sender else None
    to_address = str(recipient).lower()

    if is_native_coin(coin_type):
        return NativeTransfer(from_address=from_address, to_address=to_address, asset_id="", amount=amount)
    return FungibleTokenTransfer(
        from_address=from_address,
        to_address=to_address,
        asset_id=normalize_type(coin_type),
        amount=amount,
    )


def decode_object_change(change: RawObjectChange) -> Transfer | None:
    """A non-coin object handed to a new owner is a non-fungible transfer."""
    if change.kind != ObjectChangeKind.TRANSFERRED:
        return None
    if not change.object_id or is_coin_object(change.object_type):
        return None
    recipient = change.recipient or change.owner
    return NonFungibleTransfer(
        from_address=change.sender.lower() if change.sender else None,
        to_address=recipient.lower() if recipient else None,
        asset_id=normalize_type(change.object_type),
        token_id=change.object_id.lower(),
        amount=1,
    )


def count_created_objects(tx: RawTransaction) -> int:
    return sum(1 for change in tx.object_changes if change.kind == ObjectChangeKind.CREATED)


def extract_object_transfers(tx: RawTransaction) -> list[Transfer]:
    """Event-derived coin transfers first, then transferred objects."""
    transfers: list[Transfer] = []
    for event in tx.object_events:
        transfer = decode_object_event(event)
        if transfer is None:
            logger.debug("Ignoring event %s", event.event_type)
            continue
        transfers.append(transfer)

    for change in tx.object_changes:
        transfer = decode_object_change(change)
        if transfer is not None:
            transfers.append(transfer)
    return transfers
