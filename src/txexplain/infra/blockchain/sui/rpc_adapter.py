"""Convert a sui_getTransactionBlock response (effects, events, objectChanges) into a RawTransaction."""

import logging
from typing import Any

from txexplain.domain.enums import Chain, ObjectChangeKind, TxStatus
from txexplain.domain.models.raw import RawFeeFields, RawObjectChange, RawObjectEvent, RawTransaction
from txexplain.infra.blockchain.base import text_or_none
from txexplain.explainer.utils.object_transfers import normalize_object_address

logger = logging.getLogger(__name__)

_CHANGE_KINDS = {kind.value: kind for kind in ObjectChangeKind}


def effects_status(effects: dict | None) -> TxStatus:
    status = (effects or {}).get("status")
    if isinstance(status, dict):
        status = status.get("status")
    if status == "success":
        return TxStatus.SUCCESS
    if status == "failure":
        return TxStatus.FAILED
    return TxStatus.UNKNOWN


def owner_address(owner: Any) -> str | None:
    """AddressOwner / ObjectOwner address; shared and immutable objects have none."""
    if isinstance(owner, dict):
        return owner.get("AddressOwner") or owner.get("ObjectOwner")
    return None


def first_move_call(block: dict) -> dict | None:
    """The first MoveCall command of a programmable transaction."""
    kind = ((block.get("transaction") or {}).get("data") or {}).get("transaction") or {}
    for command in kind.get("transactions") or []:
        if isinstance(command, dict) and isinstance(command.get("MoveCall"), dict):
            return command["MoveCall"]
    return None


def _to_change(change: dict) -> RawObjectChange | None:
    if not isinstance(change, dict):
        return None
    kind = _CHANGE_KINDS.get(change.get("type", ""))
    if kind is None:
        return None
    return RawObjectChange(
        kind=kind,
        sender=change.get("sender"),
        owner=owner_address(change.get("owner")),
        recipient=owner_address(change.get("recipient")),
        object_type=str(change.get("objectType") or ""),
        object_id=str(change.get("objectId") or ""),
    )


def _to_event(event: dict) -> RawObjectEvent | None:
    if not isinstance(event, dict):
        return None
    payload = event.get("parsedJson")
    return RawObjectEvent(
        event_type=str(event.get("type") or ""),
        sender=event.get("sender"),
        payload=payload if isinstance(payload, dict) else {},
    )


def sui_from_rpc(block: dict | None, chain: str = Chain.SUI.value) -> RawTransaction | None:
    """None when the node returned no transaction block."""
    if not block:
        return None

    effects = block.get("effects") or {}
    gas = effects.get("gasUsed") or {}
    sender = ((block.get("transaction") or {}).get("data") or {}).get("sender")

    target = None
    call_data = None
    move_call = first_move_call(block)
    if move_call is not None:
        package = str(move_call.get("package") or "")
        target = normalize_object_address(package) if package else None
        call_data = f"{package}::{move_call.get('module', '')}::{move_call.get('function', '')}"

    events = [e for e in (_to_event(e) for e in block.get("events") or []) if e is not None]
    changes = [c for c in (_to_change(c) for c in block.get("objectChanges") or []) if c is not None]
    logger.debug("Sui block %s: %d events, %d object changes", block.get("digest"), len(events), len(changes))

    return RawTransaction(
        id=str(block.get("digest") or ""),
        chain=chain,
        sender=sender,
        target=target,
        call_data=call_data,
        fees=RawFeeFields(
            computation_cost=text_or_none(gas.get("computationCost")),
            storage_cost=text_or_none(gas.get("storageCost")),
            storage_rebate=text_or_none(gas.get("storageRebate")),
        ),
        status=effects_status(effects),
        object_events=tuple(events),
        object_changes=tuple(changes),
    )
