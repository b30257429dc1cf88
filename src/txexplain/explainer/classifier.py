"""Action classification: decoded transfers plus tx metadata become ordered semantic actions."""

import logging

from txexplain.domain.enums import ActionType, LedgerFamily, TransferKind
from txexplain.domain.models.action import Action, Flow
from txexplain.domain.models.raw import RawTransaction
from txexplain.domain.models.transfer import Transfer
from txexplain.explainer.utils.object_transfers import count_created_objects
from txexplain.explainer.utils.transfers import normalize_address

logger = logging.getLogger(__name__)

BATCH_AMOUNT = "multiple"

TRANSFER_ACTION_TYPES = {
    ActionType.FUNGIBLE_TRANSFER,
    ActionType.NON_FUNGIBLE_TRANSFER,
    ActionType.BATCH_NON_FUNGIBLE_TRANSFER,
}


def has_call_data(call_data: str | None) -> bool:
    return bool(call_data) and call_data.lower() != "0x"


def transfer_to_action(transfer: Transfer) -> Action:
    """Map one transfer 1:1 to its action."""
    if transfer.kind in (TransferKind.NATIVE, TransferKind.FUNGIBLE_TOKEN):
        amount = str(transfer.amount)
        unit = "native" if transfer.kind == TransferKind.NATIVE else "tokens"
        return Action(
            type=ActionType.FUNGIBLE_TRANSFER,
            from_address=transfer.from_address,
            to_address=transfer.to_address,
            asset_id=transfer.asset_id,
            amount=amount,
            description=f"sent {amount} {unit}",
        )

    if transfer.kind == TransferKind.NON_FUNGIBLE:
        amount = str(transfer.amount)
        description = f"transferred NFT #{transfer.token_id}"
        if transfer.amount != 1:
            description += f" (x{amount})"
        return Action(
            type=ActionType.NON_FUNGIBLE_TRANSFER,
            from_address=transfer.from_address,
            to_address=transfer.to_address,
            asset_id=transfer.asset_id,
            token_id=transfer.token_id,
            amount=amount,
            description=description,
        )

    return Action(
        type=ActionType.BATCH_NON_FUNGIBLE_TRANSFER,
        from_address=transfer.from_address,
        to_address=transfer.to_address,
        asset_id=transfer.asset_id,
        token_id=transfer.token_id,
        amount=BATCH_AMOUNT,
        description="transferred multiple NFTs",
    )


def creation_summary(tx: RawTransaction) -> Action | None:
    """One summary action for all objects created by an object-model transaction."""
    if tx.ledger != LedgerFamily.OBJECT:
        return None
    count = count_created_objects(tx)
    if count == 0:
        return None
    noun = "object" if count == 1 else "objects"
    return Action(
        type=ActionType.CREATION_SUMMARY,
        from_address=normalize_address(tx.sender),
        amount=str(count),
        description=f"created {count} {noun}",
    )


def call_interaction(tx: RawTransaction) -> Action | None:
    """Contract call: target present and non-empty call data. Plain value transfers get none."""
    if tx.target is None or not has_call_data(tx.call_data):
        return None
    return Action(
        type=ActionType.CALL_INTERACTION,
        from_address=normalize_address(tx.sender),
        to_address=normalize_address(tx.target),
        description=f"contract interaction with {normalize_address(tx.target)}",
    )


def classify_actions(tx: RawTransaction, transfers: list[Transfer]) -> list[Action]:
    """Transfers in decode order, then the creation summary, then the call interaction.

    Renderers and consumers zip actions with explanations by index, so this
    order is part of the output contract.
    """
    actions = [transfer_to_action(t) for t in transfers]

    summary = creation_summary(tx)
    if summary is not None:
        actions.append(summary)

    call = call_interaction(tx)
    if call is not None:
        actions.append(call)

    logger.debug("Classified %d actions for %s", len(actions), tx.id)
    return actions


def aggregate_flows(actions: list[Action] | tuple[Action, ...]) -> list[Flow]:
    """Collapse transfer actions sharing (from, to, type) into display rows, first-seen order."""
    counts: dict[tuple, int] = {}
    for action in actions:
        if action.type not in TRANSFER_ACTION_TYPES:
            continue
        key = (action.from_address, action.to_address, action.type)
        counts[key] = counts.get(key, 0) + 1
    return [
        Flow(from_address=from_addr, to_address=to_addr, type=action_type, count=count)
        for (from_addr, to_addr, action_type), count in counts.items()
    ]
