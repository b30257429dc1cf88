"""Extract normalized transfers from evm transaction data and receipt logs."""

import logging
import re

from txexplain.domain.enums import LedgerFamily
from txexplain.domain.models.raw import RawEvent, RawTransaction
from txexplain.domain.models.transfer import (
    BatchNonFungibleTransfer,
    FungibleTokenTransfer,
    NativeTransfer,
    NonFungibleTransfer,
    Transfer,
)
from txexplain.explainer.utils.decimals import parse_int_or_zero

logger = logging.getLogger(__name__)

# Event topic signatures (keccak256 of the event signature)
# Transfer(address,address,uint256) is shared by ERC20 and ERC721; topic count tells them apart.
TRANSFER_TOPIC = "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"
TRANSFER_SINGLE_TOPIC = "0xc3d58168c5ae7397731d063d5bbf3d657854427343f4c083240f7aacaa2d0f62"
TRANSFER_BATCH_TOPIC = "0x4a39dc06d4c0dbc64b70af90fd698a233a518aa5d07e595d983b8c0526c8f7fb"

ADDRESS_MARKER = "0x"
WORD_HEX_CHARS = 64
_HEX_WORD_RE = re.compile(r"[0-9a-fA-F]{64}")


def topic_to_address(topic: str) -> str:
    """A 32-byte topic holds the address right-aligned: keep the last 40 hex chars."""
    body = topic[2:] if topic[:2].lower() == "0x" else topic
    return f"{ADDRESS_MARKER}{body[-40:].lower()}"


def normalize_address(address: str | None) -> str | None:
    """Lowercase an address; None stays None."""
    return address.lower() if address else None


def _payload_words(payload: str) -> list[str]:
    body = payload[2:] if payload[:2].lower() == "0x" else payload
    return [body[i:i + WORD_HEX_CHARS] for i in range(0, len(body) - WORD_HEX_CHARS + 1, WORD_HEX_CHARS)]


def decode_event(event: RawEvent) -> Transfer | None:
    """Decode one log into a transfer, or None when it matches no known shape."""
    if not event.topics:
        return None
    signature = event.topics[0].lower()
    topic_count = len(event.topics)
    contract = event.emitter_address.lower()

    if signature == TRANSFER_TOPIC and topic_count == 3:
        # ERC20: Transfer, from, to; value in data
        return FungibleTokenTransfer(
            from_address=topic_to_address(event.topics[1]),
            to_address=topic_to_address(event.topics[2]),
            asset_id=contract,
            amount=max(parse_int_or_zero(event.payload or "0x0"), 0),
        )

    if signature == TRANSFER_TOPIC and topic_count == 4:
        # ERC721: Transfer, from, to, tokenId
        return NonFungibleTransfer(
            from_address=topic_to_address(event.topics[1]),
            to_address=topic_to_address(event.topics[2]),
            asset_id=contract,
            token_id=str(parse_int_or_zero(event.topics[3])),
            amount=1,
        )

    if signature == TRANSFER_SINGLE_TOPIC and topic_count == 4:
        # ERC1155 TransferSingle: operator, from, to indexed; (id, value) in data
        words = _payload_words(event.payload)
        if len(words) < 2:
            logger.debug("TransferSingle from %s has a short payload, skipping", contract)
            return None
        if not all(_HEX_WORD_RE.fullmatch(word) for word in words[:2]):
            logger.debug("TransferSingle from %s has a non-hex payload, skipping", contract)
            return None
        return NonFungibleTransfer(
            from_address=topic_to_address(event.topics[2]),
            to_address=topic_to_address(event.topics[3]),
            asset_id=contract,
            token_id=str(int(words[0], 16)),
            amount=int(words[1], 16),
        )

    if signature == TRANSFER_BATCH_TOPIC and topic_count == 4:
        # ERC1155 TransferBatch: arrays are not decoded, one placeholder transfer
        return BatchNonFungibleTransfer(
            from_address=topic_to_address(event.topics[2]),
            to_address=topic_to_address(event.topics[3]),
            asset_id=contract,
        )

    return None


def extract_log_transfers(events: tuple[RawEvent, ...] | list[RawEvent]) -> list[Transfer]:
    """Token transfers from receipt logs, in log order. Unknown events are skipped."""
    transfers: list[Transfer] = []
    for event in events:
        transfer = decode_event(event)
        if transfer is None:
            logger.debug("Ignoring log from %s with %d topics", event.emitter_address, len(event.topics))
            continue
        transfers.append(transfer)
    return transfers


def extract_native_transfer(tx: RawTransaction) -> NativeTransfer | None:
    """Native value moved by the transaction itself (tx value field)."""
    value = parse_int_or_zero(tx.value)
    if value <= 0:
        return None
    return NativeTransfer(
        from_address=normalize_address(tx.sender),
        to_address=normalize_address(tx.target),
        asset_id="",
        amount=value,
    )


def extract_all_transfers(tx: RawTransaction) -> list[Transfer]:
    """Native + token transfers for either ledger family."""
    if tx.ledger == LedgerFamily.OBJECT:
        from txexplain.explainer.utils.object_transfers import extract_object_transfers
        return extract_object_transfers(tx)

    transfers: list[Transfer] = []
    native = extract_native_transfer(tx)
    if native is not None:
        transfers.append(native)
    transfers.extend(extract_log_transfers(tx.events))
    return transfers
