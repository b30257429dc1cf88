"""Convert eth_getTransactionByHash + eth_getTransactionReceipt results into a RawTransaction."""

import logging

from txexplain.domain.enums import Chain, TxStatus
from txexplain.domain.models.raw import RawEvent, RawFeeFields, RawTransaction
from txexplain.infra.blockchain.base import text_or_none

logger = logging.getLogger(__name__)


def receipt_status(receipt: dict | None) -> TxStatus:
    status = (receipt or {}).get("status")
    if status is None:
        return TxStatus.UNKNOWN
    text = str(status).lower()
    if text in ("0x1", "1"):
        return TxStatus.SUCCESS
    if text in ("0x0", "0"):
        return TxStatus.FAILED
    return TxStatus.UNKNOWN


def _log_to_event(log: dict) -> RawEvent | None:
    if not isinstance(log, dict):
        return None
    topics = log.get("topics") or []
    if not isinstance(topics, list):
        return None
    return RawEvent(
        emitter_address=str(log.get("address") or ""),
        topics=tuple(str(t) for t in topics),
        payload=str(log.get("data") or "0x"),
    )


def evm_from_rpc(tx: dict | None, receipt: dict | None, chain: str = Chain.ARBITRUM.value) -> RawTransaction | None:
    """None when the node returned no transaction (not found on this network)."""
    if not tx:
        return None

    receipt = receipt or {}
    events = []
    for log in receipt.get("logs") or []:
        event = _log_to_event(log)
        if event is None:
            logger.warning("Skipping malformed log in %s", tx.get("hash"))
            continue
        events.append(event)

    fees = RawFeeFields(
        gas_used=text_or_none(receipt.get("gasUsed")),
        effective_gas_price=text_or_none(receipt.get("effectiveGasPrice")),
        max_fee_per_gas=text_or_none(tx.get("maxFeePerGas")),
        gas_price=text_or_none(tx.get("gasPrice")),
        l1_fee=text_or_none(receipt.get("l1Fee")),
        l1_gas_price=text_or_none(receipt.get("l1GasPrice")),
        l1_gas_used=text_or_none(receipt.get("l1GasUsed")),
    )

    return RawTransaction(
        id=str(tx.get("hash") or receipt.get("transactionHash") or ""),
        chain=chain,
        sender=text_or_none(tx.get("from")),
        target=text_or_none(tx.get("to")),
        call_data=text_or_none(tx.get("input")),
        value=text_or_none(tx.get("value")),
        fees=fees,
        status=receipt_status(receipt),
        events=tuple(events),
    )
