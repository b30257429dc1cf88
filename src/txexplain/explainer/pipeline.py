"""TransactionExplainer — orchestrates decode -> classify -> fees -> render for one transaction."""

import logging

from txexplain.domain.models.raw import RawTransaction
from txexplain.domain.models.result import ExplanationResult, TxNotFound
from txexplain.infra.blockchain.base import ChainReader
from txexplain.explainer.classifier import classify_actions
from txexplain.explainer.registry import LookupTables
from txexplain.explainer.renderer import render_all, render_fee_lines, render_headline
from txexplain.explainer.utils.decimals import parse_int_or_zero
from txexplain.explainer.utils.gas import resolve_fees
from txexplain.explainer.utils.transfers import extract_all_transfers

logger = logging.getLogger(__name__)


def explain_transaction(tx: RawTransaction, lookups: LookupTables) -> ExplanationResult:
    """Pure, single-pass explanation of one raw transaction. Never raises on malformed fields."""
    transfers = extract_all_transfers(tx)
    actions = classify_actions(tx, transfers)
    fee_breakdown = resolve_fees(tx)
    explanations = render_all(actions, lookups)
    native_value = max(parse_int_or_zero(tx.value), 0)

    result = ExplanationResult(
        id=tx.id,
        chain=tx.chain,
        status=tx.status,
        sender=tx.sender,
        target=tx.target,
        native_value=native_value,
        transfers=tuple(transfers),
        actions=tuple(actions),
        fee_breakdown=fee_breakdown,
        explanations=tuple(explanations),
        headline=render_headline(tx.sender, tx.target, native_value, lookups),
        fee_lines=tuple(render_fee_lines(fee_breakdown, lookups)),
    )
    logger.info(
        "Explained %s on %s: %d transfers, %d actions, total fee %d",
        tx.id, tx.chain, len(transfers), len(actions), fee_breakdown.total,
    )
    return result


class TransactionExplainer:
    """Raw transaction (or nothing) -> ExplanationResult | TxNotFound."""

    def __init__(self, lookups: LookupTables) -> None:
        self._lookups = lookups

    @property
    def lookups(self) -> LookupTables:
        return self._lookups

    def explain(
        self, tx: RawTransaction | None, tx_id: str = "", chain: str | None = None
    ) -> ExplanationResult | TxNotFound:
        if tx is None:
            logger.info("Transaction %s not found", tx_id)
            return TxNotFound(id=tx_id, chain=chain or self._lookups.chain)
        return explain_transaction(tx, self._lookups)

    def explain_from(self, reader: ChainReader, tx_id: str) -> ExplanationResult | TxNotFound:
        """Fetch through a chain reader, then explain. A missing transaction is a TxNotFound."""
        return self.explain(reader.get_transaction(tx_id), tx_id=tx_id, chain=reader.chain)
