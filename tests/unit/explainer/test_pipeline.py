"""End-to-end tests for TransactionExplainer over raw transactions."""

import pytest
from pydantic import ValidationError

from txexplain.domain.enums import ActionType, ObjectChangeKind, TxStatus
from txexplain.domain.models.raw import (
    RawEvent,
    RawFeeFields,
    RawObjectChange,
    RawObjectEvent,
    RawTransaction,
)
from txexplain.domain.models.result import ExplanationResult, TxNotFound
from txexplain.explainer.pipeline import TransactionExplainer, explain_transaction
from txexplain.explainer.utils.transfers import TRANSFER_SINGLE_TOPIC, TRANSFER_TOPIC
from txexplain.infra.blockchain.base import ChainReader

WALLET = "0x1111111111111111111111111111111111111111"
OTHER = "0x2222222222222222222222222222222222222222"
USDC = "0xff970a61a04b1ca14834a43f5de4533ebddb5cc8"


def _topic(address: str) -> str:
    return "0x" + "0" * 24 + address[2:]


def _usdc_transfer_tx(amount: int = 1_500_000) -> RawTransaction:
    return RawTransaction(
        id="0x" + "ab" * 32,
        chain="arbitrum",
        sender=WALLET,
        target=USDC,
        call_data="0xa9059cbb" + "00" * 64,
        value="0x0",
        fees=RawFeeFields(gas_used="21000", effective_gas_price="1000000000"),
        status=TxStatus.SUCCESS,
        events=(
            RawEvent(
                emitter_address=USDC,
                topics=(TRANSFER_TOPIC, _topic(WALLET), _topic(OTHER)),
                payload="0x" + f"{amount:064x}",
            ),
        ),
    )


class _FakeReader(ChainReader):
    chain = "arbitrum"

    def __init__(self, txs: dict[str, RawTransaction]) -> None:
        self._txs = txs

    def get_transaction(self, tx_id: str) -> RawTransaction | None:
        return self._txs.get(tx_id)


class TestExplainEvm:
    def test_token_transfer_sentence(self, evm_lookups):
        result = explain_transaction(_usdc_transfer_tx(), evm_lookups)
        assert "1.5" in result.explanations[0]
        assert "USDC" in result.explanations[0]
        assert result.explanations[0] == "0x1111...1111 sent 1.5 USDC to 0x2222...2222"

    def test_actions_and_explanations_aligned(self, evm_lookups):
        result = explain_transaction(_usdc_transfer_tx(), evm_lookups)
        assert [a.type for a in result.actions] == [ActionType.FUNGIBLE_TRANSFER, ActionType.CALL_INTERACTION]
        assert len(result.explanations) == len(result.actions)
        assert result.explanations[1] == "User interacted with 0xff97...5cc8"

    def test_fee_breakdown(self, evm_lookups):
        result = explain_transaction(_usdc_transfer_tx(), evm_lookups)
        assert result.fee_breakdown.execution_cost == 21_000_000_000_000
        assert result.fee_breakdown.total == 21_000_000_000_000
        assert result.fee_lines[0] == "Total cost: 0.000021 ETH"

    def test_summary_fields(self, evm_lookups):
        result = explain_transaction(_usdc_transfer_tx(), evm_lookups)
        assert result.status == TxStatus.SUCCESS
        assert result.sender == WALLET
        assert result.native_value == 0
        assert result.headline == "0x1111...1111 interacted with 0xff97...5cc8."

    def test_plain_value_transfer(self, evm_lookups):
        tx = RawTransaction(id="0x1", sender=WALLET, target=OTHER, value=str(10**18), call_data="0x")
        result = explain_transaction(tx, evm_lookups)
        assert [a.type for a in result.actions] == [ActionType.FUNGIBLE_TRANSFER]
        assert result.explanations == ("0x1111...1111 sent 1 ETH to 0x2222...2222",)
        assert result.headline == "0x1111...1111 sent 1 ETH to 0x2222...2222."

    def test_malformed_input_never_raises(self, evm_lookups):
        tx = RawTransaction(
            id="0xbad",
            value="much",
            fees=RawFeeFields(gas_used="??", gas_price="-"),
            events=(
                RawEvent(emitter_address="0x1"),
                RawEvent(emitter_address="0x1", topics=(TRANSFER_TOPIC,), payload="zz"),
            ),
        )
        result = explain_transaction(tx, evm_lookups)
        assert result.transfers == ()
        assert result.actions == ()
        assert result.fee_breakdown.total == 0
        assert result.status == TxStatus.UNKNOWN

    def test_bad_transfer_single_keeps_other_transfers(self, evm_lookups):
        good = _usdc_transfer_tx()
        bad_log = RawEvent(
            emitter_address=USDC,
            topics=(TRANSFER_SINGLE_TOPIC, _topic(WALLET), _topic(WALLET), _topic(OTHER)),
            payload="0x" + "zz" * 64,
        )
        tx = good.model_copy(update={"events": (bad_log, *good.events)})
        result = explain_transaction(tx, evm_lookups)
        assert [a.type for a in result.actions] == [ActionType.FUNGIBLE_TRANSFER, ActionType.CALL_INTERACTION]
        assert result.explanations[0] == "0x1111...1111 sent 1.5 USDC to 0x2222...2222"

    def test_result_is_immutable(self, evm_lookups):
        result = explain_transaction(_usdc_transfer_tx(), evm_lookups)
        with pytest.raises(ValidationError):
            result.id = "0xother"

    def test_json_dump_tags_transfer_kind(self, evm_lookups):
        dumped = explain_transaction(_usdc_transfer_tx(), evm_lookups).model_dump(mode="json")
        assert dumped["transfers"][0]["kind"] == "FungibleToken"
        assert dumped["transfers"][0]["amount"] == 1_500_000
        assert dumped["actions"][0]["type"] == "FungibleTransfer"


class TestExplainObjectModel:
    def test_transfer_creation_call(self, sui_lookups):
        sender = "0x" + "a" * 64
        tx = RawTransaction(
            id="9xDigest",
            chain="sui",
            sender=sender,
            target="0x2",
            call_data="0x2::pay::split",
            fees=RawFeeFields(computation_cost="100", storage_cost="50", storage_rebate="30"),
            status=TxStatus.SUCCESS,
            object_events=(
                RawObjectEvent(
                    event_type="0xabc::wallet::TransferEvent",
                    sender=sender,
                    payload={"recipient": "0x" + "b" * 64, "amount": "1500000000"},
                ),
            ),
            object_changes=(
                RawObjectChange(kind=ObjectChangeKind.CREATED, sender=sender, object_id="0x1"),
                RawObjectChange(kind=ObjectChangeKind.CREATED, sender=sender, object_id="0x2"),
                RawObjectChange(kind=ObjectChangeKind.MUTATED, sender=sender, object_id="0x3"),
            ),
        )
        result = explain_transaction(tx, sui_lookups)
        assert [a.type for a in result.actions] == [
            ActionType.FUNGIBLE_TRANSFER,
            ActionType.CREATION_SUMMARY,
            ActionType.CALL_INTERACTION,
        ]
        assert result.explanations == (
            "0xaaaa...aaaa sent 1.5 SUI to 0xbbbb...bbbb",
            "0xaaaa...aaaa created 2 objects",
            "User interacted with Sui Framework",
        )
        assert result.fee_breakdown.total == 120
        assert result.fee_breakdown.rebate == 30

    def test_negative_net_fee(self, sui_lookups):
        tx = RawTransaction(
            id="d",
            chain="sui",
            fees=RawFeeFields(computation_cost="10", storage_cost="0", storage_rebate="50"),
        )
        result = explain_transaction(tx, sui_lookups)
        assert result.fee_breakdown.total == -40
        assert result.fee_lines[0] == "Total cost: -0.00000004 SUI"


class TestTransactionExplainer:
    def test_missing_transaction_is_not_found(self, evm_lookups):
        result = TransactionExplainer(evm_lookups).explain(None, tx_id="0xabc")
        assert isinstance(result, TxNotFound)
        assert result.id == "0xabc"
        assert result.chain == "arbitrum"

    def test_present_transaction(self, evm_lookups):
        result = TransactionExplainer(evm_lookups).explain(_usdc_transfer_tx())
        assert isinstance(result, ExplanationResult)

    def test_explain_from_reader(self, evm_lookups):
        tx = _usdc_transfer_tx()
        reader = _FakeReader({tx.id: tx})
        explainer = TransactionExplainer(evm_lookups)
        assert isinstance(explainer.explain_from(reader, tx.id), ExplanationResult)
        missing = explainer.explain_from(reader, "0xdead")
        assert isinstance(missing, TxNotFound)
        assert missing.chain == "arbitrum"
