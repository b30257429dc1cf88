import pytest
from pydantic import TypeAdapter, ValidationError

from txexplain.domain.enums import ActionType, LedgerFamily, TxStatus
from txexplain.domain.models.action import Action
from txexplain.domain.models.fee import FeeBreakdown
from txexplain.domain.models.raw import RawEvent, RawTransaction
from txexplain.domain.models.result import TxNotFound
from txexplain.domain.models.transfer import (
    BatchNonFungibleTransfer,
    FungibleTokenTransfer,
    NativeTransfer,
    NonFungibleTransfer,
    Transfer,
)

_TRANSFER = TypeAdapter(Transfer)


class TestTransferUnion:
    def test_discriminates_on_kind(self):
        transfer = _TRANSFER.validate_python({"kind": "NonFungible", "token_id": "7", "to_address": "0xb"})
        assert isinstance(transfer, NonFungibleTransfer)
        assert transfer.amount == 1

    def test_fungible_requires_amount(self):
        with pytest.raises(ValidationError):
            _TRANSFER.validate_python({"kind": "FungibleToken", "asset_id": "0xa"})

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError):
            NativeTransfer(amount=-1)

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            _TRANSFER.validate_python({"kind": "Wrapped", "amount": 1})

    def test_batch_has_placeholder_token_id(self):
        transfer = BatchNonFungibleTransfer(from_address="0xa", to_address="0xb", asset_id="0xc")
        assert transfer.token_id == "batch"
        assert transfer.kind == "BatchNonFungible"

    def test_defaults(self):
        transfer = FungibleTokenTransfer(amount=5)
        assert transfer.from_address is None
        assert transfer.to_address is None
        assert transfer.asset_id == ""


class TestFrozenModels:
    def test_transfer_is_frozen(self):
        transfer = NativeTransfer(amount=1)
        with pytest.raises(ValidationError):
            transfer.amount = 2

    def test_action_is_frozen(self):
        action = Action(type=ActionType.CALL_INTERACTION, to_address="0xb")
        with pytest.raises(ValidationError):
            action.to_address = "0xc"

    def test_fee_breakdown_defaults(self):
        fee = FeeBreakdown()
        assert fee.total == 0
        assert fee.data_or_storage_cost is None
        assert fee.rebate is None


class TestRawTransaction:
    def test_defaults(self):
        tx = RawTransaction(id="0x1")
        assert tx.chain == "arbitrum"
        assert tx.status == TxStatus.UNKNOWN
        assert tx.events == ()
        assert tx.ledger == LedgerFamily.EVM

    def test_object_ledger(self):
        assert RawTransaction(id="d", chain="sui").ledger == LedgerFamily.OBJECT

    def test_event_defaults(self):
        event = RawEvent(emitter_address="0xa")
        assert event.topics == ()
        assert event.payload == "0x"


class TestTxNotFound:
    def test_default_reason(self):
        result = TxNotFound(id="0xabc", chain="arbitrum")
        assert "wrong chain" in result.reason
