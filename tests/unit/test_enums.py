from txexplain.domain.enums import (
    ActionType,
    Chain,
    LedgerFamily,
    ObjectChangeKind,
    TransferKind,
    TxStatus,
    ledger_family,
)


class TestEnumsAreStringMixin:
    """All enums use (str, Enum) so they serialize to strings in JSON."""

    def test_chain_is_str(self):
        assert isinstance(Chain.ARBITRUM, str)
        assert Chain.ARBITRUM == "arbitrum"

    def test_action_type_is_str(self):
        assert ActionType.FUNGIBLE_TRANSFER == "FungibleTransfer"

    def test_transfer_kind_is_str(self):
        assert TransferKind.BATCH_NON_FUNGIBLE == "BatchNonFungible"

    def test_tx_status_is_str(self):
        assert isinstance(TxStatus.SUCCESS, str)
        assert TxStatus.FAILED == "failed"

    def test_object_change_kind_is_str(self):
        assert ObjectChangeKind.TRANSFERRED == "transferred"


class TestLedgerFamily:
    def test_sui_is_object_model(self):
        assert ledger_family("sui") == LedgerFamily.OBJECT

    def test_evm_chains(self):
        for chain in (Chain.ETHEREUM, Chain.ARBITRUM, Chain.OPTIMISM, Chain.POLYGON, Chain.BASE):
            assert ledger_family(chain.value) == LedgerFamily.EVM

    def test_unknown_chain_defaults_to_evm(self):
        assert ledger_family("fantom") == LedgerFamily.EVM

    def test_action_types_complete(self):
        assert len(ActionType) == 5
