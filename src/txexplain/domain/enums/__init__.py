from txexplain.domain.enums.action_type import ActionType
from txexplain.domain.enums.chain import Chain, LedgerFamily, ledger_family
from txexplain.domain.enums.status import TxStatus
from txexplain.domain.enums.transfer_kind import ObjectChangeKind, TransferKind

__all__ = [
    "ActionType",
    "Chain",
    "LedgerFamily",
    "ObjectChangeKind",
    "TransferKind",
    "TxStatus",
    "ledger_family",
]
