"""Raw, ledger-agnostic input records handed over by the chain reader."""

from typing import Any

from pydantic import BaseModel, ConfigDict

from txexplain.domain.enums import Chain, LedgerFamily, ObjectChangeKind, TxStatus, ledger_family


class RawEvent(BaseModel):
    """One evm log entry: topics[0] is the event signature, payload is hex data."""

    model_config = ConfigDict(frozen=True)

    emitter_address: str
    topics: tuple[str, ...] = ()
    payload: str = "0x"


class RawObjectEvent(BaseModel):
    """One emitted object-model event with its parsed JSON payload."""

    model_config = ConfigDict(frozen=True)

    event_type: str = ""
    sender: str | None = None
    payload: dict[str, Any] = {}


class RawObjectChange(BaseModel):
    """One object change record (created / transferred / mutated)."""

    model_config = ConfigDict(frozen=True)

    kind: ObjectChangeKind
    sender: str | None = None
    owner: str | None = None
    recipient: str | None = None
    object_type: str = ""
    object_id: str = ""


class RawFeeFields(BaseModel):
    """Fee inputs exactly as reported upstream (decimal or 0x-hex text). Any may be missing."""

    model_config = ConfigDict(frozen=True)

    # evm
    gas_used: str | None = None
    effective_gas_price: str | None = None
    max_fee_per_gas: str | None = None
    gas_price: str | None = None
    l1_fee: str | None = None
    l1_gas_price: str | None = None
    l1_gas_used: str | None = None
    # object model
    computation_cost: str | None = None
    storage_cost: str | None = None
    storage_rebate: str | None = None


class RawTransaction(BaseModel):
    """Envelope for one transaction plus its execution result."""

    model_config = ConfigDict(frozen=True)

    id: str
    chain: str = Chain.ARBITRUM.value
    sender: str | None = None
    target: str | None = None
    call_data: str | None = None
    value: str | None = None  # native value sent, minor units
    fees: RawFeeFields = RawFeeFields()
    status: TxStatus = TxStatus.UNKNOWN
    events: tuple[RawEvent, ...] = ()
    object_events: tuple[RawObjectEvent, ...] = ()
    object_changes: tuple[RawObjectChange, ...] = ()

    @property
    def ledger(self) -> LedgerFamily:
        return ledger_family(self.chain)
