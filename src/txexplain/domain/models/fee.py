from pydantic import BaseModel, ConfigDict


class FeeBreakdown(BaseModel):
    """Total cost of a transaction in native minor units (wei, MIST)."""

    model_config = ConfigDict(frozen=True)

    execution_cost: int = 0
    data_or_storage_cost: int | None = None  # L1 data fee (evm) or storage cost (object model)
    rebate: int | None = None  # storage rebate, may exceed cost
    total: int = 0
    gas_used: int | None = None
    effective_gas_price: int | None = None
