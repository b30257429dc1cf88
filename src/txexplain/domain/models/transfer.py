"""Normalized transfers. One model per kind, discriminated on ``kind``."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from txexplain.domain.enums import TransferKind


class _TransferBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    from_address: str | None = None  # None = unknown sender
    to_address: str | None = None  # None = creation-only / contract deployment
    asset_id: str = ""  # "" = native asset


class NativeTransfer(_TransferBase):
    kind: Literal["Native"] = TransferKind.NATIVE.value
    amount: int = Field(ge=0)


class FungibleTokenTransfer(_TransferBase):
    kind: Literal["FungibleToken"] = TransferKind.FUNGIBLE_TOKEN.value
    amount: int = Field(ge=0)


class NonFungibleTransfer(_TransferBase):
    kind: Literal["NonFungible"] = TransferKind.NON_FUNGIBLE.value
    token_id: str
    amount: int = Field(default=1, ge=0)  # quantity for multi-token standards


class BatchNonFungibleTransfer(_TransferBase):
    """Multi-token batch. Array payloads are not decoded, so there is no amount."""

    kind: Literal["BatchNonFungible"] = TransferKind.BATCH_NON_FUNGIBLE.value
    token_id: Literal["batch"] = "batch"


Transfer = Annotated[
    Union[NativeTransfer, FungibleTokenTransfer, NonFungibleTransfer, BatchNonFungibleTransfer],
    Field(discriminator="kind"),
]

