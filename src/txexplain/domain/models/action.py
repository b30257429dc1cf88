"""Semantic actions and the derived flow view."""

from pydantic import BaseModel, ConfigDict

from txexplain.domain.enums import ActionType


class Action(BaseModel):
    """A user-facing classification of one transfer or interaction."""

    model_config = ConfigDict(frozen=True)

    type: ActionType
    from_address: str | None = None
    to_address: str | None = None
    asset_id: str | None = None
    token_id: str | None = None
    amount: str | None = None  # decimal minor units, "multiple" for batches, count for creations
    description: str = ""


class Flow(BaseModel):
    """Display row collapsing transfer actions that share (from, to, type)."""

    model_config = ConfigDict(frozen=True)

    from_address: str | None
    to_address: str | None
    type: ActionType
    count: int
