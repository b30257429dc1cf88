"""Pipeline outputs."""

from pydantic import BaseModel, ConfigDict

from txexplain.domain.enums import TxStatus
from txexplain.domain.models.action import Action
from txexplain.domain.models.fee import FeeBreakdown
from txexplain.domain.models.transfer import Transfer


class ExplanationResult(BaseModel):
    """Immutable result of explaining one transaction. explanations[i] describes actions[i]."""

    model_config = ConfigDict(frozen=True)

    id: str
    chain: str
    status: TxStatus
    sender: str | None = None
    target: str | None = None
    native_value: int = 0
    transfers: tuple[Transfer, ...] = ()
    actions: tuple[Action, ...] = ()
    fee_breakdown: FeeBreakdown = FeeBreakdown()
    explanations: tuple[str, ...] = ()
    headline: str = ""
    fee_lines: tuple[str, ...] = ()


class TxNotFound(BaseModel):
    """The transaction is absent upstream. Distinct from a decode failure, which cannot happen."""

    model_config = ConfigDict(frozen=True)

    id: str
    chain: str
    reason: str = (
        "The transaction may not exist on this network or the reader is pointing to the wrong chain."
    )
