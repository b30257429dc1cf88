"""Abstract base for chain readers that hand raw transactions to the explainer."""

from abc import ABC, abstractmethod

from txexplain.domain.models.raw import RawTransaction


class ChainReader(ABC):
    """Strategy interface for fetching one transaction with its execution result."""

    chain: str

    @abstractmethod
    def get_transaction(self, tx_id: str) -> RawTransaction | None:
        """Return the raw transaction, or None when the ledger has no such transaction."""


def text_or_none(value: object) -> str | None:
    """Node JSON field as text; absent stays None."""
    if value is None:
        return None
    return str(value)
