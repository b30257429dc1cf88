from enum import Enum


class ActionType(str, Enum):
    """Closed set of semantic actions produced by the classifier."""

    FUNGIBLE_TRANSFER = "FungibleTransfer"
    NON_FUNGIBLE_TRANSFER = "NonFungibleTransfer"
    BATCH_NON_FUNGIBLE_TRANSFER = "BatchNonFungibleTransfer"
    CREATION_SUMMARY = "CreationSummary"
    CALL_INTERACTION = "CallInteraction"
