from enum import Enum


class TransferKind(str, Enum):
    """Kind tag of a normalized Transfer."""

    NATIVE = "Native"
    FUNGIBLE_TOKEN = "FungibleToken"
    NON_FUNGIBLE = "NonFungible"
    BATCH_NON_FUNGIBLE = "BatchNonFungible"


class ObjectChangeKind(str, Enum):
    """Object-model change records the decoder looks at."""

    CREATED = "created"
    TRANSFERRED = "transferred"
    MUTATED = "mutated"
