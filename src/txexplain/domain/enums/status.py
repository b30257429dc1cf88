from enum import Enum


class TxStatus(str, Enum):
    """Execution outcome of a transaction."""

    SUCCESS = "success"
    FAILED = "failed"
    UNKNOWN = "unknown"
